"""
Fixed-length byte types.

This module provides the `Fingerprint` type: the 32-byte output of the
hash primitive, used for every leaf, inner node and root of a funnel tree.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterable, SupportsIndex

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

DIGEST_LENGTH: int = 32
"""Number of bytes in a fingerprint (256-bit digest)."""


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` / `memoryview` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")

    Raises:
      ValueError if a hex string or integer element is malformed or out-of-range.
      TypeError for any other input, e.g. a bare integer.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        # bytes.fromhex handles empty string and validates hex characters
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        # bytes(bytearray(iterable)) enforces each element is an int in 0..255
        return bytes(bytearray(value))
    raise TypeError(f"cannot coerce {type(value).__name__} to bytes")


class Fingerprint(bytes):
    """
    An immutable digest of exactly `LENGTH` bytes.

    Produced by the hash primitive for every node of a funnel tree.
    Rendered as lowercase hex (64 characters for the default length).
    """

    LENGTH: ClassVar[int] = DIGEST_LENGTH
    """The exact number of bytes."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new fingerprint.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            ValueError: If the resulting byte length differs from `LENGTH`.
        """
        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(b)}")
        return super().__new__(cls, b)

    @classmethod
    def zero(cls) -> Self:
        """Create a fingerprint filled with zero bytes."""
        return cls(b"\x00" * cls.LENGTH)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. If the input is already a `Fingerprint`, accept it.
        2. Otherwise, validate raw bytes of exactly LENGTH and wrap them.
        3. For serialization (e.g., to JSON), convert to a hex string.
        """
        from_bytes_validator = core_schema.no_info_plain_validator_function(cls)

        python_schema = core_schema.chain_schema(
            [
                core_schema.bytes_schema(min_length=cls.LENGTH, max_length=cls.LENGTH),
                from_bytes_validator,
            ]
        )

        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                python_schema,
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: x.hex()),
        )

    def __repr__(self) -> str:
        """Return a string representation of the fingerprint."""
        return f"{type(self).__name__}({self.hex()})"

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the lowercase hexadecimal rendering of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)
