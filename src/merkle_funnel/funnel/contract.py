"""
The hashing contract: how items and node pairs become fingerprints.

This module exposes:
- `sha256`, the default hash primitive.
- `hash_data` and `hash_pair`, the two ways the funnel calls a primitive.
- A `fingerprint_item(item, hasher)` singledispatch function for leaves.
"""

from __future__ import annotations

import hashlib
from functools import singledispatch
from typing import Callable, Protocol, runtime_checkable

from merkle_funnel.types.byte_arrays import Fingerprint

HashPrimitive = Callable[[bytes], bytes]
"""An opaque, deterministic bytes-in / digest-out function."""


def sha256(data: bytes) -> bytes:
    """The default hash primitive: SHA-256 over `data`."""
    return hashlib.sha256(data).digest()


def hash_data(data: bytes, hasher: HashPrimitive = sha256) -> Fingerprint:
    """
    Hash raw bytes into a fingerprint.

    Raises:
        ValueError: If `hasher` does not return exactly `Fingerprint.LENGTH` bytes.
    """
    return Fingerprint(hasher(bytes(data)))


def hash_pair(left: bytes, right: bytes, hasher: HashPrimitive = sha256) -> Fingerprint:
    """
    Hash two nodes together into their parent.

    The parent is `H(left || right)`. The order is part of the contract:
    swapping the operands yields a different parent.
    """
    return hash_data(bytes(left) + bytes(right), hasher)


@runtime_checkable
class SupportsFingerprint(Protocol):
    """Capability of any item that derives its own leaf fingerprint."""

    def fingerprint(self, hasher: HashPrimitive) -> Fingerprint:
        """Return the fingerprint of this item's content."""
        ...


@singledispatch
def fingerprint_item(item: object, hasher: HashPrimitive = sha256) -> Fingerprint:
    """
    Compute the leaf fingerprint of `item`.

    Concrete specializations are registered below with `@fingerprint_item.register`.
    Objects that are not registered fall back to the `SupportsFingerprint` protocol.

    Raises:
        TypeError: If `item` neither has a registered specialization nor
            implements `SupportsFingerprint`.
    """
    if isinstance(item, SupportsFingerprint):
        return Fingerprint(item.fingerprint(hasher))
    raise TypeError(f"fingerprint_item: unsupported item type {type(item).__name__}")


@fingerprint_item.register
def _fp_bytes(item: bytes, hasher: HashPrimitive = sha256) -> Fingerprint:
    return hash_data(item, hasher)


@fingerprint_item.register
def _fp_bytearray(item: bytearray, hasher: HashPrimitive = sha256) -> Fingerprint:
    return hash_data(bytes(item), hasher)


@fingerprint_item.register
def _fp_memoryview(item: memoryview, hasher: HashPrimitive = sha256) -> Fingerprint:
    return hash_data(item.tobytes(), hasher)


@fingerprint_item.register
def _fp_str(item: str, hasher: HashPrimitive = sha256) -> Fingerprint:
    """Text is hashed as its UTF-8 encoding."""
    return hash_data(item.encode("utf-8"), hasher)
