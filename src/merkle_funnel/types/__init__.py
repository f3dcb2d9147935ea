"""Reusable type definitions for the Merkle funnel."""

from .base import StrictBaseModel
from .byte_arrays import DIGEST_LENGTH, Fingerprint
from .exceptions import EmptyInputError, FunnelError

__all__ = [
    # Core types
    "Fingerprint",
    "DIGEST_LENGTH",
    "StrictBaseModel",
    # Exceptions
    "FunnelError",
    "EmptyInputError",
]
