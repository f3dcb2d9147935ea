"""Deterministic Merkle roots for ordered collections of items."""

from .funnel import (
    FunnelTree,
    SupportsFingerprint,
    construct,
    depth,
    expected_depth,
    fingerprint_item,
    hash_data,
    hash_pair,
    root,
    sha256,
    verify,
)
from .types import EmptyInputError, Fingerprint, FunnelError

__all__ = [
    "FunnelTree",
    "construct",
    "root",
    "depth",
    "verify",
    "expected_depth",
    "Fingerprint",
    "SupportsFingerprint",
    "fingerprint_item",
    "hash_data",
    "hash_pair",
    "sha256",
    "FunnelError",
    "EmptyInputError",
]
