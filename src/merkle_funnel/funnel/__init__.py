"""Funnel reduction of ordered items into a Merkle root."""

from .contract import (
    HashPrimitive,
    SupportsFingerprint,
    fingerprint_item,
    hash_data,
    hash_pair,
    sha256,
)
from .tree import (
    FunnelTree,
    Layer,
    construct,
    depth,
    expected_depth,
    reduce_layer,
    root,
    verify,
)

__all__ = [
    "FunnelTree",
    "Layer",
    "construct",
    "root",
    "depth",
    "verify",
    "expected_depth",
    "reduce_layer",
    "HashPrimitive",
    "SupportsFingerprint",
    "fingerprint_item",
    "hash_data",
    "hash_pair",
    "sha256",
]
