"""
The funnel reducer: layer-by-layer pairwise reduction from leaves to root.

A `FunnelTree` stores every layer it produced:

- `layers[0]` is the leaf layer, one fingerprint per input item.
- `layers[k + 1]` is derived from `layers[k]` by hashing consecutive pairs.
- `layers[-1]` holds exactly one fingerprint, the root.

A trailing unpaired node is hashed with itself, so every layer is reduced
by the same pairing rule and every item contributes to the root.
"""

from __future__ import annotations

import logging
from typing import Iterable

from pydantic import model_validator
from typing_extensions import Self

from merkle_funnel.types.base import StrictBaseModel
from merkle_funnel.types.byte_arrays import Fingerprint
from merkle_funnel.types.exceptions import EmptyInputError

from .contract import HashPrimitive, fingerprint_item, hash_pair, sha256

logger = logging.getLogger(__name__)

Layer = tuple[Fingerprint, ...]
"""One level of the reduction, ordered left to right."""


def expected_depth(num_items: int) -> int:
    """
    Number of layers produced for `num_items` leaves.

    Equal to `floor(log2(n - 1)) + 2` for `n > 1` and `1` for `n == 1`.

    Examples: 1->1, 2->2, 3->3, 4->3, 5->4, 8->4, 9->5.

    Raises:
        EmptyInputError: If `num_items` is not positive.
    """
    if num_items <= 0:
        raise EmptyInputError("expected_depth")
    if num_items == 1:
        return 1
    # floor(log2(m)) == m.bit_length() - 1 for m >= 1
    return (num_items - 1).bit_length() + 1


def reduce_layer(layer: Layer, hasher: HashPrimitive = sha256) -> Layer:
    """
    Produce the parent layer of `layer`.

    Nodes are chunked into consecutive pairs, left to right:
    - `(left, right)` becomes `H(left || right)`.
    - A trailing `(last,)` becomes `H(last || last)`.

    The result has `ceil(len(layer) / 2)` fingerprints.

    Raises:
        AssertionError: If `layer` is empty. Layers are never empty.
    """
    if not layer:
        raise AssertionError("cannot reduce an empty layer")

    parents: list[Fingerprint] = []
    for start in range(0, len(layer), 2):
        chunk = layer[start : start + 2]
        match chunk:
            case (left, right):
                parents.append(hash_pair(left, right, hasher))
            case (last,):
                parents.append(hash_pair(last, last, hasher))
            case _:
                # Chunking by two over a non-empty range cannot yield this.
                raise AssertionError(f"unreachable chunk of size {len(chunk)}")
    return tuple(parents)


class FunnelTree(StrictBaseModel):
    """
    An immutable Merkle tree stored as its full sequence of layers.

    Build one with `FunnelTree.from_items(...)` (or the module-level
    `construct(...)`). Instantiating the model directly validates the
    funnel shape but does not re-check any hashes.
    """

    layers: tuple[Layer, ...]
    """
    Every layer, leaf layer first and singleton root layer last.

    For every non-final layer, `len(layers[i + 1]) == ceil(len(layers[i]) / 2)`.
    """

    @model_validator(mode="after")
    def _check_funnel_shape(self) -> Self:
        """Reject layer sequences that no reduction could have produced."""
        if not self.layers:
            raise ValueError("tree must contain at least one layer")
        top = self.layers[-1]
        if len(top) != 1:
            raise ValueError(f"final layer must hold exactly one fingerprint, got {len(top)}")
        for level, (lower, upper) in enumerate(zip(self.layers, self.layers[1:])):
            if len(lower) < 2:
                raise ValueError(f"layer {level} has {len(lower)} fingerprints but is not final")
            if len(upper) != (len(lower) + 1) // 2:
                raise ValueError(
                    f"layer {level + 1} must hold {(len(lower) + 1) // 2} fingerprints, "
                    f"got {len(upper)}"
                )
        return self

    @classmethod
    def from_items(cls, items: Iterable[object], hasher: HashPrimitive = sha256) -> FunnelTree:
        """
        Build the tree for an ordered sequence of items.

        ### Construction Algorithm

        1.  **Leaves**: Map every item through `fingerprint_item`, preserving order.

        2.  **Reduction**: While the top layer has more than one fingerprint,
            reduce it with `reduce_layer` and append the result.

        3.  **Termination**: The singleton top layer is the root layer.

        Args:
            items: The ordered items. Each must satisfy the hashing contract.
            hasher: The hash primitive used for leaves and inner nodes.

        Returns:
            The complete tree.

        Raises:
            EmptyInputError: If `items` is empty. No hashing is performed.
        """
        materialized = list(items)
        if not materialized:
            raise EmptyInputError("construct")

        current: Layer = tuple(fingerprint_item(item, hasher) for item in materialized)
        layers: list[Layer] = [current]
        logger.debug("Built leaf layer with %d fingerprints", len(current))

        while len(current) > 1:
            current = reduce_layer(current, hasher)
            layers.append(current)
            logger.debug("Reduced to layer %d with %d fingerprints", len(layers) - 1, len(current))

        return cls(layers=tuple(layers))

    def root(self) -> Fingerprint:
        """Return the single fingerprint of the final layer."""
        return self.layers[-1][0]

    def depth(self) -> int:
        """Return the number of layers, leaf layer and root layer included."""
        return len(self.layers)

    def leaves(self) -> Layer:
        """Return the leaf layer."""
        return self.layers[0]


def construct(items: Iterable[object], hasher: HashPrimitive = sha256) -> FunnelTree:
    """Build the funnel tree of `items`. See `FunnelTree.from_items`."""
    return FunnelTree.from_items(items, hasher)


def root(tree: FunnelTree) -> Fingerprint:
    """Return the root fingerprint of `tree`."""
    return tree.root()


def depth(tree: FunnelTree) -> int:
    """Return the number of layers of `tree`."""
    return tree.depth()


def verify(
    items: Iterable[object],
    expected_root: bytes | str,
    hasher: HashPrimitive = sha256,
) -> bool:
    """
    Recompute the root of `items` and compare it with `expected_root`.

    Args:
        items: The ordered items to check.
        expected_root: A fingerprint, its raw bytes, or its hex rendering.
        hasher: The hash primitive the expected root was built with.

    Returns:
        True if the recomputed root matches.

    Raises:
        EmptyInputError: If `items` is empty.
        ValueError: If `expected_root` is not a well-formed fingerprint.
        TypeError: If `expected_root` is neither bytes nor a hex string.
    """
    expected = Fingerprint(expected_root)
    actual = construct(items, hasher).root()
    logger.debug("Verifying root %s against %s", actual.hex(), expected.hex())
    return actual == expected
