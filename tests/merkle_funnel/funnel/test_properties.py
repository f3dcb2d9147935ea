"""Property-based tests for the funnel reducer."""

from __future__ import annotations

import hashlib

from hypothesis import assume, given
from hypothesis import strategies as st

from merkle_funnel.funnel.tree import construct, expected_depth

items_strategy = st.lists(st.binary(max_size=64), min_size=1, max_size=70)


@given(items_strategy)
def test_root_is_deterministic(items: list[bytes]) -> None:
    """Identical inputs always produce identical roots."""
    assert construct(items).root() == construct(list(items)).root()


@given(items_strategy)
def test_layer_lengths_halve_rounding_up(items: list[bytes]) -> None:
    """Each layer holds ceil(previous / 2) fingerprints and the last holds one."""
    tree = construct(items)
    assert len(tree.layers[0]) == len(items)
    assert len(tree.layers[-1]) == 1
    for lower, upper in zip(tree.layers, tree.layers[1:]):
        assert len(upper) == (len(lower) + 1) // 2


@given(items_strategy)
def test_depth_matches_closed_form(items: list[bytes]) -> None:
    """Layer count equals floor(log2(n - 1)) + 2, or 1 for one item."""
    assert construct(items).depth() == expected_depth(len(items))


@given(items_strategy)
def test_leaves_preserve_order(items: list[bytes]) -> None:
    """Leaf i is the digest of item i."""
    tree = construct(items)
    assert list(tree.leaves()) == [hashlib.sha256(item).digest() for item in items]


@given(st.lists(st.binary(max_size=32), min_size=1, max_size=70).filter(lambda xs: len(xs) % 2))
def test_odd_layer_duplicates_last_leaf(items: list[bytes]) -> None:
    """On odd input, the last parent is the last leaf hashed with itself."""
    assume(len(items) > 1)
    tree = construct(items)
    last_leaf = tree.layers[0][-1]
    assert len(tree.layers[1]) == (len(items) + 1) // 2
    assert tree.layers[1][-1] == hashlib.sha256(last_leaf + last_leaf).digest()


@given(st.binary(max_size=64))
def test_single_item_root_is_its_fingerprint(item: bytes) -> None:
    """A single item is the root and the tree has depth 1."""
    tree = construct([item])
    assert tree.root() == hashlib.sha256(item).digest()
    assert tree.depth() == 1


@given(st.binary(max_size=32), st.binary(max_size=32))
def test_order_sensitivity(a: bytes, b: bytes) -> None:
    """Swapping two distinct items changes the root."""
    assume(a != b)
    assert construct([a, b]).root() != construct([b, a]).root()


@given(items_strategy, st.integers(min_value=0), st.binary(min_size=1, max_size=8))
def test_tampering_changes_root(items: list[bytes], index: int, suffix: bytes) -> None:
    """Altering any single item changes the root."""
    index %= len(items)
    tampered = list(items)
    tampered[index] = tampered[index] + suffix
    assert construct(items).root() != construct(tampered).root()
