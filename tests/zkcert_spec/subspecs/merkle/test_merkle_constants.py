"""Tests for Merkle presets and the empty leaf value."""

import pytest
from pydantic import ValidationError

from zkcert_spec.subspecs.merkle import (
    EMPTY_LEAF_SEED,
    PROD_CONFIG,
    TARGET_CONFIG,
    TEST_CONFIG,
    MerkleConfig,
    Tree,
    empty_leaf_value,
)

EMPTY_LEAF_VALUE = 3420416983139679712664175897349102656840811800827473567091572628239214089774
EMPTY_TEST_TREE_ROOT = 17619695615639375563172755451063681091123583187367666354590446695851847455206


def test_presets() -> None:
    """Production uses depth 32; the test session selects the test preset."""
    assert PROD_CONFIG.TREE_DEPTH == 32
    assert PROD_CONFIG.LEAVES_COUNT == 2**31
    assert TEST_CONFIG.LEAVES_COUNT == 2 ** (TEST_CONFIG.TREE_DEPTH - 1)
    assert TARGET_CONFIG is TEST_CONFIG


def test_config_rejects_zero_depth() -> None:
    """A preset must have at least one level."""
    with pytest.raises(ValidationError):
        MerkleConfig(TREE_DEPTH=0)


def test_config_is_frozen() -> None:
    """Presets cannot be modified."""
    with pytest.raises(ValidationError):
        TEST_CONFIG.TREE_DEPTH = 8  # type: ignore[misc]


def test_empty_leaf_value() -> None:
    """Unused leaves hold keccak256(b"Galactica") reduced into the field."""
    assert EMPTY_LEAF_SEED == b"Galactica"
    assert empty_leaf_value() == EMPTY_LEAF_VALUE


def test_empty_test_tree_root() -> None:
    """The root of an empty test-preset tree is a fixed value."""
    tree = Tree.new_empty(TEST_CONFIG.TREE_DEPTH)
    assert tree.root().value == EMPTY_TEST_TREE_ROOT


def test_empty_leaf_value_is_memoised() -> None:
    """Repeated calls return the same object."""
    assert empty_leaf_value() is empty_leaf_value()
