"""
Specification of the fixed-depth Merkle tree that accumulates certificate
leaf hashes, together with its inclusion proofs.
"""

from .constants import (
    EMPTY_LEAF_SEED,
    PROD_CONFIG,
    TARGET_CONFIG,
    TEST_CONFIG,
    MerkleConfig,
    empty_leaf_value,
)
from .containers import Proof, TreeNode
from .tree import (
    Tree,
    compute_node_hash,
    is_right_child,
    parent_index,
    sibling_index,
    verify_proof,
)

__all__ = [
    "Tree",
    "TreeNode",
    "Proof",
    "compute_node_hash",
    "verify_proof",
    "parent_index",
    "sibling_index",
    "is_right_child",
    "empty_leaf_value",
    "EMPTY_LEAF_SEED",
    "MerkleConfig",
    "PROD_CONFIG",
    "TEST_CONFIG",
    "TARGET_CONFIG",
]
