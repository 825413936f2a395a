"""
Implements the fixed-depth Merkle tree backing the certificate registry.

### Layout

The tree is a complete binary tree stored in one flat list, root first:

    index:        0
               /     \\
              1       2
             / \\     / \\
            3   4   5   6      <- leaves of a depth-3 tree

- the children of node `i` are `2i + 1` and `2i + 2`,
- the parent of node `i` is `(i - 1) // 2`,
- the leaves are the last `2^(depth - 1)` entries.

Left children therefore sit at odd indices and right children at even ones.

### Invariant

Every internal node equals `Hash(left_child, right_child)`. Each mutation
restores it by recomputing the ancestors of the changed leaf.

### Concurrency

A `Tree` has no internal locking. `set_leaf` rewrites nodes in place, so a
tree shared between threads needs one writer at a time, with readers kept out
while it writes.
"""

from __future__ import annotations

import logging
from typing import List

from zkcert_spec.types import (
    InvalidDepthError,
    InvalidHashEncodingError,
    InvalidLeafIndexError,
)

from ..bn254 import Fr
from ..poseidon import poseidon_hash
from .constants import empty_leaf_value
from .containers import Proof, TreeNode

logger = logging.getLogger(__name__)

NODE_VALUE_BITS = 256
"""Width of the unsigned integer a node value must fit in."""


def parent_index(i: int) -> int:
    """Index of the parent of node `i`."""
    return (i - 1) // 2


def is_right_child(i: int) -> bool:
    """Whether node `i` is the right child of its parent (even index, root excluded)."""
    return i % 2 == 0


def sibling_index(i: int) -> int:
    """Index of the other child of node `i`'s parent."""
    if is_right_child(i):
        return i - 1
    return i + 1


def compute_node_hash(left: TreeNode, right: TreeNode) -> TreeNode:
    """
    Hash two children into their parent node.

    Raises:
        HashComputationError: If the hash rejects its inputs.
        InvalidHashEncodingError: If the output does not fit a node value.
    """
    value = int(poseidon_hash([left.value, right.value]))
    if not 0 <= value < 1 << NODE_VALUE_BITS:
        raise InvalidHashEncodingError(f"invalid hash: {value} does not fit {NODE_VALUE_BITS} bits")
    return TreeNode(Fr(value))


class Tree:
    """A fixed-depth Merkle tree over field elements, stored as a flat list."""

    def __init__(self, nodes: List[TreeNode]) -> None:
        """
        Wrap an existing node list.

        Raises:
            InvalidDepthError: If `len(nodes)` is not `2^depth - 1` for some `depth >= 1`.
        """
        size = len(nodes) + 1
        if size < 2 or size & (size - 1):
            raise InvalidDepthError(size.bit_length() - 1)
        self.nodes = nodes

    @classmethod
    def new_empty(cls, depth: int, leaf_value: Fr | None = None) -> Tree:
        """
        Build a tree in which every leaf holds `leaf_value`.

        Because all leaves are equal, all nodes of any one level are equal
        too. Each level's value is hashed once from the level below and then
        broadcast, so only `depth - 1` hashes are computed.

        Args:
            depth: Number of levels, root and leaves included.
            leaf_value: Value of every leaf; defaults to the empty leaf value.

        Raises:
            InvalidDepthError: If `depth < 1`.
        """
        if depth < 1:
            raise InvalidDepthError(depth)

        node = TreeNode(empty_leaf_value() if leaf_value is None else Fr(leaf_value))

        # Levels are filled from the leaves up; `levels[k]` holds the nodes
        # of the level with `2^k` entries.
        levels: List[List[TreeNode]] = []
        for level in reversed(range(depth)):
            levels.append([node] * (1 << level))
            if level > 0:
                node = compute_node_hash(node, node)

        nodes = [n for level_nodes in reversed(levels) for n in level_nodes]
        logger.debug("Built empty tree: depth=%d nodes=%d", depth, len(nodes))
        return cls(nodes)

    @property
    def depth(self) -> int:
        """Number of levels, root and leaves included."""
        return (len(self.nodes) + 1).bit_length() - 1

    def leaves_count(self) -> int:
        """Number of leaf slots."""
        return (len(self.nodes) + 1) // 2

    def root(self) -> TreeNode:
        """The root node."""
        return self.nodes[0]

    def _leaf_node_index(self, index: int) -> int:
        leaves_count = self.leaves_count()
        if not 0 <= index < leaves_count:
            raise InvalidLeafIndexError(index, leaves_count)
        return len(self.nodes) - leaves_count + index

    def set_leaf(self, index: int, value: TreeNode | Fr) -> None:
        """
        Overwrite leaf `index` and recompute its ancestors up to the root.

        The index is checked before anything is written.

        Raises:
            InvalidLeafIndexError: If `index` is outside `[0, leaves_count)`.
        """
        j = self._leaf_node_index(index)
        self.nodes[j] = value if isinstance(value, TreeNode) else TreeNode(Fr(value))

        while j > 0:
            j = parent_index(j)
            self.nodes[j] = compute_node_hash(self.nodes[2 * j + 1], self.nodes[2 * j + 2])

        logger.debug("Set leaf %d, new root %s", index, self.nodes[0].value)

    def get_proof(self, index: int) -> Proof:
        """
        Extract the inclusion proof of leaf `index`.

        Climbs from the leaf to the level below the root, recording each
        sibling and the direction bit of the current node, then appends the
        root as the last path entry.

        Raises:
            InvalidLeafIndexError: If `index` is outside `[0, leaves_count)`.
        """
        j = self._leaf_node_index(index)

        path: List[TreeNode] = []
        indices = 0
        level = 0
        while j > 0:
            if is_right_child(j):
                indices |= 1 << level
            path.append(self.nodes[sibling_index(j)])
            j = parent_index(j)
            level += 1

        path.append(self.root())
        return Proof(path=path, indices=indices)


def verify_proof(proof: Proof, leaf: TreeNode | Fr, root: TreeNode | None = None) -> bool:
    """
    Check a proof by recomputing the root from a leaf.

    At level `k` the running node is hashed with `proof.path[k]`, on the
    right if bit `k` of `proof.indices` is set and on the left otherwise.

    Args:
        proof: The proof to check.
        leaf: The value claimed to sit at the proven position.
        root: Trusted root; defaults to the root carried by the proof.

    Returns:
        `True` if the recomputed root matches, `False` otherwise.
    """
    if not proof.path:
        return False

    expected = proof.root if root is None else root
    if root is not None and proof.root != root:
        return False

    current = leaf if isinstance(leaf, TreeNode) else TreeNode(Fr(leaf))
    for level, sibling in enumerate(proof.siblings):
        if (proof.indices >> level) & 1:
            current = compute_node_hash(sibling, current)
        else:
            current = compute_node_hash(current, sibling)

    return current == expected
