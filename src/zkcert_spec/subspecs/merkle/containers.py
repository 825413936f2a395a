"""Value types exchanged with users of the Merkle tree: nodes and proofs."""

from __future__ import annotations

from typing import List

from pydantic import ConfigDict, Field, RootModel

from zkcert_spec.types import StrictBaseModel

from ..bn254 import Fr


class TreeNode(RootModel[Fr]):
    """
    A single tree node wrapping one field element.

    Its JSON form is the bare decimal string of the value.
    """

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> Fr:
        """The wrapped field element."""
        return self.root

    @classmethod
    def of(cls, value: int) -> TreeNode:
        """Wrap an integer, reducing it into the field."""
        return cls(Fr(value))

    def __repr__(self) -> str:
        return f"TreeNode({int(self.root)})"


class Proof(StrictBaseModel):
    """
    A Merkle inclusion proof.

    `path` holds `depth` entries: the siblings from the leaf up to the level
    below the root, followed by the root itself. Downstream verifiers rely on
    that trailing root, so it is part of the format.
    """

    path: List[TreeNode] = Field(default_factory=list)
    """Siblings from leaf to root, then the root."""

    indices: int = Field(default=0, ge=0)
    """
    Direction bitmask, starting from the least significant bit.

    Bit `k` is 1 when the node on the path at level `k` sits at an even array
    index, i.e. it is the right child of its parent.
    """

    @property
    def depth(self) -> int:
        """Depth of the tree the proof was taken from."""
        return len(self.path)

    @property
    def siblings(self) -> List[TreeNode]:
        """The true sibling entries, without the trailing root."""
        return self.path[:-1]

    @property
    def root(self) -> TreeNode:
        """The root recorded as the last path entry."""
        return self.path[-1]
