"""Tests for tree nodes and proofs as wire values."""

import json

import pytest
from pydantic import ValidationError

from zkcert_spec.subspecs.bn254 import Fr, P
from zkcert_spec.subspecs.merkle import Proof, Tree, TreeNode


def test_tree_node_value_and_repr() -> None:
    """A node wraps one field element."""
    node = TreeNode.of(P + 5)
    assert node.value == 5
    assert repr(node) == "TreeNode(5)"


def test_tree_node_is_immutable() -> None:
    """Nodes are frozen."""
    node = TreeNode.of(1)
    with pytest.raises(ValidationError):
        node.root = Fr(2)  # type: ignore[misc]


def test_tree_node_json_is_decimal_string() -> None:
    """A node serializes to the bare decimal string of its value."""
    node = TreeNode.of(12345)
    assert node.model_dump_json() == '"12345"'
    assert TreeNode.model_validate_json('"12345"') == node


def test_proof_properties() -> None:
    """Depth, siblings and root are views over the path."""
    proof = Proof(path=[TreeNode.of(1), TreeNode.of(2), TreeNode.of(3)], indices=2)
    assert proof.depth == 3
    assert proof.siblings == [TreeNode.of(1), TreeNode.of(2)]
    assert proof.root == TreeNode.of(3)


def test_proof_json_round_trip() -> None:
    """Proofs from a real tree survive JSON encoding unchanged."""
    tree = Tree.new_empty(3, Fr(0))
    tree.set_leaf(3, Fr(10))
    proof = tree.get_proof(3)

    data = json.loads(proof.to_json())
    assert set(data) == {"path", "indices"}
    assert all(isinstance(entry, str) for entry in data["path"])
    assert data["indices"] == proof.indices

    assert Proof.from_json(proof.to_json()) == proof


@pytest.mark.parametrize(
    "payload",
    [
        '{"path": ["1"], "indices": -1}',
        '{"path": ["x"], "indices": 0}',
        '{"path": [1], "indices": 0}',
        '{"path": ["1"], "indices": 0, "extra": 1}',
    ],
)
def test_proof_rejects_malformed_json(payload: str) -> None:
    """Negative masks, non-decimal nodes and unknown fields are rejected."""
    with pytest.raises(ValidationError):
        Proof.from_json(payload)


def test_proof_is_immutable() -> None:
    """Proofs are frozen."""
    proof = Proof(path=[TreeNode.of(1)], indices=0)
    with pytest.raises(ValidationError):
        proof.indices = 1  # type: ignore[misc]
