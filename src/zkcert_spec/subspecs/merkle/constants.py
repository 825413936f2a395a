"""
Configuration presets and fixed constants for the certificate Merkle tree.

Production registries use a depth-32 tree. Tests use a shallow tree so the
array-backed representation stays small.
"""

from functools import cache

from Crypto.Hash import keccak
from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Final

from zkcert_spec.config import ZKCERT_ENV

from ..bn254 import Fr, P


class MerkleConfig(BaseModel):
    """A model holding the configuration constants for a tree preset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    TREE_DEPTH: int = Field(ge=1)
    """Number of node levels, root and leaves included."""

    @property
    def LEAVES_COUNT(self) -> int:  # noqa: N802
        """Number of leaf slots in a tree of this depth."""
        return 1 << (self.TREE_DEPTH - 1)


PROD_CONFIG: Final = MerkleConfig(TREE_DEPTH=32)

TEST_CONFIG: Final = MerkleConfig(TREE_DEPTH=4)

TARGET_CONFIG: Final = TEST_CONFIG if ZKCERT_ENV == "test" else PROD_CONFIG
"""The preset selected by the `ZKCERT_ENV` environment variable."""

EMPTY_LEAF_SEED: Final = b"Galactica"
"""Domain separation string hashed into the value of unused leaves."""


@cache
def empty_leaf_value() -> Fr:
    """
    The value stored in every unused leaf.

    Derived as `keccak256(EMPTY_LEAF_SEED) mod P`, interpreting the digest
    as a big-endian integer. Computed once and memoised.
    """
    digest = keccak.new(data=EMPTY_LEAF_SEED, digest_bits=256).digest()
    return Fr(int.from_bytes(digest, byteorder="big") % P)
