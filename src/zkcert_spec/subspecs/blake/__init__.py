"""The BLAKE-512 hash function, used to derive Baby Jubjub signing scalars and nonces."""

from .hash import BLOCK_BYTES, DIGEST_BYTES, blake512

__all__ = ["blake512", "BLOCK_BYTES", "DIGEST_BYTES"]
