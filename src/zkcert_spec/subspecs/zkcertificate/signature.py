"""Provider signatures over certificate content bound to a holder commitment."""

from __future__ import annotations

from ..babyjub import PrivateKey, PublicKey, Signature
from ..bn254 import Fr
from ..poseidon import poseidon_hash


def signed_message(content_hash: Fr, commitment_hash: Fr) -> Fr:
    """The field element a provider signs: `Hash(content_hash, commitment_hash)`."""
    return poseidon_hash([content_hash, commitment_hash])


def sign_certificate(
    provider_key: PrivateKey,
    content_hash: Fr,
    commitment_hash: Fr,
) -> Signature:
    """
    Sign certificate content for one holder.

    Raises:
        HashComputationError: If the message hash cannot be computed.
    """
    return provider_key.sign_poseidon(signed_message(content_hash, commitment_hash))


def verify_signature(
    provider_key: PublicKey,
    content_hash: Fr,
    commitment_hash: Fr,
    signature: Signature,
) -> bool:
    """
    Check a provider signature over certificate content for one holder.

    Returns `False` when the signature does not verify.

    Raises:
        HashComputationError: If the message hash cannot be computed.
    """
    return provider_key.verify_poseidon(signed_message(content_hash, commitment_hash), signature)
