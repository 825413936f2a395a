"""
The certificate binding protocol.

A certificate ties typed content to a holder and a provider by folding
everything into one field element, the leaf hash, which is what the registry
stores in its Merkle tree:

    leaf_hash = Poseidon(
        content_hash,
        provider_public_key.x, provider_public_key.y,
        signature.s, signature.r8.x, signature.r8.y,
        holder_commitment,
        salt,
        expiration_unix_seconds,
    )

The order of the nine inputs is part of the protocol.
"""

from __future__ import annotations

import logging
import secrets
from datetime import datetime
from typing import Generic, TypeVar

from pydantic import Field, SerializeAsAny

from zkcert_spec.types import InvalidSignatureError, StrictBaseModel

from ..babyjub import Point, PublicKey, Signature
from ..bn254 import Fr
from ..poseidon import poseidon_hash
from .content import Content
from .signature import verify_signature
from .types import Standard, Timestamp, to_unix

logger = logging.getLogger(__name__)

ContentT = TypeVar("ContentT", bound=Content)

SALT_BITS = 63
"""Bit length of salts drawn by `random_salt`."""


class ProviderData(StrictBaseModel):
    """
    The provider's public key and signature, stored by value.

    Field names follow the wire format. Note that `bx` holds the Y coordinate
    of the public key. The nonce coordinates keep their lowercase wire names,
    which camel casing would otherwise turn into `r8X` and `r8Y`.
    """

    ax: Fr
    """Public key X coordinate."""
    bx: Fr
    """Public key Y coordinate."""
    s: Fr
    """Signature scalar."""
    r8x: Fr = Field(alias="r8x")
    """Signature nonce point X coordinate."""
    r8y: Fr = Field(alias="r8y")
    """Signature nonce point Y coordinate."""

    @classmethod
    def from_key(cls, public_key: PublicKey, signature: Signature) -> ProviderData:
        """Copy a public key and signature into provider data."""
        return cls(
            ax=public_key.x,
            bx=public_key.y,
            s=signature.s,
            r8x=signature.r8.x,
            r8y=signature.r8.y,
        )

    @property
    def public_key(self) -> PublicKey:
        """The provider public key."""
        return PublicKey(x=self.ax, y=self.bx)

    @property
    def signature(self) -> Signature:
        """The provider signature."""
        return Signature(r8=Point(x=self.r8x, y=self.r8y), s=self.s)


def leaf_hash(
    content_hash: Fr,
    provider_public_key: PublicKey,
    signature: Signature,
    holder_commitment: Fr,
    salt: int,
    expiration_date: datetime,
) -> Fr:
    """
    Compute the leaf hash binding all certificate components.

    Raises:
        HashComputationError: If a component is not inside the field, e.g. a
            negative salt or an expiration date before the unix epoch.
    """
    return poseidon_hash(
        [
            content_hash,
            provider_public_key.x,
            provider_public_key.y,
            signature.s,
            signature.r8.x,
            signature.r8.y,
            holder_commitment,
            salt,
            to_unix(expiration_date),
        ]
    )


def did(standard: Standard, leaf_hash: Fr) -> str:
    """The decentralized identifier `did:<standard>:<decimal leaf hash>`."""
    return f"did:{standard}:{int(leaf_hash)}"


def random_salt() -> int:
    """Draw a salt that is always a valid hash input."""
    return secrets.randbits(SALT_BITS)


class Certificate(StrictBaseModel, Generic[ContentT]):
    """
    A zero-knowledge certificate over content of type `ContentT`.

    Certificates are immutable. Build them with `Certificate.new`, which checks
    the provider signature and derives the leaf hash and DID.
    """

    holder_commitment: Fr
    """Commitment supplied by the holder, bound into the signature and leaf hash."""
    leaf_hash: Fr
    """The registry leaf binding every other field."""
    did: str
    """Decentralized identifier derived from the standard and leaf hash."""
    standard: Standard = Field(alias="zkCertStandard")
    """The content standard."""
    content: SerializeAsAny[ContentT]
    """The attested content."""
    content_hash: Fr
    """Hash of `content`."""
    expiration_date: Timestamp
    """Moment after which the certificate is no longer valid."""
    provider_data: ProviderData
    """Provider public key and signature."""
    random_salt: int
    """Salt hiding the leaf hash preimage."""

    @classmethod
    def new(
        cls,
        holder_commitment: Fr,
        content: ContentT,
        provider_public_key: PublicKey,
        provider_signature: Signature,
        salt: int,
        expiration_date: datetime,
    ) -> Certificate[ContentT]:
        """
        Construct a certificate.

        1. Hash the content.
        2. Verify the provider signature over `(content_hash, holder_commitment)`.
        3. Derive the leaf hash and the DID.

        Raises:
            InvalidSignatureError: If the provider signature does not verify.
            HashComputationError: If a hash input is outside the field.
        """
        content_hash = content.hash()

        if not verify_signature(
            provider_public_key, content_hash, holder_commitment, provider_signature
        ):
            logger.warning(
                "Rejected certificate: provider signature does not verify for key (%s, %s)",
                provider_public_key.x,
                provider_public_key.y,
            )
            raise InvalidSignatureError("invalid signature")

        leaf = leaf_hash(
            content_hash,
            provider_public_key,
            provider_signature,
            holder_commitment,
            salt,
            expiration_date,
        )
        standard = content.standard()

        certificate = cls(
            holder_commitment=Fr(holder_commitment),
            leaf_hash=leaf,
            did=did(standard, leaf),
            standard=standard,
            content=content,
            content_hash=content_hash,
            expiration_date=expiration_date,
            provider_data=ProviderData.from_key(provider_public_key, provider_signature),
            random_salt=salt,
        )
        logger.debug("Built certificate %s", certificate.did)
        return certificate
