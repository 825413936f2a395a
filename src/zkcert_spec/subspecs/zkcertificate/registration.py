"""Certificates after registration in an on-chain registry."""

from __future__ import annotations

from typing import Generic

from pydantic import Field

from zkcert_spec.types import StrictBaseModel

from ..merkle import Proof
from .certificate import Certificate, ContentT
from .types import Address


class RegistrationDetails(StrictBaseModel):
    """Where and how a certificate was registered."""

    address: Address
    """Registry contract address."""
    revocable: bool
    """Whether the provider may revoke the certificate."""
    leaf_index: int = Field(ge=0)
    """Position of the certificate's leaf hash in the registry tree."""


class IssuedCertificate(Certificate[ContentT], Generic[ContentT]):
    """
    A certificate together with its registration and inclusion proof.

    Certificate fields are inlined in the JSON form, next to
    `registration` and `merkleProof`.
    """

    registration: RegistrationDetails
    merkle_proof: Proof

    @classmethod
    def issue(
        cls,
        certificate: Certificate[ContentT],
        registration: RegistrationDetails,
        merkle_proof: Proof,
    ) -> IssuedCertificate[ContentT]:
        """Attach registration metadata and a proof to a certificate."""
        fields = {name: getattr(certificate, name) for name in Certificate.model_fields}
        return cls(registration=registration, merkle_proof=merkle_proof, **fields)
