"""
Specification of the certificate binding protocol: content capability,
provider signatures, certificates and issued certificates.
"""

from .certificate import (
    Certificate,
    ProviderData,
    did,
    leaf_hash,
    random_salt,
)
from .content import Content
from .registration import IssuedCertificate, RegistrationDetails
from .signature import sign_certificate, signed_message, verify_signature
from .types import Address, Standard, Timestamp, to_checksum_address

__all__ = [
    "Certificate",
    "IssuedCertificate",
    "RegistrationDetails",
    "ProviderData",
    "Content",
    "Standard",
    "Timestamp",
    "Address",
    "to_checksum_address",
    "leaf_hash",
    "did",
    "random_salt",
    "sign_certificate",
    "verify_signature",
    "signed_message",
]
