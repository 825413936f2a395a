"""Reusable type definitions for the certificate registry specification."""

from .base import CamelModel, StrictBaseModel
from .exceptions import (
    HashComputationError,
    InvalidDepthError,
    InvalidHashEncodingError,
    InvalidLeafIndexError,
    InvalidSignatureError,
    MalformedEncodingError,
    ZkCertError,
)

__all__ = [
    "CamelModel",
    "StrictBaseModel",
    # Exceptions
    "ZkCertError",
    "InvalidDepthError",
    "InvalidLeafIndexError",
    "HashComputationError",
    "InvalidHashEncodingError",
    "InvalidSignatureError",
    "MalformedEncodingError",
]
