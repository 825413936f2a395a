"""Specifications for the BN254 scalar field."""

from .field import P_BITS, P_BYTES, Fr, P

__all__ = [
    "P",
    "P_BITS",
    "P_BYTES",
    "Fr",
]
