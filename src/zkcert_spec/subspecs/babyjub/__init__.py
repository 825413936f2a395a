"""Specification of the Baby Jubjub curve and its Poseidon EdDSA signatures."""

from .curve import A, BASE8, D, ORDER, SUBORDER, Point
from .eddsa import PRIVATE_KEY_LENGTH, PrivateKey, PublicKey, Signature

__all__ = [
    "A",
    "D",
    "ORDER",
    "SUBORDER",
    "BASE8",
    "Point",
    "PrivateKey",
    "PublicKey",
    "Signature",
    "PRIVATE_KEY_LENGTH",
]
