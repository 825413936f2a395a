"""Specification of the Poseidon hash over the BN254 scalar field."""

from .constants import N_ROUNDS_F, N_ROUNDS_P, GrainLfsr, generate_constants
from .permutation import (
    MAX_INPUTS,
    PoseidonParams,
    params_for_width,
    permute,
    poseidon_hash,
)

__all__ = [
    "poseidon_hash",
    "permute",
    "params_for_width",
    "generate_constants",
    "GrainLfsr",
    "PoseidonParams",
    "MAX_INPUTS",
    "N_ROUNDS_F",
    "N_ROUNDS_P",
]
