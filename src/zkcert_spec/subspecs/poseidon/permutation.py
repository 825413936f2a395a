"""
A minimal Python specification of the Poseidon hash over the BN254 scalar field.

The design follows the paper "Poseidon: A New Hash Function for Zero-Knowledge
Proof Systems" (https://eprint.iacr.org/2019/458), with the parameters used by
the circom circuit library: S-box `x^5`, 8 full rounds and a width-dependent
number of partial rounds.
"""

from __future__ import annotations

from functools import cache
from typing import List, Sequence, SupportsInt

from pydantic import BaseModel, ConfigDict, Field, model_validator

from zkcert_spec.types import HashComputationError

from ..bn254 import Fr, P
from .constants import MAX_WIDTH, MIN_WIDTH, generate_constants, rounds_for_width

S_BOX_DEGREE = 5
"""
The S-box exponent `d`.

`gcd(5, P - 1) = 1` for the BN254 scalar field, so `x -> x^5` is a permutation.
"""

MAX_INPUTS = MAX_WIDTH - 1
"""The largest number of field elements one hash call accepts."""


class PoseidonParams(BaseModel):
    """Parameters for a specific Poseidon instance."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    width: int = Field(ge=MIN_WIDTH, le=MAX_WIDTH, description="The size of the state (t).")
    rounds_f: int = Field(gt=0, description="Total number of 'full' rounds.")
    rounds_p: int = Field(ge=0, description="Total number of 'partial' rounds.")
    round_constants: List[Fr] = Field(
        min_length=1,
        description="Flat list of constants, `width` per round.",
    )
    mds: List[List[Fr]] = Field(
        min_length=1,
        description="The `width x width` MDS matrix of the linear layer.",
    )

    @model_validator(mode="after")
    def check_lengths(self) -> "PoseidonParams":
        """Ensures constant and matrix shapes match the configuration."""
        if self.rounds_f % 2 != 0:
            raise ValueError("rounds_f must be even.")

        expected_constants = (self.rounds_f + self.rounds_p) * self.width
        if len(self.round_constants) != expected_constants:
            raise ValueError("Incorrect number of round constants provided.")

        if len(self.mds) != self.width or any(len(row) != self.width for row in self.mds):
            raise ValueError("MDS matrix must be width x width.")

        return self


@cache
def params_for_width(width: int) -> PoseidonParams:
    """Build (once) the parameter set for a state width."""
    rounds_f, rounds_p = rounds_for_width(width)
    round_constants, mds = generate_constants(width)
    return PoseidonParams(
        width=width,
        rounds_f=rounds_f,
        rounds_p=rounds_p,
        round_constants=list(round_constants),
        mds=[list(row) for row in mds],
    )


def _mix(state: List[Fr], mds: List[List[Fr]]) -> List[Fr]:
    """Applies the linear layer: `new_state[i] = sum_j M[i][j] * state[j]`."""
    return [sum((m * s for m, s in zip(row, state, strict=True)), Fr(0)) for row in mds]


def permute(state: List[Fr], params: PoseidonParams) -> List[Fr]:
    """
    Performs the full Poseidon permutation on the given state.

    Every round adds the round constants, applies the S-box and mixes the
    state with the MDS matrix. The first and last `R_F / 2` rounds apply the
    S-box to the whole state; the `R_P` rounds in between only to `state[0]`.

    Args:
        state: A list of field elements of length `params.width`.
        params: The instance configuration.

    Returns:
        The new state after applying the permutation.
    """
    if len(state) != params.width:
        raise ValueError(f"Input state must have length {params.width}")

    width = params.width
    half_rounds_f = params.rounds_f // 2
    constants = params.round_constants

    for r in range(params.rounds_f + params.rounds_p):
        state = [s + constants[r * width + i] for i, s in enumerate(state)]

        if r < half_rounds_f or r >= half_rounds_f + params.rounds_p:
            state = [s**S_BOX_DEGREE for s in state]
        else:
            state[0] = state[0] ** S_BOX_DEGREE

        state = _mix(state, params.mds)

    return state


def poseidon_hash(inputs: Sequence[SupportsInt]) -> Fr:
    """
    Hash an ordered sequence of field elements into one field element.

    The state is `[0, *inputs]`, the width is `len(inputs) + 1` and the
    output is the first element of the permuted state.

    Raises:
        HashComputationError: If there are no inputs, more than `MAX_INPUTS`
            inputs, or an input is not inside the field.
    """
    if not 1 <= len(inputs) <= MAX_INPUTS:
        raise HashComputationError(
            f"poseidon accepts 1 to {MAX_INPUTS} inputs, got {len(inputs)}"
        )

    elements: List[Fr] = []
    for position, value in enumerate(inputs):
        raw = int(value)
        if not 0 <= raw < P:
            raise HashComputationError(f"input {position} is not inside the field: {raw}")
        elements.append(Fr(raw))

    params = params_for_width(len(elements) + 1)
    return permute([Fr(0), *elements], params)[0]
