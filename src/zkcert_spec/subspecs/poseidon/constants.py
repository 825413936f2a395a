"""
Derivation of the Poseidon round constants and MDS matrices.

Instead of shipping thousands of 254-bit literals, the constants are
regenerated on demand with the Grain LFSR procedure from the Poseidon
reference parameter script. The generator is seeded with the instance
description, so every width yields its own independent constants.

### Grain LFSR

An 80-bit shift register is initialised with

    field (2 bits) | sbox (4 bits) | n (12 bits) | t (12 bits)
    | R_F (10 bits) | R_P (10 bits) | 1 * 30

and clocked 160 times before any output is used. Each clock computes

    b_80 = b_62 ^ b_51 ^ b_38 ^ b_23 ^ b_13 ^ b_0

Output bits are produced in pairs: if the first bit of a pair is 1 the
second bit is emitted, otherwise the pair is discarded.
"""

from __future__ import annotations

from functools import cache

from typing_extensions import Final

from ..bn254 import Fr, P, P_BITS

N_ROUNDS_F: Final = 8
"""Number of full rounds, shared by every width."""

N_ROUNDS_P: Final[list[int]] = [56, 57, 56, 60, 60, 63, 64, 63, 60, 66, 60, 65, 70, 60, 64, 68]
"""Partial rounds per width; entry `t - 2` applies to state width `t`."""

MIN_WIDTH: Final = 2
MAX_WIDTH: Final = MIN_WIDTH + len(N_ROUNDS_P) - 1
"""Widths 2..17, i.e. 1..16 hash inputs."""

_FIELD_TYPE_PRIME: Final = 1
_SBOX_TYPE_POWER: Final = 0
_STATE_BITS: Final = 80
_WARMUP_CLOCKS: Final = 160


class GrainLfsr:
    """The self-shrinking Grain LFSR used to sample Poseidon parameters."""

    def __init__(self, field_bits: int, width: int, rounds_f: int, rounds_p: int) -> None:
        """Seed the register with the instance description and warm it up."""
        seed = (
            format(_FIELD_TYPE_PRIME, "02b")
            + format(_SBOX_TYPE_POWER, "04b")
            + format(field_bits, "012b")
            + format(width, "012b")
            + format(rounds_f, "010b")
            + format(rounds_p, "010b")
            + "1" * 30
        )
        assert len(seed) == _STATE_BITS

        # Bit k of the register integer is b_k; b_0 is the oldest bit.
        self._state = sum(int(bit) << k for k, bit in enumerate(seed))
        for _ in range(_WARMUP_CLOCKS):
            self._clock()

    def _clock(self) -> int:
        s = self._state
        bit = ((s >> 62) ^ (s >> 51) ^ (s >> 38) ^ (s >> 23) ^ (s >> 13) ^ s) & 1
        self._state = (s >> 1) | (bit << (_STATE_BITS - 1))
        return bit

    def next_bit(self) -> int:
        """Emit one output bit."""
        while True:
            first = self._clock()
            second = self._clock()
            if first == 1:
                return second

    def next_bits(self, count: int) -> int:
        """Emit `count` bits as an integer, most significant bit first."""
        value = 0
        for _ in range(count):
            value = (value << 1) | self.next_bit()
        return value

    def field_element(self) -> Fr:
        """Sample a field element by rejection: redraw while the value is `>= P`."""
        while True:
            value = self.next_bits(P_BITS)
            if value < P:
                return Fr(value)


def rounds_for_width(width: int) -> tuple[int, int]:
    """Return `(R_F, R_P)` for a state width."""
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise ValueError(f"width must be between {MIN_WIDTH} and {MAX_WIDTH}, got {width}")
    return N_ROUNDS_F, N_ROUNDS_P[width - MIN_WIDTH]


def _cauchy_matrix(lfsr: GrainLfsr, width: int) -> list[list[Fr]]:
    """
    Sample a Cauchy matrix `M[i][j] = 1 / (x_i + y_j)`.

    The `2 * width` samples must be pairwise distinct and no `x_i + y_j` may
    vanish; otherwise a fresh batch is drawn.
    """
    while True:
        samples = [Fr(lfsr.next_bits(P_BITS)) for _ in range(2 * width)]
        if len(set(samples)) != len(samples):
            continue
        xs, ys = samples[:width], samples[width:]
        if any(x + y == 0 for x in xs for y in ys):
            continue
        return [[(x + y).inverse() for y in ys] for x in xs]


@cache
def generate_constants(width: int) -> tuple[tuple[Fr, ...], tuple[tuple[Fr, ...], ...]]:
    """
    Derive `(round_constants, mds)` for a state width.

    Round constants are drawn first, `(R_F + R_P) * width` of them, followed by
    the MDS matrix, all from one generator. Results are memoised per width.
    """
    rounds_f, rounds_p = rounds_for_width(width)
    lfsr = GrainLfsr(P_BITS, width, rounds_f, rounds_p)

    round_constants = tuple(lfsr.field_element() for _ in range((rounds_f + rounds_p) * width))
    mds = tuple(tuple(row) for row in _cauchy_matrix(lfsr, width))
    return round_constants, mds
