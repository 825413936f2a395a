"""
The Baby Jubjub twisted Edwards curve.

Baby Jubjub is defined over the BN254 scalar field, so its points can be
manipulated cheaply inside circuits built for that field:

    a * x^2 + y^2 = 1 + d * x^2 * y^2,   a = 168700, d = 168696

The full group has order `8 * SUBORDER`; signatures live in the prime-order
subgroup generated by `BASE8`.
"""

from __future__ import annotations

from typing import Tuple

from typing_extensions import Final, Self

from zkcert_spec.types import StrictBaseModel

from ..bn254 import Fr

A: Final = Fr(168700)
"""Twisted Edwards coefficient `a`."""

D: Final = Fr(168696)
"""Twisted Edwards coefficient `d`."""

ORDER: Final = 21888242871839275222246405745257275088614511777268538073601725287587578984328
"""Order of the full curve group."""

SUBORDER: Final = ORDER >> 3
"""Order of the prime subgroup generated by `BASE8`."""

_Projective = Tuple[Fr, Fr, Fr]


class Point(StrictBaseModel):
    """An affine point on Baby Jubjub."""

    x: Fr
    y: Fr

    @classmethod
    def identity(cls) -> Self:
        """The neutral element `(0, 1)`."""
        return cls(x=Fr(0), y=Fr(1))

    def in_curve(self) -> bool:
        """Check the curve equation."""
        x2 = self.x * self.x
        y2 = self.y * self.y
        return A * x2 + y2 == 1 + D * x2 * y2

    def _projective(self) -> _Projective:
        return self.x, self.y, Fr(1)

    @classmethod
    def _from_projective(cls, point: _Projective) -> Self:
        x, y, z = point
        z_inv = z.inverse()
        return cls(x=x * z_inv, y=y * z_inv)

    def __add__(self, other: Point) -> Self:
        """Group addition."""
        return self._from_projective(_add(self._projective(), other._projective()))

    def mul(self, scalar: int) -> Self:
        """
        Scalar multiplication by double-and-add.

        Args:
            scalar: A non-negative integer; it is not reduced.
        """
        if scalar < 0:
            raise ValueError("scalar must be non-negative")

        result: _Projective = (Fr(0), Fr(1), Fr(1))
        addend = self._projective()
        while scalar:
            if scalar & 1:
                result = _add(result, addend)
            addend = _add(addend, addend)
            scalar >>= 1
        return self._from_projective(result)

    def in_subgroup(self) -> bool:
        """Check membership in the prime-order subgroup."""
        return self.in_curve() and self.mul(SUBORDER) == self.identity()


def _add(p: _Projective, q: _Projective) -> _Projective:
    """
    Projective twisted Edwards addition (add-2008-bbjlp).

    The formula is complete on Baby Jubjub (`a` square, `d` non-square), so
    it also doubles and handles the identity.
    """
    x1, y1, z1 = p
    x2, y2, z2 = q

    a = z1 * z2
    b = a * a
    c = x1 * x2
    d = y1 * y2
    e = D * c * d
    f = b - e
    g = b + e

    x3 = a * f * ((x1 + y1) * (x2 + y2) - c - d)
    y3 = a * g * (d - A * c)
    z3 = f * g
    return x3, y3, z3


BASE8: Final = Point(
    x=Fr(5299619240641551281634865583518297030282874472190772894086521144482721001553),
    y=Fr(16950150798460657717958625567821834550301663161624707787222815936182638968203),
)
"""Generator of the prime-order subgroup (eight times the curve base point)."""
