"""Tests for Baby Jubjub point arithmetic."""

import pytest

from zkcert_spec.subspecs.babyjub import A, BASE8, D, ORDER, SUBORDER, Point
from zkcert_spec.subspecs.bn254 import Fr


def test_curve_constants() -> None:
    """The group order splits as cofactor 8 times a prime subgroup order."""
    assert ORDER == 8 * SUBORDER
    assert int(A) == 168700
    assert int(D) == 168696


def test_base8_is_on_curve() -> None:
    """The subgroup generator satisfies the curve equation."""
    assert BASE8.in_curve()


def test_identity_behaviour() -> None:
    """The identity is neutral for addition and the result of multiplying by zero."""
    identity = Point.identity()
    assert identity.in_curve()
    assert BASE8 + identity == BASE8
    assert BASE8.mul(0) == identity
    assert BASE8.mul(1) == BASE8


def test_doubling_matches_addition() -> None:
    """2 * P computed by the ladder equals P + P."""
    assert BASE8.mul(2) == BASE8 + BASE8
    assert BASE8.mul(3) == BASE8 + BASE8 + BASE8


def test_scalar_multiplication_distributes() -> None:
    """(a + b) * P == a * P + b * P."""
    a, b = 123456789, 987654321
    assert BASE8.mul(a + b) == BASE8.mul(a) + BASE8.mul(b)
    assert BASE8.mul(a).in_curve()


def test_base8_has_prime_order() -> None:
    """BASE8 generates the subgroup of order SUBORDER."""
    assert BASE8.mul(SUBORDER) == Point.identity()
    assert BASE8.in_subgroup()


def test_point_off_curve_is_detected() -> None:
    """A random coordinate pair is not on the curve."""
    assert not Point(x=Fr(1), y=Fr(2)).in_curve()


def test_negative_scalar_rejected() -> None:
    """Scalars are non-negative integers."""
    with pytest.raises(ValueError, match="scalar must be non-negative"):
        BASE8.mul(-1)


def test_point_json_roundtrip() -> None:
    """Coordinates travel as decimal strings."""
    encoded = BASE8.to_json()
    assert '"x":"5299619240641551281634865583518297030282874472190772894086521144482721001553"' in (
        encoded
    )
    assert Point.from_json(encoded) == BASE8
