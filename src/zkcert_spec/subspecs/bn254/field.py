"""Core definition of the BN254 scalar field Fr."""

from __future__ import annotations

import re
from typing import Any, SupportsInt

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from zkcert_spec.types import MalformedEncodingError

# =================================================================
# Field Constants
#
# The prime is the group order of the BN254 (alt_bn128) pairing curve.
# Circuits built for that curve compute natively over this field, which
# is why every hash input and signature component lives here.
# =================================================================

P: int = 21888242871839275222246405745257275088548364400416034343698204186575808495617
"""The BN254 scalar field prime."""

P_BITS: int = 254
"""The number of bits in the prime P."""

P_BYTES: int = 32
"""The size of a field element in bytes."""

_DECIMAL = re.compile(r"[0-9]+")


class Fr(int):
    """
    An element of the BN254 scalar field.

    Instances are plain integers in `[0, P)`; construction reduces modulo P.
    Arithmetic operators stay inside the field.
    """

    def __new__(cls, value: SupportsInt = 0) -> Self:
        """Create a field element, reducing the input modulo P."""
        if isinstance(value, bool):
            raise TypeError("Fr cannot be built from a bool")
        return super().__new__(cls, int(value) % P)

    @classmethod
    def from_decimal(cls, text: str) -> Self:
        """
        Parse the canonical decimal text form of a field element.

        Raises:
            MalformedEncodingError: If `text` is not an unsigned decimal integer,
                or it is not reduced modulo P.
        """
        if not isinstance(text, str) or not _DECIMAL.fullmatch(text):
            raise MalformedEncodingError("Fr", str(text), "expected an unsigned decimal integer")
        value = int(text)
        if value >= P:
            raise MalformedEncodingError("Fr", text, "value exceeds the field modulus")
        return cls(value)

    def to_decimal(self) -> str:
        """Canonical decimal text form."""
        return str(int(self))

    def __repr__(self) -> str:
        return f"Fr({int(self)})"

    def __add__(self, other: SupportsInt) -> Self:
        """Field addition."""
        return type(self)(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other: SupportsInt) -> Self:
        """Field subtraction."""
        return type(self)(int(self) - int(other))

    def __rsub__(self, other: SupportsInt) -> Self:
        return type(self)(int(other) - int(self))

    def __mul__(self, other: SupportsInt) -> Self:
        """Field multiplication."""
        return type(self)(int(self) * int(other))

    __rmul__ = __mul__

    def __neg__(self) -> Self:
        """Field negation."""
        return type(self)(-int(self))

    def __pow__(self, exponent: int, modulo: None = None) -> Self:  # type: ignore[override]
        """Field exponentiation."""
        return type(self)(pow(int(self), exponent, P))

    def inverse(self) -> Self:
        """Computes the multiplicative inverse."""
        if int(self) == 0:
            raise ZeroDivisionError("Cannot invert the zero element.")
        return type(self)(pow(int(self), P - 2, P))

    def __truediv__(self, other: SupportsInt) -> Self:
        """Field division."""
        return self * Fr(other).inverse()

    def __bytes__(self) -> bytes:
        """32-byte little-endian representation."""
        return int(self).to_bytes(P_BYTES, byteorder="little")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        JSON carries field elements as decimal strings. Python callers may pass
        any `int`, which is reduced like the constructor does.
        """

        def from_json(value: str) -> Fr:
            return cls.from_decimal(value)

        def from_python(value: Any) -> Fr:
            if isinstance(value, str):
                return cls.from_decimal(value)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Expected an int or decimal string, got {type(value).__name__}")
            return cls(value)

        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(),
                    core_schema.no_info_plain_validator_function(from_json),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(from_python),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: str(int(instance)), when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Field elements are documented as decimal strings."""
        return {"type": "string", "pattern": "^[0-9]+$", "format": "bn254-fr"}
