"""Scalar wire types used by certificates: standards, timestamps, addresses."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from Crypto.Hash import keccak
from pydantic import (
    AfterValidator,
    BeforeValidator,
    GetCoreSchemaHandler,
    GetJsonSchemaHandler,
    PlainSerializer,
)
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from zkcert_spec.types import MalformedEncodingError

_STANDARD = re.compile(r"[a-z0-9]+")


class Standard(str):
    """
    Identifier of the certificate standard a content layout follows.

    The tag appears verbatim in the certificate's DID, so it is limited to
    lowercase letters and digits. Standards form an open set: content types
    defined outside this package report their own tags. `Standard.KYC` is the
    one defined here.
    """

    KYC: ClassVar[Standard]
    """Know-your-customer certificates, tag `gip69`."""

    def __new__(cls, tag: str) -> Self:
        """
        Wrap a standard tag.

        Raises:
            MalformedEncodingError: If `tag` is empty or holds characters other
                than lowercase letters and digits.
        """
        if not isinstance(tag, str) or not _STANDARD.fullmatch(tag):
            raise MalformedEncodingError(
                "Standard", str(tag), "expected lowercase letters and digits"
            )
        return super().__new__(cls, tag)

    def __repr__(self) -> str:
        return f"Standard({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Standards travel as their bare tag string."""

        def from_python(value: Any) -> Standard:
            if isinstance(value, cls):
                return value
            if isinstance(value, str):
                return cls(value)
            raise ValueError(f"Expected a standard tag, got {type(value).__name__}")

        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(),
                    core_schema.no_info_plain_validator_function(cls),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(from_python),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": "^[a-z0-9]+$"}


Standard.KYC = Standard("gip69")


def _from_unix(value: Any) -> Any:
    """Accept unix seconds (the wire form) next to `datetime` objects."""
    if isinstance(value, int) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    return value


def to_unix(value: datetime) -> int:
    """Whole seconds since the unix epoch."""
    return int(value.timestamp())


Timestamp = Annotated[
    datetime,
    BeforeValidator(_from_unix),
    PlainSerializer(to_unix, return_type=int, when_used="json"),
]
"""A point in time carried on the wire as unix seconds."""


_ADDRESS = re.compile(r"0x[0-9a-fA-F]{40}")


def to_checksum_address(value: str) -> str:
    """
    Normalize an Ethereum address to its EIP-55 mixed-case form.

    Each hex letter is upper-cased when the matching nibble of
    `keccak256(lowercase_hex)` is 8 or more.

    Raises:
        MalformedEncodingError: If `value` is not `0x` followed by 40 hex digits.
    """
    if not _ADDRESS.fullmatch(value):
        raise MalformedEncodingError("Address", value, "expected 0x followed by 40 hex digits")

    lower = value[2:].lower()
    digest = keccak.new(data=lower.encode("ascii"), digest_bits=256).hexdigest()
    return "0x" + "".join(
        char.upper() if char.isalpha() and int(nibble, 16) >= 8 else char
        for char, nibble in zip(lower, digest)
    )


Address = Annotated[str, AfterValidator(to_checksum_address)]
"""A 20-byte Ethereum account address, stored checksummed."""
