"""Strict pydantic base models shared by every wire container."""

from typing import Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    A base model whose wire names are camel case.

    Python attributes stay snake case (`holder_commitment`) while the JSON
    documents exchanged with wallets and registries use camel case
    (`holderCommitment`). Both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )

    def to_json(self) -> str:
        """Serialize to a JSON document using the wire (camel case) names."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """Parse a JSON document produced by `to_json`."""
        return cls.model_validate_json(data)


class StrictBaseModel(CamelModel):
    """A strict, immutable camel-case model."""

    model_config = CamelModel.model_config | {
        "extra": "forbid",
        "frozen": True,
        "strict": True,
    }
