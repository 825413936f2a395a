"""The capability every certificate content variant provides."""

from __future__ import annotations

from abc import ABC, abstractmethod

from zkcert_spec.types import StrictBaseModel

from ..bn254 import Fr
from .types import Standard


class Content(StrictBaseModel, ABC):
    """
    Base class for certificate content.

    Concrete variants define their own fields. The content layout is fully
    determined by the standard it reports, and its hash is what the provider
    signs.
    """

    @abstractmethod
    def hash(self) -> Fr:
        """Poseidon hash of the content fields."""

    @abstractmethod
    def standard(self) -> Standard:
        """The standard this content adheres to."""
