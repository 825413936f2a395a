"""
Shared pytest fixtures for all zkcert_spec tests.

Import these fixtures automatically via pytest discovery.
"""

from __future__ import annotations

import pytest

from zkcert_spec.subspecs.babyjub import PrivateKey
from zkcert_spec.subspecs.bn254 import Fr
from zkcert_spec.subspecs.zkcertificate import Certificate
from tests.zkcert_spec.helpers import SampleContent, make_certificate, make_private_key


@pytest.fixture(scope="session")
def provider_key() -> PrivateKey:
    """The provider signing key."""
    return make_private_key(1)


@pytest.fixture(scope="session")
def other_key() -> PrivateKey:
    """A key unrelated to the provider."""
    return make_private_key(100)


@pytest.fixture
def content() -> SampleContent:
    """Sample certificate content."""
    return SampleContent(name_hash=Fr(123456789), year_of_birth=1990)


@pytest.fixture
def holder_commitment() -> Fr:
    """Sample holder commitment."""
    return Fr(42)


@pytest.fixture(scope="session")
def certificate(provider_key: PrivateKey) -> Certificate[SampleContent]:
    """A valid certificate signed by `provider_key`."""
    return make_certificate(provider_key)
