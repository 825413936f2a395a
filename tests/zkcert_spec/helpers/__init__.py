"""Test helpers for zkcert_spec unit tests."""

from .builders import (
    SampleContent,
    make_certificate,
    make_expiration,
    make_private_key,
)

__all__ = [
    "SampleContent",
    "make_certificate",
    "make_expiration",
    "make_private_key",
]
