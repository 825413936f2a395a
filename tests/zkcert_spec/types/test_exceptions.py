"""Tests for the package exception hierarchy."""

import pytest

from zkcert_spec.types import (
    HashComputationError,
    InvalidDepthError,
    InvalidHashEncodingError,
    InvalidLeafIndexError,
    InvalidSignatureError,
    MalformedEncodingError,
    ZkCertError,
)


@pytest.mark.parametrize(
    "error",
    [
        InvalidDepthError(0),
        InvalidLeafIndexError(9, 8),
        HashComputationError("bad input"),
        InvalidHashEncodingError("invalid hash: too wide"),
        InvalidSignatureError("invalid signature"),
        MalformedEncodingError("Fr", "abc", "not a decimal"),
    ],
)
def test_all_errors_share_a_base(error: ZkCertError) -> None:
    """Every error is a `ZkCertError` and carries its message."""
    assert isinstance(error, ZkCertError)
    assert str(error) == error.message


def test_depth_error_message() -> None:
    """The depth error names the rejected depth."""
    error = InvalidDepthError(0)
    assert error.depth == 0
    assert str(error) == "invalid tree depth: 0 (must be at least 1)"


def test_leaf_index_error_message() -> None:
    """The index error names the index and the tree size."""
    error = InvalidLeafIndexError(9, 8)
    assert (error.index, error.leaves_count) == (9, 8)
    assert str(error) == "invalid leaf index 9 for a tree with 8 leaves"


def test_malformed_encoding_is_value_error() -> None:
    """Decoding errors double as `ValueError` and truncate long inputs."""
    error = MalformedEncodingError("Fr", "9" * 80, "too large")
    assert isinstance(error, ValueError)
    assert error.text == "9" * 80
    assert "9" * 47 + "..." in str(error)
    assert str(error).endswith(": too large")


def test_repr() -> None:
    """The repr shows the class and message."""
    assert repr(HashComputationError("oops")) == "HashComputationError('oops')"
