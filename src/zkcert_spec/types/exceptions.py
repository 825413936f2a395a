"""Exception hierarchy for the certificate registry primitives."""

from __future__ import annotations


class ZkCertError(Exception):
    """
    Base exception for all errors raised by this package.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidDepthError(ZkCertError):
    """
    Raised when a Merkle tree is requested with an unusable depth.

    Attributes:
        depth: The rejected depth.
    """

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(f"invalid tree depth: {depth} (must be at least 1)")


class InvalidLeafIndexError(ZkCertError):
    """
    Raised when a leaf index falls outside `[0, leaves_count)`.

    Attributes:
        index: The rejected leaf index.
        leaves_count: Number of leaves in the tree.
    """

    def __init__(self, index: int, leaves_count: int) -> None:
        self.index = index
        self.leaves_count = leaves_count
        super().__init__(f"invalid leaf index {index} for a tree with {leaves_count} leaves")


class HashComputationError(ZkCertError):
    """Raised when the Poseidon hash rejects its inputs."""


class InvalidHashEncodingError(ZkCertError):
    """
    Raised when a hash output cannot be represented as a tree value.

    This signals a broken hash implementation. Callers must not retry.
    """


class InvalidSignatureError(ZkCertError):
    """Raised when a provider signature does not verify during certificate construction."""


class MalformedEncodingError(ZkCertError, ValueError):
    """
    Raised when a textual encoding (decimal field element, address) is invalid.

    Also a `ValueError`, so pydantic validators surface it as a validation error.

    Attributes:
        type_name: The type being decoded.
        text: The offending input (truncated for display).
    """

    def __init__(self, type_name: str, text: str, detail: str) -> None:
        self.type_name = type_name
        self.text = text
        shown = text if len(text) <= 50 else text[:47] + "..."
        super().__init__(f"Failed to decode {type_name} from {shown!r}: {detail}")
