"""Error types for the Talos SDK.

Two families live here:

- ``TalosError`` and its subclasses carry a structured ``code`` (one of
  ``ErrorCode``) plus optional details, request id and cause.  Wallet and
  encoder failures use this family.
- ``VectorError`` and its subclasses are plain conformance failures raised
  while checking a test vector.  They carry a message only.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standard Talos error codes."""

    # Authorization
    DENIED = "TALOS_DENIED"
    INVALID_CAPABILITY = "TALOS_INVALID_CAPABILITY"

    # Protocol
    PROTOCOL_MISMATCH = "TALOS_PROTOCOL_MISMATCH"
    FRAME_INVALID = "TALOS_FRAME_INVALID"

    # Crypto
    CRYPTO_ERROR = "TALOS_CRYPTO_ERROR"
    INVALID_INPUT = "TALOS_INVALID_INPUT"

    # Transport
    TRANSPORT_TIMEOUT = "TALOS_TRANSPORT_TIMEOUT"
    TRANSPORT_ERROR = "TALOS_TRANSPORT_ERROR"


class TalosError(Exception):
    """Canonical structured error for the Talos SDK.

    Args:
        code: One of ``ErrorCode``.
        message: Human-readable message.
        details: Optional extra context, copied into a fresh dict.
        request_id: Optional request identifier.
        cause: Optional underlying exception.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        request_id: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details: dict[str, Any] = dict(details or {})
        self.request_id = request_id
        self.cause = cause
        super().__init__(str(self))
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"[{self.code.value}] {self.message}: {self.cause}"
        return f"[{self.code.value}] {self.message}"

    def unwrap(self) -> BaseException | None:
        """Return the wrapped cause, if any."""
        return self.cause


class InvalidSeedLength(TalosError):
    """Raised when a key seed is not exactly the required length."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            ErrorCode.INVALID_INPUT,
            f"seed must be {expected} bytes",
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class DerivationFailure(TalosError):
    """Raised when the signature scheme fails to expand a seed into a keypair."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(
            ErrorCode.CRYPTO_ERROR,
            "failed to derive key from seed",
            cause=cause,
        )


class EncodingError(TalosError):
    """Raised when a value has no canonical JSON encoding."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(ErrorCode.INVALID_INPUT, message, cause=cause)


# ----------------------------------------------------------------------
# Conformance failures
# ----------------------------------------------------------------------


class VectorError(Exception):
    """Base class for failures raised while evaluating a test vector."""


class UndecodableHex(VectorError):
    """Raised when a hex field of a vector cannot be decoded."""


class UndecodableBase64(VectorError):
    """Raised when a base64url field of a vector cannot be decoded."""


class DIDMismatch(VectorError):
    pass


class SignatureMismatch(VectorError):
    pass


class LengthMismatch(VectorError):
    pass


class SelfVerificationFailure(VectorError):
    pass


class VerificationMismatch(VectorError):
    pass


class UnexpectedSuccess(VectorError):
    """Raised when a negative vector completed without any error."""


class ExpectedErrorMismatch(VectorError):
    """Raised when a negative vector failed, but not in the expected way."""


class CorpusError(Exception):
    """Raised when a vector corpus cannot be read or parsed."""
