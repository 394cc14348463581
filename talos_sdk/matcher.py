"""Evaluate one test vector and classify its outcome.

A vector is routed once, by the literal prefix of its id:

- ``sign_`` / ``invalid_seed``: signing evaluation
- ``verify_``: verification evaluation
- anything else: skipped, counted as a pass with no checks

Evaluation raises on the first failed check.  ``classify`` then applies
positive or negative semantics to the error (or its absence).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from . import crypto
from .errors import (
    DIDMismatch,
    ExpectedErrorMismatch,
    LengthMismatch,
    SelfVerificationFailure,
    SignatureMismatch,
    TalosError,
    UndecodableBase64,
    UndecodableHex,
    UnexpectedSuccess,
    VerificationMismatch,
)
from .vectors import TestVector, get_bool, get_int, get_str
from .wallet import Wallet, verify


class VectorKind(Enum):
    SIGN = "sign"
    VERIFY = "verify"
    SKIP = "skip"


# Checked in order; the first matching prefix wins.
ROUTES: tuple[tuple[str, VectorKind], ...] = (
    ("sign_", VectorKind.SIGN),
    ("invalid_seed", VectorKind.SIGN),
    ("verify_", VectorKind.VERIFY),
)


def route(test_id: str) -> VectorKind:
    """Map a vector id to the evaluation it exercises."""
    for prefix, kind in ROUTES:
        if test_id.startswith(prefix):
            return kind
    return VectorKind.SKIP


def _decode_hex(value: str, field_name: str) -> bytes:
    try:
        return crypto.decode_hex(value)
    except ValueError as exc:
        raise UndecodableHex(f"{field_name}: {exc}") from exc


def evaluate_sign(vector: TestVector) -> None:
    """Derive a wallet from ``inputs.seed_hex``, sign, and check expectations."""
    inputs = vector.inputs
    expected = vector.expected

    seed_hex = get_str(inputs, "seed_hex")
    if not seed_hex:
        return
    message = (get_str(inputs, "message_utf8") or "").encode("utf-8")

    wallet = Wallet.from_seed(_decode_hex(seed_hex, "seed_hex"))

    expected_did = get_str(expected, "did")
    if expected_did is not None and wallet.did != expected_did:
        raise DIDMismatch(f"DID mismatch: want {expected_did}, got {wallet.did}")

    signature = wallet.sign(message)

    expected_sig = get_str(expected, "signature_base64url")
    if expected_sig is not None:
        encoded = crypto.base64url_encode(signature)
        if encoded != expected_sig:
            raise SignatureMismatch(
                f"signature mismatch: want {expected_sig}, got {encoded}"
            )

    expected_len = get_int(expected, "signature_length")
    if expected_len is not None and len(signature) != expected_len:
        raise LengthMismatch(
            f"signature length mismatch: want {expected_len}, got {len(signature)}"
        )

    if get_bool(expected, "verify") is True:
        if not verify(wallet.public_key, message, signature):
            raise SelfVerificationFailure("self verification failed")


def _resolve_public_key(inputs: Mapping[str, Any]) -> bytes:
    for key in ("public_key_hex", "wrong_public_key_hex"):
        value = get_str(inputs, key)
        if value is not None:
            # A malformed key fails verification rather than the evaluation.
            try:
                return crypto.decode_hex(value)
            except ValueError:
                return b""
    seed_hex = get_str(inputs, "seed_hex")
    if seed_hex is not None:
        return Wallet.from_seed(_decode_hex(seed_hex, "seed_hex")).public_key
    return b""


def evaluate_verify(vector: TestVector) -> None:
    """Verify ``inputs.signature_base64url`` and compare with ``expected.verify``."""
    inputs = vector.inputs

    public_key = _resolve_public_key(inputs)

    message = get_str(inputs, "message_utf8") or ""
    tampered = get_str(inputs, "tampered_message")
    if tampered is not None:
        message = tampered

    signature = b""
    sig_text = get_str(inputs, "signature_base64url")
    if sig_text is not None:
        try:
            signature = crypto.base64url_decode(sig_text)
        except ValueError as exc:
            raise UndecodableBase64(f"signature_base64url: {exc}") from exc

    success = verify(public_key, message.encode("utf-8"), signature)

    want = get_bool(vector.expected, "verify")
    if want is not None and success != want:
        raise VerificationMismatch(
            f"verification result mismatch: want {str(want).lower()}, got {str(success).lower()}"
        )


_EVALUATORS = {
    VectorKind.SIGN: evaluate_sign,
    VectorKind.VERIFY: evaluate_verify,
}


def execute(kind: VectorKind, vector: TestVector) -> Exception | None:
    """Run the evaluation for ``kind``, capturing any error it raises."""
    try:
        _EVALUATORS[kind](vector)
    except Exception as exc:
        return exc
    return None


def classify(vector: TestVector, error: Exception | None, negative: bool) -> Exception | None:
    """Apply positive or negative semantics to an evaluation result.

    Returns:
        None if the vector passes, otherwise the error describing the failure.
    """
    if not negative:
        return error

    if error is None:
        # A deliberate "verification returned false" satisfies a negative case.
        if get_bool(vector.expected, "verify") is False:
            return None
        return UnexpectedSuccess("expected error but operation succeeded")

    want = vector.expected_error
    if want is None:
        return None

    if want.message_contains:
        if want.message_contains.lower() not in str(error).lower():
            return ExpectedErrorMismatch(
                f"error message mismatch: want '{want.message_contains}', got '{error}'"
            )
    # Only structured errors carry a code; for anything else the check is skipped.
    if want.code and isinstance(error, TalosError):
        if error.code.value != want.code:
            return ExpectedErrorMismatch(
                f"error code mismatch: want {want.code}, got {error.code.value}"
            )
    return None


def evaluate(vector: TestVector, negative: bool) -> Exception | None:
    """Evaluate a vector and classify the result.

    Returns:
        None if the vector passes, otherwise the failure error.
    """
    kind = route(vector.test_id)
    if kind is VectorKind.SKIP:
        return None
    return classify(vector, execute(kind, vector), negative)
