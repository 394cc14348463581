"""Shared fixtures: RFC 8032 Ed25519 test vector 1 and corpus helpers."""

from __future__ import annotations

import pytest

from talos_sdk.vectors import ExpectedError, TestVector

# RFC 8032, section 7.1, TEST 1 (empty message)
RFC8032_SEED_HEX = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
RFC8032_PUBLIC_HEX = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
RFC8032_SIGNATURE_HEX = (
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555"
    "fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


@pytest.fixture()
def rfc_seed() -> bytes:
    return bytes.fromhex(RFC8032_SEED_HEX)


@pytest.fixture()
def rfc_public_key() -> bytes:
    return bytes.fromhex(RFC8032_PUBLIC_HEX)


@pytest.fixture()
def rfc_signature() -> bytes:
    return bytes.fromhex(RFC8032_SIGNATURE_HEX)


@pytest.fixture()
def make_vector():
    """Factory for TestVector instances."""

    def _make(
        test_id: str,
        inputs: dict | None = None,
        expected: dict | None = None,
        code: str | None = None,
        message_contains: str | None = None,
    ) -> TestVector:
        expected_error = None
        if code is not None or message_contains is not None:
            expected_error = ExpectedError(
                code=code or "", message_contains=message_contains or ""
            )
        return TestVector(
            test_id=test_id,
            inputs=inputs or {},
            expected=expected or {},
            expected_error=expected_error,
        )

    return _make
