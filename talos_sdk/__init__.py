"""Talos SDK for Python.

Derive Ed25519 did:key identities from seeds, produce canonical JSON, and
run conformance test vectors against both.
"""

from .wallet import Wallet, verify
from .did import (
    base58_encode,
    base58_decode,
    format_did,
    parse_did,
    validate_did,
)
from .canonical import canonical_json
from .crypto import base64url_encode, base64url_decode, sha256
from .errors import (
    ErrorCode,
    TalosError,
    InvalidSeedLength,
    DerivationFailure,
    EncodingError,
    VectorError,
    CorpusError,
)
from .vectors import TestVector, ExpectedError, VectorCorpus, load_corpus
from .runner import ConformanceRunner, RunnerConfig, TestOutcome
from .report import RunReport, generate, to_junit_xml, write_report

__all__ = [
    "Wallet",
    "verify",
    "base58_encode",
    "base58_decode",
    "format_did",
    "parse_did",
    "validate_did",
    "canonical_json",
    "base64url_encode",
    "base64url_decode",
    "sha256",
    "ErrorCode",
    "TalosError",
    "InvalidSeedLength",
    "DerivationFailure",
    "EncodingError",
    "VectorError",
    "CorpusError",
    "TestVector",
    "ExpectedError",
    "VectorCorpus",
    "load_corpus",
    "ConformanceRunner",
    "RunnerConfig",
    "TestOutcome",
    "RunReport",
    "generate",
    "to_junit_xml",
    "write_report",
]
__version__ = "0.1.0"
