"""Ed25519 cryptography and encoding utilities."""

from __future__ import annotations

import base64
import binascii
import hashlib
import re

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")
_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def public_key_bytes(private_key: Ed25519PrivateKey) -> bytes:
    """Return the 32-byte raw public key for a private key object."""
    return private_key.public_key().public_bytes(
        serialization.Encoding.Raw,
        serialization.PublicFormat.Raw,
    )


def keypair_from_seed(seed: bytes) -> tuple[Ed25519PrivateKey, bytes]:
    """Expand a 32-byte seed into an Ed25519 keypair.

    Args:
        seed: 32-byte Ed25519 seed.

    Returns:
        Tuple of (private_key, public_key_bytes).

    Raises:
        ValueError: If the seed is rejected by the primitive.
    """
    private_key = Ed25519PrivateKey.from_private_bytes(seed)
    return private_key, public_key_bytes(private_key)


def generate_seed() -> bytes:
    """Generate a fresh random 32-byte Ed25519 seed."""
    private_key = Ed25519PrivateKey.generate()
    return private_key.private_bytes(
        serialization.Encoding.Raw,
        serialization.PrivateFormat.Raw,
        serialization.NoEncryption(),
    )


def sign(payload: bytes, private_key: Ed25519PrivateKey) -> bytes:
    """Sign a payload, returning the 64-byte Ed25519 signature."""
    return private_key.sign(payload)


def verify(payload: bytes, signature: bytes, public_key: bytes) -> bool:
    """Verify an Ed25519 signature.

    Args:
        payload: The bytes that were signed.
        signature: 64-byte Ed25519 signature.
        public_key: 32-byte raw public key.

    Returns:
        True if valid, False otherwise.
    """
    try:
        key = Ed25519PublicKey.from_public_bytes(public_key)
        key.verify(signature, payload)
        return True
    except (InvalidSignature, ValueError):
        return False


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of data."""
    return hashlib.sha256(data).digest()


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of data."""
    return hashlib.sha256(data).hexdigest()


def decode_hex(s: str) -> bytes:
    """Decode a hex string strictly (even length, no whitespace).

    Raises:
        ValueError: If ``s`` is not valid hex.
    """
    if not _HEX_RE.fullmatch(s):
        raise ValueError(f"invalid hex string: {s!r}")
    return bytes.fromhex(s)


def base64url_encode(data: bytes) -> str:
    """Encode bytes to base64url with no padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def base64url_decode(s: str) -> bytes:
    """Decode an unpadded base64url string to bytes.

    Padding characters are rejected, as is any character outside the
    base64url alphabet.

    Raises:
        ValueError: If ``s`` is not valid unpadded base64url.
    """
    if not _BASE64URL_RE.fullmatch(s) or len(s) % 4 == 1:
        raise ValueError(f"invalid unpadded base64url string: {s!r}")
    try:
        return base64.urlsafe_b64decode(s + "=" * (-len(s) % 4))
    except binascii.Error as exc:
        raise ValueError(f"invalid unpadded base64url string: {s!r}") from exc
