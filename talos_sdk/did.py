"""did:key identifiers for Ed25519 public keys.

DID format: did:key:z{base58btc(0xED 0x01 || public_key)}

- 0xED 0x01 is the multicodec tag for an Ed25519 public key.
- 'z' is the multibase prefix for base58btc (Bitcoin alphabet).
- The decoded payload is always 34 bytes.
"""

from __future__ import annotations

from .crypto import PUBLIC_KEY_SIZE

# Bitcoin alphabet: no 0, O, I or l
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {ch: i for i, ch in enumerate(BASE58_ALPHABET)}

ED25519_MULTICODEC_PREFIX = b"\xed\x01"
DID_KEY_PREFIX = "did:key:z"


def base58_encode(data: bytes) -> str:
    """Encode bytes as base58 (Bitcoin alphabet).

    The input is read as a big-endian integer and divided by 58 until zero;
    the remainders, reversed, are the digits.  Each leading zero byte of the
    input then adds one leading '1'.
    """
    num = int.from_bytes(data, "big")
    digits: list[str] = []
    while num > 0:
        num, rem = divmod(num, 58)
        digits.append(BASE58_ALPHABET[rem])
    digits.reverse()

    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    return BASE58_ALPHABET[0] * leading_zeros + "".join(digits)


def base58_decode(s: str) -> bytes:
    """Decode a base58 (Bitcoin alphabet) string to bytes.

    Raises:
        ValueError: If ``s`` contains a character outside the alphabet.
    """
    num = 0
    for ch in s:
        index = _BASE58_INDEX.get(ch)
        if index is None:
            raise ValueError(f"invalid base58 character: {ch!r}")
        num = num * 58 + index

    leading_ones = len(s) - len(s.lstrip(BASE58_ALPHABET[0]))
    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    return b"\x00" * leading_ones + body


def format_did(public_key: bytes) -> str:
    """Build the did:key identifier for a 32-byte Ed25519 public key."""
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise ValueError(
            f"public key must be {PUBLIC_KEY_SIZE} bytes, got {len(public_key)}"
        )
    return DID_KEY_PREFIX + base58_encode(ED25519_MULTICODEC_PREFIX + public_key)


def parse_did(did: str) -> dict:
    """Parse a did:key string and extract its components.

    Returns:
        Dict with keys: 'method', 'multicodec', 'public_key'.

    Raises:
        ValueError: If the DID is not a valid Ed25519 did:key.
    """
    if not did.startswith(DID_KEY_PREFIX):
        raise ValueError(f"Invalid DID: {did!r}")
    try:
        payload = base58_decode(did[len(DID_KEY_PREFIX):])
    except ValueError as exc:
        raise ValueError(f"Invalid DID: {did!r}") from exc

    expected_len = len(ED25519_MULTICODEC_PREFIX) + PUBLIC_KEY_SIZE
    if len(payload) != expected_len or not payload.startswith(ED25519_MULTICODEC_PREFIX):
        raise ValueError(f"Invalid DID: {did!r}")
    return {
        "method": "key",
        "multicodec": payload[: len(ED25519_MULTICODEC_PREFIX)],
        "public_key": payload[len(ED25519_MULTICODEC_PREFIX):],
    }


def validate_did(did: str) -> bool:
    """Return True if ``did`` is a well-formed Ed25519 did:key, else False."""
    try:
        parse_did(did)
    except ValueError:
        return False
    return True
