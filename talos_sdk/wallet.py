"""Wallet: a Talos identity derived from a 32-byte seed."""

from __future__ import annotations

from cryptography.exceptions import UnsupportedAlgorithm

from . import crypto
from .did import format_did
from .errors import DerivationFailure, InvalidSeedLength


class Wallet:
    """An Ed25519 identity.

    A Wallet holds a private seed, the public key derived from it, and an
    optional display name.  The public key is always computed from the seed;
    the two are never set independently.  Use ``from_seed`` or ``generate``
    to build one.
    """

    def __init__(self, seed: bytes, name: str | None = None) -> None:
        if len(seed) != crypto.SEED_SIZE:
            raise InvalidSeedLength(crypto.SEED_SIZE, len(seed))
        try:
            private_key, public_key = crypto.keypair_from_seed(seed)
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise DerivationFailure(exc) from exc
        self._private_key = private_key
        self._public_key = public_key
        self._name = name

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_seed(cls, seed: bytes, name: str | None = None) -> "Wallet":
        """Deterministically derive a wallet from a 32-byte seed.

        Args:
            seed: 32-byte Ed25519 seed.
            name: Optional display name.

        Raises:
            InvalidSeedLength: If ``seed`` is not 32 bytes.
            DerivationFailure: If the signature scheme rejects the seed.
        """
        return cls(seed, name)

    @classmethod
    def generate(cls, name: str | None = None) -> "Wallet":
        """Create a wallet from a fresh random seed."""
        return cls(crypto.generate_seed(), name)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def public_key(self) -> bytes:
        """The 32-byte raw Ed25519 public key."""
        return self._public_key

    @property
    def address(self) -> str:
        """Hex SHA-256 of the public key (64 characters)."""
        return crypto.sha256_hex(self._public_key)

    @property
    def did(self) -> str:
        """The did:key identifier of this wallet."""
        return format_did(self._public_key)

    def __repr__(self) -> str:
        return f"Wallet(did={self.did!r}, name={self._name!r})"

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    def sign(self, message: bytes) -> bytes:
        """Sign a message, returning the 64-byte Ed25519 signature."""
        return crypto.sign(message, self._private_key)


def verify(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """Verify an Ed25519 signature.

    A public key that is not exactly 32 bytes is a verification failure,
    not an error: False is returned without calling the primitive.
    """
    if len(public_key) != crypto.PUBLIC_KEY_SIZE:
        return False
    return crypto.verify(message, signature, public_key)
