"""Ed25519 signatures with keys derived from a SHA3-256 hashed seed."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey, VerifyKey

from .hashing import sha3_hash

PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64

_FIELD = 2**255 - 19
_D = (-121665 * pow(121666, -1, _FIELD)) % _FIELD
_HEX = re.compile(r"[0-9a-fA-F]*")


class ParsePublicKeyError(ValueError):
    """Raised when a string is not a valid public key."""

    def __init__(self, message: str = "public key invalid") -> None:
        super().__init__(message)


def _is_decompressible(raw: bytes) -> bool:
    """Tell whether ``raw`` is the compressed form of a point on the curve."""
    y = int.from_bytes(raw, "little") & ((1 << 255) - 1)
    y %= _FIELD
    u = (y * y - 1) % _FIELD
    v = (_D * y * y + 1) % _FIELD
    if v == 0:
        return False
    w = u * pow(v, -1, _FIELD) % _FIELD
    return w == 0 or pow(w, (_FIELD - 1) // 2, _FIELD) == 1


@dataclass(frozen=True)
class PublicKey:
    """A 32-byte Ed25519 public key."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != PUBLIC_KEY_SIZE:
            raise ValueError("public key must be 32 bytes")

    @classmethod
    def parse(cls, text: str) -> PublicKey:
        """Parse a ``0x``-prefixed, byte-reversed hex public key."""
        if len(text) != 66 or not text.isascii() or not text.lower().startswith("0x"):
            raise ParsePublicKeyError()
        digits = text[2:]
        if not _HEX.fullmatch(digits):
            raise ParsePublicKeyError()
        raw = bytes.fromhex(digits)[::-1]
        if not _is_decompressible(raw):
            raise ParsePublicKeyError()
        return cls(raw)

    def __str__(self) -> str:
        return "0x" + self.raw[::-1].hex()


@dataclass(frozen=True)
class Signature:
    """A 64-byte Ed25519 signature."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != SIGNATURE_SIZE:
            raise ValueError("signature must be 64 bytes")


@dataclass(frozen=True)
class PrivateKey:
    """An Ed25519 private key, kept as its 32-byte secret seed."""

    secret: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.secret) != 32:
            raise ValueError("secret must be 32 bytes")

    def _signing_key(self) -> SigningKey:
        return SigningKey(self.secret)

    def public_key(self) -> PublicKey:
        return PublicKey(bytes(self._signing_key().verify_key))


def generate_keys(seed: bytes) -> tuple[PublicKey, PrivateKey]:
    """Derive a key pair deterministically from ``seed``."""
    secret = bytearray(sha3_hash(seed))
    secret[31] &= 0x7F
    private_key = PrivateKey(bytes(secret))
    return private_key.public_key(), private_key


def sign(private_key: PrivateKey, message: bytes) -> Signature:
    """Sign ``message`` with ``private_key``."""
    signed = private_key._signing_key().sign(bytes(message))
    return Signature(signed.signature)


def verify(public_key: PublicKey, message: bytes, signature: Signature) -> bool:
    """Return whether ``signature`` is valid for ``message`` under ``public_key``."""
    try:
        VerifyKey(public_key.raw).verify(bytes(message), signature.raw)
    except (CryptoError, ValueError):
        return False
    return True