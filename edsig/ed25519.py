"""Ed25519 key generation, signing and verification."""

from __future__ import annotations

import hashlib
import hmac
import os

from edsig.group import Point, double_scalarmult, scalarmult_base
from edsig.scalar import Scalar

__all__ = [
    "PRIVATE_KEY_SIZE",
    "PUBLIC_KEY_SIZE",
    "SIGNATURE_SIZE",
    "HASH_SIZE",
    "Ed25519Error",
    "create_keypair",
    "derive_public_key",
    "sign",
    "verify",
    "compute_hram",
]

PRIVATE_KEY_SIZE = 32
"""Length of a private key (the seed that is hashed into the secret scalar)."""
PUBLIC_KEY_SIZE = 32
"""Length of an encoded public key."""
SIGNATURE_SIZE = 64
"""Length of a signature: 32 bytes of R followed by 32 bytes of S."""
HASH_SIZE = 64
"""Length of a SHA-512 digest."""

_HALF = 32
_S_HIGH_BITS = 0xE0


class Ed25519Error(Exception):
    """Raised when a key pair cannot be created."""


def _as_bytes(data: object, what: str) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes-like, got {type(data).__name__}")
    return bytes(data)


def _fixed(data: object, size: int, what: str) -> bytes:
    raw = _as_bytes(data, what)
    if len(raw) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(raw)}")
    return raw


def _expand(private_key: bytes) -> tuple[Scalar, bytes]:
    """Hash the private key into the clamped secret scalar and the nonce prefix."""
    az = bytearray(hashlib.sha512(private_key).digest())
    az[0] &= 248
    az[31] &= 127
    az[31] |= 64
    return Scalar.from_bytes32(bytes(az[:_HALF])), bytes(az[_HALF:])


def _hram(r: bytes, public_key: bytes, message: bytes) -> Scalar:
    digest = hashlib.sha512()
    digest.update(r)
    digest.update(public_key)
    digest.update(message)
    return Scalar.from_bytes64(digest.digest())


def create_keypair() -> tuple[bytes, bytes]:
    """Create a random key pair, returned as (private_key, public_key).

    Raises Ed25519Error if the system cannot supply random bytes.
    """
    try:
        private_key = os.urandom(PRIVATE_KEY_SIZE)
    except (OSError, NotImplementedError) as exc:
        raise Ed25519Error("random number generator failed") from exc
    return private_key, derive_public_key(private_key)


def derive_public_key(private_key: bytes) -> bytes:
    """The public key that belongs to a private key."""
    sk = _fixed(private_key, PRIVATE_KEY_SIZE, "private key")
    a, _ = _expand(sk)
    return scalarmult_base(a).to_bytes()


def sign(message: bytes, public_key: bytes, private_key: bytes) -> bytes:
    """Sign a message, returning the 64-byte signature R || S."""
    msg = _as_bytes(message, "message")
    pk = _fixed(public_key, PUBLIC_KEY_SIZE, "public key")
    sk = _fixed(private_key, PRIVATE_KEY_SIZE, "private key")

    a, prefix = _expand(sk)
    nonce = Scalar.from_bytes64(hashlib.sha512(prefix + msg).digest())
    r = scalarmult_base(nonce).to_bytes()
    h = _hram(r, pk, msg)
    s = h * a + nonce
    return r + s.to_bytes()


def verify(signature: bytes, message: bytes, public_key: bytes) -> bool:
    """Whether the signature is valid for the message under the public key."""
    sig = _fixed(signature, SIGNATURE_SIZE, "signature")
    msg = _as_bytes(message, "message")
    pk = _fixed(public_key, PUBLIC_KEY_SIZE, "public key")

    if sig[63] & _S_HIGH_BITS:
        return False
    try:
        negated_a = Point.from_bytes_negated(pk)
    except ValueError:
        return False

    r = sig[:_HALF]
    s = Scalar.from_bytes32(sig[_HALF:])
    h = _hram(r, pk, msg)
    rcheck = double_scalarmult(negated_a, h, s).to_bytes()
    return hmac.compare_digest(r, rcheck)


def compute_hram(signed_message: bytes, public_key: bytes) -> bytes:
    """SHA-512 of R || A || M for a signed message laid out as R || S || M."""
    sm = _as_bytes(signed_message, "signed message")
    pk = _fixed(public_key, PUBLIC_KEY_SIZE, "public key")
    if len(sm) < SIGNATURE_SIZE:
        raise ValueError(
            f"signed message must be at least {SIGNATURE_SIZE} bytes, got {len(sm)}"
        )
    return hashlib.sha512(sm[:_HALF] + pk + sm[SIGNATURE_SIZE:]).digest()