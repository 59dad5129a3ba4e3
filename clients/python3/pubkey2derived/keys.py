"""X25519 key handling and key agreement."""

import hmac
import logging

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from .types import X25519_PUBLIC_KEY_SIZE, X25519_PRIVATE_KEY_SIZE
from .error import InvalidArgument, DecodingError, AgreementError


logger = logging.getLogger(__name__)

_ZERO_SECRET = bytes(32)


def generate_private_key() -> X25519PrivateKey:
    """Generate a new X25519 private key from the OS random source."""
    return X25519PrivateKey.generate()


def derive_public_key(private_key: X25519PrivateKey) -> X25519PublicKey:
    return private_key.public_key()


def public_key_to_raw(public_key: X25519PublicKey) -> bytes:
    """Return the 32 raw bytes of a public key."""
    return public_key.public_bytes_raw()


def raw_to_public_key(raw: bytes) -> X25519PublicKey:
    """
    Convert raw data (32 bytes) to an X25519 public key.

    Args:
        raw: Peer's raw public key

    Returns:
        Public key

    Raises:
        InvalidArgument: If raw is not exactly 32 bytes
        DecodingError: If the bytes are rejected as a public key
    """
    if len(raw) != X25519_PUBLIC_KEY_SIZE:
        raise InvalidArgument(
            f"public key must be {X25519_PUBLIC_KEY_SIZE} bytes, got {len(raw)}"
        )
    try:
        public_key = X25519PublicKey.from_public_bytes(bytes(raw))
    except ValueError as e:
        raise DecodingError(f"invalid public key: {e}") from e
    logger.debug("decoded X25519 public key")
    return public_key


def raw_to_private_key(raw: bytes) -> X25519PrivateKey:
    """
    Convert a raw 32-byte secret to an X25519 private key.

    Raises:
        InvalidArgument: If raw is not exactly 32 bytes
        DecodingError: If the bytes are rejected as a private key
    """
    if len(raw) != X25519_PRIVATE_KEY_SIZE:
        raise InvalidArgument(
            f"private key must be {X25519_PRIVATE_KEY_SIZE} bytes, got {len(raw)}"
        )
    try:
        return X25519PrivateKey.from_private_bytes(bytes(raw))
    except ValueError as e:
        raise DecodingError(f"invalid private key: {e}") from e


def x25519_shared_secret(private_key: X25519PrivateKey, peer_public_key: X25519PublicKey) -> bytes:
    """
    Compute the X25519 shared secret.

    Args:
        private_key: Our X25519 private key
        peer_public_key: Peer's X25519 public key

    Returns:
        Shared secret (32 bytes)

    Raises:
        AgreementError: If the peer key is a low-order point
    """
    try:
        shared = private_key.exchange(peer_public_key)
    except ValueError as e:
        raise AgreementError(f"key agreement failed: {e}") from e
    # Low-order peer points yield the all-zero secret
    if hmac.compare_digest(shared, _ZERO_SECRET):
        raise AgreementError("key agreement produced an all-zero secret")
    return shared
