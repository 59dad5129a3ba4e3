"""Key derivation using HKDF-SHA256 and key fingerprints."""

import hashlib
import logging
from dataclasses import dataclass

from Crypto.Hash import SHA256
from Crypto.Protocol.KDF import HKDF
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from .types import KEY_LEN, Info, Salt
from .keys import x25519_shared_secret


logger = logging.getLogger(__name__)


def hkdf_expand_with_salt(secret: bytes, salt: bytes, info: bytes, length: int = KEY_LEN) -> bytes:
    """HKDF-SHA256 extract and expand with salt."""
    return HKDF(secret, length, salt=salt, num_keys=1, hashmod=SHA256, context=info)


def derive_key(secret: bytes, salt: Salt, info: Info) -> bytes:
    """
    Derive the symmetric key from an X25519 shared secret.

    key = HKDF-SHA256(secret, salt, info, 32)

    Args:
        secret: Shared secret from key agreement
        salt: Salt agreed with the peer
        info: Application context

    Returns:
        Symmetric key (32 bytes)
    """
    key = hkdf_expand_with_salt(secret, salt.raw, info.info, KEY_LEN)
    logger.debug("derived %d-byte key (salt %d bytes, info %d bytes)",
                 len(key), len(salt.raw), len(info.info))
    return key


class KeyGenerator:
    """Holds a shared secret with its context and derives keys from it."""

    def __init__(self, secret: bytes, info: Info):
        self._secret = secret
        self.info = info

    @classmethod
    def from_secret(cls, secret: bytes, info: Info) -> "KeyGenerator":
        return cls(secret, info)

    def __repr__(self) -> str:
        return f"KeyGenerator(info={self.info!r})"

    def derive_key(self, salt: Salt) -> bytes:
        return derive_key(self._secret, salt, self.info)


def pubkey_to_derived(
    pubkey: X25519PublicKey,
    private_key: X25519PrivateKey,
    info: Info,
    salt: Salt,
) -> bytes:
    """
    Agree on a shared secret with pubkey and derive the symmetric key.

    The shared secret never leaves this function.

    Raises:
        AgreementError: If the key agreement fails
    """
    shared = x25519_shared_secret(private_key, pubkey)
    return KeyGenerator.from_secret(shared, info).derive_key(salt)


def key_to_digest(secret_key: bytes) -> bytes:
    """SHA-256 of a symmetric key, for out-of-band comparison only."""
    return hashlib.sha256(secret_key).digest()


def key_to_digest_hex(secret_key: bytes) -> str:
    return key_to_digest(secret_key).hex()


@dataclass(frozen=True)
class PublicInfo:
    """Everything a peer publishes so that a sender can derive the shared key."""

    pubkey: X25519PublicKey
    salt: Salt
    info: Info

    @classmethod
    def from_salt(cls, salt: Salt, info: Info, pubkey: X25519PublicKey) -> "PublicInfo":
        return cls(pubkey=pubkey, salt=salt, info=info)

    def to_symmetric_key(self, secret_key: X25519PrivateKey) -> bytes:
        """
        Derive the symmetric key shared with the owner of pubkey.

        Raises:
            AgreementError: If the key agreement fails
        """
        return pubkey_to_derived(self.pubkey, secret_key, self.info, self.salt)
