"""
pubkey2derived: X25519 + HKDF-SHA256 shared key derivation

Derives a 256-bit symmetric key shared between two parties from one party's
X25519 private key and the other party's public key, bound to a random salt
and an application context string.

Features:
- Raw 32-byte X25519 key import with length validation
- Key agreement rejecting low-order peer points
- HKDF-SHA256 with salt (>= 32 bytes) and context info
- 44-byte DER and single-line PEM public key encoding
- SHA-256 fingerprints for out-of-band key comparison

The shared secret itself is never returned, only the HKDF output.
"""

from .types import (
    KEY_LEN,
    X25519_PUBLIC_KEY_SIZE,
    X25519_PRIVATE_KEY_SIZE,
    SALT_MIN_LEN,
    DEFAULT_INFO,
    Salt,
    Info,
    DemoConfig,
)
from .keys import (
    generate_private_key,
    derive_public_key,
    public_key_to_raw,
    raw_to_public_key,
    raw_to_private_key,
    x25519_shared_secret,
)
from .kdf import (
    derive_key,
    KeyGenerator,
    PublicInfo,
    pubkey_to_derived,
    key_to_digest,
    key_to_digest_hex,
)
from .encoding import (
    DER_PREFIX_X25519,
    PEM_HEADER,
    PEM_FOOTER,
    pubkey_to_der,
    pubkey_to_pem,
    der_to_pubkey,
    pem_to_pubkey,
)
from .combined import Combined
from .error import (
    Pubkey2DerivedError,
    InvalidArgument,
    DecodingError,
    AgreementError,
    ConfigError,
)

__version__ = "0.1.0"
__all__ = [
    # Constants
    "KEY_LEN",
    "X25519_PUBLIC_KEY_SIZE",
    "X25519_PRIVATE_KEY_SIZE",
    "SALT_MIN_LEN",
    "DEFAULT_INFO",
    "DER_PREFIX_X25519",
    "PEM_HEADER",
    "PEM_FOOTER",
    # Types
    "Salt",
    "Info",
    "PublicInfo",
    "DemoConfig",
    "Combined",
    # Keys
    "generate_private_key",
    "derive_public_key",
    "public_key_to_raw",
    "raw_to_public_key",
    "raw_to_private_key",
    "x25519_shared_secret",
    # KDF
    "derive_key",
    "KeyGenerator",
    "pubkey_to_derived",
    "key_to_digest",
    "key_to_digest_hex",
    # Encoding
    "pubkey_to_der",
    "pubkey_to_pem",
    "der_to_pubkey",
    "pem_to_pubkey",
    # Error
    "Pubkey2DerivedError",
    "InvalidArgument",
    "DecodingError",
    "AgreementError",
    "ConfigError",
]
