"""DER and PEM encoding of X25519 public keys.

The DER form is a fixed 44-byte SubjectPublicKeyInfo:

    30 2a                 SEQUENCE, 42 bytes
       30 05              SEQUENCE, 5 bytes (AlgorithmIdentifier)
          06 03 2b 65 6e  OID 1.3.101.110 (X25519)
       03 21 00           BIT STRING, 33 bytes, 0 unused bits
    <32 raw key bytes>

PEM output keeps the base64 body on one line (no 64-column folding).
"""

import base64
import binascii

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PublicKey

from .types import X25519_PUBLIC_KEY_SIZE
from .keys import public_key_to_raw, raw_to_public_key
from .error import InvalidArgument, DecodingError


DER_PREFIX_X25519: bytes = bytes([
    0x30, 0x2a,
    0x30, 0x05,
    0x06, 0x03, 0x2b, 0x65, 0x6e,
    0x03, 0x21, 0x00,
])

DER_LEN_X25519: int = len(DER_PREFIX_X25519) + X25519_PUBLIC_KEY_SIZE

PEM_HEADER: str = "-----BEGIN PUBLIC KEY-----"
PEM_FOOTER: str = "-----END PUBLIC KEY-----"


def pubkey_to_der(pubkey: X25519PublicKey) -> bytes:
    """Encode a public key as a 44-byte DER SubjectPublicKeyInfo."""
    return DER_PREFIX_X25519 + public_key_to_raw(pubkey)


def pubkey_to_pem(pubkey: X25519PublicKey) -> str:
    body = base64.b64encode(pubkey_to_der(pubkey)).decode("ascii")
    return PEM_HEADER + "\n" + body + "\n" + PEM_FOOTER


def der_to_pubkey(der: bytes) -> X25519PublicKey:
    """
    Decode a DER SubjectPublicKeyInfo produced by pubkey_to_der.

    Raises:
        InvalidArgument: If the length or the prefix does not match
    """
    if len(der) != DER_LEN_X25519:
        raise InvalidArgument(f"DER public key must be {DER_LEN_X25519} bytes, got {len(der)}")
    if der[:len(DER_PREFIX_X25519)] != DER_PREFIX_X25519:
        raise InvalidArgument("DER prefix is not an X25519 SubjectPublicKeyInfo")
    return raw_to_public_key(der[len(DER_PREFIX_X25519):])


def pem_to_pubkey(pem: str) -> X25519PublicKey:
    """
    Decode a PEM public key, accepting both single-line and folded bodies.

    Raises:
        InvalidArgument: If the markers are missing or the body is not base64
    """
    text = pem.strip()
    if not text.startswith(PEM_HEADER) or not text.endswith(PEM_FOOTER):
        raise InvalidArgument("missing PEM header or footer")
    body = "".join(text[len(PEM_HEADER):-len(PEM_FOOTER)].split())
    try:
        der = base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise DecodingError(f"invalid PEM body: {e}") from e
    return der_to_pubkey(der)
