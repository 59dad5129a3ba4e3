"""Tests for salt/info types and public key encoding."""

import base64

import pytest

from pubkey2derived import (
    DER_PREFIX_X25519,
    PEM_HEADER,
    PEM_FOOTER,
    DEFAULT_INFO,
    Salt,
    Info,
    generate_private_key,
    derive_public_key,
    public_key_to_raw,
    raw_to_public_key,
    pubkey_to_der,
    pubkey_to_pem,
    der_to_pubkey,
    pem_to_pubkey,
    InvalidArgument,
)


def test_salt_boundary():
    """31 bytes is rejected, 32 accepted, no upper bound."""
    with pytest.raises(InvalidArgument, match="too short salt"):
        Salt.from_raw(bytes(31))

    assert Salt.from_raw(bytes(32)).raw == bytes(32)
    assert len(Salt.from_raw(b"\xff" * 1024).raw) == 1024


def test_salt_constructor_validates():
    """The plain constructor enforces the same minimum as from_raw."""
    with pytest.raises(InvalidArgument, match="too short salt"):
        Salt(raw=bytes(31))

    with pytest.raises(InvalidArgument):
        Salt(raw=b"")

    salt = Salt(raw=bytearray(32))
    assert isinstance(salt.raw, bytes)
    assert salt == Salt.from_raw(bytes(32))


def test_salt_generate():
    a = Salt.generate()
    b = Salt.generate(48)

    assert len(a.raw) == 32
    assert len(b.raw) == 48
    assert a != Salt.generate()

    with pytest.raises(InvalidArgument):
        Salt.generate(16)


def test_salt_base64():
    salt = Salt.from_raw(bytes(32))
    assert salt.to_base64() == base64.b64encode(bytes(32)).decode()
    assert salt.to_base64() in repr(salt)


def test_info_concatenation_order():
    info = Info.new_info(b"A", b"BB", b"CCC")

    assert info.info == b"ABBCCC"
    assert len(info.info) == 6
    assert Info.new_info(b"", b"", b"").info == b""


def test_default_info():
    assert DEFAULT_INFO.info == b"com.github.takanoriyanagitanipubkey2derivedalice-bob"
    assert base64.b64decode(DEFAULT_INFO.to_base64()) == DEFAULT_INFO.info


def test_der_structure():
    pub = derive_public_key(generate_private_key())
    der = pubkey_to_der(pub)

    assert len(der) == 44
    assert der[:12] == bytes.fromhex("302a300506032b656e032100")
    assert der[:12] == DER_PREFIX_X25519
    assert der[12:] == public_key_to_raw(pub)


def test_der_matches_cryptography():
    """The fixed prefix agrees with a real SubjectPublicKeyInfo encoder."""
    from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

    pub = derive_public_key(generate_private_key())
    assert pubkey_to_der(pub) == pub.public_bytes(Encoding.DER, PublicFormat.SubjectPublicKeyInfo)


def test_pem_shape():
    pub = derive_public_key(generate_private_key())
    pem = pubkey_to_pem(pub)

    assert pem.startswith(PEM_HEADER + "\n")
    assert pem.endswith("\n" + PEM_FOOTER)

    lines = pem.split("\n")
    assert len(lines) == 3
    assert base64.b64decode(lines[1]) == pubkey_to_der(pub)


def test_pem_loads_with_cryptography():
    from cryptography.hazmat.primitives.serialization import load_pem_public_key

    pub = derive_public_key(generate_private_key())
    loaded = load_pem_public_key(pubkey_to_pem(pub).encode())

    assert public_key_to_raw(loaded) == public_key_to_raw(pub)


def test_der_and_pem_decode():
    pub = derive_public_key(generate_private_key())
    raw = public_key_to_raw(pub)

    assert public_key_to_raw(der_to_pubkey(pubkey_to_der(pub))) == raw
    assert public_key_to_raw(pem_to_pubkey(pubkey_to_pem(pub))) == raw


def test_pem_decode_accepts_folded_body():
    pub = raw_to_public_key(bytes(range(32)))
    body = base64.b64encode(pubkey_to_der(pub)).decode()
    folded = "\n".join([PEM_HEADER, body[:40], body[40:], PEM_FOOTER, ""])

    assert public_key_to_raw(pem_to_pubkey(folded)) == bytes(range(32))


def test_der_decode_rejects_bad_input():
    pub = derive_public_key(generate_private_key())
    der = pubkey_to_der(pub)

    with pytest.raises(InvalidArgument):
        der_to_pubkey(der[:-1])

    with pytest.raises(InvalidArgument):
        der_to_pubkey(der + b"\x00")

    # Ed25519 OID instead of X25519
    with pytest.raises(InvalidArgument):
        der_to_pubkey(der[:8] + b"\x70" + der[9:])


def test_pem_decode_rejects_bad_input():
    pub = derive_public_key(generate_private_key())
    body = pubkey_to_pem(pub).split("\n")[1]

    with pytest.raises(InvalidArgument):
        pem_to_pubkey(body)

    with pytest.raises(InvalidArgument):
        pem_to_pubkey(PEM_HEADER + "\n!!not base64!!\n" + PEM_FOOTER)

    with pytest.raises(InvalidArgument):
        pem_to_pubkey(PEM_HEADER + "\n" + base64.b64encode(bytes(44)).decode() + "\n" + PEM_FOOTER)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
