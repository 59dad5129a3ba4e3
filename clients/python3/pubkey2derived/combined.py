"""Own private key paired with the peer's published information."""

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey, X25519PublicKey

from .types import Info, Salt
from .kdf import PublicInfo
from .keys import derive_public_key
from .encoding import pubkey_to_der, pubkey_to_pem


class Combined:
    """Our X25519 private key together with a peer's PublicInfo."""

    def __init__(self, pub_info: PublicInfo, my_key: X25519PrivateKey):
        self.pub_info = pub_info
        self._my_key = my_key

    @classmethod
    def from_secret(cls, my_key: X25519PrivateKey, pub_info: PublicInfo) -> "Combined":
        return cls(pub_info, my_key)

    def __repr__(self) -> str:
        return f"Combined(pub_info={self.pub_info!r})"

    def __str__(self) -> str:
        return (
            f"Shared Info(base64): {self.shared_info().to_base64()}\n"
            f"Salt(base64): {self.salt().to_base64()}\n"
            f"My Public Key(Pem):\n"
            f"{self.my_pubkey_to_pem()}"
        )

    def public_key(self) -> X25519PublicKey:
        """Peer's public key."""
        return self.pub_info.pubkey

    def my_public_key(self) -> X25519PublicKey:
        return derive_public_key(self._my_key)

    def shared_info(self) -> Info:
        return self.pub_info.info

    def salt(self) -> Salt:
        return self.pub_info.salt

    def to_symmetric_key(self) -> bytes:
        """
        Derive the key shared with the peer.

        Raises:
            AgreementError: If the key agreement fails
        """
        return self.pub_info.to_symmetric_key(self._my_key)

    def my_pubkey_to_der(self) -> bytes:
        return pubkey_to_der(self.my_public_key())

    def my_pubkey_to_pem(self) -> str:
        return pubkey_to_pem(self.my_public_key())
