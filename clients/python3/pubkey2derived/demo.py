"""pubkey2derived Demo - derive a key shared with the owner of a raw X25519 public key."""

import logging
import sys
from typing import List, Mapping, Optional

from .types import DEFAULT_INFO, DemoConfig, Salt
from .keys import generate_private_key, raw_to_public_key
from .kdf import PublicInfo, key_to_digest_hex
from .combined import Combined
from .error import ConfigError, Pubkey2DerivedError


logger = logging.getLogger(__name__)


def read_limited(filename: str, limit: int) -> bytes:
    """
    Read at most limit bytes from filename.

    Raises:
        ConfigError: If the file cannot be opened or read
    """
    try:
        with open(filename, "rb") as f:
            return f.read(limit)
    except OSError as e:
        raise ConfigError(f"unable to open: {filename}") from e


def load_salt(config: DemoConfig) -> Salt:
    """Read the salt from config.salt_location, or draw a fresh one."""
    if config.salt_location is None:
        logger.info("no salt file configured, using a random salt")
        return Salt.generate()
    logger.info("reading salt from %s", config.salt_location)
    return Salt.from_raw(read_limited(config.salt_location, config.read_limit))


def build_combined(config: DemoConfig) -> Combined:
    """
    Load the peer key and salt, generate our key and pair them.

    Raises:
        Pubkey2DerivedError: If any step fails
    """
    logger.info("reading peer public key from %s", config.pubkey_location)
    raw = read_limited(config.pubkey_location, config.read_limit)
    pubkey = raw_to_public_key(raw)
    salt = load_salt(config)
    pub_info = PublicInfo.from_salt(salt, info=DEFAULT_INFO, pubkey=pubkey)
    return Combined.from_secret(generate_private_key(), pub_info)


def run(config: DemoConfig) -> List[str]:
    """Return the lines the demo prints for config."""
    combined = build_combined(config)
    secret = combined.to_symmetric_key()
    return [str(combined), f"SHA256 digest: {key_to_digest_hex(secret)}"]


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    """Run the demo, returns the process exit status."""
    try:
        config = DemoConfig.from_env(environ)
        logging.basicConfig(level=config.log_level)
        for line in run(config):
            print(line)
    except Pubkey2DerivedError as e:
        print(f"error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
