"""Constants and types for pubkey2derived."""

import base64
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .error import ConfigError, InvalidArgument


# Derived symmetric key length in bytes
KEY_LEN: int = 32

# X25519 key sizes
X25519_PUBLIC_KEY_SIZE: int = 32
X25519_PRIVATE_KEY_SIZE: int = 32

# HKDF salt must be at least as long as the derived key
SALT_MIN_LEN: int = 32

# Application context used by the demo
DEFAULT_FQDN: bytes = b"com.github.takanoriyanagitani"
DEFAULT_CODE_NAME: bytes = b"pubkey2derived"
DEFAULT_USE_CASE: bytes = b"alice-bob"

# Environment variables read by the demo
ENV_RAW_PUBKEY_LOCATION: str = "ENV_RAW_PUBKEY_LOCATION"
ENV_SALT_LOCATION: str = "ENV_SALT_LOCATION"
ENV_LOG_LEVEL: str = "PUBKEY2DERIVED_LOG_LEVEL"

# Upper bound on bytes read from a key or salt file
DEFAULT_READ_LIMIT: int = 32


@dataclass(frozen=True)
class Salt:
    """HKDF salt, at least SALT_MIN_LEN bytes."""

    raw: bytes

    def __post_init__(self):
        if len(self.raw) < SALT_MIN_LEN:
            raise InvalidArgument("too short salt")
        object.__setattr__(self, "raw", bytes(self.raw))

    def __repr__(self) -> str:
        return f"Salt({self.to_base64()})"

    @classmethod
    def from_raw(cls, raw: bytes) -> "Salt":
        """Validate raw bytes as a salt, raises InvalidArgument if too short."""
        return cls(raw=raw)

    @classmethod
    def generate(cls, size: int = SALT_MIN_LEN) -> "Salt":
        """Draw a fresh salt from the OS random source."""
        return cls.from_raw(os.urandom(size))

    def to_base64(self) -> str:
        return base64.b64encode(self.raw).decode("ascii")


@dataclass(frozen=True)
class Info:
    """HKDF context: fqdn || code name || use case."""

    info: bytes

    @classmethod
    def new_info(cls, fqdn: bytes, code_name: bytes, use_case: bytes) -> "Info":
        return cls(info=fqdn + code_name + use_case)

    def to_base64(self) -> str:
        return base64.b64encode(self.info).decode("ascii")


DEFAULT_INFO: Info = Info.new_info(DEFAULT_FQDN, DEFAULT_CODE_NAME, DEFAULT_USE_CASE)


@dataclass
class DemoConfig:
    """Settings for the command-line demo."""

    pubkey_location: str
    salt_location: Optional[str] = None  # None = fresh random salt
    read_limit: int = DEFAULT_READ_LIMIT
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DemoConfig":
        """Build the configuration from environment variables."""
        env = os.environ if environ is None else environ
        location = env.get(ENV_RAW_PUBKEY_LOCATION)
        if not location:
            raise ConfigError(f"undefined var {ENV_RAW_PUBKEY_LOCATION}")
        config = cls(
            pubkey_location=location,
            salt_location=env.get(ENV_SALT_LOCATION) or None,
            log_level=env.get(ENV_LOG_LEVEL, "WARNING").upper(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Validate the configuration, raises ConfigError if invalid."""
        if self.read_limit < max(X25519_PUBLIC_KEY_SIZE, SALT_MIN_LEN):
            raise ConfigError(f"read_limit must be >= {SALT_MIN_LEN}")
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigError(f"unknown log level: {self.log_level}")
