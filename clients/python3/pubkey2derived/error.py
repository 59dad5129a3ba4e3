"""pubkey2derived error types."""


class Pubkey2DerivedError(Exception):
    """Base exception for pubkey2derived errors."""
    pass


class InvalidArgument(Pubkey2DerivedError):
    """Malformed or too short raw input (key, salt, DER or PEM)."""
    pass


class DecodingError(InvalidArgument):
    """Bytes of the right shape that still do not decode to a key."""
    pass


class AgreementError(Pubkey2DerivedError):
    """X25519 key agreement failed or produced a degenerate secret."""
    pass


class ConfigError(Pubkey2DerivedError):
    """Configuration error."""
    pass
