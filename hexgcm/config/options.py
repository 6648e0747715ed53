"""
Facade Options

This module defines the Options value object and the functions that turn its
hex strings into validated key and nonce bytes. Options can be built directly
or loaded from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..encoding.hex_codec import hex_decode
from ..errors import ConfigError

# AES-256 key size in bytes
KEY_SIZE = 32

# GCM nonce size in bytes (96 bits)
NONCE_SIZE = 12

# GCM authentication tag size in bytes
TAG_SIZE = 16

DEFAULT_ENV_PREFIX = 'HEXGCM'


@dataclass(frozen=True)
class Options:
    """Hex-encoded key and fixed nonce for a facade."""
    key: str = field(repr=False)
    fixed_nonce: str

    @classmethod
    def from_env(cls,
                 prefix: str = DEFAULT_ENV_PREFIX,
                 environ: Optional[Mapping[str, str]] = None) -> 'Options':
        """
        Load options from the environment.

        Reads <prefix>_KEY and <prefix>_FIXED_NONCE.

        Args:
            prefix: Variable name prefix
            environ: Mapping to read from (default: os.environ)

        Returns:
            The loaded options

        Raises:
            ConfigError: If either variable is missing or empty
        """
        if environ is None:
            environ = os.environ

        key_var = f"{prefix}_KEY"
        nonce_var = f"{prefix}_FIXED_NONCE"

        key = environ.get(key_var)
        if not key:
            raise ConfigError(f"Encryption key not found in environment variable {key_var}")

        fixed_nonce = environ.get(nonce_var)
        if not fixed_nonce:
            raise ConfigError(f"Fixed nonce not found in environment variable {nonce_var}")

        return cls(key=key, fixed_nonce=fixed_nonce)


def _parse_hex(value: str, size: int, name: str) -> bytes:
    try:
        decoded = hex_decode(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"failed to decode {name}: {e}") from e

    if len(decoded) != size:
        raise ConfigError(f"{name} must be {size} bytes long")

    return decoded


def parse_key(key_hex: str) -> bytes:
    """
    Decode and validate a hex-encoded encryption key.

    Args:
        key_hex: 64 hex characters

    Returns:
        The 32-byte key

    Raises:
        ConfigError: If the key is not valid hex or not 32 bytes long
    """
    return _parse_hex(key_hex, KEY_SIZE, 'encryption key')


def parse_fixed_nonce(nonce_hex: str) -> bytes:
    """
    Decode and validate a hex-encoded fixed nonce.

    Args:
        nonce_hex: 24 hex characters

    Returns:
        The 12-byte nonce

    Raises:
        ConfigError: If the nonce is not valid hex or not 12 bytes long
    """
    return _parse_hex(nonce_hex, NONCE_SIZE, 'fixed nonce')
