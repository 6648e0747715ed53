"""
hexgcm - AES-256-GCM String Encryption

This library wraps the audited AES-GCM implementation from pycryptodomex in
a small facade that encrypts and decrypts strings to hex ciphertext.

Key Features:
- 256-bit key, 96-bit nonce, 128-bit tag
- Random-nonce mode for general confidentiality
- Fixed-nonce mode for deterministic, searchable ciphertext
- Strict hex validation of keys, nonces and ciphertexts
- Typed errors naming the failure kind and the failing operation

"""

import logging

from .aead_mode import GCMFacade
from .config import Options
from .errors import (
    HexGCMError,
    ConfigError,
    CryptoError,
    EncodingError,
    TruncatedInput,
    NonceMismatch,
    AuthenticationFailure,
    PrimitiveInitFailure,
)

__version__ = '0.1.0'
__author__ = 'hexgcm Team'

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'GCMFacade',
    'Options',
    'new',
    'HexGCMError',
    'ConfigError',
    'CryptoError',
    'EncodingError',
    'TruncatedInput',
    'NonceMismatch',
    'AuthenticationFailure',
    'PrimitiveInitFailure',
]


def new(options: Options) -> GCMFacade:
    """Create a facade from options, raising ConfigError if they are invalid."""
    return GCMFacade.from_options(options)
