"""
Error Types

This module defines the exceptions raised by hexgcm. Configuration problems
are reported as ConfigError at construction time; every failure of an
encrypt or decrypt call is a CryptoError subclass carrying the kind of
failure and the operation that raised it.
"""

from typing import Optional


class HexGCMError(Exception):
    """Base class for all hexgcm errors."""


class ConfigError(HexGCMError, ValueError):
    """Raised when the key or fixed nonce is malformed or has the wrong length."""


class CryptoError(HexGCMError):
    """
    Failure of an encrypt or decrypt operation.

    Attributes:
        kind: Short machine-readable failure kind
        operation: Name of the facade operation that failed
    """

    kind = 'crypto'

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class EncodingError(CryptoError):
    """Input is not valid hex, or decrypted bytes are not valid UTF-8."""

    kind = 'encoding'


class TruncatedInput(CryptoError):
    """Decoded ciphertext is shorter than the nonce."""

    kind = 'truncated_input'


class NonceMismatch(CryptoError):
    """Ciphertext nonce differs from the configured fixed nonce."""

    kind = 'nonce_mismatch'


class AuthenticationFailure(CryptoError):
    """
    The AEAD tag did not verify.

    Callers should treat this as a security event (tampering, wrong key or
    corrupted data), never as a transient fault to retry.
    """

    kind = 'authentication_failure'


class PrimitiveInitFailure(CryptoError):
    """The underlying AES-GCM cipher could not be initialized."""

    kind = 'primitive_init_failure'
