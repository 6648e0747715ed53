"""
AES-GCM Facade

This module wraps the AES-256-GCM implementation from pycryptodomex behind
four string operations: encrypt/decrypt with a fresh random nonce, and
encrypt/decrypt with a pre-configured fixed nonce. Ciphertexts are hex
strings of nonce || ciphertext || tag.

Fixed-nonce mode is deterministic: the same plaintext always produces the
same ciphertext under a given key. Encrypting two different plaintexts under
the same key and fixed nonce breaks both the confidentiality and the
authenticity guarantees of GCM. Use it only for lookup values such as
searchable encrypted indexes, and keep random-nonce mode for everything else.
"""

import logging
import secrets
from typing import Tuple

from Cryptodome.Cipher import AES

from ..config.options import Options, parse_key, parse_fixed_nonce, NONCE_SIZE, TAG_SIZE
from ..encoding.hex_codec import hex_decode, hex_encode, constant_time_equal
from ..errors import (
    CryptoError,
    EncodingError,
    TruncatedInput,
    NonceMismatch,
    AuthenticationFailure,
    PrimitiveInitFailure,
)

logger = logging.getLogger(__name__)


class GCMFacade:
    """
    AES-256-GCM encryption of strings with hex-encoded output.

    Instances hold only the decoded key and fixed nonce and are not changed
    after construction, so one facade can be shared between threads.
    Immutability is by convention only: __slots__ blocks new attributes and
    fixed_nonce has no setter, but the private _key and _fixed_nonce fields
    can still be reassigned.
    """

    __slots__ = ('_key', '_fixed_nonce')

    def __init__(self, key: str, fixed_nonce: str):
        """
        Initialize the facade from hex-encoded configuration.

        Args:
            key: The secret key as 64 hex characters (32 bytes)
            fixed_nonce: The nonce for deterministic mode as 24 hex characters (12 bytes)

        Raises:
            ConfigError: If either value is malformed or has the wrong length
        """
        self._key = parse_key(key)
        self._fixed_nonce = parse_fixed_nonce(fixed_nonce)
        logger.debug("GCM facade initialized")

    @classmethod
    def from_options(cls, options: Options) -> 'GCMFacade':
        """Build a facade from an Options value."""
        return cls(options.key, options.fixed_nonce)

    @property
    def fixed_nonce(self) -> bytes:
        return self._fixed_nonce

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key=<redacted>, fixed_nonce={hex_encode(self._fixed_nonce)!r})"

    def _new_cipher(self, nonce: bytes, operation: str):
        # GCM cipher objects are single use, so every call gets its own
        try:
            return AES.new(self._key, AES.MODE_GCM, nonce=nonce, mac_len=TAG_SIZE)
        except (ValueError, TypeError) as e:
            raise PrimitiveInitFailure(f"failed to initialize AES-GCM: {e}", operation) from e

    def _seal(self, nonce: bytes, plaintext: str, operation: str) -> str:
        if not isinstance(plaintext, str):
            raise EncodingError(f"plaintext must be a string, got {type(plaintext).__name__}", operation)
        try:
            data = plaintext.encode('utf-8')
        except UnicodeEncodeError as e:
            raise EncodingError(f"plaintext is not encodable as UTF-8: {e}", operation) from e

        cipher = self._new_cipher(nonce, operation)
        ciphertext, tag = cipher.encrypt_and_digest(data)
        return hex_encode(nonce + ciphertext + tag)

    def _split(self, hex_ciphertext: str, operation: str) -> Tuple[bytes, bytes]:
        try:
            blob = hex_decode(hex_ciphertext)
        except (TypeError, ValueError) as e:
            raise EncodingError(f"failed to decode ciphertext: {e}", operation) from e

        if len(blob) < NONCE_SIZE:
            raise TruncatedInput("cipher text too short", operation)

        return blob[:NONCE_SIZE], blob[NONCE_SIZE:]

    def _open(self, nonce: bytes, sealed: bytes, operation: str) -> str:
        cipher = self._new_cipher(nonce, operation)

        if len(sealed) < TAG_SIZE:
            logger.debug("%s: sealed payload shorter than the authentication tag", operation)
            raise AuthenticationFailure("message authentication failed", operation)

        ciphertext, tag = sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]
        try:
            data = cipher.decrypt_and_verify(ciphertext, tag)
        except ValueError as e:
            logger.debug("%s: authentication tag mismatch", operation)
            raise AuthenticationFailure("message authentication failed", operation) from e

        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise EncodingError(f"decrypted data is not valid UTF-8: {e}", operation) from e

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt a string under a fresh random nonce.

        Args:
            plaintext: The string to encrypt

        Returns:
            Hex string of nonce || ciphertext || tag

        Raises:
            EncodingError: If plaintext is not a UTF-8 encodable string
            PrimitiveInitFailure: If the cipher cannot be initialized
        """
        nonce = secrets.token_bytes(NONCE_SIZE)
        return self._seal(nonce, plaintext, 'encrypt')

    def decrypt(self, hex_ciphertext: str) -> str:
        """
        Decrypt a hex ciphertext produced by encrypt().

        Args:
            hex_ciphertext: Hex string of nonce || ciphertext || tag

        Returns:
            The original string

        Raises:
            EncodingError: If the input is not valid hex
            TruncatedInput: If the input is shorter than the nonce
            AuthenticationFailure: If the payload does not authenticate
        """
        nonce, sealed = self._split(hex_ciphertext, 'decrypt')
        return self._open(nonce, sealed, 'decrypt')

    def encrypt_fixed(self, plaintext: str) -> str:
        """
        Encrypt a string deterministically under the configured fixed nonce.

        The same plaintext always yields the same ciphertext. Never use this
        for plaintexts that vary per call under a shared key; see the module
        documentation.

        Args:
            plaintext: The string to encrypt

        Returns:
            Hex string of fixed_nonce || ciphertext || tag
        """
        operation = 'encrypt_fixed'
        if len(self._fixed_nonce) != NONCE_SIZE:
            raise CryptoError(f"fixed nonce must be {NONCE_SIZE} bytes long", operation)

        return self._seal(self._fixed_nonce, plaintext, operation)

    def decrypt_fixed(self, hex_ciphertext: str) -> str:
        """
        Decrypt a hex ciphertext produced by encrypt_fixed().

        The nonce prefix must equal the configured fixed nonce; this is
        checked before authentication.

        Args:
            hex_ciphertext: Hex string of fixed_nonce || ciphertext || tag

        Returns:
            The original string

        Raises:
            EncodingError: If the input is not valid hex
            TruncatedInput: If the input is shorter than the nonce
            NonceMismatch: If the nonce differs from the fixed nonce
            AuthenticationFailure: If the payload does not authenticate
        """
        operation = 'decrypt_fixed'
        nonce, sealed = self._split(hex_ciphertext, operation)

        if not constant_time_equal(nonce, self._fixed_nonce):
            raise NonceMismatch("nonce mismatch", operation)

        return self._open(nonce, sealed, operation)


def encrypt(plaintext: str, options: Options) -> str:
    """
    Encrypt a string with a random nonce.

    Args:
        plaintext: The string to encrypt
        options: Key and fixed nonce configuration

    Returns:
        Hex string of nonce || ciphertext || tag
    """
    return GCMFacade.from_options(options).encrypt(plaintext)


def decrypt(hex_ciphertext: str, options: Options) -> str:
    """
    Decrypt a hex ciphertext produced with a random nonce.

    Args:
        hex_ciphertext: Hex string of nonce || ciphertext || tag
        options: Key and fixed nonce configuration

    Returns:
        The original string

    Raises:
        CryptoError: If decoding or authentication fails
    """
    return GCMFacade.from_options(options).decrypt(hex_ciphertext)


if __name__ == "__main__":
    # Test the facade
    logging.basicConfig(level=logging.DEBUG)

    options = Options(
        key=hex_encode(secrets.token_bytes(32)),
        fixed_nonce=hex_encode(secrets.token_bytes(NONCE_SIZE)),
    )
    facade = GCMFacade.from_options(options)
    plaintext = "This is a test message for authenticated encryption."

    ciphertext = facade.encrypt(plaintext)
    print(f"Facade: {facade!r}")
    print(f"Ciphertext: {ciphertext}")
    assert facade.decrypt(ciphertext) == plaintext
    assert facade.encrypt(plaintext) != ciphertext

    fixed = facade.encrypt_fixed(plaintext)
    print(f"Fixed ciphertext: {fixed}")
    assert facade.encrypt_fixed(plaintext) == fixed
    assert facade.decrypt_fixed(fixed) == plaintext

    # Test with tampered ciphertext
    tampered = ciphertext[:-1] + ('0' if ciphertext[-1] != '0' else '1')
    try:
        facade.decrypt(tampered)
        print("ERROR: Tampered ciphertext not detected!")
    except AuthenticationFailure as e:
        print(f"Correctly detected tampered ciphertext: {e}")

    # Test with a foreign nonce in fixed mode
    try:
        facade.decrypt_fixed(ciphertext)
        print("ERROR: Foreign nonce not detected!")
    except NonceMismatch as e:
        print(f"Correctly detected foreign nonce: {e}")

    print("GCM facade tests completed successfully!")
