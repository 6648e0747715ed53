"""
Authenticated Encryption with Associated Data (AEAD) Package

This package exposes the AES-256-GCM facade that encrypts and decrypts
strings to hex ciphertext in random-nonce and fixed-nonce modes.
"""

from .gcm_mode import GCMFacade, encrypt, decrypt

__all__ = ['GCMFacade', 'encrypt', 'decrypt']
