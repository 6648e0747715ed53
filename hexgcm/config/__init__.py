"""
Configuration Package

This package holds the options used to build a facade and the helpers that
validate the hex-encoded key and fixed nonce.
"""

from .options import Options, parse_key, parse_fixed_nonce, KEY_SIZE, NONCE_SIZE, TAG_SIZE

__all__ = ['Options', 'parse_key', 'parse_fixed_nonce', 'KEY_SIZE', 'NONCE_SIZE', 'TAG_SIZE']
