"""
Encoding Package

This package implements the strict hex codec used for keys, nonces and
ciphertexts, plus constant-time byte comparison.
"""

from .hex_codec import hex_decode, hex_encode, constant_time_equal

__all__ = ['hex_decode', 'hex_encode', 'constant_time_equal']
