"""
Hex Codec

This module converts between hex strings and bytes. Decoding is strict:
odd-length input, non-hex characters and whitespace are rejected, while
upper-case digits are accepted. Encoding always produces lower-case hex.
"""

import binascii
import hmac


def hex_decode(data: str) -> bytes:
    """
    Decode a hex string into bytes.

    Args:
        data: Hex string to decode

    Returns:
        The decoded bytes

    Raises:
        TypeError: If data is not a string
        ValueError: If data is not valid hex
    """
    if not isinstance(data, str):
        raise TypeError(f"expected a hex string, got {type(data).__name__}")

    try:
        return binascii.unhexlify(data.encode('ascii'))
    except (UnicodeEncodeError, binascii.Error) as e:
        raise ValueError(f"invalid hex string: {e}") from e


def hex_encode(data: bytes) -> str:
    """Encode bytes as a lower-case hex string."""
    return binascii.hexlify(data).decode('ascii')


def constant_time_equal(a: bytes, b: bytes) -> bool:
    """
    Compare two byte strings without an early exit on the first difference.

    Args:
        a: First value
        b: Second value

    Returns:
        True if both values are equal, False otherwise
    """
    # Use constant-time comparison to prevent timing attacks
    return hmac.compare_digest(a, b)


if __name__ == "__main__":
    # Test the codec
    import os

    raw = os.urandom(12)
    encoded = hex_encode(raw)
    print(f"Encoded: {encoded}")
    assert hex_decode(encoded) == raw
    assert hex_decode(encoded.upper()) == raw

    for bad in ("abc", "zz", "ab cd"):
        try:
            hex_decode(bad)
            print(f"ERROR: {bad!r} was accepted!")
        except ValueError as e:
            print(f"Correctly rejected {bad!r}: {e}")

    assert constant_time_equal(raw, bytes(raw))
    assert not constant_time_equal(raw, os.urandom(12))

    print("Hex codec tests completed successfully!")
