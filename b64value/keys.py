"""Fixed-length key material.

This module converts decoded values into fixed-size byte strings, mainly
32-byte symmetric keys, and builds AES-256-GCM ciphers from them.
"""

from __future__ import annotations

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from b64value.values.base import Base64Value

KEY_LENGTH = 32


def try_fixed_length(value: Base64Value, length: int) -> bytes:
    """Copy exactly ``length`` bytes out of a value.

    This never truncates or pads.

    Args:
        value: The decoded value.
        length: The required number of bytes.

    Returns:
        An immutable copy of the value's bytes.

    Raises:
        LengthError: If the value holds fewer or more than ``length`` bytes.
    """
    return value.try_into_array(length)


def aes_key(value: Base64Value) -> bytes:
    """Extract a 32-byte symmetric key.

    Raises:
        LengthError: If the value is not exactly 32 bytes.
    """
    return try_fixed_length(value, KEY_LENGTH)


def aes_gcm(value: Base64Value) -> AESGCM:
    """Build an AES-256-GCM cipher keyed with the value's bytes.

    Args:
        value: 32 bytes of key material.

    Returns:
        The AEAD cipher.

    Raises:
        LengthError: If the value is not exactly 32 bytes.
    """
    return AESGCM(aes_key(value))
