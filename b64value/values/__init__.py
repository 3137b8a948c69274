"""Base64 value types.

This package provides the standard and URL-safe value types and conversion
between them.
"""

from typing import Type, TypeVar

from b64value.values.base import Base64Value
from b64value.values.standard import Base64
from b64value.values.url_safe import UrlBase64

V = TypeVar("V", bound=Base64Value)


def convert(value: Base64Value, target: Type[V]) -> V:
    """Copy the raw bytes of a value into another value type.

    The bytes are preserved; the encoded text generally changes because the
    alphabet does.

    Args:
        value: The value to convert.
        target: The value type to produce.

    Returns:
        A new value of type target.
    """
    return target(value.as_mut_bytes())


__all__ = [
    "Base64",
    "Base64Value",
    "UrlBase64",
    "convert",
]
