"""Standard-alphabet base64 value."""

from __future__ import annotations

from typing import TYPE_CHECKING

from b64value.engine import STANDARD_INDIFFERENT_PAD
from b64value.values.base import Base64Value

if TYPE_CHECKING:
    from b64value.values.url_safe import UrlBase64


class Base64(Base64Value):
    """Bytes carried as standard-alphabet (``+/``) base64 with padding.

    Example:
        >>> str(Base64([2, 99]))
        'AmM='
        >>> Base64.parse("AmM") == Base64([2, 99])
        True
    """

    engine = STANDARD_INDIFFERENT_PAD

    __slots__ = ()

    @classmethod
    def from_url_safe(cls, value: UrlBase64) -> Base64:
        """Reinterpret the raw bytes of a UrlBase64 value; nothing is re-encoded.

        Args:
            value: The URL-safe value to convert.

        Returns:
            A standard value holding a copy of the same bytes.
        """
        from b64value.values.url_safe import UrlBase64

        if not isinstance(value, UrlBase64):
            raise TypeError(f"expected UrlBase64, got {type(value).__name__}")
        return cls(value.as_mut_bytes())
