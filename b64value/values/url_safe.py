"""URL-safe base64 value.

Used for cloud request and response bodies, which encode binary fields with
the URL-safe alphabet and frequently drop the trailing padding.
"""

from __future__ import annotations

from b64value.engine import URL_SAFE_INDIFFERENT_PAD
from b64value.values.base import Base64Value
from b64value.values.standard import Base64


class UrlBase64(Base64Value):
    """Bytes carried as URL-safe (``-_``) base64 with padding.

    ``UrlBase64()`` is the empty value and encodes to ``""``.
    """

    engine = URL_SAFE_INDIFFERENT_PAD

    __slots__ = ()

    @classmethod
    def from_standard(cls, value: Base64) -> UrlBase64:
        """Reinterpret the raw bytes of a Base64 value; nothing is re-encoded."""
        if not isinstance(value, Base64):
            raise TypeError(f"expected Base64, got {type(value).__name__}")
        return cls(value.as_mut_bytes())
