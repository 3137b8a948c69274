"""Encoding interfaces for b64value.

This module defines protocols for base64 engines and for values that
serialize as a single JSON scalar.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class IEngine(Protocol):
    """Interface for a base64 alphabet and padding policy."""

    def encode(self, data: bytes | bytearray | memoryview) -> str:
        """Encode bytes as canonical, padded base64 text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str | bytes) -> bytes:
        """Decode base64 text into bytes.

        Args:
            text: The text to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: When the text is not valid for this engine.
        """
        ...


@runtime_checkable
class IJsonScalar(Protocol):
    """Interface for values that serialize as one JSON scalar."""

    def to_json_value(self) -> Any:
        """Convert the value to a JSON-native scalar.

        Returns:
            A str, int, float, bool or None.
        """
        ...
