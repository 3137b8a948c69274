"""JSON serialization glue for base64 values.

The json module is the structured-serialization framework: it calls into this
module for exactly one value at a time. On the wire every value is a quoted
string holding its canonical base64 encoding.
"""

from __future__ import annotations

import json
from typing import Any, Protocol, Type, TypeVar

from b64value.exceptions import DecodeError, DeserializationError
from b64value.interfaces.encoding import IEngine, IJsonScalar


class _JsonReadable(Protocol):
    @classmethod
    def from_json_value(cls, obj: Any) -> Any: ...


V = TypeVar("V", bound=_JsonReadable)


def serialize_bytes(data: bytes | bytearray | memoryview, engine: IEngine) -> str:
    """Serialize a raw bytes field as a base64 JSON scalar.

    Args:
        data: The bytes to serialize.
        engine: The engine whose alphabet to use.

    Returns:
        The canonical encoded string.
    """
    return engine.encode(data)


def deserialize_bytes(obj: Any, engine: IEngine) -> bytes:
    """Deserialize a JSON scalar holding base64 text into raw bytes.

    Args:
        obj: A value already extracted from a parsed JSON document.
        engine: The engine whose alphabet to accept.

    Returns:
        The decoded bytes.

    Raises:
        DeserializationError: When obj is not a string, or does not decode.
    """
    if not isinstance(obj, str):
        raise DeserializationError(
            f"invalid type: {type(obj).__name__}, expected a base64 string"
        )

    try:
        return engine.decode(obj)
    except DecodeError as e:
        raise DeserializationError(f"invalid base64 string: {e}") from e


class Base64JSONEncoder(json.JSONEncoder):
    """JSON encoder that writes base64 values as strings.

    Example:
        >>> json.dumps({"key": Base64(b"\\x02c")}, cls=Base64JSONEncoder)
        '{"key": "AmM="}'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, IJsonScalar):
            return o.to_json_value()
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize a document that may contain base64 values.

    Args:
        obj: The document to serialize.
        **kwargs: Passed through to json.dumps.

    Returns:
        The JSON text, compact unless indent or separators are given.
    """
    if kwargs.get("indent") is None:
        kwargs.setdefault("separators", (",", ":"))
    kwargs.setdefault("cls", Base64JSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(text: str | bytes, cls: Type[V]) -> V:
    """Parse a JSON document whose top level is a single base64 string.

    Args:
        text: The JSON text.
        cls: The value type to produce.

    Returns:
        The decoded value.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
        DeserializationError: If the document is not a valid base64 string.
    """
    return cls.from_json_value(json.loads(text))
