"""Base class for base64 value types.

This module defines the behaviour shared by every value type: ownership of a
mutable byte buffer, list-like access to it, value equality and hashing,
buffer interop, textual round-trip and the JSON scalar contract. Subclasses
only choose an engine.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any, ClassVar, Type, TypeVar, Union, overload

from b64value.engine import Engine
from b64value.exceptions import LengthError
from b64value.serde import deserialize_bytes, serialize_bytes

V = TypeVar("V", bound="Base64Value")

BytesLike = Union[bytes, bytearray, memoryview]


class Base64Value(MutableSequence):
    """Owned byte buffer that presents itself as base64 text.

    Indexing, slicing, iteration, append and the rest of the MutableSequence
    API operate directly on the wrapped bytes. The encoded form is computed on
    demand and never stored.

    Attributes:
        engine: The alphabet and padding policy of the concrete type.
    """

    engine: ClassVar[Engine]

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike | Iterable[int] = b"") -> None:
        """Initialize a value from a copy of the given bytes.

        Args:
            data: Any bytes-like object or iterable of ints in range(256).

        Raises:
            TypeError: If data is a str; use decode() for text.
        """
        if isinstance(data, str):
            raise TypeError(f"cannot build {type(self).__name__} from str, use decode()")
        self._data = bytearray(data)

    # Construction

    @classmethod
    def decode(cls: Type[V], text: str | bytes) -> V:
        """Decode base64 text using this type's engine.

        Args:
            text: The encoded text; padding may be canonical, partial or absent.

        Returns:
            A new value owning the decoded bytes.

        Raises:
            DecodeError: If the text is not valid for this type's alphabet.
        """
        return cls.from_bytearray(bytearray(cls.engine.decode(text)))

    @classmethod
    def parse(cls: Type[V], text: str | bytes) -> V:
        """Parse the textual form produced by str(); same as decode()."""
        return cls.decode(text)

    @classmethod
    def from_buffer(cls: Type[V], buffer: BytesLike) -> V:
        """Copy bytes out of any object supporting the buffer protocol.

        Raises:
            TypeError: If buffer does not support the buffer protocol.
        """
        return cls(memoryview(buffer))

    @classmethod
    def from_bytearray(cls: Type[V], buffer: bytearray) -> V:
        """Take ownership of a bytearray without copying it.

        The caller must not keep using the buffer afterwards.
        """
        if not isinstance(buffer, bytearray):
            raise TypeError(f"expected bytearray, got {type(buffer).__name__}")
        value = cls.__new__(cls)
        value._data = buffer
        return value

    # Encoded form

    def encode(self) -> str:
        """Encode the wrapped bytes as canonical, padded base64 text."""
        return self.engine.encode(self._data)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self._data)!r})"

    # Byte access

    def as_bytes(self) -> bytes:
        """Return an immutable copy of the wrapped bytes."""
        return bytes(self._data)

    def as_mut_bytes(self) -> bytearray:
        """Return the owned buffer itself; changes are visible through the value."""
        return self._data

    def into_bytearray(self) -> bytearray:
        """Hand the owned buffer to the caller, leaving this value empty."""
        data, self._data = self._data, bytearray()
        return data

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def try_into_array(self, length: int) -> bytes:
        """Copy the bytes out, requiring exactly ``length`` of them.

        Args:
            length: The required number of bytes.

        Returns:
            An immutable copy of exactly ``length`` bytes.

        Raises:
            LengthError: If the value is shorter or longer than ``length``.
        """
        if len(self._data) != length:
            raise LengthError(type(self).__name__, length, len(self._data))
        return bytes(self._data)

    # MutableSequence

    def __len__(self) -> int:
        return len(self._data)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self: V, index: slice) -> V: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self).from_bytearray(self._data[index])
        return self._data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(value, Base64Value):
            value = value._data
        self._data[index] = value

    def __delitem__(self, index: int | slice) -> None:
        del self._data[index]

    def __iter__(self):
        return iter(self._data)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def insert(self, index: int, value: int) -> None:
        self._data.insert(index, value)

    def append(self, value: int) -> None:
        self._data.append(value)

    def extend(self, values: BytesLike | Iterable[int]) -> None:
        if isinstance(values, Base64Value):
            values = values._data
        self._data.extend(values)

    def clear(self) -> None:
        self._data.clear()

    def reverse(self) -> None:
        self._data.reverse()

    # Value semantics

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Base64Value):
            return NotImplemented
        return type(self) is type(other) and self._data == other._data

    def __hash__(self) -> int:
        return hash((type(self).__name__, bytes(self._data)))

    def copy(self: V) -> V:
        """Return an independent value holding the same bytes."""
        return type(self)(self._data)

    def __copy__(self: V) -> V:
        return self.copy()

    def __deepcopy__(self: V, memo: dict) -> V:
        return self.copy()

    def __getstate__(self) -> bytes:
        return bytes(self._data)

    def __setstate__(self, state: bytes) -> None:
        self._data = bytearray(state)

    # JSON scalar contract

    def to_json_value(self) -> str:
        """Serialize as the canonical encoded string."""
        return serialize_bytes(self._data, self.engine)

    @classmethod
    def from_json_value(cls: Type[V], obj: Any) -> V:
        """Deserialize from a value extracted from a parsed JSON document.

        Args:
            obj: The JSON value; must be a string.

        Returns:
            The decoded value.

        Raises:
            DeserializationError: If obj is not a string or does not decode.
        """
        return cls.from_bytearray(bytearray(deserialize_bytes(obj, cls.engine)))
