"""b64value Python implementation.

This package provides byte buffers that serialize as base64 strings, so that
application code can carry raw bytes through JSON documents without manual
encode and decode calls.

Main Components:
    - Base64: Standard-alphabet value type
    - UrlBase64: URL-safe value type
    - Engines: Alphabets with a padding-indifferent decode policy
    - Serde: JSON encoder and helpers
    - Keys: Fixed-length conversion for key material

Example:
    >>> from b64value import Base64, dumps
    >>> dumps(Base64([2, 99]))
    '"AmM="'
"""

from b64value.engine import (
    STANDARD_INDIFFERENT_PAD,
    URL_SAFE_INDIFFERENT_PAD,
    Engine,
)
from b64value.exceptions import (
    Base64ValueError,
    DecodeError,
    DeserializationError,
    InvalidByteError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
    LengthError,
)
from b64value.keys import KEY_LENGTH, aes_gcm, aes_key, try_fixed_length
from b64value.serde import (
    Base64JSONEncoder,
    deserialize_bytes,
    dumps,
    loads,
    serialize_bytes,
)
from b64value.values import Base64, Base64Value, UrlBase64, convert

__version__ = "0.1.0"

__all__ = [
    # Values
    "Base64",
    "UrlBase64",
    "Base64Value",
    "convert",
    # Engines
    "Engine",
    "STANDARD_INDIFFERENT_PAD",
    "URL_SAFE_INDIFFERENT_PAD",
    # Serde
    "Base64JSONEncoder",
    "dumps",
    "loads",
    "serialize_bytes",
    "deserialize_bytes",
    # Keys
    "KEY_LENGTH",
    "try_fixed_length",
    "aes_key",
    "aes_gcm",
    # Exceptions
    "Base64ValueError",
    "DecodeError",
    "InvalidByteError",
    "InvalidLengthError",
    "InvalidLastSymbolError",
    "InvalidPaddingError",
    "LengthError",
    "DeserializationError",
]
