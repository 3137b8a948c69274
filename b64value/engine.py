"""Base64 engines with a padding-indifferent decode policy.

An engine pairs a 64-symbol alphabet with the padding policy shared by every
value type in this library:

- Encoding always emits canonical padding (``=`` up to a multiple of 4).
- Decoding accepts canonical padding, partial padding and no padding at all.
  Padding may only appear at the end, and never more of it than the final
  group can hold.

Upstream systems (notably cloud request and response bodies) emit padding
inconsistently, so strict padding checks would reject recoverable data.
Earlier releases enforced canonical padding on decode; that mode is gone.
"""

from __future__ import annotations

import base64
import re
import string
from dataclasses import dataclass, field
from typing import Dict, Pattern

from b64value.exceptions import (
    InvalidByteError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
)

PAD = "="

STANDARD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
URL_SAFE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"

# Unused low bits of the last symbol, keyed by symbols in the final group.
_TRAILING_BITS = {2: 0x0F, 3: 0x03}


@dataclass(frozen=True)
class Engine:
    """Base64 codec for one alphabet with indifferent decode padding.

    Attributes:
        name: Human-readable engine name.
        alphabet: The 64 symbols, in value order.
    """

    name: str
    alphabet: str
    _values: Dict[str, int] = field(init=False, repr=False, compare=False)
    _invalid: Pattern[str] = field(init=False, repr=False, compare=False)
    _to_standard: Dict[int, int] = field(init=False, repr=False, compare=False)
    _from_standard: Dict[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.alphabet) != 64 or len(set(self.alphabet)) != 64:
            raise ValueError("alphabet must contain 64 distinct symbols")
        if not self.alphabet.isascii() or PAD in self.alphabet:
            raise ValueError("alphabet must be ASCII and must not contain the padding symbol")

        object.__setattr__(self, "_values", {c: i for i, c in enumerate(self.alphabet)})
        object.__setattr__(self, "_invalid", re.compile(f"[^{re.escape(self.alphabet)}]"))
        object.__setattr__(self, "_to_standard", str.maketrans(self.alphabet, STANDARD_ALPHABET))
        object.__setattr__(self, "_from_standard", str.maketrans(STANDARD_ALPHABET, self.alphabet))

    def encode(self, data: bytes | bytearray | memoryview) -> str:
        """Encode bytes as canonical, padded base64 text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text using this engine's alphabet.

        Example:
            >>> STANDARD_INDIFFERENT_PAD.encode(bytes([2, 99]))
            'AmM='
        """
        return base64.b64encode(data).decode("ascii").translate(self._from_standard)

    def decode(self, text: str | bytes) -> bytes:
        """Decode base64 text, accepting canonical, partial or missing padding.

        Args:
            text: The text to decode. Bytes are read one symbol per byte.

        Returns:
            The decoded bytes.

        Raises:
            InvalidByteError: A symbol is outside the alphabet, or ``=`` appears
                before the trailing padding run.
            InvalidLengthError: The symbols cannot form whole bytes.
            InvalidPaddingError: More padding than the final group can hold.
            InvalidLastSymbolError: The final symbol has non-zero unused bits.

        Example:
            >>> URL_SAFE_INDIFFERENT_PAD.decode("AmM")
            b'\\x02c'
        """
        if isinstance(text, (bytes, bytearray, memoryview)):
            text = bytes(text).decode("latin-1")

        symbols = text.rstrip(PAD)
        padding = len(text) - len(symbols)

        invalid = self._invalid.search(symbols)
        if invalid is not None:
            raise InvalidByteError(invalid.start(), invalid.group())

        remainder = len(symbols) % 4
        if remainder == 1:
            raise InvalidLengthError(len(symbols))

        missing = (4 - remainder) % 4
        if padding > missing:
            raise InvalidPaddingError(padding)

        if remainder:
            last = symbols[-1]
            if self._values[last] & _TRAILING_BITS[remainder]:
                raise InvalidLastSymbolError(len(symbols) - 1, last)

        canonical = symbols.translate(self._to_standard) + PAD * missing
        return base64.b64decode(canonical, validate=True)


STANDARD_INDIFFERENT_PAD = Engine("standard", STANDARD_ALPHABET)
URL_SAFE_INDIFFERENT_PAD = Engine("url-safe", URL_SAFE_ALPHABET)
