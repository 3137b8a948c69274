"""Exception classes for b64value.

This module defines custom exception types used throughout the b64value library.
"""


class Base64ValueError(Exception):
    """Base exception class for all b64value errors."""

    pass


class DecodeError(Base64ValueError, ValueError):
    """Exception raised when text is not valid base64 for an engine."""

    pass


class InvalidByteError(DecodeError):
    """Exception raised for a symbol outside the engine's alphabet.

    Attributes:
        offset: Position of the offending symbol in the input.
        char: The offending symbol.
    """

    def __init__(self, offset: int, char: str) -> None:
        super().__init__(f"invalid symbol {char!r} at offset {offset}")
        self.offset = offset
        self.char = char


class InvalidLengthError(DecodeError):
    """Exception raised when the symbol count cannot form whole bytes.

    Attributes:
        length: Number of non-padding symbols in the input.
    """

    def __init__(self, length: int) -> None:
        super().__init__(f"invalid input length: {length} symbols")
        self.length = length


class InvalidLastSymbolError(DecodeError):
    """Exception raised when the final symbol carries non-zero trailing bits."""

    def __init__(self, offset: int, char: str) -> None:
        super().__init__(f"invalid last symbol {char!r} at offset {offset}")
        self.offset = offset
        self.char = char


class InvalidPaddingError(DecodeError):
    """Exception raised when there is more padding than the final group holds."""

    def __init__(self, padding: int) -> None:
        super().__init__(f"invalid padding: {padding} trailing padding symbols")
        self.padding = padding


class LengthError(Base64ValueError, ValueError):
    """Exception raised when a value is not the exact length required.

    Attributes:
        expected: The required number of bytes.
        actual: The number of bytes the value holds.
    """

    def __init__(self, name: str, expected: int, actual: int) -> None:
        super().__init__(
            f"{name} was not {expected} bytes of data (got {actual} bytes)"
        )
        self.expected = expected
        self.actual = actual


class DeserializationError(Base64ValueError, ValueError):
    """Exception raised when a serialized value has the wrong type or content.

    This is the single data-layer error seen by callers reading a larger
    document. The underlying DecodeError, if any, is chained as __cause__.
    """

    def is_data(self) -> bool:
        """Whether the failure is attributable to malformed input content.

        Returns:
            Always True; syntax errors surface from the json module instead.
        """
        return True
