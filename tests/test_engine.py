"""Tests for the padding-indifferent decode policy."""

from __future__ import annotations

import base64
import secrets

import pytest

from b64value.engine import (
    STANDARD_INDIFFERENT_PAD,
    URL_SAFE_INDIFFERENT_PAD,
    Engine,
)
from b64value.exceptions import (
    DecodeError,
    InvalidByteError,
    InvalidLastSymbolError,
    InvalidLengthError,
    InvalidPaddingError,
)

ENGINES = [STANDARD_INDIFFERENT_PAD, URL_SAFE_INDIFFERENT_PAD]


@pytest.mark.parametrize("engine", ENGINES, ids=lambda e: e.name)
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", b""),
        ("AmM=", bytes([2, 99])),
        ("AmM", bytes([2, 99])),
        ("AA==", b"\x00"),
        ("AA=", b"\x00"),
        ("AA", b"\x00"),
        ("AAAA", b"\x00\x00\x00"),
        ("AAAAAA", b"\x00\x00\x00\x00"),
    ],
)
def test_accepts_any_padding(engine: Engine, text: str, expected: bytes) -> None:
    """Test that canonical, partial and missing padding all decode."""
    assert engine.decode(text) == expected


@pytest.mark.parametrize("engine", ENGINES, ids=lambda e: e.name)
@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("A", InvalidLengthError),
        ("A=", InvalidLengthError),
        ("AAAAA", InvalidLengthError),
        ("AmM==", InvalidPaddingError),
        ("AA===", InvalidPaddingError),
        ("AAAA=", InvalidPaddingError),
        ("====", InvalidPaddingError),
        ("AA=A", InvalidByteError),
        ("AmM=AmM=", InvalidByteError),
        ("Am M=", InvalidByteError),
        ("AmM=\n", InvalidByteError),
        ("AmN=", InvalidLastSymbolError),
        ("AB", InvalidLastSymbolError),
    ],
)
def test_rejects_malformed_input(engine: Engine, text: str, error: type) -> None:
    """Test the boundary of what the relaxed policy still rejects."""
    with pytest.raises(error):
        engine.decode(text)


def test_invalid_byte_reports_offset() -> None:
    """Test that an illegal symbol is reported with its position."""
    with pytest.raises(InvalidByteError) as exc_info:
        STANDARD_INDIFFERENT_PAD.decode("AmM-")

    assert exc_info.value.offset == 3
    assert exc_info.value.char == "-"


@pytest.mark.parametrize("char", ["-", "_"])
def test_standard_rejects_url_safe_symbols(char: str) -> None:
    """Test that URL-safe-only symbols are illegal for the standard alphabet."""
    with pytest.raises(DecodeError):
        STANDARD_INDIFFERENT_PAD.decode(f"AA{char}A")


@pytest.mark.parametrize("char", ["+", "/"])
def test_url_safe_rejects_standard_symbols(char: str) -> None:
    """Test that standard-only symbols are illegal for the URL-safe alphabet."""
    with pytest.raises(DecodeError):
        URL_SAFE_INDIFFERENT_PAD.decode(f"AA{char}A")


def test_decode_errors_are_value_errors() -> None:
    """Test that decode failures can be caught as ValueError."""
    with pytest.raises(ValueError):
        STANDARD_INDIFFERENT_PAD.decode("!")


def test_decode_accepts_bytes() -> None:
    """Test that ASCII bytes decode like the equivalent text."""
    assert STANDARD_INDIFFERENT_PAD.decode(b"AmM") == bytes([2, 99])

    with pytest.raises(InvalidByteError):
        STANDARD_INDIFFERENT_PAD.decode(b"Am\xffM")


def test_encode_known() -> None:
    """Test canonical encoding for both alphabets."""
    data = bytes([0xFB, 0xFF, 0xBF])

    assert STANDARD_INDIFFERENT_PAD.encode(data) == "+/+/"
    assert URL_SAFE_INDIFFERENT_PAD.encode(data) == "-_-_"
    assert STANDARD_INDIFFERENT_PAD.encode(b"") == ""
    assert STANDARD_INDIFFERENT_PAD.encode(b"\x00") == "AA=="


@pytest.mark.parametrize("length", range(0, 20))
def test_encode_matches_stdlib(length: int) -> None:
    """Test that encoding always carries canonical padding."""
    data = secrets.token_bytes(length)

    assert STANDARD_INDIFFERENT_PAD.encode(data) == base64.b64encode(data).decode("ascii")
    assert URL_SAFE_INDIFFERENT_PAD.encode(data) == base64.urlsafe_b64encode(data).decode("ascii")


@pytest.mark.parametrize("engine", ENGINES, ids=lambda e: e.name)
@pytest.mark.parametrize("length", range(0, 20))
def test_padding_indifference(engine: Engine, length: int) -> None:
    """Test that stripping the padding does not change the decoded payload."""
    data = secrets.token_bytes(length)
    padded = engine.encode(data)

    assert engine.decode(padded) == data
    assert engine.decode(padded.rstrip("=")) == data


def test_custom_alphabet() -> None:
    """Test an engine built for a non-standard alphabet."""
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789.~"
    engine = Engine("dot-tilde", alphabet)
    data = bytes([0xFB, 0xFF, 0xBF])

    assert engine.encode(data) == ".~.~"
    assert engine.decode(".~.~") == data


@pytest.mark.parametrize(
    "alphabet",
    [
        "ABC",
        "A" * 64,
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+=",
    ],
)
def test_rejects_bad_alphabet(alphabet: str) -> None:
    """Test that an engine needs 64 distinct non-padding symbols."""
    with pytest.raises(ValueError):
        Engine("bad", alphabet)
