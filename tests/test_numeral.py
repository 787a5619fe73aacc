"""Tests for the numeral codec."""

from __future__ import annotations

import sys

import pytest

from b64codec.alphabet import AlphabetTable
from b64codec.codecs.numeral import NumeralCodec
from b64codec.constants import ALPHABET, MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from b64codec.exceptions import InvalidCharacterError, InvalidTypeError, OutOfRangeError


@pytest.fixture
def codec() -> NumeralCodec:
    """Provide a numeral codec over the standard alphabet."""
    return NumeralCodec(AlphabetTable())


@pytest.mark.parametrize(
    ("value", "encoded"),
    [
        (0, "A"),
        (1, "B"),
        (63, "/"),
        (64, "BA"),
        (4095, "//"),
        (4096, "BAA"),
        (-1, "-B"),
        (-64, "-BA"),
        (MAX_SAFE_INTEGER, "f////////"),
        (MIN_SAFE_INTEGER, "-f////////"),
    ],
)
def test_int_vectors(codec: NumeralCodec, value: int, encoded: str) -> None:
    """Test known integer encodings in both directions."""
    assert codec.encode_int(value) == encoded
    assert codec.decode_int(encoded) == value


def test_int_round_trip_near_bounds(codec: NumeralCodec) -> None:
    """Test round trips around zero and the safe integer bounds."""
    for value in (0, 1, -1, 2**31, -(2**31), MAX_SAFE_INTEGER - 1, MIN_SAFE_INTEGER + 1):
        assert codec.decode_int(codec.encode_int(value)) == value


@pytest.mark.parametrize(
    ("value", "encoded"),
    [(True, "B"), (False, "A"), (1.9, "B"), (-1.9, "-B"), (-0.5, "A"), (float("nan"), "A"), (64.0, "BA")],
)
def test_encode_int_coerces_numbers(codec: NumeralCodec, value: float, encoded: str) -> None:
    """Test truncation toward zero of non-integral input."""
    assert codec.encode_int(value) == encoded


@pytest.mark.parametrize(
    "value",
    [MAX_SAFE_INTEGER + 1, MIN_SAFE_INTEGER - 1, 2**64, float("inf"), float("-inf"), 1e300],
)
def test_encode_int_rejects_unsafe_values(codec: NumeralCodec, value: float) -> None:
    """Test that values outside the safe integer range are rejected."""
    with pytest.raises(OutOfRangeError, match="safe integer"):
        codec.encode_int(value)


def test_encode_int_rejects_non_numbers(codec: NumeralCodec) -> None:
    """Test that non-numeric input is rejected."""
    with pytest.raises(InvalidTypeError):
        codec.encode_int("12")  # type: ignore[arg-type]


def test_decode_int_sign_handling(codec: NumeralCodec) -> None:
    """Test the sign marker edge cases."""
    assert codec.decode_int("") == 0
    assert codec.decode_int("-A") == 0
    assert codec.decode_int("AAB") == 1

    with pytest.raises(InvalidCharacterError) as info:
        codec.decode_int("-")

    assert info.value.character == "-"
    assert info.value.index == 0


@pytest.mark.parametrize(("encoded", "character", "index"), [("A*", "*", 1), ("--B", "-", 1), ("B=", "=", 1)])
def test_decode_int_reports_invalid_character(
    codec: NumeralCodec, encoded: str, character: str, index: int
) -> None:
    """Test that unknown symbols are reported with their position."""
    with pytest.raises(InvalidCharacterError, match=f"at index {index}") as info:
        codec.decode_int(encoded)

    assert info.value.character == character
    assert info.value.index == index


def test_decode_rejects_non_strings(codec: NumeralCodec) -> None:
    """Test that only strings are decoded."""
    with pytest.raises(InvalidTypeError):
        codec.decode_int(5)  # type: ignore[arg-type]
    with pytest.raises(InvalidTypeError):
        codec.decode_big_int(b"B")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("value", "encoded"),
    [
        (0, "A"),
        (255, "D/"),
        (2**64, "Q" + "A" * 10),
        (-(2**64), "-Q" + "A" * 10),
        (MAX_SAFE_INTEGER, "f////////"),
    ],
)
def test_big_int_vectors(codec: NumeralCodec, value: int, encoded: str) -> None:
    """Test known big integer encodings in both directions."""
    assert codec.encode_big_int(value) == encoded
    assert codec.decode_big_int(encoded) == value


def test_big_int_round_trip_beyond_native_precision(codec: NumeralCodec) -> None:
    """Test round trips of magnitudes no float can hold exactly."""
    largest_double = int(sys.float_info.max)
    values = [
        2**1000 + 1,
        -(3**500),
        largest_double,
        -largest_double,
        (1 << 1024) - largest_double,
    ]
    for value in values:
        assert codec.decode_big_int(codec.encode_big_int(value)) == value


@pytest.mark.parametrize(("value", "expected"), [("0xff", "D/"), (" 255 ", "D/"), ("", "A"), ("-64", "-BA")])
def test_encode_big_int_parses_literals(codec: NumeralCodec, value: str, expected: str) -> None:
    """Test integer literal strings as big integer input."""
    assert codec.encode_big_int(value) == expected


@pytest.mark.parametrize("value", [1.0, "1.5", "twelve", None])
def test_encode_big_int_rejects_non_integers(codec: NumeralCodec, value: object) -> None:
    """Test that floats and malformed literals are rejected."""
    with pytest.raises(InvalidTypeError):
        codec.encode_big_int(value)


def test_decode_big_int_reports_invalid_character(codec: NumeralCodec) -> None:
    """Test that unknown symbols are reported with their position."""
    with pytest.raises(InvalidCharacterError, match='Invalid character "!" at index 2'):
        codec.decode_big_int("-B!")


def test_custom_alphabet_digits() -> None:
    """Test that a custom alphabet supplies the digits."""
    codec = NumeralCodec(AlphabetTable("+" + ALPHABET.replace("+", "")))

    assert codec.encode_int(0) == "+"
    assert codec.encode_int(1) == "A"
    assert codec.encode_int(-64) == "-A+"
    assert codec.decode_int("-A+") == -64
    assert codec.encode_big_int(2**64) == "P" + "+" * 10
    assert codec.decode_big_int("P" + "+" * 10) == 2**64
