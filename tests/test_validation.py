"""Tests for the validation predicates."""

from __future__ import annotations

import random

import pytest

from b64codec.alphabet import AlphabetTable
from b64codec.constants import ALPHABET
from b64codec.validation import is_alphabet, is_base64_string


def test_is_alphabet_accepts_permutations() -> None:
    """Test that permutations of the standard alphabet are accepted."""
    rng = random.Random(1234)
    symbols = list(ALPHABET)

    assert is_alphabet(ALPHABET)
    assert is_alphabet(ALPHABET[::-1])
    for _ in range(10):
        rng.shuffle(symbols)
        assert is_alphabet("".join(symbols))


@pytest.mark.parametrize(
    "value",
    [
        None,
        42,
        list(ALPHABET),
        ALPHABET.encode("ascii"),
        "",
        ALPHABET[:-1],
        ALPHABET + "A",
        ALPHABET[:-1] + "A",
        ALPHABET[:-1] + "=",
        ALPHABET[:-1] + "-",
    ],
)
def test_is_alphabet_rejects(value: object) -> None:
    """Test that malformed alphabets are rejected without raising."""
    assert not is_alphabet(value)


@pytest.mark.parametrize("value", ["", "QXZl", "QXZlLCBEYXJrd29sZiE=", "Zg==", "AAIECA8fP3//"])
def test_is_base64_string_accepts(value: str) -> None:
    """Test well-formed Base64 strings."""
    assert is_base64_string(value)


@pytest.mark.parametrize("value", ["QXZ", "Zg=", "QX*=", "Q===", "====", "Zg==Zg==", "Zm9v Zm9v", b"Zm9v", 1234, None])
def test_is_base64_string_rejects(value: object) -> None:
    """Test malformed Base64 strings and non-strings."""
    assert not is_base64_string(value)


def test_is_base64_string_with_custom_table() -> None:
    """Test validation against an explicit alphabet table."""
    table = AlphabetTable(ALPHABET[::-1])

    assert is_base64_string("/+9a", table)
    assert not is_base64_string("/+9-", table)
