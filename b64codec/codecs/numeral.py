"""Numeral codec implementation.

Integers are written as base-64 positional numerals over the alphabet: most
significant digit first, no leading zero digits, zero as the single symbol at
index 0, and a leading sign marker for negative values.
"""

from __future__ import annotations

from typing import Any

from b64codec.alphabet import AlphabetTable
from b64codec.constants import BASE, MAX_SAFE_INTEGER, MIN_SAFE_INTEGER, NEGATIVE_CHAR
from b64codec.exceptions import InvalidCharacterError, InvalidTypeError, OutOfRangeError
from b64codec.interfaces.encoding import IIntegerCodec

from .coercion import to_big_int, to_integer_or_infinity


class NumeralCodec(IIntegerCodec):
    """Base-64 numeral codec for safe and arbitrary-precision integers."""

    def __init__(self, table: AlphabetTable) -> None:
        self._table = table

    def encode_int(self, value: Any) -> str:
        """Encode a safe integer as a base-64 numeral.

        Args:
            value: A real number. Non-integral values are truncated toward zero.

        Returns:
            The numeral, prefixed with the sign marker when negative.

        Raises:
            InvalidTypeError: If the value is not a real number.
            OutOfRangeError: If the value lies outside the safe integer range.

        Example:
            >>> NumeralCodec(AlphabetTable()).encode_int(9007199254740991)
            'f////////'
        """
        number = to_integer_or_infinity(value)
        if number < MIN_SAFE_INTEGER:
            raise OutOfRangeError(
                "The value must be greater than or equal to the minimum safe integer"
            )
        if number > MAX_SAFE_INTEGER:
            raise OutOfRangeError(
                "The value must be less than or equal to the maximum safe integer"
            )
        return self._encode(int(number))

    def decode_int(self, text: str) -> int:
        """Decode a base-64 numeral into a safe integer.

        Raises:
            InvalidTypeError: If ``text`` is not a string.
            InvalidCharacterError: If a symbol is not in the alphabet.
        """
        return self._decode(text)

    def encode_big_int(self, value: Any) -> str:
        """Encode an arbitrary-precision integer as a base-64 numeral.

        Args:
            value: An integer or an integer literal string such as ``"0xff"``.

        Returns:
            The numeral, prefixed with the sign marker when negative.

        Raises:
            InvalidTypeError: If the value cannot be read as an integer.
        """
        return self._encode(to_big_int(value))

    def decode_big_int(self, text: str) -> int:
        """Decode a base-64 numeral into an arbitrary-precision integer.

        Raises:
            InvalidTypeError: If ``text`` is not a string.
            InvalidCharacterError: If a symbol is not in the alphabet.
        """
        return self._decode(text)

    def _encode(self, number: int) -> str:
        table = self._table
        if not number:
            return table.symbol(0)

        is_negative = number < 0
        if is_negative:
            number = -number

        digits = []
        while number:
            number, remainder = divmod(number, BASE)
            digits.append(table.symbol(remainder))
        if is_negative:
            digits.append(NEGATIVE_CHAR)
        return "".join(reversed(digits))

    def _decode(self, text: str) -> int:
        if not isinstance(text, str):
            raise InvalidTypeError("The input must be a string")

        # A bare sign marker is read as a digit, and rejected as one.
        is_negative = text[:1] == NEGATIVE_CHAR and len(text) > 1
        result = 0
        for index in range(1 if is_negative else 0, len(text)):
            character = text[index]
            digit = self._table.index_of(character)
            if digit is None:
                raise InvalidCharacterError(
                    f'Invalid character "{character}" at index {index} for Base64 encoding',
                    character,
                    index,
                )
            result = result * BASE + digit
        return -result if is_negative else result
