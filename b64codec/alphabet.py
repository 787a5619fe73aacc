"""Alphabet table for b64codec.

This module validates 64-symbol alphabets and materializes the lookup
structures every codec reads from. Only the symbols of the standard alphabet
are permitted, so any valid alphabet is a permutation of the standard one and
the padding and sign markers can never collide with a digit.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from b64codec.constants import ALPHABET, BASE
from b64codec.exceptions import InvalidLengthError, InvalidSymbolError, InvalidTypeError

logger = logging.getLogger(__name__)

_PERMITTED_SYMBOLS = frozenset(ALPHABET)


def to_alphabet(value: Any = None) -> str:
    """Validate an alphabet definition.

    Args:
        value: The candidate alphabet, or None for the standard alphabet.

    Returns:
        The validated alphabet string.

    Raises:
        InvalidTypeError: If the alphabet is not a string.
        InvalidLengthError: If the alphabet does not hold exactly 64 symbols.
        InvalidSymbolError: If a symbol is not permitted or appears twice.
    """
    if value is None:
        return ALPHABET
    if not isinstance(value, str):
        raise InvalidTypeError("The alphabet must be a string")
    if len(value) != BASE:
        raise InvalidLengthError("The length of the alphabet must be equal to 64")

    seen: set[str] = set()
    for index, symbol in enumerate(value):
        if symbol not in _PERMITTED_SYMBOLS:
            raise InvalidSymbolError(
                f'Invalid character "{symbol}" at index {index} for the Base64 alphabet',
                symbol,
                index,
            )
        if symbol in seen:
            raise InvalidSymbolError(
                f'The character "{symbol}" at index {index} is already in the alphabet',
                symbol,
                index,
            )
        seen.add(symbol)
    return value


class AlphabetTable:
    """Validated alphabet with its forward and reverse lookups.

    The table is immutable once built:

    - ``lookup`` maps each symbol to its index (text domain decoding).
    - ``base_map`` holds the ASCII byte of each index (buffer domain encoding).
    - ``base_map_lookup`` maps each ASCII byte to its index (buffer domain decoding).
    """

    __slots__ = ("_alphabet", "_lookup", "_base_map", "_base_map_lookup")

    def __init__(self, alphabet: str | None = None) -> None:
        alphabet = to_alphabet(alphabet)
        lookup: dict[str, int] = {}
        base_map = bytearray(BASE)
        base_map_lookup: dict[int, int] = {}
        for index, symbol in enumerate(alphabet):
            code = ord(symbol)
            lookup[symbol] = index
            base_map[index] = code
            base_map_lookup[code] = index

        self._alphabet = alphabet
        self._lookup: Mapping[str, int] = MappingProxyType(lookup)
        self._base_map = bytes(base_map)
        self._base_map_lookup: Mapping[int, int] = MappingProxyType(base_map_lookup)

        if alphabet != ALPHABET:
            logger.debug("Built alphabet table for custom alphabet %s", alphabet)

    @property
    def alphabet(self) -> str:
        """The 64-symbol alphabet string."""
        return self._alphabet

    @property
    def lookup(self) -> Mapping[str, int]:
        return self._lookup

    @property
    def base_map(self) -> bytes:
        return self._base_map

    @property
    def base_map_lookup(self) -> Mapping[int, int]:
        return self._base_map_lookup

    def symbol(self, index: int) -> str:
        """Return the symbol for a digit value in ``range(64)``."""
        return self._alphabet[index]

    def index_of(self, symbol: str) -> int | None:
        """Return the digit value of a symbol, or None when it is not in the alphabet."""
        return self._lookup.get(symbol)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlphabetTable):
            return NotImplemented
        return self._alphabet == other._alphabet

    def __hash__(self) -> int:
        return hash(self._alphabet)

    def __repr__(self) -> str:
        return f"AlphabetTable({self._alphabet!r})"
