"""Exception classes for b64codec.

This module defines custom exception types used throughout the b64codec library.
Each error kind also derives from the closest built-in exception, so callers
that catch ``TypeError`` or ``ValueError`` keep working.
"""

from __future__ import annotations


class Base64Error(Exception):
    """Base exception class for all b64codec errors."""

    pass


class InvalidTypeError(Base64Error, TypeError):
    """Exception raised when an argument is not of the expected kind."""

    pass


class InvalidLengthError(Base64Error, ValueError):
    """Exception raised when an alphabet does not hold exactly 64 symbols."""

    pass


class InvalidSymbolError(Base64Error, ValueError):
    """Exception raised when an alphabet contains a disallowed or repeated symbol.

    Attributes:
        symbol: The offending symbol.
        index: Position of the symbol within the alphabet.
    """

    def __init__(self, message: str, symbol: str, index: int) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.index = index


class InvalidCharacterError(Base64Error, ValueError):
    """Exception raised when decoding meets a symbol absent from the alphabet.

    Attributes:
        character: The offending character, or byte value for buffer input.
        index: Position of the character within the input.
    """

    def __init__(self, message: str, character: str | int, index: int) -> None:
        super().__init__(message)
        self.character = character
        self.index = index


class OutOfRangeError(Base64Error, OverflowError):
    """Exception raised when an integer falls outside the safe integer range."""

    pass
