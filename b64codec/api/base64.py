"""Base64 codec implementation.

This module provides the main Base64 class, which binds the numeral, buffer
and text codecs to one alphabet table, together with its configuration type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from b64codec.alphabet import AlphabetTable
from b64codec.codecs import BufferCodec, NumeralCodec, TextCodec
from b64codec.constants import ALPHABET, BASE, BITS_PER_CHAR, NEGATIVE_CHAR, PADDING_CHAR
from b64codec.interfaces import BytesLike, IBufferCodec, IIntegerCodec, Index, ITextCodec
from b64codec.validation import is_alphabet, is_base64_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Base64Config:
    """Configuration for a Base64 codec.

    Attributes:
        alphabet: The 64-symbol alphabet, a permutation of the standard one.
    """

    alphabet: str = ALPHABET


class Base64(IIntegerCodec, IBufferCodec, ITextCodec):
    """Configurable Base64 codec.

    A Base64 instance encodes byte buffers, UTF-8 text and integers using a
    single alphabet fixed at construction. Instances hold no mutable state and
    may be shared freely, including across threads.

    Example:
        ```python
        codec = Base64()
        codec.encode_text("Ave, Darkwolf!")  # 'QXZlLCBEYXJrd29sZiE='
        codec.encode_int(9007199254740991)  # 'f////////'

        # A custom alphabet reorders the digits
        shifted = Base64(Base64.ALPHABET[-1] + Base64.ALPHABET[:-1])
        shifted.encode_int(0)  # '/'
        ```
    """

    BASE = BASE
    ALPHABET = ALPHABET
    BITS_PER_CHAR = BITS_PER_CHAR
    PADDING_CHAR = PADDING_CHAR
    NEGATIVE_CHAR = NEGATIVE_CHAR

    def __init__(self, alphabet: str | None = None) -> None:
        """Initialize the codec.

        Args:
            alphabet: The 64-symbol alphabet; the standard alphabet if omitted.

        Raises:
            InvalidTypeError: If the alphabet is not a string.
            InvalidLengthError: If the alphabet does not hold 64 symbols.
            InvalidSymbolError: If a symbol is not permitted or is repeated.
        """
        self._table = AlphabetTable(alphabet)
        self._buffer = BufferCodec(self._table)
        self._numeral = NumeralCodec(self._table)
        self._text = TextCodec(self._buffer)
        logger.debug("Created Base64 codec (custom alphabet: %s)", self._table.alphabet != ALPHABET)

    @classmethod
    def from_config(cls, config: Base64Config) -> Base64:
        """Create a codec from a configuration.

        Args:
            config: The codec configuration.

        Returns:
            A new Base64 instance.
        """
        return cls(config.alphabet)

    @staticmethod
    def is_alphabet(value: Any) -> bool:
        return is_alphabet(value)

    @staticmethod
    def is_base64(value: Any) -> bool:
        """Check whether a value is a Base64 codec instance."""
        return isinstance(value, Base64)

    @property
    def alphabet(self) -> str:
        """The alphabet this codec was built with."""
        return self._table.alphabet

    @property
    def config(self) -> Base64Config:
        return Base64Config(alphabet=self._table.alphabet)

    @staticmethod
    def is_base64_string(value: Any) -> bool:
        """Check whether a value is a well-formed Base64 string.

        Every valid alphabet holds the same 64 symbols, so the answer does not
        depend on which instance, if any, it is asked through.
        """
        return is_base64_string(value)

    # Numerals

    def encode_int(self, value: Any) -> str:
        return self._numeral.encode_int(value)

    def decode_int(self, text: str) -> int:
        return self._numeral.decode_int(text)

    def encode_big_int(self, value: Any) -> str:
        return self._numeral.encode_big_int(value)

    def decode_big_int(self, text: str) -> int:
        return self._numeral.decode_big_int(text)

    # Text

    def encode_text(self, text: str, start: Index = None, end: Index = None) -> str:
        return self._text.encode_text(text, start, end)

    def decode_text(self, text: str, start: Index = None, end: Index = None) -> str:
        return self._text.decode_text(text, start, end)

    # Buffers

    def encode(self, data: BytesLike, start: Index = None, end: Index = None) -> bytes:
        return self._buffer.encode(data, start, end)

    def decode(self, data: BytesLike, start: Index = None, end: Index = None) -> bytes:
        return self._buffer.decode(data, start, end)

    def encode_to_string(self, data: BytesLike, start: Index = None, end: Index = None) -> str:
        return self._buffer.encode_to_string(data, start, end)

    def decode_from_string(self, text: str, start: Index = None, end: Index = None) -> bytes:
        return self._buffer.decode_from_string(text, start, end)

    def __repr__(self) -> str:
        return f"Base64(alphabet={self._table.alphabet!r})"
