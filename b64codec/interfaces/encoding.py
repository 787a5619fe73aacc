"""Codec interfaces for b64codec.

This module defines protocols for the three codec families: base-64 numerals,
byte buffers and UTF-8 text.
"""

from __future__ import annotations

from typing import Protocol, Union

BytesLike = Union[bytes, bytearray, memoryview]
Index = Union[int, float, None]


class IIntegerCodec(Protocol):
    """Interface for base-64 positional numeral encoding of integers."""

    def encode_int(self, value: int | float) -> str:
        """Encode a safe integer as a base-64 numeral.

        Args:
            value: The number to encode. Non-integral values are truncated.

        Returns:
            The numeral, prefixed with the sign marker when negative.

        Raises:
            OutOfRangeError: When the value is not a safe integer.
        """
        ...

    def decode_int(self, text: str) -> int:
        """Decode a base-64 numeral into an integer.

        Args:
            text: The numeral to decode.

        Returns:
            The decoded integer.
        """
        ...

    def encode_big_int(self, value: int | str) -> str:
        """Encode an arbitrary-precision integer as a base-64 numeral.

        Args:
            value: The integer, or an integer literal string.

        Returns:
            The numeral, prefixed with the sign marker when negative.
        """
        ...

    def decode_big_int(self, text: str) -> int:
        """Decode a base-64 numeral into an arbitrary-precision integer.

        Args:
            text: The numeral to decode.

        Returns:
            The decoded integer.
        """
        ...


class IBufferCodec(Protocol):
    """Interface for Base64 encoding of byte buffers."""

    def encode(self, data: BytesLike, start: Index = None, end: Index = None) -> bytes:
        """Encode a byte range into Base64 symbol bytes.

        Args:
            data: The buffer to encode.
            start: Start of the range, negative values count from the end.
            end: End of the range (exclusive), negative values count from the end.

        Returns:
            The padded Base64 encoding as ASCII bytes.
        """
        ...

    def decode(self, data: BytesLike, start: Index = None, end: Index = None) -> bytes:
        """Decode a range of Base64 symbol bytes.

        Args:
            data: The encoded buffer.
            start: Start of the range, negative values count from the end.
            end: End of the range (exclusive), negative values count from the end.

        Returns:
            The decoded bytes.
        """
        ...

    def encode_to_string(self, data: BytesLike, start: Index = None, end: Index = None) -> str:
        """Encode a byte range into a Base64 string.

        Args:
            data: The buffer to encode.
            start: Start of the range.
            end: End of the range (exclusive).

        Returns:
            The padded Base64 string.
        """
        ...

    def decode_from_string(self, text: str, start: Index = None, end: Index = None) -> bytes:
        """Decode a range of a Base64 string.

        Args:
            text: The encoded string.
            start: Start of the range.
            end: End of the range (exclusive).

        Returns:
            The decoded bytes.
        """
        ...


class ITextCodec(Protocol):
    """Interface for Base64 encoding of UTF-8 text."""

    def encode_text(self, text: str, start: Index = None, end: Index = None) -> str:
        """Encode text as Base64 over its UTF-8 bytes.

        Args:
            text: The text to encode.
            start: Start of the byte range.
            end: End of the byte range (exclusive).

        Returns:
            The padded Base64 string.
        """
        ...

    def decode_text(self, text: str, start: Index = None, end: Index = None) -> str:
        """Decode a Base64 string holding UTF-8 text.

        Args:
            text: The encoded string.
            start: Start of the range.
            end: End of the range (exclusive).

        Returns:
            The decoded text.
        """
        ...
