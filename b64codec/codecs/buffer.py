"""Buffer codec implementation.

This module provides RFC 4648 Base64 encoding of byte buffers, either to
ASCII symbol bytes or to a string, and the inverse decoding. Every direction
accepts a ``slice``-style ``start``/``end`` range over its input.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Mapping, Sequence, TypeVar

from b64codec.alphabet import AlphabetTable
from b64codec.constants import BYTE_MASK, PADDING_CHAR, SEXTET_MASK
from b64codec.exceptions import InvalidCharacterError, InvalidTypeError
from b64codec.interfaces.encoding import BytesLike, IBufferCodec, Index

from .coercion import resolve_range

S = TypeVar("S")

_PADDING_BYTE = ord(PADDING_CHAR)


def iter_sextets(data: bytes) -> Iterator[int]:
    """Yield the 6-bit digit values encoding ``data``, without padding.

    Full 3-byte groups are packed big-endian into 24 bits and split with
    shifts 18, 12, 6 and 0. A trailing byte yields two digits and a trailing
    pair yields three, with the unused low bits zero-filled.
    """
    length = len(data)
    extra_bytes = length % 3
    extra_length = length - extra_bytes

    for index in range(0, extra_length, 3):
        number = (data[index] << 16) + (data[index + 1] << 8) + data[index + 2]
        yield (number >> 18) & SEXTET_MASK
        yield (number >> 12) & SEXTET_MASK
        yield (number >> 6) & SEXTET_MASK
        yield number & SEXTET_MASK

    if extra_bytes == 1:
        number = data[extra_length]
        yield number >> 2
        yield (number << 4) & SEXTET_MASK
    elif extra_bytes == 2:
        number = (data[extra_length] << 8) + data[extra_length + 1]
        yield number >> 10
        yield (number >> 4) & SEXTET_MASK
        yield (number << 2) & SEXTET_MASK


def padding_length(byte_count: int) -> int:
    """Number of padding markers that follow the encoding of ``byte_count`` bytes."""
    extra_bytes = byte_count % 3
    return 3 - extra_bytes if extra_bytes else 0


def decode_symbols(
    symbols: Sequence[S],
    lookup: Mapping[S, int],
    padding: S,
    start: Index,
    end: Index,
    describe: Callable[[S, int], InvalidCharacterError],
) -> bytes:
    """Decode a range of Base64 symbols into bytes.

    Works on both domains: ``symbols`` may be a string (with a symbol to index
    lookup) or a byte sequence (with a byte value to index lookup).

    Args:
        symbols: The encoded input.
        lookup: Map from symbol to digit value.
        padding: The padding marker in the input's domain.
        start: Start of the range to decode.
        end: End of the range to decode (exclusive).
        describe: Factory building the error for an unknown symbol at a position.

    Returns:
        The decoded bytes.

    Raises:
        InvalidCharacterError: If a symbol in the range is not in the alphabet.
    """
    start_index, end_index = resolve_range(len(symbols), start, end)
    new_length = end_index - start_index

    padding_count = 0
    if new_length % 4 == 0:
        last_index = end_index - 1
        while (
            padding_count < new_length
            and padding_count < 2
            and symbols[last_index - padding_count] == padding
        ):
            padding_count += 1

    valid_length = new_length - padding_count
    extra_symbols = valid_length % 4
    extra_length = start_index + valid_length - extra_symbols

    def digit(position: int) -> int:
        symbol = symbols[position]
        value = lookup.get(symbol)
        if value is None:
            raise describe(symbol, position)
        return value

    result = bytearray((valid_length * 3) >> 2)
    result_index = 0
    for index in range(start_index, extra_length, 4):
        number = (
            (digit(index) << 18)
            + (digit(index + 1) << 12)
            + (digit(index + 2) << 6)
            + digit(index + 3)
        )
        result[result_index] = (number >> 16) & BYTE_MASK
        result[result_index + 1] = (number >> 8) & BYTE_MASK
        result[result_index + 2] = number & BYTE_MASK
        result_index += 3

    index = extra_length
    if extra_symbols == 1:
        # A lone symbol carries no full byte but must still be valid.
        digit(index)
    elif extra_symbols == 2:
        number = (digit(index) << 2) + (digit(index + 1) >> 4)
        result[result_index] = number & BYTE_MASK
    elif extra_symbols == 3:
        number = (digit(index) << 10) + (digit(index + 1) << 4) + (digit(index + 2) >> 2)
        result[result_index] = (number >> 8) & BYTE_MASK
        result[result_index + 1] = number & BYTE_MASK

    return bytes(result)


def _invalid_character(character: str, index: int) -> InvalidCharacterError:
    return InvalidCharacterError(
        f'Invalid character "{character}" at index {index} for Base64 encoding',
        character,
        index,
    )


def _invalid_byte(byte: int, index: int) -> InvalidCharacterError:
    return InvalidCharacterError(
        f'Invalid byte "{byte:x}" at index {index} for Base64 encoding',
        byte,
        index,
    )


def _require_buffer(data: Any) -> bytes | bytearray:
    if isinstance(data, memoryview):
        # Strided and multi-dimensional views are flattened to their raw bytes.
        return data.tobytes()
    if isinstance(data, (bytes, bytearray)):
        return data
    raise InvalidTypeError("The input must be a bytes-like object")


class BufferCodec(IBufferCodec):
    """Base64 codec for byte buffers over an alphabet table.

    ``encode``/``decode`` stay in the byte domain (ASCII symbol bytes in and
    out), while ``encode_to_string``/``decode_from_string`` use a string for
    the encoded side. Both share the same bit arithmetic.
    """

    def __init__(self, table: AlphabetTable) -> None:
        self._table = table

    def encode(self, data: BytesLike, start: Index = None, end: Index = None) -> bytes:
        """Encode a byte range into padded Base64 symbol bytes.

        Args:
            data: The buffer to encode.
            start: Start of the range, negative values count from the end.
            end: End of the range (exclusive), negative values count from the end.

        Returns:
            ASCII bytes whose length is a multiple of 4.

        Raises:
            InvalidTypeError: If ``data`` is not bytes-like.
        """
        buffer = _require_buffer(data)
        start_index, end_index = resolve_range(len(buffer), start, end)
        selected = bytes(buffer[start_index:end_index])

        base_map = self._table.base_map
        result = bytearray(base_map[sextet] for sextet in iter_sextets(selected))
        result.extend(PADDING_CHAR.encode("ascii") * padding_length(len(selected)))
        return bytes(result)

    def decode(self, data: BytesLike, start: Index = None, end: Index = None) -> bytes:
        """Decode a range of Base64 symbol bytes.

        Raises:
            InvalidTypeError: If ``data`` is not bytes-like.
            InvalidCharacterError: If a byte is not an alphabet symbol.
        """
        buffer = _require_buffer(data)
        return decode_symbols(
            buffer,
            self._table.base_map_lookup,
            _PADDING_BYTE,
            start,
            end,
            _invalid_byte,
        )

    def encode_to_string(self, data: BytesLike, start: Index = None, end: Index = None) -> str:
        """Encode a byte range into a padded Base64 string.

        Raises:
            InvalidTypeError: If ``data`` is not bytes-like.
        """
        buffer = _require_buffer(data)
        start_index, end_index = resolve_range(len(buffer), start, end)
        selected = bytes(buffer[start_index:end_index])

        alphabet = self._table.alphabet
        encoded = "".join(alphabet[sextet] for sextet in iter_sextets(selected))
        return encoded + PADDING_CHAR * padding_length(len(selected))

    def decode_from_string(self, text: str, start: Index = None, end: Index = None) -> bytes:
        """Decode a range of a Base64 string.

        Raises:
            InvalidTypeError: If ``text`` is not a string.
            InvalidCharacterError: If a character is not an alphabet symbol.
        """
        if not isinstance(text, str):
            raise InvalidTypeError("The input must be a string")
        return decode_symbols(text, self._table.lookup, PADDING_CHAR, start, end, _invalid_character)

