"""Text codec implementation.

This module composes a buffer codec with UTF-8 transcoding so that
human-readable strings can be carried as Base64.
"""

from __future__ import annotations

from b64codec.exceptions import InvalidTypeError
from b64codec.interfaces.encoding import IBufferCodec, Index, ITextCodec


def _to_utf8(text: str) -> bytes:
    """Encode text as UTF-8.

    Surrogate pairs are joined into their code point and each lone surrogate
    becomes a single U+FFFD.
    """
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        utf16 = text.encode("utf-16-le", "surrogatepass")
        return utf16.decode("utf-16-le", errors="replace").encode("utf-8")


class TextCodec(ITextCodec):
    """Base64 codec for UTF-8 text.

    Ranges passed to ``encode_text`` select bytes of the UTF-8 encoding, while
    ranges passed to ``decode_text`` select characters of the Base64 input.
    Lone surrogates in encoded text and malformed UTF-8 in decoded payloads are
    replaced with U+FFFD rather than raising.
    """

    def __init__(self, buffer_codec: IBufferCodec) -> None:
        self._buffer_codec = buffer_codec

    def encode_text(self, text: str, start: Index = None, end: Index = None) -> str:
        if not isinstance(text, str):
            raise InvalidTypeError("The input must be a string")
        return self._buffer_codec.encode_to_string(_to_utf8(text), start, end)

    def decode_text(self, text: str, start: Index = None, end: Index = None) -> str:
        if not isinstance(text, str):
            raise InvalidTypeError("The input must be a string")
        return self._buffer_codec.decode_from_string(text, start, end).decode("utf-8", errors="replace")
