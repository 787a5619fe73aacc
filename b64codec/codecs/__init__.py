"""Codec implementations package.

This package provides the buffer, numeral and text codecs that operate over
an alphabet table, plus the argument coercion helpers they share.
"""

from .buffer import BufferCodec
from .numeral import NumeralCodec
from .text import TextCodec

__all__ = [
    "BufferCodec",
    "NumeralCodec",
    "TextCodec",
]
