"""b64codec interfaces package.

This package provides protocol definitions for the numeral, buffer and text
codecs.
"""

from .encoding import BytesLike, IBufferCodec, IIntegerCodec, Index, ITextCodec

__all__ = [
    "BytesLike",
    "IBufferCodec",
    "IIntegerCodec",
    "Index",
    "ITextCodec",
]
