"""b64codec: a configurable Base64 codec.

This package converts between raw bytes and Base64 text (RFC 4648 bit layout
with padding) over a caller-chosen 64-symbol alphabet, and writes integers of
any size as base-64 numerals over the same alphabet.

Main Components:
    - Base64: Codec bound to one alphabet
    - Base64Config: Codec configuration
    - Module-level helpers: Bound to a standard-alphabet default instance
    - Validation: is_alphabet and is_base64_string predicates
    - Exceptions: Base64Error and its subclasses

Example:
    >>> from b64codec import Base64, encode_text
    >>> encode_text("Ave, Darkwolf!")
    'QXZlLCBEYXJrd29sZiE='
    >>> Base64().decode_int("f////////")
    9007199254740991
"""

from b64codec.api import (
    Base64,
    Base64Config,
    decode,
    decode_big_int,
    decode_from_string,
    decode_int,
    decode_text,
    default_codec,
    encode,
    encode_big_int,
    encode_int,
    encode_text,
    encode_to_string,
    is_base64,
)
from b64codec.constants import (
    ALPHABET,
    BASE,
    BITS_PER_CHAR,
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    NEGATIVE_CHAR,
    PADDING_CHAR,
)
from b64codec.exceptions import (
    Base64Error,
    InvalidCharacterError,
    InvalidLengthError,
    InvalidSymbolError,
    InvalidTypeError,
    OutOfRangeError,
)
from b64codec.validation import is_alphabet, is_base64_string

__version__ = "0.1.0"

__all__ = [
    # Constants
    "BASE",
    "ALPHABET",
    "BITS_PER_CHAR",
    "PADDING_CHAR",
    "NEGATIVE_CHAR",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    # Codec
    "Base64",
    "Base64Config",
    "default_codec",
    # Predicates
    "is_alphabet",
    "is_base64",
    "is_base64_string",
    # Default instance helpers
    "encode_int",
    "decode_int",
    "encode_big_int",
    "decode_big_int",
    "encode_text",
    "decode_text",
    "encode",
    "decode",
    "encode_to_string",
    "decode_from_string",
    # Exceptions
    "Base64Error",
    "InvalidTypeError",
    "InvalidLengthError",
    "InvalidSymbolError",
    "InvalidCharacterError",
    "OutOfRangeError",
]
