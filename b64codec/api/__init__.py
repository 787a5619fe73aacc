"""b64codec API package.

This package provides the Base64 codec class, its configuration type and the
default standard-alphabet instance.
"""

from b64codec.api.base64 import Base64, Base64Config
from b64codec.api.default import (
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

__all__ = [
    # Codec
    "Base64",
    "Base64Config",
    # Default instance
    "default_codec",
    "is_base64",
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
]
