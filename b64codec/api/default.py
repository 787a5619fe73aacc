"""Default codec instance.

Module-level helpers bound to a standard-alphabet Base64 instance.
"""

from __future__ import annotations

from b64codec.api.base64 import Base64
from b64codec.validation import is_alphabet, is_base64_string

default_codec = Base64()

is_base64 = Base64.is_base64

encode_int = default_codec.encode_int
decode_int = default_codec.decode_int
encode_big_int = default_codec.encode_big_int
decode_big_int = default_codec.decode_big_int
encode_text = default_codec.encode_text
decode_text = default_codec.decode_text
encode = default_codec.encode
decode = default_codec.decode
encode_to_string = default_codec.encode_to_string
decode_from_string = default_codec.decode_from_string

__all__ = [
    "default_codec",
    "is_alphabet",
    "is_base64",
    "is_base64_string",
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
