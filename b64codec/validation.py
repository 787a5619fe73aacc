"""Validation predicates.

Non-raising checks for callers that want to vet input before handing it to
a codec.
"""

from __future__ import annotations

from typing import Any

from b64codec.alphabet import AlphabetTable, to_alphabet
from b64codec.constants import PADDING_CHAR
from b64codec.exceptions import Base64Error

_STANDARD_TABLE = AlphabetTable()


def is_alphabet(value: Any) -> bool:
    """Check whether a value is a well-formed 64-symbol alphabet.

    Args:
        value: The candidate alphabet.

    Returns:
        True if the value would be accepted as a codec alphabet.
    """
    if value is None:
        return False
    try:
        to_alphabet(value)
    except Base64Error:
        return False
    return True


def is_base64_string(value: Any, table: AlphabetTable | None = None) -> bool:
    """Check whether a value is a well-formed Base64 string.

    The length must be a multiple of 4 and every character, except up to two
    trailing padding markers, must belong to the alphabet.

    Args:
        value: The candidate string.
        table: Alphabet to check against; the standard alphabet if omitted.

    Returns:
        True if the value is a Base64 string under the alphabet.
    """
    if not isinstance(value, str):
        return False
    length = len(value)
    if length % 4 != 0:
        return False

    lookup = (table or _STANDARD_TABLE).lookup
    last_index = length - 1
    padding_count = 0
    while padding_count < length and padding_count < 2 and value[last_index - padding_count] == PADDING_CHAR:
        padding_count += 1
    return all(character in lookup for character in value[: length - padding_count])
