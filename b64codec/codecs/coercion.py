"""Argument coercion helpers.

These follow the ECMAScript abstract operations ToIntegerOrInfinity, ToBigInt
and ``slice`` index resolution, so ranges and numerals behave the same as in
JavaScript implementations of the format.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from numbers import Real
from typing import Any

from b64codec.exceptions import InvalidTypeError

_DECIMAL_LITERAL = re.compile(r"[+-]?[0-9]+")
_PREFIXED_LITERALS = {
    "0x": (re.compile(r"[0-9a-fA-F]+"), 16),
    "0o": (re.compile(r"[0-7]+"), 8),
    "0b": (re.compile(r"[01]+"), 2),
}


def to_integer_or_infinity(value: Any) -> int | float:
    """Coerce a number to an integer, keeping infinities.

    Finite values are truncated toward zero and NaN becomes 0.

    Raises:
        InvalidTypeError: If the value is not a real number.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if value.is_nan():
            return 0
        if value.is_infinite():
            return float(value)
        return math.trunc(value)
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return value
        return math.trunc(value)
    if isinstance(value, Real):
        return math.trunc(value)
    raise InvalidTypeError(f"Cannot convert {type(value).__name__} to an integer")


def to_big_int(value: Any) -> int:
    """Coerce a value to an arbitrary-precision integer.

    Integers pass through. Strings are parsed as integer literals: surrounding
    whitespace is ignored, an empty string is 0, ``0x``/``0o``/``0b`` prefixes
    select the radix and a sign is only allowed on decimal literals.

    Raises:
        InvalidTypeError: If the value is neither an integer nor an integer literal.
    """
    if isinstance(value, int):
        return int(value)
    if not isinstance(value, str):
        raise InvalidTypeError(f"Cannot convert {type(value).__name__} to a big integer")

    literal = value.strip()
    if not literal:
        return 0

    prefix = literal[:2].lower()
    if prefix in _PREFIXED_LITERALS:
        pattern, radix = _PREFIXED_LITERALS[prefix]
        digits = literal[2:]
        if pattern.fullmatch(digits):
            return int(digits, radix)
    elif _DECIMAL_LITERAL.fullmatch(literal):
        return int(literal, 10)
    raise InvalidTypeError(f'Cannot convert "{value}" to a big integer')


def resolve_index(value: Any, length: int) -> int:
    """Resolve one ``slice``-style bound against a sequence length.

    Negative values count back from the end; the result is clamped to
    ``[0, length]``.
    """
    number = to_integer_or_infinity(value)
    if number < 0:
        return int(max(0, length + number))
    return int(min(number, length))


def resolve_range(length: int, start: Any = None, end: Any = None) -> tuple[int, int]:
    """Resolve optional ``start``/``end`` bounds into a half-open range.

    Args:
        length: Length of the sequence being sliced.
        start: Start bound, or None for 0.
        end: End bound (exclusive), or None for ``length``.

    Returns:
        A ``(start, end)`` pair with ``end >= start``.
    """
    start_index = 0 if start is None else resolve_index(start, length)
    end_index = length if end is None else resolve_index(end, length)
    return start_index, max(start_index, end_index)
