"""
Rootline Core - Lenient Integer Coercion
========================================

Integer list handling for rootline group ids.

Group entries are coerced, never validated: the leading numeric part of an
entry is read (decimals and exponents included, then truncated toward zero),
trailing garbage is dropped and an entry without a leading number becomes 0.
Access evaluation downstream relies on this exact mapping, so it must not be
tightened here.
"""

import math
import re
from typing import List

_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)([eE][+-]?\d+)?)", re.ASCII
)


def to_int(value: str) -> int:
    """
    Coerce a string to int, returning 0 when it has no leading number.

    Example:
        to_int("12abc")   # 12
        to_int("2.5e1")   # 25
        to_int("abc")     # 0
    """
    match = _LEADING_NUMBER.match(value)
    if match is None:
        return 0

    number = match.group(1)
    if "." not in number and match.group(2) is None:
        return int(number)

    # Non-finite results (e.g. "1e999") have no integer value
    truncated = float(number)
    if not math.isfinite(truncated):
        return 0
    return int(truncated)


def int_explode(delimiter: str, value: str) -> List[int]:
    """
    Split a string and coerce every piece to int.

    Empty pieces are kept and become 0, so an empty string yields [0].

    Example:
        int_explode(",", "1,,3")   # [1, 0, 3]
        int_explode(",", "7abc")   # [7]
    """
    return [to_int(piece) for piece in value.split(delimiter)]


def is_canonical_int(value: str) -> bool:
    """Check whether coercion maps the string to an int without losing text."""
    return str(to_int(value)) == value


__all__ = [
    "to_int",
    "int_explode",
    "is_canonical_int",
]
