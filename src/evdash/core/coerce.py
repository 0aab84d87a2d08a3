"""Lenient numeric coercion for string-valued dataset fields.

Dataset numbers arrive as text and are frequently blank or malformed.
Parsing takes the longest numeric prefix (so "12.5" reads as 12 for
integers and "40000 USD" as 40000.0 for floats) and returns None when no
number can be read. Nothing here raises.
"""

from __future__ import annotations

import math
import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(value: object) -> int | None:
    """Parse the leading integer of a string.

    Args:
        value: Raw field value (usually str or None).

    Returns:
        Parsed integer, or None if the value has no leading integer.

    Examples:
        >>> parse_int("2020")
        2020
        >>> parse_int("12.5")
        12
        >>> parse_int("n/a") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    match = _INT_PREFIX.match(value)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs beyond the interpreter's int conversion limit
        return None


def parse_float(value: object) -> float | None:
    """Parse the leading decimal number of a string.

    Returns None for values without a leading number and for non-finite
    results, so an average can never be poisoned by NaN or inf.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match is None:
            return None
        number = float(match.group(1))
    else:
        return None
    if not math.isfinite(number):
        return None
    return number
