"""Numeric coercion for raw CSV cells."""

import math
import re
from typing import Optional

# Plain ASCII decimal numbers, optionally signed, with an optional exponent
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
# Unsigned hex, octal and binary literals
_PREFIXED = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+", re.ASCII)


def to_number(value: Optional[str]) -> float:
    """
    Convert a CSV cell to a number.

    Empty, non-numeric, NaN and infinite values all become 0. Forms such as
    "1_000" or non-ASCII digits are not numbers here, even though float()
    would accept them.
    """
    if not value:
        return 0.0
    try:
        text = value.strip()
    except AttributeError:
        return 0.0

    if _PREFIXED.fullmatch(text):
        return float(int(text, 0))
    if not _DECIMAL.fullmatch(text):
        return 0.0

    number = float(text)
    if not math.isfinite(number):
        return 0.0
    return number


def to_int(value: Optional[str]) -> int:
    """Coerce a CSV cell to an integer, truncating any fraction."""
    return int(to_number(value))
