"""Scalar value formatting for RON."""

import math
import struct
from decimal import Decimal

from .string_utils import quote_char, quote_string


def format_bool(value: bool) -> str:
    """Format a boolean as a RON literal."""
    return "true" if value else "false"


def format_int(value: int) -> str:
    """
    Format an integer of any width as decimal text.

    Narrow integer widths are widened before formatting, so the width
    never shows up in the output.
    """
    return str(int(value))


def format_float(value: float) -> str:
    """
    Format a double precision float as decimal text.

    Uses the shortest digits that round-trip, never scientific notation,
    and drops the fraction of integral values.

    Args:
        value: The float to format.

    Returns:
        The formatted text, e.g. ``4``, ``3.5``, ``100000000000000000000``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    s = repr(value)
    # Expand exponent forms like 1e+20 or 1.5e-07
    if "e" in s:
        s = format(Decimal(s), "f")
    if s.endswith(".0"):
        return s[:-2]
    return s


def widen_f32(value: float) -> float:
    """
    Round a float to single precision and widen it back to a double.

    Values past the single precision range become infinities.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def encode_char(value: str) -> str:
    """Encode a single character as a quoted RON char literal."""
    return quote_char(value)


def encode_string_literal(value: str) -> str:
    """Encode a string as a quoted RON string literal."""
    return quote_string(value)
