"""Numeric helpers for chart scaling and value display."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up.

    Unlike the built-in ``round``, exact halves never round to even.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)


def format_value(value: float) -> str:
    """Format a record value, dropping the fraction for integral values.

    Examples:
        >>> format_value(14.0)
        '14'
        >>> format_value(2.75)
        '2.75'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_fixed(value: float, places: int = 1) -> str:
    """Fixed-point text with exact halves rounded away from zero.

    The float is converted exactly, so 0.25 gives "0.3" and 6.25 gives "6.3".
    """
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_legend_value(value: float) -> str:
    """Integral values as integers, others with one decimal place."""
    if float(value).is_integer():
        return str(int(value))
    return format_fixed(value)


def safe_ratio(value: float, maximum: float) -> float:
    """value / maximum, or 0.0 when the maximum is zero."""
    if maximum == 0:
        return 0.0
    return value / maximum


def axis_value(row: int, height: int, maximum: float) -> int:
    """Rounded y-axis value printed beside canvas row ``row``."""
    return round_half_up(maximum - (row / height) * maximum)
