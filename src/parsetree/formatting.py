# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Conversion of numeric attribute values to their stored string form."""

from __future__ import annotations

import math

DOUBLE_PRECISION = 8


def format_int(value: int) -> str:
    """Return the canonical decimal representation of an integer.

    Example:
        >>> format_int(-42)
        '-42'
    """
    return str(int(value))


def format_double(
    value: float, width: int = 1, precision: int = DOUBLE_PRECISION
) -> str:
    """Format a float in fixed-point notation.

    At most ``precision`` digits follow the decimal point. Trailing zeros
    and a dangling point are removed, at least one digit precedes the
    point, and the result is right-aligned to ``width``.

    Args:
        value: The number to format.
        width: Minimum field width.
        precision: Maximum number of fractional digits.

    Returns:
        The formatted string.

    Example:
        >>> format_double(0.5)
        '0.5'
        >>> format_double(2.0)
        '2'
        >>> format_double(1 / 3)
        '0.33333333'
    """
    value = float(value)
    if math.isnan(value):
        text = 'nan'
    elif math.isinf(value):
        text = 'inf' if value > 0 else '-inf'
    else:
        text = f"{value:.{precision}f}"
        if '.' in text:
            text = text.rstrip('0').rstrip('.')
        # Rounding may leave '-0' for tiny negatives.
        if text == '-0':
            text = '0'
    return text.rjust(width)


def format_value(value: str | int | float) -> str:
    """Convert an attribute value to the string that gets stored.

    Raises:
        TypeError: If value is not a str, int or float.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return format_int(value)
    if isinstance(value, float):
        return format_double(value)
    raise TypeError(
        f"attribute value must be str, int or float, not {type(value).__name__}"
    )
