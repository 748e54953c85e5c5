"""Measurement formatting for contractors."""

from __future__ import annotations
import math


def to_fractional_inches(value: float) -> str:
    """
    Format decimal inches as a mixed fraction to the nearest 1/8".

    >>> to_fractional_inches(3.5)
    '3 1/2"'
    >>> to_fractional_inches(0.0625)
    '1/8"'
    """
    if value < 0:
        return "-" + to_fractional_inches(abs(value))

    # Half rounds up, as a tape measure reader would
    eighths = math.floor(value * 8 + 0.5)
    whole, numerator = divmod(eighths, 8)
    denominator = 8

    if numerator == 0:
        return f'{whole}"'

    if numerator % 4 == 0:
        numerator //= 4
        denominator //= 4
    elif numerator % 2 == 0:
        numerator //= 2
        denominator //= 2

    fraction = f"{numerator}/{denominator}"
    if whole == 0:
        return f'{fraction}"'
    return f'{whole} {fraction}"'
