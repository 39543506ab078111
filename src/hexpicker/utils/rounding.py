"""Number rounding and display helpers for human-readable color text.

These helpers are only used to build shown/copied strings. Internal
color math always works on unrounded floats.
"""

import math


def round_half_away(x: float, decimals: int = 0) -> float:
    """Round to `decimals` digits, ties away from zero.

    NaN and infinities are treated as 0.

    Example:
        >>> round_half_away(33.333, 1)
        33.3
        >>> round_half_away(-0.125, 2)
        -0.13
    """
    if not math.isfinite(x):
        return 0.0
    scale = 10 ** decimals
    rounded = math.floor(abs(x) * scale + 0.5) / scale
    return math.copysign(rounded, x) if rounded else 0.0


def format_number(x: float) -> str:
    """Shortest text for a number, without a fraction when it is integral.

    >>> format_number(80.0)
    '80'
    >>> format_number(305.9)
    '305.9'
    """
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


def format_float(x: float) -> str:
    """Float text that always carries a fraction (``1.0``, ``0.52``)."""
    return repr(float(x))
