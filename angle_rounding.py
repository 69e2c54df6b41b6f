"""
Rounding and precision helpers for angle conversions.
Rounds half away from zero, which differs from Python's built-in round().
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext

from angle_types import MAX_FLOAT_DIGITS


def round_half_away_from_zero(value: float, digits: int = 0) -> float:
    """
    Round a number to a given number of decimal digits.

    Ties are rounded away from zero, so 0.5 becomes 1 and -0.5 becomes -1.
    The float is rounded through its shortest decimal representation.

    Args:
        value: Number to round
        digits: Number of decimal digits to keep

    Returns:
        Rounded value

    Example:
        >>> round_half_away_from_zero(2.675, 2)
        2.68
        >>> round_half_away_from_zero(-0.5)
        -1.0
    """
    exponent = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = 64
        rounded = Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)
    return float(rounded)


def count_decimal_places(value: float) -> int:
    """
    Count the decimal digits a number actually carries.

    Args:
        value: Number to inspect

    Returns:
        Smallest number of digits that reproduces value when rounding,
        capped at MAX_FLOAT_DIGITS
    """
    for digits in range(MAX_FLOAT_DIGITS + 1):
        if round_half_away_from_zero(value, digits) == value:
            return digits
    return MAX_FLOAT_DIGITS


def clamp_precision(requested: int) -> int:
    """Limit a requested precision to the digits a float can hold."""
    return min(abs(int(requested)), MAX_FLOAT_DIGITS)
