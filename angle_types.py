"""
Shared types and limits for the angle library.
Defines the rotation direction and the canonical angle tuple produced by builders.
"""

import math
import sys
from dataclasses import dataclass, astuple, replace
from enum import IntEnum
from typing import Optional


class Direction(IntEnum):
    """Rotation direction of an angle."""
    CLOCKWISE = -1
    COUNTER_CLOCKWISE = 1


# The max degrees an angle can have
MAX_DEGREES = 360

# Minutes and seconds are exclusive upper bounds
MAX_MINUTES = 60
MAX_SECONDS = 60

# Radian measure of a round angle
MAX_RADIAN = 2 * math.pi

# Max meaningful decimal digits of a 64-bit float
MAX_FLOAT_DIGITS = sys.float_info.dig


def is_null_angle(degrees: int, minutes: int, seconds: float) -> bool:
    """Check if all magnitudes are zero."""
    return degrees == 0 and minutes == 0 and seconds == 0


def is_full_angle(degrees: int, minutes: int, seconds: float) -> bool:
    """Check for a round angle (360° 0' 0")."""
    return degrees == MAX_DEGREES and minutes == 0 and seconds == 0


@dataclass(frozen=True)
class AngleData:
    """
    Canonical angle tuple returned by every builder.

    Attributes:
        degrees: Degrees magnitude (0..360)
        minutes: Minutes magnitude (0..59)
        seconds: Seconds magnitude (0 <= s < 60)
        direction: Rotation direction carrying the sign
        suggested_decimal_precision: Default digits for decimal conversion
        original_decimal: Decimal value the angle was built from (if any)
        original_seconds_precision: Digits the seconds were specified with
        original_radian: Radian value the angle was built from (if any)
        original_radian_precision: Digits of the original radian value
    """
    degrees: int
    minutes: int
    seconds: float
    direction: Direction = Direction.COUNTER_CLOCKWISE
    suggested_decimal_precision: Optional[int] = None
    original_decimal: Optional[float] = None
    original_seconds_precision: Optional[int] = None
    original_radian: Optional[float] = None
    original_radian_precision: Optional[int] = None

    def __iter__(self):
        return iter(astuple(self))

    def is_null(self) -> bool:
        """Check if all magnitudes are zero."""
        return is_null_angle(self.degrees, self.minutes, self.seconds)

    def with_changes(self, **changes) -> 'AngleData':
        """Return a copy with some fields replaced."""
        return replace(self, **changes)
