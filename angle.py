"""
Angle value type.
An angle between -360° and +360° kept as degrees, minutes, seconds and a
rotation direction, convertible to decimal degrees, radians and text.
"""

import math
from typing import Dict, Optional, Tuple, Union

from angle_builders import (
    AngleBuilder,
    FromAngleData,
    FromDecimal,
    FromRadian,
    FromString,
    FromValues,
)
from angle_parser import format_angle
from angle_rounding import (
    clamp_precision,
    count_decimal_places,
    round_half_away_from_zero,
)
from angle_types import (
    AngleData,
    Direction,
    MAX_MINUTES,
    MAX_SECONDS,
)

# Extra digits of a decimal value beyond the seconds precision
DECIMAL_EXTRA_DIGITS = 6

Operand = Union['Angle', int, float, str]


class InvalidOperandError(TypeError):
    """Raised when an angle is compared with an unsupported type."""

    def __init__(self, operand, method: str):
        self.operand = operand
        super().__init__(
            f"{method} expects an int, float, str or Angle operand, "
            f"but found {type(operand).__name__}"
        )


class Angle:
    """
    Represents an angle.

    Angles are created through a builder, usually via the factory
    methods, and never change afterwards.

    Example:
        >>> angle = Angle.from_string('-12° 30\\' 15.5"')
        >>> angle.to_decimal(4)
        -12.5043
        >>> str(angle.toggle_direction())
        '12° 30\\' 15.5"'
    """

    def __init__(self, builder: AngleBuilder):
        if not isinstance(builder, AngleBuilder):
            raise TypeError(
                f"Angle must be built from an AngleBuilder, found {type(builder).__name__}"
            )

        (self._degrees, self._minutes, self._seconds, direction,
         suggested_precision, original_decimal, seconds_precision,
         self._original_radian, self._original_radian_precision) = builder.fetch_data()
        self._direction = Direction(direction)

        if seconds_precision is None:
            seconds_precision = count_decimal_places(self._seconds)
        self._original_seconds_precision = seconds_precision

        if suggested_precision is None:
            suggested_precision = clamp_precision(seconds_precision + DECIMAL_EXTRA_DIGITS)
        self._suggested_decimal_precision = suggested_precision

        if original_decimal is None:
            original_decimal = self._calc_decimal(suggested_precision)
        self._original_decimal = original_decimal

    @classmethod
    def from_values(cls, degrees: int = 0, minutes: int = 0, seconds: float = 0.0,
                    direction: int = Direction.COUNTER_CLOCKWISE) -> 'Angle':
        """
        Create an angle from its values.

        Raises:
            AngleOverflowError: If the values exceed 360°, 59' or 59.9"
        """
        return cls(FromValues(degrees, minutes, seconds, direction))

    @classmethod
    def from_decimal(cls, decimal: float) -> 'Angle':
        """
        Create an angle from decimal degrees.

        Raises:
            AngleOverflowError: If |decimal| > 360
        """
        return cls(FromDecimal(decimal))

    @classmethod
    def from_radian(cls, radian: float) -> 'Angle':
        """
        Create an angle from radians.

        Raises:
            AngleOverflowError: If |radian| > 2π
        """
        return cls(FromRadian(radian))

    @classmethod
    def from_string(cls, text: str) -> 'Angle':
        """
        Create an angle from its textual representation.

        Raises:
            NoMatchError: If no degrees value is found
            ParserEngineError: If the regular expression engine fails
            AngleOverflowError: If a value is out of range
        """
        return cls(FromString(text))

    @property
    def degrees(self) -> int:
        return self._degrees

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def seconds(self) -> float:
        return self._seconds

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def suggested_decimal_precision(self) -> int:
        return self._suggested_decimal_precision

    @property
    def original_decimal(self) -> float:
        return self._original_decimal

    @property
    def original_seconds_precision(self) -> int:
        return self._original_seconds_precision

    @property
    def original_radian(self) -> Optional[float]:
        return self._original_radian

    @property
    def original_radian_precision(self) -> Optional[int]:
        return self._original_radian_precision

    def get_degrees(self, associative: bool = False) -> Union[Tuple[int, int, float], Dict[str, float]]:
        """
        Get degrees, minutes and seconds, with the sign on degrees.

        Args:
            associative: Return a dict instead of a tuple

        Returns:
            (degrees, minutes, seconds) or the same keyed by name
        """
        degrees = self._degrees * self._direction
        if associative:
            return {
                'degrees': degrees,
                'minutes': self._minutes,
                'seconds': self._seconds
            }
        return (degrees, self._minutes, self._seconds)

    def is_clockwise(self) -> bool:
        """Check if this angle is clockwise (negative)."""
        return self._direction == Direction.CLOCKWISE

    def is_counter_clockwise(self) -> bool:
        """Check if this angle is counterclockwise (positive)."""
        return self._direction == Direction.COUNTER_CLOCKWISE

    def toggle_direction(self) -> 'Angle':
        """
        Return a new angle with the opposite direction.

        A null angle stays a counterclockwise 0° with a decimal value of 0.0.
        """
        radian = self._original_radian
        data = AngleData(
            degrees=self._degrees,
            minutes=self._minutes,
            seconds=self._seconds,
            direction=Direction(-self._direction),
            suggested_decimal_precision=self._suggested_decimal_precision,
            original_decimal=-self._original_decimal,
            original_seconds_precision=self._original_seconds_precision,
            original_radian=-radian if radian is not None else None,
            original_radian_precision=self._original_radian_precision
        )
        if data.is_null():
            data = data.with_changes(
                original_decimal=0.0,
                original_radian=0.0 if radian is not None else None
            )
        return Angle(FromAngleData(data))

    def _calc_decimal(self, precision: int) -> float:
        decimal = (self._degrees +
                   self._minutes / MAX_MINUTES +
                   self._seconds / (MAX_MINUTES * MAX_SECONDS))
        return round_half_away_from_zero(decimal * self._direction, precision)

    def to_decimal(self, precision: Optional[int] = None) -> float:
        """
        Get the decimal degrees of this angle.

        Without a precision the original decimal value is returned as is.

        Args:
            precision: Number of decimal digits

        Returns:
            Signed decimal degrees
        """
        if precision is None:
            return self._original_decimal
        return self._calc_decimal(clamp_precision(precision))

    def to_radian(self, precision: Optional[int] = None) -> float:
        """
        Get the radians of this angle.

        Without a precision the value is not rounded; angles built from
        radians return the original value.

        Args:
            precision: Number of decimal digits

        Returns:
            Signed radians
        """
        if self._original_radian is not None:
            radian = self._original_radian
        else:
            radian = math.radians(self._original_decimal)

        if precision is None:
            return radian
        return round_half_away_from_zero(radian, clamp_precision(precision))

    @staticmethod
    def to_total_seconds(angle: 'Angle', precision: int = 1) -> float:
        """
        Calculate the total seconds that make up an angle.

        Public utility for callers; sums are computed from decimal
        degrees and do not go through it.

        Args:
            angle: The angle
            precision: Number of decimal digits

        Returns:
            Unsigned total seconds
        """
        return round_half_away_from_zero(
            angle.seconds +
            angle.minutes * MAX_SECONDS +
            angle.degrees * MAX_SECONDS * MAX_MINUTES,
            precision
        )

    def _check_operand(self, operand, method: str) -> None:
        if isinstance(operand, bool) or not isinstance(operand, (Angle, int, float, str)):
            raise InvalidOperandError(operand, f"{type(self).__name__}.{method}")

    def _magnitudes(self, operand: Operand, precision: Optional[int]) -> Tuple[float, float]:
        """Absolute decimal values of this angle and the operand."""
        if isinstance(operand, str):
            operand = Angle.from_string(operand)

        if isinstance(operand, Angle):
            return abs(self.to_decimal(precision)), abs(operand.to_decimal(precision))

        if isinstance(operand, int):
            return abs(self.to_decimal(0)), abs(operand)

        digits = (self._suggested_decimal_precision if precision is None
                  else clamp_precision(precision))
        return (abs(round_half_away_from_zero(self.to_decimal(precision), digits)),
                abs(round_half_away_from_zero(operand, digits)))

    def is_equal(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """
        Check if this angle is equal to another one.

        Angles are compared by degrees, minutes and seconds. Strings,
        integers and floats are compared by absolute decimal value;
        integers use whole degrees.

        Args:
            angle: Angle, int, float (degrees) or angle string
            precision: Decimal digits used for the comparison

        Returns:
            True if equal

        Raises:
            InvalidOperandError: If angle has an unsupported type
        """
        self._check_operand(angle, "is_equal")

        if isinstance(angle, Angle):
            return (self._degrees == angle.degrees and
                    self._minutes == angle.minutes and
                    self._seconds == angle.seconds)

        this, other = self._magnitudes(angle, precision)
        return this == other

    def eq(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """Alias of is_equal."""
        return self.is_equal(angle, precision)

    def is_different(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """Check if this angle is not equal to another one."""
        return not self.is_equal(angle, precision)

    def ne(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """Alias of is_different."""
        return self.is_different(angle, precision)

    def is_greater_than(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """
        Check if this angle is wider than another one.

        Magnitudes are compared, direction is ignored.

        Raises:
            InvalidOperandError: If angle has an unsupported type
        """
        self._check_operand(angle, "is_greater_than")
        this, other = self._magnitudes(angle, precision)
        return this > other

    def gt(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """Alias of is_greater_than."""
        return self.is_greater_than(angle, precision)

    def is_greater_than_or_equal(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """Check if this angle is wider than or equal to another one."""
        self._check_operand(angle, "is_greater_than_or_equal")
        return self.is_equal(angle, precision) or self.is_greater_than(angle, precision)

    def gte(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """Alias of is_greater_than_or_equal."""
        return self.is_greater_than_or_equal(angle, precision)

    def is_less_than(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """
        Check if this angle is narrower than another one.

        Raises:
            InvalidOperandError: If angle has an unsupported type
        """
        self._check_operand(angle, "is_less_than")
        this, other = self._magnitudes(angle, precision)
        return this < other

    def lt(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """Alias of is_less_than."""
        return self.is_less_than(angle, precision)

    def is_less_than_or_equal(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """Check if this angle is narrower than or equal to another one."""
        self._check_operand(angle, "is_less_than_or_equal")
        return self.is_equal(angle, precision) or self.is_less_than(angle, precision)

    def lte(self, angle: Operand, precision: Optional[int] = None) -> bool:
        """Alias of is_less_than_or_equal."""
        return self.is_less_than_or_equal(angle, precision)

    def __str__(self) -> str:
        """Textual representation, e.g. -12° 30' 15.5"."""
        return format_angle(
            self._degrees,
            self._minutes,
            self._seconds,
            self._direction,
            self._original_seconds_precision
        )

    def __repr__(self) -> str:
        """Developer representation."""
        return f"{type(self).__name__}({str(self)!r})"
