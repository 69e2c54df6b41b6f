"""
Angle builders.
Each builder validates one kind of input and normalizes it into the
canonical AngleData tuple used to construct an Angle.
"""

import math
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

from angle_parser import parse_angle_string
from angle_rounding import (
    clamp_precision,
    count_decimal_places,
    round_half_away_from_zero,
)
from angle_types import (
    AngleData,
    Direction,
    MAX_DEGREES,
    MAX_MINUTES,
    MAX_RADIAN,
    MAX_SECONDS,
    is_full_angle,
    is_null_angle,
)

logger = logging.getLogger(__name__)

# Seconds given as values or strings keep one decimal digit
SECONDS_DIGITS = 1

# Extra digits needed to express a decimal fraction in seconds
SECONDS_EXTRA_DIGITS = 6


class AngleOverflowError(OverflowError):
    """Raised when an angle value exceeds its allowed range."""

    def __init__(self, field: str, value: Any, limit: Any,
                 source: Optional[str] = None):
        self.field = field
        self.value = value
        self.limit = limit
        self.source = source

        message = f"The {field} value {value} exceeds the limit of {limit}"
        if source is not None:
            message += f" in {source}"
        super().__init__(message)


class BuilderReusedError(RuntimeError):
    """Raised when a builder is asked for its data a second time."""
    pass


def _whole_number(value: Any, field: str) -> int:
    """Convert an integral value to int, refusing fractions."""
    if value != int(value):
        raise ValueError(f"The {field} value must be a whole number, found {value}")
    return int(value)


def correct_direction(direction: int) -> Direction:
    """Map any negative value to clockwise, anything else to counterclockwise."""
    return Direction.CLOCKWISE if direction < 0 else Direction.COUNTER_CLOCKWISE


def check_sexagesimal(degrees: int, minutes: int, seconds: float,
                      source: Optional[str] = None) -> None:
    """
    Validate sexagesimal magnitudes.

    Args:
        degrees: Degrees magnitude
        minutes: Minutes magnitude
        seconds: Seconds magnitude
        source: Original input quoted in the error message

    Raises:
        AngleOverflowError: If any value is out of range
    """
    if degrees > MAX_DEGREES:
        error = AngleOverflowError("degrees", degrees, MAX_DEGREES, source)
    elif minutes >= MAX_MINUTES:
        error = AngleOverflowError("minutes", minutes, MAX_MINUTES - 1, source)
    elif not 0 <= seconds < MAX_SECONDS:
        error = AngleOverflowError("seconds", seconds, MAX_SECONDS - 0.1, source)
    elif degrees == MAX_DEGREES and (minutes or seconds):
        error = AngleOverflowError(
            "angle", f"{degrees}° {minutes}' {seconds}\"", f"{MAX_DEGREES}°", source
        )
    else:
        return

    logger.warning(str(error))
    raise error


def round_seconds(seconds: float, source: Optional[str] = None) -> float:
    """
    Round seconds to one decimal digit.

    Raises:
        AngleOverflowError: If seconds is NaN or infinite
    """
    if not math.isfinite(seconds):
        error = AngleOverflowError("seconds", seconds, MAX_SECONDS - 0.1, source)
        logger.warning(str(error))
        raise error
    return round_half_away_from_zero(seconds, SECONDS_DIGITS)


def decimal_to_sexagesimal(magnitude: float,
                           seconds_precision: int) -> Tuple[int, int, float]:
    """
    Split a non-negative decimal degrees value into degrees, minutes, seconds.

    The integer part is truncated at each step and the remainder is carried
    on. Seconds that round up to 60 carry into minutes and degrees.

    Args:
        magnitude: Decimal degrees, 0..360
        seconds_precision: Decimal digits kept on seconds

    Returns:
        Tuple of (degrees, minutes, seconds)
    """
    degrees = int(magnitude)
    remainder = magnitude - degrees

    minutes = int(remainder * MAX_MINUTES)
    remainder = abs(remainder - minutes / MAX_MINUTES)

    seconds = round_half_away_from_zero(
        remainder * MAX_MINUTES * MAX_SECONDS, seconds_precision
    )

    if seconds >= MAX_SECONDS:
        seconds = round_half_away_from_zero(seconds - MAX_SECONDS, seconds_precision)
        minutes += 1
    if minutes >= MAX_MINUTES:
        minutes -= MAX_MINUTES
        degrees += 1

    return degrees, minutes, seconds


class AngleBuilder(ABC):
    """
    Base class of all angle builders.

    A builder validates its input when created and produces the canonical
    data exactly once through fetch_data().
    """

    def __init__(self):
        self.degrees: int = 0
        self.minutes: int = 0
        self.seconds: float = 0.0
        self.direction: Direction = Direction.COUNTER_CLOCKWISE
        self._fetched = False

    @abstractmethod
    def check_overflow(self) -> None:
        """Check the input is within ±360°."""

    @abstractmethod
    def _build(self) -> AngleData:
        """Compute the canonical data."""

    def fetch_data(self) -> AngleData:
        """
        Produce the canonical data to build an Angle.

        Returns:
            AngleData tuple

        Raises:
            BuilderReusedError: If called more than once
        """
        if self._fetched:
            raise BuilderReusedError(f"{type(self).__name__} has already been used")
        self._fetched = True

        data = self._build()
        logger.debug(f"{type(self).__name__} built {data}")
        return data

    def _normalize_null_direction(self) -> None:
        """A null angle is always counterclockwise."""
        if is_null_angle(self.degrees, self.minutes, self.seconds):
            self.direction = Direction.COUNTER_CLOCKWISE


class FromValues(AngleBuilder):
    """Builds an angle from degrees, minutes, seconds and direction."""

    def __init__(self, degrees: int = 0, minutes: int = 0, seconds: float = 0.0,
                 direction: int = Direction.COUNTER_CLOCKWISE):
        super().__init__()
        self.degrees = abs(_whole_number(degrees, "degrees"))
        self.minutes = abs(_whole_number(minutes, "minutes"))
        self.seconds = round_seconds(abs(seconds))
        self.check_overflow()
        self.direction = correct_direction(direction)
        self._normalize_null_direction()

    def check_overflow(self) -> None:
        check_sexagesimal(self.degrees, self.minutes, self.seconds)

    def _build(self) -> AngleData:
        return AngleData(
            degrees=self.degrees,
            minutes=self.minutes,
            seconds=self.seconds,
            direction=self.direction,
            original_seconds_precision=count_decimal_places(self.seconds)
        )


class FromDecimal(AngleBuilder):
    """Builds an angle from decimal degrees."""

    def __init__(self, decimal: float):
        super().__init__()
        self.decimal = float(decimal)
        self.check_overflow()
        self.decimal_precision = clamp_precision(count_decimal_places(self.decimal))
        self.seconds_precision = clamp_precision(
            self.decimal_precision + SECONDS_EXTRA_DIGITS
        )

    def check_overflow(self) -> None:
        # NaN fails the comparison too
        if not abs(self.decimal) <= MAX_DEGREES:
            error = AngleOverflowError("decimal", self.decimal, float(MAX_DEGREES))
            logger.warning(str(error))
            raise error

    def _build(self) -> AngleData:
        self.degrees, self.minutes, self.seconds = decimal_to_sexagesimal(
            abs(self.decimal), self.seconds_precision
        )
        if self.decimal < 0:
            self.direction = Direction.CLOCKWISE
        self._normalize_null_direction()

        return AngleData(
            degrees=self.degrees,
            minutes=self.minutes,
            seconds=self.seconds,
            direction=self.direction,
            original_decimal=self.decimal,
            original_seconds_precision=self.seconds_precision
        )


class FromRadian(AngleBuilder):
    """Builds an angle from radians."""

    def __init__(self, radian: float):
        super().__init__()
        self.radian = float(radian)
        self.check_overflow()
        self.radian_precision = clamp_precision(count_decimal_places(self.radian))

    def check_overflow(self) -> None:
        if not abs(self.radian) <= MAX_RADIAN:
            error = AngleOverflowError("radian", self.radian, MAX_RADIAN)
            logger.warning(str(error))
            raise error

    def _build(self) -> AngleData:
        # Keep float drift at ±2π inside ±360°
        decimal = max(-MAX_DEGREES, min(MAX_DEGREES, math.degrees(self.radian)))
        data = FromDecimal(decimal).fetch_data()
        return data.with_changes(
            original_radian=self.radian,
            original_radian_precision=self.radian_precision
        )


class FromString(AngleBuilder):
    """Builds an angle from its textual representation."""

    def __init__(self, text: str):
        super().__init__()
        self.text = text
        self.parsed = parse_angle_string(text)

        self.degrees = abs(self.parsed.degrees)
        self.minutes = self.parsed.minutes
        self.seconds = round_seconds(self.parsed.seconds, source=text)
        self.direction = self.parsed.direction
        self.check_overflow()

    def check_overflow(self) -> None:
        check_sexagesimal(self.degrees, self.minutes, self.seconds, source=self.text)

    def _build(self) -> AngleData:
        self._normalize_null_direction()
        return AngleData(
            degrees=self.degrees,
            minutes=self.minutes,
            seconds=self.seconds,
            direction=self.direction,
            original_seconds_precision=count_decimal_places(self.seconds)
        )


class FromAngleData(AngleBuilder):
    """Rebuilds an angle from an existing canonical tuple."""

    def __init__(self, data: AngleData):
        super().__init__()
        self.data = data
        self.check_overflow()

    def check_overflow(self) -> None:
        check_sexagesimal(self.data.degrees, self.data.minutes, self.data.seconds)

    def _build(self) -> AngleData:
        if self.data.is_null():
            return self.data.with_changes(direction=Direction.COUNTER_CLOCKWISE)
        return self.data


class SumBuilder(AngleBuilder):
    """
    Base class for builders summing two angles.

    Operands are added as decimal degrees rounded to the higher of their
    suggested precisions, then split back into degrees, minutes and seconds.
    """

    def __init__(self, first_angle, second_angle):
        super().__init__()
        self.first_angle = first_angle
        self.second_angle = second_angle
        self.decimal_precision = 0
        self.decimal_sum = 0.0

    @abstractmethod
    def calc_sign(self) -> None:
        """Set the direction of the result."""

    @abstractmethod
    def _add(self) -> float:
        """Add the operands as decimal degrees."""

    @abstractmethod
    def _shortcut(self) -> bool:
        """Set the result directly for trivial operands, returning True if done."""

    def check_overflow(self) -> None:
        """Bring a sum beyond ±360° back by one full turn."""
        if self.decimal_sum > MAX_DEGREES:
            self.decimal_sum = round_half_away_from_zero(
                self.decimal_sum - MAX_DEGREES, self.decimal_precision
            )
        elif self.decimal_sum < -MAX_DEGREES:
            self.decimal_sum = round_half_away_from_zero(
                self.decimal_sum + MAX_DEGREES, self.decimal_precision
            )

    def max_suggested_precision(self) -> int:
        """Higher suggested decimal precision of the two operands."""
        return clamp_precision(max(
            self.first_angle.suggested_decimal_precision,
            self.second_angle.suggested_decimal_precision
        ))

    @staticmethod
    def is_full(angle) -> bool:
        return is_full_angle(angle.degrees, angle.minutes, angle.seconds)

    @staticmethod
    def is_null(angle) -> bool:
        return is_null_angle(angle.degrees, angle.minutes, angle.seconds)

    def both_angles_are_null_angles(self) -> bool:
        return self.is_null(self.first_angle) and self.is_null(self.second_angle)

    def _build(self) -> AngleData:
        seconds_precision = 0
        if not self._shortcut():
            self.decimal_precision = self.max_suggested_precision()
            self.decimal_sum = round_half_away_from_zero(self._add(), self.decimal_precision)
            self.check_overflow()
            self.calc_sign()

            seconds_precision = clamp_precision(
                self.decimal_precision + SECONDS_EXTRA_DIGITS
            )
            self.degrees, self.minutes, self.seconds = decimal_to_sexagesimal(
                abs(self.decimal_sum), seconds_precision
            )
            self._normalize_null_direction()

        return AngleData(
            degrees=self.degrees,
            minutes=self.minutes,
            seconds=self.seconds,
            direction=self.direction,
            original_decimal=self.decimal_sum,
            original_seconds_precision=seconds_precision
        )


class FromAnglesToRelativeSum(SumBuilder):
    """
    Sums two angles algebraically.

    The result takes the sign of the sum; anything beyond ±360° is
    corrected by a single full turn.
    """

    def calc_sign(self) -> None:
        self.direction = (Direction.COUNTER_CLOCKWISE if self.decimal_sum >= 0
                          else Direction.CLOCKWISE)

    def _add(self) -> float:
        return self.first_angle.to_decimal() + self.second_angle.to_decimal()

    def _shortcut(self) -> bool:
        first, second = self.first_angle, self.second_angle

        if self.is_full(first) and self.is_full(second) and first.direction == second.direction:
            self.degrees = MAX_DEGREES
            self.direction = Direction(first.direction)
            self.decimal_sum = float(MAX_DEGREES * self.direction)
            return True

        if self.both_angles_are_null_angles():
            self.decimal_sum = 0.0
            return True

        return False


class FromAnglesToAbsoluteSum(SumBuilder):
    """
    Sums the magnitudes of two angles.

    Both operands count as positive rotations and the result is always
    counterclockwise.
    """

    def calc_sign(self) -> None:
        self.direction = Direction.COUNTER_CLOCKWISE

    def _add(self) -> float:
        return abs(self.first_angle.to_decimal()) + abs(self.second_angle.to_decimal())

    def _shortcut(self) -> bool:
        if self.is_full(self.first_angle) and self.is_full(self.second_angle):
            self.degrees = MAX_DEGREES
            self.decimal_sum = float(MAX_DEGREES)
            return True

        if self.both_angles_are_null_angles():
            self.decimal_sum = 0.0
            return True

        return False
