"""
Property-based tests for the goniometry library.
Checks builder invariants and conversion round trips over generated inputs.
"""

import math

import pytest

from angle import Angle
from angle_rounding import round_half_away_from_zero
from angle_sum import absolute_sum, relative_sum
from angle_types import Direction

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

DEGREES = st.integers(min_value=0, max_value=359)
MINUTES = st.integers(min_value=0, max_value=59)
# Seconds that stay below 60 after rounding to one digit
SECONDS = st.floats(min_value=0.0, max_value=59.94, allow_nan=False, allow_infinity=False)
DIRECTIONS = st.sampled_from(list(Direction))
DECIMALS = st.floats(min_value=-360.0, max_value=360.0, allow_nan=False, allow_infinity=False)
RADIANS = st.floats(min_value=-2 * math.pi, max_value=2 * math.pi,
                    allow_nan=False, allow_infinity=False)


def assert_canonical(angle: Angle) -> None:
    """Magnitudes are within range and a null angle is counterclockwise."""
    assert 0 <= angle.degrees <= 360
    assert 0 <= angle.minutes < 60
    assert 0 <= angle.seconds < 60
    if angle.degrees == 360:
        assert angle.minutes == 0 and angle.seconds == 0
    if angle.degrees == 0 and angle.minutes == 0 and angle.seconds == 0:
        assert angle.direction == Direction.COUNTER_CLOCKWISE


@settings(deadline=None)
@given(d=DEGREES, m=MINUTES, s=SECONDS, direction=DIRECTIONS)
def test_from_values_get_degrees(d: int, m: int, s: float, direction: Direction) -> None:
    """get_degrees() returns the values with the sign on degrees."""
    angle = Angle.from_values(d, m, s, direction)
    seconds = round_half_away_from_zero(s, 1)

    assert angle.get_degrees() == (d * direction, m, seconds)
    assert_canonical(angle)


@settings(deadline=None)
@given(x=DECIMALS)
def test_decimal_round_trip(x: float) -> None:
    """An angle built from a decimal returns exactly that decimal."""
    angle = Angle.from_decimal(x)

    assert angle.to_decimal() == x
    assert_canonical(angle)
    if not (angle.degrees == 0 and angle.minutes == 0 and angle.seconds == 0):
        assert angle.is_clockwise() == (x < 0)


@settings(deadline=None)
@given(r=RADIANS)
def test_radian_round_trip(r: float) -> None:
    """An angle built from radians returns exactly those radians."""
    angle = Angle.from_radian(r)

    assert angle.to_radian() == r
    assert abs(angle.to_decimal()) <= 360
    assert_canonical(angle)


@settings(deadline=None)
@given(d=DEGREES, m=MINUTES, s=SECONDS, direction=DIRECTIONS)
def test_string_round_trip(d: int, m: int, s: float, direction: Direction) -> None:
    """Formatting and parsing again gives the same angle."""
    angle = Angle.from_values(d, m, s, direction)
    parsed = Angle.from_string(str(angle))

    assert parsed.get_degrees() == angle.get_degrees()
    assert parsed.direction == angle.direction
    assert parsed.is_equal(angle)


@settings(deadline=None)
@given(x=DECIMALS)
def test_toggle_twice_is_identity(x: float) -> None:
    """Toggling the direction twice restores the angle."""
    angle = Angle.from_decimal(x)
    back = angle.toggle_direction().toggle_direction()

    assert back.get_degrees() == angle.get_degrees()
    assert back.direction == angle.direction
    if angle.degrees == 0 and angle.minutes == 0 and angle.seconds == 0:
        assert back.to_decimal() == 0.0
    else:
        assert back.to_decimal() == angle.to_decimal()


@settings(deadline=None)
@given(x=DECIMALS)
def test_equal_to_own_decimal(x: float) -> None:
    """An angle built from a decimal compares equal to it."""
    assert Angle.from_decimal(x).is_equal(x)


@settings(deadline=None)
@given(a=DECIMALS, b=DECIMALS)
def test_relative_sum_bounded(a: float, b: float) -> None:
    """Relative sums stay within ±360° and keep canonical fields."""
    result = relative_sum(Angle.from_decimal(a), Angle.from_decimal(b))

    assert abs(result.to_decimal()) <= 360
    assert_canonical(result)


@settings(deadline=None)
@given(a=DECIMALS, b=DECIMALS)
def test_absolute_sum_is_counter_clockwise(a: float, b: float) -> None:
    """Absolute sums are never clockwise."""
    result = absolute_sum(Angle.from_decimal(a), Angle.from_decimal(b))

    assert result.is_counter_clockwise()
    assert 0 <= result.to_decimal() <= 360
    assert_canonical(result)
