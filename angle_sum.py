"""
Angle sum operation.
A Sum is an Angle that can only result from adding two angles.
"""

import logging

from angle import Angle
from angle_builders import (
    FromAnglesToAbsoluteSum,
    FromAnglesToRelativeSum,
    SumBuilder,
)

logger = logging.getLogger(__name__)


class Sum(Angle):
    """
    The sum of two angles.

    Behaves exactly like an Angle but is only built by a SumBuilder.
    """

    def __init__(self, builder: SumBuilder):
        if not isinstance(builder, SumBuilder):
            raise TypeError(
                f"Sum must be built from a SumBuilder, found {type(builder).__name__}"
            )
        super().__init__(builder)


def relative_sum(first_angle: Angle, second_angle: Angle) -> Sum:
    """
    Add two angles algebraically.

    Args:
        first_angle: First addend
        second_angle: Second addend

    Returns:
        Sum signed like the algebraic result, within ±360°

    Example:
        >>> str(relative_sum(Angle.from_decimal(350.0), Angle.from_decimal(20.0)))
        '10° 0\\' 0"'
    """
    result = Sum(FromAnglesToRelativeSum(first_angle, second_angle))
    logger.debug(f"Relative sum {first_angle} + {second_angle} = {result}")
    return result


def absolute_sum(first_angle: Angle, second_angle: Angle) -> Sum:
    """
    Add the magnitudes of two angles.

    Args:
        first_angle: First addend
        second_angle: Second addend

    Returns:
        Counterclockwise Sum of both rotations, within 360°
    """
    result = Sum(FromAnglesToAbsoluteSum(first_angle, second_angle))
    logger.debug(f"Absolute sum |{first_angle}| + |{second_angle}| = {result}")
    return result
