"""
Angle string parsing and formatting.
Reads and writes the textual form  -D° M' S.F"  of a sexagesimal angle.
"""

import re
import logging
from dataclasses import dataclass
from typing import Optional

from angle_rounding import count_decimal_places
from angle_types import Direction

logger = logging.getLogger(__name__)


class AngleParseError(ValueError):
    """Raised when an angle string cannot be parsed."""
    pass


class NoMatchError(AngleParseError):
    """Raised when the degrees token cannot be found in an angle string."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"{text} does not match an angle measure.")


class ParserEngineError(AngleParseError):
    """Raised when the regular expression engine fails while parsing."""
    pass


# Degrees must open the string: optional sign, digits, degree symbol
DEGREES_PATTERN = re.compile(r'^-?(\d+)°')

# Minutes and seconds may appear anywhere after it
MINUTES_PATTERN = re.compile(r"(?<![\d.])(\d+)'")
SECONDS_PATTERN = re.compile(r'(?<![\d.])(\d+(?:\.\d+)?)"')


@dataclass
class ParsedAngle:
    """
    Raw values extracted from an angle string.

    Attributes:
        degrees: Degrees magnitude as written
        minutes: Minutes as written (0 if missing)
        seconds: Seconds as written (0.0 if missing)
        negative: True if the string starts with '-'
        text: The parsed string
    """
    degrees: int
    minutes: int
    seconds: float
    negative: bool
    text: str

    @property
    def direction(self) -> Direction:
        """Rotation direction implied by the leading sign."""
        return Direction.CLOCKWISE if self.negative else Direction.COUNTER_CLOCKWISE


def _search(pattern: re.Pattern, text: str) -> Optional[re.Match]:
    """Run a pattern, reporting engine failures separately from no match."""
    try:
        return pattern.search(text)
    except (re.error, RecursionError) as e:
        raise ParserEngineError(
            f"Regular expression {pattern.pattern!r} failed on {text!r}: {e}"
        ) from e


def parse_angle_string(text: str) -> ParsedAngle:
    """
    Parse an angle string into its degrees, minutes and seconds.

    Args:
        text: Angle string, e.g. '-12° 30\\' 15.5"'

    Returns:
        ParsedAngle with the extracted values

    Raises:
        NoMatchError: If the degrees token is missing
        ParserEngineError: If the regex engine fails

    Example:
        >>> parse_angle_string('-0° 30\\'').negative
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"Angle string expected, found {type(text).__name__}")

    degrees_match = _search(DEGREES_PATTERN, text)
    if degrees_match is None:
        logger.debug(f"No degrees token in {text!r}")
        raise NoMatchError(text)

    minutes_match = _search(MINUTES_PATTERN, text)
    seconds_match = _search(SECONDS_PATTERN, text)

    parsed = ParsedAngle(
        degrees=int(degrees_match.group(1)),
        minutes=int(minutes_match.group(1)) if minutes_match else 0,
        seconds=float(seconds_match.group(1)) if seconds_match else 0.0,
        negative=text.startswith('-'),
        text=text
    )

    logger.debug(f"Parsed {text!r} as {parsed}")
    return parsed


def format_angle(degrees: int, minutes: int, seconds: float,
                 direction: Direction,
                 seconds_precision: Optional[int] = None) -> str:
    """
    Format angle values as text.

    Whole seconds are written without decimals, otherwise seconds get
    exactly seconds_precision decimal digits.

    Args:
        degrees: Degrees magnitude
        minutes: Minutes magnitude
        seconds: Seconds magnitude
        direction: Rotation direction
        seconds_precision: Decimal digits for fractional seconds

    Returns:
        Angle string like '-12° 30\\' 15.5"'
    """
    sign = "-" if direction == Direction.CLOCKWISE else ""

    if seconds == int(seconds):
        seconds_text = str(int(seconds))
    else:
        if not seconds_precision:
            seconds_precision = count_decimal_places(seconds)
        seconds_text = f"{seconds:.{seconds_precision}f}"

    return f"{sign}{degrees}° {minutes}' {seconds_text}\""
