import re
from datetime import timedelta
from fractions import Fraction
from functools import total_ordering

from . import compat_typing as t


class DurationError(ValueError):
    """Raised when a value can not be resolved to a duration."""


SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
# 365.25 days, kept integral so accessors never go through floats
YEAR = DAY * 36525 // 100

MAX_DURATION_STR_LEN = 100

_DURATION_RE = re.compile(
    r'^(?P<value>-?(?:\d+)?\.?\d+) *(?P<unit>'
    r'milliseconds?|msecs?|ms|seconds?|secs?|s|minutes?|mins?|m|hours?|hrs?|h|days?|d|weeks?|w|years?|yrs?|y'
    r')?$',
    re.IGNORECASE | re.ASCII,
)

_UNIT_FACTORS: t.Dict[str, int] = {
    'milliseconds': 1,
    'millisecond': 1,
    'msecs': 1,
    'msec': 1,
    'ms': 1,
    'seconds': SECOND,
    'second': SECOND,
    'secs': SECOND,
    'sec': SECOND,
    's': SECOND,
    'minutes': MINUTE,
    'minute': MINUTE,
    'mins': MINUTE,
    'min': MINUTE,
    'm': MINUTE,
    'hours': HOUR,
    'hour': HOUR,
    'hrs': HOUR,
    'hr': HOUR,
    'h': HOUR,
    'days': DAY,
    'day': DAY,
    'd': DAY,
    'weeks': WEEK,
    'week': WEEK,
    'w': WEEK,
    'years': YEAR,
    'year': YEAR,
    'yrs': YEAR,
    'yr': YEAR,
    'y': YEAR,
}


def div_round(numerator: int, denominator: int) -> int:
    """Integer division rounded to the nearest integer, ties away from zero. ``denominator`` must be positive."""
    quotient, remainder = divmod(abs(numerator), denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    return quotient if numerator >= 0 else -quotient


def round_half_away(value: t.Union[int, float, Fraction]) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)"""
    exact = Fraction(value)
    return div_round(exact.numerator, exact.denominator)


def parse_milliseconds(text: str) -> int:
    """Resolve a duration string like '2y', '1.5 hours' or '100' to milliseconds

    Args:
        text (str): magnitude with an optional unit. No unit means milliseconds.

    Raises:
        DurationError: empty input, unknown unit or invalid magnitude

    Returns:
        int: milliseconds, rounded to the nearest integer
    """
    if not text or len(text) > MAX_DURATION_STR_LEN:
        raise DurationError('Cannot convert to duration')
    match = _DURATION_RE.fullmatch(text)
    if not match:
        raise DurationError('Cannot convert to duration')
    value = Fraction(match.group('value'))
    factor = _UNIT_FACTORS.get((match.group('unit') or 'ms').lower())
    if factor is None:
        raise DurationError('Cannot convert to duration')
    return round_half_away(value * factor)


@total_ordering
class Duration:
    """A span of time stored as whole milliseconds.

    Example usage:

        ```python
        timeout = Duration.from_string('2y')
        timeout.as_days()  # 731
        Duration(172800000).as_hours()  # 48
        ```

    A duration resolving to zero milliseconds is rejected.
    """

    def __init__(self, milliseconds: int) -> None:
        if isinstance(milliseconds, bool) or not isinstance(milliseconds, int):
            raise DurationError('Cannot convert to duration')
        if not milliseconds:
            raise DurationError('Cannot convert to duration')
        self._ms = milliseconds

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> t.Self:
        return cls(milliseconds)

    @classmethod
    def from_string(cls, text: str) -> t.Self:
        return cls(parse_milliseconds(text))

    def as_milliseconds(self) -> int:
        return self._ms

    def as_seconds(self) -> int:
        return div_round(self._ms, SECOND)

    def as_minutes(self) -> int:
        return div_round(self._ms, MINUTE)

    def as_hours(self) -> int:
        return div_round(self._ms, HOUR)

    def as_days(self) -> int:
        return div_round(self._ms, DAY)

    def as_years(self) -> int:
        return div_round(self._ms, YEAR)

    to_milliseconds = as_milliseconds
    to_seconds = as_seconds
    to_minutes = as_minutes
    to_hours = as_hours
    to_days = as_days
    to_years = as_years

    def as_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self._ms)

    def __int__(self) -> int:
        return self._ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ms == other._ms

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ms < other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __repr__(self) -> str:
        return f'Duration({self._ms})'
