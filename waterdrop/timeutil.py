"""Calendar helpers around timezone-aware datetimes.

Layouts are ``strftime`` patterns; ``%:z`` renders the UTC offset as ``+HH:MM``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

RFC3339_FORMAT = "%Y-%m-%dT%H:%M:%S%:z"
DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
TIME_FORMAT = "%H:%M:%S"
SHORT_DATETIME_FORMAT = "%Y%m%d%H%M%S"
SHORT_DATE_FORMAT = "%Y%m%d"
SHORT_TIME_FORMAT = "%H%M%S"

DAYS_PER_LEAP_YEAR = 366
DAYS_PER_NORMAL_YEAR = 365
MONTHS_PER_YEAR = 12
MONTHS_PER_QUARTER = 3
DAYS_PER_NORMAL_MONTH = 30
DAYS_PER_DOUBLE_MONTH = 31
DAYS_OF_NORMAL_FEBRUARY = 28
DAYS_OF_LEAP_FEBRUARY = 29
DAYS_PER_WEEK = 7
HOURS_PER_DAY = 24
MINUTES_PER_DAY = 1440
MINUTES_PER_HOUR = 60
SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60
MILLISECONDS_PER_SECOND = 1000

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MICROSECOND = timedelta(microseconds=1)
_DIRECTIVE = re.compile(r"%(%|:z)")


def _colon_offset(value: datetime) -> str:
    offset = value.utcoffset() or timedelta(0)
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}:{rest // 60:02d}"


@dataclass(frozen=True)
class Time:
    """A timezone-aware point in time; a naive datetime is taken as local time."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            object.__setattr__(self, "value", self.value.astimezone())

    @property
    def year(self) -> int:
        return self.value.year

    def current_unix_time(self) -> int:
        """Seconds since the Unix epoch."""
        return (self.value - _EPOCH) // timedelta(seconds=1)

    def current_milli_time(self) -> int:
        """Milliseconds since the Unix epoch."""
        return (self.value - _EPOCH) // timedelta(milliseconds=1)

    def current_nano_time(self) -> int:
        """Nanoseconds since the Unix epoch (microsecond precision)."""
        return ((self.value - _EPOCH) // _MICROSECOND) * 1000

    def leap(self) -> bool:
        """Whether the year is a leap year."""
        return is_leap(self.value.year)

    def yesterday(self) -> "Time":
        return self.days_before(1)

    def tomorrow(self) -> "Time":
        return self.days_after(1)

    def days_before(self, days: int) -> "Time":
        return Time(self.value - timedelta(days=days))

    def days_after(self, days: int) -> "Time":
        return Time(self.value + timedelta(days=days))

    def format(self, layout: str) -> str:
        """Format with a strftime layout, also accepting ``%:z``."""
        offset = _colon_offset(self.value)
        expanded = _DIRECTIVE.sub(
            lambda m: "%%" if m.group(1) == "%" else offset, layout
        )
        return self.value.strftime(expanded)

    def begin_of_year(self) -> "Time":
        return Time(self.value.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0))

    def end_of_year(self) -> "Time":
        begin = self.begin_of_year().value
        return Time(begin.replace(year=begin.year + 1) - _MICROSECOND)

    def begin_of_month(self) -> "Time":
        return Time(self.value.replace(day=1, hour=0, minute=0, second=0, microsecond=0))

    def end_of_month(self) -> "Time":
        begin = self.begin_of_month().value
        if begin.month == 12:
            following = begin.replace(year=begin.year + 1, month=1)
        else:
            following = begin.replace(month=begin.month + 1)
        return Time(following - _MICROSECOND)

    def begin_of_week(self) -> "Time":
        """Midnight of the Sunday starting this week."""
        since_sunday = (self.value.weekday() + 1) % 7
        day = self.value - timedelta(days=since_sunday)
        return Time(day.replace(hour=0, minute=0, second=0, microsecond=0))

    def end_of_week(self) -> "Time":
        """Last instant of the Saturday ending this week."""
        saturday = self.begin_of_week().value + timedelta(days=6)
        return Time(saturday.replace(hour=23, minute=59, second=59, microsecond=999999))

    def begin_of_day(self) -> "Time":
        return Time(self.value.replace(hour=0, minute=0, second=0, microsecond=0))

    def end_of_day(self) -> "Time":
        return Time(self.value.replace(hour=23, minute=59, second=59, microsecond=999999))

    def begin_of_hour(self) -> "Time":
        return Time(self.value.replace(minute=0, second=0, microsecond=0))

    def end_of_hour(self) -> "Time":
        return Time(self.value.replace(minute=59, second=59, microsecond=999999))

    def begin_of_minute(self) -> "Time":
        return Time(self.value.replace(second=0, microsecond=0))

    def end_of_minute(self) -> "Time":
        return Time(self.value.replace(second=59, microsecond=999999))


def now() -> Time:
    """The current local time."""
    return Time(datetime.now().astimezone())


def _from_unix(timestamp: int) -> Time:
    return Time(datetime.fromtimestamp(timestamp, tz=timezone.utc).astimezone())


def format_unix(timestamp: int, layout: str) -> str:
    """Format a Unix timestamp in local time."""
    return _from_unix(timestamp).format(layout)


def format_unix_date(timestamp: int) -> str:
    return format_unix(timestamp, DATE_FORMAT)


def format_unix_datetime(timestamp: int) -> str:
    return format_unix(timestamp, DATETIME_FORMAT)


def is_leap(year: int) -> bool:
    """Whether year is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def yesterday() -> Time:
    return now().days_before(1)


def tomorrow() -> Time:
    return now().days_after(1)


def days_before(days: int) -> Time:
    return now().days_before(days)


def days_after(days: int) -> Time:
    return now().days_after(days)


def parse_by_layout(text: str, layout: str, tz: Optional[tzinfo] = None) -> Time:
    """Parse text with a strftime layout.

    Without an offset in the text, the time is taken in ``tz`` (local time by default).
    """
    pattern = _DIRECTIVE.sub(lambda m: "%%" if m.group(1) == "%" else "%z", layout)
    try:
        parsed = datetime.strptime(text, pattern)
    except ValueError:
        raise ValueError(f"cannot parse {text} as Time by layout {layout}") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz) if tz is not None else parsed.astimezone()
    return Time(parsed)