"""Calendar-day utilities shared across the availability engine.

Every calendar day is a plain ``datetime.date``. Datetimes handed in by
callers are collapsed to their calendar day, so two values denote the
same day exactly when they compare equal.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Union

DATE_FORMAT = "%Y-%m-%d"

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DateLike = Union[date, datetime, str]


class InvalidDateFormat(ValueError):
    """Raised when a string is not a real YYYY-MM-DD calendar day."""


def as_calendar_date(value: date) -> date:
    """Drop any time-of-day component from a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    Examples:
        >>> parse_date("2024-06-10")
        datetime.date(2024, 6, 10)
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise InvalidDateFormat(f"Expected YYYY-MM-DD, got {value!r}")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateFormat(f"Not a valid calendar day: {value!r}") from None


def format_date(value: date) -> str:
    """Format a day as its canonical ``YYYY-MM-DD`` key."""
    return as_calendar_date(value).strftime(DATE_FORMAT)


def ensure_date(value: DateLike) -> date:
    """Accept a date, datetime or ISO string and return the calendar day."""
    if isinstance(value, str):
        return parse_date(value)
    return as_calendar_date(value)


def add_days(value: date, days: int) -> date:
    return as_calendar_date(value) + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Signed number of whole days from ``start`` to ``end``."""
    return (as_calendar_date(end) - as_calendar_date(start)).days


@dataclass(frozen=True)
class DayRange:
    """Inclusive, ascending run of calendar days.

    Iterating is lazy and can be repeated; a range whose end precedes its
    start is empty.
    """

    start: date
    end: date

    def __iter__(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return max(0, days_between(self.start, self.end) + 1)

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, date):
            return False
        return self.start <= as_calendar_date(day) <= self.end


def days_inclusive(start: date, end: date) -> DayRange:
    return DayRange(as_calendar_date(start), as_calendar_date(end))
