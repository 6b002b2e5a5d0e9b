"""
Inclusive date intervals and their compact text form in directory names.

A directory name may start with a date range written in one of these forms::

    2025-05-01 Name               single day
    2025-05-01 - 03 Name          same month
    2025-05-01 - 06-02 Name       same year
    2025-05-01 - 2026-01-01 Name  different years

``str(interval)`` produces the shortest of these forms and
``Interval.split_name`` reads them back.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple

from .constants import DATE_FORMAT, SEPARATOR
from .errors import InvalidIntervalError

FULL_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")

DAY_START = time(0, 0, 0)
DAY_END = time(23, 59, 59)


def parse_date(text: str) -> Optional[date]:
    """Parse a strict YYYY-MM-DD date, returning None if it is not one."""
    if not FULL_DATE_PATTERN.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None


def _parse_end_date(start: date, token: str) -> Optional[date]:
    """Parse the second date of a range, borrowing year/month from start."""
    candidates = (
        token,
        f"{start.year:04d}-{token}",
        f"{start.year:04d}-{start.month:02d}-{token}",
    )
    for candidate in candidates:
        parsed = parse_date(candidate)
        if parsed is not None:
            return parsed
    return None


@dataclass(frozen=True)
class Interval:
    """Inclusive range of timestamps."""
    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidIntervalError(
                f"from date {self.start} is later than to date {self.end}")

    @classmethod
    def from_dates(cls, start: date, end: date) -> "Interval":
        """Build a whole-day interval covering start through end."""
        if start > end:
            raise InvalidIntervalError(f"from date {start} is later than to date {end}")
        return cls(datetime.combine(start, DAY_START), datetime.combine(end, DAY_END))

    @classmethod
    def split_name(cls, name: str) -> Optional[Tuple["Interval", str]]:
        """Split a leading date range off a name.

        Returns the interval and the rest of the name, or None when the name
        does not start with a date. A range whose start is after its end is
        not a match.
        """
        head, sep, tail = name.partition(SEPARATOR)
        if sep:
            start = parse_date(head)
            if start is not None:
                end_token, _, rest = tail.partition(" ")
                end = _parse_end_date(start, end_token)
                if end is not None:
                    try:
                        return cls.from_dates(start, end), rest
                    except InvalidIntervalError:
                        return None

        # Single day
        token, _, rest = name.partition(" ")
        start = parse_date(token)
        if start is None:
            return None
        return cls.from_dates(start, start), rest

    @classmethod
    def from_name(cls, name: str) -> Optional["Interval"]:
        """Return the date range a name starts with, if any."""
        split = cls.split_name(name)
        return split[0] if split else None

    @property
    def delta(self) -> timedelta:
        return self.end - self.start

    @property
    def days(self) -> int:
        """Number of whole days between start and end."""
        return abs(self.delta).days

    def same_days(self, other: "Interval") -> bool:
        """Check if both intervals start and end on the same calendar days."""
        return (self.start.date() == other.start.date()
                and self.end.date() == other.end.date())

    def contains(self, other: "Interval") -> bool:
        return self.start <= other.start and self.end >= other.end

    def __str__(self) -> str:
        text = self.start.date().isoformat()
        if self.start.date() == self.end.date():
            return text

        if self.start.year != self.end.year:
            end_text = self.end.date().isoformat()
        elif self.start.month != self.end.month:
            end_text = f"{self.end.month:02d}-{self.end.day:02d}"
        else:
            end_text = f"{self.end.day:02d}"
        return f"{text}{SEPARATOR}{end_text}"
