"""Parsing and ordering of DD-MM-YYYY benchmark dates.

Benchmark files label every observation with a ``DD-MM-YYYY`` string. The
strings are not zero-padded consistently, so they must never be compared as
text: ``"9-1-2020"`` comes before ``"10-1-2020"``.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterable
from dataclasses import dataclass

from benchviz.exceptions import InvalidDateFormatError

__all__ = ["DateKey", "compare", "sort_dates"]


@dataclass(frozen=True, order=True)
class DateKey:
    """A calendar date used as a row key.

    Field order gives the comparison order: year, then month, then day.
    """

    year: int
    month: int
    day: int

    @classmethod
    def parse(cls, text: str) -> DateKey:
        """Parse a ``DD-MM-YYYY`` string.

        Args:
            text: Date string, leading zeros optional.

        Returns:
            DateKey for the parsed date.

        Raises:
            InvalidDateFormatError: If the string does not have exactly three
                numeric components.
        """
        if not isinstance(text, str):
            raise InvalidDateFormatError(text, "expected a string")

        parts = text.split("-")
        if len(parts) != 3:
            raise InvalidDateFormatError(text, f"expected 3 components, got {len(parts)}")

        numbers = []
        for part in parts:
            part = part.strip()
            if not part.isdecimal():
                raise InvalidDateFormatError(text, f"component {part!r} is not a number")
            numbers.append(int(part))

        day, month, year = numbers
        return cls(year=year, month=month, day=day)

    @classmethod
    def from_date(cls, value: datetime.date) -> DateKey:
        """Create a DateKey from a native date."""
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> datetime.date:
        """Convert to a native date (1-based month) for chart renderers.

        Day and month overflow roll forward the way a calendar constructor
        normalizes them: ``31-02-2021`` lands on 3 March 2021 and month 13 on
        January of the next year.

        Raises:
            InvalidDateFormatError: If the normalized year is outside 1..9999.
        """
        year, month_index = divmod(self.year * 12 + self.month - 1, 12)
        try:
            return datetime.date(year, month_index + 1, 1) + datetime.timedelta(days=self.day - 1)
        except (ValueError, OverflowError) as e:
            raise InvalidDateFormatError(str(self), f"not representable as a calendar date ({e})") from e

    def __str__(self) -> str:
        return f"{self.day:02d}-{self.month:02d}-{self.year:04d}"


def _as_key(value: DateKey | str) -> DateKey:
    return value if isinstance(value, DateKey) else DateKey.parse(value)


def compare(a: DateKey | str, b: DateKey | str) -> int:
    """Compare two dates chronologically.

    Args:
        a: DateKey or date string.
        b: DateKey or date string.

    Returns:
        -1 if a is earlier, 0 if both name the same day, 1 if a is later.

    Raises:
        InvalidDateFormatError: If either string cannot be parsed.
    """
    key_a = _as_key(a)
    key_b = _as_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_dates(texts: Iterable[str]) -> list[str]:
    """Sort date strings chronologically, keeping their original spelling.

    Raises:
        InvalidDateFormatError: If any string cannot be parsed.
    """
    return sorted(texts, key=DateKey.parse)
