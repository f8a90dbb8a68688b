# yearview/util/calendar.py
from __future__ import annotations

import datetime as dt
from typing import Iterator, Union

DateLike = Union[dt.date, dt.datetime]

# Days before each month in a common (non-leap) year.
DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Fixed English abbreviations; calendar.month_abbr follows the process locale.
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def date_key(d: DateLike) -> str:
    """Return `YYYY-MM-DD` built from the date's own year/month/day fields.

    For a datetime this is its wall-clock date; no UTC conversion happens here,
    so callers must hand in local time (see util.localtime.to_local).
    """
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def parse_date_key(s: str) -> dt.date:
    """Inverse of date_key. Raises ValueError on anything but YYYY-MM-DD."""
    parts = str(s).strip().split("-")
    if len(parts) != 3 or not all(p.isdigit() for p in parts) or len(parts[0]) < 4:
        raise ValueError(f"Invalid date key (want YYYY-MM-DD): {s!r}")
    if len(parts[1]) != 2 or len(parts[2]) != 2:
        raise ValueError(f"Invalid date key (want YYYY-MM-DD): {s!r}")
    return dt.date(int(parts[0]), int(parts[1]), int(parts[2]))


def day_of_year(d: DateLike) -> int:
    """Zero-based offset of `d` from Jan 1 of its year.

    Uses the month table; timestamp subtraction is off by one on 23h/25h DST days.
    """
    n = DAYS_BEFORE_MONTH[d.month - 1] + d.day - 1
    if d.month > 2 and is_leap_year(d.year):
        n += 1
    return n


def iter_year_dates(year: int) -> Iterator[dt.date]:
    """Yield every date of `year` from Jan 1 to Dec 31."""
    first = dt.date(year, 1, 1).toordinal()
    for off in range(days_in_year(year)):
        yield dt.date.fromordinal(first + off)


_WEEK_START_ALIASES = {
    "monday": True,
    "mon": True,
    "mo": True,
    "sunday": False,
    "sun": False,
    "su": False,
}


def parse_week_start(value: str | None, *, default: bool = True) -> bool:
    """Map a week-start setting to `week_starts_on_monday`.

    None/"" -> default. Raises ValueError for anything else unknown.
    """
    if value is None:
        return default
    s = str(value).strip().lower()
    if not s:
        return default
    if s not in _WEEK_START_ALIASES:
        raise ValueError(f"week start must be 'monday' or 'sunday'; got {value!r}")
    return _WEEK_START_ALIASES[s]
