# yearview/util/localtime.py
from __future__ import annotations

import datetime as dt
import os
import re
from typing import Optional, Union

from .calendar import parse_date_key

Timestamp = Union[str, int, float, dt.datetime, dt.date]

_EPOCH_DIGITS_RE = re.compile(r"^-?\d{11,}$")


def to_local(d: dt.datetime) -> Optional[dt.datetime]:
    """Convert an aware datetime to host local wall-clock time (naive).

    Naive datetimes are taken as already local and returned unchanged.
    Returns None when the instant has no local representation (an aware
    value at the edge of the datetime range).
    astimezone() with no argument consults the OS rules for that instant,
    so DST is applied per timestamp rather than from today's offset.
    """
    if d.tzinfo is None:
        return d
    try:
        return d.astimezone().replace(tzinfo=None)
    except (OverflowError, OSError, ValueError):
        return None


def parse_timestamp(value: Timestamp | None) -> Optional[dt.datetime]:
    """Parse a session completion timestamp into local wall-clock time.

    Supported forms:
      - datetime (aware -> converted to local, naive -> kept)
      - date (midnight local)
      - epoch milliseconds (int/float, or a digit string of 11+ chars)
      - ISO 8601 strings, `Z` suffix allowed (e.g. "2024-03-15T09:30:00.000Z")

    Returns None when the value cannot be interpreted.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, dt.datetime):
        return to_local(value)
    if isinstance(value, dt.date):
        return dt.datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)):
        return _from_epoch_ms(value)

    s = str(value).strip()
    if not s:
        return None
    if _EPOCH_DIGITS_RE.match(s):
        return _from_epoch_ms(int(s))
    try:
        d = dt.datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        return None
    return to_local(d)


def _from_epoch_ms(ms: Union[int, float]) -> Optional[dt.datetime]:
    try:
        aware = dt.datetime.fromtimestamp(float(ms) / 1000.0, tz=dt.timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return to_local(aware)


def today_date() -> dt.date:
    """Host local calendar date."""
    return dt.date.today()


def resolve_today(value: str | dt.date | None = None) -> dt.date:
    """Resolve the "today" used for is-future flags.

    Precedence: explicit value, env YEARVIEW_TODAY, host clock.
    Raises ValueError for an unparseable date key.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    raw = value if value else (os.getenv("YEARVIEW_TODAY", "") or "").strip()
    if raw:
        return parse_date_key(raw)
    return today_date()
