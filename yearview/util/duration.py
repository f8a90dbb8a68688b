# yearview/util/duration.py
from __future__ import annotations

from typing import Optional


def parse_seconds(v: object) -> Optional[float]:
    """Coerce a duration value (seconds) from a session record.

    Accepts ints, floats and numeric strings. Booleans, negatives, NaN and
    anything unparseable yield None.
    """
    if isinstance(v, bool) or v is None:
        return None
    if isinstance(v, (int, float)):
        f = float(v)
    else:
        s = str(v).strip()
        if not s:
            return None
        try:
            f = float(s)
        except ValueError:
            return None
    if f != f or f < 0:
        return None
    return int(f) if f.is_integer() else f


def format_duration(seconds: float) -> str:
    """Render seconds as `45m`, `3h` or `3h 20m` (whole minutes, floored)."""
    total_min = int(seconds // 60) if seconds > 0 else 0
    hours, mins = divmod(total_min, 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"
