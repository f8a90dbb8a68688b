# yearview/payload.py
from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional, Sequence

from .model import GridCell, Highlight, YearGridData, YearViewData, YearViewDay, YearViewSummary
from .util.calendar import date_key

SCHEMA_NAME = "yearview.payload"
LATEST_SCHEMA_VERSION = 1


def summary_to_dict(s: YearViewSummary) -> Dict[str, Any]:
    return {
        "total_particles": s.total_particles,
        "total_duration_seconds": s.total_duration_seconds,
        "longest_streak": s.longest_streak,
        "active_days": s.active_days,
        "average_per_active_day": s.average_per_active_day,
    }


def day_to_dict(d: YearViewDay) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "date": date_key(d.date),
        "particle_count": d.particle_count,
        "total_duration_seconds": d.total_duration_seconds,
        "is_peak_day": d.is_peak_day,
    }
    if d.top_task is not None:
        out["top_task"] = d.top_task
    if d.top_project is not None:
        out["top_project"] = d.top_project
    return out


def cell_to_dict(c: GridCell) -> Dict[str, Any]:
    return {
        "date": date_key(c.date),
        "week_index": c.week_index,
        "day_index": c.day_index,
        "particle_count": c.particle_count,
        "brightness": round(c.brightness, 6),
        "is_peak_day": c.is_peak_day,
        "is_future": c.is_future,
    }


def grid_to_rows(grid_data: YearGridData) -> List[List[Optional[Dict[str, Any]]]]:
    return [[cell_to_dict(c) if c is not None else None for c in row] for row in grid_data.grid]


def build_payload(
    year_data: YearViewData,
    grid_data: YearGridData,
    *,
    week_starts_on_monday: bool,
    today: dt.date,
    project_id: Optional[str] = None,
    highlights: Sequence[Highlight] = (),
    generated_at: Optional[str] = None,
) -> Dict[str, Any]:
    """JSON-ready payload consumed by grid renderers and image exporters."""
    ga = generated_at or dt.datetime.now(dt.timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")
    return {
        "schema_version": LATEST_SCHEMA_VERSION,
        "meta": {
            "schema": {"name": SCHEMA_NAME, "version": LATEST_SCHEMA_VERSION},
            "generated_at": ga,
        },
        "cfg": {
            "year": year_data.year,
            "week_starts_on_monday": bool(week_starts_on_monday),
            "project_id": project_id or None,
            "today": date_key(today),
        },
        "summary": summary_to_dict(year_data.summary),
        "personal_max": year_data.personal_max,
        "peak_date": date_key(year_data.peak_date) if year_data.personal_max > 0 else None,
        "days": [day_to_dict(d) for d in year_data.days],
        "total_weeks": grid_data.total_weeks,
        "grid": grid_to_rows(grid_data),
        "month_labels": [{"name": m.name, "week_index": m.week_index} for m in grid_data.month_labels],
        "highlights": [{"label": h.label, "value": h.value} for h in highlights],
    }
