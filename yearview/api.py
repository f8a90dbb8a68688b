"""yearview.api

Stable *library* entrypoint for yearview.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Iterable, Optional, Tuple

from yearview.aggregation import aggregate, filter_work_sessions_for_year
from yearview.assemble import assemble
from yearview.brightness import calculate_brightness
from yearview.grid import (
    day_of_week_index,
    generate_year_grid,
    iter_cells,
    layout_year_grid,
    week_of_year,
)
from yearview.highlights import compute_highlights
from yearview.model import SessionRecord, YearGridData, YearViewData
from yearview.normalize import normalize_sessions
from yearview.sessions import SessionLoadError, load_sessions_from_json
from yearview.util.calendar import date_key, day_of_year, days_in_year, is_leap_year
from yearview.validate import PayloadValidationError, assert_valid_payload, validate_payload


def _records(sessions: Iterable[Any]) -> list[SessionRecord]:
    # Accept raw exported dicts as well as SessionRecord instances.
    return normalize_sessions(sessions)


def build_year_view(
    sessions: Iterable[Any],
    year: int,
    project_id: Optional[str] = None,
) -> YearViewData:
    """Aggregate a session snapshot into the full year view for `year`."""
    return assemble(year, aggregate(_records(sessions), year, project_id))


def build_year_grid(
    sessions: Iterable[Any],
    year: int,
    *,
    week_starts_on_monday: bool = True,
    project_id: Optional[str] = None,
    today: Optional[dt.date] = None,
) -> Tuple[YearViewData, YearGridData]:
    """Run the whole pipeline: sessions -> year view -> grid."""
    year_data = build_year_view(sessions, year, project_id)
    grid_data = generate_year_grid(year_data, week_starts_on_monday, today=today)
    return year_data, grid_data


def has_data_for_year(sessions: Iterable[Any], year: int) -> bool:
    """True when at least one work session was completed in `year`."""
    return bool(filter_work_sessions_for_year(_records(sessions), year))


# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
# Prefer append-only unless you are intentionally reshaping the public surface.
_PUBLIC_EXPORTS = (
    "PayloadValidationError",
    "SessionLoadError",
    "aggregate",
    "assemble",
    "assert_valid_payload",
    "build_year_grid",
    "build_year_view",
    "calculate_brightness",
    "compute_highlights",
    "date_key",
    "day_of_week_index",
    "day_of_year",
    "days_in_year",
    "generate_year_grid",
    "has_data_for_year",
    "is_leap_year",
    "iter_cells",
    "layout_year_grid",
    "load_sessions_from_json",
    "validate_payload",
    "week_of_year",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
