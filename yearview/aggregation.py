# yearview/aggregation.py
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from .model import DayAggregation, Number, SessionRecord
from .util.calendar import date_key


def filter_work_sessions_for_year(
    sessions: Iterable[SessionRecord],
    year: int,
    project_id: Optional[str] = None,
) -> List[SessionRecord]:
    """Work sessions completed (local time) in `year`.

    An empty/None project_id means "all projects".
    """
    out: List[SessionRecord] = []
    for s in sessions:
        if s.type != "work":
            continue
        if s.completed_at.year != year:
            continue
        if project_id and s.project_id != project_id:
            continue
        out.append(s)
    return out


def _add(m: Dict[str, Number], key: str, amount: Number) -> None:
    m[key] = m.get(key, 0) + amount


def group_sessions_by_day(sessions: Iterable[SessionRecord]) -> Dict[str, DayAggregation]:
    """Bucket sessions by local date key, summing counts and durations."""
    day_map: Dict[str, DayAggregation] = {}

    for s in sessions:
        key = date_key(s.completed_at)
        agg = day_map.get(key)
        if agg is None:
            agg = DayAggregation()
            day_map[key] = agg

        agg.particle_count += 1
        agg.total_duration_seconds += s.duration_seconds

        task_name = (s.task or "").strip()
        if task_name:
            _add(agg.task_durations, task_name, s.duration_seconds)
        if s.project_id:
            _add(agg.project_durations, s.project_id, s.duration_seconds)

    return day_map


def aggregate(
    sessions: Iterable[SessionRecord],
    year: int,
    project_id: Optional[str] = None,
) -> Dict[str, DayAggregation]:
    return group_sessions_by_day(filter_work_sessions_for_year(sessions, year, project_id))


def find_top_task(durations: Mapping[str, Number]) -> Optional[str]:
    """Key with the largest accumulated duration.

    Strictly greater wins, so on a tie the first key in iteration order stays.
    Keys with zero duration never win.
    """
    top: Optional[str] = None
    max_duration: Number = 0
    for name, duration in durations.items():
        if duration > max_duration:
            max_duration = duration
            top = name
    return top
