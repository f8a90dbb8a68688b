# yearview/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

Number = Union[int, float]

SESSION_TYPES = ("work", "shortBreak", "longBreak")


@dataclass(frozen=True)
class SessionRecord:
    type: str                   # "work" | "shortBreak" | "longBreak"
    duration_seconds: Number
    completed_at: dt.datetime   # local wall-clock time (naive)
    task: Optional[str] = None
    project_id: Optional[str] = None
    id: Optional[str] = None


@dataclass
class DayAggregation:
    particle_count: int = 0
    total_duration_seconds: Number = 0
    # Insertion order matters: it decides top-task ties.
    task_durations: Dict[str, Number] = field(default_factory=dict)
    project_durations: Dict[str, Number] = field(default_factory=dict)


@dataclass(frozen=True)
class YearViewDay:
    date: dt.date
    particle_count: int
    total_duration_seconds: Number
    top_task: Optional[str] = None
    top_project: Optional[str] = None
    is_peak_day: bool = False


@dataclass(frozen=True)
class YearViewSummary:
    total_particles: int
    total_duration_seconds: Number
    longest_streak: int
    active_days: int
    average_per_active_day: float


@dataclass(frozen=True)
class PeakDay:
    index: int
    date: dt.date
    max: int


@dataclass(frozen=True)
class YearViewData:
    year: int
    days: Tuple[YearViewDay, ...]
    summary: YearViewSummary
    personal_max: int
    peak_date: dt.date


@dataclass(frozen=True)
class GridCell:
    date: dt.date
    week_index: int             # column
    day_index: int              # row, 0 = configured first weekday
    particle_count: int
    brightness: float
    is_peak_day: bool
    is_future: bool


@dataclass(frozen=True)
class MonthLabel:
    name: str
    week_index: int


# Rows are day_index (7), columns are week_index (total_weeks).
Grid = List[List[Optional[GridCell]]]


@dataclass(frozen=True)
class YearGridData:
    grid: Grid
    month_labels: Tuple[MonthLabel, ...]
    total_weeks: int
    year: int


@dataclass(frozen=True)
class Highlight:
    label: str
    value: str


__all__ = [
    "SESSION_TYPES",
    "SessionRecord",
    "DayAggregation",
    "YearViewDay",
    "YearViewSummary",
    "PeakDay",
    "YearViewData",
    "GridCell",
    "MonthLabel",
    "Grid",
    "YearGridData",
    "Highlight",
]
