"""yearview.grid

Year grid layout: places every day of a year on a 7-row grid whose columns
are weeks, the way commit-activity graphs do.

Rows (day_index) start at the configured first weekday. Column 0 is the
possibly partial week holding Jan 1; the last column holds Dec 31, so the
grid never has trailing empty columns.
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, Iterator, Optional, Sequence, Tuple

from .brightness import calculate_brightness
from .model import Grid, GridCell, MonthLabel, YearGridData, YearViewData, YearViewDay
from .util.calendar import MONTH_NAMES, DateLike, day_of_year, iter_year_dates
from .util.localtime import resolve_today

WEEKDAY_LABELS_MON = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")
WEEKDAY_LABELS_SUN = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


def day_of_week_index(d: DateLike, week_starts_on_monday: bool) -> int:
    """Row index 0..6 where 0 is the first day of the configured week."""
    sunday_based = d.isoweekday() % 7  # 0 = Sunday ... 6 = Saturday
    if week_starts_on_monday:
        return (sunday_based + 6) % 7
    return sunday_based


def week_of_year(d: DateLike, year: int, week_starts_on_monday: bool) -> int:
    """Column index of `d` in the grid for `year` (week 0 holds Jan 1)."""
    jan1_index = day_of_week_index(dt.date(year, 1, 1), week_starts_on_monday)
    return (day_of_year(d) + jan1_index) // 7


def weekday_labels(week_starts_on_monday: bool) -> Tuple[str, ...]:
    return WEEKDAY_LABELS_MON if week_starts_on_monday else WEEKDAY_LABELS_SUN


def month_labels(year: int, week_starts_on_monday: bool) -> Tuple[MonthLabel, ...]:
    """Column of each month's first day. Labels may share a column; no dedup."""
    return tuple(
        MonthLabel(name=MONTH_NAMES[m - 1], week_index=week_of_year(dt.date(year, m, 1), year, week_starts_on_monday))
        for m in range(1, 13)
    )


def _infer_year(days: Sequence[YearViewDay], year: Optional[int]) -> int:
    if year is not None:
        return int(year)
    for day in days:
        return day.date.year
    raise ValueError("layout_year_grid() needs `year` when `days` is empty")


def layout_year_grid(
    days: Sequence[YearViewDay],
    week_starts_on_monday: bool = True,
    personal_max: int = 0,
    *,
    year: Optional[int] = None,
    today: Optional[dt.date] = None,
) -> YearGridData:
    """Lay out assembled days on the 7 x total_weeks grid.

    Every calendar date of the year gets exactly one cell; dates absent from
    `days` render as zero activity. Positions that belong to no date (the
    partial first and last weeks) stay None.

    `today` decides is_future (strictly after today); it defaults to the host's
    local date, or YEARVIEW_TODAY when set.
    """
    y = _infer_year(days, year)
    ref_today = resolve_today(today)

    by_date: Dict[dt.date, YearViewDay] = {}
    for day in days:
        if day.date.year == y:
            by_date[day.date] = day

    total_weeks = week_of_year(dt.date(y, 12, 31), y, week_starts_on_monday) + 1
    grid: Grid = [[None] * total_weeks for _ in range(7)]

    jan1_index = day_of_week_index(dt.date(y, 1, 1), week_starts_on_monday)
    for d in iter_year_dates(y):
        week_index = (day_of_year(d) + jan1_index) // 7
        day_index = day_of_week_index(d, week_starts_on_monday)

        day = by_date.get(d)
        particle_count = day.particle_count if day is not None else 0
        is_peak_day = day.is_peak_day if day is not None else False

        grid[day_index][week_index] = GridCell(
            date=d,
            week_index=week_index,
            day_index=day_index,
            particle_count=particle_count,
            brightness=calculate_brightness(particle_count, personal_max),
            is_peak_day=is_peak_day,
            is_future=d > ref_today,
        )

    return YearGridData(
        grid=grid,
        month_labels=month_labels(y, week_starts_on_monday),
        total_weeks=total_weeks,
        year=y,
    )


def generate_year_grid(
    year_data: YearViewData,
    week_starts_on_monday: bool = True,
    *,
    today: Optional[dt.date] = None,
) -> YearGridData:
    return layout_year_grid(
        year_data.days,
        week_starts_on_monday,
        year_data.personal_max,
        year=year_data.year,
        today=today,
    )


def iter_cells(grid_data: YearGridData) -> Iterator[GridCell]:
    """Non-null cells in date order (column-major walk of the grid)."""
    for w in range(grid_data.total_weeks):
        for row in grid_data.grid:
            cell = row[w]
            if cell is not None:
                yield cell
