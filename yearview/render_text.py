# yearview/render_text.py
from __future__ import annotations

from typing import List, Optional, Sequence

from .brightness import brightness_level
from .grid import weekday_labels
from .model import GridCell, Highlight, YearGridData, YearViewData
from .util.calendar import date_key
from .util.duration import format_duration

CHARSETS = {
    "blocks": ("·", "░", "▒", "▓", "█"),
    "ascii": (".", "-", "+", "*", "#"),
}

_ROW_PREFIX = 4   # "Mo  "
_CELL_W = 2       # glyph + space


def _cell_glyph(cell: Optional[GridCell], glyphs: Sequence[str]) -> str:
    if cell is None or cell.is_future:
        return " "
    return glyphs[brightness_level(cell.brightness, levels=len(glyphs))]


def render_month_line(grid_data: YearGridData) -> str:
    """Month names anchored at their week column; a label that would overlap
    the previous one is pushed right by the overlap."""
    width = _ROW_PREFIX + grid_data.total_weeks * _CELL_W
    line = [" "] * width
    cursor = 0
    for m in grid_data.month_labels:
        start = max(_ROW_PREFIX + m.week_index * _CELL_W, cursor)
        if start + len(m.name) > len(line):
            line.extend(" " * (start + len(m.name) - len(line)))
        for i, ch in enumerate(m.name):
            line[start + i] = ch
        cursor = start + len(m.name) + 1
    return "".join(line).rstrip()


def render_grid_lines(grid_data: YearGridData, *, week_starts_on_monday: bool, charset: str = "blocks") -> List[str]:
    if charset not in CHARSETS:
        raise ValueError(f"unknown charset {charset!r}; expected one of {sorted(CHARSETS)}")
    glyphs = CHARSETS[charset]
    labels = weekday_labels(week_starts_on_monday)

    lines = [render_month_line(grid_data)]
    for day_index, row in enumerate(grid_data.grid):
        cells = "".join(_cell_glyph(c, glyphs) + " " for c in row)
        lines.append(f"{labels[day_index]:<{_ROW_PREFIX}}{cells}".rstrip())
    return lines


def render_summary_lines(year_data: YearViewData) -> List[str]:
    s = year_data.summary
    lines = [
        f"Particles        {s.total_particles:,}",
        f"Focus time       {format_duration(s.total_duration_seconds)}",
        f"Active days      {s.active_days}",
        f"Longest streak   {s.longest_streak} day{'s' if s.longest_streak != 1 else ''}",
        f"Avg / active day {s.average_per_active_day:.1f}",
    ]
    if year_data.personal_max > 0:
        lines.append(f"Peak day         {date_key(year_data.peak_date)} ({year_data.personal_max} particles)")
    return lines


def render_year_text(
    year_data: YearViewData,
    grid_data: YearGridData,
    *,
    week_starts_on_monday: bool,
    highlights: Sequence[Highlight] = (),
    charset: str = "blocks",
) -> str:
    """Plain-text rendition of the year grid plus stats, for terminals and logs."""
    out: List[str] = [str(year_data.year), ""]
    out.extend(render_grid_lines(grid_data, week_starts_on_monday=week_starts_on_monday, charset=charset))
    out.append("")
    out.extend(render_summary_lines(year_data))
    if highlights:
        out.append("")
        for h in highlights:
            out.append(f"{h.label}: {h.value}")
    return "\n".join(out) + "\n"
