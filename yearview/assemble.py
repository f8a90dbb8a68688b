# yearview/assemble.py
from __future__ import annotations

import dataclasses
from typing import List, Mapping, Sequence

from .aggregation import find_top_task
from .model import DayAggregation, PeakDay, YearViewData, YearViewDay, YearViewSummary
from .util.calendar import date_key, iter_year_dates


def generate_all_days_of_year(year: int, day_map: Mapping[str, DayAggregation]) -> List[YearViewDay]:
    """One YearViewDay per calendar date of `year`, Jan 1 first.

    Dates missing from day_map become zero-activity days. is_peak_day is left
    False here; assemble() flags the peak.
    """
    days: List[YearViewDay] = []
    for d in iter_year_dates(year):
        agg = day_map.get(date_key(d))
        if agg is None:
            days.append(YearViewDay(date=d, particle_count=0, total_duration_seconds=0))
            continue
        days.append(
            YearViewDay(
                date=d,
                particle_count=agg.particle_count,
                total_duration_seconds=agg.total_duration_seconds,
                top_task=find_top_task(agg.task_durations),
                top_project=find_top_task(agg.project_durations),
            )
        )
    return days


def find_peak_day(days: Sequence[YearViewDay]) -> PeakDay:
    """First day with the highest particle count.

    With no activity at all the result is index 0 and max 0.
    """
    if not days:
        raise ValueError("find_peak_day() needs at least one day")
    peak_index = 0
    max_particles = 0
    for i, day in enumerate(days):
        if day.particle_count > max_particles:
            max_particles = day.particle_count
            peak_index = i
    return PeakDay(index=peak_index, date=days[peak_index].date, max=max_particles)


def calculate_year_streak(days: Sequence[YearViewDay]) -> int:
    longest = 0
    current = 0
    for day in days:
        if day.particle_count > 0:
            current += 1
            if current > longest:
                longest = current
        else:
            current = 0
    return longest


def calculate_summary(days: Sequence[YearViewDay]) -> YearViewSummary:
    total_particles = 0
    total_duration = 0
    active_days = 0
    for day in days:
        total_particles += day.particle_count
        total_duration += day.total_duration_seconds
        if day.particle_count > 0:
            active_days += 1

    return YearViewSummary(
        total_particles=total_particles,
        total_duration_seconds=total_duration,
        longest_streak=calculate_year_streak(days),
        active_days=active_days,
        average_per_active_day=(total_particles / active_days) if active_days > 0 else 0.0,
    )


def assemble(year: int, day_map: Mapping[str, DayAggregation]) -> YearViewData:
    """Expand a sparse day map into the full year plus peak and summary.

    Pure: same year and day_map always give an equal result.
    """
    days = generate_all_days_of_year(year, day_map)

    peak = find_peak_day(days)
    if peak.max > 0:
        days[peak.index] = dataclasses.replace(days[peak.index], is_peak_day=True)

    return YearViewData(
        year=year,
        days=tuple(days),
        summary=calculate_summary(days),
        personal_max=peak.max,
        peak_date=peak.date,
    )
