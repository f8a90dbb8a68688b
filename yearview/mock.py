# yearview/mock.py
from __future__ import annotations

import datetime as dt
import random
from typing import List, Optional

from .aggregation import aggregate
from .assemble import assemble
from .model import SessionRecord, YearViewData
from .util.calendar import iter_year_dates
from .util.localtime import resolve_today

SAMPLE_TASKS = [
    "API Integration",
    "Feature Development",
    "Bug Fixes",
    "Code Review",
    "Documentation",
    "UI Polish",
    "Testing",
    "Refactoring",
    "Design System",
    "Performance Optimization",
]

SAMPLE_PROJECTS = ["proj-client", "proj-internal", "proj-learning"]

WORK_SECONDS = 25 * 60
SHORT_BREAK_SECONDS = 5 * 60
LONG_BREAK_SECONDS = 15 * 60


def _day_particle_count(rng: random.Random, weekend: bool) -> int:
    # Most days 1-3, many 4-7, occasional 8-13 peak days.
    if rng.random() >= (0.3 if weekend else 0.7):
        return 0
    r = rng.random()
    if r < 0.5:
        return rng.randint(1, 3)
    if r < 0.85:
        return rng.randint(4, 7)
    return rng.randint(8, 13)


def generate_mock_sessions(
    year: int,
    *,
    seed: int = 1,
    today: Optional[dt.date] = None,
) -> List[SessionRecord]:
    """Deterministic demo session history for `year`.

    Weekdays are busier than weekends, days after `today` stay empty, and
    breaks are interleaved so the work-only filter has something to drop.
    """
    rng = random.Random(f"yearview.mock:{seed}:{year}")
    ref_today = resolve_today(today)
    out: List[SessionRecord] = []

    for d in iter_year_dates(year):
        if d > ref_today:
            break
        count = _day_particle_count(rng, weekend=d.isoweekday() >= 6)
        t = dt.datetime(d.year, d.month, d.day, 8, 0)
        for i in range(count):
            task = rng.choice(SAMPLE_TASKS) if rng.random() < 0.7 else None
            project = rng.choice(SAMPLE_PROJECTS) if rng.random() < 0.6 else None
            t += dt.timedelta(seconds=WORK_SECONDS)
            out.append(
                SessionRecord(
                    type="work",
                    duration_seconds=WORK_SECONDS,
                    completed_at=t,
                    task=task,
                    project_id=project,
                    id=f"mock-{d.isoformat()}-{i:02d}",
                )
            )
            if i == count - 1:
                continue
            long_break = (i + 1) % 4 == 0
            brk = LONG_BREAK_SECONDS if long_break else SHORT_BREAK_SECONDS
            t += dt.timedelta(seconds=brk)
            out.append(
                SessionRecord(
                    type="longBreak" if long_break else "shortBreak",
                    duration_seconds=brk,
                    completed_at=t,
                    id=f"mock-{d.isoformat()}-{i:02d}b",
                )
            )
    return out


def generate_mock_year_data(
    year: int,
    *,
    seed: int = 1,
    today: Optional[dt.date] = None,
    project_id: Optional[str] = None,
) -> YearViewData:
    sessions = generate_mock_sessions(year, seed=seed, today=today)
    return assemble(year, aggregate(sessions, year, project_id))
