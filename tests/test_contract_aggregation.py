from __future__ import annotations

import datetime as dt
import json
import os
import subprocess
import sys
import unittest
from pathlib import Path

from yearview.aggregation import (
    aggregate,
    filter_work_sessions_for_year,
    find_top_task,
    group_sessions_by_day,
)
from yearview.assemble import assemble
from yearview.model import SessionRecord

REPO_ROOT = Path(__file__).resolve().parents[1]


def _s(when: str, *, kind: str = "work", dur: int = 1500, task=None, project=None) -> SessionRecord:
    return SessionRecord(
        type=kind,
        duration_seconds=dur,
        completed_at=dt.datetime.fromisoformat(when),
        task=task,
        project_id=project,
    )


class TestAggregationContract(unittest.TestCase):
    def test_empty_input_gives_empty_map(self) -> None:
        self.assertEqual(aggregate([], 2024), {})
        self.assertEqual(aggregate([], 2024, None), {})

    def test_only_work_sessions_in_year_are_kept(self) -> None:
        sessions = [
            _s("2024-01-01T00:00:00"),
            _s("2024-01-01T09:00:00", kind="shortBreak", dur=300),
            _s("2024-01-01T09:30:00", kind="longBreak", dur=900),
            _s("2023-12-31T23:59:59"),
            _s("2025-01-01T00:00:00"),
            _s("2024-12-31T23:59:59"),
        ]
        kept = filter_work_sessions_for_year(sessions, 2024)
        self.assertEqual([s.completed_at.isoformat() for s in kept], ["2024-01-01T00:00:00", "2024-12-31T23:59:59"])

        m = aggregate(sessions, 2024)
        self.assertEqual(sorted(m.keys()), ["2024-01-01", "2024-12-31"])
        self.assertEqual(m["2024-01-01"].particle_count, 1)
        self.assertEqual(m["2024-01-01"].total_duration_seconds, 1500)

    def test_project_filter(self) -> None:
        sessions = [
            _s("2024-05-01T10:00:00", project="p1"),
            _s("2024-05-01T11:00:00", project="p2"),
            _s("2024-05-01T12:00:00"),
        ]
        self.assertEqual(aggregate(sessions, 2024, "p1")["2024-05-01"].particle_count, 1)
        self.assertEqual(aggregate(sessions, 2024, None)["2024-05-01"].particle_count, 3)
        # Empty string means "no filter", same as None.
        self.assertEqual(aggregate(sessions, 2024, "")["2024-05-01"].particle_count, 3)
        self.assertEqual(aggregate(sessions, 2024, "nope"), {})

    def test_single_active_day_scenario(self) -> None:
        sessions = [
            _s("2024-03-15T09:00:00", task="Write report"),
            _s("2024-03-15T10:00:00", task="Review"),
            _s("2024-03-15T11:00:00", task="Write report"),
        ]
        m = aggregate(sessions, 2024)
        day = m["2024-03-15"]
        self.assertEqual(day.particle_count, 3)
        self.assertEqual(day.total_duration_seconds, 4500)
        self.assertEqual(day.task_durations, {"Write report": 3000, "Review": 1500})
        self.assertEqual(find_top_task(day.task_durations), "Write report")

        yd = assemble(2024, m)
        d = [x for x in yd.days if x.date == dt.date(2024, 3, 15)][0]
        self.assertEqual(d.top_task, "Write report")
        self.assertEqual(d.particle_count, 3)
        self.assertEqual(d.total_duration_seconds, 4500)

    def test_task_names_are_trimmed_and_blank_tasks_ignored(self) -> None:
        sessions = [
            _s("2024-03-15T09:00:00", task="  Deep work "),
            _s("2024-03-15T10:00:00", task="Deep work"),
            _s("2024-03-15T11:00:00", task="   "),
            _s("2024-03-15T12:00:00", task=None),
        ]
        day = group_sessions_by_day(sessions)["2024-03-15"]
        self.assertEqual(day.particle_count, 4)
        self.assertEqual(day.total_duration_seconds, 6000)
        self.assertEqual(day.task_durations, {"Deep work": 3000})

    def test_top_task_tie_keeps_first_encountered(self) -> None:
        sessions = [
            _s("2024-03-15T09:00:00", task="Zeta"),
            _s("2024-03-15T10:00:00", task="Alpha"),
        ]
        day = group_sessions_by_day(sessions)["2024-03-15"]
        self.assertEqual(find_top_task(day.task_durations), "Zeta")

    def test_find_top_task_edge_cases(self) -> None:
        self.assertIsNone(find_top_task({}))
        self.assertIsNone(find_top_task({"idle": 0}))
        self.assertEqual(find_top_task({"a": 10, "b": 30, "c": 30}), "b")

    def test_project_durations_tracked(self) -> None:
        sessions = [
            _s("2024-03-15T09:00:00", project="p1", dur=600),
            _s("2024-03-15T10:00:00", project="p2", dur=1500),
        ]
        day = group_sessions_by_day(sessions)["2024-03-15"]
        self.assertEqual(day.project_durations, {"p1": 600, "p2": 1500})
        yd = assemble(2024, {"2024-03-15": day})
        self.assertEqual(yd.days[74].top_project, "p2")


class TestLocalDayBucketingContract(unittest.TestCase):
    """UTC timestamps land on the host's local calendar day."""

    def _run(self, tz: str) -> dict:
        code = r'''
import json
from yearview.api import build_year_view
sessions = [{"type": "work", "duration": 1500, "completedAt": "2024-01-01T03:00:00Z"}]
y23 = build_year_view(sessions, 2023)
y24 = build_year_view(sessions, 2024)
print(json.dumps({"y2023": y23.summary.total_particles, "y2024": y24.summary.total_particles,
                  "last": y23.days[-1].particle_count}))
'''
        env = os.environ.copy()
        env["PYTHONPATH"] = str(REPO_ROOT)
        env["TZ"] = tz
        p = subprocess.run([sys.executable, "-c", code], cwd=str(REPO_ROOT), env=env, text=True, capture_output=True)
        self.assertEqual(p.returncode, 0, p.stdout + "\n" + p.stderr)
        return json.loads(p.stdout.strip())

    def test_utc_host(self) -> None:
        self.assertEqual(self._run("UTC"), {"y2023": 0, "y2024": 1, "last": 0})

    def test_host_behind_utc(self) -> None:
        self.assertEqual(self._run("America/Los_Angeles"), {"y2023": 1, "y2024": 0, "last": 1})


if __name__ == "__main__":
    unittest.main(verbosity=2)
