from __future__ import annotations

import datetime as dt
import unittest

from yearview.highlights import compute_highlights
from yearview.model import Highlight, YearViewDay


def _day(d: dt.date, count: int, project=None) -> YearViewDay:
    return YearViewDay(date=d, particle_count=count, total_duration_seconds=count * 1500, top_project=project)


class TestHighlightsContract(unittest.TestCase):
    def test_most_focused_project(self) -> None:
        days = [
            _day(dt.date(2024, 1, 1), 3, "alpha"),
            _day(dt.date(2024, 1, 2), 5, "beta"),
            _day(dt.date(2024, 1, 3), 4, "alpha"),
            _day(dt.date(2024, 1, 4), 2, None),
        ]
        self.assertEqual(
            compute_highlights(days, is_project_filtered=False),
            [Highlight(label="Most focused project", value="alpha - 7 particles")],
        )

    def test_skipped_when_filtered_or_no_projects(self) -> None:
        days = [_day(dt.date(2024, 1, 1), 3, "alpha")]
        self.assertEqual(compute_highlights(days, is_project_filtered=True), [])
        self.assertEqual(compute_highlights([_day(dt.date(2024, 1, 1), 3)], is_project_filtered=False), [])
        self.assertEqual(compute_highlights([], is_project_filtered=False), [])

    def test_tie_keeps_first_seen_project(self) -> None:
        days = [_day(dt.date(2024, 1, 1), 1, "beta"), _day(dt.date(2024, 1, 2), 1, "alpha")]
        got = compute_highlights(days, is_project_filtered=False)
        self.assertEqual(got[0].value, "beta - 1 particle")


if __name__ == "__main__":
    unittest.main(verbosity=2)
