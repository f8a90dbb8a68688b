# yearview/highlights.py
from __future__ import annotations

from typing import Dict, List, Sequence

from .aggregation import find_top_task
from .model import Highlight, YearViewDay


def compute_highlights(days: Sequence[YearViewDay], is_project_filtered: bool) -> List[Highlight]:
    """Short labelled facts shown under the grid and in exports.

    "Most focused project": particles summed over the days each project topped.
    Skipped under a project filter (it would always name the filter).
    """
    highlights: List[Highlight] = []

    if not is_project_filtered:
        project_totals: Dict[str, int] = {}
        for day in days:
            if day.top_project:
                project_totals[day.top_project] = project_totals.get(day.top_project, 0) + day.particle_count
        top = find_top_task(project_totals)
        if top is not None:
            count = project_totals[top]
            noun = "particle" if count == 1 else "particles"
            highlights.append(Highlight(label="Most focused project", value=f"{top} - {count} {noun}"))

    return highlights
