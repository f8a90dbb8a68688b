from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from .aggregation import aggregate
from .assemble import assemble
from .grid import generate_year_grid
from .highlights import compute_highlights
from .mock import generate_mock_sessions
from .normalize import normalize_sessions
from .payload import build_payload
from .render_text import CHARSETS, render_year_text
from .sessions import SessionLoadError, load_sessions_from_json
from .util.calendar import parse_week_start
from .util.console import eprint, obs_enabled
from .util.localtime import resolve_today


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(
        prog="yearview",
        description="Aggregate focus-session history into a year activity grid (text or JSON payload).",
    )
    ap.add_argument("--in", dest="in_json", default=None, help="Session history JSON (list, {sessions: [...]}, or app storage dump)")
    ap.add_argument("--mock", action="store_true", help="Use deterministic demo sessions instead of --in")
    ap.add_argument("--seed", type=int, default=1, help="Seed for --mock (default: 1)")
    ap.add_argument("--year", type=int, default=None, help="Year to show (default: current year of --today)")
    ap.add_argument("--project", default=None, help="Only count sessions with this projectId")
    ap.add_argument(
        "--week-start",
        default=os.getenv("YEARVIEW_WEEK_START", "monday"),
        help="First row of the grid: monday|sunday (default: env YEARVIEW_WEEK_START or 'monday')",
    )
    ap.add_argument(
        "--today",
        default=None,
        help="Reference date YYYY-MM-DD for future cells (default: env YEARVIEW_TODAY or the host clock)",
    )
    ap.add_argument("--format", choices=("text", "json"), default="text", help="Output format (default: text)")
    ap.add_argument("--charset", choices=sorted(CHARSETS), default="blocks", help="Glyphs for --format text")
    ap.add_argument("--out", default=None, help="Write output to this path instead of stdout")

    args = ap.parse_args(argv)

    try:
        week_starts_on_monday = parse_week_start(args.week_start)
    except ValueError as e:
        raise SystemExit(f"Invalid --week-start value: {e}")

    try:
        today = resolve_today(args.today)
    except ValueError as e:
        raise SystemExit(f"Invalid --today value: {e}")

    year = int(args.year) if args.year is not None else today.year
    if not 1 <= year <= 9999:
        raise SystemExit(f"Invalid --year value: {year}")

    if args.mock:
        sessions = generate_mock_sessions(year, seed=int(args.seed), today=today)
    elif args.in_json:
        try:
            sessions = load_sessions_from_json(Path(args.in_json))
        except SessionLoadError as e:
            raise SystemExit(f"Failed to load sessions: {e}")
    else:
        raise SystemExit("Provide --in PATH or --mock")

    sessions = normalize_sessions(sessions)
    year_data = assemble(year, aggregate(sessions, year, args.project))
    grid_data = generate_year_grid(year_data, week_starts_on_monday, today=today)
    highlights = compute_highlights(year_data.days, is_project_filtered=bool(args.project))

    if obs_enabled():
        eprint(
            f"[yearview.cli] year={year} sessions={len(sessions)} active_days={year_data.summary.active_days} "
            f"personal_max={year_data.personal_max} total_weeks={grid_data.total_weeks}"
        )

    if args.format == "json":
        payload = build_payload(
            year_data,
            grid_data,
            week_starts_on_monday=week_starts_on_monday,
            today=today,
            project_id=args.project,
            highlights=highlights,
        )
        text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    else:
        text = render_year_text(
            year_data,
            grid_data,
            week_starts_on_monday=week_starts_on_monday,
            highlights=highlights,
            charset=args.charset,
        )

    if args.out:
        out_path = Path(args.out)
        try:
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise SystemExit(f"Cannot write output '{out_path}': {e}")
        print(str(out_path.resolve()))
        return

    sys.stdout.write(text)


if __name__ == "__main__":
    main()
