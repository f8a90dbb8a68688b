#!/usr/bin/env python3
from __future__ import annotations

import argparse
import datetime as dt
import statistics
import sys
import time
from typing import Callable, List, Tuple

from yearview.aggregation import aggregate
from yearview.assemble import assemble
from yearview.grid import generate_year_grid
from yearview.mock import generate_mock_sessions
from yearview.model import SessionRecord


def _die(msg: str, rc: int = 2) -> int:
    print(f"[yearview-bench] ERROR: {msg}", file=sys.stderr)
    return rc


def _now_ns() -> int:
    return time.perf_counter_ns()


def _time_one(fn: Callable[[], object], *, repeats: int, warmup: int) -> Tuple[float, float, float]:
    for _ in range(max(0, warmup)):
        fn()

    samples_ms: List[float] = []
    for _ in range(max(1, repeats)):
        t0 = _now_ns()
        fn()
        t1 = _now_ns()
        samples_ms.append((t1 - t0) / 1_000_000.0)

    return (min(samples_ms), statistics.fmean(samples_ms), max(samples_ms))


def _scale_sessions(base: List[SessionRecord], n: int) -> List[SessionRecord]:
    """Repeat the mock history until it holds n records (work and breaks)."""
    if n <= 0 or not base:
        return []
    return [base[i % len(base)] for i in range(n)]


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="yearview-bench",
        description="Time aggregate -> assemble -> grid layout over a synthetic session history.",
    )
    ap.add_argument("--year", type=int, default=2024, help="Year to aggregate (default: 2024)")
    ap.add_argument("--n", type=int, default=5000, help="Number of session records (default: 5000)")
    ap.add_argument("--seed", type=int, default=1, help="Mock data seed (default: 1)")
    ap.add_argument("--repeats", type=int, default=5, help="Timed repeats (default: 5)")
    ap.add_argument("--warmup", type=int, default=1, help="Untimed warmup runs (default: 1)")
    ap.add_argument("--no-grid", action="store_true", help="Skip grid layout timing")
    ap.add_argument("--budget-ms", type=float, default=0.0, help="Fail (rc=1) if mean total exceeds this (0 = off)")

    args = ap.parse_args(argv)
    if args.n < 0:
        return _die("--n must be >= 0")

    base = generate_mock_sessions(args.year, seed=args.seed, today=dt.date(args.year, 12, 31))
    sessions = _scale_sessions(base, args.n)
    year = int(args.year)

    day_map = aggregate(sessions, year)
    year_data = assemble(year, day_map)

    agg_t = _time_one(lambda: aggregate(sessions, year), repeats=args.repeats, warmup=args.warmup)
    asm_t = _time_one(lambda: assemble(year, day_map), repeats=args.repeats, warmup=args.warmup)
    total_mean = agg_t[1] + asm_t[1]

    print(f"[yearview-bench] base={len(base)} n={len(sessions)} year={year} active_days={year_data.summary.active_days}")
    print(f"[yearview-bench] aggregate ms min={agg_t[0]:.3f} mean={agg_t[1]:.3f} max={agg_t[2]:.3f}")
    print(f"[yearview-bench] assemble  ms min={asm_t[0]:.3f} mean={asm_t[1]:.3f} max={asm_t[2]:.3f}")

    if not args.no_grid:
        grid_t = _time_one(
            lambda: generate_year_grid(year_data, True, today=dt.date(year, 12, 31)),
            repeats=args.repeats,
            warmup=args.warmup,
        )
        total_mean += grid_t[1]
        print(f"[yearview-bench] grid      ms min={grid_t[0]:.3f} mean={grid_t[1]:.3f} max={grid_t[2]:.3f}")

    print(f"[yearview-bench] total mean ms={total_mean:.3f}")

    if args.budget_ms > 0 and total_mean > args.budget_ms:
        print(f"[yearview-bench] FAIL: mean {total_mean:.3f}ms > budget {args.budget_ms:.3f}ms", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
