"""Payload validation helpers (library-facing)."""

from __future__ import annotations

from typing import Any, Dict, List, Set, Tuple

from yearview.payload import LATEST_SCHEMA_VERSION, SCHEMA_NAME
from yearview.util.calendar import days_in_year, parse_date_key


class PayloadValidationError(ValueError):
    """Raised when a payload fails validation."""


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _validate_cell(cell: Any, row: int, col: int, *, label: str, errs: List[str]) -> None:
    where = f"{label}: grid[{row}][{col}]"
    if not isinstance(cell, dict):
        errs.append(f"{where} must be dict or null")
        return
    _require(cell.get("day_index") == row, f"{where}.day_index must be {row}", errs)
    _require(cell.get("week_index") == col, f"{where}.week_index must be {col}", errs)
    b = cell.get("brightness")
    _require(
        isinstance(b, (int, float)) and not isinstance(b, bool) and 0.08 <= b <= 1.0,
        f"{where}.brightness must be number in [0.08, 1.0]",
        errs,
    )
    _require(_is_int(cell.get("particle_count")) and cell["particle_count"] >= 0,
             f"{where}.particle_count must be int >= 0", errs)


def _validate_grid(payload: Dict[str, Any], *, label: str, errs: List[str]) -> None:
    grid = payload.get("grid")
    total_weeks = payload.get("total_weeks")
    cfg = payload.get("cfg") if isinstance(payload.get("cfg"), dict) else {}
    year = cfg.get("year")

    if not isinstance(grid, list):
        errs.append(f"{label}: grid must be list")
        return
    _require(len(grid) == 7, f"{label}: grid must have 7 rows", errs)
    if not _is_int(total_weeks):
        errs.append(f"{label}: total_weeks must be int")
        return

    seen: Set[str] = set()
    positions: Set[Tuple[int, int]] = set()
    for r, row in enumerate(grid[:7]):
        if not isinstance(row, list) or len(row) != total_weeks:
            errs.append(f"{label}: grid[{r}] must be list of length total_weeks={total_weeks}")
            continue
        for c, cell in enumerate(row):
            if cell is None:
                continue
            _validate_cell(cell, r, c, label=label, errs=errs)
            if not isinstance(cell, dict):
                continue
            key = cell.get("date")
            try:
                d = parse_date_key(str(key))
            except ValueError:
                errs.append(f"{label}: grid[{r}][{c}].date must be YYYY-MM-DD")
                continue
            if _is_int(year) and d.year != year:
                errs.append(f"{label}: grid[{r}][{c}].date {key} outside cfg.year {year}")
            if key in seen:
                errs.append(f"{label}: grid has duplicate cell for {key}")
            seen.add(str(key))
            positions.add((r, c))

    if _is_int(year):
        want = days_in_year(year)
        if len(seen) != want:
            errs.append(f"{label}: grid must hold {want} cells for {year}; got {len(seen)}")
    if total_weeks > 0:
        cols = {c for _, c in positions}
        _require(0 in cols and (total_weeks - 1) in cols,
                 f"{label}: grid first and last columns must not be empty", errs)


def validate_payload(payload: Dict[str, Any], *, label: str = "payload") -> List[str]:
    """Return human-readable issues with a year-view payload (empty means OK)."""
    if not isinstance(payload, dict):
        return [f"{label}: payload must be a dict/object"]

    errs: List[str] = []
    sv = payload.get("schema_version")
    if not _is_int(sv):
        return [f"{label}: schema_version must be an int"]
    if sv != LATEST_SCHEMA_VERSION:
        return [f"Unsupported schema_version: {sv} (latest={LATEST_SCHEMA_VERSION})"]

    meta = payload.get("meta")
    _require(isinstance(meta, dict), f"{label}: meta must be dict", errs)
    if isinstance(meta, dict):
        ga = meta.get("generated_at")
        _require(isinstance(ga, str) and bool(ga.strip()), f"{label}: meta.generated_at must be non-empty string", errs)
        schema = meta.get("schema")
        _require(
            isinstance(schema, dict) and schema.get("name") == SCHEMA_NAME,
            f"{label}: meta.schema.name must be {SCHEMA_NAME!r}",
            errs,
        )

    cfg = payload.get("cfg")
    _require(isinstance(cfg, dict), f"{label}: cfg must be dict", errs)
    if isinstance(cfg, dict):
        _require(_is_int(cfg.get("year")), f"{label}: cfg.year must be int", errs)
        _require(isinstance(cfg.get("week_starts_on_monday"), bool),
                 f"{label}: cfg.week_starts_on_monday must be bool", errs)

    summary = payload.get("summary")
    _require(isinstance(summary, dict), f"{label}: summary must be dict", errs)
    if isinstance(summary, dict):
        for k in ("total_particles", "total_duration_seconds", "longest_streak", "active_days",
                  "average_per_active_day"):
            _require(k in summary, f"{label}: summary missing key: {k}", errs)

    days = payload.get("days")
    _require(isinstance(days, list), f"{label}: days must be list", errs)
    if isinstance(days, list) and isinstance(cfg, dict) and _is_int(cfg.get("year")):
        want = days_in_year(cfg["year"])
        _require(len(days) == want, f"{label}: days must have {want} entries; got {len(days)}", errs)
        peaks = [d for d in days if isinstance(d, dict) and d.get("is_peak_day") is True]
        _require(len(peaks) <= 1, f"{label}: at most one day may be the peak day", errs)

    labels = payload.get("month_labels")
    _require(isinstance(labels, list) and len(labels) == 12, f"{label}: month_labels must have 12 entries", errs)

    _validate_grid(payload, label=label, errs=errs)
    return errs


def assert_valid_payload(payload: Dict[str, Any]) -> None:
    errs = validate_payload(payload, label="payload")
    if errs:
        raise PayloadValidationError(errs[0])


__all__ = [
    "LATEST_SCHEMA_VERSION",
    "PayloadValidationError",
    "assert_valid_payload",
    "validate_payload",
]
