# yearview/normalize.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .model import SESSION_TYPES, SessionRecord
from .util.console import eprint, obs_enabled
from .util.duration import parse_seconds
from .util.localtime import parse_timestamp


def _opt_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v)
    return s if s.strip() else None


def normalize_session(s: Dict[str, Any]) -> Optional[SessionRecord]:
    """Turn one exported session dict into a SessionRecord.

    Returns None for records that cannot take part in aggregation
    (not a dict, unknown type, bad duration, bad completedAt).
    Task names are kept as stored; trimming happens during aggregation.
    """
    if not isinstance(s, dict):
        return None

    sid = _opt_str(s.get("id"))
    kind = str(s.get("type") or "").strip()
    if kind not in SESSION_TYPES:
        if obs_enabled():
            eprint(f"[yearview.normalize] WARN: unknown session type id={sid!r} value={kind!r}")
        return None

    dur_raw = s.get("durationSeconds")
    if dur_raw is None:
        dur_raw = s.get("duration")
    duration = parse_seconds(dur_raw)
    if duration is None:
        if obs_enabled():
            eprint(f"[yearview.normalize] WARN: invalid duration id={sid!r} value={dur_raw!r}")
        return None

    completed_raw = s.get("completedAt")
    completed_at = parse_timestamp(completed_raw)
    if completed_at is None:
        if obs_enabled():
            eprint(f"[yearview.normalize] WARN: invalid completedAt id={sid!r} value={completed_raw!r}")
        return None

    task = s.get("task")
    return SessionRecord(
        type=kind,
        duration_seconds=duration,
        completed_at=completed_at,
        task=task if isinstance(task, str) else None,
        project_id=_opt_str(s.get("projectId")),
        id=sid,
    )


def normalize_sessions(raw_sessions: Iterable[Any]) -> List[SessionRecord]:
    out: List[SessionRecord] = []
    skipped = 0
    for raw in raw_sessions:
        if isinstance(raw, SessionRecord):
            out.append(raw)
            continue
        rec = normalize_session(raw)
        if rec is None:
            skipped += 1
            continue
        out.append(rec)
    if skipped and obs_enabled():
        eprint(f"[yearview.normalize] INFO: skipped {skipped} unusable session record(s)")
    return out
