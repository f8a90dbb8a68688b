"""Read-only access to an exported session history snapshot."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union

from .model import SessionRecord
from .normalize import normalize_sessions
from .util.console import eprint, obs_enabled

JsonPath = Union[str, Path]

STORAGE_KEY = "particle_session_history"
LEGACY_STORAGE_KEY = "pomo_session_history"


class SessionLoadError(ValueError):
    """Raised when a session snapshot file cannot be read or has the wrong shape."""


def extract_raw_sessions(obj: Any) -> List[Any]:
    """Pick the session list out of a decoded snapshot.

    Accepted shapes:
      - [ {...}, ... ]
      - { "sessions": [ ... ] }
      - { "particle_session_history": [ ... ] }  (app storage dump)
      - { "pomo_session_history": [ ... ] }      (legacy key; used only when the new key is absent)
    """
    if isinstance(obj, list):
        return obj
    if isinstance(obj, dict):
        for key in ("sessions", STORAGE_KEY, LEGACY_STORAGE_KEY):
            v = obj.get(key)
            if v is None:
                continue
            # Storage dumps keep the value as a JSON string.
            if isinstance(v, str):
                try:
                    v = json.loads(v)
                except json.JSONDecodeError as ex:
                    raise SessionLoadError(f"{key}: embedded JSON is invalid: {ex}") from ex
            if not isinstance(v, list):
                raise SessionLoadError(f"{key} must be a list; got {type(v).__name__}")
            return v
        raise SessionLoadError(
            f"snapshot object must contain one of: sessions, {STORAGE_KEY}, {LEGACY_STORAGE_KEY}"
        )
    raise SessionLoadError(f"snapshot must be a JSON list or object; got {type(obj).__name__}")


def load_sessions_from_json(path: JsonPath) -> List[SessionRecord]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as ex:
        raise SessionLoadError(f"session file not found: {p}") from ex
    except OSError as ex:
        raise SessionLoadError(f"cannot read session file {p}: {ex}") from ex

    try:
        obj = json.loads(text) if text.strip() else []
    except json.JSONDecodeError as ex:
        raise SessionLoadError(f"invalid JSON in {p}: {ex}") from ex

    raw = extract_raw_sessions(obj)
    sessions = normalize_sessions(raw)
    if obs_enabled():
        eprint(f"[yearview.sessions] load.ok path={str(p)!r} raw={len(raw)} sessions={len(sessions)}")
    return sessions
