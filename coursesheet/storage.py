"""
JSON drafts of a transcript.

The CLI keeps the data a user is editing in a plain JSON file:

    {"student": {...}, "courses": [{..., "meetings": [...]}]}

Loading is forgiving: missing or non-string fields become "" (numbers
are stringified), missing or duplicated identities are replaced by fresh
ones. Whatever comes back is a complete TranscriptData value, so the
renderer never sees a half-built record.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

from coursesheet.model import (
    COURSE_FIELDS,
    MEETING_FIELDS,
    STUDENT_FIELDS,
    Course,
    Meeting,
    Student,
    TranscriptData,
    new_id,
)

logger = logging.getLogger(__name__)


def _text(x: Any) -> str:
    if isinstance(x, str):
        return x
    if isinstance(x, bool) or x is None:
        return ""
    if isinstance(x, (int, float)):
        return str(x)
    return ""


def _mapping(x: Any) -> dict[str, Any]:
    return x if isinstance(x, dict) else {}


def _items(x: Any) -> list[Any]:
    return x if isinstance(x, list) else []


def _identity(raw: Any, seen: set[str]) -> str:
    # Keep a usable stored id, otherwise issue a fresh one.
    ident = _text(raw).strip()
    if not ident or ident in seen:
        ident = new_id()
    seen.add(ident)
    return ident


def _meeting_from_dict(obj: dict[str, Any], seen: set[str]) -> Meeting:
    values = {name: _text(obj.get(name)) for name in MEETING_FIELDS}
    return Meeting(meeting_id=_identity(obj.get("meeting_id"), seen), **values)


def _course_from_dict(obj: dict[str, Any], seen: set[str]) -> Course:
    values = {name: _text(obj.get(name)) for name in COURSE_FIELDS}
    meeting_ids: set[str] = set()
    meetings = tuple(
        _meeting_from_dict(m, meeting_ids) for m in _items(obj.get("meetings")) if isinstance(m, dict)
    )
    return Course(course_id=_identity(obj.get("course_id"), seen), meetings=meetings, **values)


def transcript_from_dict(obj: Any) -> TranscriptData:
    """
    Build a TranscriptData from parsed JSON. Never raises.
    """
    root = _mapping(obj)
    student_raw = _mapping(root.get("student"))
    student = Student(**{name: _text(student_raw.get(name)) for name in STUDENT_FIELDS})

    course_ids: set[str] = set()
    courses = tuple(
        _course_from_dict(c, course_ids) for c in _items(root.get("courses")) if isinstance(c, dict)
    )
    return TranscriptData(student=student, courses=courses)


def transcript_to_dict(data: TranscriptData) -> dict[str, Any]:
    # asdict() keeps tuples; plain JSON shapes use lists
    payload = asdict(data)
    payload["courses"] = [dict(c, meetings=list(c["meetings"])) for c in payload["courses"]]
    return payload


def load_transcript(path: str | Path) -> Optional[TranscriptData]:
    """
    Load a draft from disk.

    Returns None if the file does not exist or cannot be read/decoded.
    """
    draft_path = Path(path)
    if not draft_path.exists():
        logger.warning("Draft not found: %s", draft_path)
        return None

    try:
        raw = json.loads(draft_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Could not read draft %s: %s", draft_path, exc)
        return None

    data = transcript_from_dict(raw)
    logger.debug("Loaded %s (%d courses)", draft_path, len(data.courses))
    return data


def save_transcript(data: TranscriptData, path: str | Path) -> Path:
    """
    Save a draft as UTF-8 JSON. Creates parent directories if needed.
    """
    draft_path = Path(path)
    draft_path.parent.mkdir(parents=True, exist_ok=True)

    payload = transcript_to_dict(data)
    draft_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.debug("Saved %s (%d courses)", draft_path, len(data.courses))
    return draft_path
