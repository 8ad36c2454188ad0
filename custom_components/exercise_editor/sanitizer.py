"""Record sanitizer for loaded exercise data.

Loaded files are untrusted: any JSON value may arrive here. Every field of the
canonical record has an explicit fallback, so sanitizing never raises:
- a non-list top level becomes an empty record set
- non-dict list elements become fully defaulted records
- numeric ids are kept; missing/invalid/repeated ids are synthesized above the
  highest kept id so no two ids collide within one load
- category/equipment/muscle values are NOT checked against the vocabularies
"""

from __future__ import annotations

import logging
from typing import Any

from .const import DEFAULT_CATEGORY

_LOGGER = logging.getLogger(__name__)

STRING_FIELDS = ("name", "name_en", "description", "description_fa")
LIST_FIELDS = (
    "equipment",
    "primary_muscles",
    "secondary_muscles",
    "instructions",
    "instructions_fa",
    "images",
    "aliases",
    "tips",
    "variation_on",
)
# Free-text lists where blank entries are dropped on save.
STRIPPED_LIST_FIELDS = ("instructions", "instructions_fa", "images", "aliases", "tips", "variation_on")


def _as_int_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _as_str(value: Any, default: str = "") -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _as_str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            out.append(str(item))
    return out


def _as_video(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def coerce_exercise(item: Any, *, exercise_id: int) -> dict[str, Any]:
    """Build a canonical record from one loaded element."""
    src = item if isinstance(item, dict) else {}
    record: dict[str, Any] = {"id": int(exercise_id)}
    record["name"] = _as_str(src.get("name"))
    record["name_en"] = _as_str(src.get("name_en"))
    record["category"] = _as_str(src.get("category")) or DEFAULT_CATEGORY
    record["equipment"] = _as_str_list(src.get("equipment"))
    record["primary_muscles"] = _as_str_list(src.get("primary_muscles"))
    record["secondary_muscles"] = _as_str_list(src.get("secondary_muscles"))
    record["description"] = _as_str(src.get("description"))
    record["description_fa"] = _as_str(src.get("description_fa"))
    record["instructions"] = _as_str_list(src.get("instructions"))
    record["instructions_fa"] = _as_str_list(src.get("instructions_fa"))
    record["video"] = _as_video(src.get("video"))
    record["images"] = _as_str_list(src.get("images"))
    record["aliases"] = _as_str_list(src.get("aliases"))
    record["tips"] = _as_str_list(src.get("tips"))
    record["variation_on"] = _as_str_list(src.get("variation_on"))
    return record


def sanitize_exercises(data: Any) -> list[dict[str, Any]]:
    """Normalize arbitrary parsed JSON into canonical exercise records."""
    if not isinstance(data, list):
        _LOGGER.warning("Loaded data is not a list (got %s); using an empty record set", type(data).__name__)
        return []

    kept_ids = [
        i
        for i in (_as_int_id(item.get("id")) if isinstance(item, dict) else None for item in data)
        if i is not None
    ]
    next_id = max([0, *kept_ids]) + 1

    records: list[dict[str, Any]] = []
    seen: set[int] = set()
    synthesized = 0
    for item in data:
        ex_id = _as_int_id(item.get("id")) if isinstance(item, dict) else None
        # A repeated id is treated like a missing one; the first occurrence keeps it.
        if ex_id is None or ex_id in seen:
            ex_id = next_id
            next_id += 1
            synthesized += 1
        seen.add(ex_id)
        records.append(coerce_exercise(item, exercise_id=ex_id))

    if synthesized:
        _LOGGER.warning("Synthesized ids for %s of %s loaded exercises", synthesized, len(records))
    return records


def clean_exercise(payload: Any, *, exercise_id: int) -> dict[str, Any]:
    """Normalize a form submission: coerce fields and drop blank list entries."""
    record = coerce_exercise(payload, exercise_id=exercise_id)
    for key in STRIPPED_LIST_FIELDS:
        record[key] = [s for s in record[key] if s.strip()]
    return record
