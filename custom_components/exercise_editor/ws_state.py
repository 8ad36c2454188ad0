"""Websocket state helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .const import CATEGORIES, EQUIPMENT_OPTIONS, FILTER_ALL, ITEMS_PER_PAGE_OPTIONS, MUSCLE_OPTIONS

if TYPE_CHECKING:
    from .editor import ExerciseEditor


def public_view(editor: ExerciseEditor, *, runtime: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return a stable public payload for the UI."""
    view = editor.view()
    return {
        "schema": 1,
        "exercises": view["exercises"],
        "page": int(view["page"]),
        "page_size": int(view["page_size"]),
        "total_pages": int(view["total_pages"]),
        "filtered_count": int(view["filtered_count"]),
        "total_count": int(view["total_count"]),
        "pending_delete_id": view["pending_delete_id"],
        "filters": view["filters"],
        "file_name": str(view["file_name"] or ""),
        "rev": int(view["rev"]),
        "runtime": runtime or {},
    }


def vocabularies() -> dict[str, Any]:
    return {
        "all": FILTER_ALL,
        "categories": list(CATEGORIES),
        "equipment": list(EQUIPMENT_OPTIONS),
        "muscles": list(MUSCLE_OPTIONS),
        "page_sizes": list(ITEMS_PER_PAGE_OPTIONS),
    }
