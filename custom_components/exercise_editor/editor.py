"""In-memory exercise store plus the list view state around it.

The editor is the only writer of the record list. Add/edit/load apply
directly; deletes go through the DeleteScheduler and land in _commit_delete
once their undo window has passed (or another delete forces them through).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from .const import DEFAULT_FILE_NAME, DEFAULT_ITEMS_PER_PAGE, DELETE_UNDO_SECONDS, FILTER_ALL, ITEMS_PER_PAGE_OPTIONS
from .exceptions import ConflictError, ExerciseFileError, ExerciseNotFoundError
from .filtering import FilterCriteria, filter_exercises
from .pagination import clamp_page, page_slice, total_pages
from .sanitizer import clean_exercise, sanitize_exercises
from .scheduler import DeleteScheduler, ScheduleLater

_LOGGER = logging.getLogger(__name__)


class ExerciseEditor:
    """Record store, filter/page state and the pending delete for one entry."""

    def __init__(
        self,
        *,
        schedule_later: ScheduleLater,
        on_change: Callable[[], None] | None = None,
        delete_delay: float = DELETE_UNDO_SECONDS,
    ) -> None:
        self._exercises: list[dict[str, Any]] = []
        self._criteria = FilterCriteria()
        self._page = 1
        self._page_size = DEFAULT_ITEMS_PER_PAGE
        self._file_name = DEFAULT_FILE_NAME
        self._rev = 1
        self._on_change = on_change
        self._scheduler = DeleteScheduler(
            schedule_later=schedule_later,
            on_commit=self._commit_delete,
            delay=delete_delay,
        )

    # -- read side -------------------------------------------------------

    @property
    def exercises(self) -> list[dict[str, Any]]:
        return list(self._exercises)

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def rev(self) -> int:
        return self._rev

    @property
    def pending_delete_id(self) -> int | None:
        return self._scheduler.pending_id

    def filtered(self) -> list[dict[str, Any]]:
        return filter_exercises(self._exercises, self._criteria)

    def total_pages(self) -> int:
        return total_pages(len(self.filtered()), self._page_size)

    def get(self, exercise_id: int) -> dict[str, Any] | None:
        return next((ex for ex in self._exercises if ex["id"] == int(exercise_id)), None)

    def view(self) -> dict[str, Any]:
        """Snapshot of the visible page for the UI."""
        filtered = self.filtered()
        return {
            "exercises": page_slice(filtered, self._page, self._page_size),
            "page": self._page,
            "page_size": self._page_size,
            "total_pages": total_pages(len(filtered), self._page_size),
            "filtered_count": len(filtered),
            "total_count": len(self._exercises),
            "pending_delete_id": self._scheduler.pending_id,
            "filters": self._criteria.as_dict(),
            "file_name": self._file_name,
            "rev": self._rev,
        }

    def export_text(self) -> str:
        return json.dumps(self._exercises, indent=2, ensure_ascii=False)

    # -- write side ------------------------------------------------------

    def assert_rev(self, expected_rev: int | None) -> None:
        if expected_rev is None:
            return
        if int(expected_rev) != self._rev:
            raise ConflictError(expected=int(expected_rev), current=self._rev)

    def _changed(self) -> None:
        self._rev += 1
        if self._on_change is not None:
            self._on_change()

    def load(self, data: Any, *, file_name: str | None = None) -> int:
        """Replace the record set with sanitized data; return the record count."""
        # The pending record belongs to the set being replaced.
        self._scheduler.undo()
        self._exercises = sanitize_exercises(data)
        if file_name:
            self._file_name = str(file_name)
        self._page = 1
        _LOGGER.debug("Loaded %s exercises from %s", len(self._exercises), self._file_name)
        self._changed()
        return len(self._exercises)

    def load_text(self, text: str, *, file_name: str | None = None) -> int:
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as err:
            _LOGGER.error("Failed to parse exercise file %s: %s", file_name or self._file_name, err)
            raise ExerciseFileError("Failed to load file. Make sure it's a valid JSON file.") from err
        return self.load(data, file_name=file_name)

    def add_exercise(self, payload: dict[str, Any]) -> dict[str, Any]:
        new_id = max((ex["id"] for ex in self._exercises), default=0) + 1
        record = clean_exercise(payload, exercise_id=new_id)
        self._exercises.append(record)
        self._changed()
        return record

    def update_exercise(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            exercise_id = int(payload.get("id"))
        except (TypeError, ValueError) as err:
            raise ExerciseNotFoundError(payload.get("id")) from err
        for idx, ex in enumerate(self._exercises):
            if ex["id"] == exercise_id:
                record = clean_exercise(payload, exercise_id=exercise_id)
                self._exercises[idx] = record
                self._changed()
                return record
        raise ExerciseNotFoundError(exercise_id)

    def request_delete(self, exercise_id: int) -> None:
        if self.get(exercise_id) is None:
            raise ExerciseNotFoundError(exercise_id)
        self._scheduler.request_delete(int(exercise_id))
        self._changed()

    def undo_delete(self) -> int | None:
        restored = self._scheduler.undo()
        if restored is not None:
            self._changed()
        return restored

    def set_filters(
        self,
        *,
        search: str | None = None,
        category: str | None = None,
        equipment: str | None = None,
        muscle: str | None = None,
    ) -> None:
        cur = self._criteria
        self._criteria = FilterCriteria(
            search=cur.search if search is None else str(search),
            category=cur.category if category is None else str(category or FILTER_ALL),
            equipment=cur.equipment if equipment is None else str(equipment or FILTER_ALL),
            muscle=cur.muscle if muscle is None else str(muscle or FILTER_ALL),
        )
        self._page = 1
        self._changed()

    def set_page(self, page: int) -> bool:
        """Move to a page; requests outside [1, total_pages] are ignored."""
        page = int(page)
        if page < 1 or page > self.total_pages():
            return False
        self._page = page
        self._changed()
        return True

    def set_page_size(self, page_size: int) -> None:
        page_size = int(page_size)
        if page_size not in ITEMS_PER_PAGE_OPTIONS:
            raise ValueError(f"Unsupported page size {page_size}")
        self._page_size = page_size
        self._page = 1
        self._changed()

    def shutdown(self) -> None:
        self._scheduler.shutdown()

    def _commit_delete(self, exercise_id: int) -> None:
        self._exercises = [ex for ex in self._exercises if ex["id"] != exercise_id]
        pages = self.total_pages()
        if self._page > pages:
            self._page = clamp_page(self._page, pages)
        _LOGGER.debug("Deleted exercise id=%s (%s left)", exercise_id, len(self._exercises))
        self._changed()
