from __future__ import annotations

import json

import pytest

from custom_components.exercise_editor.editor import ExerciseEditor
from custom_components.exercise_editor.exceptions import (
    ConflictError,
    ExerciseFileError,
    ExerciseNotFoundError,
    SchedulerClosedError,
)


def _editor(timers, changes: list[int] | None = None) -> ExerciseEditor:
    def _on_change() -> None:
        if changes is not None:
            changes.append(1)

    return ExerciseEditor(schedule_later=timers.schedule_later, on_change=_on_change)


def _rows(n: int) -> list[dict]:
    return [{"id": i, "name_en": f"Exercise {i}", "category": "strength"} for i in range(1, n + 1)]


def test_load_filter_then_delete_scenario(timers) -> None:
    ed = _editor(timers)
    ed.load_text(json.dumps([{"id": 1, "name_en": "Squat", "category": "strength"}]), file_name="mine.json")
    ed.set_filters(category="strength")
    assert [r["id"] for r in ed.filtered()] == [1]
    assert ed.file_name == "mine.json"

    ed.request_delete(1)
    # Still in the store until the window ends.
    assert ed.get(1) is not None
    assert ed.view()["pending_delete_id"] == 1

    timers.fire_all()
    view = ed.view()
    assert ed.exercises == []
    assert ed.filtered() == []
    assert view["page"] == 1
    assert view["total_pages"] == 0
    assert view["pending_delete_id"] is None


def test_delete_last_row_on_last_page_clamps_page(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(21))
    assert ed.page_size == 20
    assert ed.total_pages() == 2
    assert ed.set_page(2)
    assert [r["id"] for r in ed.view()["exercises"]] == [21]

    ed.request_delete(21)
    timers.fire_all()
    assert ed.total_pages() == 1
    assert ed.page == 1


def test_page_is_kept_when_still_valid(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(25))
    ed.set_page(2)
    ed.request_delete(1)
    timers.fire_all()
    assert ed.page == 2
    assert ed.total_pages() == 2


def test_second_delete_commits_first_immediately(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(3))
    ed.request_delete(1)
    ed.request_delete(2)
    assert ed.get(1) is None
    assert ed.get(2) is not None
    assert ed.pending_delete_id == 2
    assert len(timers.armed) == 1


def test_undo_leaves_store_unchanged(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(3))
    before = ed.exercises
    ed.request_delete(2)
    assert ed.undo_delete() == 2
    timers.fire_all()
    assert ed.exercises == before
    assert ed.pending_delete_id is None


def test_unknown_delete_raises(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(1))
    with pytest.raises(ExerciseNotFoundError):
        ed.request_delete(42)
    assert timers.armed == []


def test_new_ids_are_max_plus_one(timers) -> None:
    ed = _editor(timers)
    first = ed.add_exercise({"name_en": "Plank"})
    assert first["id"] == 1
    second = ed.add_exercise({"name_en": "Side plank"})
    assert second["id"] == 2

    ed.request_delete(1)
    timers.fire_all()
    third = ed.add_exercise({"name_en": "Dead bug"})
    assert third["id"] == 3


def test_add_ignores_client_id_and_cleans_lists(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(2))
    rec = ed.add_exercise({"id": 0, "name_en": "Row", "images": ["", "row.png"], "tips": [""]})
    assert rec["id"] == 3
    assert rec["images"] == ["row.png"]
    assert rec["tips"] == []


def test_update_replaces_by_id(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(2))
    rec = ed.update_exercise({"id": 2, "name_en": "Renamed", "equipment": ["cable"]})
    assert rec["name_en"] == "Renamed"
    assert ed.get(2)["equipment"] == ["cable"]
    assert ed.get(2)["category"] == "strength"
    with pytest.raises(ExerciseNotFoundError):
        ed.update_exercise({"id": 77})


def test_filter_and_page_size_changes_reset_page(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(45))
    ed.set_page(3)
    ed.set_filters(search="exercise")
    assert ed.page == 1
    ed.set_page(2)
    ed.set_page_size(10)
    assert ed.page == 1
    assert ed.total_pages() == 5
    with pytest.raises(ValueError):
        ed.set_page_size(7)


def test_out_of_range_page_is_ignored(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(5))
    assert not ed.set_page(0)
    assert not ed.set_page(2)
    assert ed.page == 1


def test_invalid_json_leaves_state_unchanged(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(2), file_name="keep.json")
    rev = ed.rev
    with pytest.raises(ExerciseFileError):
        ed.load_text("{not json", file_name="broken.json")
    assert len(ed.exercises) == 2
    assert ed.file_name == "keep.json"
    assert ed.rev == rev


def test_non_list_file_loads_as_empty(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(2))
    assert ed.load_text('{"exercises": []}') == 0
    assert ed.exercises == []


def test_load_discards_pending_delete(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(2))
    ed.request_delete(1)
    ed.load(_rows(4))
    assert ed.pending_delete_id is None
    timers.fire_all()
    assert len(ed.exercises) == 4


def test_export_is_indented_json(timers) -> None:
    ed = _editor(timers)
    ed.load([{"id": 1, "name": "اسکات", "name_en": "Squat"}])
    text = ed.export_text()
    assert text.startswith("[\n  {")
    assert "اسکات" in text
    assert json.loads(text) == ed.exercises


def test_rev_and_listeners_follow_mutations(timers) -> None:
    changes: list[int] = []
    ed = _editor(timers, changes)
    start = ed.rev
    ed.load(_rows(2))
    ed.request_delete(1)
    timers.fire_all()
    assert ed.rev == start + 3
    assert len(changes) == 3
    ed.assert_rev(ed.rev)
    with pytest.raises(ConflictError):
        ed.assert_rev(start)


def test_shutdown_cancels_pending_delete(timers) -> None:
    ed = _editor(timers)
    ed.load(_rows(2))
    ed.request_delete(2)
    ed.shutdown()
    assert timers.armed == []
    assert ed.get(2) is not None
    with pytest.raises(SchedulerClosedError):
        ed.request_delete(1)
