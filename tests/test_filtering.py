from __future__ import annotations

from custom_components.exercise_editor.filtering import FilterCriteria, filter_exercises, matches
from custom_components.exercise_editor.sanitizer import sanitize_exercises


def _library() -> list[dict]:
    ex = lambda i, name_en, category, equipment, primary, secondary=(), name="": {  # noqa: E731
        "id": i,
        "name": name,
        "name_en": name_en,
        "category": category,
        "equipment": list(equipment),
        "primary_muscles": list(primary),
        "secondary_muscles": list(secondary),
    }
    return sanitize_exercises(
        [
            ex(1, "Back Squat", "strength", ["barbell"], ["quads"], ["glutes"], name="اسکات"),
            ex(2, "Bench Press", "strength", ["barbell", "bench"], ["chest"], ["triceps"]),
            ex(3, "Hamstring Stretch", "stretching", ["gym mat"], ["hamstrings"]),
            ex(4, "Goblet Squat", "strength", ["kettlebell"], ["quads"]),
            ex(5, "Box Jump", "plyometrics", [], ["quads"], ["calves"]),
        ]
    )


def _ids(records: list[dict]) -> list[int]:
    return [r["id"] for r in records]


def test_default_criteria_keep_everything_in_order() -> None:
    lib = _library()
    assert _ids(filter_exercises(lib, FilterCriteria())) == [1, 2, 3, 4, 5]


def test_search_is_case_insensitive_on_both_names() -> None:
    lib = _library()
    assert _ids(filter_exercises(lib, FilterCriteria(search="SQUAT"))) == [1, 4]
    assert _ids(filter_exercises(lib, FilterCriteria(search="اسکا"))) == [1]


def test_category_equipment_and_muscle_filters() -> None:
    lib = _library()
    assert _ids(filter_exercises(lib, FilterCriteria(category="strength"))) == [1, 2, 4]
    assert _ids(filter_exercises(lib, FilterCriteria(equipment="barbell"))) == [1, 2]
    assert _ids(filter_exercises(lib, FilterCriteria(muscle="quads"))) == [1, 4, 5]


def test_muscle_filter_ignores_secondary_muscles() -> None:
    lib = _library()
    assert _ids(filter_exercises(lib, FilterCriteria(muscle="glutes"))) == []
    assert _ids(filter_exercises(lib, FilterCriteria(muscle="triceps"))) == []


def test_predicates_combine_with_and() -> None:
    lib = _library()
    criteria = FilterCriteria(search="squat", category="strength", equipment="kettlebell", muscle="quads")
    assert _ids(filter_exercises(lib, criteria)) == [4]
    for rec in lib:
        expected = all(
            [
                "squat" in rec["name_en"].lower() or "squat" in rec["name"].lower(),
                rec["category"] == "strength",
                "kettlebell" in rec["equipment"],
                "quads" in rec["primary_muscles"],
            ]
        )
        assert matches(rec, criteria) is expected


def test_empty_search_is_a_superset() -> None:
    lib = _library()
    for search in ("squat", "press", "x", "stretch"):
        narrowed = set(_ids(filter_exercises(lib, FilterCriteria(search=search, category="strength"))))
        widened = set(_ids(filter_exercises(lib, FilterCriteria(search="", category="strength"))))
        assert narrowed <= widened
