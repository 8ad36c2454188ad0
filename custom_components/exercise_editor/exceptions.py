"""Exceptions for Exercise Editor."""

from __future__ import annotations

from homeassistant.exceptions import HomeAssistantError


class ExerciseEditorError(HomeAssistantError):
    """Base error for the editor; `code` is the websocket/service error code."""

    code = "editor_error"


class ExerciseNotFoundError(ExerciseEditorError):
    code = "exercise_not_found"

    def __init__(self, exercise_id: int) -> None:
        super().__init__(f"No exercise with id={exercise_id}")
        self.exercise_id = exercise_id


class ExerciseFileError(ExerciseEditorError):
    """Raised when a file cannot be read or is not valid JSON."""

    code = "invalid_file"


class SchedulerClosedError(ExerciseEditorError):
    code = "editor_closed"


class TranslationError(ExerciseEditorError):
    code = "translation_failed"


class ConflictError(RuntimeError):
    """Raised when optimistic concurrency checks fail."""

    code = "conflict"

    def __init__(self, *, expected: int, current: int) -> None:
        super().__init__(f"State changed (expected rev={expected}, current rev={current})")
        self.expected = expected
        self.current = current
