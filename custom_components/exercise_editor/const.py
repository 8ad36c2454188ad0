"""Constants for Exercise Editor integration."""

from __future__ import annotations

from homeassistant.const import Platform

DOMAIN = "exercise_editor"

PLATFORMS: list[Platform] = [
    Platform.BUTTON,
    Platform.SENSOR,
]

CONF_NAME = "name"
CONF_API_KEY = "api_key"

DEFAULT_NAME = "Exercise Editor"
DEFAULT_FILE_NAME = "exercises.json"

# Filter sentinel meaning "do not filter on this field".
FILTER_ALL = "all"

ITEMS_PER_PAGE_OPTIONS = (10, 20, 50, 100)
DEFAULT_ITEMS_PER_PAGE = ITEMS_PER_PAGE_OPTIONS[1]

DELETE_UNDO_SECONDS = 5

TRANSLATION_MODEL = "gemini-2.5-flash"
TRANSLATION_TIMEOUT = 30

SIGNAL_EDITOR_UPDATED = f"{DOMAIN}_editor_updated"

DEFAULT_CATEGORY = "strength"

CATEGORIES = [
    "strength",
    "stretching",
    "plyometrics",
    "strongman",
    "cardio",
    "olympic weightlifting",
    "crossfit",
    "calisthenics",
]

EQUIPMENT_OPTIONS = [
    "ez curl bar",
    "barbell",
    "dumbbell",
    "gym mat",
    "exercise ball",
    "medicine ball",
    "pull-up bar",
    "bench",
    "incline bench",
    "kettlebell",
    "machine",
    "cable",
    "bands",
    "foam roll",
    "other",
]

MUSCLE_OPTIONS = [
    "abductors",
    "abs",
    "adductors",
    "biceps",
    "brachialis",
    "calves",
    "chest",
    "forearms",
    "glutes",
    "hamstrings",
    "lats",
    "lower back",
    "middle back",
    "neck",
    "quads",
    "shoulders",
    "soleus",
    "traps",
    "triceps",
]
