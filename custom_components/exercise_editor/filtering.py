"""Filter engine for the exercise list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any

from .const import FILTER_ALL


@dataclass(frozen=True)
class FilterCriteria:
    """Search text plus category/equipment/primary-muscle selections."""

    search: str = ""
    category: str = FILTER_ALL
    equipment: str = FILTER_ALL
    muscle: str = FILTER_ALL

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def _search_matches(record: dict[str, Any], search: str) -> bool:
    if search == "":
        return True
    needle = search.lower()
    return needle in str(record.get("name") or "").lower() or needle in str(record.get("name_en") or "").lower()


def matches(record: dict[str, Any], criteria: FilterCriteria) -> bool:
    """Return True when all four predicates hold for the record."""
    if not _search_matches(record, criteria.search):
        return False
    if criteria.category != FILTER_ALL and record.get("category") != criteria.category:
        return False
    if criteria.equipment != FILTER_ALL and criteria.equipment not in (record.get("equipment") or []):
        return False
    # Secondary muscles are deliberately not part of the muscle filter.
    if criteria.muscle != FILTER_ALL and criteria.muscle not in (record.get("primary_muscles") or []):
        return False
    return True


def filter_exercises(records: Iterable[dict[str, Any]], criteria: FilterCriteria) -> list[dict[str, Any]]:
    return [r for r in records if matches(r, criteria)]
