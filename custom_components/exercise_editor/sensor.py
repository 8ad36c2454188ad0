"""Sensor platform for Exercise Editor."""

from __future__ import annotations

from typing import Any

from homeassistant.components.sensor import SensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN
from .coordinator import ExerciseEditorCoordinator
from .entity import device_info_from_entry


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    coordinator: ExerciseEditorCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([ExerciseCountSensor(entry, coordinator)])


class ExerciseCountSensor(CoordinatorEntity[ExerciseEditorCoordinator], SensorEntity):
    """Number of exercises currently in the editor."""

    _attr_has_entity_name = True
    _attr_name = "Exercises"
    _attr_icon = "mdi:dumbbell"
    _attr_translation_key = "exercise_count"
    _attr_native_unit_of_measurement = "exercises"

    def __init__(self, entry: ConfigEntry, coordinator: ExerciseEditorCoordinator) -> None:
        super().__init__(coordinator)
        self._entry = entry
        self._attr_unique_id = f"{entry.entry_id}_exercise_count"
        self._attr_device_info = device_info_from_entry(entry)

    @property
    def native_value(self) -> int:
        data = self.coordinator.data or {}
        return int(data.get("total_count") or 0) if isinstance(data, dict) else 0

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        data = self.coordinator.data or {}
        if not isinstance(data, dict):
            data = {}
        # Page contents are served over websocket only.
        return {
            "entry_id": self._entry.entry_id,
            "file_name": str(data.get("file_name") or ""),
            "filtered_count": int(data.get("filtered_count") or 0),
            "page": int(data.get("page") or 1),
            "total_pages": int(data.get("total_pages") or 0),
            "pending_delete_id": data.get("pending_delete_id"),
            "filters": data.get("filters", {}),
        }
