"""Button platform for Exercise Editor."""

from __future__ import annotations

from homeassistant.components.button import ButtonEntity
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
    async_add_entities([UndoDeleteButton(entry, coordinator), SaveFileButton(entry, coordinator)])


class UndoDeleteButton(CoordinatorEntity[ExerciseEditorCoordinator], ButtonEntity):
    """Restore the exercise whose delete is still pending."""

    _attr_has_entity_name = True
    _attr_name = "Undo delete"
    _attr_icon = "mdi:undo"
    _attr_translation_key = "undo_delete"

    def __init__(self, entry: ConfigEntry, coordinator: ExerciseEditorCoordinator) -> None:
        super().__init__(coordinator)
        self._attr_unique_id = f"{entry.entry_id}_undo_delete"
        self._attr_device_info = device_info_from_entry(entry)

    @property
    def available(self) -> bool:
        return self.coordinator.editor.pending_delete_id is not None

    async def async_press(self) -> None:
        self.coordinator.editor.undo_delete()


class SaveFileButton(ButtonEntity):
    """Write the current exercises to the loaded file name in the config dir."""

    _attr_has_entity_name = True
    _attr_name = "Save exercises"
    _attr_icon = "mdi:content-save"
    _attr_translation_key = "save_file"

    def __init__(self, entry: ConfigEntry, coordinator: ExerciseEditorCoordinator) -> None:
        self._coordinator = coordinator
        self._attr_unique_id = f"{entry.entry_id}_save_file"
        self._attr_device_info = device_info_from_entry(entry)

    async def async_press(self) -> None:
        await self._coordinator.async_save_file()
