"""Coordinator for Exercise Editor."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.aiohttp_client import async_get_clientsession
from homeassistant.helpers.dispatcher import async_dispatcher_send
from homeassistant.helpers.event import async_call_later
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from .const import CONF_API_KEY, DOMAIN, SIGNAL_EDITOR_UPDATED
from .editor import ExerciseEditor
from .library import ExerciseLibrary
from .translation import GeminiTranslator
from .ws_state import public_view

_LOGGER = logging.getLogger(__name__)


class ExerciseEditorCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Owns the in-memory editor session of one config entry.

    Nothing is polled: every editor mutation (including timer-driven deletes)
    pushes a fresh snapshot to listeners.
    """

    def __init__(self, hass: HomeAssistant, entry: ConfigEntry) -> None:
        self.entry = entry
        self.library = ExerciseLibrary(hass)
        self.translator = GeminiTranslator(async_get_clientsession(hass), self._api_key_from_entry())
        self.editor = ExerciseEditor(
            schedule_later=self._schedule_later,
            on_change=self._handle_editor_changed,
        )

        super().__init__(
            hass,
            logger=_LOGGER,
            config_entry=entry,
            name=f"{DOMAIN}_{entry.entry_id}",
            update_interval=None,
        )

    def _api_key_from_entry(self) -> str:
        data = self.entry.data or {}
        opts = self.entry.options or {}
        return str(opts.get(CONF_API_KEY, data.get(CONF_API_KEY, "")) or "").strip()

    def _schedule_later(self, delay: float, action: Callable[[Any], None]) -> Callable[[], None]:
        return async_call_later(self.hass, delay, action)

    async def _async_update_data(self) -> dict[str, Any]:
        return public_view(self.editor)

    @callback
    def _handle_editor_changed(self) -> None:
        self.async_set_updated_data(public_view(self.editor))
        async_dispatcher_send(self.hass, f"{SIGNAL_EDITOR_UPDATED}_{self.entry.entry_id}")

    async def async_load_file(self, path: str) -> int:
        file_name, content = await self.library.async_read(path)
        return self.editor.load_text(content, file_name=file_name)

    async def async_save_file(self, path: str | None = None) -> str:
        # A pending delete is still part of the store until its window ends.
        target = await self.library.async_write(path or self.editor.file_name, self.editor.export_text())
        _LOGGER.debug("Saved %s exercises to %s", len(self.editor.exercises), target)
        return str(target)

    async def async_shutdown(self) -> None:
        """Cancel the pending delete timer; the store is about to be discarded."""
        self.editor.shutdown()
        await super().async_shutdown()
