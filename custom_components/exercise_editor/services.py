"""Services for Exercise Editor."""

from __future__ import annotations

import logging

import voluptuous as vol

from homeassistant.core import HomeAssistant, ServiceCall, ServiceResponse, SupportsResponse

from .const import DOMAIN
from .exceptions import ExerciseEditorError

_LOGGER = logging.getLogger(__name__)

SERVICE_LOAD_FILE = "load_file"
SERVICE_SAVE_FILE = "save_file"
SERVICE_DELETE_EXERCISE = "delete_exercise"
SERVICE_UNDO_DELETE = "undo_delete"
SERVICE_GET_STATE = "get_state"

_ENTRY_SCHEMA = vol.Schema({vol.Required("entry_id"): str})
_LOAD_FILE_SCHEMA = vol.Schema({vol.Required("entry_id"): str, vol.Required("path"): str})
_SAVE_FILE_SCHEMA = vol.Schema({vol.Required("entry_id"): str, vol.Optional("path"): str})
_DELETE_SCHEMA = vol.Schema({vol.Required("entry_id"): str, vol.Required("exercise_id"): vol.Coerce(int)})


async def async_register(hass: HomeAssistant) -> None:
    async def _coordinator_for_entry(entry_id: str):
        return hass.data.get(DOMAIN, {}).get(entry_id)

    async def _async_load_file(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        try:
            count = await coordinator.async_load_file(str(call.data["path"]))
        except ExerciseEditorError as err:
            _LOGGER.warning("load_file failed for entry_id=%s: %s", entry_id, err)
            return {"ok": False, "error": err.code, "message": str(err)}
        return {"ok": True, "entry_id": entry_id, "loaded": count, "file_name": coordinator.editor.file_name}

    async def _async_save_file(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        path = str(call.data.get("path") or "").strip()
        try:
            target = await coordinator.async_save_file(path or None)
        except ExerciseEditorError as err:
            _LOGGER.warning("save_file failed for entry_id=%s: %s", entry_id, err)
            return {"ok": False, "error": err.code, "message": str(err)}
        return {"ok": True, "entry_id": entry_id, "path": target}

    async def _async_delete_exercise(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        try:
            coordinator.editor.request_delete(int(call.data["exercise_id"]))
        except ExerciseEditorError as err:
            return {"ok": False, "error": err.code, "message": str(err)}
        return {"ok": True, "entry_id": entry_id, "pending_delete_id": coordinator.editor.pending_delete_id}

    async def _async_undo_delete(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        restored = coordinator.editor.undo_delete()
        return {"ok": True, "entry_id": entry_id, "restored_id": restored}

    async def _async_get_state(call: ServiceCall) -> ServiceResponse:
        entry_id = str(call.data["entry_id"])
        coordinator = await _coordinator_for_entry(entry_id)
        if coordinator is None:
            return {"ok": False, "error": "entry_not_found"}
        return {"ok": True, "entry_id": entry_id, "state": coordinator.data or {}}

    if not hass.services.has_service(DOMAIN, SERVICE_LOAD_FILE):
        hass.services.async_register(
            DOMAIN,
            SERVICE_LOAD_FILE,
            _async_load_file,
            schema=_LOAD_FILE_SCHEMA,
            supports_response=SupportsResponse.ONLY,
        )
    if not hass.services.has_service(DOMAIN, SERVICE_SAVE_FILE):
        hass.services.async_register(
            DOMAIN,
            SERVICE_SAVE_FILE,
            _async_save_file,
            schema=_SAVE_FILE_SCHEMA,
            supports_response=SupportsResponse.ONLY,
        )
    if not hass.services.has_service(DOMAIN, SERVICE_DELETE_EXERCISE):
        hass.services.async_register(
            DOMAIN,
            SERVICE_DELETE_EXERCISE,
            _async_delete_exercise,
            schema=_DELETE_SCHEMA,
            supports_response=SupportsResponse.ONLY,
        )
    if not hass.services.has_service(DOMAIN, SERVICE_UNDO_DELETE):
        hass.services.async_register(
            DOMAIN,
            SERVICE_UNDO_DELETE,
            _async_undo_delete,
            schema=_ENTRY_SCHEMA,
            supports_response=SupportsResponse.ONLY,
        )
    if not hass.services.has_service(DOMAIN, SERVICE_GET_STATE):
        hass.services.async_register(
            DOMAIN,
            SERVICE_GET_STATE,
            _async_get_state,
            schema=_ENTRY_SCHEMA,
            supports_response=SupportsResponse.ONLY,
        )
