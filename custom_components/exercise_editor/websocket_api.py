"""Websocket API for Exercise Editor."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from homeassistant.components import websocket_api
from homeassistant.core import HomeAssistant

from .const import DOMAIN, FILTER_ALL, ITEMS_PER_PAGE_OPTIONS
from .coordinator import ExerciseEditorCoordinator
from .exceptions import ConflictError, ExerciseEditorError
from .version import BACKEND_VERSION
from .ws_state import public_view, vocabularies


def _runtime_payload(coordinator: ExerciseEditorCoordinator) -> dict[str, Any]:
    return {
        "version": BACKEND_VERSION,
        "translation_configured": coordinator.translator.configured,
    }


def _get_coordinator(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> ExerciseEditorCoordinator | None:
    entry_id = msg["entry_id"]
    coordinator = hass.data.get(DOMAIN, {}).get(entry_id)
    if coordinator is None:
        connection.send_error(msg["id"], "entry_not_found", f"No entry found for entry_id={entry_id}")
    return coordinator


def _send_state(
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
    coordinator: ExerciseEditorCoordinator,
    **extra: Any,
) -> None:
    connection.send_result(
        msg["id"],
        {
            "entry_id": msg["entry_id"],
            **extra,
            "state": public_view(coordinator.editor, runtime=_runtime_payload(coordinator)),
        },
    )


@websocket_api.websocket_command({vol.Required("type"): "exercise_editor/list_entries"})
@websocket_api.async_response
async def ws_list_entries(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    entries = hass.config_entries.async_entries(DOMAIN)
    payload = [{"entry_id": entry.entry_id, "title": entry.title} for entry in entries]
    connection.send_result(msg["id"], {"entries": payload})


@websocket_api.websocket_command({vol.Required("type"): "exercise_editor/get_options"})
@websocket_api.async_response
async def ws_get_options(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    connection.send_result(msg["id"], vocabularies())


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/get_state",
        vol.Required("entry_id"): str,
    }
)
@websocket_api.async_response
async def ws_get_state(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    _send_state(connection, msg, coordinator)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/load",
        vol.Required("entry_id"): str,
        vol.Required("content"): str,
        vol.Optional("file_name"): str,
    }
)
@websocket_api.async_response
async def ws_load(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        count = coordinator.editor.load_text(msg["content"], file_name=msg.get("file_name"))
    except ExerciseEditorError as e:
        connection.send_error(msg["id"], e.code, str(e))
        return
    _send_state(connection, msg, coordinator, loaded=count)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/export",
        vol.Required("entry_id"): str,
    }
)
@websocket_api.async_response
async def ws_export(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    editor = coordinator.editor
    connection.send_result(
        msg["id"],
        {
            "entry_id": msg["entry_id"],
            "file_name": editor.file_name,
            "content": editor.export_text(),
        },
    )


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/set_filters",
        vol.Required("entry_id"): str,
        vol.Optional("search"): str,
        vol.Optional("category"): str,
        vol.Optional("equipment"): str,
        vol.Optional("muscle"): str,
    }
)
@websocket_api.async_response
async def ws_set_filters(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    coordinator.editor.set_filters(
        search=msg.get("search"),
        category=msg.get("category"),
        equipment=msg.get("equipment"),
        muscle=msg.get("muscle"),
    )
    _send_state(connection, msg, coordinator)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/reset_filters",
        vol.Required("entry_id"): str,
    }
)
@websocket_api.async_response
async def ws_reset_filters(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    coordinator.editor.set_filters(search="", category=FILTER_ALL, equipment=FILTER_ALL, muscle=FILTER_ALL)
    _send_state(connection, msg, coordinator)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/set_page",
        vol.Required("entry_id"): str,
        vol.Required("page"): vol.Coerce(int),
    }
)
@websocket_api.async_response
async def ws_set_page(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    # Out-of-range pages are ignored; the reply carries the unchanged page.
    coordinator.editor.set_page(msg["page"])
    _send_state(connection, msg, coordinator)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/set_page_size",
        vol.Required("entry_id"): str,
        vol.Required("page_size"): vol.All(vol.Coerce(int), vol.In(ITEMS_PER_PAGE_OPTIONS)),
    }
)
@websocket_api.async_response
async def ws_set_page_size(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    coordinator.editor.set_page_size(msg["page_size"])
    _send_state(connection, msg, coordinator)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/add_exercise",
        vol.Required("entry_id"): str,
        vol.Required("exercise"): dict,
        vol.Optional("expected_rev"): vol.Coerce(int),
    }
)
@websocket_api.async_response
async def ws_add_exercise(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        coordinator.editor.assert_rev(msg.get("expected_rev"))
    except ConflictError as e:
        connection.send_error(msg["id"], "conflict", str(e))
        return
    record = coordinator.editor.add_exercise(msg["exercise"])
    _send_state(connection, msg, coordinator, exercise=record)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/update_exercise",
        vol.Required("entry_id"): str,
        vol.Required("exercise"): vol.Schema({vol.Required("id"): vol.Coerce(int)}, extra=vol.ALLOW_EXTRA),
        vol.Optional("expected_rev"): vol.Coerce(int),
    }
)
@websocket_api.async_response
async def ws_update_exercise(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        coordinator.editor.assert_rev(msg.get("expected_rev"))
        record = coordinator.editor.update_exercise(msg["exercise"])
    except ConflictError as e:
        connection.send_error(msg["id"], "conflict", str(e))
        return
    except ExerciseEditorError as e:
        connection.send_error(msg["id"], e.code, str(e))
        return
    _send_state(connection, msg, coordinator, exercise=record)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/delete_exercise",
        vol.Required("entry_id"): str,
        vol.Required("exercise_id"): vol.Coerce(int),
        vol.Optional("expected_rev"): vol.Coerce(int),
    }
)
@websocket_api.async_response
async def ws_delete_exercise(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        coordinator.editor.assert_rev(msg.get("expected_rev"))
        coordinator.editor.request_delete(msg["exercise_id"])
    except ConflictError as e:
        connection.send_error(msg["id"], "conflict", str(e))
        return
    except ExerciseEditorError as e:
        connection.send_error(msg["id"], e.code, str(e))
        return
    _send_state(connection, msg, coordinator)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/undo_delete",
        vol.Required("entry_id"): str,
    }
)
@websocket_api.async_response
async def ws_undo_delete(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    restored = coordinator.editor.undo_delete()
    _send_state(connection, msg, coordinator, restored_id=restored)


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/translate_text",
        vol.Required("entry_id"): str,
        vol.Required("text"): str,
    }
)
@websocket_api.async_response
async def ws_translate_text(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        text = await coordinator.translator.async_translate_text(msg["text"])
    except ExerciseEditorError as e:
        connection.send_error(msg["id"], e.code, str(e))
        return
    connection.send_result(msg["id"], {"entry_id": msg["entry_id"], "text": text})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/translate_fields",
        vol.Required("entry_id"): str,
        vol.Required("fields"): vol.Schema({str: str}),
    }
)
@websocket_api.async_response
async def ws_translate_fields(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        translated, errors = await coordinator.translator.async_translate_fields(msg["fields"])
    except ExerciseEditorError as e:
        connection.send_error(msg["id"], e.code, str(e))
        return
    connection.send_result(msg["id"], {"entry_id": msg["entry_id"], "fields": translated, "errors": errors})


@websocket_api.websocket_command(
    {
        vol.Required("type"): "exercise_editor/translate_all",
        vol.Required("entry_id"): str,
        vol.Required("name_en"): str,
        vol.Optional("description", default=""): str,
        vol.Optional("instructions", default=[]): [str],
    }
)
@websocket_api.async_response
async def ws_translate_all(
    hass: HomeAssistant,
    connection: websocket_api.ActiveConnection,
    msg: dict[str, Any],
) -> None:
    coordinator = _get_coordinator(hass, connection, msg)
    if coordinator is None:
        return
    try:
        bundle = await coordinator.translator.async_translate_bundle(
            msg["name_en"],
            msg["description"],
            msg["instructions"],
        )
    except ExerciseEditorError as e:
        connection.send_error(msg["id"], e.code, str(e))
        return
    connection.send_result(msg["id"], {"entry_id": msg["entry_id"], "translations": bundle})


def async_register(hass: HomeAssistant) -> None:
    websocket_api.async_register_command(hass, ws_list_entries)
    websocket_api.async_register_command(hass, ws_get_options)
    websocket_api.async_register_command(hass, ws_get_state)
    websocket_api.async_register_command(hass, ws_load)
    websocket_api.async_register_command(hass, ws_export)
    websocket_api.async_register_command(hass, ws_set_filters)
    websocket_api.async_register_command(hass, ws_reset_filters)
    websocket_api.async_register_command(hass, ws_set_page)
    websocket_api.async_register_command(hass, ws_set_page_size)
    websocket_api.async_register_command(hass, ws_add_exercise)
    websocket_api.async_register_command(hass, ws_update_exercise)
    websocket_api.async_register_command(hass, ws_delete_exercise)
    websocket_api.async_register_command(hass, ws_undo_delete)
    websocket_api.async_register_command(hass, ws_translate_text)
    websocket_api.async_register_command(hass, ws_translate_fields)
    websocket_api.async_register_command(hass, ws_translate_all)
