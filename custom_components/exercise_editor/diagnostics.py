"""Diagnostics support for Exercise Editor.

This file is picked up by Home Assistant automatically when present.
"""

from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import CONF_API_KEY, DOMAIN
from .version import BACKEND_VERSION


def _redact(value: Any) -> Any:
    if value is None:
        return None
    raw = str(value)
    if not raw:
        return ""
    if len(raw) <= 4:
        return "***"
    return f"{raw[:2]}***{raw[-2:]}"


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant,
    entry: ConfigEntry,
) -> dict[str, Any]:
    """Return diagnostics for a config entry (with sensitive data redacted)."""
    coordinator = hass.data.get(DOMAIN, {}).get(entry.entry_id)
    data = dict(entry.data)
    if CONF_API_KEY in data:
        data[CONF_API_KEY] = _redact(data.get(CONF_API_KEY))
    options = dict(entry.options)
    if CONF_API_KEY in options:
        options[CONF_API_KEY] = _redact(options.get(CONF_API_KEY))

    payload: dict[str, Any] = {
        "entry": {
            "entry_id": entry.entry_id,
            "title": entry.title,
            "version": entry.version,
            "data": data,
            "options": options,
        },
        "runtime": {
            "backend_version": BACKEND_VERSION,
            "api_key_configured": bool((entry.options.get(CONF_API_KEY) or entry.data.get(CONF_API_KEY) or "").strip()),
        },
    }

    if coordinator is not None:
        editor = coordinator.editor
        # Counts only; exercise contents are user data.
        payload["editor"] = {
            "file_name": editor.file_name,
            "total_count": len(editor.exercises),
            "filtered_count": len(editor.filtered()),
            "page": editor.page,
            "page_size": editor.page_size,
            "pending_delete_id": editor.pending_delete_id,
            "filters": editor.criteria.as_dict(),
            "rev": editor.rev,
        }

    return payload
