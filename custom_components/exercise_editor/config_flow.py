"""Config flow for Exercise Editor."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.core import callback

from .const import (
    CONF_API_KEY,
    CONF_NAME,
    DEFAULT_NAME,
    DOMAIN,
)


class ExerciseEditorConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Exercise Editor."""

    VERSION = 1

    async def async_step_user(self, user_input: dict[str, Any] | None = None):
        if user_input is not None:
            name = str(user_input.get(CONF_NAME, DEFAULT_NAME)).strip() or DEFAULT_NAME
            await self.async_set_unique_id(name.lower())
            self._abort_if_unique_id_configured()

            return self.async_create_entry(
                title=name,
                data={
                    CONF_NAME: name,
                    CONF_API_KEY: str(user_input.get(CONF_API_KEY) or "").strip(),
                },
            )

        schema = vol.Schema(
            {
                vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
                # Translation features stay disabled until a key is set.
                vol.Optional(CONF_API_KEY, default=""): str,
            }
        )
        return self.async_show_form(step_id="user", data_schema=schema)

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        return ExerciseEditorOptionsFlow()


class ExerciseEditorOptionsFlow(config_entries.OptionsFlow):
    """Edit the display name and the translation API key."""

    async def async_step_init(self, user_input: dict[str, Any] | None = None):
        if user_input is not None:
            name = str(user_input.get(CONF_NAME, DEFAULT_NAME)).strip() or DEFAULT_NAME
            return self.async_create_entry(
                title="",
                data={
                    CONF_NAME: name,
                    CONF_API_KEY: str(user_input.get(CONF_API_KEY) or "").strip(),
                },
            )

        current_name = self.config_entry.options.get(
            CONF_NAME,
            self.config_entry.data.get(CONF_NAME, DEFAULT_NAME),
        )
        current_key = self.config_entry.options.get(
            CONF_API_KEY,
            self.config_entry.data.get(CONF_API_KEY, ""),
        )
        schema = vol.Schema(
            {
                vol.Required(CONF_NAME, default=str(current_name)): str,
                vol.Optional(CONF_API_KEY, default=str(current_key or "")): str,
            }
        )
        return self.async_show_form(step_id="init", data_schema=schema)
