"""Gemini translation client (English -> Persian).

Calls the public `generateContent` REST endpoint through Home Assistant's
shared aiohttp session. Failures never touch the record store: callers get a
TranslationError per call (single field) or per bundle.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from .const import TRANSLATION_MODEL, TRANSLATION_TIMEOUT
from .exceptions import TranslationError

_LOGGER = logging.getLogger(__name__)

API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

TEXT_INSTRUCTION = (
    "You are an expert translator. Translate the given English text to Persian. "
    "Only return the translated text, without any additional explanations or introductory phrases."
)
BUNDLE_INSTRUCTION = (
    "You are an expert translator. The user will provide English text for an exercise. "
    "Translate the name, description, and instructions to Persian. "
    "Respond with a JSON object matching the provided schema. "
    "Ensure the translated instructions have each step separated by a newline character."
)
BUNDLE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "name": {"type": "STRING", "description": "The Persian translation of the exercise name."},
        "description": {"type": "STRING", "description": "The Persian translation of the exercise description."},
        "instructions": {
            "type": "STRING",
            "description": "The Persian translation of the exercise instructions, with each step separated by a newline character.",
        },
    },
    "required": ["name", "description", "instructions"],
}


def build_bundle_prompt(name_en: str, description: str, instructions: list[str]) -> str:
    steps = "\n".join(instructions)
    return (
        "Translate the following English texts to Persian:\n\n"
        f'Name: "{name_en}"\n'
        f'Description: "{description}"\n'
        f"Instructions:\n{steps}\n"
    )


def extract_text(payload: Any) -> str:
    """Pull the concatenated text parts out of a generateContent reply."""
    if not isinstance(payload, dict):
        raise TranslationError("Unexpected response from translation service")
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        raise TranslationError("Translation service returned no candidates")
    content = candidates[0].get("content") or {}
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        raise TranslationError("Translation service returned no content")
    text = "".join(str(p.get("text") or "") for p in parts if isinstance(p, dict))
    return text.strip()


def parse_bundle(text: str) -> dict[str, Any]:
    """Decode the structured bundle reply; instructions come back one step per line."""
    try:
        data = json.loads(text)
    except ValueError as err:
        raise TranslationError("Translation service returned malformed JSON") from err
    if not isinstance(data, dict) or not all(k in data for k in ("name", "description", "instructions")):
        raise TranslationError("Translation service returned an incomplete bundle")
    lines = [line.strip() for line in str(data.get("instructions") or "").split("\n")]
    return {
        "name": str(data.get("name") or ""),
        "description": str(data.get("description") or ""),
        "instructions": [line for line in lines if line],
    }


class GeminiTranslator:
    """Thin async client; one instance per config entry."""

    def __init__(self, session: aiohttp.ClientSession, api_key: str, *, model: str = TRANSLATION_MODEL) -> None:
        self._session = session
        self._api_key = str(api_key or "").strip()
        self._model = model

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def _require_key(self) -> None:
        if not self._api_key:
            raise TranslationError("Gemini API key is not configured.")

    async def _async_generate(self, body: dict[str, Any]) -> str:
        url = API_URL.format(model=self._model)
        try:
            async with asyncio.timeout(TRANSLATION_TIMEOUT):
                async with self._session.post(url, params={"key": self._api_key}, json=body) as resp:
                    if resp.status != 200:
                        detail = await resp.text()
                        _LOGGER.error("Translation request failed (%s): %s", resp.status, detail[:200])
                        raise TranslationError(f"Translation service returned HTTP {resp.status}")
                    payload = await resp.json(content_type=None)
        except TimeoutError as err:
            raise TranslationError("Translation request timed out") from err
        except aiohttp.ClientError as err:
            _LOGGER.error("Error calling translation service: %s", err)
            raise TranslationError("Failed to translate text. Please check the API key and network status.") from err
        except ValueError as err:
            _LOGGER.error("Translation service returned a non-JSON body: %s", err)
            raise TranslationError("Translation service returned malformed JSON") from err
        return extract_text(payload)

    async def async_translate_text(self, text: str) -> str:
        if not text or not text.strip():
            return ""
        self._require_key()
        body = {
            "systemInstruction": {"parts": [{"text": TEXT_INSTRUCTION}]},
            "contents": [{"role": "user", "parts": [{"text": text}]}],
        }
        return await self._async_generate(body)

    async def async_translate_bundle(
        self,
        name_en: str,
        description: str,
        instructions: list[str],
    ) -> dict[str, Any]:
        self._require_key()
        body = {
            "systemInstruction": {"parts": [{"text": BUNDLE_INSTRUCTION}]},
            "contents": [{"role": "user", "parts": [{"text": build_bundle_prompt(name_en, description, instructions)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": BUNDLE_SCHEMA,
            },
        }
        return parse_bundle(await self._async_generate(body))

    async def async_translate_fields(self, fields: dict[str, str]) -> tuple[dict[str, str], dict[str, str]]:
        """Translate fields independently; a failed field never drops the others."""
        keys = list(fields)
        results = await asyncio.gather(
            *(self.async_translate_text(fields[k]) for k in keys),
            return_exceptions=True,
        )
        translated: dict[str, str] = {}
        errors: dict[str, str] = {}
        for key, result in zip(keys, results):
            if isinstance(result, TranslationError):
                errors[key] = str(result)
            elif isinstance(result, BaseException):
                raise result
            else:
                translated[key] = result
        return translated, errors
