"""Exercise file reading/writing."""

from __future__ import annotations

from pathlib import Path

from homeassistant.core import HomeAssistant

from .exceptions import ExerciseFileError


def resolve_path(hass: HomeAssistant, path: str) -> Path:
    """Relative paths are taken from the Home Assistant config directory."""
    p = Path(str(path or "").strip())
    if not p.is_absolute():
        p = Path(hass.config.path(str(p)))
    return p


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")


class ExerciseLibrary:
    """Reads and writes exercise JSON files off the event loop."""

    def __init__(self, hass: HomeAssistant) -> None:
        self._hass = hass

    async def async_read(self, path: str) -> tuple[str, str]:
        """Return (file name, content) for a path."""
        resolved = resolve_path(self._hass, path)
        try:
            content = await self._hass.async_add_executor_job(_read_text, resolved)
        except (OSError, UnicodeDecodeError) as err:
            raise ExerciseFileError(f"Cannot read {resolved}: {err}") from err
        return resolved.name, content

    async def async_write(self, path: str, content: str) -> Path:
        resolved = resolve_path(self._hass, path)
        try:
            await self._hass.async_add_executor_job(_write_text, resolved, content)
        except OSError as err:
            raise ExerciseFileError(f"Cannot write {resolved}: {err}") from err
        return resolved
