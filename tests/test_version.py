from __future__ import annotations

from pathlib import Path

from custom_components.exercise_editor.diagnostics import _redact
from custom_components.exercise_editor.version import BACKEND_VERSION, read_manifest_version


def test_bundled_manifest_has_a_version() -> None:
    assert BACKEND_VERSION != "0.0.0"


def test_unreadable_manifest_falls_back(tmp_path: Path) -> None:
    assert read_manifest_version(tmp_path / "missing.json") == "0.0.0"
    broken = tmp_path / "manifest.json"
    broken.write_text("{", encoding="utf-8")
    assert read_manifest_version(broken) == "0.0.0"


def test_api_key_redaction() -> None:
    assert _redact(None) is None
    assert _redact("") == ""
    assert _redact("abcd") == "***"
    assert _redact("AIzaSyExample") == "AI***le"
