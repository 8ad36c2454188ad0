"""Backend version, read from manifest.json."""

from __future__ import annotations

import json
from pathlib import Path

MANIFEST_PATH = Path(__file__).with_name("manifest.json")


def read_manifest_version(path: Path = MANIFEST_PATH) -> str:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return "0.0.0"
    if not isinstance(data, dict):
        return "0.0.0"
    return str(data.get("version") or "").strip() or "0.0.0"


BACKEND_VERSION = read_manifest_version()
