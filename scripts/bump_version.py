#!/usr/bin/env python3
"""Set the release version in manifest.json and pyproject.toml."""

from __future__ import annotations

import argparse
import json
import re
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
MANIFEST_PATH = REPO_ROOT / "custom_components" / "exercise_editor" / "manifest.json"
PYPROJECT_PATH = REPO_ROOT / "pyproject.toml"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser()
    p.add_argument("--version", required=True, help="New version, e.g. 0.1.1")
    return p.parse_args()


def main() -> int:
    args = parse_args()
    version = str(args.version).strip()
    if not re.fullmatch(r"\d+\.\d+\.\d+", version):
        raise SystemExit("Invalid --version (expected MAJOR.MINOR.PATCH)")

    manifest = json.loads(MANIFEST_PATH.read_text(encoding="utf-8"))
    manifest["version"] = version
    MANIFEST_PATH.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")

    raw = PYPROJECT_PATH.read_text(encoding="utf-8")
    updated, count = re.subn(r'(?m)^version = "[^"]*"$', f'version = "{version}"', raw, count=1)
    if count != 1:
        raise SystemExit(f"No version line found in {PYPROJECT_PATH}")
    PYPROJECT_PATH.write_text(updated, encoding="utf-8")

    print("Updated version to", version)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
