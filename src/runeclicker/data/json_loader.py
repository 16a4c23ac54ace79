"""Reads catalog JSON files for the repositories."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path) -> object:
    """Parse one catalog file; any I/O or decode failure becomes DataLoadError."""
    if not path.is_file():
        raise DataLoadError(f"Catalog file missing: {path}")
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Cannot read catalog file {path}: {exc}") from exc

    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"{path.name} is not valid JSON (line {exc.lineno}): {exc.msg}") from exc
