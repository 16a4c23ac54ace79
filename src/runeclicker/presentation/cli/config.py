"""CLI configuration helpers for balance overrides persistence."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Any, Dict

from runeclicker.domain.config import DEFAULT_CONFIG, GameConfig

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "RuneClicker"
        return Path.home() / "RuneClicker"
    return Path.home() / ".config" / "runeclicker"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _coerce(name: str, value: Any, default: Any) -> Any:
    if isinstance(default, bool):
        return value if isinstance(value, bool) else default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning("Ignoring non-numeric config value %s=%r", name, value)
        return default
    return float(value)


def load_config(path: Path | None = None) -> GameConfig:
    """Load config overrides from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return DEFAULT_CONFIG
    except (OSError, ValueError) as exc:
        logger.warning("Unreadable config at %s, using defaults: %s", config_path, exc)
        return DEFAULT_CONFIG
    if not isinstance(raw, dict):
        return DEFAULT_CONFIG
    overrides: Dict[str, Any] = {}
    for config_field in fields(GameConfig):
        if config_field.name in raw:
            default = getattr(DEFAULT_CONFIG, config_field.name)
            overrides[config_field.name] = _coerce(config_field.name, raw[config_field.name], default)
    return replace(DEFAULT_CONFIG, **overrides)


def save_config(config: GameConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(asdict(config), indent=2, sort_keys=True), encoding="utf-8")
