"""CLI configuration helpers for per-user settings and data files."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "MiniAkinator"
        return Path.home() / "MiniAkinator"
    return Path.home() / ".config" / "mini_akinator"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_store_path() -> Path:
    """Return the file holding score and question priorities."""
    return get_user_data_dir() / "progress.json"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
        return value.strip().upper()
    return _DEFAULT_LOG_LEVEL


def _normalize(raw: Dict[str, object]) -> Dict[str, object]:
    return {
        "log_level": _normalize_log_level(raw.get("log_level")),
        "show_supported_words": raw.get("show_supported_words") is not False,
    }


def load_config(path: Path | None = None) -> Dict[str, object]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return _normalize({})
    if not isinstance(raw, dict):
        return _normalize({})
    return _normalize(raw)
