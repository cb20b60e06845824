"""CLI configuration helpers for output options."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

_DEFAULT_INDENT = 2


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "QuestBridge"
        return Path.home() / "QuestBridge"
    return Path.home() / ".config" / "questbridge"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_indent(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return _DEFAULT_INDENT
    return value


def _defaults() -> Dict[str, Any]:
    return {"indent": _DEFAULT_INDENT, "sort_keys": False}


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "indent": _normalize_indent(raw.get("indent")),
        "sort_keys": raw.get("sort_keys") is True,
    }
