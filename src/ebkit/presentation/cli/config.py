"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

_DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "EBKit"
        return Path.home() / "EBKit"
    return Path.home() / ".config" / "ebkit"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def get_default_export_dir() -> Path:
    """Return the per-user directory for exported save records."""
    return get_user_data_dir() / "exports"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_export_dir(value: object) -> str:
    if isinstance(value, str) and value:
        return value
    return str(get_default_export_dir())


def _defaults() -> Dict[str, str]:
    return {"log_level": _DEFAULT_LOG_LEVEL, "export_dir": str(get_default_export_dir())}


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _defaults()
    if not isinstance(raw, dict):
        return _defaults()
    return {
        "log_level": _normalize_log_level(raw.get("log_level")),
        "export_dir": _normalize_export_dir(raw.get("export_dir")),
    }


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "log_level": _normalize_log_level(config.get("log_level")),
        "export_dir": _normalize_export_dir(config.get("export_dir")),
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
