"""Library settings loaded from YAML with environment overrides."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from SimplePreferences.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent / "settings.yaml"
ENV_PREFS_DIR = "SIMPLEPREFS_DIR"
ENV_LOG_PATH = "SIMPLEPREFS_LOG_PATH"

SECTIONS = ("preferences", "logging")


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read settings {path}: {exc}", details={"path": str(path)}) from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}", details={"path": str(path)}) from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings in {path} must be a mapping", details={"path": str(path)})
    for section in SECTIONS:
        if section in data and not isinstance(data[section], dict):
            raise ConfigError(
                f"Section '{section}' in {path} must be a mapping",
                details={"path": str(path), "section": section},
            )
    return data


def load_settings(path: str | Path | None = None) -> Dict[str, Any]:
    """Return the packaged defaults with ``path`` merged section by section."""
    settings = _read_yaml(DEFAULT_SETTINGS_PATH)
    for section in SECTIONS:
        settings.setdefault(section, {})
    if path is not None:
        user = _read_yaml(Path(path))
        for key, value in user.items():
            if isinstance(value, dict) and isinstance(settings.get(key), dict):
                merged = copy.deepcopy(settings[key])
                merged.update(value)
                settings[key] = merged
            else:
                settings[key] = value
        logger.debug("Merged settings from %s", path)
    return settings


def resolve_preferences_path(settings: Optional[Dict[str, Any]] = None) -> Path:
    prefs = (settings or load_settings()).get("preferences") or {}
    file_name = str(prefs.get("file_name") or "Preferences.properties").strip()
    directory = os.environ.get(ENV_PREFS_DIR) or prefs.get("directory")
    if directory:
        return Path(directory).expanduser() / file_name
    return Path.cwd() / file_name


def resolve_log_path() -> Optional[Path]:
    log_path = os.environ.get(ENV_LOG_PATH, "").strip()
    return Path(log_path) if log_path else None
