"""Tests for settings loading."""

from pathlib import Path

import pytest

from SimplePreferences.config.settings import load_settings, resolve_log_path, resolve_preferences_path
from SimplePreferences.errors import ConfigError


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.delenv("SIMPLEPREFS_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    settings = load_settings()
    assert settings["preferences"]["file_name"] == "Preferences.properties"
    assert settings["preferences"]["encoding"] == "utf-8"
    assert resolve_preferences_path(settings) == tmp_path / "Preferences.properties"


def test_user_settings_are_merged(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SIMPLEPREFS_DIR", raising=False)
    user = tmp_path / "settings.yaml"
    user.write_text(
        "preferences:\n  file_name: custom.properties\n  directory: " + str(tmp_path / "conf") + "\n",
        encoding="utf-8",
    )
    settings = load_settings(user)
    assert settings["preferences"]["encoding"] == "utf-8"
    assert settings["logging"]["level"] == "WARNING"
    assert resolve_preferences_path(settings) == tmp_path / "conf" / "custom.properties"


def test_environment_overrides_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SIMPLEPREFS_DIR", str(tmp_path))
    assert resolve_preferences_path(load_settings()) == tmp_path / "Preferences.properties"


def test_log_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SIMPLEPREFS_LOG_PATH", raising=False)
    assert resolve_log_path() is None
    monkeypatch.setenv("SIMPLEPREFS_LOG_PATH", str(tmp_path / "prefs.log"))
    assert resolve_log_path() == tmp_path / "prefs.log"


@pytest.mark.parametrize("content", ["- a\n- b\n", "preferences: nope\n", "preferences: [\n"])
def test_invalid_settings(tmp_path: Path, content: str):
    user = tmp_path / "settings.yaml"
    user.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(user)
