import logging
from pathlib import Path

import pytest

from SimplePreferences.core import properties_file
from SimplePreferences.errors import PreferencesIOError


def test_load_missing_file_returns_empty(tmp_path: Path):
    path = tmp_path / "Preferences.properties"
    assert properties_file.load(path) == {}
    assert not path.exists()


def test_save_writes_key_value_lines(tmp_path: Path):
    path = tmp_path / "nested" / "dir" / "Preferences.properties"
    properties_file.save({"a.b": "1", "a.c": "true"}, path)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == properties_file.HEADER
    assert [line for line in lines if not line.startswith("#")] == ["a.b=1", "a.c=true"]
    assert list(path.parent.iterdir()) == [path]


def test_special_characters_are_escaped(tmp_path: Path):
    path = tmp_path / "Preferences.properties"
    entries = {
        "key=with=equals": "multi\nline\tvalue",
        "#looks.like.comment": "back\\slash = ok",
        "plain": " leading space",
    }
    properties_file.save(entries, path)
    assert properties_file.load(path) == entries


def test_malformed_lines_are_skipped(caplog: pytest.LogCaptureFixture):
    text = "# comment\n! other comment\n\nno separator here\n=orphan value\ngood.key=value=with=equals\n"
    with caplog.at_level(logging.WARNING, logger="SimplePreferences.core.properties_file"):
        entries, skipped = properties_file.parse_lines(text)

    assert entries == {"good.key": "value=with=equals"}
    assert skipped == 2
    assert "line 4" in caplog.text
    assert "empty key" in caplog.text


def test_duplicate_keys_last_wins():
    entries, _ = properties_file.parse_lines("k=1\nk=2\n")
    assert entries == {"k": "2"}


def test_failed_save_raises_and_keeps_previous_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "Preferences.properties"
    properties_file.save({"k": "old"}, path)

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(properties_file.os, "replace", broken_replace)
    with pytest.raises(PreferencesIOError):
        properties_file.save({"k": "new"}, path)

    assert properties_file.load(path) == {"k": "old"}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["Preferences.properties"]


def test_unicode_line_separators_survive_reload(tmp_path: Path):
    path = tmp_path / "Preferences.properties"
    entries = {
        "app.text": "a\u2028b\u2029c\x85d\x0be\x0cf\x1cg\x1dh\x1ei",
        "app.after": "still here",
    }
    properties_file.save(entries, path)

    assert len(path.read_text(encoding="utf-8").split("\n")) == 5
    assert properties_file.load(path) == entries


def test_outer_whitespace_in_keys_survives_reload(tmp_path: Path):
    path = tmp_path / "Preferences.properties"
    entries = {"app.k ": "trailing", " app.k": "leading", "app.k": "plain", "app.a b": "inner"}
    properties_file.save(entries, path)
    assert properties_file.load(path) == entries


def test_hand_written_lines_are_trimmed_around_keys():
    entries, skipped = properties_file.parse_lines("  app.k = v\r\nbroken\\u12=x\n")
    assert entries == {"app.k": " v", "brokenu12": "x"}
    assert skipped == 0
