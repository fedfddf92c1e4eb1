"""Tests for settings.json persistence of tutorial completion."""

import sys
import os
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from client.settings import load_settings, update_settings
from client.tutorial_persistence import (
    is_tutorial_complete, reset_tutorial, set_tutorial_complete,
)


class TestSettings:
    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(str(tmp_path / "settings.json"))
        assert settings["fullscreen"] is False
        assert settings["tutorial_complete"] is False

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_settings(str(path))["tutorial_complete"] is False

    def test_update_keeps_other_keys(self, tmp_path):
        path = str(tmp_path / "settings.json")
        update_settings({"fullscreen": True}, path)
        update_settings({"tutorial_complete": True}, path)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data == {"fullscreen": True, "tutorial_complete": True}


class TestTutorialPersistence:
    def test_roundtrip(self, tmp_path):
        path = str(tmp_path / "settings.json")
        assert is_tutorial_complete(path) is False
        set_tutorial_complete(path)
        assert is_tutorial_complete(path) is True
        reset_tutorial(path)
        assert is_tutorial_complete(path) is False

    def test_only_true_counts(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"tutorial_complete": "yes"}), encoding="utf-8")
        assert is_tutorial_complete(str(path)) is False

    def test_write_failure_is_reported_not_raised(self, tmp_path, capsys):
        # a directory where the file should be makes the write fail
        path = tmp_path / "settings.json"
        path.mkdir()
        set_tutorial_complete(str(path))
        reset_tutorial(str(path))
        out = capsys.readouterr().out
        assert "[settings] WARNING" in out
        assert is_tutorial_complete(str(path)) is False
