"""Tests for updater settings."""
import os

import pytest

from updatekit.config import settings as settings_mod
from updatekit.config.settings import UpdateSettings, disk_cache_dir


class TestUpdateSettings:
    def test_defaults_resolved(self):
        s = UpdateSettings()
        assert s.data_dir == settings_mod.DEFAULT_DATA_DIR
        assert s.cache_dir
        assert s.prefs_name == "update_prefs"
        assert s.only_unmetered is False

    def test_missing_file_gives_defaults(self, tmp_path):
        assert UpdateSettings.load(str(tmp_path / "none.json")) == UpdateSettings()

    def test_save_and_load(self, tmp_path):
        path = str(tmp_path / "conf" / "settings.json")
        s = UpdateSettings(data_dir=str(tmp_path), only_unmetered=True)
        s.save(path)
        assert os.path.isfile(path)
        assert UpdateSettings.load(path) == s

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{"only_unmetered": true, "bogus": 1}', "utf-8")
        assert UpdateSettings.load(str(path)).only_unmetered is True

    @pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
    def test_bad_file_gives_defaults(self, tmp_path, content):
        path = tmp_path / "settings.json"
        path.write_text(content, "utf-8")
        assert UpdateSettings.load(str(path)) == UpdateSettings()


class TestDiskCacheDir:
    def test_explicit_base(self, tmp_path):
        assert disk_cache_dir("upd", str(tmp_path)) == os.path.join(str(tmp_path), "upd")

    def test_does_not_create(self, tmp_path):
        disk_cache_dir("upd", str(tmp_path))
        assert not (tmp_path / "upd").exists()

    def test_xdg_cache_home(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings_mod.sys, "platform", "linux")
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
        assert disk_cache_dir("upd") == os.path.join(str(tmp_path), "upd")
