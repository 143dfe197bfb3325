"""Tests for preference stores — JSON file persistence and config path resolution."""

import json

import pytest

import ui_board.io.prefs
from ui_board.io.prefs import JsonFilePreferenceStore, MemoryPreferenceStore


@pytest.fixture
def store(tmp_path):
    return JsonFilePreferenceStore(tmp_path / "prefs.json")


class TestConfigPath:
    def test_xdg_default(self, prefs_file):
        assert ui_board.io.prefs.get_config_path() == prefs_file

    def test_env_override(self, tmp_path, monkeypatch):
        target = tmp_path / "custom.json"
        monkeypatch.setenv("UI_BOARD_PREFS", str(target))
        assert ui_board.io.prefs.get_config_path() == target

    def test_store_uses_config_path_by_default(self, prefs_file):
        store = JsonFilePreferenceStore()
        store.set_string("k", "v")
        assert store.path == prefs_file
        assert json.loads(prefs_file.read_text()) == {"k": "v"}


class TestJsonFileStore:
    def test_missing_file_is_empty(self, store):
        assert not store.has_key("anything")
        assert store.get_string("anything", "fallback") == "fallback"

    def test_set_get_delete(self, store):
        store.set_string("a", "1")
        assert store.has_key("a")
        assert store.get_string("a") == "1"
        store.delete_key("a")
        assert not store.has_key("a")

    def test_delete_missing_key_does_not_write(self, store):
        store.delete_key("nope")
        assert not store.path.exists()

    def test_values_visible_to_second_instance(self, store):
        store.set_string("shared", "yes")
        other = JsonFilePreferenceStore(store.path)
        assert other.get_string("shared") == "yes"

    def test_creates_parent_directories(self, tmp_path):
        store = JsonFilePreferenceStore(tmp_path / "deep" / "nested" / "prefs.json")
        store.set_string("k", "v")
        assert store.path.exists()

    def test_no_temp_files_left_behind(self, store):
        store.set_string("a", "1")
        store.set_string("b", "2")
        assert [p.name for p in store.path.parent.iterdir()] == ["prefs.json"]

    def test_corrupt_file_is_empty(self, store):
        store.path.write_text("{not json")
        assert store.get_string("a", "default") == "default"
        # Writing replaces the corrupt file.
        store.set_string("a", "1")
        assert json.loads(store.path.read_text()) == {"a": "1"}

    def test_non_object_file_is_empty(self, store):
        store.path.write_text("[1, 2]")
        assert not store.has_key("0")

    def test_non_string_values_ignored(self, store):
        store.path.write_text(json.dumps({"num": 3, "text": "ok"}))
        assert not store.has_key("num")
        assert store.get_string("text") == "ok"


class TestMemoryStore:
    def test_initial_values_are_copied(self):
        initial = {"a": "1"}
        store = MemoryPreferenceStore(initial)
        store.set_string("b", "2")
        assert initial == {"a": "1"}
        assert store.snapshot() == {"a": "1", "b": "2"}

    def test_delete(self):
        store = MemoryPreferenceStore({"a": "1"})
        store.delete_key("a")
        store.delete_key("a")
        assert not store.has_key("a")
