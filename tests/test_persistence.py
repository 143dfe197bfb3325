"""Tests for collection persistence — wrapper format, round trips and unreadable values."""

import json
import logging

import pytest

from ui_board.app import persistence
from ui_board.core.colors import Color
from ui_board.core.models import ButtonCategory, ColorEntry, NoteEntry, SimulatedState
from ui_board.io.prefs import MemoryPreferenceStore


class TestRoundTrip:
    def test_categories(self, prefs):
        cats = [
            ButtonCategory(name="Primary", simulated_state=SimulatedState.PRESSED),
            ButtonCategory(name="Ghost", expanded=False, text="Cancel"),
        ]
        persistence.CATEGORIES.save(prefs, cats)
        assert persistence.CATEGORIES.load(prefs) == cats

    def test_notes(self, prefs):
        notes = [NoteEntry(title="A", content="first"), NoteEntry(title="B", expanded=False)]
        persistence.NOTES.save(prefs, notes)
        assert persistence.NOTES.load(prefs) == notes

    def test_colors(self, prefs):
        colors = [ColorEntry(name="Brand Red", color=Color(1.0, 0.0, 0.0, 1.0))]
        persistence.COLORS.save(prefs, colors)
        assert persistence.COLORS.load(prefs) == colors

    def test_empty_list(self, prefs):
        persistence.NOTES.save(prefs, [])
        assert prefs.has_key(persistence.PREF_KEY_NOTES)
        assert persistence.NOTES.load(prefs) == []


class TestStoredFormat:
    def test_wrapper_object(self, prefs):
        persistence.NOTES.save(prefs, [NoteEntry(title="T", content="C")])
        stored = json.loads(prefs.get_string(persistence.PREF_KEY_NOTES))
        assert stored == {"notes": [{"title": "T", "content": "C", "expanded": True}]}

    def test_keys(self):
        assert persistence.CATEGORIES.key == "ButtonReferenceTool.Categories"
        assert persistence.NOTES.key == "ButtonReferenceTool.Notes"
        assert persistence.COLORS.key == "ColorManager.SavedColors"
        assert persistence.CATEGORIES.wrapper_field == "categories"
        assert persistence.COLORS.wrapper_field == "colors"


class TestUnreadableValues:
    def test_absent_key_is_empty(self, prefs):
        assert persistence.CATEGORIES.load(prefs) == []

    def test_null_list_is_empty(self):
        prefs = MemoryPreferenceStore({persistence.PREF_KEY_NOTES: '{"notes": null}'})
        assert persistence.NOTES.load(prefs) == []

    def test_missing_wrapper_field_is_empty(self):
        prefs = MemoryPreferenceStore({persistence.PREF_KEY_NOTES: "{}"})
        assert persistence.NOTES.load(prefs) == []

    @pytest.mark.parametrize("raw", [
        "not json at all",
        "[1, 2, 3]",
        '{"categories": "oops"}',
        '{"categories": [1]}',
        '{"categories": [{"width": -1}]}',
        '{"categories": [{"width": NaN}]}',
        '{"categories": [{"height": Infinity}]}',
    ])
    def test_corrupt_value_is_empty_and_logged(self, raw, caplog):
        prefs = MemoryPreferenceStore({persistence.PREF_KEY_CATEGORIES: raw})
        with caplog.at_level(logging.WARNING, logger="ui_board.app.persistence"):
            assert persistence.CATEGORIES.load(prefs) == []
        assert "ButtonReferenceTool.Categories" in caplog.text

    def test_loads_raises_on_malformed(self):
        with pytest.raises(ValueError):
            persistence.COLORS.loads("{")
        with pytest.raises(TypeError):
            persistence.COLORS.loads('"just a string"')
