"""Tests for font filtering and preview text normalization."""

import pytest

from ui_board.core.fonts import DEFAULT_PREVIEW_TEXT, filter_fonts, matches_filter, normalize_preview_text
from ui_board.core.models import FontRef

FONTS = [FontRef("Roboto-Regular", None), FontRef("OpenSans-Bold", None), FontRef("PixelArial", None)]


@pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
def test_blank_preview_text_is_pangram(text):
    assert normalize_preview_text(text) == DEFAULT_PREVIEW_TEXT


def test_preview_text_kept_verbatim():
    assert normalize_preview_text("  Hello  ") == "  Hello  "


def test_pangram():
    assert DEFAULT_PREVIEW_TEXT == "The quick brown fox jumps over the lazy dog"


@pytest.mark.parametrize("filter_text, expected", [
    ("", ["Roboto-Regular", "OpenSans-Bold", "PixelArial"]),
    ("ROBO", ["Roboto-Regular"]),
    ("sans", ["OpenSans-Bold"]),
    ("a", ["Roboto-Regular", "OpenSans-Bold", "PixelArial"]),
    ("mono", []),
])
def test_filter_is_case_insensitive_substring(filter_text, expected):
    assert [f.name for f in filter_fonts(FONTS, filter_text)] == expected


def test_matches_filter():
    assert matches_filter("PixelArial", "xela")
    assert not matches_filter("PixelArial", "serif")
