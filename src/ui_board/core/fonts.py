"""Font list filtering and preview-text normalization."""

from __future__ import annotations

from typing import Iterable

from ui_board.core.models import FontRef

DEFAULT_PREVIEW_TEXT = "The quick brown fox jumps over the lazy dog"


def normalize_preview_text(text: str | None) -> str:
    """Empty or whitespace-only text falls back to the pangram."""
    if text is None or not text.strip():
        return DEFAULT_PREVIEW_TEXT
    return text


def matches_filter(name: str, filter_text: str) -> bool:
    if not filter_text:
        return True
    return filter_text.lower() in name.lower()


def filter_fonts(fonts: Iterable[FontRef], filter_text: str) -> list[FontRef]:
    """Fonts whose name contains filter_text, case-insensitively. Order preserved."""
    return [font for font in fonts if matches_filter(font.name, filter_text)]
