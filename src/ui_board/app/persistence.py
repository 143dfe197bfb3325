"""Collection persistence — one preference key per panel list.

Each list is stored as a JSON object wrapping the sequence, e.g.
{"notes": [{...}, {...}]}. Loading never raises: an absent key, a null
list, or an unparsable value all yield an empty list.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from ui_board.core.models import ButtonCategory, ColorEntry, NoteEntry
from ui_board.io.prefs import PreferenceStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

# [LAW:one-source-of-truth] Preference keys for every persisted value.
PREF_KEY_CATEGORIES = "ButtonReferenceTool.Categories"
PREF_KEY_NOTES = "ButtonReferenceTool.Notes"
PREF_KEY_COLORS = "ColorManager.SavedColors"
PREF_KEY_PREVIEW_TEXT = "FontPreview_PreviewText"


@dataclass(frozen=True)
class CollectionAdapter(Generic[T]):
    """Binds one entry type to one preference key."""

    key: str
    wrapper_field: str
    to_dict: Callable[[T], dict]
    from_dict: Callable[[dict], T]

    def dumps(self, entries: list[T]) -> str:
        return json.dumps({self.wrapper_field: [self.to_dict(e) for e in entries]})

    def loads(self, raw: str) -> list[T]:
        """Parse a stored value. Raises on malformed input."""
        document = json.loads(raw)
        if not isinstance(document, dict):
            raise TypeError("expected a JSON object, got {}".format(type(document).__name__))
        items = document.get(self.wrapper_field)
        if items is None:
            return []
        if not isinstance(items, list):
            raise TypeError("{!r} must be a list".format(self.wrapper_field))
        return [self.from_dict(item) for item in items]

    def load(self, prefs: PreferenceStore) -> list[T]:
        if not prefs.has_key(self.key):
            return []
        raw = prefs.get_string(self.key)
        try:
            return self.loads(raw)
        except (ValueError, TypeError) as exc:
            # json.JSONDecodeError is a ValueError.
            logger.warning("Discarding unreadable preference %s: %s", self.key, exc)
            return []

    def save(self, prefs: PreferenceStore, entries: list[T]) -> None:
        prefs.set_string(self.key, self.dumps(entries))


CATEGORIES = CollectionAdapter[ButtonCategory](
    key=PREF_KEY_CATEGORIES,
    wrapper_field="categories",
    to_dict=ButtonCategory.to_dict,
    from_dict=ButtonCategory.from_dict,
)

NOTES = CollectionAdapter[NoteEntry](
    key=PREF_KEY_NOTES,
    wrapper_field="notes",
    to_dict=NoteEntry.to_dict,
    from_dict=NoteEntry.from_dict,
)

COLORS = CollectionAdapter[ColorEntry](
    key=PREF_KEY_COLORS,
    wrapper_field="colors",
    to_dict=ColorEntry.to_dict,
    from_dict=ColorEntry.from_dict,
)
