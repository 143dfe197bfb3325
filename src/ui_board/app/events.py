"""Frame inputs (user events) and outputs (effects) for panel controllers.

Events are what the user did this frame; effects are what the host must do
afterwards. Both are plain immutable data so controllers stay testable
without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


# ─── Panel events ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class ToggleHelp:
    pass


@dataclass(frozen=True)
class ToggleList:
    """Fold/unfold a panel's whole list (fonts, saved colors)."""


@dataclass(frozen=True)
class AddEntry:
    pass


@dataclass(frozen=True)
class SetScratchName:
    name: str


@dataclass(frozen=True)
class SetScratchColor:
    color: Any  # Color or an HTML hex string


@dataclass(frozen=True)
class SetPreviewText:
    text: str


@dataclass(frozen=True)
class SetFilter:
    text: str


@dataclass(frozen=True)
class RefreshFonts:
    pass


@dataclass(frozen=True)
class RefreshTextures:
    """Rescan texture assets offered to the sprite fields."""


@dataclass(frozen=True)
class SelectFont:
    path: str


# ─── Row events (address one entry by index) ───────────────────────────


@dataclass(frozen=True)
class RowEvent:
    index: int


@dataclass(frozen=True)
class RemoveEntry(RowEvent):
    pass


@dataclass(frozen=True)
class ToggleExpanded(RowEvent):
    pass


@dataclass(frozen=True)
class EditField(RowEvent):
    field: str
    value: Any


@dataclass(frozen=True)
class CopyHex(RowEvent):
    pass


# ─── Effects ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Persist:
    """Write the named collection to the preference store."""

    key: str


@dataclass(frozen=True)
class CopyToClipboard:
    text: str


@dataclass(frozen=True)
class SelectAsset:
    """Make the asset the active selection and highlight it."""

    asset: Any
