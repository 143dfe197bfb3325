"""Board window — owns the four panel controllers and runs their frames.

The window is the single owner of every collection. It loads them on open,
saves them on close, and executes the effects each frame returns: persisting
a collection, writing the clipboard, selecting/pinging an asset.

// [LAW:locality-or-seam] Host capabilities (clipboard, selection) arrive through
// the Host protocol; the TUI app implements it, tests pass a fake.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Protocol

from ui_board.app.events import CopyToClipboard, Persist, SelectAsset
from ui_board.app.panels import (
    ButtonReferencePanel,
    ColorManagerPanel,
    FontPreviewPanel,
    NotesPanel,
    PanelFrame,
)
from ui_board.io.assets import AssetIndex
from ui_board.io.prefs import PreferenceStore

logger = logging.getLogger(__name__)


class Host(Protocol):
    def copy_to_clipboard(self, text: str) -> None: ...

    def select_asset(self, asset) -> None: ...

    def ping_asset(self, asset) -> None: ...


class Tab(Enum):
    BUTTON_REFERENCE = "buttons"
    FONT_PREVIEW = "fonts"
    COLOR_MANAGER = "colors"
    NOTES = "notes"


# [LAW:one-source-of-truth] Tab labels in tab order.
TAB_LABELS: dict[Tab, str] = {
    Tab.BUTTON_REFERENCE: "Button Reference",
    Tab.FONT_PREVIEW: "Font Preview",
    Tab.COLOR_MANAGER: "Color Manager",
    Tab.NOTES: "Notes",
}


class BoardWindow:
    def __init__(
        self,
        prefs: PreferenceStore,
        assets: AssetIndex | None = None,
        host: Host | None = None,
    ):
        self.prefs = prefs
        self.assets = assets
        self.host = host
        self.selected_tab = Tab.BUTTON_REFERENCE
        self.buttons = ButtonReferencePanel(assets)
        self.fonts = FontPreviewPanel(assets)
        self.colors = ColorManagerPanel()
        self.notes = NotesPanel()
        self.panels = {
            Tab.BUTTON_REFERENCE: self.buttons,
            Tab.FONT_PREVIEW: self.fonts,
            Tab.COLOR_MANAGER: self.colors,
            Tab.NOTES: self.notes,
        }
        self._lists_by_key = {
            panel.adapter.key: panel for panel in (self.buttons, self.colors, self.notes)
        }

    def open(self) -> None:
        """Load every collection and the preview text, then scan fonts and textures."""
        for panel in self.panels.values():
            panel.load(self.prefs)
        self.fonts.refresh()
        self.buttons.refresh_textures()
        logger.info(
            "Board opened: %d categories, %d colors, %d notes",
            len(self.buttons.entries), len(self.colors.entries), len(self.notes.entries),
        )

    def close(self) -> None:
        """Flush every collection, including in-place field edits."""
        for panel in self.panels.values():
            self._safe_save(panel)
        logger.info("Board closed")

    def _safe_save(self, panel) -> None:
        try:
            panel.save(self.prefs)
        except OSError:
            logger.exception("Failed to save %s", type(panel).__name__)

    def frame(self, events: Iterable = (), tab: Tab | None = None) -> PanelFrame:
        """Run one frame of the given (default: selected) tab and execute its effects."""
        panel = self.panels[tab or self.selected_tab]
        result = panel.frame(events)
        for effect in result.effects:
            self._run_effect(effect)
        return result

    def _run_effect(self, effect) -> None:
        if isinstance(effect, Persist):
            panel = self._lists_by_key.get(effect.key)
            if panel is not None:
                self._safe_save(panel)
        elif isinstance(effect, CopyToClipboard):
            if self.host is not None:
                self.host.copy_to_clipboard(effect.text)
        elif isinstance(effect, SelectAsset):
            if self.host is not None:
                self.host.select_asset(effect.asset)
                self.host.ping_asset(effect.asset)
        else:
            logger.debug("Unhandled effect %r", effect)
