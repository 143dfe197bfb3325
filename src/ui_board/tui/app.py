"""Main TUI application using Textual.

// [LAW:locality-or-seam] Thin coordinator: the window owns state and runs frames;
//   tab widgets live in board_panels; this module only hosts them and implements
//   the Host capabilities (clipboard, asset selection).
"""

import logging

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, TabbedContent, TabPane

from ui_board.app.window import TAB_LABELS, BoardWindow, Tab
from ui_board.io.assets import Asset
from ui_board.tui.board_panels import PANEL_VIEWS

logger = logging.getLogger(__name__)


def _pane_id(tab: Tab) -> str:
    return "tab-{}".format(tab.value)


class BoardApp(App):
    """TUI window for the UI board."""

    TITLE = "UI Board Manager"

    BINDINGS = [
        ("f1", "show_tab('buttons')", "Buttons"),
        ("f2", "show_tab('fonts')", "Fonts"),
        ("f3", "show_tab('colors')", "Colors"),
        ("f4", "show_tab('notes')", "Notes"),
    ]

    def __init__(self, window: BoardWindow, initial_tab: Tab = Tab.BUTTON_REFERENCE):
        super().__init__()
        self.window = window
        self.window.host = self
        self.window.selected_tab = initial_tab
        self.selected_asset: Asset | None = None
        # Loaded before the first compose, like an editor window's enable hook.
        self.window.open()

    def compose(self) -> ComposeResult:
        yield Header()
        with TabbedContent(initial=_pane_id(self.window.selected_tab)):
            for tab, label in TAB_LABELS.items():
                with TabPane(label, id=_pane_id(tab)):
                    yield PANEL_VIEWS[tab](self.window, id="panel-{}".format(tab.value))
        yield Footer()

    def on_unmount(self) -> None:
        self.window.close()

    def on_tabbed_content_tab_activated(self, event: TabbedContent.TabActivated) -> None:
        pane_id = event.pane.id or ""
        for tab in Tab:
            if pane_id == _pane_id(tab):
                self.window.selected_tab = tab
                return

    def action_show_tab(self, value: str) -> None:
        tab = Tab(value)
        self.query_one(TabbedContent).active = _pane_id(tab)
        self.window.selected_tab = tab

    # ─── Host capabilities ─────────────────────────────────────────────
    # copy_to_clipboard is App.copy_to_clipboard.

    def select_asset(self, asset: Asset) -> None:
        self.selected_asset = asset
        self.sub_title = "Selected: {}".format(asset.path)
        logger.info("Selected asset %s", asset.path)

    def ping_asset(self, asset: Asset) -> None:
        self.notify(asset.path, title="{} asset".format(asset.asset_type.value))
