"""App lifecycle management for Textual in-process tests.

Creates BoardApp instances wired for testing and manages run_test() lifecycle.
State isolation: every call gets its own window unless the test passes one.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from textual.pilot import Pilot

from ui_board.app.window import BoardWindow, Tab
from ui_board.io.prefs import MemoryPreferenceStore
from ui_board.tui.app import BoardApp


@asynccontextmanager
async def run_app(
    *,
    window: BoardWindow | None = None,
    initial_tab: Tab = Tab.BUTTON_REFERENCE,
    size: tuple[int, int] = (120, 60),
) -> AsyncIterator[tuple[Pilot, BoardApp]]:
    """Create and run a BoardApp in test mode.

    Yields (pilot, app) tuple. Without a window, a board over an empty
    in-memory preference store and no asset index is used.
    """
    # [LAW:no-shared-mutable-globals] Fresh state for every test
    if window is None:
        window = BoardWindow(prefs=MemoryPreferenceStore())
    app = BoardApp(window, initial_tab=initial_tab)

    async with app.run_test(size=size) as pilot:
        await pilot.pause()
        yield pilot, app
