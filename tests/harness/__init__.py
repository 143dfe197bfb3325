"""Textual in-process test harness for ui-board.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, press_and_settle, row_count, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.interactions import (
    press_and_settle,
    press_chip,
    set_input,
    show_tab,
)
from tests.harness.assertions import (
    get_panel,
    row_count,
    chip_keys,
    is_help_visible,
)

__all__ = [
    "run_app",
    "press_and_settle",
    "press_chip",
    "set_input",
    "show_tab",
    "get_panel",
    "row_count",
    "chip_keys",
    "is_help_visible",
]
