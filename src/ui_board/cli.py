"""CLI entry point for ui-board."""

import argparse
import logging
import os
from pathlib import Path

import ui_board.io.logging_setup
from ui_board.app.window import BoardWindow, Tab
from ui_board.io.assets import AssetIndex
from ui_board.io.prefs import JsonFilePreferenceStore
from ui_board.tui.app import BoardApp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ui-board",
        description="Button reference, font preview, color manager and notes in one window",
    )
    parser.add_argument(
        "--project",
        type=str,
        default=os.getcwd(),
        help="Project root scanned for font and texture assets (default: current directory)",
    )
    parser.add_argument(
        "--prefs",
        type=str,
        default=None,
        help="Preference file (default: $UI_BOARD_PREFS or $XDG_CONFIG_HOME/ui-board/prefs.json)",
    )
    parser.add_argument(
        "--tab",
        choices=[tab.value for tab in Tab],
        default=Tab.BUTTON_REFERENCE.value,
        help="Tab shown on open (default: buttons)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    runtime = ui_board.io.logging_setup.configure()

    project = Path(args.project).expanduser().resolve()
    prefs = JsonFilePreferenceStore(args.prefs)
    logger.info(
        "Starting ui-board: project=%s prefs=%s log=%s",
        project, prefs.path, runtime.file_path,
    )

    window = BoardWindow(prefs=prefs, assets=AssetIndex(project))
    BoardApp(window, initial_tab=Tab(args.tab)).run()
    return 0
