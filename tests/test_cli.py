"""Tests for the command-line entry point."""

import pytest

import ui_board.cli
from ui_board.app.window import Tab
from ui_board.io.logging_setup import LoggingRuntime


class FakeApp:
    launched = []

    def __init__(self, window, initial_tab):
        self.window = window
        self.initial_tab = initial_tab

    def run(self):
        FakeApp.launched.append(self)


@pytest.fixture
def fake_app(monkeypatch, tmp_path):
    FakeApp.launched = []
    monkeypatch.setattr(ui_board.cli, "BoardApp", FakeApp)
    monkeypatch.setattr(
        ui_board.io.logging_setup,
        "configure",
        lambda: LoggingRuntime("INFO", 20, str(tmp_path / "cli.log")),
    )
    return FakeApp


def test_parser_defaults():
    args = ui_board.cli.build_parser().parse_args([])
    assert args.tab == "buttons"
    assert args.prefs is None


def test_parser_rejects_unknown_tab():
    with pytest.raises(SystemExit):
        ui_board.cli.build_parser().parse_args(["--tab", "sprites"])


def test_main_builds_window(fake_app, project, tmp_path):
    prefs_path = tmp_path / "prefs.json"
    code = ui_board.cli.main(["--project", str(project), "--prefs", str(prefs_path), "--tab", "notes"])
    assert code == 0
    (app,) = fake_app.launched
    assert app.initial_tab is Tab.NOTES
    assert app.window.assets.root == project.resolve()
    assert app.window.prefs.path == prefs_path
