"""Pytest configuration and shared fixtures for ui-board tests."""

from pathlib import Path

import pytest
from PIL import Image

from ui_board.app.window import BoardWindow
from ui_board.io.assets import AssetIndex
from ui_board.io.prefs import MemoryPreferenceStore


class FakeHost:
    """Records host calls instead of touching a clipboard or selection."""

    def __init__(self):
        self.clipboard: list[str] = []
        self.selected: list = []
        self.pinged: list = []

    def copy_to_clipboard(self, text: str) -> None:
        self.clipboard.append(text)

    def select_asset(self, asset) -> None:
        self.selected.append(asset)

    def ping_asset(self, asset) -> None:
        self.pinged.append(asset)


# ---------------------------------------------------------------------------
# Stores and hosts
# ---------------------------------------------------------------------------

@pytest.fixture
def prefs():
    return MemoryPreferenceStore()


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def prefs_file(tmp_path, monkeypatch):
    """Redirect the default preference file to a temp directory."""
    path = tmp_path / "ui-board" / "prefs.json"
    monkeypatch.delenv("UI_BOARD_PREFS", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return path


# ---------------------------------------------------------------------------
# Project tree with assets
# ---------------------------------------------------------------------------

def write_png(path: Path, size=(4, 2), rgba=(255, 0, 0, 255)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, rgba).save(path)
    return path


def write_fake_font(path: Path) -> Path:
    """A file with a font extension that no font parser accepts."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"not really a font")
    return path


@pytest.fixture
def project(tmp_path):
    """Project root with three fonts, two textures and a hidden directory."""
    root = tmp_path / "project"
    write_fake_font(root / "Fonts" / "Roboto-Regular.ttf")
    write_fake_font(root / "Fonts" / "OpenSans-Bold.otf")
    write_fake_font(root / "UI" / "PixelArial.TTF")
    write_fake_font(root / ".cache" / "Hidden.ttf")
    write_png(root / "Sprites" / "button_normal.png", rgba=(255, 0, 0, 255))
    write_png(root / "Sprites" / "button_hover.png", size=(8, 8), rgba=(0, 0, 255, 255))
    (root / "README.txt").write_text("not an asset")
    return root


@pytest.fixture
def assets(project):
    return AssetIndex(project)


@pytest.fixture
def window(prefs, assets, host):
    board = BoardWindow(prefs=prefs, assets=assets, host=host)
    board.open()
    return board
