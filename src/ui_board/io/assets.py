"""Project asset index — enumerates font and texture assets under a root directory.

Snapshot semantics: every query walks the directory again; callers cache.
Paths are project-relative POSIX strings, the same form stored in sprite
path fields.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from PIL import Image, ImageFont, ImageStat

from ui_board.core.colors import Color

logger = logging.getLogger(__name__)


class AssetType(Enum):
    FONT = "Font"
    TEXTURE = "Texture2D"


# [LAW:one-source-of-truth] File extensions recognised per asset type.
ASSET_EXTENSIONS: dict[AssetType, frozenset[str]] = {
    AssetType.FONT: frozenset({".ttf", ".otf", ".ttc", ".fon"}),
    AssetType.TEXTURE: frozenset(
        {".png", ".jpg", ".jpeg", ".tga", ".bmp", ".gif", ".psd", ".tif", ".tiff"}
    ),
}


@dataclass(frozen=True)
class Asset:
    """Opaque handle to one asset file."""

    name: str           # file stem, e.g. "Roboto-Regular"
    path: str           # project-relative, POSIX separators
    asset_type: AssetType


@dataclass(frozen=True)
class TextureInfo:
    asset: Asset
    width: int
    height: int
    average: Color


class AssetIndex:
    """Directory-backed asset index rooted at a project folder."""

    def __init__(self, root: str | Path):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def _is_hidden(self, path: Path) -> bool:
        rel = path.relative_to(self._root)
        return any(part.startswith(".") for part in rel.parts)

    def _make_asset(self, path: Path, asset_type: AssetType) -> Asset:
        return Asset(
            name=path.stem,
            path=path.relative_to(self._root).as_posix(),
            asset_type=asset_type,
        )

    def find_assets(self, asset_type: AssetType) -> list[Asset]:
        """All assets of one type, sorted by path."""
        extensions = ASSET_EXTENSIONS[asset_type]
        if not self._root.is_dir():
            logger.warning("Asset root %s is not a directory", self._root)
            return []
        found = [
            self._make_asset(path, asset_type)
            for path in self._root.rglob("*")
            if path.suffix.lower() in extensions
            and path.is_file()
            and not self._is_hidden(path)
        ]
        found.sort(key=lambda asset: asset.path)
        logger.debug("Found %d %s assets under %s", len(found), asset_type.value, self._root)
        return found

    def load_asset(self, path: str | None, asset_type: AssetType) -> Asset | None:
        """Resolve a stored project-relative path. None when it no longer resolves."""
        if not path:
            return None
        candidate = self._root / path
        if candidate.suffix.lower() not in ASSET_EXTENSIONS[asset_type] or not candidate.is_file():
            return None
        return self._make_asset(candidate, asset_type)

    def absolute_path(self, asset: Asset) -> Path:
        return self._root / asset.path

    def describe_texture(self, asset: Asset) -> TextureInfo | None:
        """Size and mean color of a texture. None when Pillow cannot or will not read it."""
        try:
            with Image.open(self.absolute_path(asset)) as image:
                rgba = image.convert("RGBA")
                mean = ImageStat.Stat(rgba).mean
                return TextureInfo(
                    asset=asset,
                    width=rgba.width,
                    height=rgba.height,
                    average=Color(*(channel / 255.0 for channel in mean[:4])),
                )
        except (OSError, Image.DecompressionBombError):
            logger.debug("Unreadable texture %s", asset.path, exc_info=True)
            return None

    def font_family(self, asset: Asset) -> str | None:
        """'Family Style' face name read from the font file, if Pillow can parse it."""
        try:
            family, style = ImageFont.truetype(str(self.absolute_path(asset)), size=14).getname()
        except OSError:
            logger.debug("Unreadable font %s", asset.path, exc_info=True)
            return None
        return " ".join(part for part in (family, style) if part) or None
