"""Tests for the directory-backed asset index."""

from ui_board.core.colors import Color
from ui_board.io.assets import Asset, AssetIndex, AssetType

from tests.conftest import write_png


class TestFindAssets:
    def test_fonts_sorted_by_path(self, assets):
        found = assets.find_assets(AssetType.FONT)
        assert [a.path for a in found] == [
            "Fonts/OpenSans-Bold.otf",
            "Fonts/Roboto-Regular.ttf",
            "UI/PixelArial.TTF",
        ]
        assert [a.name for a in found] == ["OpenSans-Bold", "Roboto-Regular", "PixelArial"]
        assert all(a.asset_type is AssetType.FONT for a in found)

    def test_textures(self, assets):
        found = assets.find_assets(AssetType.TEXTURE)
        assert [a.path for a in found] == ["Sprites/button_hover.png", "Sprites/button_normal.png"]

    def test_hidden_directories_skipped(self, assets):
        assert "Hidden" not in [a.name for a in assets.find_assets(AssetType.FONT)]

    def test_missing_root_is_empty(self, tmp_path):
        assert AssetIndex(tmp_path / "nowhere").find_assets(AssetType.FONT) == []


class TestLoadAsset:
    def test_resolves_stored_path(self, assets):
        asset = assets.load_asset("Sprites/button_normal.png", AssetType.TEXTURE)
        assert asset == Asset("button_normal", "Sprites/button_normal.png", AssetType.TEXTURE)

    def test_missing_or_wrong_type(self, assets):
        assert assets.load_asset("Sprites/gone.png", AssetType.TEXTURE) is None
        assert assets.load_asset("Fonts/Roboto-Regular.ttf", AssetType.TEXTURE) is None
        assert assets.load_asset("", AssetType.TEXTURE) is None
        assert assets.load_asset(None, AssetType.FONT) is None

    def test_absolute_path(self, assets, project):
        asset = assets.load_asset("Sprites/button_normal.png", AssetType.TEXTURE)
        assert assets.absolute_path(asset) == project / "Sprites" / "button_normal.png"


class TestDescribe:
    def test_texture_size_and_average(self, assets):
        asset = assets.load_asset("Sprites/button_normal.png", AssetType.TEXTURE)
        info = assets.describe_texture(asset)
        assert (info.width, info.height) == (4, 2)
        assert info.average == Color(1.0, 0.0, 0.0, 1.0)
        assert info.asset == asset

    def test_average_of_mixed_texture(self, assets, project):
        from PIL import Image

        path = project / "Sprites" / "half.png"
        image = Image.new("RGBA", (2, 1), (0, 0, 0, 255))
        image.putpixel((1, 0), (255, 255, 255, 255))
        image.save(path)
        info = assets.describe_texture(assets.load_asset("Sprites/half.png", AssetType.TEXTURE))
        assert info.average.to_html_rgb() == "80" * 3

    def test_unreadable_texture(self, assets, project):
        (project / "Sprites" / "broken.png").write_bytes(b"definitely not a png")
        asset = assets.load_asset("Sprites/broken.png", AssetType.TEXTURE)
        assert asset is not None
        assert assets.describe_texture(asset) is None

    def test_oversized_texture(self, assets, monkeypatch):
        from PIL import Image

        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1)
        asset = assets.load_asset("Sprites/button_hover.png", AssetType.TEXTURE)
        assert assets.describe_texture(asset) is None

    def test_unreadable_font_has_no_family(self, assets):
        asset = assets.load_asset("Fonts/Roboto-Regular.ttf", AssetType.FONT)
        assert assets.font_family(asset) is None

    def test_new_files_show_up_on_next_query(self, assets, project):
        write_png(project / "Sprites" / "extra.png")
        assert "Sprites/extra.png" in [a.path for a in assets.find_assets(AssetType.TEXTURE)]
