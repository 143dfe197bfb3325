"""Panel rendering logic - pure functions for building display text.

Widgets call these with view-model rows and place the returned Rich Text.
No widget state lives here.
"""

from rich.style import Style
from rich.text import Text

from ui_board.core.colors import Color
from ui_board.core.preview import ButtonVisual

# Terminal cells per preview pixel, roughly one cell = 8x16 px.
_PX_PER_COL = 8.0
_PX_PER_ROW = 16.0
_MAX_COLS = 60
_MAX_ROWS = 8


def preview_cells(width: float, height: float) -> tuple[int, int]:
    """Map a pixel size to (columns, rows), clamped to something a panel can show."""
    cols = max(4, min(_MAX_COLS, int(round(width / _PX_PER_COL))))
    rows = max(1, min(_MAX_ROWS, int(round(height / _PX_PER_ROW))))
    return cols, rows


def _contrast_text(color: Color) -> str:
    luminance = 0.299 * color.r + 0.587 * color.g + 0.114 * color.b
    return "#000000" if luminance > 0.5 else "#FFFFFF"


def _block(label: str, cols: int, rows: int, style: Style) -> Text:
    label = label[:cols]
    middle = rows // 2
    text = Text(end="")
    for row in range(rows):
        line = label.center(cols) if row == middle else " " * cols
        text.append(line, style=style)
        if row < rows - 1:
            text.append("\n")
    return text


def render_button_preview(visual: ButtonVisual) -> Text:
    """Preview surface at the configured size with the label centered.

    Sprite previews are filled with the texture's average color; a sprite that
    did not resolve renders as an empty dim box.
    """
    cols, rows = preview_cells(visual.width, visual.height)
    if visual.sprite is not None:
        fill = visual.sprite.average
        style = Style(bgcolor=fill.to_rich(), color=_contrast_text(fill))
        return _block(visual.text, cols, rows, style)
    if visual.color is not None:
        style = Style(bgcolor=visual.color.to_rich(), color=_contrast_text(visual.color))
        return _block(visual.text, cols, rows, style)
    return _block("(no sprite)", cols, rows, Style(dim=True, reverse=True))


def render_preview_caption(visual: ButtonVisual) -> Text:
    """One-line caption under the preview: state, mode, size, and the sprite source."""
    caption = Text(
        "{} · {} · {:g}×{:g}".format(
            visual.state.value, visual.mode.value, visual.width, visual.height
        ),
        style="dim",
    )
    if visual.sprite is not None:
        caption.append("  {} ({}×{})".format(
            visual.sprite.asset.path, visual.sprite.width, visual.sprite.height
        ))
    return caption


def render_swatch(color: Color, width: int = 4) -> Text:
    return Text(" " * width, style=Style(bgcolor=color.to_rich()), end="")


def render_hex(hex_digits: str) -> Text:
    return Text("#" + hex_digits, style="bold")


def render_font_header(name: str, family: str | None) -> Text:
    text = Text("Font: " + name, style="bold")
    if family:
        text.append("  " + family, style="dim italic")
    return text
