"""Tab widgets — Textual front-ends for the four panel controllers.

Widgets never mutate entries themselves. Every interaction is turned into a
frame event and handed to BoardWindow.frame(); the returned view is what the
widget shows next.

Widget ids encode their target: "<prefix>-<row>-<field>" for row fields
(e.g. "buttons-2-hover_color"), "<prefix>-<name>" for panel-level inputs.
Chip action keys are "<action>" or "<action>:<argument>".

// [LAW:one-source-of-truth] Entry state lives in the controllers; widgets are rebuilt from views.
"""

from __future__ import annotations

import logging
from typing import Callable, ClassVar, Iterable

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Input, Label, Static, TextArea

from ui_board.app.events import (
    AddEntry,
    CopyHex,
    EditField,
    RefreshFonts,
    RefreshTextures,
    RemoveEntry,
    SelectFont,
    SetFilter,
    SetPreviewText,
    SetScratchColor,
    SetScratchName,
    ToggleExpanded,
    ToggleHelp,
    ToggleList,
)
from ui_board.app.panels import ButtonRow, ColorRow, FontRow, NoteRow, PanelView
from ui_board.app.window import BoardWindow, Tab
from ui_board.core.colors import Color
from ui_board.core.models import SimulatedState, VisualMode, color_field, sprite_field
from ui_board.tui import panel_renderers
from ui_board.tui.chip import ActionChip, fold_label
from ui_board.tui.cycle_selector import CycleSelector

logger = logging.getLogger(__name__)

_NO_SPRITE = "(none)"

# [LAW:dataflow-not-control-flow] Chip action -> frame event factory.
_CHIP_ACTIONS: dict[str, Callable[[str], object]] = {
    "help": lambda arg: ToggleHelp(),
    "add": lambda arg: AddEntry(),
    "list": lambda arg: ToggleList(),
    "refresh": lambda arg: RefreshFonts(),
    "textures": lambda arg: RefreshTextures(),
    "remove": lambda arg: RemoveEntry(int(arg)),
    "fold": lambda arg: ToggleExpanded(int(arg)),
    "copy": lambda arg: CopyHex(int(arg)),
    "select": lambda arg: SelectFont(arg),
}


def chip_event(action_key: str):
    action, _, arg = action_key.partition(":")
    factory = _CHIP_ACTIONS.get(action)
    return factory(arg) if factory is not None else None


def field_row(label: str, widget: Widget) -> Horizontal:
    return Horizontal(Label(label, classes="field-label"), widget, classes="field-row")


class BoardPanel(VerticalScroll):
    """Shared tab layout: header with help toggle, panel controls, then the rows container."""

    TAB: ClassVar[Tab]
    PREFIX: ClassVar[str]
    # input id -> panel event factory, for inputs outside the rows
    PANEL_INPUTS: ClassVar[dict[str, Callable[[str], object]]] = {}

    DEFAULT_CSS = """
    BoardPanel {
        height: 1fr;
        padding: 0 1;
    }
    BoardPanel .panel-header {
        height: 1;
        width: 100%;
    }
    BoardPanel .panel-title {
        width: 1fr;
        text-style: bold;
    }
    BoardPanel .help-box {
        border: round $primary;
        color: $text-muted;
        padding: 0 1;
        margin-bottom: 1;
    }
    BoardPanel .rows, BoardPanel .row, BoardPanel .row-body {
        height: auto;
    }
    BoardPanel .row {
        margin-bottom: 1;
    }
    BoardPanel .row-header {
        height: 1;
        width: 100%;
    }
    BoardPanel .row-body {
        padding-left: 2;
    }
    BoardPanel .field-row {
        height: auto;
        width: 100%;
    }
    BoardPanel .field-label {
        width: 16;
        text-style: bold;
    }
    BoardPanel .section-title {
        text-style: bold;
        margin-top: 1;
    }
    BoardPanel Input {
        width: 1fr;
        height: 1;
        border: none;
        padding: 0;
    }
    BoardPanel Input:focus {
        border: none;
    }
    BoardPanel TextArea {
        height: 8;
    }
    BoardPanel .summary {
        margin-top: 1;
    }
    """

    def __init__(self, window: BoardWindow, **kwargs) -> None:
        super().__init__(**kwargs)
        self._board = window

    # -- frame plumbing ----------------------------------------------------

    def current_view(self) -> PanelView:
        return self._board.panels[self.TAB].view()

    def dispatch(self, *events) -> PanelView:
        return self._board.frame(events, tab=self.TAB).view

    # -- composition -------------------------------------------------------

    def compose(self) -> ComposeResult:
        view = self.current_view()
        with Horizontal(classes="panel-header"):
            yield Static(view.title, classes="panel-title")
            yield ActionChip(" Help ▾ ", action_key="help")
        help_box = Static(self._board.panels[self.TAB].help_text, id=f"{self.PREFIX}-help", classes="help-box")
        help_box.display = view.help_text is not None
        yield help_box
        yield from self.compose_controls(view)
        yield Vertical(*self.row_widgets(view), id=f"{self.PREFIX}-rows", classes="rows")

    def compose_controls(self, view: PanelView) -> Iterable[Widget]:
        return ()

    def row_widgets(self, view: PanelView) -> list[Widget]:
        return []

    async def show(self, view: PanelView) -> None:
        """Bring help box, summary and rows in line with a new view."""
        self.query_one(f"#{self.PREFIX}-help", Static).display = view.help_text is not None
        try:
            self.query_one(f"#{self.PREFIX}-summary", ActionChip).update(
                fold_label(view.summary, view.list_expanded)
            )
        except NoMatches:
            pass
        rows = self.query_one(f"#{self.PREFIX}-rows", Vertical)
        await rows.remove_children()
        await rows.mount_all(self.row_widgets(view))

    # -- id parsing --------------------------------------------------------

    def parse_row_id(self, widget_id: str | None) -> tuple[int, str] | None:
        parts = (widget_id or "").split("-", 2)
        if len(parts) != 3 or parts[0] != self.PREFIX or not parts[1].isdigit():
            return None
        return int(parts[1]), parts[2]

    # -- handlers ----------------------------------------------------------

    async def on_action_chip_pressed(self, event: ActionChip.Pressed) -> None:
        event.stop()
        frame_event = chip_event(event.action_key)
        if frame_event is None:
            logger.debug("Unknown chip action %s", event.action_key)
            return
        await self.show(self.dispatch(frame_event))

    async def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if not event.input.has_focus:
            # Programmatic value changes (mount, snap-back) are not user edits.
            return
        widget_id = event.input.id or ""
        factory = self.PANEL_INPUTS.get(widget_id)
        if factory is not None:
            view = self.dispatch(factory(event.value))
            await self.after_panel_input(widget_id, event.input, view)
            return
        target = self.parse_row_id(widget_id)
        if target is not None:
            index, field = target
            self.dispatch(EditField(index, field, event.value))
            self.after_field_edit(index, field)

    async def after_panel_input(self, widget_id: str, widget: Input, view: PanelView) -> None:
        pass

    def after_field_edit(self, index: int, field: str) -> None:
        """Refresh row widgets derived from the edited field. Rows are not rebuilt."""

    def on_cycle_selector_changed(self, event: CycleSelector.Changed) -> None:
        event.stop()
        target = self.parse_row_id(event.cycle_selector.id)
        if target is None:
            return
        index, field = target
        value = "" if event.value == _NO_SPRITE else event.value
        self.dispatch(EditField(index, field, value))
        self.after_field_edit(index, field)

    def update_fold(self, index: int, label: str, expanded: bool) -> None:
        try:
            chip = self.query_one(f"#{self.PREFIX}-{index}-fold", ActionChip)
        except NoMatches:
            return
        chip.update(fold_label(label, expanded))


def _row_header(prefix: str, index: int, label: str, expanded: bool) -> Horizontal:
    return Horizontal(
        ActionChip(
            fold_label(label, expanded),
            action_key=f"fold:{index}",
            id=f"{prefix}-{index}-fold",
            classes="-fold",
        ),
        ActionChip(" Remove ", action_key=f"remove:{index}", classes="-remove"),
        classes="row-header",
    )


# ─── Button Reference ──────────────────────────────────────────────────


class ButtonReferenceView(BoardPanel):
    TAB = Tab.BUTTON_REFERENCE
    PREFIX = "buttons"

    def compose_controls(self, view: PanelView) -> Iterable[Widget]:
        yield ActionChip(" Add Button ", action_key="add", classes="-add")
        yield ActionChip(" Refresh Textures ", action_key="textures")

    def row_widgets(self, view: PanelView) -> list[Widget]:
        textures = [_NO_SPRITE, *view.controls.get("textures", [])]
        return [self._category_row(row, textures) for row in view.rows]

    def _category_row(self, row: ButtonRow, textures: list[str]) -> Vertical:
        cat = row.category
        p = f"{self.PREFIX}-{row.index}"
        header = _row_header(self.PREFIX, row.index, cat.name, cat.expanded)
        if not cat.expanded:
            return Vertical(header, classes="row")

        body: list[Widget] = [
            Static(panel_renderers.render_button_preview(row.visual), id=f"{p}-preview"),
            Static(panel_renderers.render_preview_caption(row.visual), id=f"{p}-caption"),
            field_row("Name", Input(cat.name, id=f"{p}-name")),
            field_row("Button Text", Input(cat.text, id=f"{p}-text")),
            field_row("Width", Input(f"{cat.width:g}", id=f"{p}-width")),
            field_row("Height", Input(f"{cat.height:g}", id=f"{p}-height")),
            field_row(
                "State",
                CycleSelector(
                    [s.value for s in SimulatedState],
                    value=cat.simulated_state.value,
                    id=f"{p}-simulated_state",
                ),
            ),
            field_row(
                "Visual Mode",
                CycleSelector(
                    [m.value for m in VisualMode],
                    value=cat.visual_mode.value,
                    id=f"{p}-visual_mode",
                ),
            ),
            Static("State Colors", classes="section-title"),
        ]
        for state in SimulatedState:
            body.append(field_row(
                state.value,
                Input("#" + cat.color_for(state).to_html_rgba(), id=f"{p}-{color_field(state)}"),
            ))
        body.append(Static("State Sprites", classes="section-title"))
        for state in SimulatedState:
            current = cat.sprite_path_for(state) or _NO_SPRITE
            options = textures if current in textures else [*textures, current]
            body.append(field_row(
                state.value,
                CycleSelector(options, value=current, id=f"{p}-{sprite_field(state)}"),
            ))
        return Vertical(header, Vertical(*body, classes="row-body"), classes="row")

    def after_field_edit(self, index: int, field: str) -> None:
        view = self.current_view()
        if index >= len(view.rows):
            return
        row = view.rows[index]
        p = f"{self.PREFIX}-{index}"
        try:
            self.query_one(f"#{p}-preview", Static).update(
                panel_renderers.render_button_preview(row.visual)
            )
            self.query_one(f"#{p}-caption", Static).update(
                panel_renderers.render_preview_caption(row.visual)
            )
        except NoMatches:
            pass
        if field == "name":
            self.update_fold(index, row.category.name, row.category.expanded)


# ─── Font Preview ──────────────────────────────────────────────────────


class FontPreviewView(BoardPanel):
    TAB = Tab.FONT_PREVIEW
    PREFIX = "fonts"
    PANEL_INPUTS = {
        "fonts-preview_text": SetPreviewText,
        "fonts-filter": SetFilter,
    }

    def compose_controls(self, view: PanelView) -> Iterable[Widget]:
        yield Static("Preview Settings", classes="section-title")
        yield field_row("Preview Text", Input(view.controls["preview_text"], id="fonts-preview_text"))
        yield field_row("Filter by Name", Input(view.controls["filter_text"], id="fonts-filter"))
        yield ActionChip(" Refresh List ", action_key="refresh", classes="-add")
        yield ActionChip(
            fold_label(view.summary, view.list_expanded),
            action_key="list",
            id="fonts-summary",
            classes="-fold summary",
        )

    def row_widgets(self, view: PanelView) -> list[Widget]:
        return [self._font_row(row) for row in view.rows]

    def _font_row(self, row: FontRow) -> Vertical:
        path = getattr(row.font.asset, "path", row.font.name)
        return Vertical(
            Static(panel_renderers.render_font_header(row.font.name, row.font.family)),
            Static(row.preview_text),
            ActionChip(" Select Font Asset ", action_key=f"select:{path}"),
            classes="row",
        )

    async def after_panel_input(self, widget_id: str, widget: Input, view: PanelView) -> None:
        if widget_id == "fonts-preview_text" and widget.value != view.controls["preview_text"]:
            # Cleared text snaps back to the pangram.
            widget.value = view.controls["preview_text"]
        await self.show(view)


# ─── Color Manager ─────────────────────────────────────────────────────


class ColorManagerView(BoardPanel):
    TAB = Tab.COLOR_MANAGER
    PREFIX = "colors"
    PANEL_INPUTS = {
        "colors-scratch_name": SetScratchName,
        "colors-scratch_color": SetScratchColor,
    }

    def compose_controls(self, view: PanelView) -> Iterable[Widget]:
        scratch: Color = view.controls["scratch_color"]
        yield Static("Add New Color", classes="section-title")
        yield field_row("Color Name", Input(view.controls["scratch_name"], id="colors-scratch_name"))
        yield field_row("New Color", Input("#" + scratch.to_html_rgba(), id="colors-scratch_color"))
        yield Static(panel_renderers.render_swatch(scratch, 8), id="colors-scratch_swatch")
        yield ActionChip(" Add Color ", action_key="add", classes="-add")
        yield ActionChip(
            fold_label(view.summary, view.list_expanded),
            action_key="list",
            id="colors-summary",
            classes="-fold summary",
        )

    def row_widgets(self, view: PanelView) -> list[Widget]:
        return [self._color_row(row) for row in view.rows]

    def _color_row(self, row: ColorRow) -> Horizontal:
        p = f"{self.PREFIX}-{row.index}"
        return Horizontal(
            Input(row.entry.name, id=f"{p}-name"),
            Input("#" + row.entry.color.to_html_rgba(), id=f"{p}-color"),
            Static(panel_renderers.render_swatch(row.entry.color), id=f"{p}-swatch"),
            Static(panel_renderers.render_hex(row.hex), id=f"{p}-hex"),
            ActionChip(" Copy ", action_key=f"copy:{row.index}"),
            ActionChip(" Delete ", action_key=f"remove:{row.index}", classes="-remove"),
            classes="row field-row",
        )

    async def after_panel_input(self, widget_id: str, widget: Input, view: PanelView) -> None:
        if widget_id == "colors-scratch_color":
            self.query_one("#colors-scratch_swatch", Static).update(
                panel_renderers.render_swatch(view.controls["scratch_color"], 8)
            )

    def after_field_edit(self, index: int, field: str) -> None:
        if field != "color":
            return
        entries = self._board.colors.entries
        if index >= len(entries):
            return
        color = entries[index].color
        p = f"{self.PREFIX}-{index}"
        try:
            self.query_one(f"#{p}-swatch", Static).update(panel_renderers.render_swatch(color))
            self.query_one(f"#{p}-hex", Static).update(panel_renderers.render_hex(color.to_html_rgb()))
        except NoMatches:
            pass


# ─── Notes ─────────────────────────────────────────────────────────────


class NotesView(BoardPanel):
    TAB = Tab.NOTES
    PREFIX = "notes"

    def compose_controls(self, view: PanelView) -> Iterable[Widget]:
        yield ActionChip(" Add Note ", action_key="add", classes="-add")

    def row_widgets(self, view: PanelView) -> list[Widget]:
        return [self._note_row(row) for row in view.rows]

    def _note_row(self, row: NoteRow) -> Vertical:
        note = row.note
        p = f"{self.PREFIX}-{row.index}"
        header = _row_header(self.PREFIX, row.index, note.title, note.expanded)
        if not note.expanded:
            return Vertical(header, classes="row")
        return Vertical(
            header,
            Vertical(
                field_row("Title", Input(note.title, id=f"{p}-title")),
                Static("Content", classes="section-title"),
                TextArea(note.content, id=f"{p}-content"),
                classes="row-body",
            ),
            classes="row",
        )

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        event.stop()
        if not event.text_area.has_focus:
            return
        target = self.parse_row_id(event.text_area.id)
        if target is None:
            return
        index, field = target
        self.dispatch(EditField(index, field, event.text_area.text))

    def after_field_edit(self, index: int, field: str) -> None:
        if field != "title":
            return
        entries = self._board.notes.entries
        if index < len(entries):
            self.update_fold(index, entries[index].title, entries[index].expanded)


# [LAW:one-source-of-truth] Tab -> widget class, in tab order.
PANEL_VIEWS: dict[Tab, type[BoardPanel]] = {
    Tab.BUTTON_REFERENCE: ButtonReferenceView,
    Tab.FONT_PREVIEW: FontPreviewView,
    Tab.COLOR_MANAGER: ColorManagerView,
    Tab.NOTES: NotesView,
}
