"""Panel controllers — one per board tab.

Each controller owns its entry list and exposes frame(events), which applies
the frame's events and returns (view, effects). Row events are applied while
walking the list by index; removals are collected during the walk and
applied after it.

Persistence policy: add/remove emit Persist so the list is written through
immediately. Field edits only change memory and are flushed when the window
closes.

// [LAW:one-type-per-behavior] ListPanel carries the shared list-editor frame;
// subclasses supply entry defaults, field coercion and row views.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Generic, Iterable, TypeVar

from ui_board.app import persistence
from ui_board.app.events import (
    AddEntry,
    CopyHex,
    CopyToClipboard,
    EditField,
    Persist,
    RefreshFonts,
    RefreshTextures,
    RemoveEntry,
    RowEvent,
    SelectAsset,
    SelectFont,
    SetFilter,
    SetPreviewText,
    SetScratchColor,
    SetScratchName,
    ToggleExpanded,
    ToggleHelp,
    ToggleList,
)
from ui_board.core.colors import WHITE, Color
from ui_board.core.fonts import DEFAULT_PREVIEW_TEXT, filter_fonts, normalize_preview_text
from ui_board.core.list_editor import EditPass
from ui_board.core.models import (
    ButtonCategory,
    ColorEntry,
    FontRef,
    NoteEntry,
    SimulatedState,
    VisualMode,
    color_field,
    parse_enum,
    parse_positive_float,
    sprite_field,
)
from ui_board.core.preview import ButtonVisual, resolve_button_visual
from ui_board.io.assets import AssetIndex, AssetType
from ui_board.io.prefs import PreferenceStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ─── Views ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class PanelView:
    """Render model for one tab."""

    title: str
    help_text: str | None          # None while the help box is hidden
    rows: tuple = ()
    summary: str = ""
    list_expanded: bool = True
    controls: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class PanelFrame:
    view: PanelView
    effects: tuple = ()


@dataclass(frozen=True)
class ButtonRow:
    index: int
    category: ButtonCategory
    visual: ButtonVisual


@dataclass(frozen=True)
class NoteRow:
    index: int
    note: NoteEntry


@dataclass(frozen=True)
class ColorRow:
    index: int
    entry: ColorEntry
    hex: str


@dataclass(frozen=True)
class FontRow:
    font: FontRef
    preview_text: str


# ─── Field coercion ────────────────────────────────────────────────────


def _as_str(value) -> str:
    return "" if value is None else str(value)


def _as_color(value) -> Color:
    if isinstance(value, Color):
        return value
    return Color.parse_html(value)


def _as_sprite_path(value) -> str | None:
    text = _as_str(value).strip()
    return text or None


# ─── Shared list editor ────────────────────────────────────────────────


class ListPanel(Generic[T]):
    """Add / edit-in-place / deferred-remove list editor bound to one preference key."""

    title: ClassVar[str] = ""
    help_text: ClassVar[str] = ""
    # field name -> coercion; raising ValueError/TypeError rejects the edit
    FIELDS: ClassVar[dict[str, Callable[[Any], Any]]] = {}

    def __init__(self, adapter: persistence.CollectionAdapter[T]):
        self.adapter = adapter
        self.entries: list[T] = []
        self.show_help = False

    # -- persistence ------------------------------------------------------

    def load(self, prefs: PreferenceStore) -> None:
        self.entries = self.adapter.load(prefs)

    def save(self, prefs: PreferenceStore) -> None:
        self.adapter.save(prefs, self.entries)

    # -- hooks ------------------------------------------------------------

    def new_entry(self) -> T:
        raise NotImplementedError

    def row_view(self, index: int, entry: T):
        raise NotImplementedError

    def apply_panel_event(self, event, effects: list) -> bool:
        """Handle a non-row event. Returns True when the list structure changed."""
        if isinstance(event, ToggleHelp):
            self.show_help = not self.show_help
            return False
        if isinstance(event, AddEntry):
            self.entries.append(self.new_entry())
            return True
        logger.debug("%s ignores %r", type(self).__name__, event)
        return False

    def apply_row_event(self, entry: T, event: RowEvent, effects: list) -> None:
        if isinstance(event, ToggleExpanded) and hasattr(entry, "expanded"):
            entry.expanded = not entry.expanded
        elif isinstance(event, EditField):
            self.edit_field(entry, event.field, event.value)
        else:
            logger.debug("%s ignores %r", type(self).__name__, event)

    def edit_field(self, entry: T, name: str, value) -> None:
        coerce = self.FIELDS.get(name)
        if coerce is None:
            logger.debug("Unknown field %s on %s", name, type(entry).__name__)
            return
        try:
            coerced = coerce(value)
        except (ValueError, TypeError):
            logger.debug("Rejected %s=%r on %s", name, value, type(entry).__name__)
            return
        setattr(entry, name, coerced)

    # -- frame ------------------------------------------------------------

    def frame(self, events: Iterable = ()) -> PanelFrame:
        effects: list = []
        structural = False
        row_events: dict[int, list[RowEvent]] = defaultdict(list)

        for event in events:
            if isinstance(event, RowEvent):
                row_events[event.index].append(event)
            else:
                structural = self.apply_panel_event(event, effects) or structural

        # [LAW:single-enforcer] Rows are only deleted by edit_pass.apply, after the walk.
        edit_pass = EditPass()
        for index, entry in enumerate(self.entries):
            for event in row_events.pop(index, ()):
                if isinstance(event, RemoveEntry):
                    edit_pass.mark_removed(index)
                else:
                    self.apply_row_event(entry, event, effects)
        for index in row_events:
            logger.debug("%s: no row at index %d", type(self).__name__, index)

        if edit_pass.structural:
            edit_pass.apply(self.entries)
            structural = True
        if structural:
            effects.append(Persist(self.adapter.key))
        return PanelFrame(view=self.view(), effects=tuple(effects))

    def view(self) -> PanelView:
        return PanelView(
            title=self.title,
            help_text=self.help_text if self.show_help else None,
            rows=tuple(self.row_view(i, entry) for i, entry in enumerate(self.entries)),
        )


# ─── Button Reference ──────────────────────────────────────────────────


def _category_fields() -> dict[str, Callable[[Any], Any]]:
    fields: dict[str, Callable[[Any], Any]] = {
        "name": _as_str,
        "text": _as_str,
        "width": lambda v: parse_positive_float(v, 200.0),
        "height": lambda v: parse_positive_float(v, 50.0),
        "simulated_state": lambda v: parse_enum(SimulatedState, v, SimulatedState.NORMAL),
        "visual_mode": lambda v: parse_enum(VisualMode, v, VisualMode.COLOR),
    }
    for state in SimulatedState:
        fields[color_field(state)] = _as_color
        fields[sprite_field(state)] = _as_sprite_path
    return fields


# [LAW:one-source-of-truth] sprite field name -> state, for cache invalidation
_SPRITE_FIELD_STATES = {sprite_field(state): state for state in SimulatedState}


class ButtonReferencePanel(ListPanel[ButtonCategory]):
    title = "Button Reference"
    help_text = (
        "Create multiple button categories and preview their states "
        "with color or sprite customization."
    )
    FIELDS = _category_fields()

    def __init__(self, assets: AssetIndex | None = None):
        super().__init__(persistence.CATEGORIES)
        self._assets = assets
        # Texture paths from the last scan; refreshed on open and on request.
        self.textures: list[str] = []

    def new_entry(self) -> ButtonCategory:
        return ButtonCategory()

    def load_sprite(self, path: str):
        """Texture metadata for a stored sprite path, or None if it no longer resolves."""
        if self._assets is None:
            return None
        asset = self._assets.load_asset(path, AssetType.TEXTURE)
        if asset is None:
            return None
        return self._assets.describe_texture(asset)

    def refresh_textures(self) -> None:
        """Replace the texture cache wholesale from the asset index."""
        if self._assets is None:
            self.textures = []
            return
        self.textures = [asset.path for asset in self._assets.find_assets(AssetType.TEXTURE)]
        logger.info("Texture scan found %d textures", len(self.textures))

    def apply_panel_event(self, event, effects: list) -> bool:
        if isinstance(event, RefreshTextures):
            self.refresh_textures()
            return False
        return super().apply_panel_event(event, effects)

    def edit_field(self, entry: ButtonCategory, name: str, value) -> None:
        super().edit_field(entry, name, value)
        state = _SPRITE_FIELD_STATES.get(name)
        if state is not None:
            entry.sprites.pop(state, None)

    def row_view(self, index: int, entry: ButtonCategory) -> ButtonRow:
        return ButtonRow(index=index, category=entry, visual=resolve_button_visual(entry, self.load_sprite))

    def view(self) -> PanelView:
        base = super().view()
        return PanelView(
            title=base.title,
            help_text=base.help_text,
            rows=base.rows,
            controls={"textures": list(self.textures)},
        )


# ─── Notes ─────────────────────────────────────────────────────────────


class NotesPanel(ListPanel[NoteEntry]):
    title = "Notes"
    help_text = "Add titled notes. Use 'Add Note' to create new entries and remove as needed."
    FIELDS = {"title": _as_str, "content": _as_str}

    def __init__(self):
        super().__init__(persistence.NOTES)

    def new_entry(self) -> NoteEntry:
        return NoteEntry()

    def row_view(self, index: int, entry: NoteEntry) -> NoteRow:
        return NoteRow(index=index, note=entry)


# ─── Color Manager ─────────────────────────────────────────────────────


class ColorManagerPanel(ListPanel[ColorEntry]):
    title = "Color Manager"
    help_text = "Manage named colors, export them as hex and copy them to the clipboard."
    FIELDS = {"name": _as_str, "color": _as_color}

    def __init__(self):
        super().__init__(persistence.COLORS)
        self.scratch_name = ""
        self.scratch_color: Color = WHITE
        self.show_list = True

    def new_entry(self) -> ColorEntry:
        # Scratch inputs are left as they are after an add.
        return ColorEntry(name=self.scratch_name, color=self.scratch_color)

    def apply_panel_event(self, event, effects: list) -> bool:
        if isinstance(event, SetScratchName):
            self.scratch_name = _as_str(event.name)
            return False
        if isinstance(event, SetScratchColor):
            try:
                self.scratch_color = _as_color(event.color)
            except (ValueError, TypeError):
                logger.debug("Rejected scratch color %r", event.color)
            return False
        if isinstance(event, ToggleList):
            self.show_list = not self.show_list
            return False
        return super().apply_panel_event(event, effects)

    def apply_row_event(self, entry: ColorEntry, event: RowEvent, effects: list) -> None:
        if isinstance(event, CopyHex):
            effects.append(CopyToClipboard("#" + entry.color.to_html_rgb()))
            return
        super().apply_row_event(entry, event, effects)

    def row_view(self, index: int, entry: ColorEntry) -> ColorRow:
        return ColorRow(index=index, entry=entry, hex=entry.color.to_html_rgb())

    def view(self) -> PanelView:
        base = super().view()
        return PanelView(
            title=base.title,
            help_text=base.help_text,
            rows=base.rows if self.show_list else (),
            summary="Saved Colors: {}".format(len(self.entries)),
            list_expanded=self.show_list,
            controls={"scratch_name": self.scratch_name, "scratch_color": self.scratch_color},
        )


# ─── Font Preview ──────────────────────────────────────────────────────


class FontPreviewPanel:
    """Font scan + filter + preview. The font list is a cache, never persisted."""

    title = "Font Preview"
    help_text = "Scan all font assets, preview custom text, filter by name, and select fonts."

    def __init__(self, assets: AssetIndex | None = None):
        self._assets = assets
        self.fonts: list[FontRef] = []
        self.preview_text = DEFAULT_PREVIEW_TEXT
        self.filter_text = ""
        self.show_help = False
        self.show_list = True

    def load(self, prefs: PreferenceStore) -> None:
        self.preview_text = normalize_preview_text(
            prefs.get_string(persistence.PREF_KEY_PREVIEW_TEXT, DEFAULT_PREVIEW_TEXT)
        )

    def save(self, prefs: PreferenceStore) -> None:
        prefs.set_string(persistence.PREF_KEY_PREVIEW_TEXT, normalize_preview_text(self.preview_text))

    def refresh(self) -> None:
        """Replace the font cache wholesale from the asset index."""
        if self._assets is None:
            self.fonts = []
            return
        self.fonts = [
            FontRef(name=asset.name, asset=asset, family=self._assets.font_family(asset))
            for asset in self._assets.find_assets(AssetType.FONT)
        ]
        logger.info("Font scan found %d fonts", len(self.fonts))

    def _find(self, path: str) -> FontRef | None:
        for font in self.fonts:
            if getattr(font.asset, "path", None) == path:
                return font
        return None

    def frame(self, events: Iterable = ()) -> PanelFrame:
        effects: list = []
        for event in events:
            if isinstance(event, SetPreviewText):
                self.preview_text = normalize_preview_text(event.text)
            elif isinstance(event, SetFilter):
                self.filter_text = _as_str(event.text)
            elif isinstance(event, RefreshFonts):
                self.refresh()
            elif isinstance(event, SelectFont):
                font = self._find(event.path)
                if font is not None:
                    effects.append(SelectAsset(font.asset))
            elif isinstance(event, ToggleHelp):
                self.show_help = not self.show_help
            elif isinstance(event, ToggleList):
                self.show_list = not self.show_list
            else:
                logger.debug("FontPreviewPanel ignores %r", event)
        return PanelFrame(view=self.view(), effects=tuple(effects))

    def view(self) -> PanelView:
        rows = (
            tuple(FontRow(font=font, preview_text=self.preview_text)
                  for font in filter_fonts(self.fonts, self.filter_text))
            if self.show_list else ()
        )
        return PanelView(
            title=self.title,
            help_text=self.help_text if self.show_help else None,
            rows=rows,
            summary="Fonts Found: {}".format(len(self.fonts)),
            list_expanded=self.show_list,
            controls={"preview_text": self.preview_text, "filter_text": self.filter_text},
        )
