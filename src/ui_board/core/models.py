"""Entry records for the four board panels.

Pure data + dict codecs, no widget deps. Missing keys in a stored dict take
the field default; wrong types raise TypeError/ValueError and are handled by
the persistence layer.

// [LAW:one-source-of-truth] Entry defaults live on the dataclass fields.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ui_board.core.colors import Color


class SimulatedState(Enum):
    NORMAL = "Normal"
    HOVER = "Hover"
    PRESSED = "Pressed"
    SELECTED = "Selected"
    DISABLED = "Disabled"


class VisualMode(Enum):
    COLOR = "Color"
    SPRITE = "Sprite"


# [LAW:one-source-of-truth] State -> field-name prefix. Colors are "<prefix>_color",
# sprite paths are "<prefix>_sprite_path".
STATE_FIELD_PREFIX: dict[SimulatedState, str] = {
    SimulatedState.NORMAL: "normal",
    SimulatedState.HOVER: "hover",
    SimulatedState.PRESSED: "pressed",
    SimulatedState.SELECTED: "selected",
    SimulatedState.DISABLED: "disabled",
}


def color_field(state: SimulatedState) -> str:
    return STATE_FIELD_PREFIX[state] + "_color"


def sprite_field(state: SimulatedState) -> str:
    return STATE_FIELD_PREFIX[state] + "_sprite_path"


def parse_enum(enum_type, raw, default):
    if raw is None:
        return default
    if isinstance(raw, enum_type):
        return raw
    for member in enum_type:
        if raw in (member.value, member.name):
            return member
    raise ValueError("unknown {}: {!r}".format(enum_type.__name__, raw))


def _optional_str(raw) -> str | None:
    if raw is None or raw == "":
        return None
    if not isinstance(raw, str):
        raise TypeError("expected string, got {}".format(type(raw).__name__))
    return raw


def _str(raw, default: str) -> str:
    if raw is None:
        return default
    if not isinstance(raw, str):
        raise TypeError("expected string, got {}".format(type(raw).__name__))
    return raw


def _bool(raw, default: bool) -> bool:
    if raw is None:
        return default
    if not isinstance(raw, bool):
        raise TypeError("expected bool, got {}".format(type(raw).__name__))
    return raw


def parse_positive_float(raw, default: float) -> float:
    if raw is None:
        return default
    value = float(raw)
    if not (math.isfinite(value) and value > 0):
        raise ValueError("dimension must be finite and > 0, got {}".format(value))
    return value


@dataclass
class ButtonCategory:
    """One button configuration previewed in a simulated state."""

    name: str = "New Category"
    expanded: bool = True
    simulated_state: SimulatedState = SimulatedState.NORMAL
    visual_mode: VisualMode = VisualMode.COLOR
    width: float = 200.0
    height: float = 50.0
    text: str = "Reference Button"
    normal_color: Color = Color(0.8, 0.8, 0.8, 1.0)
    hover_color: Color = Color(1.0, 1.0, 1.0, 1.0)
    pressed_color: Color = Color(0.6, 0.6, 0.6, 1.0)
    selected_color: Color = Color(0.4, 0.7, 1.0, 1.0)
    disabled_color: Color = Color(0.5, 0.5, 0.5, 1.0)
    normal_sprite_path: str | None = None
    hover_sprite_path: str | None = None
    pressed_sprite_path: str | None = None
    selected_sprite_path: str | None = None
    disabled_sprite_path: str | None = None
    # Resolved sprite handles, memory only.
    sprites: dict[SimulatedState, Any] = field(
        default_factory=dict, compare=False, repr=False
    )

    def color_for(self, state: SimulatedState) -> Color:
        return getattr(self, color_field(state))

    def sprite_path_for(self, state: SimulatedState) -> str | None:
        return getattr(self, sprite_field(state))

    def to_dict(self) -> dict:
        payload: dict[str, object] = {
            "name": self.name,
            "expanded": self.expanded,
            "simulated_state": self.simulated_state.value,
            "visual_mode": self.visual_mode.value,
            "width": self.width,
            "height": self.height,
            "text": self.text,
        }
        for state in SimulatedState:
            payload[color_field(state)] = self.color_for(state).to_dict()
            payload[sprite_field(state)] = self.sprite_path_for(state) or ""
        return payload

    @classmethod
    def from_dict(cls, d: dict) -> ButtonCategory:
        if not isinstance(d, dict):
            raise TypeError("category must be an object, got {}".format(type(d).__name__))
        defaults = cls()
        kwargs: dict[str, object] = {
            "name": _str(d.get("name"), defaults.name),
            "expanded": _bool(d.get("expanded"), defaults.expanded),
            "simulated_state": parse_enum(
                SimulatedState, d.get("simulated_state"), defaults.simulated_state
            ),
            "visual_mode": parse_enum(VisualMode, d.get("visual_mode"), defaults.visual_mode),
            "width": parse_positive_float(d.get("width"), defaults.width),
            "height": parse_positive_float(d.get("height"), defaults.height),
            "text": _str(d.get("text"), defaults.text),
        }
        for state in SimulatedState:
            raw_color = d.get(color_field(state))
            kwargs[color_field(state)] = (
                Color.from_dict(raw_color) if raw_color is not None
                else defaults.color_for(state)
            )
            kwargs[sprite_field(state)] = _optional_str(d.get(sprite_field(state)))
        return cls(**kwargs)


@dataclass
class ColorEntry:
    """A named color."""

    name: str = ""
    color: Color = Color(1.0, 1.0, 1.0, 1.0)

    def to_dict(self) -> dict:
        return {"name": self.name, "color": self.color.to_dict()}

    @classmethod
    def from_dict(cls, d: dict) -> ColorEntry:
        if not isinstance(d, dict):
            raise TypeError("color entry must be an object, got {}".format(type(d).__name__))
        raw_color = d.get("color")
        return cls(
            name=_str(d.get("name"), ""),
            color=Color.from_dict(raw_color) if raw_color is not None else cls().color,
        )


@dataclass
class NoteEntry:
    title: str = "New Note"
    content: str = ""
    expanded: bool = True

    def to_dict(self) -> dict:
        return {"title": self.title, "content": self.content, "expanded": self.expanded}

    @classmethod
    def from_dict(cls, d: dict) -> NoteEntry:
        if not isinstance(d, dict):
            raise TypeError("note must be an object, got {}".format(type(d).__name__))
        return cls(
            title=_str(d.get("title"), "New Note"),
            content=_str(d.get("content"), ""),
            expanded=_bool(d.get("expanded"), True),
        )


@dataclass(frozen=True)
class FontRef:
    """Font snapshot from the last asset scan. Not persisted."""

    name: str
    asset: Any
    family: str | None = None
