"""Button-state preview resolution.

// [LAW:dataflow-not-control-flow] State -> field lookup is data (models.STATE_FIELD_PREFIX),
// not a branch per state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ui_board.core.colors import Color
from ui_board.core.models import ButtonCategory, SimulatedState, VisualMode

SpriteLoader = Callable[[str], Any]


@dataclass(frozen=True)
class ButtonVisual:
    """What the preview surface shows this frame."""

    mode: VisualMode
    state: SimulatedState
    width: float
    height: float
    text: str
    color: Color | None = None
    sprite: Any = None


def resolve_sprite(category: ButtonCategory, state: SimulatedState, load_sprite: SpriteLoader) -> Any:
    """Cached sprite handle for one state, resolving it from its path on first use.

    A path that does not resolve is not cached, so it is tried again next render.
    """
    cached = category.sprites.get(state)
    if cached is not None:
        return cached
    path = category.sprite_path_for(state)
    if not path:
        return None
    handle = load_sprite(path)
    if handle is not None:
        category.sprites[state] = handle
    return handle


def resolve_button_visual(category: ButtonCategory, load_sprite: SpriteLoader) -> ButtonVisual:
    state = category.simulated_state
    base = dict(
        mode=category.visual_mode,
        state=state,
        width=category.width,
        height=category.height,
        text=category.text,
    )
    if category.visual_mode is VisualMode.SPRITE:
        return ButtonVisual(sprite=resolve_sprite(category, state, load_sprite), **base)
    return ButtonVisual(color=category.color_for(state), **base)
