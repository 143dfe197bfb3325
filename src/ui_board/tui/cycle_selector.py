"""Compact inline cycle selector — a one-line dropdown alternative.

Renders as ◂ value ▸. Clicking the left arrow or pressing Left steps back;
clicking elsewhere, Right, Enter or Space steps forward. Wraps around.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from rich.text import Text
from textual.message import Message
from textual.widget import Widget

_ARROW_PREV = "◂"
_ARROW_NEXT = "▸"

# [LAW:dataflow-not-control-flow] Key -> step as data.
_KEY_STEPS: dict[str, int] = {
    "left": -1,
    "right": +1,
    "enter": +1,
    "space": +1,
}


class CycleSelector(Widget, can_focus=True):
    """Single-select option cycler.

    // [LAW:one-source-of-truth] _options is the canonical option list,
    // _index the canonical selection. .value is derived.
    """

    ALLOW_SELECT: ClassVar[bool] = False

    DEFAULT_CSS = """
    CycleSelector {
        width: auto;
        height: 1;
        text-style: bold;
        background: $panel-lighten-2;
        color: $text;
    }

    CycleSelector:hover {
        background: $surface-darken-1;
    }

    CycleSelector:focus {
        text-style: bold underline;
        background: $surface-darken-1;
    }
    """

    class Changed(Message):
        """Posted when the selected value changes."""

        def __init__(self, cycle_selector: CycleSelector, value: str, index: int) -> None:
            self.cycle_selector = cycle_selector
            self.value = value
            self.index = index
            super().__init__()

        @property
        def control(self) -> CycleSelector:
            return self.cycle_selector

    def __init__(
        self,
        options: Sequence[str],
        *,
        value: str | None = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes, disabled=disabled)
        self._options: list[str] = list(options) or [""]
        self._index: int = (
            self._options.index(value)
            if value is not None and value in self._options
            else 0
        )

    @property
    def value(self) -> str:
        return self._options[self._index]

    @property
    def index(self) -> int:
        return self._index

    def render(self) -> Text:
        return Text(f" {_ARROW_PREV} {self.value} {_ARROW_NEXT} ")

    def step(self, delta: int) -> None:
        old_index = self._index
        self._index = (self._index + delta) % len(self._options)
        self.refresh(layout=True)
        if self._index != old_index:
            self.post_message(self.Changed(self, self.value, self._index))

    def on_click(self, event) -> None:
        if self.disabled:
            return
        event.stop()
        # " ◂ " occupies the first three cells.
        self.step(-1 if event.x < 3 else +1)

    def on_key(self, event) -> None:
        if self.disabled:
            return
        delta = _KEY_STEPS.get(event.key)
        if delta is None:
            return
        event.stop()
        event.prevent_default()
        self.step(delta)
