"""Clickable chip widgets — lightweight text buttons for board rows.

Chips render as plain bold text (no borders, no half-block chrome), so a row
with a foldout, a few actions and inputs still fits on one terminal line.
"""

from textual.message import Message
from textual.widgets import Static


class ActionChip(Static):
    """Focusable chip that posts Pressed(action_key) on click, Enter or Space.

    The action key is a string the owning panel parses, e.g. "remove:3".
    """

    ALLOW_SELECT = False
    can_focus = True

    DEFAULT_CSS = """
    ActionChip {
        width: auto;
        height: 1;
        margin-right: 1;
        text-style: bold;
        background: $panel-lighten-2;
        color: $text;
    }

    ActionChip:hover {
        background: $panel-lighten-1;
    }

    ActionChip:focus {
        text-style: bold underline;
        background: $panel-lighten-1;
    }

    ActionChip.-add {
        background: $success-darken-1;
    }

    ActionChip.-add:hover {
        background: $success;
    }

    ActionChip.-remove {
        background: $error-darken-1;
    }

    ActionChip.-remove:hover {
        background: $error;
    }

    ActionChip.-fold {
        background: $surface;
        width: 1fr;
    }
    """

    class Pressed(Message):
        def __init__(self, chip: "ActionChip", action_key: str) -> None:
            self.chip = chip
            self.action_key = action_key
            super().__init__()

    def __init__(self, label: str, *, action_key: str, **kwargs) -> None:
        super().__init__(label, **kwargs)
        self.action_key = action_key

    def _emit(self) -> None:
        self.post_message(self.Pressed(self, self.action_key))

    async def on_click(self, event) -> None:
        event.stop()
        self._emit()

    def on_key(self, event) -> None:
        if event.key in ("enter", "space"):
            event.stop()
            event.prevent_default()
            self._emit()


def fold_label(label: str, expanded: bool) -> str:
    """Foldout header text: ▾ when open, ▸ when closed."""
    return "{} {}".format("▾" if expanded else "▸", label)
