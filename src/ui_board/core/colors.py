"""RGBA color value and HTML hex conversion.

Channels are floats in 0..1. Hex export clamps and rounds each channel to
the nearest 8-bit value, so decode(encode(c)) matches c to within 1/255.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8}")


def _to_byte(channel: float) -> int:
    return int(round(max(0.0, min(1.0, float(channel))) * 255))


@dataclass(frozen=True)
class Color:
    """Four-channel float color."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def to_html_rgb(self) -> str:
        """Six uppercase hex digits, alpha dropped: Color(1, 0, 0) -> 'FF0000'."""
        return "{:02X}{:02X}{:02X}".format(
            _to_byte(self.r), _to_byte(self.g), _to_byte(self.b)
        )

    def to_html_rgba(self) -> str:
        return self.to_html_rgb() + "{:02X}".format(_to_byte(self.a))

    def to_rich(self) -> str:
        """#RRGGBB form accepted by rich styles."""
        return "#" + self.to_html_rgb()

    def to_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, d: dict) -> Color:
        if not isinstance(d, dict):
            raise TypeError("color must be an object, got {}".format(type(d).__name__))
        return cls(
            r=float(d.get("r", 0.0)),
            g=float(d.get("g", 0.0)),
            b=float(d.get("b", 0.0)),
            a=float(d.get("a", 1.0)),
        )

    @classmethod
    def parse_html(cls, text: str) -> Color:
        """Parse #RGB, #RRGGBB or #RRGGBBAA (leading # optional).

        Raises ValueError on anything else.
        """
        raw = str(text or "").strip().lstrip("#")
        if not _HEX_DIGITS.fullmatch(raw):
            raise ValueError("not an HTML color: {!r}".format(text))
        if len(raw) == 3:
            raw = "".join(ch * 2 for ch in raw)
        channels = [int(raw[i:i + 2], 16) / 255.0 for i in range(0, len(raw), 2)]
        if len(channels) == 3:
            channels.append(1.0)
        return cls(*channels)


WHITE = Color(1.0, 1.0, 1.0, 1.0)
