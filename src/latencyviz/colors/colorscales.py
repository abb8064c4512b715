"""Named color ramps: an ordered foreground palette plus a background color.

Palettes run from low to high values. The background color is reserved for
zero-valued cells (empty heat-map areas).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from latencyviz.errors import InvalidInputError


@dataclass(frozen=True)
class ColorRamp:
    """Ordered foreground colors (low -> high) and the zero/background color."""
    foreground: tuple[str, ...]
    background: str


class ColorRampScheme(Enum):
    """Available color ramps (ColorBrewer sequential palettes)."""

    DEFAULT = ColorRamp(
        ("#FEE6CE", "#FDD0A2", "#FDAE6B", "#FD8D3C", "#F16913", "#D94801", "#A63603", "#7F2704"),
        "#FFFFFF",
    )
    GREEN = ColorRamp(
        ("#E5F5E0", "#C7E9C0", "#A1D99B", "#74C476", "#41AB5D", "#238B45", "#006D2C", "#00441B"),
        "#FFFFFF",
    )
    BLUE = ColorRamp(
        ("#DEEBF7", "#C6DBEF", "#9ECAE1", "#6BAED6", "#4292C6", "#2171B5", "#08519C", "#08306B"),
        "#FFFFFF",
    )
    RED = ColorRamp(
        ("#FEE0D2", "#FCBBA1", "#FC9272", "#FB6A4A", "#EF3B2C", "#CB181D", "#A50F15", "#67000D"),
        "#FFFFFF",
    )
    GRAY = ColorRamp(
        ("#F0F0F0", "#D9D9D9", "#BDBDBD", "#969696", "#737373", "#525252", "#252525", "#000000"),
        "#FFFFFF",
    )

    @property
    def foreground_colors(self) -> tuple[str, ...]:
        return self.value.foreground

    @property
    def background_color(self) -> str:
        return self.value.background

    @classmethod
    def from_name(cls, name: str) -> "ColorRampScheme":
        """Look up a scheme by (case-insensitive) name."""
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            valid = ", ".join(m.name for m in cls)
            raise InvalidInputError(f"Unknown color ramp scheme {name!r}; expected one of {valid}") from None

    def to_plotly_colorscale(self) -> List[List[object]]:
        """Stepped Plotly colorscale for level indices 0..K.

        Level 0 is the background, level i (1..K) the i-th foreground color.
        Use with zmin=0, zmax=K; each level gets a flat band of width 1/(K+1).
        """
        levels = (self.background_color,) + self.foreground_colors
        n = len(levels)
        scale: List[List[object]] = []
        for i, color in enumerate(levels):
            scale.append([i / n, color])
            scale.append([(i + 1) / n, color])
        return scale

