"""Palette component.

A palette is a fixed table of 16 RGBA colors. Pixels on the canvas select a
palette with their high nibble and a color with their low nibble; the list of
palettes passed to an export call is indexed directly by that high nibble.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from tile_canvas.types import PALETTE_SIZE, ColorIndex

RGBA = Tuple[int, int, int, int]
RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """16-entry RGBA color table.

    Attributes:
        colors: Sixteen ``(r, g, b, a)`` tuples with channels in 0-255.
    """

    colors: Tuple[RGBA, ...]

    def __post_init__(self) -> None:
        colors = tuple(tuple(int(c) for c in color) for color in self.colors)
        if len(colors) != PALETTE_SIZE:
            raise ValueError(f"Palette must have {PALETTE_SIZE} colors, got {len(colors)}")
        for color in colors:
            if len(color) != 4 or any(not 0 <= c <= 0xFF for c in color):
                raise ValueError(f"Invalid RGBA color: {color}")
        object.__setattr__(self, "colors", colors)

    @classmethod
    def from_rgb(
        cls, colors: Iterable[Sequence[int]], transparent_index: int | None = 0
    ) -> "Palette":
        """Build an opaque palette, optionally with one fully transparent entry."""
        rgba = []
        for i, (r, g, b) in enumerate(colors):
            rgba.append((r, g, b, 0 if i == transparent_index else 0xFF))
        return cls(tuple(rgba))

    def get_r(self, index: ColorIndex) -> int:
        return self.colors[index][0]

    def get_g(self, index: ColorIndex) -> int:
        return self.colors[index][1]

    def get_b(self, index: ColorIndex) -> int:
        return self.colors[index][2]

    def get_a(self, index: ColorIndex) -> int:
        return self.colors[index][3]
