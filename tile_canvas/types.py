"""Common type aliases and collaborator protocols.

The compositor never owns tile or palette storage. It reads them through the
narrow protocols below, so any object exposing the same methods (an editor's
own tileset class, a ROM-backed palette, ...) can be drawn without adapters.
The concrete dataclasses in :mod:`tile_canvas.components` satisfy them.
"""

from enum import StrEnum, auto
from typing import Protocol, Sequence


PaletteIndex = int
ColorIndex = int
Pixel = int

TILE_SIZE = 8
TILE_PIXELS = TILE_SIZE * TILE_SIZE
BLOCK_SIZE = TILE_SIZE * 2
PALETTE_SIZE = 16
MAX_PALETTES = 16


class TileAttribute(StrEnum):
    """Per-tile attribute flags."""

    HFLIP = auto()
    VFLIP = auto()
    PRIORITY = auto()


class TileAttributesLike(Protocol):
    def get_attribute(self, attribute: TileAttribute) -> bool: ...


class TileLike(Protocol):
    @property
    def attributes(self) -> TileAttributesLike: ...


class TilesetLike(Protocol):
    def get_tile(self, tile: TileLike) -> Sequence[ColorIndex]: ...


class BlockLike(Protocol):
    def get_tile(self, index: int) -> TileLike: ...


class PaletteLike(Protocol):
    def get_r(self, index: ColorIndex) -> int: ...

    def get_g(self, index: ColorIndex) -> int: ...

    def get_b(self, index: ColorIndex) -> int: ...

    def get_a(self, index: ColorIndex) -> int: ...
