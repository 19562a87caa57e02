"""Tile data components.

Immutable value objects describing what gets drawn: tile references and
their attributes, the tileset holding pixel patterns, 2x2 blocks and
16-color palettes. The compositor only relies on the protocols in
:mod:`tile_canvas.types`; these dataclasses are the stock implementations.
"""

from .block import Block
from .palette import Palette
from .tile import Tile, TileAttributes
from .tileset import Tileset

__all__ = [
    "Block",
    "Palette",
    "Tile",
    "TileAttributes",
    "Tileset",
]
