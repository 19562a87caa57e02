from typing import List, Tuple

from tile_canvas.components import Block, Palette, Tile, TileAttributes, Tileset
from tile_canvas.types import TILE_PIXELS, TILE_SIZE

# Entry numbers in the tileset built by make_tileset()
TILE_EMPTY = 0
TILE_SOLID = 1
TILE_CHECKER = 2
TILE_GRADIENT = 3
TILE_SOLID_ALT = 4

SOLID_COLOR = 5
CHECKER_COLOR = 7
SOLID_ALT_COLOR = 9


def solid_pixels(color: int) -> Tuple[int, ...]:
    return (color,) * TILE_PIXELS


def checker_pixels(color: int) -> Tuple[int, ...]:
    """Opaque on even (row + column), transparent elsewhere."""
    return tuple(
        color if (i // TILE_SIZE + i % TILE_SIZE) % 2 == 0 else 0
        for i in range(TILE_PIXELS)
    )


def gradient_pixels() -> Tuple[int, ...]:
    """Color index i % 16; every 16th pixel is transparent."""
    return tuple(i % 16 for i in range(TILE_PIXELS))


def make_tileset() -> Tileset:
    return Tileset.from_pixels(
        [
            solid_pixels(0),
            solid_pixels(SOLID_COLOR),
            checker_pixels(CHECKER_COLOR),
            gradient_pixels(),
            solid_pixels(SOLID_ALT_COLOR),
        ]
    )


def make_tile(index: int, priority: bool = False, hflip: bool = False, vflip: bool = False) -> Tile:
    return Tile(index, TileAttributes(hflip=hflip, vflip=vflip, priority=priority))


def make_block(*indices: int, priority: bool = False) -> Block:
    """Block of four tiles; a single index is repeated."""
    if len(indices) == 1:
        indices = indices * 4
    return Block(tuple(make_tile(i, priority=priority) for i in indices))  # type: ignore[arg-type]


def make_palette(index: int) -> Palette:
    """Palette whose entries are distinguishable across palettes and colors."""
    return Palette(tuple((index * 16 + i, i * 8, 255 - i, i * 17) for i in range(16)))


def make_palettes(count: int = 4) -> List[Palette]:
    return [make_palette(i) for i in range(count)]
