"""Tileset storage.

Holds the raw 8x8 pixel patterns referenced by :class:`Tile`. Each entry is a
tuple of 64 color indices (0-15) in row-major order; 0 is transparent.
Entries live in a persistent vector so a tileset can be shared between
compositors and editing operations return new tilesets instead of mutating.
"""

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tile_canvas.components.tile import Tile
from tile_canvas.types import PALETTE_SIZE, TILE_PIXELS, TILE_SIZE, ColorIndex, TileAttribute

TilePixels = Tuple[ColorIndex, ...]

# Packed 4bpp: two pixels per byte, high nibble first.
BYTES_PER_TILE = TILE_PIXELS // 2


def _validate_pixels(pixels: Sequence[int]) -> TilePixels:
    if len(pixels) != TILE_PIXELS:
        raise ValueError(f"Tile must have {TILE_PIXELS} pixels, got {len(pixels)}")
    for value in pixels:
        if not 0 <= value < PALETTE_SIZE:
            raise ValueError(f"Color index out of range: {value}")
    return tuple(int(v) for v in pixels)


def flip_pixels(pixels: Sequence[ColorIndex], hflip: bool, vflip: bool) -> TilePixels:
    """Mirror a row-major 8x8 pattern."""
    rows = [
        tuple(pixels[row * TILE_SIZE : (row + 1) * TILE_SIZE]) for row in range(TILE_SIZE)
    ]
    if vflip:
        rows.reverse()
    if hflip:
        rows = [row[::-1] for row in rows]
    return tuple(v for row in rows for v in row)


@dataclass(frozen=True)
class Tileset:
    """Immutable collection of 8x8 tile patterns.

    Attributes:
        tiles: Persistent vector of 64-entry color index tuples.
    """

    tiles: PVector[TilePixels] = field(default_factory=pvector)

    @classmethod
    def from_pixels(cls, tiles: Iterable[Sequence[int]]) -> "Tileset":
        return cls(pvector(_validate_pixels(t) for t in tiles))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Tileset":
        """Decode packed 4bpp tile data (32 bytes per tile)."""
        if len(data) % BYTES_PER_TILE != 0:
            raise ValueError(
                f"Tile data length {len(data)} is not a multiple of {BYTES_PER_TILE}"
            )
        tiles = []
        for offset in range(0, len(data), BYTES_PER_TILE):
            chunk = data[offset : offset + BYTES_PER_TILE]
            tiles.append(tuple(v for byte in chunk for v in (byte >> 4, byte & 0x0F)))
        return cls(pvector(tiles))

    def __len__(self) -> int:
        return len(self.tiles)

    def append(self, pixels: Sequence[int]) -> "Tileset":
        """Return a new tileset with ``pixels`` added as the last entry."""
        return Tileset(self.tiles.append(_validate_pixels(pixels)))

    def get_tile(self, tile: Tile) -> TilePixels:
        """Pixels of ``tile`` with its flip attributes applied."""
        if not 0 <= tile.index < len(self.tiles):
            raise IndexError(f"Tile {tile.index} not in tileset of {len(self.tiles)} tiles")
        pixels = self.tiles[tile.index]
        hflip = tile.attributes.get_attribute(TileAttribute.HFLIP)
        vflip = tile.attributes.get_attribute(TileAttribute.VFLIP)
        if hflip or vflip:
            return flip_pixels(pixels, hflip, vflip)
        return pixels
