"""Block component: a 2x2 arrangement of tiles covering 16x16 pixels."""

from dataclasses import dataclass
from typing import Tuple

from tile_canvas.components.tile import Tile


@dataclass(frozen=True)
class Block:
    """Four tiles in row-major order.

    Attributes:
        tiles: (top-left, top-right, bottom-left, bottom-right).
    """

    tiles: Tuple[Tile, Tile, Tile, Tile]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))
        if len(self.tiles) != 4:
            raise ValueError(f"Block must have 4 tiles, got {len(self.tiles)}")

    def get_tile(self, index: int) -> Tile:
        return self.tiles[index]
