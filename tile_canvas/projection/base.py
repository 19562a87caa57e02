"""Grid projection contract.

A projection maps integer tile-grid coordinates to canvas pixel coordinates
and back, and reports the canvas size needed to draw the whole grid. Each
projection style (isometric today) is a concrete subclass selected at
construction time; callers only talk to :class:`GridProjection`.

Contract:

* ``pixel_to_tile(tile_to_pixel(p)) == p`` for every ``p`` inside the grid.
* ``pixel_to_tile`` is many-to-one: every pixel of a cell maps to that cell.
* Instances are immutable and hold no per-call state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TilePoint:
    """Tile-grid coordinate.

    Attributes:
        x: Grid column.
        y: Grid row.
    """

    x: int
    y: int


@dataclass(frozen=True)
class TilePoint3D:
    """Tile-grid coordinate with elevation.

    Attributes:
        x: Grid column.
        y: Grid row.
        z: Elevation layer; each unit lifts the cell by one tile height.
    """

    x: int
    y: int
    z: int = 0


@dataclass(frozen=True)
class PixelPoint:
    """Canvas pixel coordinate (0, 0 at top-left)."""

    x: int
    y: int


@dataclass(frozen=True)
class GridProjection(ABC):
    """Fixed grid geometry shared by all projection styles.

    Attributes:
        width: Grid width in tiles.
        height: Grid height in tiles.
        left: Pixel x offset of the grid origin on the canvas.
        top: Pixel y offset of the grid origin on the canvas.
        tile_width: Pixel width of one tile step.
        tile_height: Pixel height of one tile step.
    """

    width: int
    height: int
    left: int = 0
    top: int = 0
    tile_width: int = 16
    tile_height: int = 16

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid size must be non-negative, got {self.width}x{self.height}")
        if self.tile_width <= 0 or self.tile_height <= 0:
            raise ValueError(
                f"Tile dimensions must be positive, got {self.tile_width}x{self.tile_height}"
            )
        if self.tile_height % 2:
            raise ValueError(f"Tile height must be even, got {self.tile_height}")

    def in_bounds(self, point: TilePoint | TilePoint3D) -> bool:
        """Return True if ``point`` lies within the grid rectangle."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    @property
    def bitmap_size(self) -> Tuple[int, int]:
        return self.bitmap_width, self.bitmap_height

    @abstractmethod
    def pixel_to_tile(self, point: PixelPoint) -> TilePoint: ...

    @abstractmethod
    def tile_to_pixel(self, point: TilePoint) -> PixelPoint: ...

    @abstractmethod
    def tile_to_pixel_3d(self, point: TilePoint3D) -> PixelPoint: ...

    @property
    @abstractmethod
    def bitmap_width(self) -> int: ...

    @property
    @abstractmethod
    def bitmap_height(self) -> int: ...
