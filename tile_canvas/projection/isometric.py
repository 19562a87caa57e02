"""Isometric (2:1 diamond) projection.

Grid cell (x, y) is drawn as a diamond whose bounding box starts at
``tile_to_pixel((x, y))``. Moving +1 in x steps right and down, +1 in y steps
left and down; the grid's left corner (0, height - 1) sits at the canvas
origin ``(left, ...)``. Elevation lifts a cell by a full ``tile_height`` per
level.

All divisions are floor divisions. For in-grid tile origins every
intermediate value is an exact multiple, so the round trip is exact; for
pixels left of or above the grid, flooring keeps the result monotonic and
yields negative (out-of-grid) coordinates instead of folding onto row or
column 0.
"""

from dataclasses import dataclass

from tile_canvas.projection.base import GridProjection, PixelPoint, TilePoint, TilePoint3D


@dataclass(frozen=True)
class IsometricProjection(GridProjection):
    def pixel_to_tile(self, point: PixelPoint) -> TilePoint:
        xgrid = (point.x - self.left) // self.tile_width
        ygrid = (2 * (point.y - self.top)) // self.tile_height
        return TilePoint(
            x=(ygrid + xgrid - self.height + 1) // 2,
            y=(ygrid - xgrid + self.height - 1) // 2,
        )

    def tile_to_pixel(self, point: TilePoint) -> PixelPoint:
        return PixelPoint(
            x=(point.x - point.y + self.height - 1) * self.tile_width + self.left,
            y=(point.x + point.y) * self.tile_height // 2 + self.top,
        )

    def tile_to_pixel_3d(self, point: TilePoint3D) -> PixelPoint:
        return PixelPoint(
            x=(point.x - point.y + self.height - 1) * self.tile_width + self.left,
            y=(point.x + point.y - point.z * 2) * self.tile_height // 2 + self.top,
        )

    @property
    def bitmap_width(self) -> int:
        return (self.width + self.height) * self.tile_width

    @property
    def bitmap_height(self) -> int:
        return (self.width + self.height + 1) * self.tile_height // 2
