"""Blockmap: a grid of blocks drawn through a projection.

A :class:`Blockmap` is the authoring-time representation of one map layer:
``grid[y][x]`` holds an optional :class:`BlockmapCell` (a block plus its
elevation). :func:`draw_blockmap` walks the cells back-to-front, asks the
projection for each cell's pixel origin and composites the block there.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from tile_canvas.components import Block
from tile_canvas.config import DEFAULT_RENDER_CONFIG, RenderConfig
from tile_canvas.projection import GridProjection, TilePoint3D, make_projection
from tile_canvas.renderer.compositor import RasterCompositor
from tile_canvas.types import MAX_PALETTES, PaletteIndex, TilesetLike
from tile_canvas.utils.diagnostics import DiagnosticFn

# Grid coordinate alias (x, y)
Position = Tuple[int, int]


@dataclass(frozen=True)
class BlockmapCell:
    """Contents of one grid cell.

    Attributes:
        block: Block drawn at the cell.
        elevation: Layer the block sits on (0 = ground).
    """

    block: Block
    elevation: int = 0


@dataclass
class Blockmap:
    """
    Grid of blocks sharing one palette.
    - `grid[y][x]` is a `BlockmapCell` or None for an empty cell.
    """

    width: int
    height: int
    palette_index: PaletteIndex = 0

    grid: List[List[Optional[BlockmapCell]]] = field(init=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid size must be non-negative, got {self.width}x{self.height}")
        if not 0 <= self.palette_index < MAX_PALETTES:
            raise ValueError(f"Palette index must be in 0-{MAX_PALETTES - 1}, got {self.palette_index}")
        self.grid = [[None for _ in range(self.width)] for _ in range(self.height)]

    # -------- Grid editing API --------

    def set(self, pos: Position, block: Block, elevation: int = 0) -> None:
        """
        Place ``block`` at pos (x, y), replacing any previous cell content.
        """
        x, y = pos
        self._check_bounds(x, y)
        self.grid[y][x] = BlockmapCell(block=block, elevation=elevation)

    def get(self, pos: Position) -> Optional[BlockmapCell]:
        x, y = pos
        self._check_bounds(x, y)
        return self.grid[y][x]

    def clear_cell(self, pos: Position) -> bool:
        """
        Empty the cell at pos. Returns True if it held a block.
        """
        x, y = pos
        self._check_bounds(x, y)
        had_block = self.grid[y][x] is not None
        self.grid[y][x] = None
        return had_block

    def cells(self) -> Iterator[Tuple[TilePoint3D, Block]]:
        """
        Yield ``(point, block)`` for every occupied cell in row-major order.
        """
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if cell is not None:
                    yield TilePoint3D(x, y, cell.elevation), cell.block

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )


def draw_order(point: TilePoint3D) -> Tuple[int, int, int]:
    """Painter's order: lower layers first, then back (small x + y) to front."""
    return point.z, point.x + point.y, point.x


def draw_blockmap(
    compositor: RasterCompositor,
    projection: GridProjection,
    blockmap: Blockmap,
    tileset: TilesetLike,
) -> int:
    """Composite every block of ``blockmap`` onto ``compositor``.

    Blocks whose footprint falls outside the canvas are skipped (and reported
    by the compositor).

    Returns:
        int: Number of blocks actually drawn.
    """
    drawn = 0
    for point, block in sorted(blockmap.cells(), key=lambda item: draw_order(item[0])):
        origin = projection.tile_to_pixel_3d(point)
        if compositor.insert_block(origin.x, origin.y, blockmap.palette_index, block, tileset):
            drawn += 1
    return drawn


def render_blockmap(
    blockmap: Blockmap,
    tileset: TilesetLike,
    left: int = 0,
    top: int = 0,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
    diagnostic_fn: Optional[DiagnosticFn] = None,
) -> RasterCompositor:
    """Allocate a canvas large enough for ``blockmap`` and draw it.

    ``left`` / ``top`` shift the grid origin and enlarge the canvas by the
    same amount, leaving room for elevated blocks near the top edge.
    """
    projection = make_projection(blockmap.width, blockmap.height, left=left, top=top, config=config)
    compositor = RasterCompositor(
        projection.bitmap_width + left,
        projection.bitmap_height + top,
        diagnostic_fn=diagnostic_fn,
    )
    draw_blockmap(compositor, projection, blockmap, tileset)
    return compositor
