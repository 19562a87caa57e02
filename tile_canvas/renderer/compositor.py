"""Raster compositor for indexed-color tiles.

The canvas is two ``uint8`` planes of identical shape ``(height, width)``:

* ``pixels``: high nibble = palette index, low nibble = color index. Zero
  means nothing was drawn there, but it still resolves to palette 0 color 0
  on export.
* ``priority``: 1 where the last tile drawn over that pixel was a
  foreground (priority) tile, else 0. Export uses it to pick an opacity cap.

Tiles are overlaid transparently: color index 0 in a tile leaves whatever is
underneath untouched, so drawing order defines layering. An insertion whose
footprint does not fit on the canvas is dropped entirely and reported
through the diagnostic callback; the canvas is never partially written.

Export methods resolve pixels against a caller-supplied palette list indexed
by the pixel's high nibble. The list must cover every palette index drawn;
this is not checked.
"""

import contextlib
import os
from typing import BinaryIO, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from tile_canvas.config import DEFAULT_RENDER_CONFIG
from tile_canvas.types import (
    BLOCK_SIZE,
    MAX_PALETTES,
    TILE_SIZE,
    BlockLike,
    PaletteIndex,
    PaletteLike,
    TileAttribute,
    TileLike,
    TilesetLike,
)
from tile_canvas.utils.diagnostics import (
    Diagnostic,
    DiagnosticFn,
    DiagnosticKind,
    log_diagnostic,
)
from tile_canvas.utils.image import (
    UInt8Array,
    color_table,
    encode_indexed_png,
    make_image,
    rgba_array,
)

# Sub-tile offsets of a block, in the block's row-major tile order.
BLOCK_TILE_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, 0),
    (TILE_SIZE, 0),
    (0, TILE_SIZE),
    (TILE_SIZE, TILE_SIZE),
)


def _check_opacity(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in 0-255, got {value}")


class RasterCompositor:
    """Two-plane indexed canvas with tile/block insertion and export.

    Not thread-safe for writers; one instance per render pass.
    """

    _width: int
    _height: int
    _pixels: UInt8Array
    _priority: UInt8Array
    _diagnostic_fn: DiagnosticFn

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        diagnostic_fn: Optional[DiagnosticFn] = None,
    ):
        self._diagnostic_fn = diagnostic_fn or log_diagnostic
        self.resize(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> UInt8Array:
        """Read-only view of the pixel plane, shape ``(height, width)``."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    @property
    def priority(self) -> UInt8Array:
        """Read-only view of the priority plane, shape ``(height, width)``."""
        view = self._priority.view()
        view.flags.writeable = False
        return view

    def clear(self) -> None:
        self._pixels.fill(0)
        self._priority.fill(0)

    def resize(self, width: int, height: int) -> None:
        """Change dimensions. Both planes are reallocated and zeroed."""
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width), dtype=np.uint8)
        self._priority = np.zeros((height, width), dtype=np.uint8)

    def _report(
        self,
        kind: DiagnosticKind,
        message: str,
        position: Optional[Tuple[int, int]] = None,
    ) -> None:
        self._diagnostic_fn(Diagnostic(kind=kind, message=message, position=position))

    def _fits(self, x: int, y: int, size: int) -> bool:
        return (
            x >= 0
            and y >= 0
            and x + size - 1 < self._width
            and y + size - 1 < self._height
        )

    def insert_tile(
        self,
        x: int,
        y: int,
        palette_index: PaletteIndex,
        tile: TileLike,
        tileset: TilesetLike,
    ) -> bool:
        """Draw an 8x8 tile with its top-left corner at pixel (x, y).

        Returns:
            bool: False if the tile did not fit and nothing was drawn.
        """
        if not 0 <= palette_index < MAX_PALETTES:
            raise ValueError(f"Palette index must be in 0-{MAX_PALETTES - 1}, got {palette_index}")
        if not self._fits(x, y, TILE_SIZE):
            self._report(
                DiagnosticKind.TILE_OUT_OF_BOUNDS,
                f"Attempt to draw tile in out-of-range position {x}, {y}: "
                f"the image buffer is only {self._width} x {self._height} pixels.",
                (x, y),
            )
            return False

        bits = np.asarray(tileset.get_tile(tile), dtype=np.uint8).reshape(TILE_SIZE, TILE_SIZE)
        priority = 1 if tile.attributes.get_attribute(TileAttribute.PRIORITY) else 0
        opaque = bits != 0

        dest = self._pixels[y : y + TILE_SIZE, x : x + TILE_SIZE]
        dest[opaque] = bits[opaque] | np.uint8(palette_index << 4)
        dest_priority = self._priority[y : y + TILE_SIZE, x : x + TILE_SIZE]
        dest_priority[opaque] = priority
        return True

    def insert_block(
        self,
        x: int,
        y: int,
        palette_index: PaletteIndex,
        block: BlockLike,
        tileset: TilesetLike,
    ) -> bool:
        """Draw a 16x16 block; all four tiles or none.

        Returns:
            bool: False if the block footprint did not fit and nothing was drawn.
        """
        if not self._fits(x, y, BLOCK_SIZE):
            self._report(
                DiagnosticKind.BLOCK_OUT_OF_BOUNDS,
                f"Attempt to draw block in out-of-range position {x}, {y}: "
                f"the image buffer is only {self._width} x {self._height} pixels.",
                (x, y),
            )
            return False
        for i, (dx, dy) in enumerate(BLOCK_TILE_OFFSETS):
            self.insert_tile(x + dx, y + dy, palette_index, block.get_tile(i), tileset)
        return True

    def get_rgb(self, palettes: Sequence[PaletteLike]) -> bytes:
        """Row-major RGB triplets, ``width * height * 3`` bytes."""
        table = color_table(palettes)
        rgb = np.ascontiguousarray(table[:, :3])
        return rgb[self._pixels].tobytes()

    def get_alpha(
        self,
        palettes: Sequence[PaletteLike],
        low_priority_max_opacity: int = DEFAULT_RENDER_CONFIG.low_priority_max_opacity,
        high_priority_max_opacity: int = DEFAULT_RENDER_CONFIG.high_priority_max_opacity,
    ) -> bytes:
        """Row-major alpha, ``width * height`` bytes.

        Each pixel's palette alpha is capped by the high-priority limit where
        the priority plane is set and by the low-priority limit elsewhere.
        """
        _check_opacity("low_priority_max_opacity", low_priority_max_opacity)
        _check_opacity("high_priority_max_opacity", high_priority_max_opacity)
        table = color_table(palettes)
        alpha = table[:, 3][self._pixels]
        caps = np.where(
            self._priority != 0,
            np.uint8(high_priority_max_opacity),
            np.uint8(low_priority_max_opacity),
        )
        return np.minimum(alpha, caps).astype(np.uint8).tobytes()

    def to_image(
        self,
        palettes: Sequence[PaletteLike],
        use_alpha: bool = DEFAULT_RENDER_CONFIG.use_alpha,
        low_priority_max_opacity: int = DEFAULT_RENDER_CONFIG.low_priority_max_opacity,
        high_priority_max_opacity: int = DEFAULT_RENDER_CONFIG.high_priority_max_opacity,
    ) -> Image.Image:
        """Render the canvas to a new RGBA (or RGB) PIL image."""
        rgb = self.get_rgb(palettes)
        alpha = (
            self.get_alpha(palettes, low_priority_max_opacity, high_priority_max_opacity)
            if use_alpha
            else None
        )
        return make_image(rgba_array(rgb, alpha, self._width, self._height))

    def write_png(
        self,
        destination: str | os.PathLike[str] | BinaryIO,
        palettes: Sequence[PaletteLike],
    ) -> bool:
        """Write the canvas as an 8-bit paletted PNG.

        The color table is the concatenation of ``palettes`` (at most 16) and
        the transparency table their alpha channels.

        Returns:
            bool: False if the destination could not be written.
        """
        if len(palettes) > MAX_PALETTES:
            raise ValueError(f"At most {MAX_PALETTES} palettes fit in a PNG color table, got {len(palettes)}")
        if self._width == 0 or self._height == 0:
            self._report(
                DiagnosticKind.WRITE_FAILED,
                f"Unable to write PNG: the image buffer is empty ({self._width} x {self._height}).",
            )
            return False

        data = encode_indexed_png(self._pixels, color_table(palettes))

        if not isinstance(destination, (str, os.PathLike)):
            try:
                destination.write(data)
            except (OSError, ValueError) as e:
                self._report(DiagnosticKind.WRITE_FAILED, f"Unable to write PNG: {e}")
                return False
            return True

        try:
            fp = open(destination, "wb")
        except (OSError, ValueError) as e:
            self._report(DiagnosticKind.WRITE_FAILED, f"Unable to open PNG {os.fspath(destination)}: {e}")
            return False
        try:
            with fp:
                fp.write(data)
        except OSError as e:
            with contextlib.suppress(OSError):
                os.remove(destination)
            self._report(DiagnosticKind.WRITE_FAILED, f"Unable to write PNG {os.fspath(destination)}: {e}")
            return False
        return True
