import io
from typing import Sequence

import numpy as np
import numpy.typing as npt
from PIL import Image

from tile_canvas.types import MAX_PALETTES, PALETTE_SIZE, PaletteLike

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]

COLOR_TABLE_SIZE = MAX_PALETTES * PALETTE_SIZE


def color_table(palettes: Sequence[PaletteLike]) -> UInt8Array:
    """
    Flatten palettes into an (N*16, 4) RGBA lookup table indexed by pixel value.
    """
    entries = [
        (pal.get_r(i), pal.get_g(i), pal.get_b(i), pal.get_a(i))
        for pal in palettes
        for i in range(PALETTE_SIZE)
    ]
    return np.array(entries, dtype=np.uint8).reshape(-1, 4)


def rgba_array(rgb: bytes, alpha: bytes | None, width: int, height: int) -> UInt8Array:
    """
    Stack flat RGB (and optional alpha) exports into an (H, W, 3|4) array.
    """
    arr: UInt8Array = np.frombuffer(rgb, dtype=np.uint8).reshape(height, width, 3)
    if alpha is None:
        return arr.copy()
    a: UInt8Array = np.frombuffer(alpha, dtype=np.uint8).reshape(height, width, 1)
    return np.concatenate([arr, a], axis=2)


def make_image(arr: UInt8Array) -> Image.Image:
    """
    Wrap an (H, W, 3|4) uint8 array as an independent RGB/RGBA PIL image.
    """
    return Image.fromarray(np.ascontiguousarray(arr, dtype=np.uint8))


def encode_indexed_png(pixels: UInt8Array, table: UInt8Array) -> bytes:
    """
    Encode a 2D array of 8-bit color indices as a paletted PNG.

    The PLTE chunk always carries 256 entries: the rows of ``table`` followed by
    black padding. The tRNS chunk carries the matching alpha column, with
    padded entries fully transparent.
    """
    if table.shape[0] > COLOR_TABLE_SIZE:
        raise ValueError(f"Color table has {table.shape[0]} entries, at most {COLOR_TABLE_SIZE} allowed")
    height, width = pixels.shape
    padded: UInt8Array = np.zeros((COLOR_TABLE_SIZE, 4), dtype=np.uint8)
    padded[: table.shape[0]] = table

    image = Image.frombytes("P", (width, height), np.ascontiguousarray(pixels).tobytes())
    image.putpalette(padded[:, :3].tobytes(), rawmode="RGB")

    buffer = io.BytesIO()
    image.save(buffer, format="PNG", transparency=padded[:, 3].tobytes())
    return buffer.getvalue()
