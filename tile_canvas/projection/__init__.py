"""Grid projections.

Bidirectional mappings between tile-grid coordinates and canvas pixels. The
projection style is chosen once, at construction, either directly
(``IsometricProjection(...)``) or by name through :func:`make_projection`.
"""

from typing import Dict, Optional, Type

from tile_canvas.config import DEFAULT_RENDER_CONFIG, RenderConfig

from .base import GridProjection, PixelPoint, TilePoint, TilePoint3D
from .isometric import IsometricProjection

PROJECTION_REGISTRY: Dict[str, Type[GridProjection]] = {
    "isometric": IsometricProjection,
}
"""Registry of projection names to classes.

Extend it before calling :func:`make_projection` to add projection styles.
"""


def make_projection(
    width: int,
    height: int,
    left: int = 0,
    top: int = 0,
    name: Optional[str] = None,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> GridProjection:
    """Build a projection by name, taking tile size from ``config``.

    ``name`` defaults to ``config.projection``.
    """
    name = name or config.projection
    if name not in PROJECTION_REGISTRY:
        raise ValueError(
            f"Unknown projection '{name}', expected one of {sorted(PROJECTION_REGISTRY)}"
        )
    return PROJECTION_REGISTRY[name](
        width=width,
        height=height,
        left=left,
        top=top,
        tile_width=config.tile_width,
        tile_height=config.tile_height,
    )


__all__ = [
    "GridProjection",
    "IsometricProjection",
    "PixelPoint",
    "TilePoint",
    "TilePoint3D",
    "PROJECTION_REGISTRY",
    "make_projection",
]
