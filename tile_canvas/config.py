"""Render configuration.

``RenderConfig`` groups the defaults shared by projections and canvas export:
projected tile size and the opacity caps applied to background (low priority)
and foreground (high priority) pixels. It is a plain immutable value; there
are no environment variables or config files at this level.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Rendering defaults.

    Attributes:
        tile_width: Horizontal step in pixels between neighboring grid cells.
        tile_height: Height in pixels of one grid cell (diamond height is half).
        low_priority_max_opacity: Alpha cap for pixels drawn by background tiles.
        high_priority_max_opacity: Alpha cap for pixels drawn by foreground tiles.
        use_alpha: Produce RGBA rather than RGB images.
        projection: Name of the grid projection in ``PROJECTION_REGISTRY``.
    """

    tile_width: int = 16
    tile_height: int = 16
    low_priority_max_opacity: int = 0xFF
    high_priority_max_opacity: int = 0xFF
    use_alpha: bool = True
    projection: str = "isometric"

    def __post_init__(self) -> None:
        if self.tile_width <= 0 or self.tile_height <= 0:
            raise ValueError(
                f"Tile dimensions must be positive, got {self.tile_width}x{self.tile_height}"
            )
        if self.tile_height % 2:
            raise ValueError(f"Tile height must be even, got {self.tile_height}")
        for name in ("low_priority_max_opacity", "high_priority_max_opacity"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be in 0-255, got {value}")


DEFAULT_RENDER_CONFIG = RenderConfig()
