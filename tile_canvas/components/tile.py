"""Tile reference components.

A :class:`Tile` does not carry pixels. It names an entry in a
:class:`~tile_canvas.components.tileset.Tileset` and records how that entry
is drawn: mirrored horizontally / vertically and whether it belongs to the
foreground (``priority``). The priority flag is what the compositor copies
into its priority plane.
"""

from dataclasses import dataclass, field, replace

from tile_canvas.types import TileAttribute


@dataclass(frozen=True)
class TileAttributes:
    """Draw attributes of a tile reference.

    Attributes:
        hflip: Mirror the tile left-to-right.
        vflip: Mirror the tile top-to-bottom.
        priority: Foreground tile (drawn with the high-priority opacity cap).
    """

    hflip: bool = False
    vflip: bool = False
    priority: bool = False

    def get_attribute(self, attribute: TileAttribute) -> bool:
        return bool(getattr(self, attribute.value))

    def set_attribute(self, attribute: TileAttribute, value: bool = True) -> "TileAttributes":
        """Return a copy with ``attribute`` set to ``value``."""
        return replace(self, **{attribute.value: bool(value)})


@dataclass(frozen=True)
class Tile:
    """Reference to a tileset entry plus its draw attributes.

    Attributes:
        index: Entry number in the tileset.
        attributes: Flip / priority flags.
    """

    index: int
    attributes: TileAttributes = field(default_factory=TileAttributes)

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Tile index must be non-negative, got {self.index}")
