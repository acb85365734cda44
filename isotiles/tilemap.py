"""A grid of tile ids and the layer record used to stack backgrounds."""

from __future__ import annotations

from dataclasses import dataclass


class TileMap:
    """A ``width`` x ``height`` grid of byte-sized tile ids.

    ``z`` orders overlapping maps and ``tid`` names the tileset they use.
    """

    def __init__(self, width: int, height: int, init_with: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"tile map size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.z = 0.0
        self.tid = 0
        self.tiles = bytearray([init_with]) * (width * height)

    def _index(self, col: int, row: int) -> int:
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(
                f"tile ({col}, {row}) outside a {self.width}x{self.height} map"
            )
        return col + row * self.width

    def tile(self, col: int, row: int) -> int:
        """Tile id at column ``col`` and row ``row``."""
        return self.tiles[self._index(col, row)]

    def set_tile(self, col: int, row: int, tile: int) -> None:
        """Store tile id ``tile`` (0-255) at column ``col`` and row ``row``."""
        self.tiles[self._index(col, row)] = tile


@dataclass
class Layer:
    """A scrolling background layer: depth, texture, image file and scroll rates."""

    z: float = 0.0
    tid: int = 0
    filename: str = ""
    offset_x: float = 0.0
    offset_y: float = 0.0
    rate_x: float = 0.0
    rate_y: float = 0.0