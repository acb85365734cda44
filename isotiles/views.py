"""Tile-map projections: where a tile is drawn, which tile a point hits, how to step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum


class Direction(IntEnum):
    """Compass directions for walking across a tile map."""

    NORTH = 1
    SOUTH = 2
    EAST = 3
    WEST = 4
    NORTHEAST = 5
    NORTHWEST = 6
    SOUTHEAST = 7
    SOUTHWEST = 8


class TilemapView(ABC):
    """How a particular tile-map layout maps between grid and screen."""

    @abstractmethod
    def draw_position(self, col: int, row: int, tw: float, th: float) -> tuple[float, float]:
        """Screen position of tile (col, row) for tiles ``tw`` wide and ``th`` high."""

    @abstractmethod
    def mouse_map(self, tw: float, th: float, mx: float, my: float) -> tuple[int, int]:
        """Tile (col, row) under the screen point (mx, my)."""

    @abstractmethod
    def tile_walking(self, col: int, row: int, direction: int) -> tuple[int, int]:
        """Tile reached by one step from (col, row) towards ``direction``."""


_SLIDE_STEPS = {
    Direction.NORTH: (-1, 2),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (1, -2),
    Direction.WEST: (-1, 0),
    Direction.NORTHEAST: (0, 1),
    Direction.SOUTHEAST: (1, -1),
    Direction.SOUTHWEST: (0, -1),
    Direction.NORTHWEST: (-1, 1),
}


class SlideView(TilemapView):
    """Slide (staggered diamond) layout: each row shifts half a tile to the right."""

    def draw_position(self, col: int, row: int, tw: float, th: float) -> tuple[float, float]:
        return col * tw + row * tw / 2, row * th / 2

    def mouse_map(self, tw: float, th: float, mx: float, my: float) -> tuple[int, int]:
        row = int(my / (th / 2.0))
        col = int((mx - row * (tw / 2.0)) / tw)
        return col, row

    def tile_walking(self, col: int, row: int, direction: int) -> tuple[int, int]:
        d_col, d_row = _SLIDE_STEPS.get(direction, (0, 0))
        return col + d_col, row + d_row