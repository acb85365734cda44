"""Rules of the isometric coin-collecting game, kept apart from drawing."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Callable

TILE_WIDTH = 64
TILE_HEIGHT = 32
MAP_WIDTH = 15
MAP_HEIGHT = 15
TOTAL_COINS = 4
TILESET_COLUMNS = 7

ORIGIN_X = 500
ORIGIN_Y = 400 + (MAP_HEIGHT * TILE_HEIGHT // 2) // 2

FRAME_TIME = 0.15
FRAME_COLS = 5
FRAME_ROWS = 4

START_POSITION = (1, 1)
COIN_POSITIONS = frozenset({(2, 2), (5, 5), (14, 0), (10, 12)})


class Terrain(IntEnum):
    """Tile kinds, numbered as their column in the tileset."""

    SAND = 0
    GRASS = 1
    STONE = 2
    LAVA = 3
    SHALLOW_WATER = 4
    DEEP_WATER = 5
    PLAYER = 6


BLOCKING = frozenset({Terrain.SHALLOW_WATER, Terrain.DEEP_WATER})

_ROWS = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 3, 3, 3),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 3, 3),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 3),
    (1, 1, 1, 1, 1, 1, 1, 0, 1, 1, 1, 1, 1, 1, 2),
    (1, 1, 1, 1, 1, 1, 0, 4, 0, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 0, 4, 5, 4, 0, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 0, 4, 5, 5, 5, 4, 0, 1, 1, 1, 1),
    (1, 1, 1, 0, 4, 5, 5, 5, 5, 5, 4, 0, 1, 1, 1),
    (1, 1, 1, 1, 0, 4, 5, 5, 5, 4, 0, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 0, 4, 5, 4, 0, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 0, 4, 0, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 0, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)

# Indexed as LAYOUT[row][col].
LAYOUT: tuple[tuple[Terrain, ...], ...] = tuple(
    tuple(Terrain(cell) for cell in row) for row in _ROWS
)


class Facing(IntEnum):
    """Which way the character looks; also its row in the sprite sheet."""

    DOWN = 0
    UP = 1
    LEFT = 2
    RIGHT = 3


class Move(Enum):
    """A step on the grid: column change, row change and the facing it gives."""

    UP = (0, -1, Facing.UP)
    DOWN = (0, 1, Facing.DOWN)
    LEFT = (-1, 0, Facing.LEFT)
    RIGHT = (1, 0, Facing.RIGHT)
    UP_LEFT = (-1, -1, Facing.UP)
    UP_RIGHT = (1, -1, Facing.RIGHT)
    DOWN_LEFT = (-1, 1, Facing.LEFT)
    DOWN_RIGHT = (1, 1, Facing.DOWN)

    def __init__(self, dx: int, dy: int, facing: Facing) -> None:
        self.dx = dx
        self.dy = dy
        self.facing = facing

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0


def tile_screen_position(col: int, row: int) -> tuple[int, int]:
    """Screen centre of tile (col, row), y pointing up."""
    x = ORIGIN_X + (col - row) * (TILE_WIDTH // 2)
    y = ORIGIN_Y - (col + row) * (TILE_HEIGHT // 2)
    return x, y


def tile_uv(tile_index: int) -> tuple[float, float]:
    """Horizontal texture range (u0, u1) of a tile in the tileset strip."""
    return tile_index / TILESET_COLUMNS, (tile_index + 1) / TILESET_COLUMNS


class Game:
    """Player position, coins, lava confirmation and walk animation."""

    def __init__(self, notify: Callable[[str], None] = print) -> None:
        self.notify = notify
        self.layout = LAYOUT
        self.position: tuple[int, int] = START_POSITION
        self.coins: set[tuple[int, int]] = set()
        self.coin_count = 0
        self.facing = Facing.UP
        self.is_moving = False
        self.frame = 0
        self.frame_timer = 0.0
        self.last_direction: Facing | None = None
        self.lava_intent = False
        self.reset()

    def reset(self) -> None:
        """Put the player back at the start and lay out all coins again."""
        self.position = START_POSITION
        self.coin_count = 0
        self.coins = set(COIN_POSITIONS)
        self.notify("All coins collected! Restarting game...")

    def _terrain(self, col: int, row: int) -> Terrain:
        return self.layout[row][col]

    def press(self, move: Move) -> bool:
        """Handle one key press; return whether the player stepped.

        Water cannot be entered. Lava needs the same direction pressed twice.
        """
        x, y = self.position
        nx, ny = x + move.dx, y + move.dy
        in_bounds = 0 <= nx < MAP_WIDTH and 0 <= ny < MAP_HEIGHT
        target = (nx, ny) if in_bounds else (x, y)
        # A diagonal off the edge is ignored entirely; a straight one still turns.
        if in_bounds or not move.is_diagonal:
            self.facing = move.facing

        terrain = self._terrain(*target)
        if terrain in BLOCKING:
            return False

        moved = False
        if terrain is Terrain.LAVA and not (
            self.lava_intent and self.facing == self.last_direction
        ):
            self.lava_intent = True
            self.last_direction = self.facing
            self.notify("You are about to step on lava! Press again in the same direction.")
        else:
            self.position = target
            self.is_moving = True
            self.lava_intent = False
            moved = True

        self.last_direction = self.facing
        return moved

    def collect_coin(self) -> bool:
        """Pick up a coin on the player's tile; restart once all are taken."""
        if self.position not in self.coins:
            return False
        self.coins.discard(self.position)
        self.coin_count += 1
        self.notify(f"Coins collected: {self.coin_count}")
        if self.coin_count >= TOTAL_COINS:
            self.reset()
        return True

    def animate(self, delta_time: float) -> None:
        """Advance the walk cycle while moving; stand still otherwise."""
        if self.is_moving:
            self.frame_timer += delta_time
            if self.frame_timer >= FRAME_TIME:
                self.frame_timer = 0.0
                self.frame = (self.frame + 1) % FRAME_COLS
        else:
            self.frame = 0

    def sprite_uv(self) -> tuple[float, float, float, float]:
        """Texture rectangle (u0, v0, u1, v1) of the current sprite frame."""
        return (
            self.frame / FRAME_COLS,
            int(self.facing) / FRAME_ROWS,
            (self.frame + 1) / FRAME_COLS,
            (int(self.facing) + 1) / FRAME_ROWS,
        )

    def on_lava(self) -> bool:
        """Whether the player stands on lava."""
        return self._terrain(*self.position) is Terrain.LAVA