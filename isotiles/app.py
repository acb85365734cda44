"""Window, input and drawing for the isometric coin game."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import pygame

from .game import (
    FRAME_COLS,
    FRAME_ROWS,
    MAP_HEIGHT,
    MAP_WIDTH,
    TILE_HEIGHT,
    TILE_WIDTH,
    TILESET_COLUMNS,
    Game,
    Move,
    Terrain,
    tile_screen_position,
)

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Isometric Tilemap with Coins"

TILESET_FILE = Path("tilesets") / "tilesetIso.png"
CHARACTER_FILE = Path("sprites") / "VampireWalk.png"
COIN_FILE = Path("sprites") / "Moeda.png"
DEFAULT_ASSETS_DIR = Path("..") / "assets"

COIN_SIZE = 32
COIN_OFFSET_Y = 20
SPRITE_SIZE = 64
SPRITE_OFFSET_X = -7
SPRITE_OFFSET_Y = 40

_PLAIN = (255, 255, 255, 255)
_DIMMED = (204, 255, 255, 255)
_LAVA_TINT = (255, 77, 77, 255)

_KEY_MOVES = {
    pygame.K_w: Move.UP,
    pygame.K_x: Move.DOWN,
    pygame.K_a: Move.LEFT,
    pygame.K_d: Move.RIGHT,
    pygame.K_q: Move.UP_LEFT,
    pygame.K_e: Move.UP_RIGHT,
    pygame.K_z: Move.DOWN_LEFT,
    pygame.K_c: Move.DOWN_RIGHT,
}


@dataclass
class Assets:
    """The three images the game draws with."""

    tileset: pygame.Surface
    character: pygame.Surface
    coin: pygame.Surface


def flip_y(y: float, height: float) -> float:
    """Convert a y measured upwards from the bottom into one measured downwards."""
    return height - y


def translate_key(key: int) -> Move | None:
    """Move bound to a key (WAXD and the QEZC diagonals), or None."""
    return _KEY_MOVES.get(key)


def _load_image(path: Path) -> pygame.Surface:
    if not path.is_file():
        raise FileNotFoundError(f"Error loading image: {path}")
    return pygame.image.load(str(path))


def load_assets(base: str | Path) -> Assets:
    """Load the tileset, character sheet and coin images from ``base``."""
    root = Path(base)
    return Assets(
        tileset=_load_image(root / TILESET_FILE),
        character=_load_image(root / CHARACTER_FILE),
        coin=_load_image(root / COIN_FILE),
    )


def _tinted(surface: pygame.Surface, colour: tuple[int, int, int, int]) -> pygame.Surface:
    result = surface.copy()
    if colour != _PLAIN:
        result.fill(colour, special_flags=pygame.BLEND_RGBA_MULT)
    return result


def _sub_image(
    sheet: pygame.Surface, u0: float, v0: float, u1: float, v1: float
) -> pygame.Surface:
    width, height = sheet.get_size()
    left, top = int(u0 * width), int(v0 * height)
    right, bottom = int(u1 * width), int(v1 * height)
    rect = pygame.Rect(left, top, max(1, right - left), max(1, bottom - top))
    return sheet.subsurface(rect.clip(sheet.get_rect()))


class _Renderer:
    """Pre-scaled images and the drawing of one frame."""

    def __init__(self, screen: pygame.Surface, assets: Assets) -> None:
        self.screen = screen
        self.height = screen.get_height()
        self.tiles: dict[tuple[int, bool], pygame.Surface] = {}
        for index in range(TILESET_COLUMNS):
            cell = _sub_image(
                assets.tileset, index / TILESET_COLUMNS, 0.0, (index + 1) / TILESET_COLUMNS, 1.0
            )
            # Texture rows run bottom-up on screen for tiles and coins.
            image = pygame.transform.flip(
                pygame.transform.scale(cell, (TILE_WIDTH, TILE_HEIGHT)), False, True
            )
            self.tiles[index, True] = _tinted(image, _PLAIN)
            self.tiles[index, False] = _tinted(image, _DIMMED)
        self.coin = pygame.transform.flip(
            pygame.transform.scale(assets.coin, (COIN_SIZE, COIN_SIZE)), False, True
        )
        self.character = assets.character
        self._frames: dict[tuple[float, float, float, float, bool], pygame.Surface] = {}

    def _top(self, y_up: float) -> int:
        return int(flip_y(y_up, self.height))

    def draw_tiles(self, game: Game) -> None:
        for row in range(MAP_HEIGHT):
            for col in range(MAP_WIDTH):
                selected = (col, row) == game.position
                index = Terrain.PLAYER if selected else game.layout[row][col]
                x, y = tile_screen_position(col, row)
                self.screen.blit(
                    self.tiles[int(index), selected],
                    (x - TILE_WIDTH // 2, self._top(y + TILE_HEIGHT // 2)),
                )

    def draw_coins(self, game: Game) -> None:
        for row in range(MAP_HEIGHT):
            for col in range(MAP_WIDTH):
                if (col, row) not in game.coins:
                    continue
                x, y = tile_screen_position(col, row)
                top = y + TILE_HEIGHT // 2 + COIN_SIZE - COIN_OFFSET_Y
                self.screen.blit(self.coin, (x - COIN_SIZE // 2, self._top(top)))

    def draw_character(self, game: Game) -> None:
        uv = game.sprite_uv()
        lava = game.on_lava()
        key = (*uv, lava)
        image = self._frames.get(key)
        if image is None:
            frame = pygame.transform.scale(
                _sub_image(self.character, *uv), (SPRITE_SIZE, SPRITE_SIZE)
            )
            image = _tinted(frame, _LAVA_TINT if lava else _PLAIN)
            self._frames[key] = image
        x, y = tile_screen_position(*game.position)
        top = y + TILE_HEIGHT // 2 + SPRITE_SIZE - SPRITE_OFFSET_Y
        self.screen.blit(image, (x - SPRITE_SIZE // 2 + SPRITE_OFFSET_X, self._top(top)))


def run(assets_dir: str | Path = DEFAULT_ASSETS_DIR) -> None:
    """Open the window and play until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        loaded = load_assets(assets_dir)
        assets = Assets(
            tileset=loaded.tileset.convert_alpha(),
            character=loaded.character.convert_alpha(),
            coin=loaded.coin.convert_alpha(),
        )
        renderer = _Renderer(screen, assets)
        game = Game()
        clock = pygame.time.Clock()
        last_time = time.perf_counter()
        running = True
        while running:
            now = time.perf_counter()
            delta_time = now - last_time
            last_time = now

            screen.fill((0, 0, 0))
            renderer.draw_tiles(game)
            game.collect_coin()
            renderer.draw_coins(game)
            game.animate(delta_time)
            renderer.draw_character(game)
            game.is_moving = False
            pygame.display.flip()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    move = translate_key(event.key)
                    if move is not None:
                        game.press(move)
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(description="Collect the coins on an isometric map.")
    parser.add_argument(
        "--assets",
        default=str(DEFAULT_ASSETS_DIR),
        help="directory holding tilesets/ and sprites/",
    )
    args = parser.parse_args(argv)
    try:
        run(args.assets)
    except (FileNotFoundError, pygame.error) as error:
        print(error, file=sys.stderr)
        return 1
    return 0