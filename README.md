# isotiles

A small isometric tile-map game: walk a character across a 15×15 map of
sand, grass, stone, lava and water and collect the four coins. Once all
four are collected the player goes back to the start and the coins are
laid out again.

The package also provides the building blocks the game is made from:

- `isotiles.vectors`: `Vec2`, `Vec3`, `Vec4`, the `Versor` quaternion
  (stored as w, x, y, z) and `slerp`.
- `isotiles.matrices`: `Mat3`, `Mat4` (values stored column by column),
  the affine helpers `translate`, `rotate_x_deg`, `rotate_y_deg`,
  `rotate_z_deg` and `scale`, the camera helpers `look_at` and
  `perspective`, and `quat_to_mat4`. `Mat4.inverse()` returns a singular
  matrix unchanged and issues a `RuntimeWarning`.
- `isotiles.geometry`: vector helpers that work on plain sequences
  (`length`, `normalise`, `dot`, `cross` and their `_2d` forms),
  `triangle_area_2d`, and two point-in-triangle tests,
  `triangle_collide_point_2d` and `collide_by_dot_product`.
- `isotiles.tilemap`: `TileMap`, a grid of byte-sized tile ids read with
  `tile(col, row)` and written with `set_tile(col, row, tile)` (positions
  outside the grid raise `IndexError`), and the `Layer` record.
- `isotiles.views`: the `Direction` enum, the abstract `TilemapView`
  interface and `SlideView`, a staggered layout with `draw_position`,
  `mouse_map` and `tile_walking`.
- `isotiles.game`: the game rules (`Game`, `Terrain`, `Facing`, `Move`,
  `tile_screen_position`, `tile_uv`). This module draws nothing.
- `isotiles.app`: the pygame window, input handling and drawing.

## Installing

```
pip install .
```

## Playing

```
isotiles
```

The game loads three images from an assets directory:

- `tilesets/tilesetIso.png`: a strip of seven isometric tiles (sand,
  grass, stone, lava, shallow water, deep water, and the highlight drawn
  under the player),
- `sprites/VampireWalk.png`: a walking sprite sheet with five frames
  across and four rows (down, up, left, right),
- `sprites/Moeda.png`: the coin.

By default the directory is `../assets`, relative to where the command is
run. Choose another with `--assets`:

```
isotiles --assets path/to/assets
```

If an image is missing the command prints an error and exits with
status 1.

Controls:

| Key | Move        |
|-----|-------------|
| W   | up          |
| X   | down        |
| A   | left        |
| D   | right       |
| Q   | up-left     |
| E   | up-right    |
| Z   | down-left   |
| C   | down-right  |

Shallow and deep water block the way. Stepping onto lava needs the same
direction pressed twice in a row. While the player stands on lava the
character is tinted red. Progress messages are printed to standard output.

## Using the game rules in code

```python
from isotiles.game import Game, Move

game = Game(notify=lambda message: None)
game.press(Move.RIGHT)   # True if the player stepped
game.collect_coin()      # True if a coin was picked up
print(game.position, game.coin_count)
```

`Game` reports its messages through the `notify` callable. The default is
`print`.

## What is not included

The package contains no images. You need to supply the three image files
described above before the game can be played.

## Running the tests

```
pip install .[test]
pytest
```