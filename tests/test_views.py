import pytest

from isotiles.views import Direction, SlideView, TilemapView


def test_base_view_is_abstract():
    with pytest.raises(TypeError):
        TilemapView()


def test_direction_values_match_numbering():
    view = SlideView()
    assert view.tile_walking(0, 0, 1) == view.tile_walking(0, 0, Direction.NORTH)
    assert view.tile_walking(0, 0, 1) == (-1, 2)
    assert view.tile_walking(0, 0, 8) == view.tile_walking(0, 0, Direction.SOUTHWEST)
    assert view.tile_walking(0, 0, 8) == (0, -1)


def test_origin_tile_draws_at_origin():
    assert SlideView().draw_position(0, 0, 64, 32) == (0, 0)


def test_next_row_shifts_half_a_tile():
    view = SlideView()
    x0, y0 = view.draw_position(3, 2, 64, 32)
    x1, y1 = view.draw_position(3, 3, 64, 32)
    assert x1 - x0 == 64 / 2
    assert y1 - y0 == 32 / 2


@pytest.mark.parametrize("col,row", [(0, 0), (1, 0), (0, 1), (4, 7), (10, 3)])
def test_mouse_map_inverts_draw_position(col, row):
    view = SlideView()
    x, y = view.draw_position(col, row, 64, 32)
    assert view.mouse_map(64, 32, x, y) == (col, row)


@pytest.mark.parametrize(
    "direction,delta",
    [
        (Direction.NORTH, (-1, 2)),
        (Direction.EAST, (1, 0)),
        (Direction.SOUTH, (1, -2)),
        (Direction.WEST, (-1, 0)),
        (Direction.NORTHEAST, (0, 1)),
        (Direction.SOUTHEAST, (1, -1)),
        (Direction.SOUTHWEST, (0, -1)),
        (Direction.NORTHWEST, (-1, 1)),
    ],
)
def test_each_step(direction, delta):
    assert SlideView().tile_walking(0, 0, direction) == delta


@pytest.mark.parametrize(
    "there,back",
    [
        (Direction.NORTH, Direction.SOUTH),
        (Direction.EAST, Direction.WEST),
        (Direction.NORTHEAST, Direction.SOUTHWEST),
        (Direction.NORTHWEST, Direction.SOUTHEAST),
    ],
)
def test_opposite_steps_return_home(there, back):
    view = SlideView()
    col, row = view.tile_walking(5, 5, there)
    assert view.tile_walking(col, row, back) == (5, 5)


def test_plain_int_direction_accepted():
    view = SlideView()
    assert view.tile_walking(2, 2, 3) == view.tile_walking(2, 2, Direction.EAST)


def test_unknown_direction_leaves_position():
    assert SlideView().tile_walking(4, 6, 99) == (4, 6)