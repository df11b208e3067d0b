import pytest

from ascii_breakout.arena import MAX_X, MAX_Y, PAD_Y
from ascii_breakout.blocks import BlockGrid
from ascii_breakout.collision import (
    BALL_LOST,
    Ball,
    Continue,
    advance_ball,
    resolve_x,
    resolve_y,
)


@pytest.fixture
def grid():
    return BlockGrid()


# --- resolve_x ---

@pytest.mark.parametrize("next_x", [0, -1, MAX_X, MAX_X + 1])
def test_side_walls_flip_x(grid, next_x):
    assert resolve_x(grid, 1, 15, next_x) == -1
    assert resolve_x(grid, -1, 15, next_x) == 1


def test_open_space_keeps_x(grid):
    assert resolve_x(grid, 1, 15, 30) == 1


def test_block_side_flips_x_and_breaks(grid):
    # Left edge of block (0, 1)
    assert resolve_x(grid, 1, 1, 17) == -1
    assert grid.is_broken((0, 1))
    assert grid.broken_count() == 1

    # The same cell is now empty
    assert resolve_x(grid, 1, 1, 17) == 1
    assert grid.broken_count() == 1


def test_x_ignores_corners_and_horizontal_edges(grid):
    assert resolve_x(grid, 1, 3, 17) == 1  # bottom corner
    assert resolve_x(grid, 1, 3, 20) == 1  # bottom edge
    assert resolve_x(grid, 1, 2, 20) == 1  # interior
    assert grid.broken_count() == 0


# --- resolve_y ---

def test_ceiling_bounce(grid):
    assert resolve_y(grid, 1, 0, 5, 20) == Continue(-1)
    assert grid.broken_count() == 0


def test_paddle_save(grid):
    assert resolve_y(grid, 1, PAD_Y, 21, 20) == Continue(-1)


@pytest.mark.parametrize("next_x, expected", [(19, 1), (20, -1), (23, -1), (24, 1)])
def test_paddle_span(grid, next_x, expected):
    assert resolve_y(grid, 1, PAD_Y, next_x, 20) == Continue(expected)


def test_paddle_bounces_rising_ball(grid):
    assert resolve_y(grid, -1, PAD_Y, 21, 20) == Continue(1)


@pytest.mark.parametrize("dir_y", [1, -1])
def test_past_floor_is_lost(grid, dir_y):
    assert resolve_y(grid, dir_y, MAX_Y + 1, 30, 20) is BALL_LOST


def test_floor_row_is_still_in_play(grid):
    assert resolve_y(grid, 1, MAX_Y, 30, 20) == Continue(1)


def test_block_bottom_edge_flips_and_breaks(grid):
    assert resolve_y(grid, -1, 3, 5, 20) == Continue(1)
    assert grid.is_broken((0, 0))

    # Second check on the same cell finds nothing
    assert resolve_y(grid, -1, 3, 5, 20) == Continue(-1)
    assert grid.broken_count() == 1


def test_block_top_edge_flips_and_breaks(grid):
    assert resolve_y(grid, 1, 4, 5, 20) == Continue(-1)
    assert grid.is_broken((1, 0))
    assert not grid.is_broken((0, 0))


def test_y_ignores_vertical_edges(grid):
    assert resolve_y(grid, 1, 2, 17, 20) == Continue(1)
    assert grid.broken_count() == 0


def test_y_outside_block_columns(grid):
    assert resolve_y(grid, 1, 5, -1, 20) == Continue(1)


# --- advance_ball ---

def test_free_flight(grid):
    assert advance_ball(grid, Ball(30, 15, 1, 1), 20) == Ball(31, 16, 1, 1)


def test_wall_bounce_holds_x(grid):
    assert advance_ball(grid, Ball(66, 15, 1, 1), 20) == Ball(66, 16, -1, 1)


def test_ceiling_bounce_holds_y(grid):
    assert advance_ball(grid, Ball(30, 1, 1, -1), 20) == Ball(31, 1, 1, 1)
    assert grid.broken_count() == 0


def test_block_hit_holds_y_and_breaks(grid):
    ball = advance_ball(grid, Ball(5, 8, 1, -1), 20)
    assert ball == Ball(6, 8, 1, 1)
    assert grid.is_broken((1, 0))


def test_paddle_hit_holds_y(grid):
    assert advance_ball(grid, Ball(21, 22, 1, 1), 20) == Ball(22, 22, 1, -1)


def test_miss_is_lost(grid):
    assert advance_ball(grid, Ball(30, MAX_Y, 1, 1), 20) is BALL_LOST


def test_corner_of_arena_flips_both_axes(grid):
    assert advance_ball(grid, Ball(66, 1, 1, -1), 20) == Ball(66, 1, -1, 1)


def test_x_break_clears_cell_for_y(grid):
    grid.break_block((1, 0))
    # Entering the left edge of block (1, 1) from inside the broken block beside it
    ball = advance_ball(grid, Ball(16, 5, 1, 1), 20)
    assert ball == Ball(16, 6, -1, 1)
    assert grid.is_broken((1, 1))
    assert grid.broken_count() == 2
