import logging
from collections import namedtuple

from ascii_breakout.arena import MAX_X, MAX_Y, PAD_W, PAD_Y

logger = logging.getLogger(__name__)

Ball = namedtuple("Ball", ["x", "y", "dx", "dy"])

# Outcome of a vertical resolution: keep going with `direction`, or the ball is gone.
Continue = namedtuple("Continue", ["direction"])


class BallLost:
    def __repr__(self):
        return "BallLost"


BALL_LOST = BallLost()


def _struck_block(grid, next_y, next_x, is_edge):
    # Owner of the cell the ball is moving into, if that cell is a live edge of the wanted orientation
    if not grid.contains(next_y, next_x):
        return None
    block_id = grid.owner_of(next_y, next_x)
    if grid.is_broken(block_id) or not is_edge(grid.shape_at(next_y, next_x)):
        return None
    return block_id


def resolve_x(grid, dir_x, next_y, next_x):
    """New horizontal direction after the ball tries to enter column ``next_x``."""
    # Side walls
    if next_x >= MAX_X or next_x <= 0:
        return -dir_x

    # Side of a block
    block_id = _struck_block(grid, next_y, next_x, lambda glyph: glyph.is_vertical_edge)
    if block_id is not None:
        grid.break_block(block_id)
        return -dir_x

    return dir_x


def resolve_y(grid, dir_y, next_y, next_x, pad_x):
    """
    Resolve the ball trying to enter row ``next_y``.

    Returns ``Continue(direction)`` while the ball is in play and ``BALL_LOST``
    once it has dropped below the floor. The paddle test does not look at the
    sign of ``dir_y``, so a rising ball crossing the paddle row bounces as well.
    """
    # Ceiling or paddle
    if next_y <= 0 or (next_y == PAD_Y and pad_x <= next_x <= pad_x + PAD_W):
        return Continue(-dir_y)

    # Top or bottom of a block
    block_id = _struck_block(grid, next_y, next_x, lambda glyph: glyph.is_horizontal_edge)
    if block_id is not None:
        grid.break_block(block_id)
        return Continue(-dir_y)

    if next_y > MAX_Y:
        return BALL_LOST

    return Continue(dir_y)


def advance_ball(grid, ball, pad_x):
    """
    Move the ball one physics tick.

    Both axes are resolved against the cell the ball is heading into, computed
    from the position before either axis moves. An axis only advances when its
    direction did not flip. Returns the new ``Ball``, or ``BALL_LOST``.
    """
    next_x = ball.x + ball.dx
    next_y = ball.y + ball.dy

    dx = resolve_x(grid, ball.dx, next_y, next_x)
    x = ball.x + ball.dx if dx == ball.dx else ball.x

    outcome = resolve_y(grid, ball.dy, next_y, next_x, pad_x)
    if outcome is BALL_LOST:
        logger.debug("Ball lost at column %d", next_x)
        return BALL_LOST
    dy = outcome.direction
    y = ball.y + ball.dy if dy == ball.dy else ball.y

    return Ball(x, y, dx, dy)
