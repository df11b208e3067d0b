import enum
import logging

import numpy as np

from ascii_breakout.arena import (
    BALL_CHAR,
    BALL_DELAY,
    BALL_START,
    BALL_START_DIR,
    MAX_X,
    MAX_Y,
    PADDLE_CHARS,
    PAD_START_X,
    PAD_Y,
    draw_board,
    move_paddle,
)
from ascii_breakout.blocks import BlockGrid
from ascii_breakout.collision import BALL_LOST, Ball, advance_ball

logger = logging.getLogger(__name__)

FRAME_ROWS = MAX_Y + 1
FRAME_COLS = MAX_X + 1


class GameResult(enum.Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Breakout:
    """Tick-driven game state: paddle every tick, ball every BALL_DELAY ticks."""

    def __init__(self):
        self.grid = BlockGrid()
        self.ball = Ball(BALL_START[0], BALL_START[1], *BALL_START_DIR)
        self.pad_x = PAD_START_X
        self.delay_count = 0
        self.ticks = 0
        self.result = GameResult.PLAYING

    @property
    def done(self):
        return self.result is not GameResult.PLAYING

    def tick(self, intent):
        if self.done:
            return self.result

        self.ticks += 1
        self.pad_x = move_paddle(self.pad_x, intent)

        self.delay_count += 1
        if self.delay_count >= BALL_DELAY:
            self.delay_count = 0
            moved = advance_ball(self.grid, self.ball, self.pad_x)
            if moved is BALL_LOST:
                self._finish(GameResult.LOST)
                return self.result
            self.ball = moved

        if self.grid.all_broken():
            self._finish(GameResult.WON)
        return self.result

    def _finish(self, result):
        self.result = result
        logger.debug("Game over after %d ticks: %s", self.ticks, result.value)

    def render(self, sink):
        draw_board(sink)
        self.grid.draw(sink)
        sink(self.ball.y, self.ball.x, BALL_CHAR)
        for i, char in enumerate(PADDLE_CHARS):
            sink(PAD_Y, self.pad_x + i, char)

    def frame(self):
        """The current screen as a (rows, cols) array of single characters."""
        buf = np.full((FRAME_ROWS, FRAME_COLS), " ", dtype="<U1")

        def sink(y, x, char):
            buf[y, x] = char

        self.render(sink)
        return buf


def run(render, read_intent, sleep_tick, game=None):
    """
    Play one game against the I/O collaborators and return the final result.

    ``render(row, col, char)`` draws a cell, ``read_intent()`` polls input
    without blocking and ``sleep_tick()`` waits out one frame.
    """
    if game is None:
        game = Breakout()
    while not game.done:
        game.render(render)
        sleep_tick()
        game.tick(read_intent())
    return game.result
