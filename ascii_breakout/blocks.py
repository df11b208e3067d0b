import enum
import logging

import numpy as np

from ascii_breakout.arena import BLOCK_COLS, BLOCK_H, BLOCK_ROWS, BLOCK_W

logger = logging.getLogger(__name__)


class Glyph(enum.Enum):
    TOP_CORNER = "top_corner"
    TOP_EDGE = "top_edge"
    BOTTOM_CORNER = "bottom_corner"
    BOTTOM_EDGE = "bottom_edge"
    LEFT_EDGE = "left_edge"
    RIGHT_EDGE = "right_edge"
    INTERIOR = "interior"
    ABSENT = "absent"

    @property
    def char(self):
        return GLYPH_CHARS[self]

    @property
    def is_vertical_edge(self):
        return self in (Glyph.LEFT_EDGE, Glyph.RIGHT_EDGE)

    @property
    def is_horizontal_edge(self):
        return self in (Glyph.TOP_EDGE, Glyph.BOTTOM_EDGE)


GLYPH_CHARS = {
    Glyph.TOP_CORNER: ".",
    Glyph.TOP_EDGE: "-",
    Glyph.BOTTOM_CORNER: "'",
    Glyph.BOTTOM_EDGE: "-",
    Glyph.LEFT_EDGE: "|",
    Glyph.RIGHT_EDGE: "|",
    Glyph.INTERIOR: " ",
    Glyph.ABSENT: "",
}


def block_glyph(i, j):
    """Shape of cell (i, j) relative to the top-left corner of an intact block."""
    last_row = i == BLOCK_H - 1
    side = j == 0 or j == BLOCK_W - 1
    # Corners win over edges
    if i == 0:
        return Glyph.TOP_CORNER if side else Glyph.TOP_EDGE
    if last_row:
        return Glyph.BOTTOM_CORNER if side else Glyph.BOTTOM_EDGE
    if j == 0:
        return Glyph.LEFT_EDGE
    if j == BLOCK_W - 1:
        return Glyph.RIGHT_EDGE
    return Glyph.INTERIOR


class BlockGrid:
    """
    Intact/broken state of the block wall.

    Blocks are identified by ``(row, col)`` indices into a ``rows x cols`` array.
    Screen cells inside the block region map to their owner arithmetically, so
    the shape reported for a cell always follows the owner's current flag.
    """

    def __init__(self, rows=BLOCK_ROWS, cols=BLOCK_COLS):
        self.rows = rows
        self.cols = cols
        self.height = rows * BLOCK_H
        self.width = cols * BLOCK_W
        self.broken = np.zeros((rows, cols), dtype=bool)

    def contains(self, y, x):
        return 0 <= y < self.height and 0 <= x < self.width

    def _check(self, y, x):
        if not self.contains(y, x):
            raise IndexError(f"cell ({y}, {x}) is outside the block region")

    def owner_of(self, y, x):
        self._check(y, x)
        return y // BLOCK_H, x // BLOCK_W

    def is_broken(self, block_id):
        return bool(self.broken[block_id])

    def shape_at(self, y, x):
        if self.is_broken(self.owner_of(y, x)):
            return Glyph.ABSENT
        return block_glyph(y % BLOCK_H, x % BLOCK_W)

    def break_block(self, block_id):
        if self.broken[block_id]:
            return
        self.broken[block_id] = True
        logger.debug("Block %s broken, %d remaining", block_id, self.remaining())

    def broken_count(self):
        return int(np.count_nonzero(self.broken))

    def remaining(self):
        return self.broken.size - self.broken_count()

    def all_broken(self):
        return bool(self.broken.all())

    def draw(self, sink):
        for y in range(self.height):
            for x in range(self.width):
                char = self.shape_at(y, x).char
                if char:
                    sink(y, x, char)
