"""ASCII Breakout: a one-cell-per-tick brick breaker for the terminal."""

from ascii_breakout.arena import Intent
from ascii_breakout.blocks import BlockGrid, Glyph
from ascii_breakout.game import Breakout, GameResult, run

__all__ = ["Breakout", "BlockGrid", "GameResult", "Glyph", "Intent", "run"]
