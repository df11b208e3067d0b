import curses

import pytest

from ascii_breakout import terminal
from ascii_breakout.arena import Intent
from ascii_breakout.game import GameResult


class FakeScreen:
    def __init__(self, rows=30, cols=80):
        self.size = (rows, cols)
        self.cells = {}
        self.refreshes = 0

    def getmaxyx(self):
        return self.size

    def keypad(self, flag):
        pass

    def nodelay(self, flag):
        pass

    def getch(self):
        return -1

    def addstr(self, y, x, text):
        self.cells[(y, x)] = text

    def refresh(self):
        self.refreshes += 1

    def erase(self):
        self.cells.clear()


@pytest.fixture
def fake_curses(monkeypatch):
    for name in ("curs_set", "noecho", "cbreak"):
        monkeypatch.setattr(curses, name, lambda *args: None)
    monkeypatch.setattr(terminal.time, "sleep", lambda seconds: None)


def test_intent_for_key():
    assert terminal.intent_for_key(curses.KEY_LEFT) is Intent.LEFT
    assert terminal.intent_for_key(curses.KEY_RIGHT) is Intent.RIGHT
    assert terminal.intent_for_key(-1) is Intent.NONE
    assert terminal.intent_for_key(ord("q")) is Intent.NONE


def test_announce_lose(capsys):
    terminal.announce(GameResult.LOST)
    assert capsys.readouterr().out == (
        "\n\t#################\n\t# You lose! >:( #\n\t#################\n\n"
    )


def test_announce_win(capsys):
    terminal.announce(GameResult.WON)
    assert "\t# You win! >:)  #\n" in capsys.readouterr().out


def test_play_rejects_small_terminal(fake_curses):
    with pytest.raises(RuntimeError):
        terminal.play(FakeScreen(rows=20, cols=60))


def test_play_runs_to_completion(fake_curses):
    screen = FakeScreen()
    assert terminal.play(screen) is GameResult.LOST
    assert screen.refreshes == 68


def test_main_announces_result(monkeypatch, capsys):
    monkeypatch.setattr(curses, "wrapper", lambda func: GameResult.WON)
    assert terminal.main() == 0
    assert "You win!" in capsys.readouterr().out
