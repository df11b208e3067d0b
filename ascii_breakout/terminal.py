import curses
import time

from ascii_breakout.arena import DELAY, MAX_X, MAX_Y, Intent
from ascii_breakout.game import GameResult, run

MIN_ROWS = MAX_Y + 1
MIN_COLS = MAX_X + 2  # curses refuses to write the bottom-right cell

KEY_INTENTS = {
    curses.KEY_LEFT: Intent.LEFT,
    curses.KEY_RIGHT: Intent.RIGHT,
}

MESSAGES = {
    GameResult.WON: "You win! >:) ",
    GameResult.LOST: "You lose! >:(",
}


def intent_for_key(key):
    return KEY_INTENTS.get(key, Intent.NONE)


def format_message(result):
    border = "\t#################"
    return f"\n{border}\n\t# {MESSAGES[result]} #\n{border}\n"


def announce(result):
    print(format_message(result))


def play(stdscr):
    curses.curs_set(0)      # Hide the cursor
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    stdscr.nodelay(True)    # getch() returns -1 when no key is waiting

    rows, cols = stdscr.getmaxyx()
    if rows < MIN_ROWS or cols < MIN_COLS:
        raise RuntimeError(
            f"Terminal is {cols}x{rows}, need at least {MIN_COLS}x{MIN_ROWS}"
        )

    def render(y, x, char):
        stdscr.addstr(y, x, char)

    def read_intent():
        return intent_for_key(stdscr.getch())

    def sleep_tick():
        stdscr.refresh()
        time.sleep(DELAY)
        stdscr.erase()

    return run(render, read_intent, sleep_tick)


def main():
    # wrapper() restores the terminal before the message is printed
    result = curses.wrapper(play)
    announce(result)
    return 0


if __name__ == "__main__":
    main()
