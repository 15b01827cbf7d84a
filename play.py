"""
Play the Tower of Hanoi in a terminal.

Left/Right arrows move the pointer, Enter selects a disc and places it,
R restarts and Q quits.
"""

import argparse
import curses
import logging
import sys

from core.commands import Command
from envs.hanoi_env import HanoiEnv
from envs.keymap import key_to_command
from utils.logging_config import configure_logging
from views.text_view import TextView

logger = logging.getLogger(__name__)


def draw(stdscr, view: TextView, env: HanoiEnv) -> None:
    """Draw the current snapshot, clipped to the window."""
    stdscr.erase()
    maxy, maxx = stdscr.getmaxyx()
    for y, line in enumerate(view.render(env.snapshot())):
        if y >= maxy:
            break
        try:
            stdscr.addstr(y, 0, line[:maxx - 1])
        except curses.error:
            pass
    stdscr.refresh()


def run(stdscr, width: int) -> None:
    curses.curs_set(0)
    stdscr.keypad(True)

    _, maxx = stdscr.getmaxyx()
    view = TextView(width=max(TextView.MIN_WIDTH, min(width, maxx - 1)))
    env = HanoiEnv(device="cpu")
    env.reset()

    while True:
        draw(stdscr, view, env)
        command = key_to_command(stdscr.getch())
        if command is None:
            continue
        env.step(command)
        if command is Command.QUIT:
            logger.info("Quit after %d moves", env.game.move_count)
            return


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play the Tower of Hanoi in the terminal.")
    parser.add_argument("--width", type=int, default=80, help="Frame width in characters")
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    parser.add_argument("--log-level", default=None, help="Logging level (default: HANOI_LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)

    # Logging to stderr would corrupt the curses screen
    configure_logging(args.log_level, filename=args.log_file or "hanoi.log")
    curses.wrapper(run, args.width)


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
