"""
Key bindings for terminal play.

Maps curses key codes to game commands.
"""

from __future__ import annotations

from typing import Optional
import curses

from core.commands import Command

KEY_BINDINGS = {
    curses.KEY_LEFT: Command.RETREAT,
    curses.KEY_RIGHT: Command.ADVANCE,
    curses.KEY_ENTER: Command.ACTIVATE,
    ord("\n"): Command.ACTIVATE,
    ord("\r"): Command.ACTIVATE,
    ord("r"): Command.RESET,
    ord("R"): Command.RESET,
    ord("q"): Command.QUIT,
}


def key_to_command(key: int) -> Optional[Command]:
    """
    Look up the command bound to a key.

    Args:
        key: Key code from curses getch()

    Returns:
        Bound command, or None for unbound keys
    """
    return KEY_BINDINGS.get(key)
