"""
Discrete input commands understood by the game.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class Command(Enum):
    """Discrete commands produced by the input layer."""

    ADVANCE = "advance"
    RETREAT = "retreat"
    ACTIVATE = "activate"
    RESET = "reset"
    QUIT = "quit"

    @classmethod
    def parse(cls, command: Union[Command, str]) -> Command:
        """
        Convert a command or its name to a Command.

        Args:
            command: Command member or name (case-insensitive)

        Returns:
            Command member

        Raises:
            ValueError: If the name is not a known command
        """
        if isinstance(command, cls):
            return command
        try:
            return cls(str(command).lower())
        except ValueError:
            valid = [c.value for c in cls]
            raise ValueError(f"Unknown command '{command}', expected one of {valid}") from None


# Commands that only act on a game that is still in progress
PLAY_COMMANDS = frozenset({Command.ADVANCE, Command.RETREAT, Command.ACTIVATE})
