"""
Core game logic for the Tower of Hanoi.

This module provides the tower and disc types, the game state machine and
the optimal solver, independent of any input or rendering layer.
"""

from core.tower import TowerId, Disc, Tower
from core.game_state import Game, GameSnapshot, Idle, Armed, new_game
from core.commands import Command
from core.solver import solve, moves_to_commands

__all__ = [
    "TowerId",
    "Disc",
    "Tower",
    "Game",
    "GameSnapshot",
    "Idle",
    "Armed",
    "new_game",
    "Command",
    "solve",
    "moves_to_commands",
]
