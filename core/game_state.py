"""
Game state machine for the Tower of Hanoi puzzle.

This module provides the Game class that owns the three towers, the pointer
and the two-phase selection, and implements the select-and-move protocol and
win detection. Input handling and rendering live outside this module and read
the state through immutable snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
import logging

from core.tower import Disc, Tower, TowerId

logger = logging.getLogger(__name__)

# Starting widths, top to bottom
DEFAULT_DISC_WIDTHS = (25, 45, 65, 85)
START_TOWER = TowerId.MIDDLE
WIN_TOWERS = (TowerId.LEFT, TowerId.RIGHT)


@dataclass(frozen=True)
class Idle:
    """No tower is selected."""


@dataclass(frozen=True)
class Armed:
    """
    A tower's top disc is selected as the source of the next move.

    Attributes:
        tower: The armed tower
    """
    tower: TowerId


Selection = Union[Idle, Armed]


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable read of the full game state for rendering.

    Attributes:
        towers: Per-tower disc widths (top to bottom), indexed by TowerId
        pointer: Tower currently targeted
        armed: Armed tower, or None when idle
        finished: Whether the puzzle is solved
        disc_count: Total number of discs in play
    """
    towers: tuple[tuple[int, ...], ...]
    pointer: TowerId
    armed: Optional[TowerId]
    finished: bool
    disc_count: int

    def tower(self, tower_id: TowerId) -> tuple[int, ...]:
        return self.towers[tower_id]


class Game:
    """
    Single Tower of Hanoi game.

    All discs start on the middle tower. The pointer starts on the middle
    tower and nothing is selected.

    `activate()` drives a two-state protocol:
        Idle      -> Armed(pointer) if the pointed tower has discs
        Armed(t)  -> move top disc of t onto the pointed tower, back to Idle

    Moves are never rejected for disc size; ordering is only checked by
    `evaluate_win()`.

    Attributes:
        towers: One Tower per TowerId, indexed by its ordinal
        pointer: Tower currently targeted
        selection: Idle or Armed(tower)
        finished: Set by `evaluate_win()`
        disc_count: Total number of discs
        move_count: Number of completed moves (including same-tower moves)
    """

    def __init__(self, disc_widths: tuple[int, ...] = DEFAULT_DISC_WIDTHS):
        """
        Initialize a game.

        Args:
            disc_widths: Disc widths from top to bottom, stacked on the middle tower

        Raises:
            ValueError: If any width exceeds 100
        """
        self.towers = [Tower(tower_id) for tower_id in TowerId]
        self.towers[START_TOWER].stack = [Disc(w) for w in disc_widths]
        self.pointer = START_TOWER
        self.selection: Selection = Idle()
        self.finished = False
        self.disc_count = len(disc_widths)
        self.move_count = 0

    def tower(self, tower_id: TowerId) -> Tower:
        return self.towers[tower_id]

    @property
    def armed(self) -> Optional[TowerId]:
        """Armed tower, or None when idle."""
        if isinstance(self.selection, Armed):
            return self.selection.tower
        return None

    def advance_pointer(self) -> None:
        self.pointer = self.pointer.next()

    def retreat_pointer(self) -> None:
        self.pointer = self.pointer.previous()

    def activate(self) -> None:
        """
        Arm the pointed tower, or complete the pending move.

        When idle, arms the pointed tower if it holds a disc (no-op otherwise).
        When armed, moves the armed tower's top disc onto the pointed tower,
        which may be the armed tower itself, and returns to idle.
        """
        if isinstance(self.selection, Armed):
            source = self.towers[self.selection.tower]
            destination = self.towers[self.pointer]
            disc = source.pop_top()
            destination.push_top(disc)
            self.selection = Idle()
            self.move_count += 1
            logger.debug(
                "Moved disc %d from %s to %s",
                disc.width, source.id.name, destination.id.name
            )
        elif not self.towers[self.pointer].peek_is_empty():
            self.selection = Armed(self.pointer)
            logger.debug("Armed %s", self.pointer.name)

    def evaluate_win(self) -> bool:
        """
        Recompute the finished flag.

        The game is won when the left or right tower holds every disc with
        widths non-decreasing from top to bottom.

        Returns:
            The updated finished flag
        """
        self.finished = any(
            len(self.towers[t]) == self.disc_count and self.towers[t].is_ordered()
            for t in WIN_TOWERS
        )
        if self.finished:
            logger.debug("Puzzle solved after %d moves", self.move_count)
        return self.finished

    def total_discs(self) -> int:
        """Number of discs currently on all towers."""
        return sum(len(t) for t in self.towers)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            towers=tuple(tuple(t.widths()) for t in self.towers),
            pointer=self.pointer,
            armed=self.armed,
            finished=self.finished,
            disc_count=self.disc_count,
        )


def new_game() -> Game:
    """Create a game in the standard starting layout."""
    return Game(DEFAULT_DISC_WIDTHS)
