"""
Towers and discs for the Tower of Hanoi puzzle.

This module provides the leaf data types of the game: tower positions with
saturating navigation, immutable discs, and the disc stack held by each tower.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

MAX_DISC_WIDTH = 100


class TowerId(IntEnum):
    """
    Position of a tower, ordered left to right.

    The ordinal value indexes the game's fixed tower array.
    """

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2

    def next(self) -> TowerId:
        """Tower to the right, saturating at RIGHT."""
        return TowerId(min(self + 1, TowerId.RIGHT))

    def previous(self) -> TowerId:
        """Tower to the left, saturating at LEFT."""
        return TowerId(max(self - 1, TowerId.LEFT))


@dataclass(frozen=True, order=True)
class Disc:
    """
    Immutable disc.

    Attributes:
        width: Width as a percentage of the tower column (at most 100)
    """
    width: int

    def __post_init__(self):
        if self.width > MAX_DISC_WIDTH:
            raise ValueError(
                f"Disc width {self.width} exceeds maximum of {MAX_DISC_WIDTH}"
            )


@dataclass
class Tower:
    """
    Stack of discs bound to a tower position.

    The top of the stack is the front of `stack` (index 0).

    Attributes:
        id: Position of this tower
        stack: Discs ordered top to bottom
    """
    id: TowerId
    stack: list[Disc] = field(default_factory=list)

    def push_top(self, disc: Disc) -> None:
        """
        Place a disc on top of the stack.

        No check is made against the current top disc.
        """
        self.stack.insert(0, disc)

    def pop_top(self) -> Disc:
        """
        Remove and return the top disc.

        Raises:
            IndexError: If the tower is empty
        """
        if not self.stack:
            raise IndexError(f"Cannot pop from empty tower {self.id.name}")
        return self.stack.pop(0)

    def top(self) -> Optional[Disc]:
        return self.stack[0] if self.stack else None

    def peek_is_empty(self) -> bool:
        return not self.stack

    def widths(self) -> list[int]:
        """Disc widths from top to bottom."""
        return [disc.width for disc in self.stack]

    def is_ordered(self) -> bool:
        """
        Check that no disc is wider than the disc directly below it.

        Equal widths are allowed. An empty tower is ordered.
        """
        return all(upper <= lower for upper, lower in zip(self.stack, self.stack[1:]))

    def __len__(self) -> int:
        return len(self.stack)
