"""
Optimal Tower of Hanoi solutions expressed as game commands.
"""

from __future__ import annotations

from core.commands import Command
from core.tower import TowerId


def solve(
    n_discs: int,
    source: TowerId = TowerId.MIDDLE,
    target: TowerId = TowerId.RIGHT
) -> list[tuple[TowerId, TowerId]]:
    """
    Compute the optimal move sequence for n discs.

    Args:
        n_discs: Number of discs on the source tower
        source: Tower holding the discs
        target: Tower to move them to

    Returns:
        List of 2**n - 1 (source, destination) moves

    Raises:
        ValueError: If source equals target
    """
    if source == target:
        raise ValueError("source and target must differ")

    spare = TowerId(3 - source - target)
    moves: list[tuple[TowerId, TowerId]] = []

    def _move(n: int, src: TowerId, dst: TowerId, via: TowerId) -> None:
        if n == 0:
            return
        _move(n - 1, src, via, dst)
        moves.append((src, dst))
        _move(n - 1, via, dst, src)

    _move(n_discs, source, target, spare)
    return moves


def navigate(start: TowerId, goal: TowerId) -> list[Command]:
    """Pointer commands that move the pointer from start to goal."""
    if goal > start:
        return [Command.ADVANCE] * (goal - start)
    return [Command.RETREAT] * (start - goal)


def moves_to_commands(
    moves: list[tuple[TowerId, TowerId]],
    start_pointer: TowerId = TowerId.MIDDLE
) -> list[Command]:
    """
    Translate disc moves into pointer and activate commands.

    Each move becomes: point at source, activate, point at destination, activate.

    Args:
        moves: (source, destination) pairs
        start_pointer: Pointer position before the first command

    Returns:
        Flat list of commands
    """
    commands = []
    pointer = start_pointer
    for src, dst in moves:
        commands += navigate(pointer, src)
        commands.append(Command.ACTIVATE)
        commands += navigate(src, dst)
        commands.append(Command.ACTIVATE)
        pointer = dst
    return commands
