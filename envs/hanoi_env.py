"""
Command-driven Tower of Hanoi environment.

This environment plays the role of the input layer: it turns discrete
commands into Game operations, checks for a win after each activation, and
returns observations built from immutable snapshots.
"""

from __future__ import annotations

from typing import Optional, Any, Callable, Union
import logging
import torch

from core.commands import Command, PLAY_COMMANDS
from core.game_state import Game, GameSnapshot, DEFAULT_DISC_WIDTHS
from views.vector_view import VectorView
from utils.device import get_device_name, resolve_device

logger = logging.getLogger(__name__)


def default_sparse_reward(prev: GameSnapshot, new: GameSnapshot) -> float:
    """
    Default sparse reward: 1.0 on the step that solves the puzzle, 0 otherwise.

    Args:
        prev: Snapshot before the command
        new: Snapshot after the command

    Returns:
        Float reward
    """
    return 1.0 if new.finished and not prev.finished else 0.0


class HanoiEnv:
    """
    Single-game Tower of Hanoi environment.

    Commands:
        ADVANCE / RETREAT: move the pointer (ignored once finished)
        ACTIVATE: arm or complete a move, then check for a win (ignored once finished)
        RESET: discard the game and start a fresh episode (clears quit and steps)
        QUIT: end the episode without touching the game

    Attributes:
        disc_widths: Starting disc widths, top to bottom
        device: Device observation tensors are stored on
        game: Current Game instance
        vector_view: Encoder for observation tensors
        reward_fn: Reward function (defaults to sparse solve reward)
        max_steps: Optional step limit per episode
        steps: Steps taken in the current episode
        quit: Whether QUIT was received
    """

    def __init__(
        self,
        disc_widths: tuple[int, ...] = DEFAULT_DISC_WIDTHS,
        reward_fn: Optional[Callable[[GameSnapshot, GameSnapshot], float]] = None,
        max_steps: Optional[int] = None,
        device: Optional[torch.device | str] = None
    ):
        """
        Initialize environment.

        Args:
            disc_widths: Starting disc widths on the middle tower, top to bottom
            reward_fn: Optional custom reward function
            max_steps: Optional maximum steps before the episode is truncated
            device: Device to store tensors on (cpu/cuda/mps)
        """
        self.device = resolve_device(device)
        self.disc_widths = tuple(disc_widths)
        self.reward_fn = reward_fn or default_sparse_reward
        self.max_steps = max_steps
        self.vector_view = VectorView(disc_count=len(self.disc_widths), device=self.device)
        logger.debug("Observation tensors on %s", get_device_name(self.device))

        self._new_game()

    def reset(self, seed: Optional[int] = None) -> dict[str, Any]:
        """
        Start a fresh game.

        Args:
            seed: Unused; the starting layout is fixed. Accepted for API parity
                  with other environments.

        Returns:
            Observation dict
        """
        self._new_game()
        logger.info("Started new game with %d discs", self.game.disc_count)
        return self._get_observation()

    def _new_game(self) -> None:
        self.game = Game(self.disc_widths)
        self.steps = 0
        self.quit = False

    def step(
        self,
        command: Union[Command, str]
    ) -> tuple[dict[str, Any], float, bool, dict[str, Any]]:
        """
        Apply one command.

        Args:
            command: Command member or name

        Returns:
            Tuple of (obs, reward, done, info)

        Raises:
            ValueError: If the command is unknown
        """
        command = Command.parse(command)
        prev = self.game.snapshot()

        # RESET clears quit and the step count
        if command is Command.RESET:
            self._new_game()
            logger.info("Game reset")
        else:
            if command is Command.QUIT:
                self.quit = True
            elif command in PLAY_COMMANDS and not self.game.finished:
                self._apply(command)
            self.steps += 1

        new = self.game.snapshot()
        reward = self.reward_fn(prev, new)

        truncated = self.max_steps is not None and self.steps >= self.max_steps
        done = new.finished or self.quit or truncated

        return self._get_observation(new), reward, done, self.get_info(truncated)

    def _apply(self, command: Command) -> None:
        if command is Command.ADVANCE:
            self.game.advance_pointer()
        elif command is Command.RETREAT:
            self.game.retreat_pointer()
        elif command is Command.ACTIVATE:
            self.game.activate()
            if self.game.evaluate_win():
                logger.info("Puzzle solved in %d moves", self.game.move_count)

    def snapshot(self) -> GameSnapshot:
        return self.game.snapshot()

    def _get_observation(self, snapshot: Optional[GameSnapshot] = None) -> dict[str, Any]:
        """
        Build observation dict.

        Returns:
            Dictionary with:
                - "snapshot": GameSnapshot
                - "tensor": encoded snapshot from VectorView
        """
        if snapshot is None:
            snapshot = self.game.snapshot()
        return {
            "snapshot": snapshot,
            "tensor": self.vector_view.encode(snapshot),
        }

    def get_info(self, truncated: bool = False) -> dict[str, Any]:
        return {
            "moves": self.game.move_count,
            "steps": self.steps,
            "finished": self.game.finished,
            "quit": self.quit,
            "truncated": truncated,
        }
