"""
Game trackers for Tower of Hanoi experiments.

Trackers receive callbacks during game execution and accumulate data
for analysis or evaluation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
import numpy as np

from core.commands import Command


class GameTracker(ABC):
    """
    Abstract base class for game trackers.

    Trackers receive callbacks during game execution:
    - on_step: Called after each environment step
    - on_episode_end: Called when a game ends
    - get_results: Returns accumulated results

    Subclasses implement these methods to collect different types of data.
    """

    @abstractmethod
    def on_step(
        self,
        step: int,
        obs: dict[str, Any],
        command: Command,
        reward: float,
        done: bool,
        info: dict[str, Any]
    ) -> None:
        """
        Called after each environment step.

        Args:
            step: Step number within the episode
            obs: Observation after the step
            command: Command that was applied
            reward: Reward for the step
            done: Whether the episode ended
            info: Info dict from the environment
        """
        pass

    @abstractmethod
    def on_episode_end(self, episode_idx: int, final_info: dict[str, Any]) -> None:
        """
        Called when an episode (game) ends.

        Args:
            episode_idx: Index of the completed episode
            final_info: Final info dict from the environment
        """
        pass

    @abstractmethod
    def get_results(self) -> Any:
        """
        Get accumulated results.

        Returns:
            Results in tracker-specific format
        """
        pass

    def reset(self) -> None:
        """
        Reset tracker state (optional).

        Default implementation does nothing. Override if tracker needs reset.
        """
        pass


class SummaryTracker(GameTracker):
    """
    Tracker that accumulates summary statistics.

    Computes running statistics across all games:
    - Solve rate
    - Average and std of disc moves
    - Average steps (commands) per game
    - Number of games ended by QUIT or truncation

    Memory efficient - only stores aggregated statistics, not individual games.
    """

    def __init__(self):
        """Initialize summary tracker."""
        self.total_games = 0
        self.solved_games = 0
        self.quit_games = 0
        self.truncated_games = 0
        self.total_steps = 0

        # Moves are only accumulated for solved games
        self.total_moves = 0
        self.moves_sum_sq = 0

        self.total_reward = 0.0

    def on_step(
        self,
        step: int,
        obs: dict[str, Any],
        command: Command,
        reward: float,
        done: bool,
        info: dict[str, Any]
    ) -> None:
        """Accumulate reward."""
        self.total_reward += reward

    def on_episode_end(self, episode_idx: int, final_info: dict[str, Any]) -> None:
        """Update episode statistics."""
        self.total_games += 1
        self.total_steps += final_info.get("steps", 0)

        if final_info.get("finished", False):
            moves = final_info.get("moves", 0)
            self.solved_games += 1
            self.total_moves += moves
            self.moves_sum_sq += moves ** 2
        elif final_info.get("quit", False):
            self.quit_games += 1
        elif final_info.get("truncated", False):
            self.truncated_games += 1

    def get_results(self) -> dict[str, Any]:
        """
        Get summary statistics.

        Returns:
            Dictionary with:
                - total_games: Number of games played
                - solve_rate: Fraction of games solved
                - avg_moves: Average disc moves over solved games
                - moves_std: Std of disc moves over solved games
                - avg_steps: Average commands per game
                - quit_games: Games ended by QUIT before solving
                - truncated_games: Games cut off by the step limit
                - avg_reward: Average total reward per game
        """
        if self.total_games == 0:
            return {
                "total_games": 0,
                "solve_rate": 0.0,
                "avg_moves": 0.0,
                "moves_std": 0.0,
                "avg_steps": 0.0,
                "quit_games": 0,
                "truncated_games": 0,
                "avg_reward": 0.0,
            }

        if self.solved_games > 0:
            mean = self.total_moves / self.solved_games
            # Var = E[X^2] - E[X]^2
            variance = max(0.0, self.moves_sum_sq / self.solved_games - mean ** 2)
            std = float(np.sqrt(variance))
        else:
            mean, std = 0.0, 0.0

        return {
            "total_games": self.total_games,
            "solve_rate": self.solved_games / self.total_games,
            "avg_moves": mean,
            "moves_std": std,
            "avg_steps": self.total_steps / self.total_games,
            "quit_games": self.quit_games,
            "truncated_games": self.truncated_games,
            "avg_reward": self.total_reward / self.total_games,
        }

    def reset(self) -> None:
        """Reset all statistics."""
        self.__init__()


class EpisodeTracker(GameTracker):
    """
    Tracker that stores per-episode results.

    Stores summary information for each completed game:
    - Episode index
    - Whether it was solved
    - Disc moves and steps
    - Count of each command issued
    - Total reward

    Useful for analyzing individual games.
    """

    def __init__(self):
        """Initialize episode tracker."""
        self.episodes = []
        self._reset_current()

    def _reset_current(self) -> None:
        self.current_reward = 0.0
        self.current_commands = {command.value: 0 for command in Command}

    def on_step(
        self,
        step: int,
        obs: dict[str, Any],
        command: Command,
        reward: float,
        done: bool,
        info: dict[str, Any]
    ) -> None:
        """Accumulate reward and command counts for the current episode."""
        self.current_reward += reward
        self.current_commands[command.value] += 1

    def on_episode_end(self, episode_idx: int, final_info: dict[str, Any]) -> None:
        """Store the completed episode."""
        self.episodes.append({
            "episode_idx": episode_idx,
            "solved": final_info.get("finished", False),
            "moves": final_info.get("moves", 0),
            "steps": final_info.get("steps", 0),
            "commands": self.current_commands,
            "total_reward": self.current_reward,
        })
        self._reset_current()

    def get_results(self) -> list[dict[str, Any]]:
        """
        Get per-episode records.

        Returns:
            List of episode dicts, in completion order
        """
        return self.episodes

    def reset(self) -> None:
        """Clear all stored episodes."""
        self.__init__()
