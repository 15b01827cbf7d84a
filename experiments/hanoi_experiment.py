"""
Experiment runner for the Tower of Hanoi.

This module provides the HanoiExperiment class for running agents against
HanoiEnv and collecting results through trackers, plus a command-line entry
point.
"""

from __future__ import annotations

from typing import Callable, Optional, Any
import argparse
import logging
import random
import sys

from agents.base_agent import BaseAgent, AgentParams
from agents.random_agent import RandomAgent
from agents.solver_agent import SolverAgent
from envs.hanoi_env import HanoiEnv
from experiments.trackers import GameTracker, SummaryTracker
from utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


class HanoiExperiment:
    """
    Experiment runner for HanoiEnv.

    Runs games one after another, each in a fresh environment, and reports
    through a GameTracker.

    Example:
        ```python
        exp = HanoiExperiment(env_factory=lambda seed: HanoiEnv(), max_steps=500)
        results = exp.run_games(agent=SolverAgent(), n_games=10)
        print(f"Solve rate: {results['solve_rate']:.2f}")
        ```

    Attributes:
        env_factory: Callable that creates environment given seed
        max_steps: Maximum commands per game before giving up
    """

    def __init__(
        self,
        env_factory: Optional[Callable[[int], HanoiEnv]] = None,
        max_steps: int = 500
    ):
        """
        Initialize experiment runner.

        Args:
            env_factory: Function that creates environment given seed.
                        Defaults to a HanoiEnv with the standard layout.
            max_steps: Maximum number of commands per game
        """
        self.env_factory = env_factory or (lambda seed: HanoiEnv())
        self.max_steps = max_steps

    def run_games(
        self,
        agent: BaseAgent,
        n_games: int,
        tracker: Optional[GameTracker] = None,
        seed: Optional[int] = None,
        verbose: bool = False
    ) -> Any:
        """
        Run n_games with the given agent and tracker.

        Args:
            agent: Agent producing commands
            n_games: Number of games to run
            tracker: GameTracker instance to collect data. If None, uses SummaryTracker.
            seed: Seed for the first game (incremented for subsequent games)
            verbose: If True, log progress at INFO level

        Returns:
            Results from tracker.get_results()
        """
        if tracker is None:
            tracker = SummaryTracker()

        if seed is None:
            seed = random.randint(0, 2**31 - 1)

        for game_idx in range(n_games):
            env = self.env_factory(seed + game_idx)
            agent.reset()
            obs = env.reset(seed=seed + game_idx)
            info = env.get_info()

            for step in range(self.max_steps):
                command = agent.get_command(obs)
                obs, reward, done, info = env.step(command)
                tracker.on_step(
                    step=step,
                    obs=obs,
                    command=command,
                    reward=reward,
                    done=done,
                    info=info
                )
                if done:
                    break
            else:
                info = dict(info, truncated=True)

            tracker.on_episode_end(episode_idx=game_idx, final_info=info)

            if verbose:
                logger.info(
                    "Completed %d/%d games (solved=%s, moves=%d)",
                    game_idx + 1, n_games, info["finished"], info["moves"]
                )

        return tracker.get_results()


AGENT_TYPES = {
    "random": RandomAgent,
    "solver": SolverAgent,
}


def main(argv: list[str] | None = None) -> dict[str, Any]:
    parser = argparse.ArgumentParser(description="Run Tower of Hanoi agents and report statistics.")
    parser.add_argument("--agent", choices=sorted(AGENT_TYPES), default="solver", help="Agent to run")
    parser.add_argument("--games", type=int, default=10, help="Number of games")
    parser.add_argument("--max-steps", type=int, default=500, help="Command limit per game")
    parser.add_argument("--seed", type=int, default=None, help="Base random seed")
    parser.add_argument("--log-level", default=None, help="Logging level (default: HANOI_LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    agent = AGENT_TYPES[args.agent](AgentParams(seed=args.seed))
    experiment = HanoiExperiment(max_steps=args.max_steps)
    results = experiment.run_games(agent, n_games=args.games, seed=args.seed, verbose=True)

    for key, value in results.items():
        print(f"{key}: {value}")
    return results


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
