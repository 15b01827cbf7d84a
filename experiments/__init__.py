"""
Experiments module for the Tower of Hanoi.

This module provides tools for running agents against HanoiEnv and
collecting results with flexible tracking.

Exported Classes:
    HanoiExperiment: Runs games sequentially for one agent
    GameTracker: Abstract base class for trackers
    SummaryTracker: Aggregate statistics tracker (O(1) memory)
    EpisodeTracker: Per-episode results tracker (O(n_games) memory)

Example:
    >>> from experiments import HanoiExperiment, SummaryTracker
    >>> from agents import SolverAgent
    >>>
    >>> exp = HanoiExperiment(max_steps=500)
    >>> results = exp.run_games(agent=SolverAgent(), n_games=5, tracker=SummaryTracker())
    >>> print(f"Solve rate: {results['solve_rate']:.2%}")
"""

from experiments.trackers import GameTracker, SummaryTracker, EpisodeTracker
from experiments.hanoi_experiment import HanoiExperiment

__all__ = [
    "HanoiExperiment",
    "GameTracker",
    "SummaryTracker",
    "EpisodeTracker",
]
