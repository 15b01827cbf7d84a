"""
Tests for experiments (runner and trackers).
"""

import pytest

from agents import AgentParams, RandomAgent, SolverAgent
from core.commands import Command
from envs.hanoi_env import HanoiEnv
from experiments import EpisodeTracker, HanoiExperiment, SummaryTracker
from experiments.hanoi_experiment import main


def _experiment(max_steps=500):
    return HanoiExperiment(env_factory=lambda seed: HanoiEnv(device="cpu"), max_steps=max_steps)


def test_solver_summary():
    """Test the solver solves every game in the optimal number of moves."""
    results = _experiment().run_games(SolverAgent(), n_games=3, seed=0)

    assert results["total_games"] == 3
    assert results["solve_rate"] == 1.0
    assert results["avg_moves"] == 15
    assert results["moves_std"] == pytest.approx(0.0)
    assert results["avg_reward"] == 1.0
    assert results["truncated_games"] == 0


def test_random_agent_truncated():
    """Test games cut off at the step limit are counted as truncated."""
    agent = RandomAgent(AgentParams(seed=1))
    results = _experiment(max_steps=5).run_games(agent, n_games=4, seed=0)

    assert results["total_games"] == 4
    assert results["solve_rate"] == 0.0
    assert results["truncated_games"] == 4
    assert results["avg_steps"] == 5


def test_episode_tracker_records():
    tracker = EpisodeTracker()
    episodes = _experiment().run_games(SolverAgent(), n_games=2, tracker=tracker, seed=0)

    assert len(episodes) == 2
    assert [e["episode_idx"] for e in episodes] == [0, 1]
    for episode in episodes:
        assert episode["solved"]
        assert episode["moves"] == 15
        assert episode["commands"][Command.ACTIVATE.value] == 30
        assert episode["commands"][Command.QUIT.value] == 0
        assert episode["total_reward"] == 1.0


def test_summary_tracker_empty_and_reset():
    tracker = SummaryTracker()
    assert tracker.get_results()["total_games"] == 0

    tracker.on_episode_end(0, {"finished": True, "moves": 15, "steps": 40})
    assert tracker.get_results()["solve_rate"] == 1.0

    tracker.reset()
    assert tracker.get_results()["total_games"] == 0


def test_summary_tracker_counts_quits():
    tracker = SummaryTracker()
    tracker.on_episode_end(0, {"finished": False, "quit": True, "moves": 3, "steps": 9})

    results = tracker.get_results()
    assert results["quit_games"] == 1
    assert results["solve_rate"] == 0.0
    assert results["avg_steps"] == 9


def test_main_cli(capsys):
    results = main(["--agent", "solver", "--games", "2", "--seed", "5"])

    assert results["solve_rate"] == 1.0
    assert "solve_rate: 1.0" in capsys.readouterr().out
