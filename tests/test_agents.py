"""
Tests for agents.
"""

import pytest

from agents import AgentParams, RandomAgent, SolverAgent
from core.commands import Command
from core.tower import TowerId
from envs.hanoi_env import HanoiEnv


def test_random_agent_commands():
    """Test the random agent only emits play commands."""
    agent = RandomAgent(AgentParams(seed=42))
    env = HanoiEnv(device="cpu")
    obs = env.reset()

    commands = [agent.get_command(obs) for _ in range(200)]

    assert set(commands) <= {Command.ADVANCE, Command.RETREAT, Command.ACTIVATE}
    assert Command.ACTIVATE in commands


def test_random_agent_is_reproducible():
    env = HanoiEnv(device="cpu")
    obs = env.reset()

    first = RandomAgent(AgentParams(seed=3))
    second = RandomAgent(AgentParams(seed=3))

    assert [first.get_command(obs) for _ in range(50)] == [second.get_command(obs) for _ in range(50)]


def test_random_agent_reset_replays_sequence():
    env = HanoiEnv(device="cpu")
    obs = env.reset()
    agent = RandomAgent(AgentParams(seed=11))

    before = [agent.get_command(obs) for _ in range(20)]
    agent.reset()
    after = [agent.get_command(obs) for _ in range(20)]

    assert before == after


def test_random_agent_always_activate():
    agent = RandomAgent(AgentParams(activate_prob=1.0, seed=0))
    obs = HanoiEnv(device="cpu").reset()

    assert all(agent.get_command(obs) is Command.ACTIVATE for _ in range(20))


def test_random_agent_invalid_probability():
    with pytest.raises(ValueError):
        RandomAgent(AgentParams(activate_prob=1.5))


@pytest.mark.parametrize("target", [TowerId.RIGHT, TowerId.LEFT])
def test_solver_agent_solves(target):
    """Test the solver agent finishes in 15 moves on either side."""
    agent = SolverAgent(target=target)
    env = HanoiEnv(device="cpu")
    obs = env.reset()

    done = False
    info = {}
    for _ in range(200):
        obs, reward, done, info = env.step(agent.get_command(obs))
        if done:
            break

    assert done
    assert info["finished"]
    assert info["moves"] == 15
    assert obs["snapshot"].tower(target) == (25, 45, 65, 85)


def test_solver_agent_resets_off_plan_position():
    """Test the solver restarts the game when asked to plan mid-game."""
    agent = SolverAgent()
    env = HanoiEnv(device="cpu")
    env.reset()
    env.step(Command.ACTIVATE)
    env.step(Command.ADVANCE)
    obs, _, _, _ = env.step(Command.ACTIVATE)

    assert agent.get_command(obs) is Command.RESET

    obs, _, _, _ = env.step(Command.RESET)
    assert agent.get_command(obs) in {Command.ACTIVATE, Command.ADVANCE, Command.RETREAT}


def test_solver_agent_quits_when_finished():
    agent = SolverAgent()
    env = HanoiEnv(device="cpu")
    obs = env.reset()
    done = False
    while not done:
        obs, _, done, _ = env.step(agent.get_command(obs))

    assert agent.get_command(obs) is Command.QUIT


def test_solver_agent_rejects_start_target():
    with pytest.raises(ValueError):
        SolverAgent(target=TowerId.MIDDLE)
