"""
Agents package for the Tower of Hanoi.

This package provides a base class and implementations for agents that
produce game commands from environment observations.
"""

from agents.base_agent import BaseAgent, AgentParams
from agents.random_agent import RandomAgent
from agents.solver_agent import SolverAgent

__all__ = [
    "BaseAgent",
    "AgentParams",
    "RandomAgent",
    "SolverAgent",
]
