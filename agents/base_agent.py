"""
Base class for command-producing agents.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Any

from core.commands import Command


@dataclass
class AgentParams:
    """
    Parameters for agents.

    Attributes:
        activate_prob: Probability of choosing ACTIVATE (random agent)
        seed: Random seed for reproducibility
    """
    activate_prob: float = 0.4
    seed: Optional[int] = None


class BaseAgent(ABC):
    """
    Abstract base class for agents.

    Agents observe the environment's observation dict and return one
    command per step.
    """

    def __init__(self, params: Optional[AgentParams] = None):
        """
        Initialize agent.

        Args:
            params: AgentParams with configuration
        """
        self.params = params if params is not None else AgentParams()

    @abstractmethod
    def get_command(self, obs: dict[str, Any]) -> Command:
        """
        Choose the next command.

        Args:
            obs: Observation dict from HanoiEnv containing:
                - "snapshot": GameSnapshot
                - "tensor": encoded snapshot

        Returns:
            Command to apply
        """
        pass

    def reset(self) -> None:
        """Reset agent state for a new game (optional)."""
        pass
