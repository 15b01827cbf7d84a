"""
Random baseline agent.
"""

from __future__ import annotations

from typing import Optional, Any
import torch

from agents.base_agent import BaseAgent, AgentParams
from core.commands import Command

_CHOICES = (Command.ADVANCE, Command.RETREAT, Command.ACTIVATE)


class RandomAgent(BaseAgent):
    """
    Simple random baseline agent.

    Picks ACTIVATE with probability `activate_prob` and otherwise moves the
    pointer left or right with equal probability. Never resets or quits.
    """

    def __init__(self, params: Optional[AgentParams] = None):
        """
        Initialize random agent.

        Args:
            params: AgentParams (seed and activate_prob are used)

        Raises:
            ValueError: If activate_prob is outside [0, 1]
        """
        super().__init__(params)
        p = self.params.activate_prob
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"activate_prob must be in [0, 1], got {p}")

        self.probs = torch.tensor([(1 - p) / 2, (1 - p) / 2, p], dtype=torch.float32)
        self.generator = torch.Generator()
        if self.params.seed is not None:
            self.generator.manual_seed(self.params.seed)

    def get_command(self, obs: dict[str, Any]) -> Command:
        """
        Sample a random command.

        Args:
            obs: Observation from environment (unused)

        Returns:
            ADVANCE, RETREAT or ACTIVATE
        """
        index = torch.multinomial(self.probs, 1, generator=self.generator).item()
        return _CHOICES[index]

    def reset(self) -> None:
        if self.params.seed is not None:
            self.generator.manual_seed(self.params.seed)
