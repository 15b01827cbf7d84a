"""
Optimal solver agent.
"""

from __future__ import annotations

from collections import deque
from typing import Optional, Any
import logging

from agents.base_agent import BaseAgent, AgentParams
from core.commands import Command
from core.game_state import GameSnapshot, START_TOWER
from core.solver import solve, moves_to_commands
from core.tower import TowerId

logger = logging.getLogger(__name__)


def is_start_layout(snapshot: GameSnapshot) -> bool:
    """True if all discs sit on the starting tower and nothing is armed."""
    return (
        len(snapshot.tower(START_TOWER)) == snapshot.disc_count
        and snapshot.armed is None
        and not snapshot.finished
    )


class SolverAgent(BaseAgent):
    """
    Agent that plays the optimal 2**n - 1 move solution.

    Plans from the starting layout. If asked to plan from any other position
    it issues RESET first and plans on the next call.

    Attributes:
        target: Tower to build the finished stack on
        plan: Remaining commands of the current plan
    """

    def __init__(self, params: Optional[AgentParams] = None, target: TowerId = TowerId.RIGHT):
        """
        Initialize solver agent.

        Args:
            params: AgentParams (unused, accepted for a uniform constructor)
            target: LEFT or RIGHT

        Raises:
            ValueError: If target is the starting tower
        """
        super().__init__(params)
        if target == START_TOWER:
            raise ValueError(f"target must differ from the starting tower {START_TOWER.name}")
        self.target = target
        self.plan: deque[Command] = deque()

    def _make_plan(self, snapshot: GameSnapshot) -> None:
        moves = solve(snapshot.disc_count, START_TOWER, self.target)
        self.plan = deque(moves_to_commands(moves, snapshot.pointer))
        logger.debug("Planned %d moves as %d commands", len(moves), len(self.plan))

    def get_command(self, obs: dict[str, Any]) -> Command:
        """
        Next command of the optimal plan.

        Args:
            obs: Observation with a "snapshot" entry

        Returns:
            Next planned command, RESET when off-plan, QUIT once solved
        """
        snapshot = obs["snapshot"]
        if snapshot.finished:
            return Command.QUIT
        if not self.plan:
            if not is_start_layout(snapshot):
                return Command.RESET
            self._make_plan(snapshot)
        return self.plan.popleft()

    def reset(self) -> None:
        self.plan.clear()
