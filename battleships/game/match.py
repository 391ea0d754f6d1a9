"""
Match Engine

A Match pairs one map with one agent and plays it one exchange at a time.
Each call to advance() asks the agent for a shot, resolves it on the
match's own copy of the map and returns an immutable MatchSnapshot, so a
consumer that keeps old snapshots never sees them change.

Bad Shots:
    A shot counts as bad when the agent could have known it was useless:
    - outside the board
    - at a cell that was already shot
    - next to a ship that is already sunk
    - diagonal to a hit ship cell (ships are straight, so that is water)
    Bad shots still cost a turn but do not end the match.

Termination:
    The match is finished when no ship is alive or the agent faulted.
    Agent faults (AgentError) are recorded, not raised.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from battleships.agent.base import Agent
from battleships.exceptions import AgentError, MatchFinishedError
from battleships.game.map import CellState, Map, ShotEffect

logger = logging.getLogger(__name__)

Point = Tuple[int, int]

DIAGONALS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


@dataclass(frozen=True, eq=False)
class MatchSnapshot:
    """
    State of a match after a step.

    Attributes:
        width: Board width
        height: Board height
        grid: Read-only copy of the board cells (CellState values, [y, x])
        turns: Shots made so far
        bad_shots: Bad shots made so far
        last_target: Most recent shot, None before the first step
        last_effect: Effect of the most recent shot
        agent_faulted: True if the agent failed during this match
        error_message: Fault description, empty if none
        finished: True if no further steps will be made
    """
    width: int
    height: int
    grid: np.ndarray
    turns: int
    bad_shots: int
    last_target: Optional[Point]
    last_effect: Optional[ShotEffect]
    agent_faulted: bool
    error_message: str
    finished: bool


class Match:
    """One agent playing one map."""

    def __init__(self, board: Map, agent: Agent):
        self.map = board.copy()
        self.agent = agent
        self.ship_sizes = [ship.size for ship in board.ships]
        self.turns = 0
        self.bad_shots = 0
        self.last_target: Optional[Point] = None
        self.last_effect: Optional[ShotEffect] = None
        self.last_error: Optional[AgentError] = None

    @property
    def agent_faulted(self) -> bool:
        return self.last_error is not None

    @property
    def error_message(self) -> str:
        return str(self.last_error) if self.last_error is not None else ""

    def is_finished(self) -> bool:
        return self.agent_faulted or not self.map.has_alive_ships()

    def advance(self) -> MatchSnapshot:
        """
        Make one exchange with the agent.

        Returns:
            Snapshot after the step

        Raises:
            MatchFinishedError: If the match is already finished
        """
        if self.is_finished():
            raise MatchFinishedError("Match is over")

        try:
            target = self._request_shot()
        except AgentError as e:
            logger.warning(f"{self.agent.name} crashed after {self.turns} turns: {e}")
            self.last_error = e
            return self.snapshot()

        self.turns += 1
        if self.is_bad_shot(target):
            self.bad_shots += 1

        self.last_target = target
        self.last_effect = self.map.shoot(target)
        return self.snapshot()

    def _request_shot(self) -> Point:
        if self.last_target is None:
            return self.agent.init(self.map.width, self.map.height, self.ship_sizes)
        return self.agent.next_shot(self.last_target, self.last_effect)

    def is_bad_shot(self, target: Point) -> bool:
        """
        Check whether a shot is useless given what the agent has been told.

        Args:
            target: (x, y) being shot, before it is resolved

        Returns:
            bool: True for a bad shot
        """
        board = self.map
        if not board.in_bounds(target):
            return True

        state = board[target]
        if state in (CellState.MISS, CellState.DEAD_OR_WOUNDED_SHIP):
            return True

        for cell in board.neighbours(target):
            ship = board.ship_at(cell)
            if ship is not None and not ship.alive:
                return True

        x, y = target
        for dx, dy in DIAGONALS:
            cell = (x + dx, y + dy)
            if board.in_bounds(cell) and board[cell] == CellState.DEAD_OR_WOUNDED_SHIP:
                return True

        return False

    def snapshot(self) -> MatchSnapshot:
        grid = self.map.grid.copy()
        grid.setflags(write=False)
        return MatchSnapshot(
            width=self.map.width,
            height=self.map.height,
            grid=grid,
            turns=self.turns,
            bad_shots=self.bad_shots,
            last_target=self.last_target,
            last_effect=self.last_effect,
            agent_faulted=self.agent_faulted,
            error_message=self.error_message,
            finished=self.is_finished(),
        )
