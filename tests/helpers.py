"""Scripted agents and fixed maps shared by the tests."""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from battleships.agent.base import Agent
from battleships.config import TesterSettings
from battleships.exceptions import AgentError
from battleships.game.map import Map, Ship

SAMPLE_AI = Path(__file__).parent.parent / "tools" / "sample_ai.py"


def single_ship_map(width: int = 3, height: int = 3, location=(1, 1)) -> Map:
    """Small map with one ship of size 1."""
    board = Map(width, height)
    board.place_ship(Ship(location, 1))
    return board


class ScriptedAgent(Agent):
    """
    Agent that plays a fixed list of shots.

    Raises AgentError when it runs out of shots, or on the shot index
    given by crash_at.
    """

    def __init__(self, shots: Sequence, crash_at: Optional[int] = None, name: str = "scripted"):
        self.shots = list(shots)
        self.crash_at = crash_at
        self.name = name
        self.calls = 0
        self.messages: List[tuple] = []
        self.disposed = 0

    def _shot(self):
        index = self.calls
        self.calls += 1
        if self.crash_at is not None and index == self.crash_at:
            raise AgentError(f"{self.name} crashed on shot {index}")
        if index >= len(self.shots):
            raise AgentError(f"{self.name} has no more shots")
        return self.shots[index]

    def init(self, width, height, ship_sizes):
        self.messages.append(("Init", width, height, tuple(ship_sizes)))
        self.calls = 0
        return self._shot()

    def next_shot(self, last_target, last_effect):
        self.messages.append((last_effect.value, last_target))
        return self._shot()

    def dispose(self):
        self.disposed += 1


class AgentFactory:
    """Hands out prepared agents in order and remembers them."""

    def __init__(self, agents: Iterable[Agent]):
        self._agents = iter(agents)
        self.created: List[Agent] = []

    def __call__(self, *args):
        agent = next(self._agents)
        self.created.append(agent)
        return agent


class FixedGenerator:
    """Map generator that always returns a copy of the same map."""

    def __init__(self, board: Map):
        self.board = board
        self.generated = 0

    def generate_map(self) -> Map:
        self.generated += 1
        return self.board.copy()


def tiny_settings(**overrides) -> TesterSettings:
    values = dict(width=3, height=3, ships=[1], crash_limit=1, games_count=5)
    values.update(overrides)
    return TesterSettings(**values)
