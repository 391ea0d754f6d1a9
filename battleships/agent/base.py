"""
Abstract Agent Interface

Anything that can play a match implements this interface: the external
process wrapper in production, scripted agents in tests.

Contract:
    1. init() is called once per match and returns the first shot
    2. next_shot() reports the effect of the previous shot and returns the next
    3. Misbehaviour is reported by raising AgentError, never anything else
    4. dispose() releases whatever the agent holds and is safe to call twice
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from battleships.game.map import ShotEffect

Point = Tuple[int, int]


class Agent(ABC):
    """Abstract base class for battleships players."""

    name: str = "agent"

    @abstractmethod
    def init(self, width: int, height: int, ship_sizes: Sequence[int]) -> Point:
        """
        Start a new match.

        Args:
            width: Board width
            height: Board height
            ship_sizes: Sizes of the ships on the board

        Returns:
            First shot as (x, y)

        Raises:
            AgentError: If the agent fails to answer
        """
        pass

    @abstractmethod
    def next_shot(self, last_target: Point, last_effect: ShotEffect) -> Point:
        """
        Report the previous shot and ask for the next one.

        Args:
            last_target: Previous shot
            last_effect: What the previous shot did

        Returns:
            Next shot as (x, y)

        Raises:
            AgentError: If the agent fails to answer
        """
        pass

    def dispose(self) -> None:
        """Release resources. Default: nothing to release."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
