"""
Random map generation.

Ships are placed largest first at uniformly random positions and
orientations. A ship that does not fit is retried at a new position; a
fleet that cannot be completed starts over on an empty map.
"""

import logging
from typing import Optional

import numpy as np

from battleships.config import TesterSettings
from battleships.exceptions import SettingsError
from battleships.game.map import Map, Ship

logger = logging.getLogger(__name__)

MAX_SHIP_ATTEMPTS = 1000
MAX_MAP_ATTEMPTS = 100


class MapGenerator:
    """Generate maps for the configured board size and fleet."""

    def __init__(self, settings: TesterSettings, rng: Optional[np.random.Generator] = None):
        """
        Initialize generator.

        Args:
            settings: Board size and ship sizes
            rng: Random generator (default: seeded from settings.random_seed)
        """
        self.width = settings.width
        self.height = settings.height
        self.ship_sizes = sorted(settings.ships, reverse=True)
        self.rng = rng if rng is not None else np.random.default_rng(settings.random_seed)

    def generate_map(self) -> Map:
        """
        Generate a new map with the full fleet placed.

        Returns:
            Map with every configured ship

        Raises:
            SettingsError: If the fleet cannot be placed on the board
        """
        for attempt in range(MAX_MAP_ATTEMPTS):
            board = Map(self.width, self.height)
            if all(self._place(board, size) for size in self.ship_sizes):
                return board
            logger.debug(f"Fleet did not fit, retrying map (attempt {attempt + 1})")

        raise SettingsError(
            f"Cannot place ships {self.ship_sizes} on a {self.width}x{self.height} board"
        )

    def _place(self, board: Map, size: int) -> bool:
        for _ in range(MAX_SHIP_ATTEMPTS):
            vertical = bool(self.rng.integers(2))
            x = int(self.rng.integers(self.width))
            y = int(self.rng.integers(self.height))
            if board.place_ship(Ship((x, y), size, vertical)):
                return True
        return False
