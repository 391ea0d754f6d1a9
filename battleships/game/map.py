"""
Battleships Map

The map is a width x height grid of cells stored in a numpy int8 array
indexed as ``grid[y, x]``. Ships are straight segments that never overlap
and never touch each other, not even diagonally.

Cell States:
    EMPTY                 water that has not been shot
    SHIP                  intact ship cell
    DEAD_OR_WOUNDED_SHIP  ship cell that has been hit
    MISS                  water that has been shot

Coordinates:
    Targets are (x, y) tuples with x in [0, width) and y in [0, height).
    Shots outside the board are legal to make but never hit anything.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, List, Optional, Tuple

import numpy as np

Point = Tuple[int, int]


class CellState(IntEnum):
    EMPTY = 0
    SHIP = 1
    DEAD_OR_WOUNDED_SHIP = 2
    MISS = 3


class ShotEffect(Enum):
    """Outcome of a shot, named as it is sent to the AI."""

    MISS = "Miss"
    WOUND = "Wound"
    KILL = "Kill"


@dataclass
class Ship:
    """
    A straight ship.

    Attributes:
        location: (x, y) of the top-left cell
        size: Number of cells
        vertical: True if the ship extends along y, False along x
        alive_cells: Cells not yet hit
    """
    location: Point
    size: int
    vertical: bool = False
    alive_cells: Optional[set] = field(default=None, repr=False)

    def __post_init__(self):
        if self.alive_cells is None:
            self.alive_cells = set(self.cells())

    def cells(self) -> List[Point]:
        x, y = self.location
        if self.vertical:
            return [(x, y + i) for i in range(self.size)]
        return [(x + i, y) for i in range(self.size)]

    @property
    def alive(self) -> bool:
        return bool(self.alive_cells)


class Map:
    """
    Battleships board with ships.

    Attributes:
        width: Board width
        height: Board height
        grid: numpy int8 array of CellState values, shape (height, width)
        ships: Ships placed on the board
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid = np.full((height, width), CellState.EMPTY, dtype=np.int8)
        self.ships: List[Ship] = []
        self._ship_at: dict = {}

    def in_bounds(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def __getitem__(self, point: Point) -> CellState:
        x, y = point
        return CellState(int(self.grid[y, x]))

    def neighbours(self, point: Point) -> Iterator[Point]:
        """Cells around a point, diagonals included, clipped to the board."""
        x, y = point
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                candidate = (x + dx, y + dy)
                if (dx or dy) and self.in_bounds(candidate):
                    yield candidate

    def can_place(self, ship: Ship) -> bool:
        """
        Check that a ship fits on the board without touching other ships.

        Args:
            ship: Ship to check

        Returns:
            bool: True if every cell is in bounds, empty, and has no
            ship in its neighbourhood
        """
        for cell in ship.cells():
            if not self.in_bounds(cell) or self[cell] != CellState.EMPTY:
                return False
            if any(self[n] != CellState.EMPTY for n in self.neighbours(cell)):
                return False
        return True

    def place_ship(self, ship: Ship) -> bool:
        """
        Place a ship if it fits.

        Returns:
            bool: True if the ship was placed
        """
        if not self.can_place(ship):
            return False

        for x, y in ship.cells():
            self.grid[y, x] = CellState.SHIP
            self._ship_at[(x, y)] = ship
        self.ships.append(ship)
        return True

    def ship_at(self, point: Point) -> Optional[Ship]:
        return self._ship_at.get(point)

    def shoot(self, target: Point) -> ShotEffect:
        """
        Resolve a shot.

        Args:
            target: (x, y) cell being shot

        Returns:
            ShotEffect.KILL if the last alive cell of a ship was hit,
            ShotEffect.WOUND for any other hit of an intact ship cell,
            ShotEffect.MISS otherwise (water, out of bounds, or a cell
            that was already shot)
        """
        if not self.in_bounds(target):
            return ShotEffect.MISS

        x, y = target
        state = self[target]

        if state == CellState.EMPTY:
            self.grid[y, x] = CellState.MISS
            return ShotEffect.MISS

        if state == CellState.SHIP:
            self.grid[y, x] = CellState.DEAD_OR_WOUNDED_SHIP
            ship = self._ship_at[target]
            ship.alive_cells.discard(target)
            return ShotEffect.WOUND if ship.alive else ShotEffect.KILL

        return ShotEffect.MISS

    def has_alive_ships(self) -> bool:
        return any(ship.alive for ship in self.ships)

    def copy(self) -> "Map":
        """Deep copy: grid and ship state are not shared with the original."""
        clone = Map(self.width, self.height)
        clone.grid = self.grid.copy()
        for ship in self.ships:
            twin = Ship(ship.location, ship.size, ship.vertical, set(ship.alive_cells))
            clone.ships.append(twin)
            for cell in twin.cells():
                clone._ship_at[cell] = twin
        return clone

    def __repr__(self) -> str:
        return f"Map({self.width}x{self.height}, ships={[s.size for s in self.ships]})"
