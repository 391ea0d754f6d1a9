"""
Game Module

Board state and map generation.

Key Components:
    - Map: numpy grid with ships, shot resolution
    - Ship, CellState, ShotEffect: board vocabulary
    - MapGenerator: seeded random fleets

The match engine lives in battleships.game.match; it depends on the agent
interface and is imported from there directly.
"""

from battleships.game.map import CellState, Map, Ship, ShotEffect
from battleships.game.generator import MapGenerator

__all__ = ['CellState', 'Map', 'Ship', 'ShotEffect', 'MapGenerator']
