"""Simulation module - pure logic, no rendering."""

from .cell import AIR, SAND, Cell, Material
from .clock import TickTimer
from .coins import CoinSource, RandomCoins, random_neighbor
from .engine import advance
from .grid import REGION_SIZE, Block, Grid, OutOfBoundsError
from .rules import IGNITION_HEAT, update_cell
from .spawner import Spawner, cell_for
from .world import Simulation, SimulationStats, StatsHistory

__all__ = [
    "AIR",
    "Block",
    "Cell",
    "CoinSource",
    "Grid",
    "IGNITION_HEAT",
    "Material",
    "OutOfBoundsError",
    "REGION_SIZE",
    "RandomCoins",
    "SAND",
    "Simulation",
    "SimulationStats",
    "Spawner",
    "StatsHistory",
    "TickTimer",
    "advance",
    "cell_for",
    "random_neighbor",
    "update_cell",
]
