"""Simulation world - owns the grid pair and advances it tick by tick."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from ..config import GridConfig, MaterialConfig, SpawnerConfig
from .cell import AIR, Cell, Material
from .coins import CoinSource, RandomCoins
from .engine import advance
from .grid import Grid
from .spawner import Spawner


@dataclass
class SimulationStats:
    """Statistics about the current simulation state."""

    tick: int = 0
    blocks_recomputed: int = 0
    total_blocks: int = 0
    sand_count: int = 0
    wood_count: int = 0
    fire_count: int = 0


class StatsHistory:
    """Tracks statistics over time for charting."""

    def __init__(self, max_length: int = 300):
        """
        Initialize stats history.

        Args:
            max_length: Maximum number of ticks to keep in history
        """
        self.max_length = max_length
        self.blocks_recomputed: deque[int] = deque(maxlen=max_length)
        self.sand_count: deque[int] = deque(maxlen=max_length)
        self.wood_count: deque[int] = deque(maxlen=max_length)
        self.fire_count: deque[int] = deque(maxlen=max_length)

    def record(self, stats: SimulationStats) -> None:
        """Record current stats to history."""
        self.blocks_recomputed.append(stats.blocks_recomputed)
        self.sand_count.append(stats.sand_count)
        self.wood_count.append(stats.wood_count)
        self.fire_count.append(stats.fire_count)


class Simulation:
    """
    The falling sand world.

    Manages:
    - The read grid (last completed tick) and the write grid (next tick)
    - Spawners and brush painting between ticks
    - The coin source shared by all material rules
    - Statistics
    """

    def __init__(
        self,
        grid_config: GridConfig,
        material_config: MaterialConfig | None = None,
        spawner_configs: list[SpawnerConfig] | None = None,
        coins: CoinSource | None = None,
    ):
        """
        Initialize the simulation with an all-Air world.

        Args:
            grid_config: Grid extent and seed
            material_config: Payloads for placed materials
            spawner_configs: Spawners to create
            coins: Random source for the rules (seeded from grid_config if omitted)
        """
        self.config = grid_config
        self.materials = material_config or MaterialConfig()

        if coins is None:
            coins = RandomCoins(grid_config.seed)
        self.coins = coins
        self.seed = getattr(coins, "seed", grid_config.seed)

        self.read = Grid.from_config(grid_config)
        self.write = Grid.from_config(grid_config)
        self.spawners = [
            Spawner.from_config(config, self.materials) for config in spawner_configs or []
        ]

        self.stats = SimulationStats(total_blocks=len(self.read))
        self.stats_history = StatsHistory()

    @property
    def width(self) -> int:
        return self.read.width

    @property
    def height(self) -> int:
        return self.read.height

    def place(self, cell: Cell, x: int, y: int) -> bool:
        """
        Write a cell into the current state between ticks.

        Returns:
            False if the coordinate lies outside the world
        """
        if not self.read.in_bounds(x, y):
            return False
        self.read.write_cell(cell, x, y, mark_dirty=True)
        return True

    def paint(self, cell: Cell, cx: int, cy: int, radius: int) -> int:
        """Place a filled circle of cells. Returns the number of cells written."""
        written = 0
        r2 = radius * radius
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                if dx * dx + dy * dy <= r2 and self.place(cell, cx + dx, cy + dy):
                    written += 1
        return written

    def clear(self) -> None:
        """Empty the world and its statistics."""
        self.read.fill(AIR)
        self.write.fill(AIR)
        self.stats = SimulationStats(total_blocks=len(self.read))
        self.stats_history = StatsHistory()

    def spawn(self) -> int:
        """Run every enabled spawner against the current state."""
        return sum(spawner.spawn(self.read) for spawner in self.spawners)

    def step(self) -> None:
        """
        Advance the simulation by one tick.

        This:
        1. Lets spawners stamp material into the current state
        2. Computes the next state into the write grid
        3. Swaps the grid roles
        4. Refreshes statistics
        """
        self.spawn()
        recomputed = advance(self.read, self.write, self.coins, self.materials.ignition_heat)
        self.read, self.write = self.write, self.read

        self.stats.tick += 1
        self.stats.blocks_recomputed = recomputed
        self._update_counts()
        self.stats_history.record(self.stats)

    def _update_counts(self) -> None:
        self.stats.sand_count = self.read.count(Material.SAND)
        self.stats.wood_count = self.read.count(Material.WOOD)
        self.stats.fire_count = self.read.count(Material.FIRE)
