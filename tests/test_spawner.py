"""Unit tests for spawners."""

import numpy as np
import pytest

from falling_sand.config import SPRINKLE_PATTERN, MaterialConfig, SpawnerConfig
from falling_sand.simulation import AIR, SAND, Cell, Grid, Material, Spawner, cell_for


class TestSpawner:
    """Test cases for Spawner."""

    def test_stamps_pattern_at_anchor(self):
        """Sand at (10, 10) with the 20-offset pattern fills exactly 20 cells."""
        grid = Grid(4, 4)
        grid.clear_dirty()
        spawner = Spawner(cell=SAND, anchor=(10, 10), pattern=SPRINKLE_PATTERN)

        assert spawner.spawn(grid) == 20

        expected = {(10 + dx, 10 + dy) for dx, dy in SPRINKLE_PATTERN}
        assert len(expected) == 20
        for x, y in expected:
            assert grid.read_cell(x, y) == SAND
            assert grid.block_of(x, y).dirty
        assert grid.count(Material.SAND) == 20
        assert np.count_nonzero(grid.materials()) == 20

    def test_only_target_blocks_become_dirty(self):
        grid = Grid(4, 4)
        grid.clear_dirty()
        Spawner(anchor=(10, 10)).spawn(grid)
        # columns 10..18, rows 10..13
        assert grid.dirty_blocks() == [(1, 1), (2, 1)]

    def test_disabled_spawner_writes_nothing(self):
        grid = Grid(4, 4)
        spawner = Spawner(anchor=(10, 10), enabled=False)
        assert spawner.spawn(grid) == 0
        assert grid.count(Material.SAND) == 0

    def test_enable_disable_toggle(self):
        spawner = Spawner(enabled=False)
        spawner.enable()
        assert spawner.enabled
        spawner.disable()
        assert not spawner.enabled
        spawner.toggle()
        assert spawner.enabled

    def test_targets_outside_grid_are_skipped(self):
        grid = Grid(1, 1)
        spawner = Spawner(anchor=(5, 6))
        # only dx in (0, 2) and dy in (0, 1) stay inside 8x8
        assert spawner.spawn(grid) == 4
        assert grid.count(Material.SAND) == 4

    def test_material_and_anchor_are_settable(self):
        grid = Grid(2, 2)
        spawner = Spawner(pattern=((0, 0),))
        spawner.set_material(Cell.wood(7))
        spawner.move_to(3, 9)
        spawner.spawn(grid)
        assert grid.read_cell(3, 9) == Cell.wood(7)

    def test_overwrites_existing_cells(self):
        grid = Grid(1, 1)
        grid.write_cell(Cell.wood(3), 1, 1)
        Spawner(cell=AIR, anchor=(1, 1), pattern=((0, 0),)).spawn(grid)
        assert grid.read_cell(1, 1) == AIR

    def test_from_config(self):
        config = SpawnerConfig(material="fire", anchor=(2, 3), pattern=((0, 0), (1, 0)))
        spawner = Spawner.from_config(config, MaterialConfig(fire_heat=12))
        assert spawner.cell == Cell.fire(12)
        assert spawner.targets() == [(2, 3), (3, 3)]


class TestCellFor:
    """Test cases for freshly placed material payloads."""

    @pytest.mark.parametrize(
        "material, expected",
        [
            ("air", AIR),
            ("sand", SAND),
            ("wood", Cell.wood(100)),
            (Material.FIRE, Cell.fire(30)),
        ],
    )
    def test_defaults(self, material, expected):
        assert cell_for(material) == expected

    def test_uses_material_config(self):
        assert cell_for("wood", MaterialConfig(wood_fuel=4)) == Cell.wood(4)
