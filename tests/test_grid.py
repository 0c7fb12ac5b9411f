"""Unit tests for Grid and Block storage."""

import numpy as np
import pytest

from falling_sand.simulation import AIR, SAND, Block, Cell, Grid, Material, OutOfBoundsError


class TestBlock:
    """Test cases for Block."""

    def test_fresh_block_is_air_and_dirty(self):
        """A new block holds only Air and must be computed once."""
        block = Block(4)
        assert block.dirty
        assert block.is_empty
        assert all(cell == AIR for cell, _, _ in block.cells())

    def test_cells_iterate_x_fastest(self):
        """Cells are visited row by row, x varying fastest."""
        block = Block(2)
        order = [(x, y) for _, x, y in block.cells()]
        assert order == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_occupied_skips_air_in_row_major_order(self):
        """Only non-Air cells are yielded, in the same order as cells()."""
        block = Block(4)
        block.set(SAND, 3, 0)
        block.set(Cell.wood(5), 0, 2)
        block.set(Cell.fire(7), 1, 0)
        occupied = list(block.occupied())
        assert occupied == [
            (Cell.fire(7), 1, 0),
            (SAND, 3, 0),
            (Cell.wood(5), 0, 2),
        ]

    def test_copy_from(self):
        """copy_from duplicates cells without sharing arrays."""
        source = Block(4)
        source.set(Cell.fire(12), 2, 1)
        target = Block(4)
        target.copy_from(source)
        assert target.get(2, 1) == Cell.fire(12)

        source.set(AIR, 2, 1)
        assert target.get(2, 1) == Cell.fire(12)


class TestGridAddressing:
    """Test cases for global coordinate translation."""

    def test_dimensions(self):
        grid = Grid(3, 2, region_size=8)
        assert (grid.width, grid.height) == (24, 16)
        assert len(grid) == 6

    def test_write_lands_in_owning_block(self):
        """(9, 3) with 8-cell blocks is block (1, 0), local (1, 3)."""
        grid = Grid(2, 2)
        grid.write_cell(SAND, 9, 3)
        assert grid.block(1, 0).get(1, 3) == SAND
        assert grid.block(0, 0).is_empty
        assert grid.read_cell(9, 3) == SAND

    def test_payload_round_trips(self):
        grid = Grid(1, 1)
        grid.write_cell(Cell.wood(42), 4, 4)
        cell = grid.read_cell(4, 4)
        assert cell.material == Material.WOOD
        assert cell.fuel == 42

    def test_is_empty(self):
        grid = Grid(1, 1)
        grid.write_cell(SAND, 2, 2)
        assert not grid.is_empty(2, 2)
        assert grid.is_empty(3, 2)

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (16, 0), (0, 8), (100, 100)])
    def test_direct_access_out_of_bounds_raises(self, x, y):
        """Direct reads and writes outside the grid raise OutOfBoundsError."""
        grid = Grid(2, 1)
        with pytest.raises(OutOfBoundsError):
            grid.read_cell(x, y)
        with pytest.raises(OutOfBoundsError):
            grid.write_cell(SAND, x, y)

    def test_out_of_bounds_is_an_index_error(self):
        grid = Grid(1, 1)
        with pytest.raises(IndexError):
            grid.read_cell(8, 0)

    @pytest.mark.parametrize("x, y", [(-1, 3), (3, -1), (8, 3), (3, 8)])
    def test_out_of_bounds_is_unavailable_for_queries(self, x, y):
        """Rule-facing queries treat outside coordinates as occupied."""
        grid = Grid(1, 1)
        assert not grid.is_empty(x, y)
        assert grid.peek(x, y) is None

    def test_block_out_of_bounds(self):
        grid = Grid(2, 2)
        with pytest.raises(OutOfBoundsError):
            grid.block(2, 0)
        with pytest.raises(OutOfBoundsError):
            grid.reset_block(0, -1)


class TestGridDirtyTracking:
    """Test cases for dirty flags."""

    def test_fresh_grid_is_all_dirty(self):
        grid = Grid(2, 2)
        assert grid.dirty_blocks() == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_write_marks_dirty_only_when_asked(self):
        grid = Grid(2, 1)
        grid.clear_dirty()

        grid.write_cell(SAND, 1, 1, mark_dirty=False)
        assert grid.dirty_blocks() == []

        grid.write_cell(SAND, 9, 1, mark_dirty=True)
        assert grid.dirty_blocks() == [(1, 0)]

    def test_write_never_clears_dirty(self):
        grid = Grid(1, 1)
        assert grid.block(0, 0).dirty
        grid.write_cell(SAND, 0, 0, mark_dirty=False)
        assert grid.block(0, 0).dirty

    def test_reset_block_replaces_with_fresh_air(self):
        grid = Grid(2, 1)
        grid.write_cell(SAND, 9, 1)
        grid.clear_dirty()
        old = grid.block(1, 0)

        grid.reset_block(1, 0)

        fresh = grid.block(1, 0)
        assert fresh is not old
        assert fresh.is_empty
        assert grid.read_cell(9, 1) == AIR

    def test_fill_marks_everything_dirty(self):
        grid = Grid(2, 2)
        grid.clear_dirty()
        grid.fill(SAND)
        assert len(grid.dirty_blocks()) == 4
        assert grid.count(Material.SAND) == grid.width * grid.height


class TestGridTraversal:
    """Test cases for the read-only presentation traversal."""

    def test_iter_blocks_storage_order_and_offsets(self):
        grid = Grid(2, 2, region_size=4)
        offsets = [(ox, oy) for ox, oy, _ in grid.iter_blocks()]
        assert offsets == [(0, 0), (4, 0), (0, 4), (4, 4)]

    def test_traversal_covers_every_cell(self):
        """Block offset plus local index reproduces every stored cell."""
        grid = Grid(2, 2, region_size=4)
        grid.write_cell(SAND, 5, 6)
        grid.write_cell(Cell.fire(3), 0, 7)

        seen = {}
        for ox, oy, block in grid.iter_blocks():
            for cell, lx, ly in block.cells():
                seen[(ox + lx, oy + ly)] = cell

        assert len(seen) == 64
        assert seen[(5, 6)] == SAND
        assert seen[(0, 7)] == Cell.fire(3)
        assert sum(1 for cell in seen.values() if cell != AIR) == 2

    def test_materials_assembles_full_grid(self):
        grid = Grid(2, 1, region_size=4)
        grid.write_cell(SAND, 6, 3)
        materials = grid.materials()
        assert materials.shape == (4, 8)
        assert materials[3, 6] == Material.SAND
        assert np.count_nonzero(materials) == 1
