"""Chunked cell storage: blocks of cells arranged in a dense grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

import numpy as np

from .cell import AIR, Cell, Material

if TYPE_CHECKING:
    from ..config import GridConfig

REGION_SIZE = 8


class OutOfBoundsError(IndexError):
    """A coordinate resolved to a position outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y


class Block:
    """
    A square sub-grid of cells and its dirty flag.

    Cells are stored row-major in two arrays indexed ``[local_y, local_x]``:
    material codes and payload amounts. A fresh block is all Air and dirty,
    so it is computed at least once.
    """

    __slots__ = ("size", "materials", "amounts", "dirty")

    def __init__(self, size: int = REGION_SIZE):
        self.size = size
        self.materials = np.zeros((size, size), dtype=np.uint8)
        self.amounts = np.zeros((size, size), dtype=np.int32)
        self.dirty = True

    def copy_from(self, other: Block) -> None:
        """Overwrite this block's cells with another block's cells."""
        np.copyto(self.materials, other.materials)
        np.copyto(self.amounts, other.amounts)

    def get(self, local_x: int, local_y: int) -> Cell:
        return Cell.from_codes(
            self.materials[local_y, local_x], self.amounts[local_y, local_x]
        )

    def set(self, cell: Cell, local_x: int, local_y: int) -> None:
        self.materials[local_y, local_x] = cell.material
        self.amounts[local_y, local_x] = cell.amount

    def cells(self) -> Iterator[tuple[Cell, int, int]]:
        """Yield ``(cell, local_x, local_y)`` in row-major order (x fastest)."""
        for local_y in range(self.size):
            for local_x in range(self.size):
                yield self.get(local_x, local_y), local_x, local_y

    def occupied(self) -> Iterator[tuple[Cell, int, int]]:
        """Like :meth:`cells`, skipping Air."""
        ys, xs = np.nonzero(self.materials)
        for local_y, local_x in zip(ys.tolist(), xs.tolist()):
            yield self.get(local_x, local_y), local_x, local_y

    @property
    def is_empty(self) -> bool:
        return not self.materials.any()


class Grid:
    """
    A fixed rectangle of blocks with global-coordinate cell access.

    Global ``(x, y)`` belongs to block ``(x // size, y // size)`` at local
    index ``(x % size, y % size)``. y grows downward. All coordinate
    translation goes through :meth:`_locate`, the only place bounds are checked.
    """

    def __init__(self, width_blocks: int, height_blocks: int, region_size: int = REGION_SIZE):
        """
        Initialize the grid with all-Air blocks.

        Args:
            width_blocks: Number of blocks along x
            height_blocks: Number of blocks along y
            region_size: Side length of each block in cells
        """
        self.width_blocks = width_blocks
        self.height_blocks = height_blocks
        self.region_size = region_size
        self.width = width_blocks * region_size
        self.height = height_blocks * region_size
        self.blocks: list[list[Block]] = [
            [Block(region_size) for _ in range(width_blocks)]
            for _ in range(height_blocks)
        ]

    @classmethod
    def from_config(cls, config: GridConfig) -> Grid:
        """Create a grid from a :class:`~falling_sand.config.GridConfig`."""
        return cls(config.width_blocks, config.height_blocks, config.region_size)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _locate(self, x: int, y: int) -> tuple[Block, int, int] | None:
        """Translate a global coordinate to ``(block, local_x, local_y)``, or None."""
        if not self.in_bounds(x, y):
            return None
        bx, local_x = divmod(x, self.region_size)
        by, local_y = divmod(y, self.region_size)
        return self.blocks[by][bx], local_x, local_y

    def block(self, bx: int, by: int) -> Block:
        if not (0 <= bx < self.width_blocks and 0 <= by < self.height_blocks):
            raise OutOfBoundsError(bx, by, self.width_blocks, self.height_blocks)
        return self.blocks[by][bx]

    def block_of(self, x: int, y: int) -> Block:
        """Get the block owning a global coordinate."""
        location = self._locate(x, y)
        if location is None:
            raise OutOfBoundsError(x, y, self.width, self.height)
        return location[0]

    def iter_blocks(self) -> Iterator[tuple[int, int, Block]]:
        """
        Yield ``(offset_x, offset_y, block)`` for every block in storage order.

        Storage order is row-major over blocks: bx fastest, then by. The
        offsets are the global coordinates of the block's top-left cell.
        """
        size = self.region_size
        for by, row in enumerate(self.blocks):
            for bx, block in enumerate(row):
                yield bx * size, by * size, block

    def read_cell(self, x: int, y: int) -> Cell:
        location = self._locate(x, y)
        if location is None:
            raise OutOfBoundsError(x, y, self.width, self.height)
        block, local_x, local_y = location
        return block.get(local_x, local_y)

    def peek(self, x: int, y: int) -> Cell | None:
        """Get the cell at a coordinate, or None if it lies outside the grid."""
        location = self._locate(x, y)
        if location is None:
            return None
        block, local_x, local_y = location
        return block.get(local_x, local_y)

    def is_empty(self, x: int, y: int) -> bool:
        """Check whether a cell holds Air. Out-of-bounds cells are never empty."""
        location = self._locate(x, y)
        if location is None:
            return False
        block, local_x, local_y = location
        return bool(block.materials[local_y, local_x] == Material.AIR)

    def write_cell(self, cell: Cell, x: int, y: int, mark_dirty: bool = False) -> None:
        """
        Store a cell at a global coordinate.

        Args:
            cell: The value to store
            x: Global x coordinate
            y: Global y coordinate
            mark_dirty: Set the owning block's dirty flag (never clears it)
        """
        location = self._locate(x, y)
        if location is None:
            raise OutOfBoundsError(x, y, self.width, self.height)
        block, local_x, local_y = location
        block.set(cell, local_x, local_y)
        if mark_dirty:
            block.dirty = True

    def mark_dirty(self, x: int, y: int) -> None:
        """Set the dirty flag of the block owning a global coordinate."""
        self.block_of(x, y).dirty = True

    def reset_block(self, bx: int, by: int) -> None:
        """Replace a block with a fresh all-Air block."""
        self.block(bx, by)
        self.blocks[by][bx] = Block(self.region_size)

    def clear_dirty(self) -> None:
        for _, _, block in self.iter_blocks():
            block.dirty = False

    def dirty_blocks(self) -> list[tuple[int, int]]:
        """Get the block coordinates of every dirty block, in storage order."""
        return [
            (bx, by)
            for by, row in enumerate(self.blocks)
            for bx, block in enumerate(row)
            if block.dirty
        ]

    def fill(self, cell: Cell = AIR) -> None:
        """Set every cell to ``cell`` and mark every block dirty."""
        for _, _, block in self.iter_blocks():
            block.materials.fill(cell.material)
            block.amounts.fill(cell.amount)
            block.dirty = True

    def materials(self) -> np.ndarray:
        """Assemble the material codes of the whole grid, indexed ``[y, x]``."""
        return np.block([[block.materials for block in row] for row in self.blocks])

    def amounts(self) -> np.ndarray:
        """Assemble the payload amounts of the whole grid, indexed ``[y, x]``."""
        return np.block([[block.amounts for block in row] for row in self.blocks])

    def count(self, material: Material) -> int:
        """Count the cells holding a material."""
        return sum(
            int(np.count_nonzero(block.materials == material))
            for _, _, block in self.iter_blocks()
        )

    def __len__(self) -> int:
        """Return the number of blocks in the grid."""
        return self.width_blocks * self.height_blocks
