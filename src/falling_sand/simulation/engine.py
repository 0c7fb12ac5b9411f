"""Tick execution: advance a frozen read grid into a write grid."""

from __future__ import annotations

import logging

from .coins import CoinSource
from .grid import Grid
from .rules import IGNITION_HEAT, update_cell

logger = logging.getLogger(__name__)


def prepare_write_buffer(read: Grid, write: Grid) -> list[tuple[int, int]]:
    """
    Phase A: make ``write`` a starting point for rule evaluation.

    Dirty blocks are reset to Air (they are recomputed from scratch), clean
    blocks are copied over verbatim. Every block is handled before any rule
    runs, since a dirty block may write into a clean neighbor. Finally all
    write-side dirty flags are cleared.

    Returns:
        Block coordinates that were dirty in ``read``, in storage order
    """
    dirty: list[tuple[int, int]] = []
    for by, row in enumerate(read.blocks):
        for bx, block in enumerate(row):
            if block.dirty:
                write.reset_block(bx, by)
                dirty.append((bx, by))
            else:
                write.blocks[by][bx].copy_from(block)
    write.clear_dirty()
    return dirty


def evaluate_rules(
    read: Grid,
    write: Grid,
    dirty: list[tuple[int, int]],
    coins: CoinSource,
    ignition_heat: int = IGNITION_HEAT,
) -> None:
    """Phase B: run the material rule of every non-Air cell in the dirty blocks."""
    size = read.region_size
    for bx, by in dirty:
        offset_x = bx * size
        offset_y = by * size
        # Air is a no-op, so only occupied cells are visited
        for cell, local_x, local_y in read.blocks[by][bx].occupied():
            update_cell(
                cell,
                offset_x + local_x,
                offset_y + local_y,
                read,
                write,
                coins,
                ignition_heat,
            )


def advance(
    read: Grid,
    write: Grid,
    coins: CoinSource,
    ignition_heat: int = IGNITION_HEAT,
) -> int:
    """
    Advance the simulation by one tick.

    ``read`` is left untouched; ``write`` receives the next state. The caller
    swaps the two grids afterwards.

    Returns:
        Number of blocks that were recomputed
    """
    if (read.width_blocks, read.height_blocks, read.region_size) != (
        write.width_blocks,
        write.height_blocks,
        write.region_size,
    ):
        raise ValueError("read and write grids must have the same shape")

    dirty = prepare_write_buffer(read, write)
    evaluate_rules(read, write, dirty, coins, ignition_heat)

    logger.debug("Recomputed %d of %d blocks", len(dirty), len(read))
    return len(dirty)
