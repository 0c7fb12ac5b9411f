"""
Per-cell material rules.

Every rule reads the frozen ``read`` grid and writes into ``write``. Sand also
consults ``write`` for emptiness, so a grain never lands on a cell another
mover already claimed this tick. Fire relocation is decided from ``read``
alone and overwrites such a claim, so the later fire wins. A cell's origin is
already Air in ``write`` when its rule runs, because its block was reset
before rule evaluation began.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from .cell import AIR, SAND, Cell, Material
from .coins import CoinSource, random_neighbor

if TYPE_CHECKING:
    from .grid import Grid

IGNITION_HEAT = 30


def update_cell(
    cell: Cell,
    x: int,
    y: int,
    read: Grid,
    write: Grid,
    coins: CoinSource,
    ignition_heat: int = IGNITION_HEAT,
) -> None:
    """Apply the rule for ``cell`` at ``(x, y)`` for one tick."""
    match cell.material:
        case Material.AIR:
            pass
        case Material.SAND:
            update_sand(x, y, read, write, coins)
        case Material.WOOD:
            update_wood(cell, x, y, read, write, coins, ignition_heat)
        case Material.FIRE:
            update_fire(cell, x, y, read, write, coins)
        case _:
            assert_never(cell.material)


def _is_free(x: int, y: int, read: Grid, write: Grid) -> bool:
    """A destination is free when it is Air before and so far during the tick."""
    return read.is_empty(x, y) and write.is_empty(x, y)


def _move(cell: Cell, from_x: int, from_y: int, to_x: int, to_y: int, write: Grid) -> None:
    write.write_cell(cell, to_x, to_y, mark_dirty=True)
    write.mark_dirty(from_x, from_y)


def update_sand(x: int, y: int, read: Grid, write: Grid, coins: CoinSource) -> None:
    """Fall straight down, else to one randomly chosen diagonal, else rest."""
    sideways = x + 1 if coins.flip() else x - 1
    down = y + 1
    if _is_free(x, down, read, write):
        _move(SAND, x, y, x, down, write)
        return

    if _is_free(sideways, down, read, write):
        _move(SAND, x, y, sideways, down, write)
        return

    # Resting sand does not dirty its block on its own
    write.write_cell(SAND, x, y, mark_dirty=False)


def update_wood(
    cell: Cell,
    x: int,
    y: int,
    read: Grid,
    write: Grid,
    coins: CoinSource,
    ignition_heat: int = IGNITION_HEAT,
) -> None:
    """Burn out when fuel is gone, ignite next to fire, otherwise stay."""
    if cell.fuel <= 0:
        write.write_cell(AIR, x, y, mark_dirty=True)
        return

    nx, ny = random_neighbor(x, y, coins)
    neighbor = read.peek(nx, ny)
    if neighbor is not None and neighbor.material == Material.FIRE:
        write.write_cell(Cell.fire(ignition_heat), x, y, mark_dirty=True)
    else:
        write.write_cell(cell, x, y, mark_dirty=False)


def update_fire(cell: Cell, x: int, y: int, read: Grid, write: Grid, coins: CoinSource) -> None:
    """
    Move into a random Air neighbor while cooling, or cool in place.

    A relocating fire leaves only Air behind; it does not duplicate itself.
    Its target only has to be Air in ``read``, so it replaces whatever an
    earlier mover put there this tick.
    """
    if cell.heat <= 0:
        write.write_cell(AIR, x, y, mark_dirty=True)
        return

    nx, ny = random_neighbor(x, y, coins)
    if read.is_empty(nx, ny):
        cooling = 2 if coins.flip() else 1
        _move(Cell.fire(cell.heat - cooling), x, y, nx, ny, write)
        return

    remaining = cell.heat - 1
    if remaining <= 0:
        write.write_cell(AIR, x, y, mark_dirty=True)
    else:
        write.write_cell(Cell.fire(remaining), x, y, mark_dirty=True)
