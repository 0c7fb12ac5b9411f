"""Spawners - stamp material into a grid at fixed offsets from an anchor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, assert_never

from ..config import SPRINKLE_PATTERN, MaterialConfig, SpawnerConfig
from .cell import AIR, SAND, Cell, Material

if TYPE_CHECKING:
    from .grid import Grid


def cell_for(material: Material | str, materials: MaterialConfig | None = None) -> Cell:
    """Get a freshly placed cell of a material, with its configured payload."""
    if materials is None:
        materials = MaterialConfig()
    if isinstance(material, str):
        material = Material[material.upper()]
    match material:
        case Material.AIR:
            return AIR
        case Material.SAND:
            return SAND
        case Material.WOOD:
            return Cell.wood(materials.wood_fuel)
        case Material.FIRE:
            return Cell.fire(materials.fire_heat)
        case _:
            assert_never(material)


@dataclass
class Spawner:
    """
    Injects a material into a grid, independent of tick timing.

    Every call to :meth:`spawn` writes ``cell`` at ``anchor + offset`` for each
    offset in ``pattern`` and marks the written blocks dirty.
    """

    cell: Cell = SAND
    anchor: tuple[int, int] = (0, 0)
    pattern: tuple[tuple[int, int], ...] = field(default=SPRINKLE_PATTERN)
    enabled: bool = True

    @classmethod
    def from_config(cls, config: SpawnerConfig, materials: MaterialConfig | None = None) -> Spawner:
        return cls(
            cell=cell_for(config.material, materials),
            anchor=config.anchor,
            pattern=tuple(config.pattern),
            enabled=config.enabled,
        )

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def toggle(self) -> None:
        self.enabled = not self.enabled

    def set_material(self, cell: Cell) -> None:
        self.cell = cell

    def move_to(self, x: int, y: int) -> None:
        self.anchor = (x, y)

    def targets(self) -> list[tuple[int, int]]:
        """Get the absolute coordinates this spawner writes to."""
        ax, ay = self.anchor
        return [(ax + dx, ay + dy) for dx, dy in self.pattern]

    def spawn(self, grid: Grid) -> int:
        """
        Stamp the material into ``grid``.

        Targets outside the grid are skipped.

        Returns:
            Number of cells written (0 when disabled)
        """
        if not self.enabled:
            return 0

        written = 0
        for x, y in self.targets():
            if grid.in_bounds(x, y):
                grid.write_cell(self.cell, x, y, mark_dirty=True)
                written += 1
        return written
