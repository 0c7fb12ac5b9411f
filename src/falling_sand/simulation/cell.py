"""Cell values - the material held at one grid position."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Material(IntEnum):
    """Materials a cell can hold. Values are the codes stored in block arrays."""

    AIR = 0
    SAND = 1
    WOOD = 2
    FIRE = 3


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A material plus its payload, copied by value.

    ``amount`` is the fuel of a Wood cell and the heat of a Fire cell.
    Air and Sand carry no payload and always have ``amount == 0``.
    """

    material: Material
    amount: int = 0

    @classmethod
    def air(cls) -> Cell:
        return AIR

    @classmethod
    def sand(cls) -> Cell:
        return SAND

    @classmethod
    def wood(cls, fuel: int) -> Cell:
        return cls(Material.WOOD, fuel)

    @classmethod
    def fire(cls, heat: int) -> Cell:
        return cls(Material.FIRE, heat)

    @classmethod
    def from_codes(cls, material: int, amount: int) -> Cell:
        """Build a cell from the raw codes held in a block."""
        material = Material(int(material))
        if material == Material.AIR:
            return AIR
        if material == Material.SAND:
            return SAND
        return cls(material, int(amount))

    @property
    def is_air(self) -> bool:
        return self.material == Material.AIR

    @property
    def fuel(self) -> int:
        return self.amount

    @property
    def heat(self) -> int:
        return self.amount

    def __repr__(self) -> str:
        name = self.material.name.capitalize()
        if self.material == Material.WOOD:
            return f"{name}(fuel={self.amount})"
        if self.material == Material.FIRE:
            return f"{name}(heat={self.amount})"
        return name


AIR = Cell(Material.AIR)
SAND = Cell(Material.SAND)
