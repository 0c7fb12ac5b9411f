"""Fair-coin random sources shared by the material rules."""

from __future__ import annotations

import random
from typing import Protocol


class CoinSource(Protocol):
    """Anything that can flip a fair coin."""

    def flip(self) -> bool: ...


class RandomCoins:
    """Coin source backed by a seeded :class:`random.Random`."""

    def __init__(self, seed: int | None = None):
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        self.seed = seed
        self.rng = random.Random(seed)

    def flip(self) -> bool:
        return self.rng.random() < 0.5


def random_neighbor(x: int, y: int, coins: CoinSource) -> tuple[int, int]:
    """
    Pick a neighboring coordinate with four coin flips.

    Each axis is nudged by ``+1`` on its first flip and ``-1`` on its second,
    x before y, so every axis offset lies in -1..1 and zero is the most likely
    outcome. The result can be ``(x, y)`` itself.
    """
    dx = 0
    if coins.flip():
        dx += 1
    if coins.flip():
        dx -= 1
    dy = 0
    if coins.flip():
        dy += 1
    if coins.flip():
        dy -= 1
    return x + dx, y + dy
