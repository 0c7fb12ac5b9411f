"""Shared fixtures for the simulation tests."""

from collections import deque

import pytest

from falling_sand.simulation import Grid


class ScriptedCoins:
    """Coin source that replays a fixed sequence of flips."""

    def __init__(self, flips):
        self.flips = deque(bool(f) for f in flips)
        self.used = 0

    def flip(self) -> bool:
        assert self.flips, f"ran out of coin flips after {self.used}"
        self.used += 1
        return self.flips.popleft()

    @property
    def remaining(self) -> int:
        return len(self.flips)


@pytest.fixture
def coins():
    """Factory for scripted coin sources: ``coins(True, False, ...)``."""

    def make(*flips):
        return ScriptedCoins(flips)

    return make


@pytest.fixture
def grids():
    """Factory for a read/write grid pair of the given shape in blocks."""

    def make(width_blocks=1, height_blocks=1, region_size=8):
        return (
            Grid(width_blocks, height_blocks, region_size),
            Grid(width_blocks, height_blocks, region_size),
        )

    return make
