"""Renderer module - visualization layer."""

from .pygame_renderer import PygameRenderer
from .ui import BrushType, Button, SimulationMode, Sparkline

__all__ = [
    "BrushType",
    "Button",
    "PygameRenderer",
    "SimulationMode",
    "Sparkline",
]
