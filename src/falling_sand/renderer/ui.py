"""UI widgets for the simulation renderer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

import pygame

from ..simulation.cell import Material
from . import colors

Color = tuple[int, int, int]


class SimulationMode(Enum):
    """Simulation state modes."""

    RUNNING = auto()
    PAUSED = auto()


class BrushType(Enum):
    """What the mouse paints into the world."""

    SAND = auto()
    WOOD = auto()
    FIRE = auto()
    ERASE = auto()

    @property
    def material(self) -> Material:
        if self is BrushType.ERASE:
            return Material.AIR
        return Material[self.name]

    @property
    def swatch(self) -> Color:
        """Color of the material this brush lays down."""
        return tuple(int(c) for c in colors.PALETTE[self.material])


@dataclass(frozen=True)
class SidebarTheme:
    """Sidebar colors. Series colors follow the materials they plot."""

    panel: Color = colors.BG_SIDEBAR
    button: Color = (48, 48, 58)
    button_hover: Color = (62, 62, 74)
    button_down: Color = (76, 76, 90)
    outline: Color = colors.DIVIDER
    highlight: Color = colors.SAND_COLOR
    label: Color = colors.TEXT_PRIMARY

    series_blocks: Color = (120, 170, 210)
    series_sand: Color = colors.SAND_COLOR
    series_wood: Color = colors.WOOD_COLOR
    series_fire: Color = colors.FIRE_HOT
    series_bg: Color = colors.BG_DARK


UI_COLORS = SidebarTheme()


class Sparkline:
    """A mini line chart for displaying time-series data."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        color: Color = UI_COLORS.series_blocks,
        bg_color: Color = UI_COLORS.series_bg,
    ):
        self.rect = pygame.Rect(x, y, width, height)
        self.color = color
        self.bg_color = bg_color

    def render(
        self,
        surface: pygame.Surface,
        data: Sequence[float | int],
        min_val: float | None = None,
        max_val: float | None = None,
    ) -> None:
        """
        Render the sparkline chart.

        Args:
            surface: Surface to render on
            data: Sequence of values to plot
            min_val: Optional minimum value for scaling (auto if None)
            max_val: Optional maximum value for scaling (auto if None)
        """
        pygame.draw.rect(surface, self.bg_color, self.rect, border_radius=3)

        if len(data) < 2:
            return

        low = min(data) if min_val is None else min_val
        high = max(data) if max_val is None else max_val
        span = high - low if high > low else 1.0

        padding = 2
        inner_width = self.rect.width - padding * 2
        inner_height = self.rect.height - padding * 2

        points = [
            (
                self.rect.x + padding + int(i * inner_width / (len(data) - 1)),
                self.rect.y + padding + int((1 - (value - low) / span) * inner_height),
            )
            for i, value in enumerate(data)
        ]
        pygame.draw.lines(surface, self.color, False, points, 2)



class Button:
    """
    A sidebar button.

    Clicks fire on release, and only when the press also started on the
    button. An ``active`` button is drawn filled with its swatch color, which
    lets the brush buttons show the material they paint.
    """

    SWATCH_SIZE = 8

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        on_click: Callable[[], None] | None = None,
        active: bool = False,
        swatch: Color | None = None,
    ):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.on_click = on_click
        self.active = active
        self.swatch = swatch
        self.hovered = False
        self.pressed = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Track hover and press state, firing ``on_click`` on a completed click.

        Returns:
            True if event was consumed
        """
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
            return False

        if getattr(event, "button", None) != 1:
            return False

        inside = self.rect.collidepoint(event.pos)
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.pressed = inside
            return inside

        if event.type == pygame.MOUSEBUTTONUP and self.pressed:
            self.pressed = False
            if inside and self.on_click:
                self.on_click()
            return inside

        return False

    def fill_color(self) -> Color:
        if self.active:
            return self.swatch or UI_COLORS.highlight
        if self.pressed:
            return UI_COLORS.button_down
        if self.hovered:
            return UI_COLORS.button_hover
        return UI_COLORS.button

    def render(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(surface, self.fill_color(), self.rect, border_radius=4)
        pygame.draw.rect(surface, UI_COLORS.outline, self.rect, width=1, border_radius=4)

        text_x = self.rect.x
        if self.swatch is not None and not self.active:
            swatch_rect = pygame.Rect(0, 0, self.SWATCH_SIZE, self.SWATCH_SIZE)
            swatch_rect.midleft = (self.rect.x + 5, self.rect.centery)
            pygame.draw.rect(surface, self.swatch, swatch_rect)
            text_x += self.SWATCH_SIZE + 2

        text_color = UI_COLORS.panel if self.active else UI_COLORS.label
        text_surface = font.render(self.text, True, text_color)
        text_x += (self.rect.right - text_x - text_surface.get_width()) // 2
        text_y = self.rect.y + (self.rect.height - text_surface.get_height()) // 2
        surface.blit(text_surface, (text_x, text_y))
