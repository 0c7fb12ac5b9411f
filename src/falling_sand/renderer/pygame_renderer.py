"""Pygame-CE renderer for visualizing the simulation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pygame

from ..config import RendererConfig
from ..simulation.cell import AIR
from ..simulation.spawner import cell_for
from . import colors
from .ui import UI_COLORS, BrushType, Button, SimulationMode, Sparkline

if TYPE_CHECKING:
    from ..simulation.world import Simulation

BRUSH_MIN, BRUSH_MAX = 0, 12


class PygameRenderer:
    """
    Pygame-based renderer for the falling sand simulation.

    Renders:
    - The grid, one colored square per cell
    - Sidebar with mode and brush controls, statistics and charts

    The renderer only reads the simulation's current grid, and only paints
    into it from :meth:`handle_events`, which the driver calls between ticks.
    """

    def __init__(self, config: RendererConfig):
        """
        Initialize the renderer.

        Args:
            config: Renderer configuration
        """
        self.config = config
        self.window_width = config.window_width
        self.window_height = config.window_height
        self.sidebar_width = config.sidebar_width
        self.world_width = config.window_width - config.sidebar_width
        self.world_height = config.window_height

        pygame.init()
        pygame.display.set_caption("Falling Sand")

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        self.clock = pygame.time.Clock()

        self.font_large = pygame.font.Font(None, 28)
        self.font_small = pygame.font.Font(None, 18)

        self._world_surface = pygame.Surface((self.world_width, self.world_height))
        self._sidebar_surface = pygame.Surface((self.sidebar_width, self.window_height))

        self._fps_history: list[float] = []

        self.mode = SimulationMode.RUNNING
        self.brush_type = BrushType.SAND
        self.brush_size = 2
        self._pending_steps = 0
        self._simulation: Simulation | None = None

        self._init_ui()

    def _init_ui(self) -> None:
        padding = 12
        btn_width = 64
        btn_height = 26

        self.btn_run = Button(
            padding, 10, btn_width, btn_height, "Run",
            on_click=lambda: self._set_mode(SimulationMode.RUNNING),
            active=True,
        )
        self.btn_pause = Button(
            padding + btn_width + 4, 10, btn_width, btn_height, "Pause",
            on_click=lambda: self._set_mode(SimulationMode.PAUSED),
        )
        self.btn_step = Button(
            padding + (btn_width + 4) * 2, 10, btn_width, btn_height, "Step",
            on_click=self._on_step_click,
        )
        self.mode_buttons = [self.btn_run, self.btn_pause, self.btn_step]

        brush_width = 48
        self.brush_buttons: dict[BrushType, Button] = {}
        for i, brush in enumerate(BrushType):
            self.brush_buttons[brush] = Button(
                padding + i * (brush_width + 4), 0, brush_width, btn_height,
                brush.name.capitalize(),
                on_click=lambda b=brush: self._set_brush(b),
                active=(brush == self.brush_type),
                swatch=brush.swatch,
            )

        self.btn_spawner = Button(
            padding, 0, self.sidebar_width - padding * 2, btn_height, "Spawners",
            on_click=self._toggle_spawners,
        )

        chart_width = 90
        chart_height = 24
        self.chart_blocks = Sparkline(0, 0, chart_width, chart_height, color=UI_COLORS.series_blocks)
        self.chart_sand = Sparkline(0, 0, chart_width, chart_height, color=UI_COLORS.series_sand)
        self.chart_wood = Sparkline(0, 0, chart_width, chart_height, color=UI_COLORS.series_wood)
        self.chart_fire = Sparkline(0, 0, chart_width, chart_height, color=UI_COLORS.series_fire)

    def set_simulation(self, simulation: Simulation) -> None:
        """Set the simulation reference for button callbacks."""
        self._simulation = simulation
        self.btn_spawner.active = any(s.enabled for s in simulation.spawners)

    def _set_mode(self, mode: SimulationMode) -> None:
        self.mode = mode
        self.btn_run.active = mode == SimulationMode.RUNNING
        self.btn_pause.active = mode == SimulationMode.PAUSED

    def _set_brush(self, brush: BrushType) -> None:
        self.brush_type = brush
        for kind, button in self.brush_buttons.items():
            button.active = kind == brush

    def _toggle_spawners(self) -> None:
        if self._simulation is None:
            return
        for spawner in self._simulation.spawners:
            spawner.toggle()
        self.btn_spawner.active = any(s.enabled for s in self._simulation.spawners)

    def _on_step_click(self) -> None:
        """Advance one tick when paused."""
        if self.mode == SimulationMode.PAUSED:
            self._pending_steps += 1

    def handle_events(self, simulation: Simulation) -> bool:
        """
        Handle Pygame events.

        Args:
            simulation: The simulation to paint into

        Returns:
            False if the window should close, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_SPACE:
                    if self.mode == SimulationMode.RUNNING:
                        self._set_mode(SimulationMode.PAUSED)
                    else:
                        self._set_mode(SimulationMode.RUNNING)
                elif event.key == pygame.K_c:
                    simulation.clear()
                elif event.key == pygame.K_LEFTBRACKET:
                    self.brush_size = max(BRUSH_MIN, self.brush_size - 1)
                elif event.key == pygame.K_RIGHTBRACKET:
                    self.brush_size = min(BRUSH_MAX, self.brush_size + 1)

            buttons = [*self.mode_buttons, *self.brush_buttons.values(), self.btn_spawner]
            for button in buttons:
                if button.handle_event(event):
                    break

        # Paint while a mouse button is held over the world
        pressed = pygame.mouse.get_pressed(3)
        if pressed[0] or pressed[2]:
            cell_pos = self._screen_to_cell(simulation, pygame.mouse.get_pos())
            if cell_pos is not None:
                if pressed[2]:
                    cell = AIR
                else:
                    cell = cell_for(self.brush_type.material, simulation.materials)
                simulation.paint(cell, cell_pos[0], cell_pos[1], self.brush_size)

        return True

    def _cell_scale(self, simulation: Simulation) -> int:
        return max(
            1,
            min(
                self.config.cell_draw_size,
                self.world_width // simulation.width,
                self.world_height // simulation.height,
            ),
        )

    def _screen_to_cell(
        self, simulation: Simulation, screen_pos: tuple[int, int]
    ) -> tuple[int, int] | None:
        """Convert a screen position to a cell coordinate, or None outside the world."""
        scale = self._cell_scale(simulation)
        x = (screen_pos[0] - self.sidebar_width) // scale
        y = screen_pos[1] // scale
        if 0 <= x < simulation.width and 0 <= y < simulation.height:
            return x, y
        return None

    def should_step(self) -> bool:
        """Check if the simulation may tick this frame."""
        if self.mode == SimulationMode.RUNNING:
            return True
        if self._pending_steps > 0:
            self._pending_steps -= 1
            return True
        return False

    def render(self, simulation: Simulation) -> None:
        """
        Render the current state of the simulation.

        Args:
            simulation: The simulation to render
        """
        self.screen.fill(colors.BG_DARK)

        self._render_world(simulation)
        self._render_sidebar(simulation)

        self.screen.blit(self._world_surface, (self.sidebar_width, 0))
        self.screen.blit(self._sidebar_surface, (0, 0))

        pygame.display.flip()

        self._fps_history.append(self.clock.get_fps())
        if len(self._fps_history) > 60:
            self._fps_history.pop(0)

    def _render_world(self, simulation: Simulation) -> None:
        """Draw every cell of the current grid, block by block."""
        grid = simulation.read
        size = grid.region_size
        # surfarray expects [x, y, rgb]
        image = np.empty((grid.width, grid.height, 3), dtype=np.uint8)
        for offset_x, offset_y, block in grid.iter_blocks():
            rgb = colors.cell_colors(block.materials, block.amounts)
            image[offset_x:offset_x + size, offset_y:offset_y + size] = rgb.swapaxes(0, 1)

        scale = self._cell_scale(simulation)
        surface = pygame.surfarray.make_surface(image)
        surface = pygame.transform.scale(surface, (grid.width * scale, grid.height * scale))

        self._world_surface.fill(colors.BG_DARK)
        self._world_surface.blit(surface, (0, 0))

    def _render_sidebar(self, simulation: Simulation) -> None:
        """Render the sidebar with controls and statistics."""
        self._sidebar_surface.fill(colors.BG_SIDEBAR)
        pygame.draw.line(
            self._sidebar_surface,
            colors.DIVIDER,
            (self.sidebar_width - 1, 0),
            (self.sidebar_width - 1, self.window_height),
            2,
        )

        padding = 12
        y = 10

        for button in self.mode_buttons:
            button.render(self._sidebar_surface, self.font_small)
        y += 36

        avg_fps = sum(self._fps_history) / len(self._fps_history) if self._fps_history else 0
        stats = simulation.stats
        y = self._render_text(f"Tick: {stats.tick:,}   FPS: {avg_fps:.0f}", y, padding)
        y = self._render_text(f"Seed: {simulation.seed}", y, padding)
        y = self._render_divider(y, padding)

        # === BRUSH ===
        y = self._render_section_header("BRUSH", y, padding)
        for button in self.brush_buttons.values():
            button.rect.y = y
            button.render(self._sidebar_surface, self.font_small)
        y += 32
        y = self._render_text(f"Size: {self.brush_size}  ([ / ])", y, padding)
        y += 6
        self.btn_spawner.rect.y = y
        self.btn_spawner.render(self._sidebar_surface, self.font_small)
        y += 34
        y = self._render_divider(y, padding)

        # === STATS ===
        y = self._render_section_header("LIVE STATS", y, padding)
        history = simulation.stats_history
        rows = [
            (f"Blocks: {stats.blocks_recomputed}/{stats.total_blocks}", self.chart_blocks,
             history.blocks_recomputed),
            (f"Sand: {stats.sand_count}", self.chart_sand, history.sand_count),
            (f"Wood: {stats.wood_count}", self.chart_wood, history.wood_count),
            (f"Fire: {stats.fire_count}", self.chart_fire, history.fire_count),
        ]
        for label, chart, data in rows:
            label_surface = self.font_small.render(label, True, colors.TEXT_PRIMARY)
            self._sidebar_surface.blit(label_surface, (padding, y + 4))
            chart.rect.x = self.sidebar_width - padding - chart.rect.width
            chart.rect.y = y
            chart.render(self._sidebar_surface, list(data), min_val=0)
            y += 30
        y = self._render_divider(y, padding)

        hints = ["LMB paint  RMB erase", "SPACE pause/resume", "C clear  ESC quit"]
        for hint in hints:
            y = self._render_text(hint, y, padding)

    def _render_text(self, text: str, y: int, padding: int) -> int:
        surface = self.font_small.render(text, True, colors.TEXT_SECONDARY)
        self._sidebar_surface.blit(surface, (padding, y))
        return y + 18

    def _render_divider(self, y: int, padding: int) -> int:
        pygame.draw.line(
            self._sidebar_surface, colors.DIVIDER,
            (padding, y), (self.sidebar_width - padding, y)
        )
        return y + 8

    def _render_section_header(self, title: str, y: int, padding: int) -> int:
        """Render a section header and return new y position."""
        header_surface = self.font_small.render(title, True, UI_COLORS.highlight)
        self._sidebar_surface.blit(header_surface, (padding, y))
        return y + 20

    def tick(self) -> int:
        """
        Advance the renderer clock.

        Returns:
            Milliseconds elapsed since the previous frame
        """
        return self.clock.tick(self.config.target_fps)

    def cleanup(self) -> None:
        """Clean up Pygame resources."""
        pygame.quit()
