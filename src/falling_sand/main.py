"""Main entry point for the falling sand simulation."""

from .config import Config
from .renderer import PygameRenderer
from .simulation import Simulation, TickTimer
from .simulation.cell import Cell


def seed_scene(simulation: Simulation) -> None:
    """Place a small starting scene: a wooden shelf with a spark on it."""
    materials = simulation.materials
    shelf_y = simulation.height * 2 // 3
    for x in range(simulation.width // 4, simulation.width * 3 // 4):
        simulation.place(Cell.wood(materials.wood_fuel), x, shelf_y)
    simulation.place(Cell.fire(materials.fire_heat), simulation.width // 2, shelf_y - 1)


def main() -> None:
    """Run the falling sand simulation."""
    config = Config.default()

    simulation = Simulation(config.grid, config.materials, config.spawners)
    seed_scene(simulation)

    renderer = PygameRenderer(config.renderer)
    renderer.set_simulation(simulation)

    timer = TickTimer(config.renderer.tick_interval_ms)

    print("Starting falling sand simulation...")
    print(f"  Seed: {simulation.seed}")
    print(f"  Grid: {config.grid.width_blocks}x{config.grid.height_blocks} blocks "
          f"of {config.grid.region_size}x{config.grid.region_size} cells")
    print(f"  Tick interval: {config.renderer.tick_interval_ms} ms")
    print()
    print("Controls:")
    print("  - Left mouse paints the selected material, right mouse erases")
    print("  - [ and ] change the brush size")
    print("  - SPACE pauses, 'Step' advances one tick while paused")
    print("  - C clears the world")
    print("  - ESC to quit")
    print()

    running = True
    while running:
        # Painting and spawning only happen between ticks
        running = renderer.handle_events(simulation)

        elapsed_ms = renderer.tick()
        if timer.add(elapsed_ms) and renderer.should_step():
            simulation.step()

        renderer.render(simulation)

    renderer.cleanup()
    print(f"Simulation ended after {simulation.stats.tick} ticks.")


if __name__ == "__main__":
    main()
