"""Centralized configuration for the simulation."""

from dataclasses import dataclass, field

MATERIAL_NAMES = ("air", "sand", "wood", "fire")

# 20 offsets: five columns two cells apart, four rows deep
SPRINKLE_PATTERN: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dy in range(4) for dx in range(0, 10, 2)
)


@dataclass
class GridConfig:
    """Configuration for the cell grid."""

    width_blocks: int = 16
    height_blocks: int = 12
    region_size: int = 8  # side length of one block, in cells
    # Random seed for reproducibility (None = random seed)
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width_blocks <= 0 or self.height_blocks <= 0:
            raise ValueError(
                f"grid must be at least one block wide and tall, "
                f"got {self.width_blocks}x{self.height_blocks}"
            )
        if self.region_size <= 0:
            raise ValueError(f"region_size must be positive, got {self.region_size}")

    @property
    def width(self) -> int:
        """Grid width in cells."""
        return self.width_blocks * self.region_size

    @property
    def height(self) -> int:
        """Grid height in cells."""
        return self.height_blocks * self.region_size


@dataclass
class MaterialConfig:
    """Payloads given to freshly placed materials."""

    wood_fuel: int = 100
    fire_heat: int = 30  # heat of fire painted or spawned by the user
    ignition_heat: int = 30  # heat of fire produced by burning wood


@dataclass
class SpawnerConfig:
    """Configuration for a single spawner."""

    enabled: bool = True
    material: str = "sand"
    anchor: tuple[int, int] = (10, 10)
    pattern: tuple[tuple[int, int], ...] = field(default=SPRINKLE_PATTERN)

    def __post_init__(self) -> None:
        if self.material not in MATERIAL_NAMES:
            raise ValueError(
                f"unknown material {self.material!r}, expected one of {MATERIAL_NAMES}"
            )


@dataclass
class RendererConfig:
    """Configuration for the Pygame renderer."""

    window_width: int = 1000
    window_height: int = 600
    sidebar_width: int = 232
    cell_draw_size: int = 6  # pixels per cell
    target_fps: int = 60
    tick_interval_ms: int = 32  # accumulated frame time per simulation tick


@dataclass
class Config:
    """Main configuration container."""

    grid: GridConfig
    materials: MaterialConfig
    spawners: list[SpawnerConfig]
    renderer: RendererConfig

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls(
            grid=GridConfig(),
            materials=MaterialConfig(),
            spawners=[SpawnerConfig(enabled=False)],
            renderer=RendererConfig(),
        )
