"""Unit tests for configuration."""

import pytest

from falling_sand.config import SPRINKLE_PATTERN, Config, GridConfig, SpawnerConfig


class TestConfig:
    """Test cases for the configuration dataclasses."""

    def test_default(self):
        config = Config.default()
        assert config.grid.region_size == 8
        assert config.renderer.tick_interval_ms == 32
        assert config.materials.ignition_heat == 30

    def test_grid_size_in_cells(self):
        config = GridConfig(width_blocks=3, height_blocks=2, region_size=4)
        assert (config.width, config.height) == (12, 8)

    @pytest.mark.parametrize(
        "kwargs",
        [{"width_blocks": 0}, {"height_blocks": -1}, {"region_size": 0}],
    )
    def test_invalid_grid_rejected(self, kwargs):
        with pytest.raises(ValueError):
            GridConfig(**kwargs)

    def test_unknown_spawner_material_rejected(self):
        with pytest.raises(ValueError):
            SpawnerConfig(material="water")

    def test_sprinkle_pattern_has_twenty_distinct_offsets(self):
        assert len(SPRINKLE_PATTERN) == 20
        assert len(set(SPRINKLE_PATTERN)) == 20
