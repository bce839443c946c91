"""Tests for generation options and process settings."""

import pytest
from pydantic import ValidationError

from py_cavegen.config import MapConfig, Settings
from py_cavegen.core.generator import CaveGenerator


class TestMapConfig:
    """Test option validation."""

    def test_defaults(self):
        config = MapConfig()
        assert (config.width, config.height) == (64, 36)
        assert config.random_fill_percent == 45
        assert config.smooth_level == 4
        assert config.wall_threshold_size == 50
        assert config.room_threshold_size == 50
        assert config.passage_width == 4
        assert config.border_size == 1
        assert config.seed is None
        assert config.use_random_seed is False

    @pytest.mark.parametrize(
        "field,value",
        [
            ("width", 0),
            ("height", -3),
            ("random_fill_percent", 101),
            ("random_fill_percent", -1),
            ("smooth_level", 21),
            ("smooth_level", -1),
            ("wall_threshold_size", -1),
            ("room_threshold_size", -1),
            ("passage_width", -1),
            ("border_size", -1),
        ],
    )
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(ValidationError):
            MapConfig(**{field: value})

    @pytest.mark.parametrize("fill", [0, 100])
    def test_fill_bounds_inclusive(self, fill):
        assert MapConfig(random_fill_percent=fill).random_fill_percent == fill

    def test_frozen(self):
        config = MapConfig()
        with pytest.raises(ValidationError):
            config.width = 10


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self):
        settings = Settings()
        assert settings.max_map_width > 0
        assert settings.max_map_height > 0

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CAVEGEN_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CAVEGEN_MAX_MAP_WIDTH", "128")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.max_map_width == 128


class TestSeedField:
    """Numeric and string seeds are interchangeable."""

    def test_numeric_seed_accepted(self):
        assert MapConfig(seed=42).seed == 42

    def test_numeric_seed_matches_string_seed(self):
        numeric = CaveGenerator(MapConfig(width=30, height=20, seed=42, room_threshold_size=1)).generate()
        text = CaveGenerator(MapConfig(width=30, height=20, seed="42", room_threshold_size=1)).generate()
        assert numeric.seed == "42"
        assert (numeric.grid == text.grid).all()
