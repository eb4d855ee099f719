"""
Tests for configuration loading.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig  # noqa: E402

ENV_VARS = [
    "SNAKE_BOARD_SIZE",
    "SNAKE_CELL_SIZE",
    "SNAKE_UPS",
    "SNAKE_MAX_FPS",
    "SNAKE_SEED",
    "SNAKE_END_ON_SELF_COLLISION",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGameConfig:

    def test_defaults(self, clean_env):
        config = GameConfig.from_env()
        assert config.board_size == 200
        assert config.cell_size == 20
        assert config.updates_per_second == 4
        assert config.max_fps == 60
        assert config.seed is None
        assert config.end_on_self_collision is False
        assert config.board_cells == 10

    def test_values_from_env(self, clean_env):
        clean_env.setenv("SNAKE_BOARD_SIZE", "400")
        clean_env.setenv("SNAKE_CELL_SIZE", "40")
        clean_env.setenv("SNAKE_UPS", "8")
        clean_env.setenv("SNAKE_SEED", "99")
        clean_env.setenv("SNAKE_END_ON_SELF_COLLISION", "yes")

        config = GameConfig.from_env()

        assert config.board_size == 400
        assert config.cell_size == 40
        assert config.updates_per_second == 8
        assert config.seed == 99
        assert config.end_on_self_collision is True

    def test_blank_seed_means_unseeded(self, clean_env):
        clean_env.setenv("SNAKE_SEED", "  ")
        assert GameConfig.from_env().seed is None

    def test_non_integer_rejected(self, clean_env):
        clean_env.setenv("SNAKE_BOARD_SIZE", "big")
        with pytest.raises(ValueError, match="SNAKE_BOARD_SIZE"):
            GameConfig.from_env()

    def test_bad_boolean_rejected(self, clean_env):
        clean_env.setenv("SNAKE_END_ON_SELF_COLLISION", "maybe")
        with pytest.raises(ValueError):
            GameConfig.from_env()

    @pytest.mark.parametrize("kwargs", [
        {"cell_size": 0},
        {"board_size": 10, "cell_size": 20},
        {"board_size": 20, "cell_size": 20},
        {"board_size": 39, "cell_size": 20},
        {"updates_per_second": 0},
        {"max_fps": -1},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_two_cell_board_accepted(self):
        assert GameConfig(board_size=40, cell_size=20).board_cells == 2

    def test_env_error_hides_int_parse_context(self, clean_env):
        clean_env.setenv("SNAKE_CELL_SIZE", "wide")
        with pytest.raises(ValueError) as exc:
            GameConfig.from_env()
        assert exc.value.__cause__ is None
        assert exc.value.__suppress_context__ is True

    def test_override_replaces_bad_env_value(self, clean_env):
        """An invalid environment value is not validated when overridden."""
        clean_env.setenv("SNAKE_CELL_SIZE", "0")
        clean_env.setenv("SNAKE_UPS", "nope")
        config = GameConfig.from_env(cell_size=20, updates_per_second=5)
        assert config.cell_size == 20
        assert config.updates_per_second == 5

    def test_without_override_bad_env_value_rejected(self, clean_env):
        clean_env.setenv("SNAKE_CELL_SIZE", "0")
        with pytest.raises(ValueError):
            GameConfig.from_env()
