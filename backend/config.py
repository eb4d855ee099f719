"""
Runtime configuration for the snake game.

Values are read from the environment (a local .env file is loaded by the
entry point via python-dotenv). Command-line flags override them.

    SNAKE_BOARD_SIZE             window width/height in pixels (default 200)
    SNAKE_CELL_SIZE              pixels per grid cell (default 20)
    SNAKE_UPS                    simulation ticks per second (default 4)
    SNAKE_MAX_FPS                render frame cap (default 60)
    SNAKE_SEED                   seed for food placement (default: random)
    SNAKE_END_ON_SELF_COLLISION  end the game when the snake blocks itself
"""

import os
from dataclasses import dataclass
from typing import Optional

from domain.constants import BOARD_SIZE, CELL_SIZE, UPDATES_PER_SECOND
from services.event_loop import DEFAULT_MAX_FPS

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

# The starting snake needs two cells
MIN_BOARD_CELLS = 2


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass
class GameConfig:
    board_size: int = BOARD_SIZE
    cell_size: int = CELL_SIZE
    updates_per_second: int = UPDATES_PER_SECOND
    max_fps: int = DEFAULT_MAX_FPS
    seed: Optional[int] = None
    end_on_self_collision: bool = False

    def __post_init__(self):
        self.validate()

    @property
    def board_cells(self) -> int:
        return self.board_size // self.cell_size

    def validate(self):
        if self.cell_size <= 0:
            raise ValueError("cell size must be positive")
        if self.board_cells < MIN_BOARD_CELLS:
            raise ValueError(
                f"board size {self.board_size} holds fewer than {MIN_BOARD_CELLS} cells "
                f"of {self.cell_size} pixels per side"
            )
        if self.updates_per_second <= 0:
            raise ValueError("updates per second must be positive")
        if self.max_fps <= 0:
            raise ValueError("max fps must be positive")

    @classmethod
    def from_env(cls, **overrides) -> "GameConfig":
        """
        Build a config from SNAKE_* variables.

        Keyword overrides replace the matching variable before validation,
        so a bad environment value can be corrected from the command line.
        """
        readers = {
            "board_size": lambda: _int_from_env("SNAKE_BOARD_SIZE", BOARD_SIZE),
            "cell_size": lambda: _int_from_env("SNAKE_CELL_SIZE", CELL_SIZE),
            "updates_per_second": lambda: _int_from_env("SNAKE_UPS", UPDATES_PER_SECOND),
            "max_fps": lambda: _int_from_env("SNAKE_MAX_FPS", DEFAULT_MAX_FPS),
            "seed": lambda: _int_from_env("SNAKE_SEED", None),
            "end_on_self_collision": lambda: _bool_from_env("SNAKE_END_ON_SELF_COLLISION", False),
        }
        values = {
            name: overrides[name] if name in overrides else read()
            for name, read in readers.items()
        }
        return cls(**values)
