"""
Game constants for the snake game.
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Movement directions. Screen coordinates: y grows downwards."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Board settings
BOARD_SIZE = 200  # window width and height in pixels
CELL_SIZE = 20  # pixels per grid cell
UPDATES_PER_SECOND = 4

# Starting layout
START_BODY = [(0, 0), (0, 1)]
START_DIRECTION = RIGHT
START_FOOD = (0, 0)
