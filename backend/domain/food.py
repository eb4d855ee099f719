"""
Food entity: a single cell the snake can eat.
"""

import random
from typing import Optional, Tuple

from .constants import START_FOOD

FOOD_COLOR = "#0000FF"


class Food:
    """
    Food on the board.

    Owns its own random generator so placement can be made deterministic
    by passing a seeded ``random.Random``.
    """

    def __init__(
        self,
        position: Tuple[int, int] = START_FOOD,
        rng: Optional[random.Random] = None
    ):
        self.x, self.y = position
        self.rng = rng or random.Random()

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def relocate(self, board_cells: int) -> Tuple[int, int]:
        """
        Move to a uniformly random cell in [0, board_cells) on both axes.

        Snake occupancy is not checked here; the caller re-rolls on overlap.
        """
        self.x = self.rng.randrange(board_cells)
        self.y = self.rng.randrange(board_cells)
        return self.position

    def render(self, renderer):
        renderer.draw_cells([self.position], FOOD_COLOR)
