"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple

from .constants import Direction, RIGHT

Cell = Tuple[int, int]

SNAKE_COLOR = "#00FF00"


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: heading applied on the next update
    """

    def __init__(self, positions: Iterable[Cell], direction: Direction = RIGHT):
        self.positions = deque(tuple(p) for p in positions)
        if not self.positions:
            raise ValueError("Snake needs at least one body segment.")
        self.direction = direction

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def update(self) -> bool:
        """
        Advance one cell in the current direction.

        Returns False and leaves the body untouched when the new head would
        land on the body.
        """
        dx, dy = self.direction.offset
        head_x, head_y = self.head
        new_head = (head_x + dx, head_y + dy)

        if self.is_collide(*new_head):
            return False

        self.positions.appendleft(new_head)
        self.positions.pop()
        return True

    def is_collide(self, x: int, y: int) -> bool:
        return (x, y) in self.positions

    def set_direction(self, requested: Direction) -> bool:
        """Adopt a new heading unless it would reverse into the neck."""
        if requested is self.direction.opposite:
            return False
        self.direction = requested
        return True

    def grow(self):
        # Duplicate the tail; the next update pops the copy and keeps the rest.
        self.positions.append(self.positions[-1])

    def render(self, renderer):
        renderer.draw_cells(list(self.positions), SNAKE_COLOR)
