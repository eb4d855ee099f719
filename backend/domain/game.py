"""
Game orchestrator: owns the snake, the food and the score.
"""

import logging
import random
from typing import Optional

from .constants import (
    BOARD_SIZE, CELL_SIZE, START_BODY, START_DIRECTION, START_FOOD,
    UP, DOWN, LEFT, RIGHT, Direction
)
from .food import Food
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#000000"

KEY_BINDINGS = {
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}


class Game:
    """
    Manages:
      - Snake
      - Food
      - Score
      - Tick counter and stall / game-over flags
    """

    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        cell_size: int = CELL_SIZE,
        rng: Optional[random.Random] = None,
        end_on_self_collision: bool = False,
        snake: Optional[Snake] = None,
        food: Optional[Food] = None
    ):
        self.score = 0
        self.size = board_size
        self.cell_size = cell_size
        self.board_cells = board_size // cell_size
        self.end_on_self_collision = end_on_self_collision
        self.snake = snake or Snake(START_BODY, START_DIRECTION)
        self.food = food or Food(START_FOOD, rng=rng)
        self.tick = 0
        self.stalled = False
        self.game_over = False

    def render(self, renderer):
        renderer.clear(BACKGROUND_COLOR)
        self.snake.render(renderer)
        self.food.render(renderer)
        renderer.present()

    def update(self):
        """
        Advance the simulation by one tick.

        Moves the snake, then checks whether it now covers the food. Eating
        scores a point, grows the snake and re-rolls the food until it lands
        on a free cell. When the snake covers every board cell the game ends
        instead.
        """
        if self.game_over:
            return

        self.tick += 1
        moved = self.snake.update()
        if not moved and not self.stalled:
            logger.warning(f"Snake blocked by its own body at {self.snake.head} on tick {self.tick}")
        self.stalled = not moved

        if self.stalled and self.end_on_self_collision:
            self.end_game("self collision")
            return

        if self.snake.is_collide(self.food.x, self.food.y):
            self.score += 1
            self.snake.grow()
            logger.info(f"Food eaten at {self.food.position}, score is now {self.score}")

            if not self.has_free_cell():
                self.end_game("board full")
                return

            while True:
                x, y = self.food.relocate(self.board_cells)
                if not self.snake.is_collide(x, y):
                    break

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("\n" + self.snapshot().print_board())

    def has_free_cell(self) -> bool:
        return any(
            not self.snake.is_collide(x, y)
            for x in range(self.board_cells)
            for y in range(self.board_cells)
        )

    def pressed(self, key: str):
        """Map a key name to a direction; unknown keys are ignored."""
        direction = KEY_BINDINGS.get(key.lower())
        if direction is not None:
            self.steer(direction)

    def steer(self, direction: Direction) -> bool:
        return self.snake.set_direction(direction)

    def end_game(self, reason: str):
        self.game_over = True
        logger.info(f"Game Over: {reason}. Final score {self.score} after {self.tick} ticks")

    def snapshot(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick,
            snake_positions=list(self.snake.positions),
            direction=self.snake.direction,
            food=self.food.position,
            score=self.score,
            board_cells=self.board_cells,
            stalled=self.stalled,
            game_over=self.game_over
        )
