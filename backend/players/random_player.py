"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that stays on the board and avoids
    its own body. Reversals are never chosen since the snake would reject them.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]
        reverse = game_state.direction.opposite

        # Sorted so a seeded rng gives the same choice every run
        candidates = sorted(VALID_MOVES - {reverse}, key=lambda d: d.value)

        valid_moves: List[Direction] = []
        for move in candidates:
            dx, dy = move.offset
            new_x, new_y = head_x + dx, head_y + dy

            # Check wall collisions
            if not (0 <= new_x < game_state.board_cells and
                    0 <= new_y < game_state.board_cells):
                continue

            # The tail counts too: the snake checks its whole body before moving
            if (new_x, new_y) in snake_positions:
                continue

            valid_moves.append(move)

        # If nothing is safe, keep any legal heading; the snake will stall
        if not valid_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(valid_moves)
