"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple

from .constants import Direction


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of update ticks applied so far
        snake_positions: list of (x, y), head first
        direction: current snake heading
        food: (x, y) of the food
        score: food eaten so far
        board_cells: board extent in cells (width == height)
        stalled: whether the snake was blocked by its own body on the last tick
        game_over: whether the game has ended
    """

    def __init__(
        self,
        tick: int,
        snake_positions: List[Tuple[int, int]],
        direction: Direction,
        food: Tuple[int, int],
        score: int,
        board_cells: int,
        stalled: bool = False,
        game_over: bool = False
    ):
        self.tick = tick
        self.snake_positions = snake_positions
        self.direction = direction
        self.food = food
        self.score = score
        self.board_cells = board_cells
        self.stalled = stalled
        self.game_over = game_over

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Rows run top to bottom, matching screen coordinates.
        Cells outside the board are not drawn.
        """
        size = self.board_cells
        board = [['.' for _ in range(size)] for _ in range(size)]

        fx, fy = self.food
        if 0 <= fx < size and 0 <= fy < size:
            board[fy][fx] = 'F'

        # Tail first so the head wins if a grown tail overlaps it
        for pos_idx in range(len(self.snake_positions) - 1, -1, -1):
            x, y = self.snake_positions[pos_idx]
            if 0 <= x < size and 0 <= y < size:
                board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(size)]
        result.append("   " + " ".join(str(i % 10) for i in range(size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, food={self.food}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
