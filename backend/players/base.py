"""
Base player interface for automated play.
"""

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a direction for the snake
    given the current game state.
    """

    def get_move(self, game_state: GameState) -> Direction:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError
