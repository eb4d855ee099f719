"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (windowing, input polling, image output).
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    BOARD_SIZE, CELL_SIZE, UPDATES_PER_SECOND
)
from .snake import Snake
from .food import Food
from .game_state import GameState
from .game import Game

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'BOARD_SIZE', 'CELL_SIZE', 'UPDATES_PER_SECOND',
    'Snake',
    'Food',
    'GameState',
    'Game',
]
