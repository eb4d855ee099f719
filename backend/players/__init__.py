"""
Player implementations for automated snake games.

This module contains the player abstraction and the implementations
that steer the snake in headless runs.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
