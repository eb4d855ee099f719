"""
Tests for the Snake entity: movement, collision and steering.
"""

import os
import sys
from collections import deque
from unittest.mock import MagicMock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT  # noqa: E402
from domain.snake import Snake, SNAKE_COLOR  # noqa: E402


class TestSnakeInit:
    """Construction and basic accessors."""

    def test_positions_is_deque(self):
        """Body is stored as a deque, head first."""
        snake = Snake([(0, 0), (0, 1)])
        assert isinstance(snake.positions, deque)
        assert list(snake.positions) == [(0, 0), (0, 1)]

    def test_head_property(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)

    def test_default_direction_is_right(self):
        assert Snake([(0, 0)]).direction is RIGHT

    def test_empty_body_rejected(self):
        """A snake must always have at least one segment."""
        with pytest.raises(ValueError):
            Snake([])


class TestSnakeUpdate:
    """Snake.update() moves the head one cell and drops the tail."""

    def test_two_steps_right(self):
        snake = Snake([(0, 0), (0, 1)], RIGHT)

        assert snake.update() is True
        assert list(snake.positions) == [(1, 0), (0, 0)]

        assert snake.update() is True
        assert list(snake.positions) == [(2, 0), (1, 0)]

    @pytest.mark.parametrize("direction,expected_head", [
        (UP, (5, 4)),
        (DOWN, (5, 6)),
        (LEFT, (4, 5)),
        (RIGHT, (6, 5)),
    ])
    def test_offsets(self, direction, expected_head):
        snake = Snake([(5, 5)], direction)
        snake.update()
        assert snake.head == expected_head

    def test_length_preserved(self):
        snake = Snake([(5, 5), (4, 5), (3, 5), (2, 5)], RIGHT)
        for _ in range(10):
            before = len(snake)
            snake.update()
            assert len(snake) == before

    def test_may_leave_the_board(self):
        """There are no walls; coordinates can go negative."""
        snake = Snake([(0, 0), (1, 0)], LEFT)
        snake.update()
        assert snake.head == (-1, 0)

    def test_self_collision_freezes_body(self):
        """Moving into the body leaves the snake exactly where it was."""
        snake = Snake([(1, 1), (2, 1), (2, 0)], RIGHT)
        before = list(snake.positions)

        assert snake.update() is False
        assert list(snake.positions) == before

    def test_stays_frozen_while_blocked(self):
        snake = Snake([(1, 1), (2, 1), (2, 0)], RIGHT)
        before = list(snake.positions)
        for _ in range(3):
            snake.update()
        assert list(snake.positions) == before


class TestSnakeCollision:

    def test_is_collide_on_body(self):
        snake = Snake([(3, 3), (2, 3), (1, 3)])
        assert snake.is_collide(3, 3)
        assert snake.is_collide(1, 3)

    def test_is_collide_off_body(self):
        snake = Snake([(3, 3), (2, 3), (1, 3)])
        assert not snake.is_collide(4, 3)
        assert not snake.is_collide(3, 4)


class TestSnakeDirection:
    """Opposite headings are rejected, anything else is adopted."""

    @pytest.mark.parametrize("current,requested", [
        (UP, DOWN), (DOWN, UP), (LEFT, RIGHT), (RIGHT, LEFT),
    ])
    def test_reversal_rejected(self, current, requested):
        snake = Snake([(5, 5)], current)
        assert snake.set_direction(requested) is False
        assert snake.direction is current

    @pytest.mark.parametrize("current,requested", [
        (RIGHT, RIGHT), (RIGHT, UP), (RIGHT, DOWN),
        (UP, UP), (UP, LEFT), (UP, RIGHT),
    ])
    def test_other_directions_adopted(self, current, requested):
        snake = Snake([(5, 5)], current)
        assert snake.set_direction(requested) is True
        assert snake.direction is requested

    def test_direction_applies_on_next_update(self):
        snake = Snake([(5, 5), (4, 5)], RIGHT)
        snake.set_direction(UP)
        assert snake.head == (5, 5)
        snake.update()
        assert list(snake.positions) == [(5, 4), (5, 5)]


class TestSnakeGrow:

    def test_grow_adds_one_segment(self):
        snake = Snake([(2, 2), (1, 2)], RIGHT)
        snake.grow()
        assert len(snake) == 3

    def test_grown_segment_follows_on_next_update(self):
        """After growing, the next move keeps the old tail in place."""
        snake = Snake([(2, 2), (1, 2)], RIGHT)
        snake.grow()
        snake.update()
        assert list(snake.positions) == [(3, 2), (2, 2), (1, 2)]


class TestSnakeRender:

    def test_render_draws_every_segment(self):
        renderer = MagicMock()
        snake = Snake([(2, 2), (1, 2), (0, 2)])
        snake.render(renderer)
        renderer.draw_cells.assert_called_once_with([(2, 2), (1, 2), (0, 2)], SNAKE_COLOR)
