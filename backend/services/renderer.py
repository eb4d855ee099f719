"""
Rendering backends for the snake game.

A renderer draws axis-aligned unit cells, given in grid coordinates, as filled
squares scaled by ``cell_size``. Two backends are provided:

- PygameRenderer: the interactive window
- ImageRenderer: an off-screen Pillow image, used for headless runs and
  snapshots of the final frame
"""

import logging
from typing import Iterable, Tuple

import pygame
from PIL import Image, ImageDraw

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

WINDOW_TITLE = "Snake Game"


class WindowError(RuntimeError):
    """Raised when the game window or its render context cannot be created."""


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class Renderer:
    """
    Base class/interface for drawing a frame.

    Colors are hex strings ("#RRGGBB").
    """

    def __init__(self, board_size: int, cell_size: int):
        self.board_size = board_size
        self.cell_size = cell_size

    def cell_rect(self, cell: Cell) -> Tuple[int, int, int, int]:
        """Return (left, top, width, height) in pixels for a grid cell."""
        x, y = cell
        return (x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)

    def clear(self, color: str):
        raise NotImplementedError

    def draw_cells(self, cells: Iterable[Cell], color: str):
        raise NotImplementedError

    def present(self):
        """Finish the current frame."""

    def close(self):
        """Release any resources held by the renderer."""


class PygameRenderer(Renderer):
    """Draws into a fixed-size, non-resizable pygame window."""

    def __init__(self, board_size: int, cell_size: int, title: str = WINDOW_TITLE):
        super().__init__(board_size, cell_size)
        try:
            pygame.init()
            pygame.display.set_caption(title)
            # vsync is only honoured together with SCALED or OPENGL
            self.surface = pygame.display.set_mode(
                (board_size, board_size),
                flags=pygame.SCALED,
                vsync=1
            )
        except pygame.error as e:
            pygame.quit()
            raise WindowError(f"Could not create {board_size}x{board_size} window: {e}") from e
        logger.info(f"Opened {board_size}x{board_size} window (cell size {cell_size})")

    def clear(self, color: str):
        self.surface.fill(hex_to_rgb(color))

    def draw_cells(self, cells: Iterable[Cell], color: str):
        rgb = hex_to_rgb(color)
        for cell in cells:
            pygame.draw.rect(self.surface, rgb, pygame.Rect(*self.cell_rect(cell)))

    def present(self):
        pygame.display.flip()

    def close(self):
        pygame.quit()


class ImageRenderer(Renderer):
    """Draws into an in-memory Pillow RGB image of the board."""

    def __init__(self, board_size: int, cell_size: int):
        super().__init__(board_size, cell_size)
        self.image = Image.new('RGB', (board_size, board_size))
        self.draw = ImageDraw.Draw(self.image)
        self.frames_presented = 0

    def clear(self, color: str):
        self.draw.rectangle(
            [0, 0, self.board_size - 1, self.board_size - 1],
            fill=hex_to_rgb(color)
        )

    def draw_cells(self, cells: Iterable[Cell], color: str):
        rgb = hex_to_rgb(color)
        for cell in cells:
            left, top, width, height = self.cell_rect(cell)
            # Pillow rectangles include both corner pixels
            self.draw.rectangle([left, top, left + width - 1, top + height - 1], fill=rgb)

    def present(self):
        self.frames_presented += 1

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        return self.image.getpixel((x, y))

    def save(self, path: str) -> str:
        self.image.save(path)
        logger.info(f"Frame saved to {path}")
        return path
