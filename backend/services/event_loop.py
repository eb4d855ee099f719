"""
Fixed-timestep event loop.

The loop delivers three kinds of events to the game:

- RenderEvent: draw a frame (as fast as the display allows)
- UpdateEvent: advance the simulation (fixed, low rate)
- InputEvent: a key was pressed or released
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Union

import pygame

logger = logging.getLogger(__name__)

DEFAULT_MAX_FPS = 60


@dataclass(frozen=True)
class RenderEvent:
    pass


@dataclass(frozen=True)
class UpdateEvent:
    dt: float


@dataclass(frozen=True)
class InputEvent:
    key: str
    pressed: bool = True


Event = Union[RenderEvent, UpdateEvent, InputEvent]


class PygameEventSource:
    """
    Turns the pygame event queue into a stream of game events.

    Update events are emitted at ``updates_per_second`` regardless of how
    often frames are rendered. The stream ends when the window is closed.
    """

    def __init__(
        self,
        updates_per_second: int,
        max_fps: int = DEFAULT_MAX_FPS,
        clock: Callable[[], float] = time.monotonic
    ):
        if updates_per_second <= 0:
            raise ValueError("updates_per_second must be positive")
        self.update_interval = 1.0 / updates_per_second
        self.max_fps = max_fps
        self.clock = clock
        self.closed = False

    def _translate(self, event) -> Iterator[Event]:
        if event.type == pygame.QUIT:
            self.closed = True
        elif event.type == pygame.KEYDOWN:
            yield InputEvent(pygame.key.name(event.key), pressed=True)
        elif event.type == pygame.KEYUP:
            yield InputEvent(pygame.key.name(event.key), pressed=False)

    def __iter__(self) -> Iterator[Event]:
        frame_clock = pygame.time.Clock()
        next_update = self.clock() + self.update_interval

        while True:
            for raw in pygame.event.get():
                yield from self._translate(raw)
            if self.closed:
                logger.info("Window closed")
                return

            now = self.clock()
            while now >= next_update:
                yield UpdateEvent(self.update_interval)
                next_update += self.update_interval

            yield RenderEvent()
            frame_clock.tick(self.max_fps)


def dispatch(game, event: Event, renderer):
    if isinstance(event, RenderEvent):
        game.render(renderer)
    elif isinstance(event, UpdateEvent):
        game.update()
    elif isinstance(event, InputEvent):
        if event.pressed:
            game.pressed(event.key)


def run_loop(game, events: Iterable[Event], renderer) -> int:
    """
    Feed events to the game until the stream ends or the game is over.

    Returns the final score.
    """
    for event in events:
        dispatch(game, event, renderer)
        if game.game_over:
            break
    return game.score
