import argparse
import dataclasses
import logging
import random
import sys
from typing import Optional

from dotenv import load_dotenv

from config import GameConfig
from domain.game import Game
from players import Player, RandomPlayer
from services.event_loop import PygameEventSource, run_loop
from services.renderer import ImageRenderer, PygameRenderer, WindowError

logger = logging.getLogger(__name__)

SCORE_MESSAGE = "Congratulations, your score was: {}"
DEFAULT_AUTOPLAY_TICKS = 200


def create_game(config: GameConfig) -> Game:
    rng = random.Random(config.seed) if config.seed is not None else random.Random()
    return Game(
        board_size=config.board_size,
        cell_size=config.cell_size,
        rng=rng,
        end_on_self_collision=config.end_on_self_collision
    )


def run_game(config: GameConfig) -> int:
    """
    Open the window and play until it is closed.

    Returns the final score. Raises WindowError if the window cannot be
    created; nothing has been simulated at that point.
    """
    renderer = PygameRenderer(config.board_size, config.cell_size)
    game = create_game(config)
    logger.info(
        f"Starting game on a {game.board_cells}x{game.board_cells} board "
        f"at {config.updates_per_second} updates per second"
    )
    try:
        events = PygameEventSource(config.updates_per_second, max_fps=config.max_fps)
        return run_loop(game, events, renderer)
    finally:
        renderer.close()


def run_autoplay(
    config: GameConfig,
    ticks: int,
    player: Optional[Player] = None,
    snapshot_path: Optional[str] = None
) -> int:
    """
    Play headless with an automated player for a fixed number of ticks.

    Returns the final score. The last frame is written to ``snapshot_path``
    when given.
    """
    game = create_game(config)
    if player is None:
        player = RandomPlayer(random.Random(config.seed) if config.seed is not None else None)

    logger.info(f"Autoplay for {ticks} ticks with {player.__class__.__name__}")
    for _ in range(ticks):
        if game.game_over:
            break
        game.steer(player.get_move(game.snapshot()))
        game.update()

    if snapshot_path:
        renderer = ImageRenderer(config.board_size, config.cell_size)
        game.render(renderer)
        renderer.save(snapshot_path)

    return game.score


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play Snake: W/A/S/D to steer, close the window to finish."
    )
    parser.add_argument("--board-size", type=int, default=None,
                        help="Window width and height in pixels (env SNAKE_BOARD_SIZE)")
    parser.add_argument("--cell-size", type=int, default=None,
                        help="Pixels per grid cell (env SNAKE_CELL_SIZE)")
    parser.add_argument("--ups", type=int, default=None, dest="updates_per_second",
                        help="Simulation ticks per second (env SNAKE_UPS)")
    parser.add_argument("--max-fps", type=int, default=None,
                        help="Render frame cap (env SNAKE_MAX_FPS)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement (env SNAKE_SEED)")
    parser.add_argument("--end-on-self-collision", action="store_true", default=None,
                        help="End the game when the snake runs into itself "
                             "(env SNAKE_END_ON_SELF_COLLISION)")
    parser.add_argument("--autoplay", action="store_true",
                        help="Run headless with a random player instead of opening a window")
    parser.add_argument("--ticks", type=int, default=DEFAULT_AUTOPLAY_TICKS,
                        help="Number of ticks to simulate with --autoplay")
    parser.add_argument("--snapshot", type=str, default=None,
                        help="With --autoplay, save the final frame to this image file")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    return parser


def resolve_config(args: argparse.Namespace) -> GameConfig:
    """Environment values first, then any flags given on the command line."""
    overrides = {
        field.name: getattr(args, field.name)
        for field in dataclasses.fields(GameConfig)
        if getattr(args, field.name, None) is not None
    }
    return GameConfig.from_env(**overrides)


def main(argv=None) -> int:
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = resolve_config(args)
    except ValueError as e:
        parser.error(str(e))

    if args.autoplay:
        score = run_autoplay(config, args.ticks, snapshot_path=args.snapshot)
    else:
        try:
            score = run_game(config)
        except WindowError as e:
            logger.error(f"Could not start the game: {e}")
            return 1

    print(SCORE_MESSAGE.format(score))
    return 0


if __name__ == "__main__":
    sys.exit(main())
