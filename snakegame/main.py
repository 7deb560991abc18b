"""
Snake command-line entry point.

Usage:
    # Play in a window (arrow keys or WASD, Escape to quit)
    python snakegame/main.py play

    # Record an automatically played game
    python snakegame/main.py record --ticks 600 --output replays/demo.gif --seed 7
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from config import ConfigError, GameConfig, load_config

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


def configure_logging() -> None:
    """Set up logging from SNAKE_LOG_LEVEL; call after the .env file is loaded."""
    level = os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    valid = isinstance(logging.getLevelName(level), int)
    logging.basicConfig(
        level=level if valid else DEFAULT_LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    if not valid:
        logger.warning("Unknown SNAKE_LOG_LEVEL=%r; using %s", level, DEFAULT_LOG_LEVEL)


def play(config: GameConfig, window_width: Optional[int], window_height: Optional[int]) -> None:
    # Imported here so `record` works without a display or pygame window
    from adapters.pygame_host import PygameHost
    from adapters.scheduling import RealtimeScheduler
    from engine import GameEngine

    logical_width, logical_height = config.logical_size
    # Default to a 50% scale of the logical board
    width = window_width or logical_width // 2
    height = window_height or logical_height // 2

    # A window session keeps playing round after round
    config = config.with_overrides(resume_after_loss=True)
    host = PygameHost(width, height, keybindings=config.keybindings)
    scheduler = RealtimeScheduler()
    engine = GameEngine(host, host, scheduler, config=config)
    engine.initialize()
    engine.start()
    try:
        host.run(scheduler)
    finally:
        engine.close()


def record(config: GameConfig, ticks: int, output: str, seed: Optional[int]) -> str:
    from services.recorder import ReplayRecorder

    recorder = ReplayRecorder(config=config, seed=seed)
    return recorder.record_to(output, ticks)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Snake on a fixed grid.")
    parser.add_argument("--width", type=int, default=None,
                        help="Board width in tiles")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height in tiles")
    parser.add_argument("--period", type=int, default=None,
                        help="Tick period in milliseconds")

    subparsers = parser.add_subparsers(dest="command", required=True)

    play_parser = subparsers.add_parser("play", help="Play in a pygame window")
    play_parser.add_argument("--window-width", type=int, default=None,
                             help="Window width in pixels")
    play_parser.add_argument("--window-height", type=int, default=None,
                             help="Window height in pixels")

    record_parser = subparsers.add_parser("record", help="Record an autoplayed game")
    record_parser.add_argument("--ticks", type=int, default=300,
                               help="Number of tick periods to record")
    record_parser.add_argument("--output", type=str, default="replays/snake.gif",
                               help="Output file (.gif or .mp4)")
    record_parser.add_argument("--seed", type=int, default=None,
                               help="Random seed for food placement and the autoplayer")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()

    try:
        config = load_config(dotenv=False).with_overrides(
            width=args.width,
            height=args.height,
            tick_period_ms=args.period,
        )
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.command == "play":
        play(config, args.window_width, args.window_height)
    elif args.command == "record":
        path = record(config, args.ticks, args.output, args.seed)
        print(f"Replay saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
