from __future__ import annotations

import argparse
import logging
import random
import sys

from . import config
from .engine import ConfigError, Game
from .linalg import Board

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Play snake in the terminal (or a pygame window).",
    )
    parser.add_argument(
        "--frontend",
        choices=("term", "window"),
        default="term",
        help="Where to draw the game (term=this terminal, window=pygame).",
    )
    parser.add_argument("--width", type=int, default=config.BOARD_WIDTH, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=config.BOARD_HEIGHT, help="Board height in cells.")
    parser.add_argument("--length", type=int, default=config.INITIAL_LENGTH, help="Initial snake length.")
    parser.add_argument(
        "--bounded",
        dest="periodic",
        action="store_false",
        default=config.PERIODIC_WORLD,
        help="Walls kill the snake instead of wrapping around.",
    )
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS, help="Milliseconds per tick.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible game.")
    parser.add_argument("--log-file", default=None, help="Write logs here instead of stderr.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every food placement.")
    return parser


def setup_logging(log_file: str | None, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=fmt)
    else:
        # The board owns the screen; keep stderr quiet.
        logging.basicConfig(level=logging.WARNING, format=fmt)


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    setup_logging(ns.log_file, ns.verbose)

    if ns.tick_ms < 0:
        print(f"error: tick must not be negative, got {ns.tick_ms}", file=sys.stderr)
        return 2

    try:
        game = Game(
            Board(ns.width, ns.height),
            ns.length,
            periodic_world=ns.periodic,
            rng=random.Random(ns.seed),
        )
        if ns.frontend == "window":
            from .window import play
        else:
            from .term import play

        result = play(game, ns.tick_ms / 1000.0)
    except ConfigError as e:
        logger.info("invalid configuration: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.info("interrupted")
        return 0

    logger.info("finished: %s, length %d", result.reason.value, len(game.snake))
    return 0
