from __future__ import annotations

import argparse
import logging
import random
import shutil
import sys
from typing import TextIO

from . import settings
from .engine.controller import GameController
from .engine.errors import EarlyExit
from .engine.systems.deployment import DEFAULT_LAYOUT, place, randomise
from .logging_listeners import register_listeners
from .models.enums import Colour
from .models.game import Game
from .terminal import TerminalView, parse_keys

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="stratego", description="Two-player Stratego in the terminal.")
    p.add_argument("--seed", type=int, default=settings.SEED, help="seed for random army placement")
    p.add_argument("--preset", action="store_true", help="use the fixed preset army for both sides")
    p.add_argument("--no-colour", dest="colour", action="store_false", help="mark moves without ANSI colour")
    p.add_argument(
        "--reveal-delay",
        type=float,
        default=settings.REVEAL_DELAY_MS / 1000,
        help="seconds an attacked piece stays revealed",
    )
    return p


def terminal_big_enough() -> bool:
    size = shutil.get_terminal_size((settings.MIN_COLUMNS, settings.MIN_ROWS))
    return size.columns >= settings.MIN_COLUMNS and size.lines >= settings.MIN_ROWS


def new_game(seed: int | None = None, preset: bool = False) -> Game:
    game = Game()
    if preset:
        place(game.board, Colour.BLUE, DEFAULT_LAYOUT)
        place(game.board, Colour.RED, DEFAULT_LAYOUT)
    else:
        rng = random.Random(seed)
        randomise(game.board, Colour.BLUE, rng)
        randomise(game.board, Colour.RED, rng)
    return game


def play(controller: GameController, stdin: TextIO) -> None:
    """Feed key lines to ``controller`` until input ends or the player quits."""
    controller.redraw(controller.game.player)
    for line in stdin:
        for cmd in parse_keys(line.rstrip("\n") or " "):
            controller.handle(cmd)


def main(argv: list[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    level = logging.getLevelName(settings.LOG_LEVEL)
    if not isinstance(level, int):
        print(f"Fatal error: unknown log level {settings.LOG_LEVEL!r}", file=sys.stderr)
        return 1
    logging.basicConfig(level=level, filename=settings.LOG_FILE)

    if not terminal_big_enough():
        print(
            f"Terminal must be at least {settings.MIN_COLUMNS}x{settings.MIN_ROWS}.",
            file=sys.stderr,
        )
        return 1

    register_listeners()
    game = new_game(args.seed, args.preset)
    view = TerminalView(game, stdout, colour=args.colour)
    controller = GameController(game, redraw=view.draw, reveal_delay=args.reveal_delay)
    try:
        play(controller, stdin)
    except EarlyExit:
        logger.info("player quit on turn %d", game.turn)
    except OSError as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1
    return 0
