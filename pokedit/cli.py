"""
pokedit command line.

Loads a Gen 3 save file and prints the trainer summary.

Usage:
    pokedit FILE
    python -m pokedit.cli FILE

Set POKEDIT_LOG=DEBUG to see how the save was resolved.
"""

import argparse
import logging
import os
import sys

from .exceptions import NotAvailableInVersionError, PokeditError
from .gen3 import Game

DESCRIPTION = "A pokemon save file editor"
LOG_LEVEL_ENV = "POKEDIT_LOG"

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # Argument errors exit with 1, not argparse's default of 2
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _setup_logging():
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="pokedit", description=DESCRIPTION)
    parser.add_argument("file", help="Save file to edit.")
    return parser


def print_summary(game: Game, out=None):
    out = out or sys.stdout
    trainer = game.trainer()
    trainer_id = trainer.trainer_id
    try:
        security_key = f"0x{trainer.security_key():08X}"
    except NotAvailableInVersionError:
        security_key = "n/a"

    print(f"Game: {game.version}", file=out)
    print(f"Gender: {trainer.gender()}", file=out)
    print(f"Public TrainerId: {trainer_id.public}", file=out)
    print(f"Private TrainerId: {trainer_id.private}", file=out)
    print(f"Time played: {trainer.time_played}", file=out)
    print(f"Security code: {security_key}", file=out)
    print(f"Money: {game.team_items().money()}", file=out)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging()

    try:
        game = Game.from_file(args.file)
        print_summary(game)
    except PokeditError as e:
        logger.debug("Failed to load save", exc_info=True)
        print(f"pokedit: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
