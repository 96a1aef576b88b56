"""
Bug Crossing: get across the stone rows to the water without being hit.

Controls:
- Arrow keys: move (or pick a character on the pause screen)
- 1 / 2 / 3 on the pause screen: toggle coloured tile / collectibles /
  alternate directions mode
- Esc: pause / resume
- Click the (i) icon: rules

Run:
    python -m bug_crossing
"""

import argparse
import logging
import random

from .config import ENEMY_COUNT, FPS
from .state import GameState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bug-crossing", description="Frogger-style bug crossing game")
    parser.add_argument("--coloured-tiles", action="store_true", help="Start with coloured tile mode on.")
    parser.add_argument("--collectibles", action="store_true", help="Start with collectibles mode on.")
    parser.add_argument(
        "--alternate-directions",
        action="store_true",
        help="Start with the second row of bugs running right to left.",
    )
    parser.add_argument("--enemies", type=int, default=ENEMY_COUNT, help="Number of bugs on the board.")
    parser.add_argument("--seed", type=int, default=None, help="Seed the random source for a repeatable board.")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser


def build_state(args: argparse.Namespace) -> GameState:
    return GameState(
        rng=random.Random(args.seed),
        enemy_count=args.enemies,
        coloured_tile_on=args.coloured_tiles,
        collectibles_on=args.collectibles,
        alternate_directions_on=args.alternate_directions,
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.enemies < 0:
        parser.error("--enemies must be zero or more")
    if args.fps <= 0:
        parser.error("--fps must be positive")

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    # Imported late so the simulation can be driven without a display.
    from .game import Game

    Game(build_state(args), fps=args.fps).run()


if __name__ == "__main__":
    main()
