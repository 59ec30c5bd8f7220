"""Application entry point: a headless bot-vs-bot match on the console."""

from __future__ import annotations

import argparse
import logging
import random
import sys

from checkie.core.enums import GameResult, Side
from checkie.engine.strategy import Difficulty
from checkie.game.controller import GameController
from checkie.game.player import BotPlayer

_LOGGER = logging.getLogger(__name__)

_DIFFICULTIES = {str(d): d for d in Difficulty}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="checkie",
        description="Play a checkers match between two bots.",
    )
    parser.add_argument("--light", choices=sorted(_DIFFICULTIES), default="mid")
    parser.add_argument("--dark", choices=sorted(_DIFFICULTIES), default="high")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=200,
        help="stop after this many turns without a result",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def run_match(
    light: Difficulty,
    dark: Difficulty,
    seed: int | None = None,
    max_turns: int = 200,
) -> GameController:
    """Play bots against each other until the game ends or *max_turns*."""
    rng = random.Random(seed)
    ctrl = GameController()
    ctrl.new_game(
        BotPlayer(Side.LIGHT, light, rng=rng),
        BotPlayer(Side.DARK, dark, rng=rng),
    )
    while not ctrl.state.is_game_over and ctrl.state.turn_count < max_turns:
        report = ctrl.play_bot_turn()
        if report is None:
            break
        _LOGGER.info(
            "Turn %d (%s): %s",
            ctrl.state.turn_count,
            report.side,
            ctrl.state.history[-1],
        )
    return ctrl


def main(argv: list[str] | None = None) -> int:
    """Run a match and print the final board."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctrl = run_match(
        _DIFFICULTIES[args.light],
        _DIFFICULTIES[args.dark],
        seed=args.seed,
        max_turns=args.max_turns,
    )
    state = ctrl.state
    print(repr(state.board))
    print(
        f"Result: {state.result.name} after {state.turn_count} turns "
        f"(captures light={state.score.light} dark={state.score.dark})"
    )
    return 0 if state.result != GameResult.IN_PROGRESS else 1


if __name__ == "__main__":
    sys.exit(main())
