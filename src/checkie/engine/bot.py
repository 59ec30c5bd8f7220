"""Bot turn driver shared by every tier."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.executor import MoveOutcome, execute_move
from checkie.core.move import AnyMove
from checkie.engine.candidates import (
    continuation_captures,
    enumerate_captures,
    enumerate_simple_moves,
)
from checkie.engine.heuristic import HIGH_WEIGHTS, MID_WEIGHTS, HeuristicStrategy
from checkie.engine.random_strategy import RandomStrategy
from checkie.engine.strategy import BotSettings, Difficulty, IStrategy, ScoredCandidate

_LOGGER = logging.getLogger(__name__)

_DEFAULT_SETTINGS: dict[Difficulty, BotSettings] = {
    Difficulty.LOW: BotSettings(think_delay_ms=500, step_delay_ms=500),
    Difficulty.MID: BotSettings(think_delay_ms=0, step_delay_ms=500),
    Difficulty.HIGH: BotSettings(think_delay_ms=300, step_delay_ms=500),
}


@dataclass(slots=True, frozen=True)
class TurnStep:
    """One executed move inside a bot turn."""

    move: AnyMove
    outcome: MoveOutcome
    score: float
    is_continuation: bool = False


@dataclass(slots=True)
class TurnReport:
    """Everything a bot did during one turn."""

    side: Side
    steps: list[TurnStep] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return not self.steps

    @property
    def captured_sides(self) -> list[Side]:
        """One entry per piece removed this turn (always the opponent)."""
        return [
            s.outcome.captured_side
            for s in self.steps
            if s.outcome.captured_side is not None
        ]

    @property
    def promoted(self) -> bool:
        return any(s.outcome.promoted for s in self.steps)


class Bot:
    """Picks and plays a whole turn for one side using an :class:`IStrategy`.

    Captures are mandatory: when any piece can capture, only captures are
    considered, and the jumping piece keeps capturing until it has no
    capture left. Otherwise one simple move is played. With no candidate at
    all the turn is a no-op.
    """

    __slots__ = ("_strategy", "_settings", "_name")

    def __init__(
        self,
        strategy: IStrategy,
        settings: BotSettings | None = None,
        name: str = "Bot",
    ) -> None:
        self._strategy = strategy
        self._settings = settings or BotSettings()
        self._name = name

    @property
    def strategy(self) -> IStrategy:
        return self._strategy

    @property
    def settings(self) -> BotSettings:
        return self._settings

    @property
    def name(self) -> str:
        return self._name

    def iter_turn(self, board: Board, side: Side) -> Iterator[TurnStep]:
        """Play the turn step by step, yielding after every executed move.

        The board is mutated before each yield; a driver may pause between
        steps but must not touch the board until the iterator is exhausted.
        """
        captures = enumerate_captures(board, side)
        if captures:
            step = self._play_best(board, side, captures, is_continuation=False)
            yield step
            cell = step.move.to_cell
            while True:
                follow_ups = continuation_captures(board, cell)
                if not follow_ups:
                    return
                step = self._play_best(board, side, follow_ups, is_continuation=True)
                yield step
                cell = step.move.to_cell

        moves = enumerate_simple_moves(board, side)
        if moves:
            yield self._play_best(board, side, moves, is_continuation=False)
            return

        _LOGGER.debug("%s (%s) has no move", self._name, side)

    def decide_and_play_turn(self, board: Board, side: Side) -> TurnReport:
        """Run :meth:`iter_turn` to completion and report what happened."""
        report = TurnReport(side)
        report.steps.extend(self.iter_turn(board, side))
        return report

    def _play_best(
        self,
        board: Board,
        side: Side,
        candidates: Sequence[AnyMove],
        *,
        is_continuation: bool,
    ) -> TurnStep:
        ranked = self._strategy.rank(board, side, candidates)
        assert ranked, "strategy returned no candidates"
        best: ScoredCandidate = ranked[0]
        outcome = execute_move(board, best.move)
        _LOGGER.debug(
            "%s (%s) plays %s score=%.1f", self._name, side, best.move, best.score
        )
        return TurnStep(best.move, outcome, best.score, is_continuation)


def create_strategy(
    difficulty: Difficulty,
    rng: random.Random | None = None,
) -> IStrategy:
    """Strategy for a tier; unknown tiers play at mid level."""
    if difficulty == Difficulty.LOW:
        return RandomStrategy(rng)
    if difficulty == Difficulty.HIGH:
        return HeuristicStrategy(HIGH_WEIGHTS, rng)
    return HeuristicStrategy(MID_WEIGHTS, rng)


def create_bot(
    difficulty: Difficulty,
    rng: random.Random | None = None,
    settings: BotSettings | None = None,
) -> Bot:
    """Bot for *difficulty* with that tier's default pacing."""
    tier = difficulty if difficulty in _DEFAULT_SETTINGS else Difficulty.MID
    return Bot(
        create_strategy(tier, rng),
        settings or _DEFAULT_SETTINGS[tier],
        name=f"{str(tier).capitalize()} bot",
    )
