"""Low tier: uniform random choice with no positional evaluation."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TYPE_CHECKING

from checkie.engine.strategy import IStrategy, ScoredCandidate

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Side
    from checkie.core.move import AnyMove


class RandomStrategy(IStrategy):
    """Shuffles the candidates; every candidate scores zero."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def rank(
        self,
        board: Board,
        side: Side,
        candidates: Sequence[AnyMove],
    ) -> list[ScoredCandidate]:
        del board, side
        shuffled = list(candidates)
        self._rng.shuffle(shuffled)
        return [ScoredCandidate(move, 0.0) for move in shuffled]
