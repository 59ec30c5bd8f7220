"""Shared bot models and the strategy protocol."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.enums import Side
    from checkie.core.move import AnyMove


class Difficulty(IntEnum):
    """Bot tiers, ordered by strength."""

    LOW = 0
    MID = 1
    HIGH = 2

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(slots=True, frozen=True)
class BotSettings:
    """Pacing hints for a presentation layer driving a bot turn."""

    think_delay_ms: int = 500
    step_delay_ms: int = 500


@dataclass(slots=True, frozen=True)
class ScoredCandidate:
    """A candidate move together with its evaluation."""

    move: AnyMove
    score: float


class IStrategy(Protocol):
    """Ranks candidate moves for one side, best first."""

    def rank(
        self,
        board: Board,
        side: Side,
        candidates: Sequence[AnyMove],
    ) -> list[ScoredCandidate]: ...
