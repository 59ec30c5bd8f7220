"""Mid and high tiers: one-ply weighted positional scoring.

Every candidate is scored on a copy of the board with the move already
applied, so vulnerability and threats are measured from the mover's new
cell. The look-ahead is a single ply: a threatening enemy is not checked
for being recaptured afterwards.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.executor import execute_move
from checkie.core.move import AnyMove, Capture
from checkie.core.move_generator import DIAGONALS
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, Cell, in_bounds, make_cell, x_of, y_of
from checkie.engine.strategy import IStrategy, ScoredCandidate

_CENTER_LOW = 2
_CENTER_HIGH = 5
_INNER_CENTER_LOW = 3
_INNER_CENTER_HIGH = 4


@dataclass(slots=True, frozen=True)
class ScoringWeights:
    """Weights of the positional evaluation. Zero disables a factor."""

    capture_base: float = 0.0
    advancement_per_row: float = 0.0
    center_bonus: float = 0.0
    inner_center_factor: float = 0.0
    edge_penalty: float = 0.0
    queen_bonus: float = 0.0
    vulnerability_penalty: float = 0.0
    queen_threat_factor: float = 1.5
    # Fraction of the raw score for captures; simple moves use
    # ``simple_jitter_span * jitter`` since their raw score may be near 0.
    jitter: float = 0.0
    simple_jitter_span: float = 10.0
    man_value: float = 0.0
    queen_value: float = 0.0
    promotion_capture_bonus: float = 0.0
    promotion_move_bonus: float = 0.0
    promotion_proximity: float = 0.0
    threat_bonus: float = 0.0
    threat_value_factor: float = 0.0
    safety_bonus: float = 0.0
    material_bonus: float = 0.0


MID_WEIGHTS = ScoringWeights(
    capture_base=100.0,
    advancement_per_row=10.0,
    center_bonus=5.0,
    edge_penalty=-5.0,
    queen_bonus=20.0,
    vulnerability_penalty=-30.0,
    jitter=0.10,
    simple_jitter_span=10.0,
)

HIGH_WEIGHTS = ScoringWeights(
    capture_base=200.0,
    advancement_per_row=12.0,
    center_bonus=8.0,
    inner_center_factor=0.5,
    edge_penalty=-8.0,
    queen_bonus=25.0,
    vulnerability_penalty=-50.0,
    jitter=0.05,
    simple_jitter_span=5.0,
    man_value=15.0,
    queen_value=45.0,
    promotion_capture_bonus=30.0,
    promotion_move_bonus=45.0,
    promotion_proximity=15.0,
    threat_bonus=30.0,
    threat_value_factor=0.3,
    safety_bonus=10.0,
    material_bonus=10.0,
)


# -- Board features -----------------------------------------------------------


def is_in_center(cell: Cell) -> bool:
    """Cell lies in the central 4x4 block."""
    x, y = x_of(cell), y_of(cell)
    return _CENTER_LOW <= x <= _CENTER_HIGH and _CENTER_LOW <= y <= _CENTER_HIGH


def is_in_inner_center(cell: Cell) -> bool:
    x, y = x_of(cell), y_of(cell)
    return (
        _INNER_CENTER_LOW <= x <= _INNER_CENTER_HIGH
        and _INNER_CENTER_LOW <= y <= _INNER_CENTER_HIGH
    )


def is_on_edge(cell: Cell) -> bool:
    """Cell lies on the outer ring."""
    x, y = x_of(cell), y_of(cell)
    return x in (0, BOARD_SIZE - 1) or y in (0, BOARD_SIZE - 1)


def advancement(cell: Cell, side: Side) -> int:
    """Rows between *cell* and *side*'s own back rank."""
    return abs(y_of(cell) - side.home_row)


def threat_against(board: Board, cell: Cell, side: Side) -> Piece | None:
    """First enemy that could come for the *side* piece on *cell*.

    Scans each diagonal for an enemy two cells away with the cell in
    between empty. An enemy man only counts when that diagonal is forward
    for it; an enemy queen counts from any diagonal.
    """
    x, y = x_of(cell), y_of(cell)
    for dx, dy in DIAGONALS:
        ox, oy = x + 2 * dx, y + 2 * dy
        if not in_bounds(ox, oy):
            continue
        enemy = board[make_cell(ox, oy)]
        if enemy is None or enemy.side == side:
            continue
        if board[make_cell(x + dx, y + dy)] is not None:
            continue
        if enemy.is_queen or enemy.side.forward == -dy:
            return enemy
    return None


class HeuristicStrategy(IStrategy):
    """Scores every candidate with :class:`ScoringWeights`, best first.

    Sorting is stable, so exact ties keep the order candidates were
    enumerated in.
    """

    __slots__ = ("_weights", "_rng")

    def __init__(
        self,
        weights: ScoringWeights = MID_WEIGHTS,
        rng: random.Random | None = None,
    ) -> None:
        self._weights = weights
        self._rng = rng or random.Random()

    @property
    def weights(self) -> ScoringWeights:
        return self._weights

    def rank(
        self,
        board: Board,
        side: Side,
        candidates: Sequence[AnyMove],
    ) -> list[ScoredCandidate]:
        scored = [
            ScoredCandidate(move, self.score(board, side, move)) for move in candidates
        ]
        scored.sort(key=lambda c: c.score, reverse=True)
        return scored

    # -- Scoring --------------------------------------------------------------

    def score(self, board: Board, side: Side, move: AnyMove) -> float:
        """Raw score plus jitter for *move* played by *side* on *board*."""
        raw = self.raw_score(board, side, move)
        w = self._weights
        if not w.jitter:
            return raw
        if isinstance(move, Capture):
            span = abs(raw) * w.jitter
        else:
            span = w.simple_jitter_span * w.jitter
        return raw + self._rng.uniform(-span, span)

    def raw_score(self, board: Board, side: Side, move: AnyMove) -> float:
        """Deterministic part of the evaluation."""
        w = self._weights
        mover = board[move.from_cell]
        if mover is None:
            raise ValueError(f"No piece on cell {move.from_cell}")

        after = board.copy()
        execute_move(after, move)
        to_cell = move.to_cell
        reaches_promotion = (
            not mover.is_queen and y_of(to_cell) == side.promotion_row
        )

        score = self._positional(to_cell, side, mover)
        score += self._vulnerability(after, to_cell, side)
        score += self._threats(after, to_cell, side)

        if isinstance(move, Capture):
            victim = board[move.captured]
            if victim is None:
                raise ValueError(f"Nothing to capture on cell {move.captured}")
            score += w.capture_base
            score += self._piece_value(victim)
            if reaches_promotion:
                score += w.promotion_capture_bonus
            score += self._material(after, side)
        else:
            if reaches_promotion:
                score += w.promotion_move_bonus
            elif not mover.is_queen and w.promotion_proximity:
                rows_left = abs(side.promotion_row - y_of(to_cell))
                score += w.promotion_proximity * (BOARD_SIZE - rows_left) / BOARD_SIZE

        score += self._safety(board, after, move, side)
        return score

    # -- Factors ----------------------------------------------------------------

    def _positional(self, cell: Cell, side: Side, mover: Piece) -> float:
        w = self._weights
        score = advancement(cell, side) * w.advancement_per_row
        if is_in_center(cell):
            score += w.center_bonus
            if is_in_inner_center(cell):
                score += w.center_bonus * w.inner_center_factor
        if is_on_edge(cell):
            score += w.edge_penalty
        if mover.is_queen:
            score += w.queen_bonus
        return score

    def _vulnerability(self, board: Board, cell: Cell, side: Side) -> float:
        w = self._weights
        enemy = threat_against(board, cell, side)
        if enemy is None:
            return 0.0
        if enemy.is_queen:
            return w.vulnerability_penalty * w.queen_threat_factor
        return w.vulnerability_penalty

    def _threats(self, board: Board, cell: Cell, side: Side) -> float:
        """Bonus per enemy the piece on *cell* could jump next turn."""
        w = self._weights
        if not w.threat_bonus:
            return 0.0
        x, y = x_of(cell), y_of(cell)
        total = 0.0
        for dx, dy in DIAGONALS:
            lx, ly = x + 2 * dx, y + 2 * dy
            if not in_bounds(lx, ly):
                continue
            target = board[make_cell(x + dx, y + dy)]
            if target is None or target.side == side:
                continue
            if board[make_cell(lx, ly)] is None:
                value = self._piece_value(target)
                total += w.threat_bonus + value * w.threat_value_factor
        return total

    def _safety(self, before: Board, after: Board, move: AnyMove, side: Side) -> float:
        w = self._weights
        if not w.safety_bonus:
            return 0.0
        was_threatened = threat_against(before, move.from_cell, side) is not None
        is_threatened = threat_against(after, move.to_cell, side) is not None
        if was_threatened and not is_threatened:
            return w.safety_bonus
        return 0.0

    def _material(self, board: Board, side: Side) -> float:
        """Bonus when *side* is ahead on material after the move."""
        w = self._weights
        if not w.material_bonus:
            return 0.0
        advantage = self._material_of(board, side) - self._material_of(
            board, side.opposite
        )
        return w.material_bonus if advantage > 0 else 0.0

    def _material_of(self, board: Board, side: Side) -> float:
        w = self._weights
        queens = board.queen_count(side)
        men = board.count(side) - queens
        return men * w.man_value + queens * w.queen_value

    def _piece_value(self, piece: Piece) -> float:
        w = self._weights
        return w.queen_value if piece.is_queen else w.man_value
