"""Game state machine tracking phase, turn history and score."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import GameResult, Side
from checkie.core.executor import MoveOutcome, execute_move
from checkie.core.move import AnyMove
from checkie.core.rules import Rules
from checkie.core.types import Cell
from checkie.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class TurnRecord:
    """All moves one side made during a single turn."""

    side: Side
    outcomes: list[MoveOutcome] = field(default_factory=list)

    @property
    def moves(self) -> list[AnyMove]:
        return [o.move for o in self.outcomes]

    @property
    def capture_count(self) -> int:
        return sum(1 for o in self.outcomes if o.captured_piece is not None)

    def __str__(self) -> str:
        return " ".join(str(m) for m in self.moves)


@dataclass
class Score:
    """Pieces captured by each side so far."""

    light: int = 0
    dark: int = 0

    def record_loss(self, captured_side: Side) -> None:
        """Credit the opponent of *captured_side* with one capture."""
        if captured_side == Side.DARK:
            self.light += 1
        else:
            self.dark += 1

    def of(self, side: Side) -> int:
        return self.light if side == Side.LIGHT else self.dark


@dataclass
class GameState:
    """Manages game lifecycle: phase, result, turn history and score.

    This is a pure data/logic class with no threading and no UI. The board held
    here is the only board of the session.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Side = field(default=Side.LIGHT, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    history: list[TurnRecord] = field(default_factory=list, init=False)
    score: Score = field(default_factory=Score, init=False)
    selected_cell: Cell | None = field(default=None, init=False)
    # Set while a human multi-jump is in progress: only this piece may move.
    jumping_cell: Cell | None = field(default=None, init=False)
    _current_turn: TurnRecord | None = field(default=None, init=False, repr=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, first: Side = Side.LIGHT) -> None:
        """Initialise (or reset) the game."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = first
        self.phase = GamePhase.AWAITING_SELECTION
        self.result = GameResult.IN_PROGRESS
        self.history.clear()
        self.score = Score()
        self.selected_cell = None
        self.jumping_cell = None
        self._current_turn = None

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: AnyMove) -> MoveOutcome:
        """Execute a validated move for the side to move.

        Caller is responsible for legality check.
        """
        outcome = execute_move(self.board, move)
        self.record_outcome(outcome)
        return outcome

    def record_outcome(self, outcome: MoveOutcome) -> None:
        """Add an already-executed move to the current turn."""
        if self._current_turn is None:
            self._current_turn = TurnRecord(self.side_to_move)
        self._current_turn.outcomes.append(outcome)
        if outcome.captured_side is not None:
            self.score.record_loss(outcome.captured_side)

    def end_turn(self) -> TurnRecord:
        """Close the current turn, recompute the result and pass the move."""
        record = self._current_turn or TurnRecord(self.side_to_move)
        self.history.append(record)
        self._current_turn = None
        self.selected_cell = None
        self.jumping_cell = None

        self.result = Rules.game_result(self.board)
        if self.result != GameResult.IN_PROGRESS:
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info("Game over: %s", self.result.name)
        else:
            self.side_to_move = self.side_to_move.opposite
        return record

    # ── Resignation ──────────────────────────────────────────────────────

    def resign(self, side: Side) -> None:
        self.result = GameResult.win_for(side.opposite)
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def turn_count(self) -> int:
        """Number of completed turns."""
        return len(self.history)

    @property
    def turn_in_progress(self) -> bool:
        """A move has been made this turn but the turn is not over yet."""
        return self._current_turn is not None
