"""GameController, the single turn owner of a checkers game.

Coordinates: Players, GameState, MoveGenerator.
Emits events via simple callbacks so a view / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import GameResult, Side
from checkie.core.executor import MoveOutcome
from checkie.core.move import AnyMove, Capture, SimpleMove
from checkie.core.move_generator import MoveGenerator
from checkie.core.rules import Rules
from checkie.core.types import Cell, cell_name
from checkie.engine.bot import TurnReport
from checkie.game.interfaces import GamePhase, IGameController, IPlayer
from checkie.game.player import BotPlayer
from checkie.game.state import GameState, Score, TurnRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome, "GameState"], None]
CaptureCallback = Callable[[Side, Score], None]  # side that lost a piece
TurnEndCallback = Callable[[TurnRecord], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_turn_end: list[TurnEndCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates selections, runs bot turns,
    passes the turn and notifies listeners.

    Only the side to move may change the board, and only through this
    controller. Human input arrives as explicit cell selections checked
    against the current legal set; a bot turn is played whole, including
    its multi-jump, either by :meth:`play_bot_turn` or by an external
    driver that reports back through :meth:`complete_bot_turn`.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Side, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    @property
    def awaiting_selection(self) -> bool:
        """A human turn is open and waiting for cell selections."""
        return self._state.phase == GamePhase.AWAITING_SELECTION

    def player(self, side: Side) -> IPlayer | None:
        return self._players.get(side)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        light: IPlayer,
        dark: IPlayer,
        board: Board | None = None,
        first: Side = Side.LIGHT,
    ) -> None:
        self._players = {Side.LIGHT: light, Side.DARK: dark}
        self._state = GameState()
        self._state.setup(board, first)

        result = Rules.game_result(self._state.board)
        if result != GameResult.IN_PROGRESS:
            self._state.result = result
            self._state.phase = GamePhase.GAME_OVER
            self._emit_game_over(result)
            return

        self._prompt_current_player()

    def select_piece(self, cell: Cell) -> bool:
        if not self.awaiting_selection:
            return False

        state = self._state
        if state.jumping_cell is not None:
            # Mid multi-jump only the jumping piece may be picked.
            return cell == state.jumping_cell

        piece = state.board[cell]
        if piece is None or piece.side != state.side_to_move:
            return False

        gen = MoveGenerator(state.board)
        attack_map = gen.capture_map_for_side(state.side_to_move)
        if attack_map:
            if cell not in attack_map:
                _LOGGER.debug(
                    "Capture is mandatory; %s cannot capture", cell_name(cell)
                )
                return False
        elif not gen.simple_moves(cell):
            return False

        state.selected_cell = cell
        return True

    def submit_selection(self, cell: Cell) -> bool:
        if not self.awaiting_selection:
            return False

        state = self._state
        selected = state.selected_cell
        if selected is None:
            return False

        gen = MoveGenerator(state.board)
        attack_map = gen.capture_map_for_side(state.side_to_move)
        if attack_map:
            capture = attack_map.get(selected, {}).get(cell)
            if capture is None:
                _LOGGER.debug(
                    "Rejected capture %s -> %s", cell_name(selected), cell_name(cell)
                )
                return False
            self._apply(capture)
            if gen.capture_map(capture.to_cell):
                state.jumping_cell = capture.to_cell
                state.selected_cell = capture.to_cell
                return True
            self._finish_turn()
            return True

        if cell not in gen.simple_moves(selected):
            _LOGGER.debug(
                "Rejected move %s -> %s", cell_name(selected), cell_name(cell)
            )
            return False
        self._apply(SimpleMove(selected, cell))
        self._finish_turn()
        return True

    def play_bot_turn(self) -> TurnReport | None:
        if self._state.phase != GamePhase.THINKING:
            return None
        cp = self.current_player
        if not isinstance(cp, BotPlayer):
            return None
        report = cp.play_turn(self._state.board)
        self.complete_bot_turn(report)
        return report

    def complete_bot_turn(self, report: TurnReport) -> bool:
        """Record a bot turn already played on the session board."""
        if self._state.phase != GamePhase.THINKING:
            return False
        if report.side != self._state.side_to_move:
            return False
        for step in report.steps:
            self._record(step.outcome)
        self._finish_turn()
        return True

    def resign(self, side: Side) -> None:
        if self._state.is_game_over:
            return
        self._state.resign(side)
        self._emit_game_over(self._state.result)

    # ── Queries for the input layer ──────────────────────────────────────

    def attack_map(self) -> dict[Cell, dict[Cell, Capture]]:
        """Captures open to the side to move (``origin -> landing -> capture``)."""
        if not self.awaiting_selection:
            return {}
        state = self._state
        gen = MoveGenerator(state.board)
        if state.jumping_cell is not None:
            return {state.jumping_cell: gen.capture_map(state.jumping_cell)}
        return gen.capture_map_for_side(state.side_to_move)

    def legal_targets(self) -> list[Cell]:
        """Destinations open to the selected piece."""
        selected = self._state.selected_cell
        if not self.awaiting_selection or selected is None:
            return []
        attack_map = self.attack_map()
        if attack_map:
            return list(attack_map.get(selected, {}))
        return MoveGenerator(self._state.board).simple_moves(selected)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, move: AnyMove) -> None:
        outcome = self._state.apply_move(move)
        self._notify(outcome)

    def _record(self, outcome: MoveOutcome) -> None:
        self._state.record_outcome(outcome)
        self._notify(outcome)

    def _notify(self, outcome: MoveOutcome) -> None:
        for cb in self.events.on_move:
            cb(outcome, self._state)
        captured_side = outcome.captured_side
        if captured_side is not None:
            for cb in self.events.on_capture:
                cb(captured_side, self._state.score)

    def _finish_turn(self) -> None:
        record = self._state.end_turn()
        for cb in self.events.on_turn_end:
            cb(record)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Hand the turn to the side to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_SELECTION
            self._emit_phase(GamePhase.AWAITING_SELECTION)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_turn(self._state.board)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
