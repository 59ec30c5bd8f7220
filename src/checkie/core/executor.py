"""Turn executors: apply a chosen move or capture to the board."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.move import AnyMove, Capture, SimpleMove
from checkie.core.piece import Piece
from checkie.core.types import Cell, cell_name, y_of

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What happened on the board when a move was executed."""

    move: AnyMove
    promoted: bool = False
    captured_piece: Piece | None = None

    @property
    def captured_side(self) -> Side | None:
        """Side that lost a piece, for scorekeeping."""
        if self.captured_piece is None:
            return None
        return self.captured_piece.side


def promote_if_needed(board: Board, cell: Cell) -> bool:
    """Crown the man on *cell* if it stands on its promotion row.

    Returns True only when a promotion actually happened; queens and empty
    cells are left untouched.
    """
    piece = board[cell]
    if piece is None or piece.is_queen:
        return False
    if y_of(cell) != piece.side.promotion_row:
        return False
    board[cell] = piece.promoted()
    _LOGGER.debug("%s piece promoted to queen at %s", piece.side, cell_name(cell))
    return True


def execute_simple_move(board: Board, from_cell: Cell, to_cell: Cell) -> MoveOutcome:
    """Relocate a piece without capturing, then check promotion."""
    board.relocate(from_cell, to_cell)
    promoted = promote_if_needed(board, to_cell)
    return MoveOutcome(SimpleMove(from_cell, to_cell), promoted=promoted)


def execute_capture(
    board: Board,
    from_cell: Cell,
    captured: Cell,
    to_cell: Cell,
) -> MoveOutcome:
    """Jump over *captured*, removing its piece from the game for good."""
    mover = board[from_cell]
    victim = board[captured]
    if mover is None:
        raise ValueError(f"No piece on {cell_name(from_cell)}")
    if victim is None:
        raise ValueError(f"Nothing to capture on {cell_name(captured)}")
    if victim.side == mover.side:
        raise ValueError(f"Cannot capture own piece on {cell_name(captured)}")

    board.relocate(from_cell, to_cell)
    board[captured] = None
    promoted = promote_if_needed(board, to_cell)
    return MoveOutcome(
        Capture(from_cell, captured, to_cell),
        promoted=promoted,
        captured_piece=victim,
    )


def execute_move(board: Board, move: AnyMove) -> MoveOutcome:
    """Dispatch to :func:`execute_capture` or :func:`execute_simple_move`."""
    if isinstance(move, Capture):
        return execute_capture(board, move.from_cell, move.captured, move.to_cell)
    return execute_simple_move(board, move.from_cell, move.to_cell)
