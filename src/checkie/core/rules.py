"""High-level checkers rules: terminal-state detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from checkie.core.enums import GameResult, Side
from checkie.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from checkie.core.board import Board

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - A side with no pieces, or with no capture and no simple move, loses.
    # - No automatic draw rule; GameResult.DRAW is never produced here.

    @staticmethod
    def piece_counts(board: Board) -> tuple[int, int]:
        """``(light, dark)`` live piece counts."""
        return board.count(Side.LIGHT), board.count(Side.DARK)

    @staticmethod
    def is_blocked(board: Board, side: Side) -> bool:
        """*side* still has pieces but none of them can act."""
        if not board.has_pieces(side):
            return False
        return not MoveGenerator(board).side_has_any_action(side)

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result from the whole board.

        Always recomputed from scratch, independent of whose turn it is.
        """
        light_count, dark_count = Rules.piece_counts(board)
        _LOGGER.debug("Piece counts: light=%d dark=%d", light_count, dark_count)

        if light_count == 0:
            return GameResult.DARK_WINS
        if dark_count == 0:
            return GameResult.LIGHT_WINS

        gen = MoveGenerator(board)
        if not gen.side_has_any_action(Side.LIGHT):
            return GameResult.DARK_WINS
        if not gen.side_has_any_action(Side.DARK):
            return GameResult.LIGHT_WINS

        return GameResult.IN_PROGRESS


def check_game_state(board: Board) -> GameResult:
    """Functional alias of :meth:`Rules.game_result`."""
    return Rules.game_result(board)
