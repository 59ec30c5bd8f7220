"""Core domain layer: pure checkers rules with zero external dependencies.

Quick start::

    from checkie.core import Board, MoveGenerator, Side, Rules

    board = Board.initial()
    gen = MoveGenerator(board)
    for move in gen.legal_moves(Side.LIGHT):
        print(move)
"""

from checkie.core.board import Board
from checkie.core.enums import GameResult, Rank, Side
from checkie.core.executor import (
    MoveOutcome,
    execute_capture,
    execute_move,
    execute_simple_move,
    promote_if_needed,
)
from checkie.core.move import AnyMove, Capture, SimpleMove
from checkie.core.move_generator import MoveGenerator, get_capture_map, get_simple_moves
from checkie.core.notation import (
    EMPTY_LAYOUT,
    STARTING_LAYOUT,
    board_from_layout,
    board_to_layout,
)
from checkie.core.piece import Piece
from checkie.core.rules import Rules, check_game_state
from checkie.core.types import (
    BOARD_SIZE,
    Cell,
    cell_name,
    is_dark_cell,
    make_cell,
    parse_cell,
    x_of,
    y_of,
)

__all__ = [
    # Enums
    "GameResult",
    "Rank",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "Cell",
    "cell_name",
    "is_dark_cell",
    "make_cell",
    "parse_cell",
    "x_of",
    "y_of",
    # Domain objects
    "AnyMove",
    "Board",
    "Capture",
    "MoveGenerator",
    "MoveOutcome",
    "Piece",
    "Rules",
    "SimpleMove",
    # Functional API
    "check_game_state",
    "execute_capture",
    "execute_move",
    "execute_simple_move",
    "get_capture_map",
    "get_simple_moves",
    "promote_if_needed",
    # Notation
    "EMPTY_LAYOUT",
    "STARTING_LAYOUT",
    "board_from_layout",
    "board_to_layout",
]
