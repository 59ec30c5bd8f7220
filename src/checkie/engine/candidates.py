"""Candidate enumeration shared by every bot tier."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.move import Capture, SimpleMove
from checkie.core.move_generator import MoveGenerator
from checkie.core.types import Cell


def enumerate_captures(board: Board, side: Side) -> list[Capture]:
    """Every capture of every piece of *side*, in board order."""
    return MoveGenerator(board).captures_for_side(side)


def enumerate_simple_moves(board: Board, side: Side) -> list[SimpleMove]:
    """Every simple move of every piece of *side*, in board order."""
    return MoveGenerator(board).simple_moves_for_side(side)


def continuation_captures(board: Board, cell: Cell) -> list[Capture]:
    """Captures still open to the piece that just jumped onto *cell*."""
    return list(MoveGenerator(board).capture_map(cell).values())
