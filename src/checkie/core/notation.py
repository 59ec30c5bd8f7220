"""Text layout of a board, FEN-style placement field.

Rows are listed from row 7 down to row 0 and separated by ``/``. Digits
1-8 encode runs of empty cells; ``l``/``L`` are a light man/queen and
``d``/``D`` a dark man/queen.
"""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, make_cell

STARTING_LAYOUT = "1d1d1d1d/d1d1d1d1/1d1d1d1d/8/8/l1l1l1l1/1l1l1l1l/l1l1l1l1"
EMPTY_LAYOUT = "8/8/8/8/8/8/8/8"


def board_from_layout(layout: str) -> Board:
    """Parse a placement string into a :class:`Board`."""
    rows = layout.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid layout (must contain 8 rows): {layout!r}")

    board = Board()
    for row_idx, row_text in enumerate(rows):
        y = BOARD_SIZE - 1 - row_idx
        x = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid layout digit {ch!r}: {layout!r}")
                x += step
            else:
                if x >= BOARD_SIZE:
                    raise ValueError(f"Invalid layout row width: {layout!r}")
                board[make_cell(x, y)] = Piece.from_char(ch)
                x += 1
            if x > BOARD_SIZE:
                raise ValueError(f"Invalid layout row width: {layout!r}")
        if x != BOARD_SIZE:
            raise ValueError(f"Invalid layout row width: {layout!r}")
    return board


def board_to_layout(board: Board) -> str:
    """Serialise a :class:`Board` to a placement string."""
    rows: list[str] = []
    for y in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for x in range(BOARD_SIZE):
            piece = board[make_cell(x, y)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
