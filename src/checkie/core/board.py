"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from checkie.core.enums import Rank, Side
from checkie.core.piece import Piece
from checkie.core.types import BOARD_SIZE, CELL_COUNT, Cell, is_dark_cell, make_cell

_SIDE_COUNT = 2
_STARTING_ROWS = 3


class Board:
    """Mutable 64-cell arena with incremental per-side occupancy indexes.

    The board is the single owner of every live piece: a piece is referenced
    by exactly one cell, and :meth:`relocate` transfers it in one step.
    """

    __slots__ = ("_cells", "_side_bitboards", "_queen_bitboards")

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * CELL_COUNT
        # [side] -> bitboard of all occupied cells for that side.
        self._side_bitboards: list[int] = [0] * _SIDE_COUNT
        # [side] -> bitboard of cells holding that side's queens.
        self._queen_bitboards: list[int] = [0] * _SIDE_COUNT

    @staticmethod
    def _cells_from_bitboard(bitboard: int) -> list[Cell]:
        cells: list[Cell] = []
        while bitboard:
            lsb = bitboard & -bitboard
            cells.append(lsb.bit_length() - 1)
            bitboard ^= lsb
        return cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Piece | None:
        return self._cells[cell]

    def __setitem__(self, cell: Cell, piece: Piece | None) -> None:
        old_piece = self._cells[cell]
        if old_piece == piece:
            return

        mask = 1 << cell

        if old_piece is not None:
            old_idx = int(old_piece.side)
            self._side_bitboards[old_idx] &= ~mask
            self._queen_bitboards[old_idx] &= ~mask

        self._cells[cell] = piece

        if piece is None:
            return

        side_idx = int(piece.side)
        self._side_bitboards[side_idx] |= mask
        if piece.rank == Rank.QUEEN:
            self._queen_bitboards[side_idx] |= mask

    def is_empty(self, cell: Cell) -> bool:
        return self._cells[cell] is None

    def relocate(self, from_cell: Cell, to_cell: Cell) -> Piece:
        """Move the occupant of *from_cell* to *to_cell* and return it."""
        piece = self._cells[from_cell]
        if piece is None:
            raise ValueError(f"No piece on cell {from_cell}")
        if self._cells[to_cell] is not None:
            raise ValueError(f"Cell {to_cell} is already occupied")
        self[from_cell] = None
        self[to_cell] = piece
        return piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side) -> list[Cell]:
        """All cells occupied by *side*, in ascending cell order."""
        return self._cells_from_bitboard(self._side_bitboards[int(side)])

    def queens(self, side: Side) -> list[Cell]:
        """Cells occupied by *side*'s queens."""
        return self._cells_from_bitboard(self._queen_bitboards[int(side)])

    def occupied_cells(self) -> list[Cell]:
        """Every occupied cell, regardless of side."""
        return self._cells_from_bitboard(
            self._side_bitboards[0] | self._side_bitboards[1]
        )

    def count(self, side: Side) -> int:
        """Number of live pieces of *side*."""
        return self._side_bitboards[int(side)].bit_count()

    def queen_count(self, side: Side) -> int:
        return self._queen_bitboards[int(side)].bit_count()

    def has_pieces(self, side: Side) -> bool:
        return bool(self._side_bitboards[int(side)])

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        b._side_bitboards = self._side_bitboards.copy()
        b._queen_bitboards = self._queen_bitboards.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * CELL_COUNT
        self._side_bitboards = [0] * _SIDE_COUNT
        self._queen_bitboards = [0] * _SIDE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout: 12 men per side on the dark cells."""
        b = cls()
        for y in range(_STARTING_ROWS):
            for x in range(BOARD_SIZE):
                light_cell = make_cell(x, y)
                if is_dark_cell(light_cell):
                    b[light_cell] = Piece(Side.LIGHT)
                dark_cell = make_cell(x, BOARD_SIZE - 1 - y)
                if is_dark_cell(dark_cell):
                    b[dark_cell] = Piece(Side.DARK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for x in range(BOARD_SIZE):
                p = self[make_cell(x, y)]
                row.append(str(p) if p else ".")
            rows.append(f"{y + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
