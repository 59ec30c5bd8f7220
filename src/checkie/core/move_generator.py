"""Simple-move and capture generation for single cells and whole sides."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.move import AnyMove, Capture, SimpleMove
from checkie.core.types import BOARD_SIZE, CELL_COUNT, Cell, make_cell

# (dx, dy): up-left, up-right, down-right, down-left.
DIAGONALS: tuple[tuple[int, int], ...] = ((-1, 1), (1, 1), (1, -1), (-1, -1))


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> tuple[tuple[tuple[Cell, ...], ...], ...]:
    """``[cell][direction]`` -> cells walked outward until the board edge."""
    rays_per_cell: list[tuple[tuple[Cell, ...], ...]] = []
    for cell in range(CELL_COUNT):
        x = cell & 7
        y = cell >> 3
        cell_rays: list[tuple[Cell, ...]] = []
        for dx, dy in DIAGONALS:
            ax = x + dx
            ay = y + dy
            ray: list[Cell] = []
            while 0 <= ax < BOARD_SIZE and 0 <= ay < BOARD_SIZE:
                ray.append(make_cell(ax, ay))
                ax += dx
                ay += dy
            cell_rays.append(tuple(ray))
        rays_per_cell.append(tuple(cell_rays))
    return tuple(rays_per_cell)


_RAYS = _build_rays()

# Indexes into DIAGONALS of the two forward directions per side.
_FORWARD_DIRS: tuple[tuple[int, int], tuple[int, int]] = ((0, 1), (3, 2))


class MoveGenerator:
    """Generates simple moves and captures for pieces on a :class:`Board`.

    The generator never mutates the board. Queries for an empty cell yield
    empty results.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Per cell -----------------------------------------------------------

    def simple_moves(self, cell: Cell) -> list[Cell]:
        """Destination cells of non-capturing moves for the piece on *cell*."""
        board = self._board
        piece = board[cell]
        if piece is None:
            return []

        result: list[Cell] = []
        cell_rays = _RAYS[cell]

        if piece.is_queen:
            for ray in cell_rays:
                for to_cell in ray:
                    if board[to_cell] is not None:
                        break
                    result.append(to_cell)
            return result

        for direction in _FORWARD_DIRS[int(piece.side)]:
            ray = cell_rays[direction]
            if ray and board[ray[0]] is None:
                result.append(ray[0])
        return result

    def capture_map(self, cell: Cell) -> dict[Cell, Capture]:
        """Captures for the piece on *cell*, keyed by landing cell."""
        board = self._board
        piece = board[cell]
        if piece is None:
            return {}

        result: dict[Cell, Capture] = {}
        side = piece.side

        if not piece.is_queen:
            # Men capture backward as well as forward.
            for ray in _RAYS[cell]:
                if len(ray) < 2:
                    continue
                jumped = board[ray[0]]
                if jumped is None or jumped.side == side:
                    continue
                if board[ray[1]] is None:
                    result[ray[1]] = Capture(cell, ray[0], ray[1])
            return result

        for ray in _RAYS[cell]:
            enemy_cell: Cell | None = None
            for scan_cell in ray:
                occupant = board[scan_cell]
                if occupant is not None:
                    if occupant.side == side or enemy_cell is not None:
                        break
                    enemy_cell = scan_cell
                    continue
                if enemy_cell is not None:
                    result[scan_cell] = Capture(cell, enemy_cell, scan_cell)
        return result

    def has_any_action(self, cell: Cell) -> bool:
        """Whether the piece on *cell* can capture or move at all."""
        return bool(self.capture_map(cell)) or bool(self.simple_moves(cell))

    # -- Per side -----------------------------------------------------------

    def capture_map_for_side(self, side: Side) -> dict[Cell, dict[Cell, Capture]]:
        """``origin -> landing -> capture`` for each *side* piece able to capture."""
        attack_map: dict[Cell, dict[Cell, Capture]] = {}
        for cell in self._board.pieces(side):
            captures = self.capture_map(cell)
            if captures:
                attack_map[cell] = captures
        return attack_map

    def captures_for_side(self, side: Side) -> list[Capture]:
        """All captures available to *side*, flattened."""
        captures: list[Capture] = []
        for cell in self._board.pieces(side):
            captures.extend(self.capture_map(cell).values())
        return captures

    def simple_moves_for_side(self, side: Side) -> list[SimpleMove]:
        """All non-capturing moves available to *side*."""
        moves: list[SimpleMove] = []
        for cell in self._board.pieces(side):
            for to_cell in self.simple_moves(cell):
                moves.append(SimpleMove(cell, to_cell))
        return moves

    def legal_moves(self, side: Side) -> list[AnyMove]:
        """Moves *side* may play now: captures when any exist, else simple moves."""
        captures = self.captures_for_side(side)
        if captures:
            return list(captures)
        return list(self.simple_moves_for_side(side))

    def side_has_any_action(self, side: Side) -> bool:
        """Whether any piece of *side* can capture or move.

        Captures are tried first on each piece since a single hit ends the
        search.
        """
        return any(self.has_any_action(cell) for cell in self._board.pieces(side))


# -- Functional API ---------------------------------------------------------


def get_simple_moves(board: Board, cell: Cell) -> list[Cell]:
    """Destination cells of simple moves for the piece on *cell*."""
    return MoveGenerator(board).simple_moves(cell)


def get_capture_map(board: Board, cell: Cell) -> dict[Cell, Capture]:
    """Captures for the piece on *cell*, keyed by landing cell."""
    return MoveGenerator(board).capture_map(cell)
