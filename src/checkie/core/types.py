"""Cell type alias and coordinate helpers.

Board layout (row-major, ``x`` is the column, ``y`` the row):
    (0,0)=0, (1,0)=1, ..., (7,0)=7
    (0,1)=8, ...
    ...
    (0,7)=56, ..., (7,7)=63

Light men start on rows 0-2 and move toward row 7; Dark men start on
rows 5-7 and move toward row 0.
"""

from __future__ import annotations

from typing import TypeAlias

BOARD_SIZE = 8
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

Cell: TypeAlias = int  # 0–63


def x_of(cell: Cell) -> int:
    """Column index 0–7."""
    return cell & 7


def y_of(cell: Cell) -> int:
    """Row index 0–7."""
    return cell >> 3


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def make_cell(x: int, y: int) -> Cell:
    """Create a cell from column *x* and row *y*."""
    if not in_bounds(x, y):
        raise ValueError(f"Coordinates out of bounds: ({x}, {y})")
    return y * BOARD_SIZE + x


def is_dark_cell(cell: Cell) -> bool:
    """Playable cells of the starting layout: ``(x + y)`` even."""
    return (x_of(cell) + y_of(cell)) % 2 == 0


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. ``make_cell(2, 2)`` → 'c3'."""
    return chr(ord("a") + x_of(cell)) + str(y_of(cell) + 1)


def parse_cell(name: str) -> Cell:
    """Parse cell name, e.g. 'c3' → ``make_cell(2, 2)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid cell name: {name!r}")
    return make_cell(ord(name[0]) - ord("a"), int(name[1]) - 1)
