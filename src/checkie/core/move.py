"""Move value objects: simple moves and captures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from checkie.core.types import Cell, cell_name


@dataclass(frozen=True, slots=True)
class SimpleMove:
    """A non-capturing move of one piece."""

    from_cell: Cell
    to_cell: Cell

    def __str__(self) -> str:
        return f"{cell_name(self.from_cell)}-{cell_name(self.to_cell)}"

    @property
    def is_capture(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Capture:
    """A single jump: *captured* is the enemy cell emptied by the move."""

    from_cell: Cell
    captured: Cell
    to_cell: Cell

    def __str__(self) -> str:
        return f"{cell_name(self.from_cell)}x{cell_name(self.to_cell)}"

    @property
    def is_capture(self) -> bool:
        return True


AnyMove: TypeAlias = SimpleMove | Capture
