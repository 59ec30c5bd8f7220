"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side of the board. Light starts on rows 0-2, Dark on rows 5-7."""

    LIGHT = 0
    DARK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a man's simple move."""
        return 1 if self is Side.LIGHT else -1

    @property
    def promotion_row(self) -> int:
        """Row on which a man of this side becomes a queen."""
        return 7 if self is Side.LIGHT else 0

    @property
    def home_row(self) -> int:
        return 0 if self is Side.LIGHT else 7

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank ordered by value."""

    MAN = 1
    QUEEN = 2


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    LIGHT_WINS = 1
    DARK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, side: Side) -> GameResult:
        return cls.LIGHT_WINS if side is Side.LIGHT else cls.DARK_WINS
