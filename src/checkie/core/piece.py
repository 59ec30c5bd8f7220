"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Rank, Side

# Layout character ↔ (Side, Rank)
_CHAR_MAP: dict[str, tuple[Side, Rank]] = {
    "l": (Side.LIGHT, Rank.MAN),
    "L": (Side.LIGHT, Rank.QUEEN),
    "d": (Side.DARK, Rank.MAN),
    "D": (Side.DARK, Rank.QUEEN),
}

_LAYOUT_CHARS: dict[tuple[Side, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a checkers piece.

    Promotion never mutates a piece; the board swaps in the queen returned
    by :meth:`promoted`.
    """

    side: Side
    rank: Rank = Rank.MAN

    @property
    def is_queen(self) -> bool:
        return self.rank == Rank.QUEEN

    def promoted(self) -> Piece:
        """Queen of the same side (``self`` if already a queen)."""
        if self.is_queen:
            return self
        return Piece(self.side, Rank.QUEEN)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Layout character (lowercase = man, uppercase = queen)."""
        return _LAYOUT_CHARS[(self.side, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from layout character, e.g. 'D' → dark queen."""
        try:
            side, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(side, rank)
