"""Abstract interfaces for the game layer.

Follows Dependency Inversion: high-level GameController depends on
these ABCs, not on concrete Player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from checkie.core.enums import Side
from checkie.engine.strategy import Difficulty

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.types import Cell
    from checkie.engine.bot import TurnReport


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a checkers game."""

    NOT_STARTED = auto()
    AWAITING_SELECTION = auto()  # human turn open
    THINKING = auto()  # bot turn pending
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or bot)."""

    @property
    @abstractmethod
    def side(self) -> Side: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_turn(self, board: Board) -> None:
        """Notify the player that its turn has started.

        For humans this is a no-op (they interact via selections).
        For bots this may hand the turn to an asynchronous driver.
        """


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        light: IPlayer,
        dark: IPlayer,
        board: Board | None = None,
        first: Side = Side.LIGHT,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def select_piece(self, cell: Cell) -> bool:
        """Pick the piece to move. Returns True if the pick is allowed."""

    @abstractmethod
    def submit_selection(self, cell: Cell) -> bool:
        """Submit a destination for the picked piece. Returns True if applied."""

    @abstractmethod
    def play_bot_turn(self) -> TurnReport | None:
        """Play the current bot's whole turn."""

    @abstractmethod
    def resign(self, side: Side) -> None:
        """Player of *side* resigns."""


__all__ = ["Difficulty", "GamePhase", "IGameController", "IPlayer"]
