"""Concrete player implementations."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable

from checkie.core.enums import Side
from checkie.engine.bot import Bot, TurnReport, create_bot
from checkie.game.interfaces import Difficulty, IPlayer

if TYPE_CHECKING:
    from checkie.core.board import Board


class HumanPlayer(IPlayer):
    """A human participant whose moves come from the input layer.

    ``request_turn`` is a no-op because humans pick cells interactively.
    """

    __slots__ = ("_side", "_name")

    def __init__(self, side: Side, name: str = "") -> None:
        self._side = side
        self._name = name or f"Player ({side})"

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_turn(self, board: Board) -> None:
        pass  # Human moves arrive via controller.submit_selection()


class BotPlayer(IPlayer):
    """A bot participant backed by a :class:`Bot`.

    Args:
        side: Side the bot plays.
        difficulty: Tier used when *bot* is not given.
        name: Display name (defaults to the bot's name).
        bot: Pre-built bot, e.g. with a seeded strategy.
        rng: Random source for the tier's strategy.
        on_request_turn: ``(Board) -> None``, called when the controller
            hands the turn to this bot, e.g. to start a ``BotWorker``.
    """

    __slots__ = ("_side", "_name", "_difficulty", "_bot", "_on_request_turn")

    def __init__(
        self,
        side: Side,
        difficulty: Difficulty = Difficulty.MID,
        name: str = "",
        bot: Bot | None = None,
        rng: random.Random | None = None,
        on_request_turn: Callable[[Board], None] | None = None,
    ) -> None:
        self._side = side
        self._difficulty = difficulty
        self._bot = bot or create_bot(difficulty, rng)
        self._name = name or self._bot.name
        self._on_request_turn = on_request_turn

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def bot(self) -> Bot:
        return self._bot

    def request_turn(self, board: Board) -> None:
        if self._on_request_turn is not None:
            self._on_request_turn(board)

    def play_turn(self, board: Board) -> TurnReport:
        """Decide and play a whole turn on *board*."""
        return self._bot.decide_and_play_turn(board, self._side)
