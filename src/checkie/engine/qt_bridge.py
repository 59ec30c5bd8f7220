"""Qt bridge that plays a bot turn one step at a time."""

from __future__ import annotations

from collections.abc import Iterator

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.engine.bot import Bot, TurnReport, TurnStep


class BotWorker(QObject):
    """Drives :meth:`Bot.iter_turn` so a view can animate between steps.

    After each ``step_played`` the worker waits for :meth:`advance`, which
    the presentation calls once its animation is over. With
    ``auto_advance`` the worker schedules that call itself, using the bot's
    pacing settings. A started turn always runs to completion.
    """

    step_played = pyqtSignal(int, object)
    turn_finished = pyqtSignal(int, object)
    turn_error = pyqtSignal(int, str)

    __slots__ = ("_bot", "_auto_advance", "_steps", "_report", "_request_id")

    def __init__(self, bot: Bot, *, auto_advance: bool = False) -> None:
        super().__init__()
        self._bot = bot
        self._auto_advance = auto_advance
        self._steps: Iterator[TurnStep] | None = None
        self._report: TurnReport | None = None
        self._request_id = -1

    @property
    def is_busy(self) -> bool:
        return self._steps is not None

    @pyqtSlot(object, object, int)
    def request_turn(
        self, board_obj: object, side_obj: object, request_id: int
    ) -> None:
        """Start a turn for *side_obj* on *board_obj*."""
        if self._steps is not None:
            self.turn_error.emit(request_id, "Bot turn already in progress")
            return
        if not isinstance(board_obj, Board) or not isinstance(side_obj, Side):
            self.turn_error.emit(request_id, "Bot received invalid board or side")
            return

        self._request_id = request_id
        self._report = TurnReport(side_obj)
        self._steps = self._bot.iter_turn(board_obj, side_obj)
        if self._auto_advance:
            QTimer.singleShot(self._bot.settings.think_delay_ms, self.advance)
        else:
            self.advance()

    @pyqtSlot()
    def advance(self) -> None:
        """Play the next step of the current turn, or finish it."""
        steps = self._steps
        report = self._report
        if steps is None or report is None:
            return

        request_id = self._request_id
        try:
            step = next(steps, None)
        except Exception as exc:
            self._reset()
            self.turn_error.emit(request_id, str(exc))
            return

        if step is None:
            self._reset()
            self.turn_finished.emit(request_id, report)
            return

        report.steps.append(step)
        self.step_played.emit(request_id, step)
        if self._auto_advance:
            QTimer.singleShot(self._bot.settings.step_delay_ms, self.advance)

    def _reset(self) -> None:
        self._steps = None
        self._report = None
