"""Tests for the Qt bot bridge worker."""

from __future__ import annotations

import random

from PyQt6.QtTest import QSignalSpy

from checkie.core.board import Board
from checkie.core.enums import Side
from checkie.core.piece import Piece
from checkie.core.types import make_cell
from checkie.engine.bot import Bot, TurnReport, create_bot
from checkie.engine.qt_bridge import BotWorker
from checkie.engine.strategy import Difficulty


def _multi_jump_board() -> Board:
    board = Board()
    board[make_cell(0, 0)] = Piece(Side.LIGHT)
    board[make_cell(1, 1)] = Piece(Side.DARK)
    board[make_cell(3, 3)] = Piece(Side.DARK)
    return board


class _ExplodingStrategy:
    def rank(self, board, side, candidates):
        del board, side, candidates
        raise RuntimeError("boom")


class TestBotWorker:
    def test_steps_wait_for_advance(self, qapp) -> None:
        worker = BotWorker(create_bot(Difficulty.MID, random.Random(0)))
        steps = QSignalSpy(worker.step_played)
        finished = QSignalSpy(worker.turn_finished)

        worker.request_turn(_multi_jump_board(), Side.LIGHT, 3)
        assert len(steps) == 1
        assert len(finished) == 0
        assert worker.is_busy

        worker.advance()
        assert len(steps) == 2
        assert steps[1][0] == 3

        worker.advance()
        assert len(finished) == 1
        assert finished[0][0] == 3
        report = finished[0][1]
        assert isinstance(report, TurnReport)
        assert len(report.steps) == 2
        assert not worker.is_busy

    def test_noop_turn_finishes_immediately(self, qapp) -> None:
        board = Board()
        board[make_cell(0, 6)] = Piece(Side.LIGHT)
        board[make_cell(1, 7)] = Piece(Side.DARK)
        worker = BotWorker(create_bot(Difficulty.LOW))
        finished = QSignalSpy(worker.turn_finished)
        steps = QSignalSpy(worker.step_played)

        worker.request_turn(board, Side.LIGHT, 1)

        assert len(steps) == 0
        assert len(finished) == 1
        assert finished[0][1].is_noop

    def test_rejects_request_while_busy(self, qapp) -> None:
        worker = BotWorker(create_bot(Difficulty.MID))
        errors = QSignalSpy(worker.turn_error)

        worker.request_turn(_multi_jump_board(), Side.LIGHT, 1)
        worker.request_turn(_multi_jump_board(), Side.LIGHT, 2)

        assert len(errors) == 1
        assert errors[0][0] == 2

    def test_rejects_invalid_arguments(self, qapp) -> None:
        worker = BotWorker(create_bot(Difficulty.MID))
        errors = QSignalSpy(worker.turn_error)

        worker.request_turn("not a board", Side.LIGHT, 5)

        assert len(errors) == 1
        assert errors[0][0] == 5
        assert not worker.is_busy

    def test_strategy_error_reported(self, qapp) -> None:
        worker = BotWorker(Bot(_ExplodingStrategy()))
        errors = QSignalSpy(worker.turn_error)

        worker.request_turn(Board.initial(), Side.LIGHT, 8)

        assert len(errors) == 1
        assert errors[0][1] == "boom"
        assert not worker.is_busy
