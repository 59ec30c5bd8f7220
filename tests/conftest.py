"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from checkie.core.board import Board
from checkie.core.enums import Rank
from checkie.core.piece import Piece
from checkie.core.types import make_cell

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal/timer tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


PlaceFn = Callable[..., Board]


@pytest.fixture
def place() -> PlaceFn:
    """Build a board from ``(x, y, side[, rank])`` tuples."""

    def _place(*pieces: tuple) -> Board:
        board = Board()
        for x, y, side, *rest in pieces:
            rank = rest[0] if rest else Rank.MAN
            board[make_cell(x, y)] = Piece(side, rank)
        return board

    return _place

