"""Tests for board features and the weighted heuristic strategy."""

import dataclasses
import random

import pytest

from checkie.core.enums import Rank, Side
from checkie.core.move import Capture, SimpleMove
from checkie.core.piece import Piece
from checkie.core.types import make_cell as c
from checkie.engine.heuristic import (
    HIGH_WEIGHTS,
    MID_WEIGHTS,
    HeuristicStrategy,
    advancement,
    is_in_center,
    is_in_inner_center,
    is_on_edge,
    threat_against,
)
from checkie.engine.random_strategy import RandomStrategy

_MID_EXACT = dataclasses.replace(MID_WEIGHTS, jitter=0.0)
_HIGH_EXACT = dataclasses.replace(HIGH_WEIGHTS, jitter=0.0)


class TestFeatures:
    def test_center(self) -> None:
        assert is_in_center(c(2, 2))
        assert is_in_center(c(5, 5))
        assert not is_in_center(c(1, 3))
        assert not is_in_center(c(6, 4))

    def test_inner_center(self) -> None:
        assert is_in_inner_center(c(3, 4))
        assert not is_in_inner_center(c(2, 2))

    def test_edge(self) -> None:
        assert is_on_edge(c(0, 3))
        assert is_on_edge(c(4, 7))
        assert not is_on_edge(c(3, 3))

    def test_advancement_from_home_row(self) -> None:
        assert advancement(c(0, 5), Side.LIGHT) == 5
        assert advancement(c(0, 2), Side.DARK) == 5
        assert advancement(c(1, 0), Side.LIGHT) == 0


class TestThreatAgainst:
    def test_enemy_man_moving_toward_piece(self, place) -> None:
        board = place((3, 3, Side.LIGHT), (5, 5, Side.DARK))
        assert threat_against(board, c(3, 3), Side.LIGHT) == Piece(Side.DARK)

    def test_enemy_man_behind_is_ignored(self, place) -> None:
        board = place((3, 3, Side.LIGHT), (1, 1, Side.DARK))
        assert threat_against(board, c(3, 3), Side.LIGHT) is None

    def test_enemy_queen_from_any_direction(self, place) -> None:
        board = place((3, 3, Side.LIGHT), (1, 1, Side.DARK, Rank.QUEEN))
        threat = threat_against(board, c(3, 3), Side.LIGHT)
        assert threat == Piece(Side.DARK, Rank.QUEEN)

    def test_blocked_in_between(self, place) -> None:
        board = place((3, 3, Side.LIGHT), (4, 4, Side.LIGHT), (5, 5, Side.DARK))
        assert threat_against(board, c(3, 3), Side.LIGHT) is None


class TestMidScoring:
    def test_simple_move_score(self, place) -> None:
        board = place((3, 2, Side.LIGHT), (0, 7, Side.DARK))
        strategy = HeuristicStrategy(_MID_EXACT)
        # advancement 3 rows * 10 + center 5
        move = SimpleMove(c(3, 2), c(4, 3))
        assert strategy.raw_score(board, Side.LIGHT, move) == pytest.approx(35.0)

    def test_vulnerable_destination_penalised(self, place) -> None:
        board = place((3, 2, Side.LIGHT), (6, 5, Side.DARK))
        strategy = HeuristicStrategy(_MID_EXACT)
        move = SimpleMove(c(3, 2), c(4, 3))
        assert strategy.raw_score(board, Side.LIGHT, move) == pytest.approx(5.0)

    def test_jitter_is_bounded(self, place) -> None:
        board = place((3, 2, Side.LIGHT), (0, 7, Side.DARK))
        strategy = HeuristicStrategy(MID_WEIGHTS, random.Random(4))
        move = SimpleMove(c(3, 2), c(4, 3))
        raw = strategy.raw_score(board, Side.LIGHT, move)
        for _ in range(20):
            assert abs(strategy.score(board, Side.LIGHT, move) - raw) <= 1.0 + 1e-9

    def test_scoring_does_not_mutate(self, place) -> None:
        board = place((3, 2, Side.LIGHT), (4, 3, Side.DARK))
        before = board.copy()
        HeuristicStrategy(MID_WEIGHTS).rank(
            board, Side.LIGHT, [Capture(c(3, 2), c(4, 3), c(5, 4))]
        )
        assert board == before

    def test_missing_mover_raises(self, place) -> None:
        board = place((4, 3, Side.DARK))
        with pytest.raises(ValueError):
            HeuristicStrategy(_MID_EXACT).raw_score(
                board, Side.LIGHT, SimpleMove(c(3, 2), c(4, 3))
            )


    def test_capture_jitter_is_percentage_of_raw(self, place) -> None:
        board = place((3, 2, Side.LIGHT), (4, 3, Side.DARK))
        strategy = HeuristicStrategy(MID_WEIGHTS, random.Random(7))
        move = Capture(c(3, 2), c(4, 3), c(5, 4))
        raw = strategy.raw_score(board, Side.LIGHT, move)
        scores = {strategy.score(board, Side.LIGHT, move) for _ in range(200)}
        assert all(abs(s - raw) <= abs(raw) * 0.10 + 1e-9 for s in scores)
        assert len(scores) > 1


class TestFactorWeights:
    def test_queen_threat_costs_more(self, place) -> None:
        strategy = HeuristicStrategy(_MID_EXACT)
        move = SimpleMove(c(3, 2), c(4, 3))
        by_man = place((3, 2, Side.LIGHT), (6, 5, Side.DARK))
        by_queen = place((3, 2, Side.LIGHT), (6, 5, Side.DARK, Rank.QUEEN))
        assert strategy.raw_score(by_man, Side.LIGHT, move) == pytest.approx(5.0)
        # 35 positional, then -30 x 1.5
        assert strategy.raw_score(by_queen, Side.LIGHT, move) == pytest.approx(-10.0)

    def test_queen_mover_bonus(self, place) -> None:
        board = place((3, 2, Side.LIGHT, Rank.QUEEN))
        move = SimpleMove(c(3, 2), c(4, 3))
        with_bonus = HeuristicStrategy(_MID_EXACT).raw_score(board, Side.LIGHT, move)
        without = HeuristicStrategy(
            dataclasses.replace(_MID_EXACT, queen_bonus=0.0)
        ).raw_score(board, Side.LIGHT, move)
        assert with_bonus == pytest.approx(55.0)
        assert with_bonus - without == pytest.approx(20.0)

    def test_safety_bonus_for_leaving_threat(self, place) -> None:
        # The dark man on f5 eyes d3 across the empty e4; c4 is out of reach.
        board = place((3, 2, Side.LIGHT), (5, 4, Side.DARK))
        move = SimpleMove(c(3, 2), c(2, 3))
        with_bonus = HeuristicStrategy(_HIGH_EXACT).raw_score(board, Side.LIGHT, move)
        without = HeuristicStrategy(
            dataclasses.replace(_HIGH_EXACT, safety_bonus=0.0)
        ).raw_score(board, Side.LIGHT, move)
        assert with_bonus - without == pytest.approx(10.0)

    def test_no_safety_bonus_when_never_threatened(self, place) -> None:
        board = place((3, 2, Side.LIGHT), (7, 7, Side.DARK))
        move = SimpleMove(c(3, 2), c(2, 3))
        with_bonus = HeuristicStrategy(_HIGH_EXACT).raw_score(board, Side.LIGHT, move)
        without = HeuristicStrategy(
            dataclasses.replace(_HIGH_EXACT, safety_bonus=0.0)
        ).raw_score(board, Side.LIGHT, move)
        assert with_bonus == pytest.approx(without)

    def test_safety_bonus_applies_to_captures(self, place) -> None:
        board = place((3, 2, Side.LIGHT), (2, 3, Side.DARK), (5, 4, Side.DARK))
        move = Capture(c(3, 2), c(2, 3), c(1, 4))
        with_bonus = HeuristicStrategy(_HIGH_EXACT).raw_score(board, Side.LIGHT, move)
        without = HeuristicStrategy(
            dataclasses.replace(_HIGH_EXACT, safety_bonus=0.0)
        ).raw_score(board, Side.LIGHT, move)
        assert with_bonus - without == pytest.approx(10.0)

    def test_capture_onto_promotion_row(self, place) -> None:
        board = place((1, 5, Side.LIGHT), (2, 6, Side.DARK), (7, 1, Side.DARK))
        move = Capture(c(1, 5), c(2, 6), c(3, 7))
        with_bonus = HeuristicStrategy(_HIGH_EXACT).raw_score(board, Side.LIGHT, move)
        without = HeuristicStrategy(
            dataclasses.replace(_HIGH_EXACT, promotion_capture_bonus=0.0)
        ).raw_score(board, Side.LIGHT, move)
        assert with_bonus - without == pytest.approx(30.0)

class TestTierPreferences:
    @pytest.fixture
    def two_captures(self, place):
        board = place(
            (1, 2, Side.LIGHT),
            (2, 3, Side.DARK),
            (5, 2, Side.LIGHT),
            (6, 3, Side.DARK, Rank.QUEEN),
        )
        toward_center = Capture(c(1, 2), c(2, 3), c(3, 4))
        takes_queen = Capture(c(5, 2), c(6, 3), c(7, 4))
        return board, toward_center, takes_queen

    def test_mid_prefers_center(self, two_captures) -> None:
        board, toward_center, takes_queen = two_captures
        ranked = HeuristicStrategy(_MID_EXACT).rank(
            board, Side.LIGHT, [takes_queen, toward_center]
        )
        assert ranked[0].move == toward_center
        assert ranked[0].score == pytest.approx(145.0)
        assert ranked[1].score == pytest.approx(135.0)

    def test_high_prefers_taking_queen(self, two_captures) -> None:
        board, toward_center, takes_queen = two_captures
        ranked = HeuristicStrategy(_HIGH_EXACT).rank(
            board, Side.LIGHT, [toward_center, takes_queen]
        )
        assert ranked[0].move == takes_queen
        assert ranked[0].score == pytest.approx(295.0)
        assert ranked[1].score == pytest.approx(275.0)

    def test_high_prefers_promotion(self, place) -> None:
        board = place((1, 6, Side.LIGHT), (4, 1, Side.LIGHT), (0, 0, Side.DARK))
        crowning = SimpleMove(c(1, 6), c(2, 7))
        quiet = SimpleMove(c(4, 1), c(5, 2))
        ranked = HeuristicStrategy(HIGH_WEIGHTS, random.Random(0)).rank(
            board, Side.LIGHT, [quiet, crowning]
        )
        assert ranked[0].move == crowning

    def test_high_rewards_threats(self, place) -> None:
        # From d4 the man eyes the dark man on e5 with f6 empty.
        board = place((2, 2, Side.LIGHT), (4, 4, Side.DARK), (6, 7, Side.DARK))
        strategy = HeuristicStrategy(_HIGH_EXACT)
        with_threat = strategy.raw_score(
            board, Side.LIGHT, SimpleMove(c(2, 2), c(3, 3))
        )
        no_threat = HeuristicStrategy(
            dataclasses.replace(_HIGH_EXACT, threat_bonus=0.0)
        ).raw_score(board, Side.LIGHT, SimpleMove(c(2, 2), c(3, 3)))
        assert with_threat - no_threat == pytest.approx(30.0 + 15.0 * 0.3)

    def test_ties_keep_enumeration_order(self, place) -> None:
        board = place((3, 0, Side.LIGHT), (7, 7, Side.DARK))
        left = SimpleMove(c(3, 0), c(2, 1))
        right = SimpleMove(c(3, 0), c(4, 1))
        strategy = HeuristicStrategy(_MID_EXACT)
        assert [s.move for s in strategy.rank(board, Side.LIGHT, [left, right])] == [
            left,
            right,
        ]
        assert [s.move for s in strategy.rank(board, Side.LIGHT, [right, left])] == [
            right,
            left,
        ]


class TestRandomStrategy:
    def test_keeps_every_candidate(self) -> None:
        moves = [SimpleMove(c(0, 2), c(1, 3)), SimpleMove(c(2, 2), c(3, 3))]
        ranked = RandomStrategy(random.Random(1)).rank(None, Side.LIGHT, moves)
        assert sorted(str(s.move) for s in ranked) == sorted(str(m) for m in moves)
        assert all(s.score == 0.0 for s in ranked)

    def test_seeded_is_reproducible(self) -> None:
        moves = [SimpleMove(c(x, 2), c(x + 1, 3)) for x in range(0, 7, 2)]
        first = RandomStrategy(random.Random(9)).rank(None, Side.LIGHT, moves)
        second = RandomStrategy(random.Random(9)).rank(None, Side.LIGHT, moves)
        assert first == second
