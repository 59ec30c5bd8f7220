"""Bot decision engine: candidate scoring tiers, turn driver and Qt bridge."""

from checkie.engine.bot import Bot, TurnReport, TurnStep, create_bot, create_strategy
from checkie.engine.heuristic import (
    HIGH_WEIGHTS,
    MID_WEIGHTS,
    HeuristicStrategy,
    ScoringWeights,
)
from checkie.engine.qt_bridge import BotWorker
from checkie.engine.random_strategy import RandomStrategy
from checkie.engine.strategy import BotSettings, Difficulty, IStrategy, ScoredCandidate

__all__ = [
    "HIGH_WEIGHTS",
    "MID_WEIGHTS",
    "Bot",
    "BotSettings",
    "BotWorker",
    "Difficulty",
    "HeuristicStrategy",
    "IStrategy",
    "RandomStrategy",
    "ScoredCandidate",
    "ScoringWeights",
    "TurnReport",
    "TurnStep",
    "create_bot",
    "create_strategy",
]
