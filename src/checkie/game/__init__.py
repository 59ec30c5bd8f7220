"""Game management layer: controller, players and the state machine.

Quick start::

    from checkie.core import Side
    from checkie.game import BotPlayer, Difficulty, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        light=HumanPlayer(Side.LIGHT, "Alice"),
        dark=BotPlayer(Side.DARK, Difficulty.HIGH),
    )
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import Difficulty, GamePhase, IGameController, IPlayer
from checkie.game.player import BotPlayer, HumanPlayer
from checkie.game.state import GameState, Score, TurnRecord

__all__ = [
    # Interfaces
    "Difficulty",
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "BotPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "Score",
    "TurnRecord",
]
