"""
Rock-paper-scissors rounds expressed as a rule set.
"""

from .models import (
    Game, GameState, ResultType, RoundEnv, RoundOutcome, RoundResult, Weapon, parse_weapon
)
from .rules import RoundRuleSet, play_round

__all__ = [
    "Game", "GameState", "ResultType", "RoundEnv", "RoundOutcome", "RoundResult",
    "Weapon", "parse_weapon", "RoundRuleSet", "play_round",
]
