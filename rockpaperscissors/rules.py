"""
Round rules for rock-paper-scissors.
"""

from typing import Optional, Sequence, Union

from ruleset import BaseRuleSet, Step, precondition, rule
from .models import (
    BEATS, Game, GameState, ResultType, RoundEnv, RoundOutcome, RoundResult, Weapon,
    parse_weapon
)


def _reject(result: RoundResult) -> None:
    result.type = ResultType.ERROR
    result.result = None


@precondition("Game has to be running")
def game_is_running(env: RoundEnv, result: RoundResult) -> bool:
    if env.game.state == GameState.RUNNING:
        return True
    _reject(result)
    return False


@precondition("Both players have chosen a weapon")
def weapons_chosen(env: RoundEnv, result: RoundResult) -> bool:
    if env.player_a_weapon is not None and env.player_b_weapon is not None:
        return True
    _reject(result)
    return False


@rule("Determine winner")
def determine_winner(env: RoundEnv, result: RoundResult) -> None:
    weapon_a = parse_weapon(env.player_a_weapon)
    weapon_b = parse_weapon(env.player_b_weapon)
    if weapon_a == weapon_b:
        result.result = RoundOutcome.EVEN
    elif BEATS[weapon_a] == weapon_b:
        result.result = RoundOutcome.PLAYER_A_WON
    else:
        result.result = RoundOutcome.PLAYER_B_WON


@rule("Update game score based on result")
def update_score(env: RoundEnv, result: RoundResult) -> None:
    if result.result is RoundOutcome.PLAYER_A_WON:
        env.game.player_a_score += 1
    elif result.result is RoundOutcome.PLAYER_B_WON:
        env.game.player_b_score += 1


def _max_score_reached(env: RoundEnv) -> bool:
    return env.game.leader_score >= env.game.max_score


@rule("End game if one player reaches max score", when=_max_score_reached)
def end_game(env: RoundEnv, result: RoundResult) -> None:
    env.game.state = GameState.OVER


class RoundRuleSet(BaseRuleSet[RoundEnv, RoundResult]):
    """Validates and scores one round of a game."""

    def get_rules(self) -> Sequence[Step]:
        return [
            game_is_running,
            weapons_chosen,
            determine_winner,
            update_score,
            end_game,
        ]

    def init_result(self) -> RoundResult:
        return RoundResult()


def play_round(game: Game,
               player_a_weapon: Union[str, Weapon, None],
               player_b_weapon: Union[str, Weapon, None],
               rule_set: Optional[RoundRuleSet] = None) -> RoundResult:
    """Play one round of ``game`` and return its result."""
    if rule_set is None:
        rule_set = RoundRuleSet()
    return rule_set.exec(RoundEnv(game, player_a_weapon, player_b_weapon))
