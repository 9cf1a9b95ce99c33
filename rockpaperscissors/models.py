"""
Game data models for rock-paper-scissors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from shared.errors import ValidationError


class Weapon(str, Enum):
    """Weapons a player can choose."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class GameState(str, Enum):
    """Game states."""
    RUNNING = "running"
    OVER = "over"


class ResultType(str, Enum):
    """Round result types."""
    SUCCESS = "success"
    ERROR = "error"


class RoundOutcome(str, Enum):
    """Round outcomes."""
    PLAYER_A_WON = "playerAWon"
    PLAYER_B_WON = "playerBWon"
    EVEN = "even"


# weapon -> weapon it beats
BEATS = {
    Weapon.ROCK: Weapon.SCISSORS,
    Weapon.SCISSORS: Weapon.PAPER,
    Weapon.PAPER: Weapon.ROCK,
}


def parse_weapon(value: Union[str, Weapon, None]) -> Optional[Weapon]:
    """Coerce a weapon name, keeping None for a player that has not chosen."""
    if value is None or isinstance(value, Weapon):
        return value
    try:
        return Weapon(value.lower())
    except (AttributeError, ValueError):
        raise ValidationError(
            f"Unknown weapon: {value!r}",
            details={"weapon": value, "allowed": [w.value for w in Weapon]}
        )


@dataclass
class Game:
    """Game spanning several rounds."""
    state: GameState = GameState.RUNNING
    max_score: int = 3
    player_a_score: int = 0
    player_b_score: int = 0

    @property
    def leader_score(self) -> int:
        return max(self.player_a_score, self.player_b_score)


@dataclass
class RoundEnv:
    """Environment for one round: the game and both players' weapons."""
    game: Game
    player_a_weapon: Optional[Weapon] = None
    player_b_weapon: Optional[Weapon] = None

    def __post_init__(self):
        self.player_a_weapon = parse_weapon(self.player_a_weapon)
        self.player_b_weapon = parse_weapon(self.player_b_weapon)


@dataclass
class RoundResult:
    """Result of one round."""
    type: ResultType = ResultType.SUCCESS
    result: Optional[RoundOutcome] = None
