"""Game state resource describing the current session."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class GameMode(Enum):
    """High-level game modes derived from GameState flags."""
    NOT_STARTED = auto()
    PLAYING = auto()
    GAME_OVER = auto()
    TIME_UP = auto()


class GameOverReason(Enum):
    BOARD_CLEARED = "board_cleared"
    TIME_UP = "time_up"


@dataclass
class GameState:
    """Singleton component storing score, countdown and lifecycle flags."""
    score: int = 0
    time_remaining: int = 0
    is_started: bool = False
    game_over: bool = False
    end_reason: Optional[GameOverReason] = None

    @property
    def mode(self) -> GameMode:
        if not self.is_started:
            return GameMode.NOT_STARTED
        if not self.game_over:
            return GameMode.PLAYING
        if self.end_reason == GameOverReason.TIME_UP:
            return GameMode.TIME_UP
        return GameMode.GAME_OVER

    @property
    def playing(self) -> bool:
        return self.is_started and not self.game_over
