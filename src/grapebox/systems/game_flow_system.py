"""Game lifecycle: new games and terminal-state detection."""
from __future__ import annotations

import logging

from esper import World

from grapebox.components.game_state import GameOverReason
from grapebox.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_GAME_START_REQUEST,
    EVENT_GAME_STARTED,
    EVENT_MATCH_CLEARED,
    EVENT_SCORE_CHANGED,
    EVENT_TIME_CHANGED,
)
from grapebox.systems.board import BoardSystem
from grapebox.systems.board_ops import is_board_cleared
from grapebox.systems.selection import SelectionSystem
from grapebox.utils.game_state import get_game_state, get_rules

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Coordinates start-of-game resets and game-over transitions."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        board_system: BoardSystem,
        selection_system: SelectionSystem,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self.selection_system = selection_system
        self.event_bus.subscribe(EVENT_GAME_START_REQUEST, self._on_start_request)
        self.event_bus.subscribe(EVENT_MATCH_CLEARED, self._on_state_changed)
        self.event_bus.subscribe(EVENT_TIME_CHANGED, self._on_state_changed)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_start_request(self, sender, **payload) -> None:
        self.start_game(reason=payload.get("reason", "request"))

    def _on_state_changed(self, sender, **payload) -> None:
        self.check_game_over()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_game(self, values=None, *, reason: str = "start") -> None:
        """Deal a new board and reset score, clock and selection."""
        rules = get_rules(self.world)
        self.selection_system.reset()
        self.board_system.reset_board(values)
        state = get_game_state(self.world)
        previous_score = state.score
        state.score = 0
        state.time_remaining = rules.game_duration
        state.is_started = True
        state.game_over = False
        state.end_reason = None
        logger.info("Game started (%s): %d cells, %ds", reason, rules.total_cells, rules.game_duration)
        if previous_score:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=-previous_score)
        self.event_bus.emit(
            EVENT_GAME_STARTED,
            score=state.score,
            time_remaining=state.time_remaining,
            cells=rules.total_cells,
        )

    def check_game_over(self) -> bool:
        """End the game if the board is cleared (after scoring) or time is up."""
        state = get_game_state(self.world)
        if not state.is_started or state.game_over:
            return state.game_over
        reason = None
        if state.score > 0 and is_board_cleared(self.world):
            reason = GameOverReason.BOARD_CLEARED
        elif state.time_remaining <= 0:
            reason = GameOverReason.TIME_UP
        if reason is None:
            return False
        state.game_over = True
        state.end_reason = reason
        self.selection_system.reset()
        logger.info("Game over (%s) with score %d", reason.value, state.score)
        self.event_bus.emit(
            EVENT_GAME_OVER,
            reason=reason,
            score=state.score,
            time_remaining=state.time_remaining,
        )
        return True
