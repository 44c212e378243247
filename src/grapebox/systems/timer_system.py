"""Game countdown.

The window sends frame time through EVENT_TICK; whole elapsed seconds turn
into ``tick()`` calls while the timer is armed.
"""
from __future__ import annotations

import logging

from esper import World

from grapebox.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_TICK,
    EVENT_TIME_CHANGED,
    EVENT_TIMER_ARMED,
    EVENT_TIMER_DISARMED,
)
from grapebox.utils.game_state import get_game_state, get_timer

logger = logging.getLogger(__name__)


class TimerSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_GAME_STARTED, self.on_game_started)
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)

    @property
    def armed(self) -> bool:
        return get_timer(self.world).armed

    def on_game_started(self, sender, **payload) -> None:
        self.arm()

    def on_game_over(self, sender, **payload) -> None:
        reason = payload.get("reason")
        self.disarm(reason=getattr(reason, "value", reason) or "game_over")

    def on_tick(self, sender, **payload) -> None:
        dt = payload.get("dt")
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            return
        self.advance(dt)

    def arm(self) -> None:
        timer = get_timer(self.world)
        timer.elapsed = 0.0
        if self._should_run():
            timer.armed = True
            self.event_bus.emit(EVENT_TIMER_ARMED, time_remaining=get_game_state(self.world).time_remaining)

    def disarm(self, *, reason: str) -> None:
        timer = get_timer(self.world)
        timer.elapsed = 0.0
        if not timer.armed:
            return
        timer.armed = False
        self.event_bus.emit(EVENT_TIMER_DISARMED, reason=reason)

    def advance(self, dt: float) -> int:
        """Accumulate frame time; returns how many ticks fired."""
        timer = get_timer(self.world)
        if not timer.armed or dt <= 0:
            return 0
        timer.elapsed += dt
        fired = 0
        while timer.armed and timer.elapsed >= timer.interval:
            timer.elapsed -= timer.interval
            self.tick()
            fired += 1
        return fired

    def tick(self) -> None:
        """One second passes. Only counts down while the game is playing."""
        state = get_game_state(self.world)
        if not state.playing or state.time_remaining <= 0:
            return
        state.time_remaining = max(0, state.time_remaining - 1)
        self.event_bus.emit(EVENT_TIME_CHANGED, time_remaining=state.time_remaining)
        if state.time_remaining == 0:
            self.disarm(reason="time_up")

    def _should_run(self) -> bool:
        state = get_game_state(self.world)
        return state.playing and state.time_remaining > 0
