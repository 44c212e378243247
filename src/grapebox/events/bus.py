from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (frame time in seconds)
EVENT_TIMER_ARMED = "timer_armed"                  # payload: time_remaining=int
EVENT_TIMER_DISARMED = "timer_disarmed"            # payload: reason=str
EVENT_TIME_CHANGED = "time_changed"                # payload: time_remaining=int


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_MOUSE_DRAG = "mouse_drag"                    # payload: x, y, dx, dy, buttons
EVENT_MOUSE_RELEASE = "mouse_release"              # payload: x, y, button
EVENT_MOUSE_LEAVE = "mouse_leave"                  # payload: x, y
EVENT_GAME_START_REQUEST = "game_start_request"    # payload: reason=str
EVENT_SELECTION_UPDATE_REQUEST = "selection_update_request"  # payload: start=(x,y), end=(x,y)
EVENT_SELECTION_END_REQUEST = "selection_end_request"        # payload: (none)


# ============================================================================
# BOARD & SELECTION
# ============================================================================
EVENT_BOARD_GENERATED = "board_generated"          # payload: values=list[int], partitions=int
EVENT_SELECTION_CHANGED = "selection_changed"      # payload: indices=list[int], selected_sum=int, start, end
EVENT_SELECTION_CLEARED = "selection_cleared"      # payload: (none)
EVENT_MATCH_CLEARED = "match_cleared"              # payload: indices=list[int], values=list[int], score=int
EVENT_MATCH_REJECTED = "match_rejected"            # payload: indices=list[int], selected_sum=int


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_GAME_STARTED = "game_started"                # payload: score=int, time_remaining=int, cells=int
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, delta=int
EVENT_GAME_OVER = "game_over"                      # payload: reason=GameOverReason, score=int, time_remaining=int
