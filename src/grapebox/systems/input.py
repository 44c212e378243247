import logging

from grapebox.constants import MOUSE_BUTTON_LEFT
from grapebox.events.bus import (
    EventBus,
    EVENT_GAME_START_REQUEST,
    EVENT_MOUSE_DRAG,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_SELECTION_END_REQUEST,
    EVENT_SELECTION_UPDATE_REQUEST,
)
from grapebox.ui.layout import compute_button_rect
from grapebox.utils.game_state import get_game_state
from grapebox.utils.geometry import coerce_point

logger = logging.getLogger(__name__)


class InputSystem:
    """Turns raw pointer events into button presses and selection requests."""

    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.drag_start = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_DRAG, self.on_mouse_drag)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)
        self.event_bus.subscribe(EVENT_MOUSE_LEAVE, self.on_mouse_leave)

    def on_mouse_press(self, sender, **kwargs):
        point = self._point(kwargs)
        if point is None:
            return
        if kwargs.get('button') != MOUSE_BUTTON_LEFT:
            return
        x, y = point
        if compute_button_rect(self.window.width, self.window.height).contains(x, y):
            self.drag_start = None
            reason = 'new_game' if get_game_state(self.world).is_started else 'start'
            self.event_bus.emit(EVENT_GAME_START_REQUEST, reason=reason)
            return
        if not get_game_state(self.world).playing:
            logger.debug("Ignoring press at (%.1f, %.1f): game not in play", x, y)
            return
        self.drag_start = point
        self.event_bus.emit(EVENT_SELECTION_UPDATE_REQUEST, start=point, end=point)

    def on_mouse_drag(self, sender, **kwargs):
        if self.drag_start is None:
            return
        point = self._point(kwargs)
        if point is None:
            return
        self.event_bus.emit(EVENT_SELECTION_UPDATE_REQUEST, start=self.drag_start, end=point)

    def on_mouse_release(self, sender, **kwargs):
        if kwargs.get('button', MOUSE_BUTTON_LEFT) != MOUSE_BUTTON_LEFT:
            return
        self._finish_drag()

    def on_mouse_leave(self, sender, **kwargs):
        # Leaving the window ends the drag exactly like a release.
        self._finish_drag()

    def _finish_drag(self):
        if self.drag_start is None:
            return
        self.drag_start = None
        self.event_bus.emit(EVENT_SELECTION_END_REQUEST)

    @staticmethod
    def _point(kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return None
        return coerce_point((x, y))
