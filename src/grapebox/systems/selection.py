"""Drag-rectangle selection and clear resolution."""
from __future__ import annotations

import logging
from typing import Callable, List

from esper import World

from grapebox.events.bus import (
    EventBus,
    EVENT_MATCH_CLEARED,
    EVENT_MATCH_REJECTED,
    EVENT_SCORE_CHANGED,
    EVENT_SELECTION_CHANGED,
    EVENT_SELECTION_CLEARED,
    EVENT_SELECTION_END_REQUEST,
    EVENT_SELECTION_UPDATE_REQUEST,
)
from grapebox.systems.board_ops import clear_selection_flags, deactivate_cells, iter_cells
from grapebox.utils.game_state import get_game_state, get_rules, get_selection_state
from grapebox.utils.geometry import CellGeometry, GeometrySource, Point, Rect, coerce_point

logger = logging.getLogger(__name__)

POINTS_PER_MATCH = 1


class SelectionSystem:
    """Maps a drag rectangle onto cells and clears them when they hit the target.

    Cell layout is injected as ``geometry``: either a mapping of cell index to
    its on-screen rectangle or a callable returning such a mapping, so the
    system never computes layout itself.
    """

    def __init__(self, world: World, event_bus: EventBus, geometry: GeometrySource):
        self.world = world
        self.event_bus = event_bus
        self._geometry = geometry
        self.event_bus.subscribe(EVENT_SELECTION_UPDATE_REQUEST, self.on_update_request)
        self.event_bus.subscribe(EVENT_SELECTION_END_REQUEST, self.on_end_request)

    def set_geometry(self, geometry: GeometrySource) -> None:
        self._geometry = geometry

    def cell_geometry(self) -> CellGeometry:
        source = self._geometry
        if callable(source):
            resolver: Callable[[], CellGeometry] = source
            return resolver()
        return source

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_update_request(self, sender, **payload) -> None:
        start = coerce_point(payload.get("start"))
        end = coerce_point(payload.get("end"))
        if start is None or end is None:
            logger.debug("Ignoring selection update without valid points: %r", payload)
            return
        self.update_selection(start, end)

    def on_end_request(self, sender, **payload) -> None:
        self.end_selection()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def update_selection(self, start: Point, end: Point) -> None:
        state = get_game_state(self.world)
        if not state.playing:
            return
        start = coerce_point(start)
        end = coerce_point(end)
        if start is None or end is None:
            logger.debug("Ignoring selection update with invalid points")
            return
        selection = get_selection_state(self.world)
        selection.start = start
        selection.end = end
        selection.is_selecting = True

        rect = Rect.from_points(start, end)
        geometry = self.cell_geometry()
        clear_selection_flags(self.world)
        selected: List[int] = []
        total = 0
        for _, pos, value, switch, flag in iter_cells(self.world):
            if not switch.active:
                continue
            bounds = geometry.get(pos.index)
            if bounds is None or not bounds.intersects(rect):
                continue
            flag.selected = True
            selected.append(pos.index)
            total += value.value
        selection.selected = selected
        selection.selected_sum = total
        self.event_bus.emit(
            EVENT_SELECTION_CHANGED,
            indices=list(selected),
            selected_sum=total,
            start=start,
            end=end,
        )

    def end_selection(self) -> None:
        selection = get_selection_state(self.world)
        state = get_game_state(self.world)
        target = get_rules(self.world).target_sum
        indices = list(selection.selected)
        was_selecting = selection.is_selecting
        if state.playing and indices:
            if selection.selected_sum == target:
                cleared = deactivate_cells(self.world, indices)
                state.score += POINTS_PER_MATCH
                logger.debug("Cleared %d cells, score %d", len(cleared), state.score)
                self.event_bus.emit(EVENT_SCORE_CHANGED, score=state.score, delta=POINTS_PER_MATCH)
                self.event_bus.emit(
                    EVENT_MATCH_CLEARED,
                    indices=[index for index, _ in cleared],
                    values=[value for _, value in cleared],
                    score=state.score,
                )
            else:
                logger.debug("Selection sum %d misses target %d", selection.selected_sum, target)
                self.event_bus.emit(
                    EVENT_MATCH_REJECTED,
                    indices=indices,
                    selected_sum=selection.selected_sum,
                )
        self.reset()
        if was_selecting:
            self.event_bus.emit(EVENT_SELECTION_CLEARED)

    def reset(self) -> None:
        clear_selection_flags(self.world)
        get_selection_state(self.world).reset()
