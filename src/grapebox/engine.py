"""Headless facade over the grape box world.

Wires the event bus, world and game systems together and exposes the game's
operations plus read-only snapshots for whatever draws the board.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from grapebox.components.game_rules import GameRules
from grapebox.components.game_state import GameMode, GameOverReason
from grapebox.events.bus import EventBus, EVENT_TICK
from grapebox.systems.board import BoardSystem
from grapebox.systems.board_ops import iter_cells
from grapebox.systems.game_flow_system import GameFlowSystem
from grapebox.systems.selection import SelectionSystem
from grapebox.systems.timer_system import TimerSystem
from grapebox.utils.game_state import get_game_state, get_rules, get_selection_state
from grapebox.utils.geometry import GeometrySource, Point
from grapebox.world import create_world


@dataclass(frozen=True, slots=True)
class CellSnapshot:
    index: int
    row: int
    col: int
    value: int
    present: bool
    selected: bool


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    cells: Tuple[CellSnapshot, ...]
    score: int
    time_remaining: int
    selection_start: Optional[Point]
    selection_end: Optional[Point]
    is_selecting: bool
    selected_sum: int
    is_started: bool
    game_over: bool
    mode: GameMode
    end_reason: Optional[GameOverReason]

    @property
    def selected_indices(self) -> Tuple[int, ...]:
        return tuple(cell.index for cell in self.cells if cell.selected)

    @property
    def values(self) -> Tuple[Optional[int], ...]:
        return tuple(cell.value if cell.present else None for cell in self.cells)


class GrapeBoxEngine:
    def __init__(
        self,
        *,
        rules: GameRules | None = None,
        rng: random.Random | None = None,
        geometry: GeometrySource | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world = create_world(self.event_bus, rules=rules, rng=rng)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.selection_system = SelectionSystem(self.world, self.event_bus, geometry or {})
        self.timer_system = TimerSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(
            self.world,
            self.event_bus,
            self.board_system,
            self.selection_system,
        )

    @property
    def rules(self) -> GameRules:
        return get_rules(self.world)

    def set_geometry(self, geometry: GeometrySource) -> None:
        self.selection_system.set_geometry(geometry)

    def start_game(self, values: Sequence[int] | None = None) -> None:
        """Start a new game; ``values`` replaces the generated board when given."""
        self.game_flow_system.start_game(values)

    def update_selection(self, start: Point, end: Point) -> None:
        self.selection_system.update_selection(start, end)

    def end_selection(self) -> None:
        self.selection_system.end_selection()

    def tick(self) -> None:
        self.timer_system.tick()

    def advance(self, dt: float) -> None:
        self.event_bus.emit(EVENT_TICK, dt=dt)

    def check_game_over(self) -> bool:
        return self.game_flow_system.check_game_over()

    def snapshot(self) -> GameSnapshot:
        state = get_game_state(self.world)
        selection = get_selection_state(self.world)
        cells = tuple(
            CellSnapshot(
                index=pos.index,
                row=pos.row,
                col=pos.col,
                value=value.value,
                present=switch.active,
                selected=flag.selected,
            )
            for _, pos, value, switch, flag in iter_cells(self.world)
        )
        return GameSnapshot(
            cells=cells,
            score=state.score,
            time_remaining=state.time_remaining,
            selection_start=selection.start,
            selection_end=selection.end,
            is_selecting=selection.is_selecting,
            selected_sum=selection.selected_sum,
            is_started=state.is_started,
            game_over=state.game_over,
            mode=state.mode,
            end_reason=state.end_reason,
        )
