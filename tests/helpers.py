from __future__ import annotations

import random
from typing import Dict, Sequence

from grapebox.components.game_rules import GameRules
from grapebox.engine import GrapeBoxEngine
from grapebox.utils.geometry import Rect

CELL = 10


def grid_geometry(rows: int, cols: int, size: int = CELL) -> Dict[int, Rect]:
    """Synthetic layout: row r / col c occupies [c*size+1, (c+1)*size-1] x [r*size+1, (r+1)*size-1]."""
    return {
        row * cols + col: Rect(col * size + 1, row * size + 1, (col + 1) * size - 1, (row + 1) * size - 1)
        for row in range(rows)
        for col in range(cols)
    }


def cell_center(row: int, col: int, size: int = CELL) -> tuple[float, float]:
    return (col * size + size / 2, row * size + size / 2)


def make_engine(
    values: Sequence[int] | None = None,
    *,
    rows: int = 2,
    cols: int = 3,
    target_sum: int = 10,
    game_duration: int = 60,
    seed: int = 7,
    start: bool = True,
) -> GrapeBoxEngine:
    """Engine on a small board with synthetic geometry, optionally started on fixed values."""
    rules = GameRules(rows=rows, cols=cols, target_sum=target_sum, game_duration=game_duration)
    engine = GrapeBoxEngine(
        rules=rules,
        rng=random.Random(seed),
        geometry=grid_geometry(rows, cols),
    )
    if start:
        engine.start_game(values)
    return engine


class Capture:
    """Records the payload of every emission of one event."""

    def __init__(self, bus, name):
        self.received = []
        bus.subscribe(name, self.on_event)

    def on_event(self, sender, **payload):
        self.received.append(payload)
