"""Session rules, validated once when the world is built."""
from __future__ import annotations

from dataclasses import dataclass

from grapebox import constants
from grapebox.utils.partitions import can_complete


@dataclass(frozen=True, slots=True)
class GameRules:
    rows: int = constants.GRID_ROWS
    cols: int = constants.GRID_COLS
    target_sum: int = constants.TARGET_SUM
    max_cell_value: int = constants.MAX_APPLE_VALUE
    total_cells: int | None = None
    game_duration: int = constants.GAME_DURATION

    def __post_init__(self) -> None:
        for name in ("rows", "cols", "target_sum", "max_cell_value", "game_duration"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if self.total_cells is None:
            object.__setattr__(self, "total_cells", self.rows * self.cols)
        if self.total_cells != self.rows * self.cols:
            raise ValueError(
                f"total_cells ({self.total_cells}) must equal rows * cols ({self.rows * self.cols})"
            )
        if not can_complete(self.target_sum, self.total_cells, self.target_sum, self.max_cell_value):
            raise ValueError(
                f"{self.total_cells} cells cannot be split into runs summing to "
                f"{self.target_sum} with values up to {self.max_cell_value}"
            )

    @classmethod
    def from_constants(cls) -> "GameRules":
        return cls(
            rows=constants.GRID_ROWS,
            cols=constants.GRID_COLS,
            target_sum=constants.TARGET_SUM,
            max_cell_value=constants.MAX_APPLE_VALUE,
            total_cells=constants.TOTAL_APPLES,
            game_duration=constants.GAME_DURATION,
        )
