import pytest

from grapebox import constants
from grapebox.components.game_rules import GameRules


def test_rules_from_constants():
    rules = GameRules.from_constants()
    assert rules.rows == constants.GRID_ROWS
    assert rules.cols == constants.GRID_COLS
    assert rules.total_cells == constants.TOTAL_APPLES
    assert rules.target_sum == constants.TARGET_SUM
    assert rules.game_duration == constants.GAME_DURATION


def test_total_cells_defaults_to_grid_size():
    assert GameRules(rows=3, cols=4).total_cells == 12


@pytest.mark.parametrize(
    "kwargs",
    [
        {"target_sum": 0},
        {"target_sum": -10},
        {"max_cell_value": 0},
        {"rows": 0},
        {"game_duration": 0},
        {"rows": 2, "cols": 3, "total_cells": 7},
        # A single cell cannot reach 10 with values up to 9.
        {"rows": 1, "cols": 1, "target_sum": 10, "max_cell_value": 9},
    ],
)
def test_invalid_rules_fail_fast(kwargs):
    with pytest.raises(ValueError):
        GameRules(**kwargs)
