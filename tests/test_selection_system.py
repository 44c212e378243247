from grapebox.events.bus import (
    EVENT_MATCH_CLEARED,
    EVENT_MATCH_REJECTED,
    EVENT_SELECTION_CHANGED,
    EVENT_SELECTION_CLEARED,
    EVENT_SELECTION_END_REQUEST,
    EVENT_SELECTION_UPDATE_REQUEST,
)
from grapebox.systems.board_ops import present_values

from tests.helpers import Capture, cell_center, make_engine

#  row 0: 4 6 3
#  row 1: 1 1 5
VALUES = [4, 6, 3, 1, 1, 5]


def test_matching_pair_is_cleared_and_scores_one():
    engine = make_engine(VALUES)
    cleared = Capture(engine.event_bus, EVENT_MATCH_CLEARED)
    engine.update_selection(cell_center(0, 0), cell_center(0, 1))
    snap = engine.snapshot()
    assert snap.selected_indices == (0, 1)
    assert snap.selected_sum == 10
    assert snap.is_selecting

    engine.end_selection()
    snap = engine.snapshot()
    assert snap.score == 1
    assert snap.values == (None, None, 3, 1, 1, 5)
    assert cleared.received == [{"indices": [0, 1], "values": [4, 6], "score": 1}]


def test_non_matching_selection_leaves_board_alone():
    engine = make_engine(VALUES)
    rejected = Capture(engine.event_bus, EVENT_MATCH_REJECTED)
    engine.update_selection(cell_center(0, 2), cell_center(1, 2))
    assert engine.snapshot().selected_sum == 8

    engine.end_selection()
    snap = engine.snapshot()
    assert snap.score == 0
    assert snap.values == tuple(VALUES)
    assert rejected.received == [{"indices": [2, 5], "selected_sum": 8}]


def test_selection_state_resets_after_release():
    engine = make_engine(VALUES)
    engine.update_selection(cell_center(0, 0), cell_center(1, 2))
    engine.end_selection()
    snap = engine.snapshot()
    assert not snap.is_selecting
    assert snap.selection_start is None and snap.selection_end is None
    assert snap.selected_sum == 0
    assert snap.selected_indices == ()


def test_repeated_update_is_idempotent():
    engine = make_engine(VALUES)
    rect = (cell_center(0, 1), cell_center(1, 2))
    engine.update_selection(*rect)
    first = engine.snapshot()
    engine.update_selection(*rect)
    engine.update_selection(*rect)
    second = engine.snapshot()
    assert first.selected_indices == second.selected_indices == (1, 2, 4, 5)
    assert first.selected_sum == second.selected_sum == 15


def test_shrinking_drag_deselects_cells():
    engine = make_engine(VALUES)
    engine.update_selection(cell_center(0, 0), cell_center(1, 2))
    engine.update_selection(cell_center(0, 0), cell_center(0, 0))
    snap = engine.snapshot()
    assert snap.selected_indices == (0,)
    assert snap.selected_sum == 4


def test_reversed_drag_direction_selects_same_cells():
    engine = make_engine(VALUES)
    engine.update_selection(cell_center(1, 2), cell_center(0, 1))
    assert engine.snapshot().selected_indices == (1, 2, 4, 5)


def test_empty_selection_never_matches():
    engine = make_engine(VALUES)
    engine.update_selection((-50, -50), (-40, -40))
    snap = engine.snapshot()
    assert snap.selected_indices == ()
    assert snap.selected_sum == 0
    engine.end_selection()
    assert engine.snapshot().score == 0


def test_drag_from_outside_board_hits_overlapping_cells():
    engine = make_engine(VALUES)
    engine.update_selection((-30, -30), cell_center(0, 1))
    assert engine.snapshot().selected_indices == (0, 1)


def test_cleared_cells_are_ignored_by_later_selections():
    engine = make_engine(VALUES)
    engine.update_selection(cell_center(0, 0), cell_center(0, 1))
    engine.end_selection()
    engine.update_selection(cell_center(0, 0), cell_center(0, 2))
    snap = engine.snapshot()
    assert snap.selected_indices == (2,)
    assert snap.selected_sum == 3


def test_selection_before_start_is_ignored():
    engine = make_engine(start=False)
    engine.update_selection(cell_center(0, 0), cell_center(0, 1))
    snap = engine.snapshot()
    assert not snap.is_selecting
    assert snap.cells == ()
    engine.end_selection()
    assert engine.snapshot().score == 0


def test_bus_requests_drive_selection():
    engine = make_engine(VALUES)
    changed = Capture(engine.event_bus, EVENT_SELECTION_CHANGED)
    cleared = Capture(engine.event_bus, EVENT_SELECTION_CLEARED)
    engine.event_bus.emit(EVENT_SELECTION_UPDATE_REQUEST, start=cell_center(0, 0), end=cell_center(0, 1))
    engine.event_bus.emit(EVENT_SELECTION_UPDATE_REQUEST, start=None, end=(1, 2))
    engine.event_bus.emit(EVENT_SELECTION_END_REQUEST)
    assert len(changed.received) == 1
    assert changed.received[0]["selected_sum"] == 10
    assert len(cleared.received) == 1
    assert present_values(engine.world)[:2] == [None, None]


def test_geometry_may_be_supplied_lazily():
    engine = make_engine(VALUES)
    calls = []
    table = dict(engine.selection_system.cell_geometry())

    def provider():
        calls.append(1)
        return table

    engine.set_geometry(provider)
    engine.update_selection(cell_center(1, 0), cell_center(1, 1))
    assert calls
    assert engine.snapshot().selected_sum == 2


def test_non_finite_points_are_ignored():
    engine = make_engine([4, 6], rows=1, cols=2)
    nan = float("nan")
    engine.update_selection((nan, nan), (nan, nan))
    engine.update_selection(cell_center(0, 0), (float("inf"), 5))
    snap = engine.snapshot()
    assert not snap.is_selecting
    assert snap.selected_indices == ()
    engine.end_selection()
    snap = engine.snapshot()
    assert snap.values == (4, 6)
    assert snap.score == 0
    assert not snap.game_over


def test_non_finite_bus_request_is_ignored():
    engine = make_engine([4, 6], rows=1, cols=2)
    changed = Capture(engine.event_bus, EVENT_SELECTION_CHANGED)
    engine.event_bus.emit(EVENT_SELECTION_UPDATE_REQUEST, start=(float("nan"), 0), end=(5, 5))
    engine.event_bus.emit(EVENT_SELECTION_UPDATE_REQUEST, start="12", end="34")
    assert changed.received == []
