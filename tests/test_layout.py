from grapebox.ui.layout import board_rect, build_cell_geometry, compute_board_geometry, compute_button_rect
from grapebox.utils.geometry import Rect, coerce_point


def test_board_fits_inside_window():
    cell_size, start_x, start_y = compute_board_geometry(900, 640, 10, 17)
    assert cell_size > 0
    assert start_x >= 0
    assert start_x + 17 * cell_size <= 900
    assert start_y + 10 * cell_size <= 640


def test_cells_do_not_overlap_and_row_zero_is_on_top():
    geometry = build_cell_geometry(900, 640, 10, 17)
    assert len(geometry) == 170
    first, right, below = geometry[0], geometry[1], geometry[17]
    assert not first.intersects(right)
    assert not first.intersects(below)
    assert right.left > first.right
    assert below.top < first.bottom
    board = board_rect(900, 640, 10, 17)
    assert all(board.left <= r.left and r.right <= board.right for r in geometry.values())


def test_button_sits_below_board():
    button = compute_button_rect(900, 640)
    board = board_rect(900, 640, 10, 17)
    assert button.top <= board.bottom
    assert button.left < 450 < button.right


def test_rect_intersection_is_inclusive():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(10, 10, 20, 20))
    assert a.intersects(Rect(2, 2, 3, 3))
    assert not a.intersects(Rect(10.5, 0, 20, 10))
    assert Rect.from_points((5, 9), (1, 2)) == Rect(1, 2, 5, 9)


def test_coerce_point_accepts_only_finite_pairs():
    assert coerce_point((1, "2.5")) == (1.0, 2.5)
    assert coerce_point([3, 4]) == (3.0, 4.0)
    assert coerce_point("12") is None
    assert coerce_point(b"12") is None
    assert coerce_point((float("nan"), 1)) is None
    assert coerce_point((1, float("-inf"))) is None
    assert coerce_point((1, 2, 3)) is None
    assert coerce_point(None) is None
