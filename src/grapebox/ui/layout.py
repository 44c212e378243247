from functools import lru_cache
from typing import Dict, Tuple

from grapebox.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    BUTTON_HEIGHT,
    BUTTON_WIDTH,
    CELL_PADDING,
    MIN_CELL_SIZE,
    TOP_MARGIN,
)
from grapebox.utils.geometry import Rect


def compute_board_geometry(window_width: int, window_height: int, rows: int, cols: int) -> Tuple[int, float, float]:
    """Return (cell_size, start_x, start_y) for a board centred horizontally.

    start_x/start_y is the bottom-left corner of the board. Rendering and
    hit-testing both go through this so they never disagree.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - TOP_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_size = int(min(max_board_w / cols, max_board_h / rows))
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    start_x = (window_width - cols * cell_size) / 2
    start_y = BOTTOM_MARGIN
    return cell_size, start_x, start_y


def board_rect(window_width: int, window_height: int, rows: int, cols: int) -> Rect:
    cell_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, cols)
    return Rect.from_lbwh(start_x, start_y, cols * cell_size, rows * cell_size)


@lru_cache(maxsize=8)
def _cell_rects(window_width: int, window_height: int, rows: int, cols: int) -> Tuple[Rect, ...]:
    cell_size, start_x, start_y = compute_board_geometry(window_width, window_height, rows, cols)
    inset = CELL_PADDING / 2
    body = max(cell_size - CELL_PADDING, 1)
    rects = []
    for index in range(rows * cols):
        row, col = divmod(index, cols)
        # Row 0 is drawn at the top; arcade's y axis points up.
        left = start_x + col * cell_size + inset
        bottom = start_y + (rows - 1 - row) * cell_size + inset
        rects.append(Rect.from_lbwh(left, bottom, body, body))
    return tuple(rects)


def build_cell_geometry(window_width: int, window_height: int, rows: int, cols: int) -> Dict[int, Rect]:
    """Cell index -> drawn rectangle for the current window size."""
    return dict(enumerate(_cell_rects(int(window_width), int(window_height), rows, cols)))


def compute_button_rect(window_width: int, window_height: int) -> Rect:
    """The start / new game button, centred under the board."""
    left = (window_width - BUTTON_WIDTH) / 2
    bottom = (BOTTOM_MARGIN - BUTTON_HEIGHT) / 2
    return Rect.from_lbwh(left, bottom, BUTTON_WIDTH, BUTTON_HEIGHT)
