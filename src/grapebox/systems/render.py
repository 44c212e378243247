from esper import World

from grapebox.constants import (
    CELL_FONT_RATIO,
    GAME_OVER_FONT_SIZE,
    HUD_FONT_SIZE,
    SELECTION_BORDER_WIDTH,
    SELECTION_INDICATOR_OFFSET,
    SELECTION_INDICATOR_TOP_OFFSET,
    SELECTION_OPACITY,
)
from grapebox.components.game_state import GameMode
from grapebox.events.bus import EventBus
from grapebox.systems.board_ops import iter_cells
from grapebox.ui.layout import build_cell_geometry, compute_button_rect
from grapebox.utils.game_state import format_time, get_game_state, get_rules, get_selection_state
from grapebox.utils.geometry import Rect

CELL_COLOR = (109, 40, 217)
CELL_SELECTED_COLOR = (34, 197, 94)
SELECTION_FILL = (191, 219, 254, int(255 * SELECTION_OPACITY))
SELECTION_OUTLINE = (59, 130, 246)
MATCH_BADGE_COLOR = (34, 197, 94)
MISS_BADGE_COLOR = (59, 130, 246)
START_BUTTON_COLOR = (34, 197, 94)
NEW_GAME_BUTTON_COLOR = (59, 130, 246)


class RenderSystem:
    """Draws the board, the drag rectangle and the HUD with arcade."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self._last_layout: dict[int, Rect] = {}

    def cell_geometry(self) -> dict[int, Rect]:
        """Layout used both for drawing and for selection hit-testing."""
        rules = get_rules(self.world)
        return build_cell_geometry(self.window.width, self.window.height, rules.rows, rules.cols)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        self._last_layout = self.cell_geometry()
        if headless:
            return
        state = get_game_state(self.world)
        if state.mode == GameMode.NOT_STARTED:
            self._draw_title(arcade)
            self._draw_button(arcade, "Start Game", START_BUTTON_COLOR)
            return
        self._draw_hud(arcade, state)
        self._draw_cells(arcade)
        self._draw_selection(arcade)
        if state.game_over:
            self._draw_game_over(arcade, state)
        self._draw_button(arcade, "New Game", NEW_GAME_BUTTON_COLOR)

    def _draw_title(self, arcade):
        arcade.draw_text(
            "Grape Box",
            self.window.width / 2,
            self.window.height * 0.6,
            arcade.color.WHITE,
            40,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )

    def _draw_hud(self, arcade, state):
        top = self.window.height - 30
        arcade.draw_text(
            f"Time: {format_time(state.time_remaining)}",
            self.window.width / 2 - 120,
            top,
            arcade.color.WHITE,
            HUD_FONT_SIZE,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
        arcade.draw_text(
            f"Score: {state.score}",
            self.window.width / 2 + 120,
            top,
            arcade.color.WHITE,
            HUD_FONT_SIZE,
            anchor_x="center",
            anchor_y="center",
        )

    def _draw_cells(self, arcade):
        for _, pos, value, switch, flag in iter_cells(self.world):
            if not switch.active:
                continue
            rect = self._last_layout.get(pos.index)
            if rect is None:
                continue
            cx, cy = rect.center
            radius = rect.width / 2
            color = CELL_SELECTED_COLOR if flag.selected else CELL_COLOR
            if flag.selected:
                radius *= 1.1
            arcade.draw_circle_filled(cx, cy, radius, color)
            arcade.draw_text(
                str(value.value),
                cx,
                cy,
                arcade.color.WHITE,
                max(8, int(rect.width * CELL_FONT_RATIO)),
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

    def _draw_selection(self, arcade):
        selection = get_selection_state(self.world)
        if not selection.is_selecting or selection.start is None or selection.end is None:
            return
        rect = Rect.from_points(selection.start, selection.end)
        arcade.draw_lrbt_rectangle_filled(rect.left, rect.right, rect.bottom, rect.top, SELECTION_FILL)
        arcade.draw_lrbt_rectangle_outline(
            rect.left, rect.right, rect.bottom, rect.top, SELECTION_OUTLINE, SELECTION_BORDER_WIDTH
        )
        target = get_rules(self.world).target_sum
        badge = MATCH_BADGE_COLOR if selection.selected_sum == target else MISS_BADGE_COLOR
        bx = rect.right + SELECTION_INDICATOR_OFFSET + 14
        by = rect.top + SELECTION_INDICATOR_TOP_OFFSET - 14
        arcade.draw_circle_filled(bx, by, 16, badge)
        arcade.draw_text(
            str(selection.selected_sum),
            bx,
            by,
            arcade.color.WHITE,
            14,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )

    def _draw_game_over(self, arcade, state):
        message = "Time's up!" if state.mode == GameMode.TIME_UP else "Game Over! All grapes cleared!"
        arcade.draw_text(
            message,
            self.window.width / 2,
            self.window.height / 2,
            CELL_SELECTED_COLOR,
            GAME_OVER_FONT_SIZE,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )

    def _draw_button(self, arcade, label, fill):
        rect = compute_button_rect(self.window.width, self.window.height)
        arcade.draw_lrbt_rectangle_filled(rect.left, rect.right, rect.bottom, rect.top, fill)
        arcade.draw_lrbt_rectangle_outline(rect.left, rect.right, rect.bottom, rect.top, arcade.color.WHITE, 2)
        cx, cy = rect.center
        arcade.draw_text(
            label,
            cx,
            cy,
            arcade.color.WHITE,
            20,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )
