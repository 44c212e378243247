import random

from esper import World

from grapebox.components.board import Board
from grapebox.components.game_rules import GameRules
from grapebox.components.game_state import GameState
from grapebox.components.game_timer import GameTimer
from grapebox.components.selection_state import SelectionState
from grapebox.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    *,
    rules: GameRules | None = None,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding the session resources; cells arrive with the first game."""
    rules = rules or GameRules.from_constants()
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "event_bus", event_bus)

    world.create_entity(
        GameState(),
        SelectionState(),
        GameTimer(),
        rules,
    )
    world.create_entity(Board(rows=rules.rows, cols=rules.cols))
    return world
