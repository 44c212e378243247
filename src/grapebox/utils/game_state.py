from __future__ import annotations

from esper import World

from grapebox.components.game_rules import GameRules
from grapebox.components.game_state import GameState
from grapebox.components.game_timer import GameTimer
from grapebox.components.selection_state import SelectionState


def _singleton(world: World, component_type):
    for _, component in world.get_component(component_type):
        return component
    raise RuntimeError(f"{component_type.__name__} resource not found")


def get_game_state(world: World) -> GameState:
    return _singleton(world, GameState)


def get_selection_state(world: World) -> SelectionState:
    return _singleton(world, SelectionState)


def get_rules(world: World) -> GameRules:
    return _singleton(world, GameRules)


def get_timer(world: World) -> GameTimer:
    return _singleton(world, GameTimer)


def format_time(seconds: int) -> str:
    """Render a countdown as m:ss."""
    seconds = max(0, int(seconds))
    minutes, remaining = divmod(seconds, 60)
    return f"{minutes}:{remaining:02d}"
