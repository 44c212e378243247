from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from esper import World

from grapebox.components.active_switch import ActiveSwitch
from grapebox.components.board import Board
from grapebox.components.board_position import BoardPosition
from grapebox.components.cell import CellSelection, CellValue

CellEntry = Tuple[int, BoardPosition, CellValue, ActiveSwitch, CellSelection]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board resource not found")


def iter_cells(world: World) -> List[CellEntry]:
    """All cell entities in row-major order."""
    entries = [
        (ent, pos, value, switch, selection)
        for ent, (pos, value, switch, selection) in world.get_components(
            BoardPosition, CellValue, ActiveSwitch, CellSelection
        )
    ]
    entries.sort(key=lambda entry: entry[1].index)
    return entries


def spawn_cells(world: World, values: Sequence[int]) -> List[int]:
    """Replace every cell entity with a fresh set built from ``values``."""
    board = get_board(world)
    if len(values) != board.size:
        raise ValueError(f"expected {board.size} values, got {len(values)}")
    for entity, _ in list(world.get_component(BoardPosition)):
        world.delete_entity(entity, immediate=True)
    created: List[int] = []
    for index, value in enumerate(values):
        row, col = divmod(index, board.cols)
        created.append(
            world.create_entity(
                BoardPosition(row=row, col=col, index=index),
                CellValue(value=int(value)),
                ActiveSwitch(active=True),
                CellSelection(),
            )
        )
    return created


def present_values(world: World) -> List[int | None]:
    """Row-major values with None in place of cleared cells."""
    return [value.value if switch.active else None for _, _, value, switch, _ in iter_cells(world)]


def clear_selection_flags(world: World) -> None:
    for _, selection in world.get_component(CellSelection):
        selection.selected = False


def deactivate_cells(world: World, indices: Iterable[int]) -> List[Tuple[int, int]]:
    """Mark the given present cells absent; returns (index, value) for each one cleared."""
    wanted = set(indices)
    cleared: List[Tuple[int, int]] = []
    for _, pos, value, switch, selection in iter_cells(world):
        if pos.index not in wanted or not switch.active:
            continue
        switch.active = False
        selection.selected = False
        cleared.append((pos.index, value.value))
    return cleared


def is_board_cleared(world: World) -> bool:
    """True when the board has cells and none of them is present."""
    entries = list(world.get_component(ActiveSwitch))
    if not entries:
        return False
    return all(not switch.active for _, switch in entries)
