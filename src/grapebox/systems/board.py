import logging
from typing import List, Sequence

from esper import World

from grapebox.events.bus import EventBus, EVENT_BOARD_GENERATED
from grapebox.systems.board_generator import generate_valid_board, partition_count
from grapebox.systems.board_ops import spawn_cells
from grapebox.utils.game_state import get_rules

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the cell entities: builds a fresh board for every game."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.rng = getattr(world, "random", None)

    def generate(self) -> List[int]:
        rules = get_rules(self.world)
        return generate_valid_board(
            rules.total_cells,
            rules.target_sum,
            rules.max_cell_value,
            rng=self.rng,
        )

    def reset_board(self, values: Sequence[int] | None = None) -> List[int]:
        """Replace the board with ``values`` (or a newly generated board).

        Supplied values must each lie in [1, max_cell_value] and add up to a
        multiple of the target sum; otherwise ValueError is raised and the
        current board is left untouched.
        """
        if values is None:
            values = self.generate()
        values = list(values)
        rules = get_rules(self.world)
        for value in values:
            if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= rules.max_cell_value:
                raise ValueError(f"cell value {value!r} outside [1, {rules.max_cell_value}]")
        partitions = partition_count(values, rules.target_sum)
        spawn_cells(self.world, values)
        logger.debug("Board ready: %d cells, sum %d", len(values), sum(values))
        self.event_bus.emit(EVENT_BOARD_GENERATED, values=values, partitions=partitions)
        return values
