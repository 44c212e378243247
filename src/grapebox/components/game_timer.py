from dataclasses import dataclass

from grapebox.constants import TICK_INTERVAL


@dataclass(slots=True)
class GameTimer:
    """Countdown driver state.

    armed: whether frame time should currently turn into ticks.
    elapsed: frame time accumulated towards the next tick.
    """
    armed: bool = False
    elapsed: float = 0.0
    interval: float = TICK_INTERVAL
