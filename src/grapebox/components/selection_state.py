from dataclasses import dataclass, field
from typing import List, Optional

from grapebox.utils.geometry import Point


@dataclass
class SelectionState:
    """Drag rectangle and the cells it currently covers.

    ``selected`` holds row-major cell indices in ascending order.
    """
    start: Optional[Point] = None
    end: Optional[Point] = None
    is_selecting: bool = False
    selected_sum: int = 0
    selected: List[int] = field(default_factory=list)

    def reset(self) -> None:
        self.start = None
        self.end = None
        self.is_selecting = False
        self.selected_sum = 0
        self.selected = []
