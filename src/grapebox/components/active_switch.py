from dataclasses import dataclass

@dataclass(slots=True)
class ActiveSwitch:
    """Per-cell occupancy flag.

    active: True while the cell still holds its value; False once cleared.
    Cleared cells are never reactivated within a game.
    """
    active: bool = True
