from dataclasses import dataclass

@dataclass(slots=True)
class CellValue:
    """Number printed on a cell. Presence is tracked by ActiveSwitch."""
    value: int


@dataclass(slots=True)
class CellSelection:
    """Transient highlight flag; recomputed on every selection update."""
    selected: bool = False
