from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    """Grid coordinates of a cell; index is the row-major position."""
    row: int
    col: int
    index: int
