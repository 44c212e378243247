from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    rows: int
    cols: int

    @property
    def size(self) -> int:
        return self.rows * self.cols
