from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Mapping, Tuple, Union

Point = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in screen space (arcade: y grows upward)."""
    left: float
    bottom: float
    right: float
    top: float

    @classmethod
    def from_points(cls, a: Point, b: Point) -> "Rect":
        ax, ay = a
        bx, by = b
        return cls(min(ax, bx), min(ay, by), max(ax, bx), max(ay, by))

    @classmethod
    def from_lbwh(cls, left: float, bottom: float, width: float, height: float) -> "Rect":
        return cls(left, bottom, left + width, bottom + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def center(self) -> Point:
        return ((self.left + self.right) / 2, (self.bottom + self.top) / 2)

    def intersects(self, other: "Rect") -> bool:
        # Closed intervals: rectangles sharing an edge overlap.
        return not (
            other.right < self.left
            or other.left > self.right
            or other.top < self.bottom
            or other.bottom > self.top
        )

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.bottom <= y <= self.top


# Cell index -> on-screen rectangle, or a callable producing the current table.
CellGeometry = Mapping[int, Rect]
GeometrySource = Union[CellGeometry, Callable[[], CellGeometry]]


def coerce_point(value) -> Point | None:
    """Return ``value`` as a finite (x, y) float pair, or None if it is not one."""
    if value is None or isinstance(value, (str, bytes)):
        return None
    try:
        x, y = value
        point = (float(x), float(y))
    except (TypeError, ValueError):
        return None
    if not (math.isfinite(point[0]) and math.isfinite(point[1])):
        return None
    return point
