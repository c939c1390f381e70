# geometry.py
from dataclasses import dataclass


@dataclass
class Rect:
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Rect needs a positive size, got {self.width}x{self.height}")

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def copy(self) -> "Rect":
        return Rect(self.x, self.y, self.width, self.height)


def intersects(a: Rect, b: Rect) -> bool:
    """Axis-aligned overlap test. Rects that only share an edge do not intersect."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def contains_point(rect: Rect, x: int, y: int) -> bool:
    return rect.x <= x < rect.right and rect.y <= y < rect.bottom
