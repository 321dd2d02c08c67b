from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned room bounds. The walls sit on x1/x2 and y1/y2; the
    carved interior is the open range (x1, x2) x (y1, y2)."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> "Rect":
        return cls(x, y, x + w, y + h)

    @property
    def center(self) -> Tuple[int, int]:
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: "Rect") -> bool:
        # inclusive: rooms sharing a wall count as overlapping
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def interior(self) -> Iterator[Tuple[int, int]]:
        for x in range(self.x1 + 1, self.x2):
            for y in range(self.y1 + 1, self.y2):
                yield (x, y)

    @property
    def interior_area(self) -> int:
        return max(0, self.x2 - self.x1 - 1) * max(0, self.y2 - self.y1 - 1)

    def contains_interior(self, x: int, y: int) -> bool:
        return self.x1 < x < self.x2 and self.y1 < y < self.y2
