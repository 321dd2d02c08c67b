from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class Tile:
    blocked: bool = True
    blocks_sight: bool = True
    explored: bool = False

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, blocks_sight=True)

    @classmethod
    def floor(cls) -> "Tile":
        return cls(blocked=False, blocks_sight=False)


def _make_grid(width: int, height: int) -> List[List[Tile]]:
    return [[Tile.wall() for _ in range(width)] for _ in range(height)]


@dataclass
class World:
    """The tile grid of one dungeon level, indexed as tiles[y][x]."""

    width: int
    height: int
    tiles: List[List[Tile]] = field(init=False)

    def __post_init__(self) -> None:
        self.tiles = _make_grid(self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        if not self.in_bounds(x, y):
            return None
        return self.tiles[y][x]

    def is_blocked(self, x: int, y: int) -> bool:
        """Out-of-bounds cells count as blocked."""
        tile = self.get_tile(x, y)
        return tile is None or tile.blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        tile = self.get_tile(x, y)
        return tile is None or tile.blocks_sight

    def carve(self, x: int, y: int) -> None:
        tile = self.get_tile(x, y)
        if tile:
            tile.blocked = False
            tile.blocks_sight = False

    def mark_explored(self, x: int, y: int) -> None:
        tile = self.get_tile(x, y)
        if tile:
            tile.explored = True

    def floor_cells(self) -> List[Tuple[int, int]]:
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if not self.tiles[y][x].blocked
        ]
