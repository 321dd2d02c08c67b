"""Ray-cast field of view.

360 rays at 1 degree steps leave from the centre of the origin cell and walk
one unit per step for `radius` steps. A ray stops at the first sight-blocking
cell, which itself stays visible. At long range neighbouring rays can leave
gaps; for torch-sized radii that is accepted.
"""
from __future__ import annotations

import math
from typing import List, Set, Tuple

from tombs.state.world import World

# unit vectors for every whole degree, computed once
_RAYS: List[Tuple[float, float]] = [
    (math.cos(math.radians(deg)), math.sin(math.radians(deg))) for deg in range(360)
]


class Fov:
    """Visibility grid with its own copy of the sight-blocking layer.

    The blocking layer is snapshotted from a World at construction and never
    re-read, so a new Fov must be built whenever the map is replaced.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._blocks: List[List[bool]] = [[False] * width for _ in range(height)]
        self._visible: List[List[bool]] = [[False] * width for _ in range(height)]

    @classmethod
    def from_world(cls, world: World) -> "Fov":
        fov = cls(world.width, world.height)
        for y in range(world.height):
            for x in range(world.width):
                fov._blocks[y][x] = world.tiles[y][x].blocks_sight
        return fov

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def reset(self) -> None:
        for row in self._visible:
            for x in range(len(row)):
                row[x] = False

    def recompute(self, origin_x: int, origin_y: int, radius: int) -> None:
        self.reset()
        if not self.in_bounds(origin_x, origin_y):
            return
        self._visible[origin_y][origin_x] = True
        for dir_x, dir_y in _RAYS:
            self._cast(origin_x, origin_y, dir_x, dir_y, radius)

    def _cast(self, origin_x: int, origin_y: int, dir_x: float, dir_y: float, radius: int) -> None:
        ox = origin_x + 0.5
        oy = origin_y + 0.5
        for _ in range(radius):
            cx = math.floor(ox)
            cy = math.floor(oy)
            if not self.in_bounds(cx, cy):
                return
            self._visible[cy][cx] = True
            if self._blocks[cy][cx]:
                return
            ox += dir_x
            oy += dir_y

    def is_in_fov(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self._visible[y][x]

    def visible_cells(self) -> Set[Tuple[int, int]]:
        return {
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self._visible[y][x]
        }
