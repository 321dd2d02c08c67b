# tombs/state/entities.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from tombs import colors
from tombs.state.actors import Fighter
from tombs.state.items import Equipment, ItemKind

if TYPE_CHECKING:
    from tombs.systems.ai import Ai

Pos = Tuple[int, int]


@dataclass(eq=False)
class Entity:
    """Generic thing that exists on a map tile.

    The player, monsters, items and dungeon features (stairs) are all
    Entities; capabilities are the optional components below.
    """
    name: str
    pos: Pos

    # Visuals
    glyph: str = "?"
    color: colors.Color = colors.WHITE
    always_visible: bool = False  # drawn once explored, even out of FOV
    kind: str = "generic"  # player, monster, item, feature, corpse

    # Collision
    blocks: bool = False
    alive: bool = False

    # Components
    fighter: Optional[Fighter] = None
    ai: Optional["Ai"] = None
    item: Optional[ItemKind] = None
    equipment: Optional[Equipment] = None

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]

    def move_to(self, x: int, y: int) -> None:
        self.pos = (x, y)

    def distance(self, x: int, y: int) -> float:
        return math.hypot(x - self.x, y - self.y)

    def distance_to(self, other: "Entity") -> float:
        return self.distance(other.x, other.y)

    def __repr__(self) -> str:
        return f"Entity({self.name!r} at {self.pos})"
