from __future__ import annotations

import math
from typing import Any

from tombs.state.entities import Entity


def is_blocked(game: Any, x: int, y: int) -> bool:
    """A wall, the map edge, or any blocking entity."""
    if game.world.is_blocked(x, y):
        return True
    return any(ent.blocks and ent.pos == (x, y) for ent in game.entities)


def move_by(game: Any, ent: Entity, dx: int, dy: int) -> bool:
    nx, ny = ent.x + dx, ent.y + dy
    if (dx, dy) != (0, 0) and is_blocked(game, nx, ny):
        return False
    ent.move_to(nx, ny)
    return True


def move_towards(game: Any, ent: Entity, target_x: int, target_y: int) -> bool:
    """One step along the normalised delta, snapped to the 8 compass directions.

    Only the destination cell is checked; diagonal corners are not.
    """
    dx = target_x - ent.x
    dy = target_y - ent.y
    distance = math.hypot(dx, dy)
    if distance == 0:
        return False
    return move_by(game, ent, round(dx / distance), round(dy / distance))
