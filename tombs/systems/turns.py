"""Turn resolution: the player's move-or-attack and the monster pass.

Entities act strictly in storage order. The player sits at index 0 and has
no Ai, so the monster pass skips it without a special case.
"""
from __future__ import annotations

from typing import Any, Optional

from tombs.state.entities import Entity
from tombs.systems import ai, combat, movement


def fighter_at(game: Any, x: int, y: int, exclude: Optional[Entity] = None) -> Optional[Entity]:
    for ent in game.entities:
        if ent is exclude:
            continue
        if ent.fighter is not None and ent.alive and ent.pos == (x, y):
            return ent
    return None


def player_move_or_attack(game: Any, dx: int, dy: int) -> None:
    """Bumping into a living fighter attacks it; anything else is a move."""
    player = game.player
    if (dx, dy) == (0, 0):
        return
    target = fighter_at(game, player.x + dx, player.y + dy, exclude=player)
    if target is not None:
        combat.attack(game, player, target)
        return
    movement.move_by(game, player, dx, dy)


def monsters_act(game: Any) -> None:
    # index loop: the entity list is only appended to during a turn
    for index in range(len(game.entities)):
        ent = game.entities[index]
        if ent.ai is None:
            continue
        ai.take_turn(game, ent)
