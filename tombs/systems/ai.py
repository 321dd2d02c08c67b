"""AI behaviors and dispatcher.

An Ai value is the monster's current state. Each turn the dispatcher runs
the state's behavior and stores whatever state it returns, so a behavior
can replace itself (confusion wearing off hands back the wrapped state).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from tombs import colors
from tombs.state.entities import Entity
from tombs.systems import combat, movement


@dataclass
class BasicAi:
    """Chase the player while it can see them; melee when adjacent."""


@dataclass
class ConfusedAi:
    """Stagger randomly for num_turns more turns, then revert to previous_ai."""

    previous_ai: "Ai"
    num_turns: int


Ai = Union[BasicAi, ConfusedAi]


def take_turn(game: Any, monster: Entity) -> None:
    ai = monster.ai
    if ai is None:
        return
    if isinstance(ai, ConfusedAi):
        new_ai = _confused(game, monster, ai)
    elif isinstance(ai, BasicAi):
        new_ai = _basic(game, monster, ai)
    else:
        raise TypeError(f"Unknown ai state {ai!r} on {monster!r}")
    # death handlers clear ai; don't resurrect it
    if monster.ai is ai:
        monster.ai = new_ai


# ---------------------------------------------------------------------------
# Behaviors

def _basic(game: Any, monster: Entity, ai: BasicAi) -> Ai:
    """Seen by the player: step closer, or attack when within reach.

    Out of sight the monster idles; it keeps no memory of where the player was.
    """
    if not game.fov.is_in_fov(monster.x, monster.y):
        return ai
    player = game.player
    if monster.distance_to(player) >= 2.0:
        movement.move_towards(game, monster, player.x, player.y)
    elif player.fighter is not None and player.fighter.hp > 0:
        combat.attack(game, monster, player)
    return ai


def _confused(game: Any, monster: Entity, ai: ConfusedAi) -> Ai:
    if ai.num_turns >= 0:
        rng = game.rng
        movement.move_by(game, monster, *rng.stagger())
        return ConfusedAi(previous_ai=ai.previous_ai, num_turns=ai.num_turns - 1)
    game.log.add(f"The {monster.name} is no longer confused!", colors.RED)
    return ai.previous_ai


def confuse(monster: Entity, num_turns: int) -> ConfusedAi:
    """Wrap the monster's current state (Basic if it had none)."""
    previous = monster.ai if monster.ai is not None else BasicAi()
    confused = ConfusedAi(previous_ai=previous, num_turns=num_turns)
    monster.ai = confused
    return confused
