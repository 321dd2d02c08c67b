"""Melee, damage, healing and death.

Effective stats are base Fighter values plus the bonuses of every equipped
item in the actor's inventory. Only the player carries an inventory, so
monsters always fight with their base values.
"""
from __future__ import annotations

from typing import Any, List, Optional

from tombs import colors
from tombs.state.actors import DeathCallback
from tombs.state.entities import Entity
from tombs.state.items import Equipment


def get_all_equipped(game: Any, ent: Entity) -> List[Equipment]:
    if ent is not game.player:
        return []
    return [
        item.equipment
        for item in game.inventory
        if item.equipment is not None and item.equipment.equipped
    ]


def power(game: Any, ent: Entity) -> int:
    base = ent.fighter.base_power if ent.fighter else 0
    return base + sum(e.power_bonus for e in get_all_equipped(game, ent))


def defense(game: Any, ent: Entity) -> int:
    base = ent.fighter.base_defense if ent.fighter else 0
    return base + sum(e.defense_bonus for e in get_all_equipped(game, ent))


def max_hp(game: Any, ent: Entity) -> int:
    base = ent.fighter.base_max_hp if ent.fighter else 0
    return base + sum(e.max_hp_bonus for e in get_all_equipped(game, ent))


# --- damage / healing ---

def take_damage(game: Any, target: Entity, damage: int) -> Optional[int]:
    """Apply damage; on the killing blow return the target's xp award.

    Death is resolved once: a target already flagged dead returns None no
    matter how far its hp is driven below zero.
    """
    fighter = target.fighter
    if fighter is None:
        return None
    if damage > 0:
        fighter.hp -= damage
    if fighter.hp <= 0 and target.alive:
        target.alive = False
        xp = fighter.xp
        on_death(game, target, fighter.on_death)
        return xp
    return None


def heal(game: Any, target: Entity, amount: int) -> None:
    if target.fighter is None:
        return
    limit = max_hp(game, target)
    target.fighter.hp = min(target.fighter.hp + amount, limit)


def attack(game: Any, attacker: Entity, defender: Entity) -> None:
    """Melee: power minus defense; nothing happens when that is not positive."""
    if attacker is defender:
        raise ValueError(f"{attacker!r} cannot attack itself")
    if defender.fighter is None:
        return
    damage = power(game, attacker) - defense(game, defender)
    if damage > 0:
        game.log.add(
            f"{attacker.name.capitalize()} attacks {defender.name} for {damage} hit points.",
            colors.RED,
        )
        xp = take_damage(game, defender, damage)
        if xp is not None and attacker.fighter is not None:
            attacker.fighter.xp += xp
    else:
        game.log.add(
            f"{attacker.name.capitalize()} attacks {defender.name} but it has no effect!",
            colors.WHITE,
        )


# --- death handlers ---

def player_death(game: Any, player: Entity) -> None:
    game.log.add("You died!", colors.RED)
    player.glyph = "%"
    player.color = colors.DARK_RED
    game._debug(f"[combat] player died at depth {game.dungeon_level}")


def monster_death(game: Any, monster: Entity) -> None:
    xp = monster.fighter.xp if monster.fighter else 0
    game.log.add(
        f"{monster.name.capitalize()} is dead! You gain {xp} experience points.",
        colors.ORANGE,
    )
    monster.glyph = "%"
    monster.color = colors.DARK_RED
    monster.blocks = False
    monster.fighter = None
    monster.ai = None
    monster.kind = "corpse"
    monster.name = f"remains of {monster.name}"


def on_death(game: Any, ent: Entity, callback: DeathCallback) -> None:
    if callback is DeathCallback.PLAYER:
        player_death(game, ent)
    else:
        monster_death(game, ent)
