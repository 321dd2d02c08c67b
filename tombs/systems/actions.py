from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Protocol

from tombs import colors
from tombs.state.entities import Entity
from tombs.state.items import ItemKind
from tombs.systems import ai, combat, equipment, targeting


class UseResult(Enum):
    USED_UP = "used_up"          # removed from the inventory
    USED_AND_KEPT = "used_and_kept"
    CANCELLED = "cancelled"


class ItemEffect(Protocol):
    """
    Signature for item use-effects.

    game: the Game session
    frontend: collaborator used for targeting prompts
    item: the inventory entity being used
    """
    def __call__(self, game: Any, frontend: Any, item: Entity) -> UseResult: ...


ITEM_EFFECTS: Dict[ItemKind, ItemEffect] = {}


def item_effect(*kinds: ItemKind) -> Callable[[ItemEffect], ItemEffect]:
    def register(func: ItemEffect) -> ItemEffect:
        for kind in kinds:
            ITEM_EFFECTS[kind] = func
        return func
    return register


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------

@item_effect(ItemKind.HEAL)
def cast_heal(game: Any, frontend: Any, item: Entity) -> UseResult:
    player = game.player
    if player.fighter is None:
        return UseResult.CANCELLED
    if player.fighter.hp >= combat.max_hp(game, player):
        game.log.add("You are already at full health.", colors.RED)
        return UseResult.CANCELLED
    game.log.add("Your wounds start to feel better!", colors.LIGHT_VIOLET)
    combat.heal(game, player, game.cfg.heal_amount)
    return UseResult.USED_UP


@item_effect(ItemKind.LIGHTNING)
def cast_lightning(game: Any, frontend: Any, item: Entity) -> UseResult:
    monster = targeting.closest_monster(game, game.cfg.lightning_range)
    if monster is None:
        game.log.add("No enemy is close enough to strike.", colors.RED)
        return UseResult.CANCELLED
    damage = game.cfg.lightning_damage
    game.log.add(
        f"A lightning bolt strikes the {monster.name} with a loud thunder! "
        f"The damage is {damage} hit points.",
        colors.LIGHT_CYAN,
    )
    xp = combat.take_damage(game, monster, damage)
    if xp is not None:
        game.player.fighter.xp += xp
    return UseResult.USED_UP


@item_effect(ItemKind.CONFUSE)
def cast_confuse(game: Any, frontend: Any, item: Entity) -> UseResult:
    monster = targeting.target_monster(
        game,
        frontend,
        max_range=game.cfg.confuse_range,
        prompt="Left-click an enemy to confuse it, or right-click to cancel.",
    )
    if monster is None:
        return UseResult.CANCELLED
    ai.confuse(monster, game.cfg.confuse_num_turns)
    game.log.add(
        f"The eyes of the {monster.name} look vacant, as it starts to stumble around!",
        colors.LIGHT_GREEN,
    )
    return UseResult.USED_UP


@item_effect(ItemKind.FIREBALL)
def cast_fireball(game: Any, frontend: Any, item: Entity) -> UseResult:
    tile = targeting.target_tile(
        game,
        frontend,
        prompt="Left-click a target tile for the fireball, or right-click to cancel.",
    )
    if tile is None:
        return UseResult.CANCELLED
    x, y = tile
    radius = game.cfg.fireball_radius
    damage = game.cfg.fireball_damage
    game.log.add(
        f"The fireball explodes, burning everything within {radius} tiles!",
        colors.ORANGE,
    )
    player = game.player
    for ent in list(game.entities):
        if ent.fighter is None or ent.distance(x, y) > radius:
            continue
        game.log.add(f"The {ent.name} gets burned for {damage} hit points.", colors.ORANGE)
        xp = combat.take_damage(game, ent, damage)
        # the player gets no credit for burning itself
        if xp is not None and ent is not player and player.fighter is not None:
            player.fighter.xp += xp
    return UseResult.USED_UP


@item_effect(ItemKind.SWORD, ItemKind.SHIELD)
def toggle_equipment(game: Any, frontend: Any, item: Entity) -> UseResult:
    if not equipment.toggle(game, item):
        return UseResult.CANCELLED
    return UseResult.USED_AND_KEPT


# ---------------------------------------------------------------------------
# Inventory actions
# ---------------------------------------------------------------------------

def use_item(game: Any, frontend: Any, inventory_index: int) -> UseResult:
    item = game.inventory[inventory_index]
    if item.item is None:
        game.log.add(f"The {item.name} cannot be used.", colors.WHITE)
        return UseResult.CANCELLED
    effect = ITEM_EFFECTS.get(item.item)
    if effect is None:
        game.log.add(f"The {item.name} cannot be used.", colors.WHITE)
        return UseResult.CANCELLED

    logged_before = game.log.total
    result = effect(game, frontend, item)
    if result is UseResult.USED_UP:
        game.inventory.remove(item)
    elif result is UseResult.CANCELLED and game.log.total == logged_before:
        game.log.add("Cancelled", colors.WHITE)
    return result


def item_here(game: Any) -> Entity | None:
    player = game.player
    for ent in game.entities:
        if ent.item is not None and ent.pos == player.pos:
            return ent
    return None


def pick_item_up(game: Any) -> bool:
    """Move the first item under the player into the inventory."""
    ent = item_here(game)
    if ent is None:
        game.log.add("There is nothing here to pick up.", colors.WHITE)
        return False
    if len(game.inventory) >= game.cfg.inventory_limit:
        game.log.add(f"Your inventory is full, cannot pick up {ent.name}.", colors.RED)
        return False
    game.entities.remove(ent)
    game.inventory.append(ent)
    game.log.add(f"You picked up a {ent.name}!", colors.GREEN)
    return True


def drop_item(game: Any, inventory_index: int) -> Entity:
    item = game.inventory[inventory_index]
    if item.equipment is not None and item.equipment.equipped:
        equipment.unequip(game, item)
    game.inventory.pop(inventory_index)
    item.move_to(*game.player.pos)
    game.entities.append(item)
    game.log.add(f"You dropped a {item.name}.", colors.YELLOW)
    return item
