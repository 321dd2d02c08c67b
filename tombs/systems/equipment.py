from __future__ import annotations

from typing import Any, Optional

from tombs import colors
from tombs.state.entities import Entity
from tombs.state.items import Slot


def get_equipped_in_slot(game: Any, slot: Slot) -> Optional[Entity]:
    for item in game.inventory:
        if item.equipment is not None and item.equipment.equipped and item.equipment.slot == slot:
            return item
    return None


def _check_equippable(game: Any, ent: Entity, verb: str) -> bool:
    if ent.item is None:
        game.log.add(f"Can't {verb} {ent.name} because it's not an Item.", colors.RED)
        return False
    if ent.equipment is None:
        game.log.add(f"Can't {verb} {ent.name} because it's not an Equipment.", colors.RED)
        return False
    return True


def equip(game: Any, ent: Entity) -> bool:
    """Equip an item, first taking off whatever occupies its slot."""
    if not _check_equippable(game, ent, "equip"):
        return False
    equipment = ent.equipment
    if equipment.equipped:
        return True
    current = get_equipped_in_slot(game, equipment.slot)
    if current is not None and current is not ent:
        unequip(game, current)
    equipment.equipped = True
    game.log.add(f"Equipped {ent.name} on {equipment.slot}.", colors.LIGHT_GREEN)
    return True


def unequip(game: Any, ent: Entity) -> bool:
    if not _check_equippable(game, ent, "dequip"):
        return False
    equipment = ent.equipment
    if equipment.equipped:
        equipment.equipped = False
        game.log.add(f"Dequipped {ent.name} from {equipment.slot}.", colors.LIGHT_YELLOW)
    return True


def toggle(game: Any, ent: Entity) -> bool:
    if ent.equipment is not None and ent.equipment.equipped:
        return unequip(game, ent)
    return equip(game, ent)
