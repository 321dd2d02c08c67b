from dataclasses import dataclass
from enum import Enum


class ItemKind(Enum):
    """Which use-effect an item triggers."""

    HEAL = "heal"
    LIGHTNING = "lightning"
    CONFUSE = "confuse"
    FIREBALL = "fireball"
    SWORD = "sword"
    SHIELD = "shield"


class Slot(Enum):
    LEFT_HAND = "left hand"
    RIGHT_HAND = "right hand"
    HEAD = "head"

    def __str__(self) -> str:
        return self.value


@dataclass
class Equipment:
    slot: Slot
    equipped: bool = False
    power_bonus: int = 0
    defense_bonus: int = 0
    max_hp_bonus: int = 0
