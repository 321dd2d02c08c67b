from dataclasses import dataclass
from enum import Enum


class DeathCallback(Enum):
    PLAYER = "player"
    MONSTER = "monster"


@dataclass
class Fighter:
    """Combat stats. hp may dip below zero on the killing blow; it is not
    clamped back afterwards."""

    hp: int
    base_max_hp: int
    base_defense: int
    base_power: int
    xp: int = 0
    on_death: DeathCallback = DeathCallback.MONSTER
