from dataclasses import dataclass
from typing import Optional


default_seed = 12345


@dataclass
class GameConfig:
    map_width: int = 80
    map_height: int = 43
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 30
    placement_attempts_per_cell: int = 2  # retry cap = room interior area * this
    seed: Optional[int] = default_seed
    torch_radius: int = 10
    # items
    heal_amount: int = 40
    lightning_damage: int = 40
    lightning_range: int = 5
    confuse_range: int = 8
    confuse_num_turns: int = 10
    fireball_radius: int = 3
    fireball_damage: int = 25
    inventory_limit: int = 26
    # progression
    level_up_base: int = 200
    level_up_factor: int = 150
    level_up_hp: int = 20
    level_up_power: int = 1
    level_up_defense: int = 1
    # logs
    message_log_capacity: int = 100
    debug_log_path: Optional[str] = None  # None disables the debug log
