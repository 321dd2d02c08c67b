"""Monster/item templates (YAML) and the factories that turn them into Entities."""

from .templates import (
    MonsterTemplate,
    ItemTemplate,
    SpawnTables,
    Transition,
    from_dungeon_level,
    ensure_loaded,
    load_monster_templates,
    load_item_templates,
    load_spawn_tables,
)
from .factory import spawn_player, spawn_monster, spawn_item, spawn_stairs, is_stairs

__all__ = [
    "MonsterTemplate",
    "ItemTemplate",
    "SpawnTables",
    "Transition",
    "from_dungeon_level",
    "ensure_loaded",
    "load_monster_templates",
    "load_item_templates",
    "load_spawn_tables",
    "spawn_player",
    "spawn_monster",
    "spawn_item",
    "spawn_stairs",
    "is_stairs",
]
