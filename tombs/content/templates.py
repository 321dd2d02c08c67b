from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import yaml

from tombs import colors
from tombs.state.items import ItemKind, Slot

CONTENT_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class Transition:
    level: int
    value: int


DepthTable = Tuple[Transition, ...]


def from_dungeon_level(table: Sequence[Transition], level: int) -> int:
    """Value of the highest step whose level is <= the given depth (0 below the first)."""
    for transition in reversed(table):
        if level >= transition.level:
            return transition.value
    return 0


@dataclass(frozen=True)
class MonsterTemplate:
    id: str
    name: str
    glyph: str
    color: colors.Color
    hp: int
    defense: int
    power: int
    xp: int
    ai: str


@dataclass(frozen=True)
class EquipmentTemplate:
    slot: Slot
    power_bonus: int = 0
    defense_bonus: int = 0
    max_hp_bonus: int = 0


@dataclass(frozen=True)
class ItemTemplate:
    id: str
    name: str
    glyph: str
    color: colors.Color
    kind: ItemKind
    equipment: Optional[EquipmentTemplate] = None


@dataclass(frozen=True)
class SpawnTables:
    max_monsters: DepthTable
    monster_weights: Dict[str, DepthTable]
    max_items: DepthTable
    item_weights: Dict[str, DepthTable]

    def monster_chances(self, level: int) -> Dict[str, int]:
        return {mid: from_dungeon_level(t, level) for mid, t in self.monster_weights.items()}

    def item_chances(self, level: int) -> Dict[str, int]:
        return {iid: from_dungeon_level(t, level) for iid, t in self.item_weights.items()}


MONSTER_TEMPLATES: Dict[str, MonsterTemplate] = {}
ITEM_TEMPLATES: Dict[str, ItemTemplate] = {}
SPAWN_TABLES: List[SpawnTables] = []  # holds at most one entry once loaded

Logger = Optional[Callable[[str], None]]


# ---------------------------------------------------------------------------
# YAML -> template builders
# ---------------------------------------------------------------------------

def _read_yaml(path: Union[Path, str, None], default_name: str):
    if path is None:
        path = CONTENT_DIR / default_name
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return path, yaml.safe_load(f)


def _build_monster(entry: dict) -> MonsterTemplate:
    hp = int(entry.get("hp", 1))
    return MonsterTemplate(
        id=str(entry["id"]),
        name=str(entry.get("name", entry["id"])),
        glyph=str(entry.get("glyph", "?")),
        color=colors.parse(entry.get("color", "white")),
        hp=hp,
        defense=int(entry.get("defense", 0)),
        power=int(entry.get("power", 1)),
        xp=int(entry.get("xp", 0)),
        ai=str(entry.get("ai", "basic")),
    )


def _build_item(entry: dict) -> ItemTemplate:
    equipment = None
    raw_eq = entry.get("equipment")
    if raw_eq:
        equipment = EquipmentTemplate(
            slot=Slot[str(raw_eq["slot"]).upper()],
            power_bonus=int(raw_eq.get("power_bonus", 0)),
            defense_bonus=int(raw_eq.get("defense_bonus", 0)),
            max_hp_bonus=int(raw_eq.get("max_hp_bonus", 0)),
        )
    return ItemTemplate(
        id=str(entry["id"]),
        name=str(entry.get("name", entry["id"])),
        glyph=str(entry.get("glyph", "?")),
        color=colors.parse(entry.get("color", "white")),
        kind=ItemKind(entry.get("kind", entry["id"])),
        equipment=equipment,
    )


def _build_table(raw) -> DepthTable:
    """A bare number is a fixed value; a list is {level, value} steps."""
    if isinstance(raw, (int, float)):
        return (Transition(level=0, value=int(raw)),)
    if not isinstance(raw, list):
        raise ValueError(f"Depth table must be a number or a list of steps, got {raw!r}")
    steps = [Transition(level=int(s["level"]), value=int(s["value"])) for s in raw]
    return tuple(sorted(steps, key=lambda t: t.level))


def _entries(data, path: Path) -> Iterable[dict]:
    if not isinstance(data, list):
        raise ValueError(f"Content file malformed (expected a list): {path}")
    for entry in data:
        if not isinstance(entry, dict) or "id" not in entry:
            raise ValueError(f"Content entry without an id in {path}: {entry!r}")
        yield entry


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------

def load_monster_templates(path: Path | str | None = None, logger: Logger = None) -> None:
    """Load monster templates from YAML and populate MONSTER_TEMPLATES."""
    path, data = _read_yaml(path, "monsters.yaml")
    built = {t.id: t for t in (_build_monster(e) for e in _entries(data, path))}
    MONSTER_TEMPLATES.clear()
    MONSTER_TEMPLATES.update(built)
    if logger:
        logger(f"[content] loaded {len(MONSTER_TEMPLATES)} monster templates from {path}")


def load_item_templates(path: Path | str | None = None, logger: Logger = None) -> None:
    """Load item templates from YAML and populate ITEM_TEMPLATES."""
    path, data = _read_yaml(path, "items.yaml")
    built = {t.id: t for t in (_build_item(e) for e in _entries(data, path))}
    ITEM_TEMPLATES.clear()
    ITEM_TEMPLATES.update(built)
    if logger:
        logger(f"[content] loaded {len(ITEM_TEMPLATES)} item templates from {path}")


def load_spawn_tables(path: Path | str | None = None, logger: Logger = None) -> None:
    path, data = _read_yaml(path, "spawn_tables.yaml")
    if not isinstance(data, dict):
        raise ValueError(f"Spawn table file malformed (expected a mapping): {path}")
    try:
        tables = SpawnTables(
            max_monsters=_build_table(data["max_monsters"]),
            monster_weights={str(k): _build_table(v) for k, v in data["monsters"].items()},
            max_items=_build_table(data["max_items"]),
            item_weights={str(k): _build_table(v) for k, v in data["items"].items()},
        )
    except KeyError as e:
        raise ValueError(f"Spawn table file missing section {e}: {path}") from e
    SPAWN_TABLES.clear()
    SPAWN_TABLES.append(tables)
    if logger:
        logger(f"[content] loaded spawn tables from {path}")


def ensure_loaded(logger: Logger = None) -> None:
    if not MONSTER_TEMPLATES:
        load_monster_templates(logger=logger)
    if not ITEM_TEMPLATES:
        load_item_templates(logger=logger)
    if not SPAWN_TABLES:
        load_spawn_tables(logger=logger)


def get_monster_template(tmpl_id: str) -> MonsterTemplate:
    ensure_loaded()
    try:
        return MONSTER_TEMPLATES[tmpl_id]
    except KeyError:
        raise KeyError(f"Unknown monster template id {tmpl_id!r}") from None


def get_item_template(tmpl_id: str) -> ItemTemplate:
    ensure_loaded()
    try:
        return ITEM_TEMPLATES[tmpl_id]
    except KeyError:
        raise KeyError(f"Unknown item template id {tmpl_id!r}") from None


def spawn_tables() -> SpawnTables:
    ensure_loaded()
    return SPAWN_TABLES[0]
