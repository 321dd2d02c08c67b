from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from tombs.config import GameConfig
from tombs.content import factory, templates
from tombs.geometry import Rect
from tombs.state.entities import Entity
from tombs.state.world import World

Logger = Optional[Callable[[str], None]]


@dataclass
class Dungeon:
    world: World
    rooms: List[Rect]
    entities: List[Entity]  # player first, stairs last
    stairs: Optional[Entity] = None
    skipped_placements: int = 0


def carve_room(world: World, room: Rect) -> None:
    for x, y in room.interior():
        world.carve(x, y)


def carve_h_tunnel(world: World, x1: int, x2: int, y: int) -> None:
    for xx in range(min(x1, x2), max(x1, x2) + 1):
        world.carve(xx, y)


def carve_v_tunnel(world: World, y1: int, y2: int, x: int) -> None:
    for yy in range(min(y1, y2), max(y1, y2) + 1):
        world.carve(x, yy)


def connect_rooms(world: World, prev: Rect, new: Rect, rng) -> None:
    """L-shaped corridor between room centres; the bend side is a coin flip."""
    prev_x, prev_y = prev.center
    new_x, new_y = new.center
    if rng.coin():
        carve_h_tunnel(world, prev_x, new_x, prev_y)
        carve_v_tunnel(world, prev_y, new_y, new_x)
    else:
        carve_v_tunnel(world, prev_y, new_y, prev_x)
        carve_h_tunnel(world, prev_x, new_x, new_y)


def _occupied(entities: List[Entity], x: int, y: int) -> bool:
    return any(ent.pos == (x, y) for ent in entities)


def _weighted_choice(chances: Dict[str, int], rng) -> Optional[str]:
    ids = [k for k, w in chances.items() if w > 0]
    if not ids:
        return None
    return rng.choices(ids, weights=[chances[k] for k in ids])[0]


def _free_cell(world: World, room: Rect, entities: List[Entity], rng, attempts: int) -> Optional[Tuple[int, int]]:
    for _ in range(attempts):
        x, y = rng.interior_cell(room)
        if not world.is_blocked(x, y) and not _occupied(entities, x, y):
            return (x, y)
    return None


def place_objects(
    world: World,
    room: Rect,
    entities: List[Entity],
    level: int,
    rng,
    cfg: GameConfig,
) -> int:
    """Populate one room with depth-scaled monsters and items.

    Returns how many placements were abandoned because no free cell turned
    up within the retry budget.
    """
    tables = templates.spawn_tables()
    attempts = max(1, room.interior_area * cfg.placement_attempts_per_cell)
    skipped = 0

    max_monsters = templates.from_dungeon_level(tables.max_monsters, level)
    monster_chances = tables.monster_chances(level)
    for _ in range(rng.randint(0, max_monsters)):
        choice = _weighted_choice(monster_chances, rng)
        if choice is None:
            break
        cell = _free_cell(world, room, entities, rng, attempts)
        if cell is None:
            skipped += 1
            continue
        entities.append(factory.spawn_monster(choice, cell))

    max_items = templates.from_dungeon_level(tables.max_items, level)
    item_chances = tables.item_chances(level)
    for _ in range(rng.randint(0, max_items)):
        choice = _weighted_choice(item_chances, rng)
        if choice is None:
            break
        cell = _free_cell(world, room, entities, rng, attempts)
        if cell is None:
            skipped += 1
            continue
        entities.append(factory.spawn_item(choice, cell))

    return skipped


def generate(
    cfg: GameConfig,
    rng,
    level: int,
    player: Entity,
    logger: Logger = None,
) -> Dungeon:
    """Carve a fresh level: rooms joined in acceptance order, player in the
    first room, stairs at the centre of the last."""
    world = World(cfg.map_width, cfg.map_height)
    entities: List[Entity] = [player]
    rooms: List[Rect] = []
    skipped = 0

    for _ in range(cfg.max_rooms):
        w = rng.randint(cfg.room_min_size, cfg.room_max_size)
        h = rng.randint(cfg.room_min_size, cfg.room_max_size)
        # keep the far wall inside the map
        if w >= world.width or h >= world.height:
            continue
        x = rng.randint(0, world.width - w - 1)
        y = rng.randint(0, world.height - h - 1)
        new_room = Rect.from_size(x, y, w, h)

        # overlap check
        if any(new_room.intersects(other) for other in rooms):
            continue

        carve_room(world, new_room)
        if rooms:
            connect_rooms(world, rooms[-1], new_room, rng)
        else:
            player.move_to(*new_room.center)
        skipped += place_objects(world, new_room, entities, level, rng, cfg)
        rooms.append(new_room)

    if not rooms:
        raise RuntimeError(
            f"No room fits a {world.width}x{world.height} map with sizes "
            f"{cfg.room_min_size}..{cfg.room_max_size}"
        )

    stairs = factory.spawn_stairs(rooms[-1].center)
    entities.append(stairs)

    if logger:
        logger(
            f"[mapgen] depth {level}: {len(rooms)} rooms, {len(world.floor_cells())} floor cells, "
            f"{len(entities) - 2} objects, "
            f"{skipped} placements skipped"
        )
    return Dungeon(world=world, rooms=rooms, entities=entities, stairs=stairs, skipped_placements=skipped)
