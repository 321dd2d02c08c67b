from __future__ import annotations

from typing import Tuple

from tombs import colors
from tombs.state.actors import DeathCallback, Fighter
from tombs.state.entities import Entity
from tombs.state.items import Equipment
from tombs.systems.ai import BasicAi
import tombs.content.templates as templates

PLAYER_NAME = "player"


def spawn_player(pos: Tuple[int, int] = (0, 0)) -> Entity:
    player = Entity(
        name=PLAYER_NAME,
        pos=pos,
        glyph="@",
        color=colors.WHITE,
        kind="player",
        blocks=True,
        alive=True,
    )
    player.fighter = Fighter(
        hp=100,
        base_max_hp=100,
        base_defense=1,
        base_power=4,
        xp=0,
        on_death=DeathCallback.PLAYER,
    )
    return player


def spawn_monster(tmpl_id: str, pos: Tuple[int, int]) -> Entity:
    """Create a live monster Entity from a template id at the given position."""
    tmpl = templates.get_monster_template(tmpl_id)
    if tmpl.ai != "basic":
        raise ValueError(f"Monster template {tmpl.id!r} names unknown ai {tmpl.ai!r}")
    return Entity(
        name=tmpl.name,
        pos=pos,
        glyph=tmpl.glyph,
        color=tmpl.color,
        kind="monster",
        blocks=True,
        alive=True,
        fighter=Fighter(
            hp=tmpl.hp,
            base_max_hp=tmpl.hp,
            base_defense=tmpl.defense,
            base_power=tmpl.power,
            xp=tmpl.xp,
            on_death=DeathCallback.MONSTER,
        ),
        ai=BasicAi(),
    )


def spawn_item(tmpl_id: str, pos: Tuple[int, int]) -> Entity:
    tmpl = templates.get_item_template(tmpl_id)
    equipment = None
    if tmpl.equipment is not None:
        equipment = Equipment(
            slot=tmpl.equipment.slot,
            power_bonus=tmpl.equipment.power_bonus,
            defense_bonus=tmpl.equipment.defense_bonus,
            max_hp_bonus=tmpl.equipment.max_hp_bonus,
        )
    return Entity(
        name=tmpl.name,
        pos=pos,
        glyph=tmpl.glyph,
        color=tmpl.color,
        always_visible=True,
        kind="item",
        item=tmpl.kind,
        equipment=equipment,
    )


def spawn_stairs(pos: Tuple[int, int]) -> Entity:
    return Entity(
        name="stairs",
        pos=pos,
        glyph="<",
        color=colors.WHITE,
        always_visible=True,
        kind="feature",
    )


def is_stairs(ent: Entity) -> bool:
    return ent.kind == "feature" and ent.name == "stairs"
