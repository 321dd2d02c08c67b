"""Target selection for items that need one.

Targeting suspends the turn: the loop below keeps asking the frontend to
redraw and report input until it gets a valid click or a cancel. No monster
acts while it runs, because the turn that invoked it has not finished.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from tombs.commands import TargetCancel, TargetClick
from tombs.state.entities import Entity


@dataclass(frozen=True)
class TargetConstraint:
    max_range: Optional[float] = None
    must_be_monster: bool = False


def _tile_ok(game: Any, x: int, y: int, constraint: TargetConstraint) -> bool:
    if not game.fov.is_in_fov(x, y):
        return False
    if constraint.max_range is not None and game.player.distance(x, y) > constraint.max_range:
        return False
    return True


def monster_at(game: Any, x: int, y: int) -> Optional[Entity]:
    for ent in game.entities:
        if ent.pos == (x, y) and ent.fighter is not None and ent is not game.player:
            return ent
    return None


def poll_target(game: Any, frontend: Any, constraint: TargetConstraint, prompt: Optional[str] = None):
    """Block until the player picks a valid target or cancels.

    Returns a tile (x, y), or an Entity when constraint.must_be_monster is
    set, or None on cancel. `prompt` is exposed as game.target_prompt for the
    frontend to draw while the loop runs.
    """
    game.target_prompt = prompt
    try:
        return _poll(game, frontend, constraint)
    finally:
        game.target_prompt = None


def _poll(game: Any, frontend: Any, constraint: TargetConstraint):
    while True:
        frontend.render(game)
        event = frontend.poll_target(game)
        if event is None:
            continue
        if isinstance(event, TargetCancel):
            return None
        if not isinstance(event, TargetClick):
            raise TypeError(f"Unexpected targeting event {event!r}")
        if not _tile_ok(game, event.x, event.y, constraint):
            continue
        if not constraint.must_be_monster:
            return (event.x, event.y)
        target = monster_at(game, event.x, event.y)
        if target is not None:
            return target


def target_tile(
    game: Any,
    frontend: Any,
    max_range: Optional[float] = None,
    prompt: Optional[str] = None,
) -> Optional[Tuple[int, int]]:
    return poll_target(game, frontend, TargetConstraint(max_range=max_range), prompt)


def target_monster(
    game: Any,
    frontend: Any,
    max_range: Optional[float] = None,
    prompt: Optional[str] = None,
) -> Optional[Entity]:
    return poll_target(game, frontend, TargetConstraint(max_range=max_range, must_be_monster=True), prompt)


def closest_monster(game: Any, max_range: float) -> Optional[Entity]:
    """Nearest visible monster within range; the earliest in storage order wins ties."""
    closest: Optional[Entity] = None
    closest_dist = float("inf")
    player = game.player
    for ent in game.entities:
        if ent is player or ent.fighter is None or ent.ai is None:
            continue
        if not game.fov.is_in_fov(ent.x, ent.y):
            continue
        dist = player.distance_to(ent)
        if dist <= max_range and dist < closest_dist:
            closest = ent
            closest_dist = dist
    return closest
