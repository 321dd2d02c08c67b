from collections import deque

from tombs.content import factory
from tombs.state.actors import DeathCallback, Fighter
from tombs.state.entities import Entity
from tombs.state.world import World
from tombs.systems.ai import BasicAi
from tombs.systems.fov import Fov


class ScriptedFrontend:
    """Frontend double: replays queued inputs and records what it was asked."""

    def __init__(self, commands=(), targets=(), menu_choices=()):
        self.commands = deque(commands)
        self.targets = deque(targets)
        self.menu_choices = deque(menu_choices)
        self.renders = 0
        self.menus = []

    def render(self, game):
        self.renders += 1

    def next_command(self, game):
        return self.commands.popleft()

    def poll_target(self, game):
        if not self.targets:
            raise AssertionError("targeting asked for more input than was scripted")
        return self.targets.popleft()

    def menu(self, header, options):
        self.menus.append((header, list(options)))
        if not options:
            return None
        return self.menu_choices.popleft()


def open_arena(game, width=20, height=11, player_pos=(5, 5)):
    """Swap the game's level for a walled, empty room so tests control layout."""
    world = World(width, height)
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            world.carve(x, y)
    player = game.player
    player.move_to(*player_pos)
    game.entities[:] = [player]
    game.world = world
    game.rooms = []
    game.fov = Fov.from_world(world)
    game.recompute_fov()
    return world


def rebuild_fov(game):
    game.fov = Fov.from_world(game.world)
    game.recompute_fov()


def add_monster(game, pos, name="orc", hp=20, defense=0, power=4, xp=35, ai=True):
    monster = Entity(
        name=name,
        pos=pos,
        glyph="o",
        kind="monster",
        blocks=True,
        alive=True,
        fighter=Fighter(
            hp=hp,
            base_max_hp=hp,
            base_defense=defense,
            base_power=power,
            xp=xp,
            on_death=DeathCallback.MONSTER,
        ),
        ai=BasicAi() if ai else None,
    )
    game.entities.append(monster)
    return monster


def give_item(game, tmpl_id):
    item = factory.spawn_item(tmpl_id, game.player.pos)
    game.inventory.append(item)
    return item


def bfs_reachable(world, start):
    """Set of unblocked cells reachable from start with 4-way steps."""
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (nx, ny) in seen or world.is_blocked(nx, ny):
                continue
            seen.add((nx, ny))
            queue.append((nx, ny))
    return seen
