from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from tombs import colors, mapgen
from tombs.commands import (
    Command,
    DescendStairs,
    DropItem,
    Exit,
    Frontend,
    MovePlayer,
    PickUp,
    PlayerAction,
    ShowCharacterSheet,
    UseItem,
)
from tombs.config import GameConfig
from tombs.content import factory, templates
from tombs.geometry import Rect
from tombs.rng import RNG, new_rng
from tombs.state.entities import Entity
from tombs.state.world import World
from tombs.systems import actions, combat, turns
from tombs.systems.actions import UseResult
from tombs.systems.fov import Fov

Message = Tuple[str, colors.Color]

WELCOME = "Welcome stranger! Prepare to perish in the Tombs of the Ancient Kings."


@dataclass
class MessageLog:
    capacity: int = 100
    messages: deque | None = None
    total: int = 0  # messages ever added, including ones pushed out

    def __post_init__(self) -> None:
        # deque for O(1) append/pop with bounded history
        self.messages = deque(self.messages or (), maxlen=self.capacity)

    def add(self, text: str, color: colors.Color = colors.WHITE) -> None:
        self.messages.append((text, color))
        self.total += 1

    def tail(self, n: int) -> List[Message]:
        if n <= 0:
            return []
        return list(self.messages)[-n:]

    def texts(self) -> List[str]:
        return [text for text, _ in self.messages]

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


@dataclass(frozen=True)
class PlayerStats:
    """Derived player numbers for status panels and the character sheet."""
    hp: int
    max_hp: int
    power: int
    defense: int
    xp: int
    level: int
    xp_to_level: int
    depth: int


class Game:
    """The session: current map, entities, inventory, log and progression.

    `entities[0]` is always the player. The map, FOV and every other entity
    are replaced wholesale on each level transition; the player object and
    the inventory carry over.
    """

    def __init__(self, cfg: GameConfig | None = None, rng: Optional[RNG] = None) -> None:
        self.cfg = cfg or GameConfig()
        self.rng = rng if rng is not None else new_rng(self.cfg.seed)
        self.log = MessageLog(capacity=self.cfg.message_log_capacity)
        # debug log file (cleared each run)
        self.debug_log_path: Optional[Path] = (
            Path(self.cfg.debug_log_path) if self.cfg.debug_log_path else None
        )
        if self.debug_log_path is not None:
            try:
                self.debug_log_path.write_text("", encoding="utf-8")
            except OSError:
                self.debug_log_path = None
        templates.ensure_loaded(logger=self._debug)

        self.inventory: List[Entity] = []
        self.dungeon_level = 1
        self.player_level = 1
        # set while an item waits for a target; frontends may draw it
        self.target_prompt: Optional[str] = None

        self.entities: List[Entity] = [factory.spawn_player()]
        self.world: World
        self.fov: Fov
        self.rooms: List[Rect] = []
        self._make_level()

        self.log.add(WELCOME, colors.RED)

    # --- helpers ---

    def _debug(self, msg: str) -> None:
        if self.debug_log_path is None:
            return
        try:
            with open(self.debug_log_path, "a", encoding="utf-8") as f:
                f.write(msg + "\n")
        except OSError:
            pass

    @property
    def player(self) -> Entity:
        return self.entities[0]

    def player_alive(self) -> bool:
        return self.player.alive

    # --- levels ---

    def _make_level(self) -> None:
        dungeon = mapgen.generate(self.cfg, self.rng, self.dungeon_level, self.player, logger=self._debug)
        # keep the same list object; index 0 stays the same player
        self.entities[:] = dungeon.entities
        self.world = dungeon.world
        self.rooms = dungeon.rooms
        self.fov = Fov.from_world(self.world)
        self.recompute_fov()

    def recompute_fov(self) -> None:
        player = self.player
        self.fov.recompute(player.x, player.y, self.cfg.torch_radius)
        for x, y in self.fov.visible_cells():
            self.world.mark_explored(x, y)

    def stairs_here(self) -> Optional[Entity]:
        pos = self.player.pos
        for ent in self.entities:
            if factory.is_stairs(ent) and ent.pos == pos:
                return ent
        return None

    def next_level(self) -> None:
        """Rest, then go one level deeper on a freshly generated map."""
        player = self.player
        self.log.add("You take a moment to rest, and recover your strength.", colors.VIOLET)
        combat.heal(self, player, combat.max_hp(self, player) // 2)
        self.log.add(
            "After a rare moment of peace, you descend deeper into the heart of the dungeon...",
            colors.RED,
        )
        self.dungeon_level += 1
        self._debug(f"[game] descending to depth {self.dungeon_level}")
        self._make_level()

    # --- progression ---

    def level_up_xp(self) -> int:
        return self.cfg.level_up_base + self.player_level * self.cfg.level_up_factor

    def check_level_up(self, frontend: Frontend) -> int:
        """Grant every level the player's xp pays for; returns how many.

        A dead player is never prompted.
        """
        player = self.player
        if not player.alive:
            return 0
        gained = 0
        while player.fighter is not None and player.fighter.xp >= self.level_up_xp():
            player.fighter.xp -= self.level_up_xp()
            self.player_level += 1
            self.log.add(
                f"Your battle skills grow stronger! You reached level {self.player_level}!",
                colors.YELLOW,
            )
            self._apply_level_up_choice(self._prompt_level_up(frontend))
            self._debug(f"[game] player reached level {self.player_level}")
            gained += 1
        return gained

    def _level_up_options(self) -> List[str]:
        cfg = self.cfg
        player = self.player
        return [
            f"Constitution (+{cfg.level_up_hp} HP, from {combat.max_hp(self, player)})",
            f"Strength (+{cfg.level_up_power} attack, from {combat.power(self, player)})",
            f"Agility (+{cfg.level_up_defense} defense, from {combat.defense(self, player)})",
        ]

    def _prompt_level_up(self, frontend: Frontend) -> int:
        options = self._level_up_options()
        choice = None
        # the menu is asked again until it returns a real option
        while choice is None or not 0 <= choice < len(options):
            choice = frontend.menu("Level up! Choose a stat to raise:\n", options)
        return choice

    def _apply_level_up_choice(self, choice: int) -> None:
        fighter = self.player.fighter
        if choice == 0:
            fighter.base_max_hp += self.cfg.level_up_hp
            fighter.hp += self.cfg.level_up_hp
        elif choice == 1:
            fighter.base_power += self.cfg.level_up_power
        elif choice == 2:
            fighter.base_defense += self.cfg.level_up_defense
        else:
            raise ValueError(f"Unknown level-up choice {choice}")

    # --- exposed for renderer ---

    def player_stats(self) -> PlayerStats:
        player = self.player
        return PlayerStats(
            hp=player.fighter.hp if player.fighter else 0,
            max_hp=combat.max_hp(self, player),
            power=combat.power(self, player),
            defense=combat.defense(self, player),
            xp=player.fighter.xp if player.fighter else 0,
            level=self.player_level,
            xp_to_level=self.level_up_xp(),
            depth=self.dungeon_level,
        )

    def character_sheet(self) -> str:
        stats = self.player_stats()
        return (
            "Character information\n\n"
            f"Level: {stats.level}\n"
            f"Experience: {stats.xp}\n"
            f"Experience to level up: {stats.xp_to_level}\n\n"
            f"Maximum HP: {stats.max_hp}\n"
            f"Attack: {stats.power}\n"
            f"Defense: {stats.defense}\n\n"
            f"Dungeon level: {stats.depth}"
        )

    def renderables(self) -> List[Entity]:
        """Entities the player can currently see (or remembers, for
        always-visible ones on explored tiles), non-blocking ones first so
        actors are drawn on top."""
        shown = []
        for ent in self.entities:
            if self.fov.is_in_fov(ent.x, ent.y):
                shown.append(ent)
                continue
            tile = self.world.get_tile(ent.x, ent.y)
            if ent.always_visible and tile is not None and tile.explored:
                shown.append(ent)
        return sorted(shown, key=lambda e: e.blocks)

    # --- commands ---

    def handle_command(self, command: Command, frontend: Frontend) -> PlayerAction:
        """Resolve the player's half of a turn."""
        if isinstance(command, Exit):
            return PlayerAction.EXIT
        if isinstance(command, ShowCharacterSheet):
            frontend.menu(self.character_sheet(), [])
            return PlayerAction.DID_NOT_TAKE_TURN
        if not self.player_alive():
            return PlayerAction.DID_NOT_TAKE_TURN

        if isinstance(command, MovePlayer):
            turns.player_move_or_attack(self, command.dx, command.dy)
            return PlayerAction.TOOK_TURN
        if isinstance(command, PickUp):
            picked = actions.pick_item_up(self)
            return PlayerAction.TOOK_TURN if picked else PlayerAction.DID_NOT_TAKE_TURN
        if isinstance(command, UseItem):
            if command.inventory_index is None:
                return PlayerAction.DID_NOT_TAKE_TURN
            self._check_inventory_index(command.inventory_index)
            result = actions.use_item(self, frontend, command.inventory_index)
            if result is UseResult.CANCELLED:
                return PlayerAction.DID_NOT_TAKE_TURN
            return PlayerAction.TOOK_TURN
        if isinstance(command, DropItem):
            if command.inventory_index is not None:
                self._check_inventory_index(command.inventory_index)
                actions.drop_item(self, command.inventory_index)
            return PlayerAction.DID_NOT_TAKE_TURN
        if isinstance(command, DescendStairs):
            if self.stairs_here() is not None:
                self.next_level()
            return PlayerAction.DID_NOT_TAKE_TURN
        raise TypeError(f"Unknown command {command!r}")

    def _check_inventory_index(self, index: int) -> None:
        if not 0 <= index < len(self.inventory):
            raise IndexError(f"Inventory slot {index} out of range (holding {len(self.inventory)})")

    def monsters_turn(self) -> None:
        turns.monsters_act(self)
