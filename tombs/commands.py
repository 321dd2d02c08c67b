"""Inbound commands and the frontend contract.

A frontend (renderer + input) sits outside the simulation: it turns key
presses and clicks into the commands below, reads game state between turns
to draw it, and answers the few synchronous questions the core asks while a
turn is being resolved (menus and targeting).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Protocol, Union

if TYPE_CHECKING:
    from tombs.game import Game


class PlayerAction(Enum):
    TOOK_TURN = "took_turn"
    DID_NOT_TAKE_TURN = "did_not_take_turn"
    EXIT = "exit"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MovePlayer:
    """(0, 0) waits a turn."""
    dx: int
    dy: int

    def __post_init__(self) -> None:
        if self.dx not in (-1, 0, 1) or self.dy not in (-1, 0, 1):
            raise ValueError(f"MovePlayer offset must be a compass step, got ({self.dx}, {self.dy})")


@dataclass(frozen=True)
class PickUp:
    pass


@dataclass(frozen=True)
class UseItem:
    """inventory_index is None when the player closed the menu without choosing."""
    inventory_index: Optional[int]


@dataclass(frozen=True)
class DropItem:
    inventory_index: Optional[int]


@dataclass(frozen=True)
class DescendStairs:
    pass


@dataclass(frozen=True)
class ShowCharacterSheet:
    pass


@dataclass(frozen=True)
class Exit:
    pass


Command = Union[MovePlayer, PickUp, UseItem, DropItem, DescendStairs, ShowCharacterSheet, Exit]

WAIT = MovePlayer(0, 0)


# ---------------------------------------------------------------------------
# Targeting events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetClick:
    x: int
    y: int


@dataclass(frozen=True)
class TargetCancel:
    pass


TargetEvent = Union[TargetClick, TargetCancel]


class Frontend(Protocol):
    def render(self, game: "Game") -> None: ...

    def next_command(self, game: "Game") -> Command: ...

    def poll_target(self, game: "Game") -> Optional[TargetEvent]:
        """Return the next targeting input, or None if nothing happened yet."""
        ...

    def menu(self, header: str, options: List[str]) -> Optional[int]: ...
