from __future__ import annotations

"""
Engine: owns the turn loop.

The frontend is only ever asked for a command, a menu choice or a target,
and told to draw; everything between those calls is simulation. A turn is:
player acts -> FOV -> (if a turn was spent and the player lives) every
monster acts in storage order -> level-up check.
"""

from tombs.commands import Command, Frontend, PlayerAction
from tombs.config import GameConfig
from tombs.game import Game
from tombs.rng import new_rng


class Engine:
    def __init__(self, frontend: Frontend, cfg: GameConfig | None = None, game: Game | None = None) -> None:
        self.cfg = cfg or (game.cfg if game is not None else GameConfig())
        self.frontend = frontend
        self.game = game or Game(self.cfg, new_rng(self.cfg.seed))

    def step(self, command: Command) -> PlayerAction:
        game = self.game
        action = game.handle_command(command, self.frontend)
        if action is PlayerAction.EXIT:
            return action
        game.recompute_fov()
        if action is PlayerAction.TOOK_TURN and game.player_alive():
            game.monsters_turn()
        game.check_level_up(self.frontend)
        return action

    def run(self) -> None:
        """Run until the frontend asks to exit."""
        while True:
            self.frontend.render(self.game)
            command = self.frontend.next_command(self.game)
            if self.step(command) is PlayerAction.EXIT:
                break
