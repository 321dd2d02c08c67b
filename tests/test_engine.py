from tombs.commands import WAIT, Exit, MovePlayer, PickUp, PlayerAction, TargetClick, UseItem
from tombs.config import GameConfig
from tombs.engine import Engine

from sim_test_utils import ScriptedFrontend, add_monster, give_item, open_arena


def make_engine(game, frontend=None):
    return Engine(frontend or ScriptedFrontend(), game=game)


def test_waiting_lets_monsters_act(game):
    open_arena(game)
    orc = add_monster(game, (8, 5))
    engine = make_engine(game)
    assert engine.step(WAIT) is PlayerAction.TOOK_TURN
    assert orc.pos == (7, 5)


def test_free_actions_do_not_advance_monsters(game):
    open_arena(game)
    orc = add_monster(game, (8, 5))
    engine = make_engine(game)
    assert engine.step(PickUp()) is PlayerAction.DID_NOT_TAKE_TURN
    assert orc.pos == (8, 5)


def test_exit_stops_before_anything_moves(game):
    open_arena(game)
    orc = add_monster(game, (8, 5))
    engine = make_engine(game)
    assert engine.step(Exit()) is PlayerAction.EXIT
    assert orc.pos == (8, 5)


def test_view_follows_the_player_before_monsters_act(game):
    open_arena(game, width=40)
    engine = make_engine(game)
    assert not game.fov.is_in_fov(15, 5)
    engine.step(MovePlayer(1, 0))
    assert game.player.pos == (6, 5)
    assert game.fov.is_in_fov(15, 5)


def test_kill_then_level_up_in_one_step(game):
    open_arena(game)
    add_monster(game, (6, 5), hp=1, xp=350)
    frontend = ScriptedFrontend(menu_choices=[2])
    engine = make_engine(game, frontend)
    engine.step(MovePlayer(1, 0))
    assert game.player_level == 2
    assert game.player.fighter.base_defense == 2


def test_monsters_stop_once_the_player_dies(game):
    open_arena(game)
    add_monster(game, (6, 5), name="first", power=200)
    second = add_monster(game, (5, 6), name="second", power=200)
    engine = make_engine(game)
    engine.step(WAIT)
    assert not game.player.alive
    deaths = [t for t in game.log.texts() if t == "You died!"]
    assert deaths == ["You died!"]
    before = game.log.total
    assert engine.step(WAIT) is PlayerAction.DID_NOT_TAKE_TURN
    assert game.log.total == before
    assert second.pos == (5, 6)


def test_run_renders_each_turn_until_exit(game):
    open_arena(game)
    frontend = ScriptedFrontend(commands=[WAIT, WAIT, Exit()])
    engine = make_engine(game, frontend)
    engine.run()
    assert frontend.renders == 3
    assert not frontend.commands


def test_engine_builds_its_own_game():
    cfg = GameConfig(seed=3)
    engine = Engine(ScriptedFrontend(), cfg)
    assert engine.game.cfg is cfg
    assert engine.game.player.pos == engine.game.rooms[0].center


def test_no_level_up_prompt_for_a_dead_player(game):
    open_arena(game)
    game.player.fighter.hp = 10
    add_monster(game, (6, 5), hp=1, xp=400)
    give_item(game, "fireball")
    frontend = ScriptedFrontend(targets=[TargetClick(5, 5)])
    engine = make_engine(game, frontend)
    engine.step(UseItem(0))
    assert not game.player.alive
    assert game.player.fighter.xp == 400
    assert frontend.menus == []
    assert game.player_level == 1
