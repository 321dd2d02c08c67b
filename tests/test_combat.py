import pytest

from tombs import colors
from tombs.systems import combat

from sim_test_utils import add_monster, give_item, open_arena


def test_attack_deals_power_minus_defense(game):
    open_arena(game)
    brute = add_monster(game, (7, 5), name="brute", power=10)
    target = add_monster(game, (8, 5), name="troll", hp=30, defense=4)
    combat.attack(game, brute, target)
    assert target.fighter.hp == 24
    assert game.log.texts()[-1] == "Brute attacks troll for 6 hit points."


def test_attack_weaker_than_defense_has_no_effect(game):
    open_arena(game)
    brute = add_monster(game, (7, 5), name="brute", power=10)
    target = add_monster(game, (8, 5), name="troll", hp=30, defense=12)
    combat.attack(game, brute, target)
    assert target.fighter.hp == 30
    assert game.log.texts()[-1] == "Brute attacks troll but it has no effect!"


def test_attacking_yourself_is_an_error(game):
    open_arena(game)
    with pytest.raises(ValueError):
        combat.attack(game, game.player, game.player)


def test_death_is_resolved_once(game):
    open_arena(game)
    orc = add_monster(game, (7, 5), hp=5, xp=35)
    assert combat.take_damage(game, orc, 8) == 35
    assert not orc.alive
    deaths = [t for t in game.log.texts() if "is dead" in t]
    assert deaths == ["Orc is dead! You gain 35 experience points."]
    # a corpse has no fighter, so further damage is ignored
    assert combat.take_damage(game, orc, 8) is None
    assert len([t for t in game.log.texts() if "is dead" in t]) == 1


def test_zero_or_negative_damage_changes_nothing(game):
    open_arena(game)
    orc = add_monster(game, (7, 5), hp=5)
    assert combat.take_damage(game, orc, 0) is None
    assert combat.take_damage(game, orc, -3) is None
    assert orc.fighter.hp == 5
    assert orc.alive


def test_monster_death_leaves_a_corpse(game):
    open_arena(game)
    orc = add_monster(game, (7, 5), hp=1)
    combat.take_damage(game, orc, 1)
    assert orc.glyph == "%"
    assert orc.color == colors.DARK_RED
    assert not orc.blocks
    assert orc.fighter is None and orc.ai is None
    assert orc.kind == "corpse"
    assert orc.name == "remains of orc"
    assert orc in game.entities


def test_player_death_keeps_the_player_in_place(game):
    open_arena(game)
    player = game.player
    combat.take_damage(game, player, 500)
    assert not player.alive
    assert player.glyph == "%"
    assert player.color == colors.DARK_RED
    assert game.entities[0] is player
    assert game.log.texts()[-1] == "You died!"


def test_melee_kill_credits_xp_to_attacker(game):
    open_arena(game)
    orc = add_monster(game, (6, 5), hp=3, xp=35)
    combat.attack(game, game.player, orc)
    assert not orc.alive
    assert game.player.fighter.xp == 35


def test_heal_never_exceeds_max(game):
    open_arena(game)
    player = game.player
    player.fighter.hp = 90
    combat.heal(game, player, 40)
    assert player.fighter.hp == 100
    player.fighter.hp = 30
    combat.heal(game, player, 40)
    assert player.fighter.hp == 70


def test_equipped_bonuses_add_to_player_stats(game):
    open_arena(game)
    player = game.player
    sword = give_item(game, "sword")
    shield = give_item(game, "shield")
    assert combat.power(game, player) == 4
    assert combat.defense(game, player) == 1
    sword.equipment.equipped = True
    shield.equipment.equipped = True
    assert combat.power(game, player) == 7
    assert combat.defense(game, player) == 2
    assert combat.max_hp(game, player) == 100


def test_monsters_ignore_the_players_equipment(game):
    open_arena(game)
    orc = add_monster(game, (7, 5), power=4, defense=0)
    give_item(game, "sword").equipment.equipped = True
    assert combat.power(game, orc) == 4
    assert combat.defense(game, orc) == 0
