import pytest

from tombs import colors
from tombs.content import factory, templates
from tombs.state.items import ItemKind, Slot


@pytest.fixture()
def restore_content():
    yield
    templates.load_monster_templates()
    templates.load_item_templates()
    templates.load_spawn_tables()


def write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_bundled_monsters():
    orc = templates.get_monster_template("orc")
    troll = templates.get_monster_template("troll")
    assert (orc.hp, orc.defense, orc.power, orc.xp) == (20, 0, 4, 35)
    assert (troll.hp, troll.defense, troll.power, troll.xp) == (30, 2, 8, 100)
    assert orc.color == colors.DESATURATED_GREEN


def test_bundled_items():
    sword = templates.get_item_template("sword")
    assert sword.kind is ItemKind.SWORD
    assert sword.equipment.slot is Slot.RIGHT_HAND
    assert sword.equipment.power_bonus == 3
    shield = templates.get_item_template("shield")
    assert shield.equipment.slot is Slot.LEFT_HAND
    assert shield.equipment.defense_bonus == 1
    assert templates.get_item_template("heal").equipment is None


def test_item_weights_by_depth():
    tables = templates.spawn_tables()
    assert tables.item_chances(1) == {
        "heal": 35, "lightning": 0, "fireball": 0, "confuse": 0, "sword": 0, "shield": 0,
    }
    assert tables.item_chances(8) == {
        "heal": 35, "lightning": 25, "fireball": 25, "confuse": 10, "sword": 5, "shield": 15,
    }
    assert tables.monster_chances(5) == {"orc": 80, "troll": 30}


def test_unknown_ids_raise():
    with pytest.raises(KeyError):
        templates.get_monster_template("dragon")
    with pytest.raises(KeyError):
        factory.spawn_item("wand", (0, 0))


def test_factory_builds_live_monster():
    troll = factory.spawn_monster("troll", (3, 4))
    assert troll.pos == (3, 4)
    assert troll.alive and troll.blocks
    assert troll.fighter.hp == troll.fighter.base_max_hp == 30
    assert troll.ai is not None


def test_factory_items_are_always_visible():
    sword = factory.spawn_item("sword", (1, 1))
    assert sword.always_visible
    assert sword.item is ItemKind.SWORD
    assert not sword.equipment.equipped
    # each spawn owns its equipment
    assert factory.spawn_item("sword", (1, 1)).equipment is not sword.equipment


def test_custom_monster_file(tmp_path, restore_content):
    path = write(tmp_path, "monsters.yaml", """
- id: rat
  name: giant rat
  glyph: r
  color: [120, 80, 40]
  hp: 4
  power: 2
  xp: 5
""")
    lines = []
    templates.load_monster_templates(path, logger=lines.append)
    rat = templates.get_monster_template("rat")
    assert rat.color == (120, 80, 40)
    assert rat.defense == 0
    assert rat.ai == "basic"
    assert "orc" not in templates.MONSTER_TEMPLATES
    assert lines and "1 monster templates" in lines[0]


def test_unknown_ai_is_rejected(tmp_path, restore_content):
    path = write(tmp_path, "monsters.yaml", "- {id: ghost, ai: wander}\n")
    templates.load_monster_templates(path)
    with pytest.raises(ValueError):
        factory.spawn_monster("ghost", (0, 0))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        templates.load_item_templates(tmp_path / "nope.yaml")


@pytest.mark.parametrize("text", [
    "id: orc\n",
    "- name: nameless\n",
    "- just a string\n",
])
def test_malformed_monster_file(tmp_path, text):
    templates.ensure_loaded()
    path = write(tmp_path, "monsters.yaml", text)
    with pytest.raises(ValueError):
        templates.load_monster_templates(path)
    # the bundled set survives a failed load
    assert "orc" in templates.MONSTER_TEMPLATES


def test_spawn_table_missing_section(tmp_path):
    path = write(tmp_path, "spawn.yaml", "max_monsters: 2\nmonsters: {orc: 80}\n")
    with pytest.raises(ValueError):
        templates.load_spawn_tables(path)


def test_spawn_table_bad_step(tmp_path):
    path = write(tmp_path, "spawn.yaml", "max_monsters: two\nmonsters: {}\nmax_items: 1\nitems: {}\n")
    with pytest.raises(ValueError):
        templates.load_spawn_tables(path)


def test_bad_color_name():
    with pytest.raises(ValueError):
        colors.parse("plaid")
    with pytest.raises(ValueError):
        colors.parse([1, 2])
