import pytest

from tombs.config import GameConfig
from tombs.game import Game
from tombs.rng import new_rng

from sim_test_utils import ScriptedFrontend


@pytest.fixture()
def cfg():
    return GameConfig(seed=12345)


@pytest.fixture()
def game(cfg):
    return Game(cfg, new_rng(cfg.seed))


@pytest.fixture()
def frontend():
    return ScriptedFrontend()
