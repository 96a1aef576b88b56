import random

import pytest

from bug_crossing.config import ENEMY_VERTICAL_BUFFER, PLAYER_VERTICAL_BUFFER, TILE_H, TILE_W
from bug_crossing.state import GameState


def enemy_y(row: int) -> int:
    return row * TILE_H + ENEMY_VERTICAL_BUFFER


def player_y(row: int) -> int:
    return row * TILE_H + PLAYER_VERTICAL_BUFFER


def column_x(col: int) -> int:
    return col * TILE_W


def make_state(**kwargs) -> GameState:
    kwargs.setdefault("enemy_count", 0)
    state = GameState(rng=random.Random(1234), **kwargs)
    state.paused = False
    return state


@pytest.fixture
def state():
    return make_state()


@pytest.fixture
def coloured_state():
    return make_state(coloured_tile_on=True)
