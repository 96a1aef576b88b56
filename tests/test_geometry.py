import itertools

from bug_crossing.config import ENEMY_VERTICAL_BUFFER, ENEMY_VISIBLE_W, PLAYER_VERTICAL_BUFFER, PLAYER_VISIBLE_W
from bug_crossing.geometry import Body, collides_with, column_of, row_of, visible_left, visible_right

from conftest import enemy_y, player_y


def bug(x, row):
    return Body(x=x, y=enemy_y(row), visible_width=ENEMY_VISIBLE_W, vertical_buffer=ENEMY_VERTICAL_BUFFER)


def avatar(x, row):
    return Body(x=x, y=player_y(row), visible_width=PLAYER_VISIBLE_W, vertical_buffer=PLAYER_VERTICAL_BUFFER)


def test_rows_and_columns():
    assert row_of(bug(0, 0)) == 0
    assert row_of(bug(0, 1)) == 1
    assert row_of(bug(0, 2)) == 2
    assert row_of(avatar(202, 4)) == 4
    assert column_of(avatar(0, 4)) == 0
    assert column_of(avatar(202, 4)) == 2
    assert column_of(avatar(404, 4)) == 4


def test_continuous_x_floors_to_column():
    assert column_of(bug(150.7, 0)) == 1
    assert column_of(bug(-50, 0)) == -1


def test_visible_bounds_centre_on_tile_midpoint():
    body = avatar(202, 4)
    assert visible_left(body) == 202 + 50.5 - 15.5
    assert visible_right(body) == 202 + 50.5 + 15.5


def test_overlap_on_same_row_collides():
    assert collides_with(bug(202, 1), avatar(202, 1))
    assert collides_with(avatar(202, 1), bug(202, 1))


def test_different_rows_never_collide():
    assert not collides_with(bug(202, 0), avatar(202, 1))


def test_touching_edges_do_not_collide():
    player = avatar(202, 1)
    # Bug's right edge lands exactly on the player's left edge.
    enemy = bug(visible_left(player) - 50.5 - ENEMY_VISIBLE_W / 2, 1)
    assert visible_right(enemy) == visible_left(player)
    assert not collides_with(enemy, player)
    assert not collides_with(player, enemy)


def test_self_and_malformed_queries_are_misses():
    body = avatar(202, 1)
    assert not collides_with(body, body)
    assert not collides_with(body, object())
    assert not collides_with(None, body)


def test_collision_is_symmetric():
    bodies = [bug(x, row) for x in range(-102, 510, 37) for row in range(3)]
    bodies += [avatar(col * 101, row) for col in range(5) for row in range(5)]
    for a, b in itertools.combinations(bodies, 2):
        assert collides_with(a, b) == collides_with(b, a)
