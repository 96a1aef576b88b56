from bug_crossing.config import PLAYER_START

from conftest import column_x, make_state, player_y


def walk(state, *commands):
    for command in commands:
        state.handle_command(command)


def test_player_starts_bottom_centre(state):
    assert (state.player.row(), state.player.column()) == (4, 2)
    assert (state.player.body.x, state.player.body.y) == PLAYER_START


def test_grid_edges_block_movement(state):
    player = state.player
    assert not player.handle_input("down", state)
    walk(state, "left", "left")
    assert player.column() == 0
    assert not player.handle_input("left", state)
    walk(state, "right", "right", "right", "right")
    assert player.column() == 4
    assert not player.handle_input("right", state)


def test_unknown_command_is_ignored(state):
    assert not state.player.handle_input("jump", state)
    assert (state.player.body.x, state.player.body.y) == PLAYER_START


def test_three_new_stone_tiles_score_thirty(coloured_state):
    state = coloured_state
    walk(state, "up")  # onto the grass row, not scored
    assert state.scoring.current_points == 0

    walk(state, "up", "up", "up")
    assert state.scoring.current_points == 30
    assert state.player.walked_tiles == {(2, 2), (1, 2), (0, 2)}


def test_revisited_tile_scores_once(coloured_state):
    state = coloured_state
    walk(state, "up", "up", "down", "up")
    assert state.scoring.current_points == 10
    assert len(state.player.walked_tiles) == 1


def test_tiles_do_not_score_without_coloured_mode(state):
    walk(state, "up", "up", "up")
    assert state.scoring.current_points == 0
    assert state.player.walked_tiles == set()


def test_reaching_water_with_collectibles_costs_thirty():
    state = make_state(collectibles_on=True)
    state.collectibles.remove_collectibles()
    state.player.body.y = player_y(0)
    state.scoring.consecutive_successes = 2

    walk(state, "up")

    assert state.scoring.current_points == -30
    assert state.scoring.consecutive_successes == 2
    assert (state.player.body.x, state.player.body.y) == PLAYER_START


def test_reaching_water_without_point_modes_counts_success(state):
    walk(state, "up", "up", "up", "up")
    assert state.player.row() == 0
    assert state.scoring.consecutive_successes == 0
    walk(state, "up")
    assert state.scoring.consecutive_successes == 1
    assert state.scoring.current_points == 0
    assert state.player.row() == 4


def test_walking_every_stone_tile_pays_bonus_once(coloured_state):
    state = coloured_state
    walk(state, "left", "left", "up", "up")
    walk(state, "right", "right", "right", "right", "up")
    walk(state, "left", "left", "left", "left", "up")
    walk(state, "right", "right", "right", "right")
    assert len(state.player.walked_tiles) == 15
    assert state.scoring.current_points == 150

    state.update(0.0)
    assert state.scoring.current_points == 350
    assert state.player.walked_tiles == set()

    state.update(0.0)
    assert state.scoring.current_points == 350


def test_walked_tiles_cleared_when_coloured_mode_off(state):
    state.player.walked_tiles.add((1, 1))
    state.update(0.0)
    assert state.player.walked_tiles == set()


def test_gem_pickup_scores_and_respawns():
    state = make_state(collectibles_on=True)
    walk(state, "up", "up")
    gem = state.collectibles.current_collectibles[0]
    gem.body.x = column_x(2)
    gem.body.y = 3 * 83  # third stone row

    state.update(0.0)

    assert state.scoring.current_points == gem.points
    assert len(state.collectibles.current_collectibles) == 1
    assert state.collectibles.current_collectibles[0] is not gem
