import pygame
import pytest

from bug_crossing.__main__ import build_parser, build_state, main
from bug_crossing.game import on_info_icon, translate_key


@pytest.mark.parametrize(
    "key, command",
    [
        (pygame.K_LEFT, "left"),
        (pygame.K_RIGHT, "right"),
        (pygame.K_UP, "up"),
        (pygame.K_DOWN, "down"),
        (pygame.K_1, "one"),
        (pygame.K_2, "two"),
        (pygame.K_3, "three"),
        (pygame.K_a, None),
    ],
)
def test_translate_key(key, command):
    assert translate_key(key) == command


def test_info_icon_hit_area_excludes_border():
    assert on_info_icon((455, 539))
    assert not on_info_icon((423, 539))
    assert not on_info_icon((100, 100))


def test_cli_flags_build_state():
    args = build_parser().parse_args(
        ["--coloured-tiles", "--alternate-directions", "--enemies", "2", "--seed", "4"]
    )
    state = build_state(args)
    assert state.scoring.coloured_tile_on
    assert not state.scoring.collectibles_on
    assert state.scoring.alternate_directions_on
    assert len(state.enemies) == 2
    assert state.paused


def test_cli_rejects_negative_enemy_count():
    with pytest.raises(SystemExit):
        main(["--enemies", "-1"])
