import random

from bug_crossing.collectibles import CollectibleManager
from bug_crossing.config import GEM_TIERS
from bug_crossing.geometry import column_of, row_of


def test_reset_places_one_gem_on_stone():
    manager = CollectibleManager(random.Random(8))
    tiers = dict(GEM_TIERS)
    for _ in range(200):
        gem = manager.reset_collectible()
        assert manager.current_collectibles == [gem]
        assert tiers[gem.body.sprite] == gem.points
        assert gem.body.x % 101 == 0
        assert 0 <= column_of(gem.body) < 5
        assert row_of(gem.body) in (0, 1, 2)


def test_update_only_spawns_when_mode_on_and_slot_empty():
    manager = CollectibleManager(random.Random(8))
    manager.update(False)
    assert manager.current_collectibles == []

    manager.update(True)
    assert len(manager.current_collectibles) == 1
    first = manager.current_collectibles[0]
    manager.update(True)
    assert manager.current_collectibles == [first]


def test_remove_collectibles_clears_slot():
    manager = CollectibleManager(random.Random(8))
    manager.reset_collectible()
    manager.remove_collectibles()
    assert manager.current_collectibles == []
