"""
Gems the player can pick up while collectibles mode is on.
"""

import logging
import random
from dataclasses import dataclass
from typing import List

from .config import (
    GEM_TIERS,
    GEM_VERTICAL_BUFFER,
    GEM_VISIBLE_W,
    GRID_COLS,
    STONE_ROWS,
    TILE_H,
    TILE_W,
)
from .geometry import Body

logger = logging.getLogger(__name__)


@dataclass
class Collectible:
    body: Body
    points: int


class CollectibleManager:
    """Keeps at most one gem on the board."""

    def __init__(self, rng: random.Random, rows: int = STONE_ROWS, columns: int = GRID_COLS):
        self.rng = rng
        self.rows = rows
        self.columns = columns
        self.current_collectibles: List[Collectible] = []

    def reset_collectible(self) -> Collectible:
        sprite, points = self.rng.choice(GEM_TIERS)
        x = self.rng.randrange(self.columns) * TILE_W
        # +1 skips the water row so the gem lands on stone.
        y = (self.rng.randrange(self.rows) + 1) * TILE_H

        gem = Collectible(
            body=Body(
                x=x,
                y=y,
                visible_width=GEM_VISIBLE_W,
                vertical_buffer=GEM_VERTICAL_BUFFER,
                sprite=sprite,
            ),
            points=points,
        )
        self.current_collectibles = [gem]
        logger.debug("Placed %s worth %d at (%d, %d)", sprite, points, x, y)
        return gem

    def update(self, collectibles_on: bool):
        if collectibles_on and not self.current_collectibles:
            self.reset_collectible()

    def remove_collectibles(self):
        self.current_collectibles = []
