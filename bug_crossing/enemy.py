"""
Bugs that crawl along the stone rows.
"""

import logging
import random
from dataclasses import dataclass, field

from .config import (
    ENEMY_LEFT_WRAP,
    ENEMY_RIGHT_WRAP,
    ENEMY_SPEED_RANGE,
    ENEMY_SPEED_TIERS,
    ENEMY_START_X,
    ENEMY_VERTICAL_BUFFER,
    ENEMY_VISIBLE_W,
    REVERSED_ROW,
    REVERSED_SUFFIX,
    STONE_ROWS,
    TILE_H,
)
from .geometry import Body, row_of

logger = logging.getLogger(__name__)


def sprite_for_speed(speed: int, reversed_: bool = False) -> str:
    tier = ENEMY_SPEED_TIERS[-1][1]
    for floor, name in ENEMY_SPEED_TIERS:
        if speed >= floor:
            tier = name
            break
    sprite = f"enemy-bug-{tier}"
    return sprite + REVERSED_SUFFIX if reversed_ else sprite


def random_row_y(rng: random.Random) -> int:
    return rng.randrange(STONE_ROWS) * TILE_H + ENEMY_VERTICAL_BUFFER


@dataclass
class Enemy:
    body: Body
    speed: int = ENEMY_SPEED_RANGE[0]
    reversed: bool = False
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def spawn(cls, rng: random.Random, alternate_directions: bool = False) -> "Enemy":
        body = Body(
            x=ENEMY_START_X,
            y=random_row_y(rng),
            visible_width=ENEMY_VISIBLE_W,
            vertical_buffer=ENEMY_VERTICAL_BUFFER,
        )
        enemy = cls(body=body, rng=rng)
        enemy.reversed = alternate_directions and enemy.row() == REVERSED_ROW
        if enemy.reversed:
            body.x = ENEMY_RIGHT_WRAP
        enemy.set_speed()
        return enemy

    def row(self) -> int:
        return row_of(self.body)

    def update(self, dt: float, alternate_directions: bool = False):
        # Frame-rate independent: distance scales with elapsed seconds.
        if self.reversed:
            self.body.x -= self.speed * dt
            if self.body.x < ENEMY_LEFT_WRAP:
                self.reset(alternate_directions)
        else:
            self.body.x += self.speed * dt
            if self.body.x > ENEMY_RIGHT_WRAP:
                self.reset(alternate_directions)

    def reset(self, alternate_directions: bool = False):
        """Send the bug back in on a fresh random row at a fresh speed."""
        self.body.y = random_row_y(self.rng)
        self.reversed = alternate_directions and self.row() == REVERSED_ROW
        self.body.x = ENEMY_RIGHT_WRAP if self.reversed else self.body.start_x
        self.set_speed()
        logger.debug("Bug reset to row %d at speed %d", self.row(), self.speed)

    def set_speed(self):
        lo, hi = ENEMY_SPEED_RANGE
        self.speed = self.rng.randint(lo, hi)
        self.body.sprite = sprite_for_speed(self.speed, self.reversed)

    def set_reversed(self, reversed_: bool):
        # Called on a mode toggle; the bug keeps its place and speed.
        self.reversed = reversed_
        self.body.sprite = sprite_for_speed(self.speed, self.reversed)
