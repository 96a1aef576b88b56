"""
Tile geometry shared by every moving thing on the board.

Rows are counted from the first stone row (0) downwards; the water row sits
above row 0 and is never occupied. Columns are counted from the left edge.
"""

import logging
import math
from dataclasses import dataclass, field

from .config import TILE_H, TILE_W

logger = logging.getLogger(__name__)


@dataclass
class Body:
    # x, y are the top-left of the sprite art, not of the visible face.
    x: float
    y: float
    visible_width: float
    vertical_buffer: float
    sprite: str = "blank-tile"
    start_x: float = field(init=False)
    start_y: float = field(init=False)

    def __post_init__(self):
        self.start_x = self.x
        self.start_y = self.y

    def midpoint(self) -> float:
        return self.x + TILE_W / 2

    def reset_position(self):
        self.x = self.start_x
        self.y = self.start_y


def row_of(body: Body) -> int:
    offset = body.y - body.vertical_buffer
    if offset == 0:
        return 0
    return math.floor(offset / TILE_H)


def column_of(body: Body) -> int:
    if body.x == 0:
        return 0
    return math.floor(body.x / TILE_W)


def visible_left(body: Body) -> float:
    return body.midpoint() - body.visible_width / 2


def visible_right(body: Body) -> float:
    return body.midpoint() + body.visible_width / 2


def _edge_inside(edge: float, left: float, right: float) -> bool:
    return left < edge < right


def collides_with(a: Body, b: Body) -> bool:
    """True if both bodies share a row and their visible spans overlap.

    Touching edges do not count. A body never collides with itself, and
    anything without tile geometry is treated as a miss.
    """
    if a is b:
        return False
    try:
        if row_of(a) != row_of(b):
            return False
        a_left, a_right = visible_left(a), visible_right(a)
        b_left, b_right = visible_left(b), visible_right(b)
    except (AttributeError, TypeError) as err:
        logger.debug("Ignoring malformed collision query: %s", err)
        return False

    return (
        _edge_inside(b_left, a_left, a_right)
        or _edge_inside(b_right, a_left, a_right)
        or _edge_inside(a_left, b_left, b_right)
        or _edge_inside(a_right, b_left, b_right)
    )
