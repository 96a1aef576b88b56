"""
The player avatar: hops one tile per command and tracks which stone tiles
it has already scored in coloured-tile mode.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Set, Tuple

from .config import (
    ALL_TILES_BONUS,
    CANVAS_W,
    CROSSABLE_TILES,
    DEFAULT_CHARACTER,
    PLAYER_START,
    PLAYER_VERTICAL_BUFFER,
    PLAYER_VISIBLE_W,
    STONE_ROWS,
    TILE_H,
    TILE_POINTS,
    TILE_W,
)
from .geometry import Body, collides_with, column_of, row_of

if TYPE_CHECKING:
    from .state import GameState

logger = logging.getLogger(__name__)


def _new_body() -> Body:
    x, y = PLAYER_START
    return Body(
        x=x,
        y=y,
        visible_width=PLAYER_VISIBLE_W,
        vertical_buffer=PLAYER_VERTICAL_BUFFER,
        sprite=DEFAULT_CHARACTER,
    )


@dataclass
class Player:
    body: Body = field(default_factory=_new_body)
    walked_tiles: Set[Tuple[int, int]] = field(default_factory=set)

    def row(self) -> int:
        return row_of(self.body)

    def column(self) -> int:
        return column_of(self.body)

    def on_stone(self) -> bool:
        return 0 <= self.row() < STONE_ROWS

    def set_character(self, sprite: str):
        self.body.sprite = sprite

    def reset(self):
        self.walked_tiles.clear()
        self.body.reset_position()

    # ------------------------- per-tick checks -------------------------

    def update(self, state: "GameState"):
        for enemy in state.enemies:
            if collides_with(enemy.body, self.body):
                state.enemy_collision()
                break

        for gem in list(state.collectibles.current_collectibles):
            if collides_with(gem.body, self.body):
                logger.info("Picked up %s (+%d)", gem.body.sprite, gem.points)
                state.scoring.add_points(self.row(), self.column(), gem.points)
                state.collectibles.reset_collectible()

        if not state.scoring.coloured_tile_on:
            self.walked_tiles.clear()

        if len(self.walked_tiles) >= CROSSABLE_TILES:
            logger.info("Every stone tile walked, +%d bonus", ALL_TILES_BONUS)
            state.scoring.add_points(self.row(), self.column(), ALL_TILES_BONUS)
            self.walked_tiles.clear()

    # ------------------------- movement -------------------------

    def handle_input(self, direction: str, state: "GameState") -> bool:
        """Apply one movement command. Returns True if the player moved."""
        if direction == "left":
            moved = self.move_left()
        elif direction == "right":
            moved = self.move_right()
        elif direction == "down":
            moved = self.move_down()
        elif direction == "up":
            if self.has_reached_top_row():
                self.reach_goal(state)
                return True
            moved = self.move_up()
        else:
            logger.debug("Ignoring player command %r", direction)
            return False

        if moved:
            self._record_tile(state)
        return moved

    def move_left(self) -> bool:
        if self.body.x >= TILE_W:
            self.body.x -= TILE_W
            return True
        return False

    def move_right(self) -> bool:
        if self.body.x + TILE_W < CANVAS_W:
            self.body.x += TILE_W
            return True
        return False

    def move_up(self) -> bool:
        self.body.y -= TILE_H
        return True

    def move_down(self) -> bool:
        if self.body.y < self.body.start_y:
            self.body.y += TILE_H
            return True
        return False

    def has_reached_top_row(self) -> bool:
        return self.body.y <= TILE_H

    def reach_goal(self, state: "GameState"):
        column = self.column()
        logger.info("Splash! Reached the water at column %d", column)
        state.scoring.reached_goal(column)
        self.body.reset_position()

    def _record_tile(self, state: "GameState"):
        if not state.scoring.coloured_tile_on or not self.on_stone():
            return
        tile = (self.row(), self.column())
        if tile in self.walked_tiles:
            return
        self.walked_tiles.add(tile)
        state.scoring.add_points(tile[0], tile[1], TILE_POINTS)
