"""
GameState owns every piece of the simulation and is what the loop driver
talks to: one update(dt) per frame plus the command entry points.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .collectibles import CollectibleManager
from .config import CHARACTERS, ENEMY_COUNT, REVERSED_ROW
from .enemy import Enemy
from .player import Player
from .scoring import CollisionEffect, GameProperties

logger = logging.getLogger(__name__)

PLAYER_COMMANDS = ("left", "right", "up", "down")


@dataclass
class PauseMenu:
    characters: List[str] = field(default_factory=lambda: list(CHARACTERS))
    selection: int = 0

    def selected_character(self) -> str:
        return self.characters[self.selection]

    def select_previous(self):
        if self.selection > 0:
            self.selection -= 1

    def select_next(self):
        if self.selection < len(self.characters) - 1:
            self.selection += 1


class GameState:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        enemy_count: int = ENEMY_COUNT,
        coloured_tile_on: bool = False,
        collectibles_on: bool = False,
        alternate_directions_on: bool = False,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.scoring = GameProperties(coloured_tile_on, collectibles_on, alternate_directions_on)
        self.enemies = [
            Enemy.spawn(self.rng, alternate_directions_on) for _ in range(enemy_count)
        ]
        self.collectibles = CollectibleManager(self.rng)
        self.player = Player()
        self.menu = PauseMenu()
        self.paused = True
        self.show_info = False

        self.collectibles.update(collectibles_on)

    # ------------------------- frame tick -------------------------

    def update(self, dt: float):
        # Popups keep fading behind the pause screen.
        self.scoring.update(dt)
        if self.paused:
            return
        for enemy in self.enemies:
            enemy.update(dt, self.scoring.alternate_directions_on)
        self.player.update(self)
        self.collectibles.update(self.scoring.collectibles_on)

    # ------------------------- outcomes -------------------------

    def enemy_collision(self):
        logger.info("Hit by a bug at row %d, column %d", self.player.row(), self.player.column())
        effect = self.scoring.collided()
        if effect is CollisionEffect.BANK_AND_RESET:
            logger.debug("Banked best score %d", self.scoring.best_points)
        self.player.reset()

    def reset(self):
        """Bank the best score, zero the run and put the player back at the start."""
        self.scoring.reset()
        self.player.reset()

    # ------------------------- commands -------------------------

    def toggle_pause(self):
        self.paused = not self.paused
        if not self.paused:
            self.player.set_character(self.menu.selected_character())

    def toggle_info(self):
        self.show_info = not self.show_info

    def handle_command(self, command: str):
        """Route an abstract command to the player or the pause menu."""
        if self.paused:
            self.handle_menu_command(command)
        elif command in PLAYER_COMMANDS:
            self.player.handle_input(command, self)
        else:
            logger.debug("Ignoring %r while playing", command)

    def handle_menu_command(self, command: str):
        if command == "left":
            self.menu.select_previous()
        elif command == "right":
            self.menu.select_next()
        elif command == "one":
            self.toggle_coloured_tile_mode()
        elif command == "two":
            self.toggle_collectibles_mode()
        elif command == "three":
            self.toggle_alternate_directions_mode()
        else:
            logger.debug("Ignoring %r on the pause menu", command)

    def toggle_coloured_tile_mode(self):
        self.scoring.coloured_tile_on = not self.scoring.coloured_tile_on
        logger.info("Coloured tile mode %s", "on" if self.scoring.coloured_tile_on else "off")
        self.reset()

    def toggle_collectibles_mode(self):
        self.scoring.collectibles_on = not self.scoring.collectibles_on
        logger.info("Collectibles mode %s", "on" if self.scoring.collectibles_on else "off")
        if self.scoring.collectibles_on:
            self.collectibles.update(True)
        else:
            self.collectibles.remove_collectibles()
        self.reset()

    def toggle_alternate_directions_mode(self):
        self.scoring.alternate_directions_on = not self.scoring.alternate_directions_on
        logger.info(
            "Alternate directions mode %s",
            "on" if self.scoring.alternate_directions_on else "off",
        )
        for enemy in self.enemies:
            if enemy.row() == REVERSED_ROW:
                enemy.set_reversed(self.scoring.alternate_directions_on)
        self.reset()
