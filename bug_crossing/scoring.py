"""
Points, streaks and the game-mode switches.

The three modes are independent booleans. Only coloured tiles and
collectibles affect scoring, so the outcome of reaching the water or being
hit is looked up from MODE_POLICIES by that pair of flags.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from .config import POPUP_FADE_PER_SECOND, POPUP_START, WATER_PENALTY

logger = logging.getLogger(__name__)


class GoalEffect(Enum):
    COUNT_SUCCESS = "count_success"
    WATER_PENALTY = "water_penalty"


class CollisionEffect(Enum):
    BREAK_STREAK = "break_streak"
    BANK_AND_RESET = "bank_and_reset"


@dataclass(frozen=True)
class ModePolicy:
    on_goal: GoalEffect
    on_collision: CollisionEffect


_STREAK_POLICY = ModePolicy(GoalEffect.COUNT_SUCCESS, CollisionEffect.BREAK_STREAK)
_POINTS_POLICY = ModePolicy(GoalEffect.WATER_PENALTY, CollisionEffect.BANK_AND_RESET)

# (coloured_tile_on, collectibles_on) -> policy
MODE_POLICIES: Dict[Tuple[bool, bool], ModePolicy] = {
    (False, False): _STREAK_POLICY,
    (True, False): _POINTS_POLICY,
    (False, True): _POINTS_POLICY,
    (True, True): _POINTS_POLICY,
}


@dataclass
class PointsPopup:
    row: int
    column: int
    points: int
    counter: float = POPUP_START

    def fade_fraction(self) -> float:
        return max(0.0, min(1.0, self.counter / POPUP_START))

    def expired(self) -> bool:
        return self.counter <= 0


class GameProperties:
    def __init__(self, coloured_tile_on: bool = False, collectibles_on: bool = False,
                 alternate_directions_on: bool = False):
        self.current_points = 0
        self.best_points = 0
        self.consecutive_successes = 0
        self.coloured_tile_on = coloured_tile_on
        self.collectibles_on = collectibles_on
        self.alternate_directions_on = alternate_directions_on
        self.popups: List[PointsPopup] = []

    def points_tracking_modes_on(self) -> bool:
        return self.coloured_tile_on or self.collectibles_on

    def policy(self) -> ModePolicy:
        return MODE_POLICIES[(self.coloured_tile_on, self.collectibles_on)]

    def add_points(self, row: int, column: int, points: int):
        self.current_points += points
        self.popups.append(PointsPopup(row, column, points))
        logger.debug("%+d points at (%d, %d), total %d", points, row, column, self.current_points)

    def reached_goal(self, column: int) -> GoalEffect:
        effect = self.policy().on_goal
        if effect is GoalEffect.WATER_PENALTY:
            self.add_points(0, column, WATER_PENALTY)
        else:
            self.consecutive_successes += 1
        return effect

    def collided(self) -> CollisionEffect:
        """Apply the score side of an enemy hit.

        The caller is responsible for putting the player back on the start
        tile, whichever effect applies.
        """
        effect = self.policy().on_collision
        if effect is CollisionEffect.BANK_AND_RESET:
            self.reset()
        else:
            self.consecutive_successes = 0
        return effect

    def reset(self):
        if self.current_points > self.best_points:
            self.best_points = self.current_points
        self.current_points = 0
        self.consecutive_successes = 0

    def update(self, dt: float):
        for popup in self.popups:
            popup.counter -= POPUP_FADE_PER_SECOND * dt
        self.popups = [p for p in self.popups if not p.expired()]
