"""Frogger-style crossing game: bugs, gems and a mode-aware scoring engine."""

from .collectibles import Collectible, CollectibleManager
from .enemy import Enemy
from .geometry import Body, collides_with
from .player import Player
from .scoring import GameProperties
from .state import GameState

__all__ = [
    "Body",
    "Collectible",
    "CollectibleManager",
    "Enemy",
    "GameProperties",
    "GameState",
    "Player",
    "collides_with",
]

__version__ = "1.0.0"
