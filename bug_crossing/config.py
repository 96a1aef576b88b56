"""
Game-wide constants. Everything is in canvas pixels unless noted.
"""

from typing import Dict, List, Tuple


# ----------------------------- Window -----------------------------

CANVAS_W, CANVAS_H = 505, 606
FPS = 60
TITLE = "Bug Crossing"

# ----------------------------- Grid -----------------------------

TILE_W = 101
TILE_H = 83  # visible height of a tile; the block art is taller
TILE_TOP_INSET = 50  # transparent band above the visible face of a block

GRID_COLS = 5
GRID_ROWS = 6

# Screen rows, top to bottom.
ROW_WATER = "water"
ROW_STONE = "stone"
ROW_GRASS = "grass"
ROW_TYPES = [ROW_WATER, ROW_STONE, ROW_STONE, ROW_STONE, ROW_GRASS, ROW_GRASS]

# Game rows 0..2 are the stone rows; they are the only rows bugs and gems use.
STONE_ROWS = 3
CROSSABLE_TILES = STONE_ROWS * GRID_COLS

# ----------------------------- Enemies -----------------------------

ENEMY_COUNT = 5
ENEMY_VERTICAL_BUFFER = 57
ENEMY_VISIBLE_W = 86
ENEMY_START_X = -102
ENEMY_LEFT_WRAP = -102
ENEMY_RIGHT_WRAP = CANVAS_W + 2
ENEMY_SPEED_RANGE = (100, 399)  # inclusive, px/sec
REVERSED_ROW = 1  # the only row that runs right-to-left in alternate mode

# Lower bound of each speed tier, fastest first.
ENEMY_SPEED_TIERS: List[Tuple[int, str]] = [
    (300, "green"),
    (250, "yellow"),
    (200, "red"),
    (150, "purple"),
    (100, "blue"),
]
REVERSED_SUFFIX = "-reversed"

# ----------------------------- Player -----------------------------

PLAYER_START = (202, 380)
PLAYER_VERTICAL_BUFFER = 48
PLAYER_VISIBLE_W = 31

CHARACTERS = [
    "char-boy",
    "char-cat-girl",
    "char-horn-girl",
    "char-pink-girl",
    "char-princess-girl",
]
DEFAULT_CHARACTER = CHARACTERS[0]

# ----------------------------- Collectibles -----------------------------

GEM_VERTICAL_BUFFER = 57
GEM_VISIBLE_W = 95
GEM_TIERS: List[Tuple[str, int]] = [
    ("gem-blue", 25),
    ("gem-orange", 50),
    ("gem-green", 75),
]

# ----------------------------- Scoring -----------------------------

TILE_POINTS = 10
ALL_TILES_BONUS = 200
WATER_PENALTY = -30

POPUP_START = 100.0  # fade counter; popup is fully opaque at this value
POPUP_FADE_PER_SECOND = 60.0

# ----------------------------- Overlay -----------------------------

INFO_ICON_RECT = (423, 507, 64, 64)

# ----------------------------- Colors -----------------------------

COL_BG = (20, 20, 28)
COL_WATER = (64, 164, 223)
COL_WATER_DARK = (45, 140, 200)
COL_STONE = (150, 150, 150)
COL_STONE_SIDE = (110, 110, 110)
COL_STONE_HIGHLIGHT = (240, 210, 90)
COL_GRASS = (102, 204, 102)
COL_GRASS_SIDE = (70, 160, 70)
COL_TEXT = (255, 255, 255)
COL_TEXT_DIM = (170, 170, 170)
COL_GAIN = (90, 220, 110)
COL_LOSS = (235, 80, 80)
COL_OVERLAY = (0, 0, 0, 215)

BUG_COLORS: Dict[str, Tuple[int, int, int]] = {
    "green": (90, 220, 140),
    "yellow": (255, 220, 60),
    "red": (232, 80, 84),
    "purple": (170, 110, 255),
    "blue": (82, 150, 255),
}

GEM_COLORS: Dict[str, Tuple[int, int, int]] = {
    "gem-blue": (82, 150, 255),
    "gem-orange": (255, 160, 50),
    "gem-green": (90, 220, 140),
}

CHARACTER_COLORS: Dict[str, Tuple[int, int, int]] = {
    "char-boy": (90, 140, 230),
    "char-cat-girl": (250, 170, 60),
    "char-horn-girl": (200, 110, 220),
    "char-pink-girl": (255, 130, 180),
    "char-princess-girl": (250, 225, 90),
}
