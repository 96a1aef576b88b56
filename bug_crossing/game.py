"""
pygame front end: window, clock, key/mouse translation and drawing.

All art is drawn procedurally from the sprite keys the simulation exposes;
no image files are needed.
"""

import logging
import sys
from typing import Optional, Tuple

import pygame

from .config import (
    BUG_COLORS,
    CANVAS_H,
    CANVAS_W,
    CHARACTER_COLORS,
    COL_BG,
    COL_GAIN,
    COL_GRASS,
    COL_GRASS_SIDE,
    COL_LOSS,
    COL_OVERLAY,
    COL_STONE,
    COL_STONE_HIGHLIGHT,
    COL_STONE_SIDE,
    COL_TEXT,
    COL_TEXT_DIM,
    COL_WATER,
    COL_WATER_DARK,
    FPS,
    GEM_COLORS,
    GRID_COLS,
    INFO_ICON_RECT,
    POPUP_START,
    REVERSED_SUFFIX,
    ROW_GRASS,
    ROW_STONE,
    ROW_TYPES,
    ROW_WATER,
    TILE_H,
    TILE_TOP_INSET,
    TILE_W,
    TITLE,
)
from .geometry import Body, row_of
from .state import GameState

logger = logging.getLogger(__name__)


KEY_COMMANDS = {
    pygame.K_LEFT: "left",
    pygame.K_UP: "up",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_1: "one",
    pygame.K_2: "two",
    pygame.K_3: "three",
}

POPUP_STACK_OFFSET = 30

INFO_LINES = [
    ("Basic Gameplay", None),
    (None, "See how many times you can reach the water"),
    (None, "without being hit by a bug."),
    ("Coloured Tile Mode", None),
    (None, "Walk on as many tiles as you can without being"),
    (None, "hit by a bug. Each tile is 10 pts, going in the"),
    (None, "water is -30 pts and getting all tiles is 200."),
    ("Collectibles Mode", None),
    (None, "Collect as many gems as you can without being"),
    (None, "hit by a bug. Going in the water is -30 pts."),
    (None, "Blue: 25 pts, Orange: 50 pts, Green: 75 pts"),
    ("Alternate Directions Mode", None),
    (None, "The second row of bugs moves the other way"),
    (None, "for an added challenge."),
    (None, "* Changing modes resets the game."),
]


# ----------------------------- Helpers -----------------------------

def translate_key(key: int) -> Optional[str]:
    return KEY_COMMANDS.get(key)


def on_info_icon(pos: Tuple[int, int]) -> bool:
    x, y = pos
    left, top, w, h = INFO_ICON_RECT
    return left < x < left + w and top < y < top + h


def tile_rect(screen_row: int, col: int) -> pygame.Rect:
    return pygame.Rect(col * TILE_W, screen_row * TILE_H + TILE_TOP_INSET, TILE_W, TILE_H)


def stone_tile_center(game_row: int, col: int) -> Tuple[int, int]:
    # Game row 0 is the first stone row, drawn under the water row.
    return tile_rect(game_row + 1, col).center


def body_center(body: Body) -> Tuple[int, int]:
    _, cy = tile_rect(row_of(body) + 1, 0).center
    return int(body.midpoint()), cy


# ----------------------------- Game -----------------------------

class Game:
    def __init__(self, state: GameState, fps: int = FPS):
        pygame.init()
        pygame.display.set_caption(TITLE)
        self.screen = pygame.display.set_mode((CANVAS_W, CANVAS_H))
        self.clock = pygame.time.Clock()
        self.fps = fps

        self.font = pygame.font.SysFont("consolas", 22)
        self.font_small = pygame.font.SysFont("consolas", 16)
        self.font_big = pygame.font.SysFont("consolas", 30, bold=True)

        self.state = state

    def run(self):
        while True:
            dt = self.clock.tick(self.fps) / 1000.0

            self._handle_events()
            self.state.update(dt)
            self._draw()

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.state.toggle_pause()
                    continue
                command = translate_key(event.key)
                if command is not None:
                    self.state.handle_command(command)

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if on_info_icon(event.pos):
                    self.state.toggle_info()

    # ------------------------- drawing -------------------------

    def _draw(self):
        self.screen.fill(COL_BG)

        self._draw_board()
        self._draw_entities()
        self._draw_popups()
        self._draw_hud()

        if self.state.paused:
            self._draw_pause_screen()
        if self.state.show_info:
            self._draw_info_screen()
        self._draw_info_icon()

        pygame.display.flip()

    def _draw_board(self):
        walked = self.state.player.walked_tiles if self.state.scoring.coloured_tile_on else set()
        for screen_row, row_type in enumerate(ROW_TYPES):
            for col in range(GRID_COLS):
                r = tile_rect(screen_row, col)
                if row_type == ROW_WATER:
                    pygame.draw.rect(self.screen, COL_WATER, r)
                    pygame.draw.ellipse(self.screen, COL_WATER_DARK, (r.x + 20, r.y + 30, 60, 10))
                elif row_type == ROW_STONE:
                    face = COL_STONE_HIGHLIGHT if (screen_row - 1, col) in walked else COL_STONE
                    pygame.draw.rect(self.screen, face, r)
                    pygame.draw.rect(self.screen, COL_STONE_SIDE, r, width=2)
                elif row_type == ROW_GRASS:
                    pygame.draw.rect(self.screen, COL_GRASS, r)
                    pygame.draw.rect(self.screen, COL_GRASS_SIDE, r, width=2)

    def _draw_entities(self):
        for gem in self.state.collectibles.current_collectibles:
            self._draw_gem(gem.body)
        for enemy in self.state.enemies:
            self._draw_bug(enemy.body)
        self._draw_character(self.state.player.body, self.screen)

    def _draw_gem(self, body: Body):
        cx, cy = body_center(body)
        color = GEM_COLORS.get(body.sprite, COL_TEXT)
        points = [(cx, cy - 24), (cx + 20, cy), (cx, cy + 24), (cx - 20, cy)]
        pygame.draw.polygon(self.screen, color, points)
        pygame.draw.polygon(self.screen, COL_TEXT, points, width=2)

    def _draw_bug(self, body: Body):
        cx, cy = body_center(body)
        reversed_ = body.sprite.endswith(REVERSED_SUFFIX)
        tier = body.sprite.replace(REVERSED_SUFFIX, "").rsplit("-", 1)[-1]
        color = BUG_COLORS.get(tier, COL_TEXT)

        w = int(body.visible_width)
        shell = pygame.Rect(0, 0, w, 44)
        shell.center = (cx, cy)
        pygame.draw.ellipse(self.screen, color, shell)
        pygame.draw.line(self.screen, (40, 40, 40), (shell.x + 8, cy), (shell.right - 8, cy), 2)

        # Head on the side the bug is crawling towards.
        head_x = shell.left + 6 if reversed_ else shell.right - 6
        pygame.draw.circle(self.screen, (40, 40, 40), (head_x, cy), 12)
        pygame.draw.circle(self.screen, COL_TEXT, (head_x, cy - 4), 3)

    def _draw_character(self, body: Body, surf: pygame.Surface, center: Optional[Tuple[int, int]] = None):
        cx, cy = center if center is not None else body_center(body)
        color = CHARACTER_COLORS.get(body.sprite, COL_TEXT)
        torso = pygame.Rect(0, 0, int(body.visible_width), 30)
        torso.midtop = (cx, cy)
        pygame.draw.rect(surf, color, torso, border_radius=8)
        pygame.draw.circle(surf, (250, 220, 190), (cx, cy - 8), 14)
        pygame.draw.circle(surf, (40, 40, 40), (cx - 5, cy - 10), 2)
        pygame.draw.circle(surf, (40, 40, 40), (cx + 5, cy - 10), 2)

    def _draw_popups(self):
        offset = 0
        last_tile = None
        for popup in self.state.scoring.popups:
            tile = (popup.row, popup.column)
            # Stack popups that land on the same tile so they stay readable.
            offset = offset + POPUP_STACK_OFFSET if tile == last_tile else 0
            last_tile = tile

            text = f"{popup.points:+d}"
            color = COL_LOSS if popup.points < 0 else COL_GAIN
            label = self.font_big.render(text, True, color)
            label.set_alpha(int(255 * popup.fade_fraction()))

            cx, cy = stone_tile_center(popup.row, popup.column)
            rise = int(POPUP_START - popup.counter) // 2
            self.screen.blit(label, (cx - label.get_width() // 2 - offset, cy - rise - offset))

    def _draw_hud(self):
        scoring = self.state.scoring
        if scoring.points_tracking_modes_on():
            left = f"SCORE {scoring.current_points}"
            right = f"BEST {scoring.best_points}"
        else:
            left = f"STREAK {scoring.consecutive_successes}"
            right = "ESC: menu"
        self.screen.blit(self.font.render(left, True, COL_TEXT), (12, 14))
        right_txt = self.font.render(right, True, COL_TEXT_DIM)
        self.screen.blit(right_txt, (CANVAS_W - right_txt.get_width() - 12, 14))

    def _overlay_card(self):
        card = pygame.Surface((CANVAS_W - 20, CANVAS_H - 90), pygame.SRCALPHA)
        pygame.draw.rect(card, COL_OVERLAY, card.get_rect())
        pygame.draw.rect(card, COL_TEXT, card.get_rect(), width=2)
        self.screen.blit(card, (10, 60))

    def _draw_title(self, text: str, y: int):
        shadow = self.font_big.render(text, True, (0, 0, 0))
        title = self.font_big.render(text, True, COL_TEXT_DIM)
        x = (CANVAS_W - title.get_width()) // 2
        self.screen.blit(shadow, (x + 3, y + 3))
        self.screen.blit(title, (x, y))

    def _draw_pause_screen(self):
        self._overlay_card()
        self._draw_title("SELECT A CHARACTER", 80)

        menu = self.state.menu
        spacing = 90
        for i, sprite in enumerate(menu.characters):
            cx = 66 + i * spacing
            if i == menu.selection:
                pygame.draw.rect(self.screen, COL_STONE_HIGHLIGHT, (cx - 38, 140, 76, 96), width=3, border_radius=8)
            dummy = Body(x=0, y=0, visible_width=31, vertical_buffer=0, sprite=sprite)
            self._draw_character(dummy, self.screen, center=(cx, 185))

        self._draw_title("GAME MODES", 290)
        scoring = self.state.scoring
        modes = [
            ("1", "Coloured Tile", scoring.coloured_tile_on),
            ("2", "Collectibles", scoring.collectibles_on),
            ("3", "Alternate Directions", scoring.alternate_directions_on),
        ]
        for i, (key, name, on) in enumerate(modes):
            y = 350 + i * 55
            color = COL_GAIN if on else COL_LOSS
            label = self.font.render(f"[{key}]  {name} - {'ON' if on else 'OFF'}", True, color)
            self.screen.blit(label, (40, y))

        hint = self.font.render("Press ESC to play game", True, COL_TEXT)
        self.screen.blit(hint, ((CANVAS_W - hint.get_width()) // 2, 530))

    def _draw_info_screen(self):
        self._overlay_card()
        y = 75
        for title, line in INFO_LINES:
            if title is not None:
                y += 10
                self._draw_title(title, y)
                y += 36
            else:
                self.screen.blit(self.font_small.render(line, True, COL_TEXT), (30, y))
                y += 22

    def _draw_info_icon(self):
        left, top, w, h = INFO_ICON_RECT
        center = (left + w // 2, top + h // 2)
        pygame.draw.circle(self.screen, (60, 110, 200), center, w // 2 - 4)
        pygame.draw.circle(self.screen, COL_TEXT, center, w // 2 - 4, width=2)
        mark = self.font_big.render("i", True, COL_TEXT)
        self.screen.blit(mark, (center[0] - mark.get_width() // 2, center[1] - mark.get_height() // 2))

    def _quit(self):
        logger.info("Closing window; best score %d", self.state.scoring.best_points)
        pygame.quit()
        sys.exit(0)
