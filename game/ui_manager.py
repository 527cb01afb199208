"""
UI Manager - board, HUD and overlay rendering
Reads the session, never mutates it
"""

import pygame

from arena.grid import CellKind
from game.game_state import GameStatus
from utils.colors import (
    COLOR_BOARD_BG, COLOR_GRID_LINE, COLOR_PANEL_BG, COLOR_TEXT, COLOR_TEXT_DIM,
    COLOR_TEXT_HIGHLIGHT, COLOR_WALL, COLOR_DESTRUCTIBLE, COLOR_EXIT, COLOR_TRAP,
    COLOR_UPGRADE_BOMBS, COLOR_UPGRADE_RANGE, COLOR_UPGRADE_HEALTH,
    COLOR_PLAYER, COLOR_MONSTER, COLOR_BOMB, COLOR_EXPLOSION,
    COLOR_HEALTH, COLOR_RANGE, COLOR_SCORE, COLOR_OVERLAY,
    COLOR_WIN_BOX, COLOR_LOSE_BOX
)
from utils.constants import CELL_SIZE, CELL_PAD
from utils.helpers import format_score

CELL_COLORS = {
    CellKind.EMPTY: COLOR_BOARD_BG,
    CellKind.WALL: COLOR_WALL,
    CellKind.DESTRUCTIBLE: COLOR_DESTRUCTIBLE,
    CellKind.EXIT: COLOR_EXIT,
    CellKind.TRAP: COLOR_TRAP,
    CellKind.UPGRADE_BOMBS: COLOR_UPGRADE_BOMBS,
    CellKind.UPGRADE_RANGE: COLOR_UPGRADE_RANGE,
    CellKind.UPGRADE_HEALTH: COLOR_UPGRADE_HEALTH,
}

CELL_GLYPHS = {
    CellKind.EXIT: "EX",
    CellKind.TRAP: "!",
    CellKind.UPGRADE_BOMBS: "B+",
    CellKind.UPGRADE_RANGE: "R+",
    CellKind.UPGRADE_HEALTH: "H+",
}


def cell_appearance(session, x, y):
    """
    Color and glyph for one cell

    Player beats monster beats bomb beats explosion beats the cell kind.

    Returns:
        (color, glyph) tuple, glyph may be ""
    """
    if session.is_player_at(x, y):
        return COLOR_PLAYER, "P"
    if session.has_monster_at(x, y):
        return COLOR_MONSTER, "M"
    if session.has_bomb_at(x, y):
        return COLOR_BOMB, "o"
    if session.is_exploding(x, y):
        return COLOR_EXPLOSION, "*"

    kind = session.cell_at(x, y)
    return CELL_COLORS.get(kind, COLOR_BOARD_BG), CELL_GLYPHS.get(kind, "")


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self, cell_size=CELL_SIZE):
        self.cell_size = cell_size

        # Fonts
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self.font_title = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("consolas", 28, bold=True)
        self.font_title = pygame.font.SysFont("consolas", 48, bold=True)

    def draw_board(self, screen, session):
        """Draw every cell of the board at the top-left of the screen"""
        size = session.grid.size
        cs = self.cell_size
        for y in range(size):
            for x in range(size):
                color, glyph = cell_appearance(session, x, y)
                rect = pygame.Rect(x * cs, y * cs, cs, cs)
                pygame.draw.rect(screen, COLOR_BOARD_BG, rect)
                pygame.draw.rect(screen, color, rect.inflate(-CELL_PAD * 2, -CELL_PAD * 2), border_radius=4)
                pygame.draw.rect(screen, COLOR_GRID_LINE, rect, 1)

                if glyph:
                    text = self.font_medium.render(glyph, True, COLOR_TEXT)
                    screen.blit(text, text.get_rect(center=rect.center))

    def draw_hud(self, screen, session, best_score, panel_y, screen_w, panel_h):
        """
        Draw HUD (Heads-Up Display)

        Args:
            screen: Pygame screen
            session: GameSession
            best_score: Best score this run
            panel_y: Y position of panel
            screen_w: Screen width
            panel_h: Panel height
        """
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        hud = session.hud()
        items = [
            (f"HP {hud['health']}", COLOR_HEALTH),
            (f"Bombs {hud['bombs']}/{hud['max_bombs']}", COLOR_TEXT),
            (f"Range {hud['range']}", COLOR_RANGE),
            (f"Score {format_score(hud['score'])}", COLOR_SCORE),
        ]

        slot_w = screen_w // len(items)
        for i, (label, color) in enumerate(items):
            text = self.font_medium.render(label, True, color)
            text_rect = text.get_rect(center=(slot_w * i + slot_w // 2, panel_y + 22))
            screen.blit(text, text_rect)

        best = self.font_small.render(f"Best: {format_score(best_score)}", True, COLOR_TEXT_DIM)
        screen.blit(best, (10, panel_y + panel_h - 40))

        help_text = self.font_small.render(
            "Arrows/WASD: move | Space: bomb | P: pause | R: new game", True, COLOR_TEXT_DIM
        )
        screen.blit(help_text, (10, panel_y + panel_h - 22))

    def draw_result_overlay(self, screen, status, score):
        """Draw the victory / game over box; nothing while still playing"""
        if status == GameStatus.PLAYING:
            return

        screen_w, screen_h = screen.get_size()

        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        screen.blit(overlay, (0, 0))

        won = status == GameStatus.WON
        box = pygame.Rect(0, 0, min(360, screen_w - 20), 190)
        box.center = (screen_w // 2, screen_h // 2)
        pygame.draw.rect(screen, COLOR_WIN_BOX if won else COLOR_LOSE_BOX, box, border_radius=10)

        title = self.font_title.render("Victory!" if won else "Game Over", True, COLOR_TEXT_HIGHLIGHT)
        screen.blit(title, title.get_rect(center=(box.centerx, box.top + 45)))

        score_text = self.font_large.render(f"Score: {format_score(score)}", True, COLOR_TEXT)
        screen.blit(score_text, score_text.get_rect(center=(box.centerx, box.top + 105)))

        prompt = "Press R to play again" if won else "Press R to try again"
        hint = self.font_medium.render(prompt, True, COLOR_TEXT)
        screen.blit(hint, hint.get_rect(center=(box.centerx, box.top + 155)))

    def draw_paused(self, screen):
        """Draw paused overlay"""
        screen_w, screen_h = screen.get_size()

        # Semi-transparent overlay
        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        screen.blit(overlay, (0, 0))

        # Title
        title = self.font_title.render("PAUSED", True, COLOR_TEXT_HIGHLIGHT)
        title_rect = title.get_rect(center=(screen_w // 2, screen_h // 2 - 30))
        screen.blit(title, title_rect)

        # Instructions
        text = self.font_medium.render("Press P to resume", True, COLOR_TEXT)
        text_rect = text.get_rect(center=(screen_w // 2, screen_h // 2 + 30))
        screen.blit(text, text_rect)
