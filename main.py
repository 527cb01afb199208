"""
Bomber Escape
Place bombs, dodge monsters and traps, reach the exit
"""

import os
import sys

os.environ.setdefault('SDL_VIDEO_ALLOW_SCREENSAVER', '1')

import pygame

from game.controller import GameController
from game.ui_manager import UIManager
from utils.config import load_config
from utils.constants import CELL_SIZE, FPS, PANEL_H, GAME_TITLE, GAME_VERSION
from utils.colors import COLOR_BG
from utils.logger import SystemLogger, level_from_name

DIRECTION_KEYS = {
    pygame.K_UP: (0, -1),
    pygame.K_w: (0, -1),
    pygame.K_DOWN: (0, 1),
    pygame.K_s: (0, 1),
    pygame.K_LEFT: (-1, 0),
    pygame.K_a: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_d: (1, 0),
}

RESET_KEYS = (pygame.K_r, pygame.K_RETURN)


class BomberGame:
    """
    Main game class - window, input and the frame loop
    """
    def __init__(self, config=None):
        self.config = config or load_config()
        self.system_log = SystemLogger(level_from_name(self.config.log_level))

        pygame.init()

        self.controller = GameController(self.config)
        self.ui_manager = UIManager()

        # Screen sized to the board plus HUD panel
        self.board_px = self.config.grid_size * CELL_SIZE
        self.screen_w = self.board_px
        self.screen_h = self.board_px + PANEL_H
        self.screen = pygame.display.set_mode((self.screen_w, self.screen_h))
        pygame.display.set_caption(f"{GAME_TITLE} v{GAME_VERSION}")

        self.clock = pygame.time.Clock()
        self.running = True
        self.paused = False

        self.system_log.info(f"Started with {self.config!r}")

    def handle_events(self):
        """Handle input events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key):
        """Translate a key press into a controller intent"""
        if key == pygame.K_ESCAPE:
            self.running = False

        elif key in RESET_KEYS:
            self.paused = False
            self.controller.reset()

        elif key == pygame.K_p:
            if not self.controller.is_game_over():
                self.paused = not self.paused

        elif self.paused:
            return

        elif key in DIRECTION_KEYS:
            dx, dy = DIRECTION_KEYS[key]
            self.controller.on_direction(dx, dy)

        elif key == pygame.K_SPACE:
            self.controller.on_place_bomb()

    def update(self, dt_ms):
        """Feed elapsed time to the simulation"""
        if not self.paused:
            self.controller.advance(dt_ms)

    def render(self):
        """Render current game state"""
        session = self.controller.session
        self.screen.fill(COLOR_BG)

        self.ui_manager.draw_board(self.screen, session)
        self.ui_manager.draw_hud(
            self.screen, session, self.controller.best_score,
            self.board_px, self.screen_w, PANEL_H
        )

        if self.paused:
            self.ui_manager.draw_paused(self.screen)
        self.ui_manager.draw_result_overlay(self.screen, session.status, session.score)

        pygame.display.flip()

    def run(self):
        """Main game loop"""
        while self.running:
            dt_ms = self.clock.tick(FPS)

            self.handle_events()
            self.update(dt_ms)
            self.render()

        self.system_log.info(
            f"Closed after {self.controller.games_played} games, best score {self.controller.best_score}"
        )
        pygame.quit()


def main():
    """Entry point"""
    try:
        config = load_config()
    except ValueError as e:
        SystemLogger().error(f"Bad configuration: {e}")
        sys.exit(2)

    game = BomberGame(config)
    game.run()


if __name__ == "__main__":
    main()
