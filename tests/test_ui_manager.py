"""
Tests for board/HUD drawing, run headless
"""
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pygame
import pytest

from game.game_state import GameStatus
from game.ui_manager import UIManager, cell_appearance
from utils.colors import (
    COLOR_WALL, COLOR_PLAYER, COLOR_MONSTER, COLOR_BOMB, COLOR_EXPLOSION,
    COLOR_UPGRADE_RANGE
)
from utils.constants import CELL_SIZE, PANEL_H

BOARD = """
#####
#..r#
#...#
#...#
#####
"""


@pytest.fixture(scope="module")
def ui():
    pygame.init()
    yield UIManager()
    pygame.quit()


def test_cell_priority(session_factory):
    session = session_factory(BOARD, player=(1, 1), monsters=[(1, 1), (2, 2)])
    session.bombs.add_bomb(2, 2, 0, 2000)
    session.bombs.add_bomb(3, 3, 0, 2000)
    session.explosions = {(3, 3), (1, 3)}

    assert cell_appearance(session, 1, 1)[0] == COLOR_PLAYER
    assert cell_appearance(session, 2, 2)[0] == COLOR_MONSTER
    assert cell_appearance(session, 3, 3)[0] == COLOR_BOMB
    assert cell_appearance(session, 1, 3)[0] == COLOR_EXPLOSION
    assert cell_appearance(session, 3, 1) == (COLOR_UPGRADE_RANGE, "R+")
    assert cell_appearance(session, 0, 0) == (COLOR_WALL, "")


def test_draw_frame(ui, session_factory):
    session = session_factory(BOARD)
    size = session.grid.size * CELL_SIZE
    screen = pygame.Surface((size, size + PANEL_H))

    ui.draw_board(screen, session)
    ui.draw_hud(screen, session, 120, size, size, PANEL_H)

    center = (CELL_SIZE // 2, CELL_SIZE // 2)
    assert tuple(screen.get_at(center))[:3] == COLOR_WALL


def test_overlay_only_when_over(ui):
    screen = pygame.Surface((200, 200))
    screen.fill((1, 2, 3))

    ui.draw_result_overlay(screen, GameStatus.PLAYING, 0)
    assert tuple(screen.get_at((0, 0)))[:3] == (1, 2, 3)

    ui.draw_result_overlay(screen, GameStatus.LOST, 40)
    assert tuple(screen.get_at((0, 0)))[:3] != (1, 2, 3)
