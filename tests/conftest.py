"""
Shared fixtures: hand-drawn boards and a controller with no monster ticks
"""
import logging
import random

import pytest

from arena.grid import Grid, CellKind
from entities.bomb import BombManager
from entities.monster import MonsterManager
from entities.player import Player
from game.controller import GameController
from game.game_state import GameSession
from utils.config import GameConfig
from utils.logger import GameLogger

GLYPHS = {
    '.': CellKind.EMPTY,
    '#': CellKind.WALL,
    'x': CellKind.DESTRUCTIBLE,
    'E': CellKind.EXIT,
    '^': CellKind.TRAP,
    'b': CellKind.UPGRADE_BOMBS,
    'r': CellKind.UPGRADE_RANGE,
    'h': CellKind.UPGRADE_HEALTH,
}


def parse_board(text):
    """Build a Grid from an ASCII map, one row per line"""
    rows = [line.strip() for line in text.strip().splitlines()]
    return Grid.from_rows([[GLYPHS[ch] for ch in row] for row in rows])


def make_session(board, player=(1, 1), monsters=(), health=3, bombs=2, blast_range=2):
    grid = parse_board(board)
    manager = MonsterManager()
    for mx, my in monsters:
        manager.add_monster(mx, my)
    hero = Player(player[0], player[1], health=health, bombs=bombs, blast_range=blast_range)
    return GameSession(grid, hero, manager, BombManager())


@pytest.fixture
def logger():
    return GameLogger(logging.WARNING)


@pytest.fixture
def session_factory():
    return make_session


@pytest.fixture
def controller(logger):
    """Controller whose monsters never tick on their own"""
    config = GameConfig(monster_tick_ms=10 ** 9, seed=7)
    return GameController(config, rng=random.Random(7), logger=logger)

