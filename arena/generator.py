"""
Board generation - border, pillars, random interior content, exit and monsters
"""

import random

from arena.grid import Grid, CellKind
from entities.monster import MonsterManager
from utils.constants import (
    GRID_SIZE, MONSTER_COUNT, PLAYER_SAFE_CORNER, MONSTER_SAFE_ZONE,
    GEN_DESTRUCTIBLE, GEN_TRAP, GEN_UPGRADE_BOMBS, GEN_UPGRADE_RANGE,
    GEN_UPGRADE_HEALTH
)

# (upper bound, kind) bands drawn from one value in [0, 1)
CONTENT_BANDS = [
    (GEN_DESTRUCTIBLE, CellKind.DESTRUCTIBLE),
    (GEN_TRAP, CellKind.TRAP),
    (GEN_UPGRADE_BOMBS, CellKind.UPGRADE_BOMBS),
    (GEN_UPGRADE_RANGE, CellKind.UPGRADE_RANGE),
    (GEN_UPGRADE_HEALTH, CellKind.UPGRADE_HEALTH),
]


def exit_position(size):
    return size - 2, size - 2


def content_for_roll(roll):
    """Map a value in [0, 1) to the cell kind of its band"""
    for upper, kind in CONTENT_BANDS:
        if roll < upper:
            return kind
    return CellKind.EMPTY


def in_player_corner(x, y):
    return x < PLAYER_SAFE_CORNER and y < PLAYER_SAFE_CORNER


def in_exit_corner(x, y, size):
    return x > size - 4 and y > size - 4


def in_monster_safe_zone(x, y):
    return x < MONSTER_SAFE_ZONE and y < MONSTER_SAFE_ZONE


def build_walls(size):
    """
    Empty board with the border ring and the even-coordinate pillars

    Returns:
        Grid
    """
    grid = Grid(size)
    last = size - 1
    grid.cells[0, :] = CellKind.WALL
    grid.cells[last, :] = CellKind.WALL
    grid.cells[:, 0] = CellKind.WALL
    grid.cells[:, last] = CellKind.WALL

    for y in range(2, size - 2, 2):
        for x in range(2, size - 2, 2):
            grid.set(x, y, CellKind.WALL)
    return grid


def scatter_content(grid, rng):
    """Roll random content for every empty interior cell outside the safe corners"""
    size = grid.size
    for y in range(1, size - 1):
        for x in range(1, size - 1):
            if grid.get(x, y) != CellKind.EMPTY:
                continue
            if in_player_corner(x, y) or in_exit_corner(x, y, size):
                continue
            grid.set(x, y, content_for_roll(rng.random()))


def spawn_monsters(grid, rng, count=MONSTER_COUNT, logger=None):
    """
    Place monsters on empty interior cells away from the player's start

    Candidates are drawn uniformly from [2, size-2) on both axes and redrawn
    until they land on an empty cell outside the safe zone.

    Returns:
        MonsterManager with ids 0..count-1 in placement order
    """
    size = grid.size
    manager = MonsterManager()

    eligible = [
        (x, y)
        for y in range(2, size - 2)
        for x in range(2, size - 2)
        if grid.get(x, y) == CellKind.EMPTY and not in_monster_safe_zone(x, y)
    ]
    if not eligible:
        if logger:
            logger.info("No room for monsters on this board")
        return manager

    for _ in range(count):
        while True:
            mx = rng.randrange(2, size - 2)
            my = rng.randrange(2, size - 2)
            if grid.get(mx, my) == CellKind.EMPTY and not in_monster_safe_zone(mx, my):
                break
        manager.add_monster(mx, my)
    return manager


def generate(size=GRID_SIZE, rng=None, monster_count=MONSTER_COUNT, logger=None):
    """
    Generate a fresh board and its monsters

    Args:
        size: Board edge length
        rng: random.Random source (a new unseeded one if None)
        monster_count: Monsters to spawn
        logger: Optional GameLogger

    Returns:
        (Grid, MonsterManager) tuple
    """
    if rng is None:
        rng = random.Random()

    grid = build_walls(size)
    scatter_content(grid, rng)
    ex, ey = exit_position(size)
    grid.set(ex, ey, CellKind.EXIT)

    monsters = spawn_monsters(grid, rng, monster_count, logger)

    if logger:
        logger.debug(f"Generated {grid!r} with {len(monsters)} monsters")
    return grid, monsters
