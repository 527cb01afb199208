"""
Game configuration - defaults from constants, overridable from the environment
"""

import os

from utils.constants import (
    GRID_SIZE, MIN_GRID_SIZE, MONSTER_COUNT, MONSTER_TICK_MS,
    BOMB_FUSE_MS, EXPLOSION_DISPLAY_MS,
    PLAYER_SPAWN, PLAYER_START_HEALTH, PLAYER_MAX_HEALTH,
    PLAYER_START_BOMBS, PLAYER_START_RANGE
)
from utils.logger import level_from_name


class GameConfig:
    """Settings for one game session"""
    def __init__(self, **kwargs):
        # Board
        self.grid_size = kwargs.get('grid_size', GRID_SIZE)
        self.monster_count = kwargs.get('monster_count', MONSTER_COUNT)

        # Timing (milliseconds)
        self.monster_tick_ms = kwargs.get('monster_tick_ms', MONSTER_TICK_MS)
        self.fuse_ms = kwargs.get('fuse_ms', BOMB_FUSE_MS)
        self.explosion_ms = kwargs.get('explosion_ms', EXPLOSION_DISPLAY_MS)

        # Player defaults
        self.spawn = kwargs.get('spawn', PLAYER_SPAWN)
        self.start_health = kwargs.get('start_health', PLAYER_START_HEALTH)
        self.max_health = kwargs.get('max_health', PLAYER_MAX_HEALTH)
        self.start_bombs = kwargs.get('start_bombs', PLAYER_START_BOMBS)
        self.start_range = kwargs.get('start_range', PLAYER_START_RANGE)

        # Seed for the random source (None = system entropy)
        self.seed = kwargs.get('seed', None)

        # Logging
        self.log_level = kwargs.get('log_level', 'INFO')

        self._validate()

    def _validate(self):
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE}, got {self.grid_size}")
        if self.monster_count < 0:
            raise ValueError("monster_count must not be negative")
        for name in ('monster_tick_ms', 'fuse_ms', 'explosion_ms'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.start_bombs < 1 or self.start_range < 1:
            raise ValueError("start_bombs and start_range must be at least 1")
        if not 0 < self.start_health <= self.max_health:
            raise ValueError("start_health must be within 1..max_health")
        level_from_name(self.log_level)

    def __repr__(self):
        return (f"GameConfig(grid={self.grid_size}, monsters={self.monster_count}, "
                f"fuse={self.fuse_ms}ms, seed={self.seed})")


def _env_int(environ, name):
    raw = environ.get(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config(environ=None):
    """
    Build a GameConfig from environment variables

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        GameConfig
    """
    if environ is None:
        environ = os.environ

    overrides = {}
    env_map = {
        'seed': 'BOMBER_SEED',
        'monster_tick_ms': 'BOMBER_MONSTER_TICK_MS',
        'fuse_ms': 'BOMBER_FUSE_MS',
        'explosion_ms': 'BOMBER_EXPLOSION_MS',
    }
    for key, var in env_map.items():
        value = _env_int(environ, var)
        if value is not None:
            overrides[key] = value

    log_level = environ.get('BOMBER_LOG_LEVEL')
    if log_level:
        overrides['log_level'] = log_level

    return GameConfig(**overrides)
