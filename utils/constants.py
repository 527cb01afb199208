"""
Global constants for Bomber Escape
"""

# Screen settings
GRID_SIZE = 12
CELL_SIZE = 45
FPS = 60
CELL_PAD = 3

# HUD panel height
PANEL_H = 90

# Orthogonal direction vectors (up, down, left, right)
DIRS = [
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
]

# Player settings
PLAYER_SPAWN = (1, 1)
PLAYER_START_HEALTH = 3
PLAYER_MAX_HEALTH = 5
PLAYER_START_BOMBS = 2
PLAYER_START_RANGE = 2

# Monster settings
MONSTER_COUNT = 4
MONSTER_TICK_MS = 800

# Timing (milliseconds)
BOMB_FUSE_MS = 2000
EXPLOSION_DISPLAY_MS = 500

# Safe zones
PLAYER_SAFE_CORNER = 3   # x < 3 and y < 3 gets no random content
MONSTER_SAFE_ZONE = 4    # no monster spawns with x < 4 and y < 4

# Cumulative thresholds for random interior content
GEN_DESTRUCTIBLE = 0.40
GEN_TRAP = 0.43
GEN_UPGRADE_BOMBS = 0.45
GEN_UPGRADE_RANGE = 0.47
GEN_UPGRADE_HEALTH = 0.49

# Score constants
SCORE_DESTRUCTIBLE = 10
SCORE_MONSTER = 100
SCORE_UPGRADE_BOMBS = 50
SCORE_UPGRADE_RANGE = 50
SCORE_UPGRADE_HEALTH = 30

# Smallest board that still fits both safe corners and the exit
MIN_GRID_SIZE = 7

GAME_TITLE = "Bomber Escape"
GAME_VERSION = "1.0.0"
