"""
Color palette for Bomber Escape
"""

# Background colors
COLOR_BG = (31, 41, 55)           # Main background
COLOR_BOARD_BG = (17, 24, 39)     # Empty floor
COLOR_PANEL_BG = (12, 14, 18)     # Panel background
COLOR_GRID_LINE = (31, 41, 55)    # Cell borders

# UI colors
COLOR_TEXT = (210, 210, 210)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)  # Highlighted text
COLOR_TEXT_DIM = (150, 150, 150)  # Dimmed text

# Cell colors
COLOR_WALL = (55, 65, 81)
COLOR_DESTRUCTIBLE = (180, 83, 9)
COLOR_EXIT = (34, 197, 94)
COLOR_TRAP = (185, 28, 28)
COLOR_UPGRADE_BOMBS = (6, 182, 212)
COLOR_UPGRADE_RANGE = (234, 179, 8)
COLOR_UPGRADE_HEALTH = (236, 72, 153)

# Entity colors
COLOR_PLAYER = (59, 130, 246)
COLOR_MONSTER = (147, 51, 234)
COLOR_BOMB = (31, 31, 31)
COLOR_EXPLOSION = (249, 115, 22)

# HUD colors
COLOR_HEALTH = (239, 68, 68)
COLOR_RANGE = (249, 115, 22)
COLOR_SCORE = (234, 179, 8)

# Overlay colors
COLOR_OVERLAY = (0, 0, 0, 190)
COLOR_WIN_BOX = (22, 163, 74)
COLOR_LOSE_BOX = (220, 38, 38)
