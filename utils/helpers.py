"""
Helper utility functions for Bomber Escape
"""


def format_score(score):
    """Format score with thousands separator"""
    return f"{score:,}"


def is_unit_direction(dx, dy):
    """Check that (dx, dy) is one of the four orthogonal unit steps"""
    return (dx, dy) in ((0, -1), (0, 1), (-1, 0), (1, 0))
