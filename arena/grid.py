"""
Board grid - a square matrix of cell kinds backed by numpy
"""

from enum import IntEnum

import numpy as np


class CellKind(IntEnum):
    """Cell kinds stored in the grid"""
    EMPTY = 0
    WALL = 1
    DESTRUCTIBLE = 2
    EXIT = 3
    TRAP = 4
    UPGRADE_BOMBS = 5
    UPGRADE_RANGE = 6
    UPGRADE_HEALTH = 7


# Cells the player cannot step onto
BLOCKING_KINDS = (CellKind.WALL, CellKind.DESTRUCTIBLE)

# Cells a monster may wander onto
MONSTER_WALKABLE = (CellKind.EMPTY, CellKind.TRAP)


class Grid:
    """
    Square board of CellKind values, indexed cells[y, x]
    """
    def __init__(self, size, fill=CellKind.EMPTY):
        self.size = size
        self.cells = np.full((size, size), int(fill), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows):
        """
        Build a grid from a list of equal-length rows

        Args:
            rows: Sequence of sequences of CellKind (row-major, y first)
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("grid rows must form a square")
        grid = cls(size)
        grid.cells[:, :] = np.array([[int(c) for c in row] for row in rows], dtype=np.int8)
        return grid

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x, y):
        """Cell kind at (x, y), or None outside the board"""
        if not self.in_bounds(x, y):
            return None
        return CellKind(int(self.cells[y, x]))

    def set(self, x, y, kind):
        self.cells[y, x] = int(kind)

    def is_walkable(self, x, y):
        """Whether the player could stand on (x, y), ignoring bombs"""
        kind = self.get(x, y)
        return kind is not None and kind not in BLOCKING_KINDS

    def copy(self):
        """Independent snapshot of this grid"""
        other = Grid(self.size)
        other.cells[:, :] = self.cells
        return other

    def count(self, kind):
        return int(np.count_nonzero(self.cells == int(kind)))

    def positions_of(self, kind):
        """List of (x, y) holding the given kind, in row-major order"""
        ys, xs = np.nonzero(self.cells == int(kind))
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def border_cells(self):
        """All (x, y) on the outer ring"""
        last = self.size - 1
        ring = []
        for i in range(self.size):
            ring.extend([(i, 0), (i, last)])
        for i in range(1, last):
            ring.extend([(0, i), (last, i)])
        return ring

    def __repr__(self):
        return f"Grid(size={self.size}, walls={self.count(CellKind.WALL)}, blocks={self.count(CellKind.DESTRUCTIBLE)})"
