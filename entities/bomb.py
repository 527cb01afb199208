"""
Bomb entities
"""

import itertools


class ActiveBomb:
    """
    A lit bomb waiting on its fuse
    """
    def __init__(self, x, y, bomb_id, placed_at, fuse_ms):
        """
        Args:
            x, y: Grid position at drop time
            bomb_id: Unique id
            placed_at: Simulation time of placement in ms
            fuse_ms: Fuse length in ms
        """
        self.x = x
        self.y = y
        self.id = bomb_id
        self.placed_at = placed_at
        self.fuse_ms = fuse_ms

    @property
    def detonates_at(self):
        return self.placed_at + self.fuse_ms

    def is_at_position(self, x, y):
        return self.x == x and self.y == y

    def __repr__(self):
        return f"ActiveBomb(id={self.id}, pos=({self.x},{self.y}), at={self.detonates_at})"


class BombManager:
    """
    Manages the bombs currently on the board
    """
    def __init__(self):
        self.bombs = []
        self._ids = itertools.count(1)

    def add_bomb(self, x, y, placed_at, fuse_ms):
        """
        Drop a new bomb with a fresh id

        Returns:
            ActiveBomb object
        """
        bomb = ActiveBomb(x, y, next(self._ids), placed_at, fuse_ms)
        self.bombs.append(bomb)
        return bomb

    def get_bomb(self, bomb_id):
        for bomb in self.bombs:
            if bomb.id == bomb_id:
                return bomb
        return None

    def remove_bomb(self, bomb_id):
        """
        Take a bomb off the board

        Returns:
            The removed ActiveBomb, or None if it was already gone
        """
        bomb = self.get_bomb(bomb_id)
        if bomb is not None:
            self.bombs.remove(bomb)
        return bomb

    def has_bomb_at(self, x, y):
        return any(b.is_at_position(x, y) for b in self.bombs)

    def __len__(self):
        return len(self.bombs)

    def __iter__(self):
        return iter(self.bombs)

    def __repr__(self):
        return f"BombManager(bombs={len(self.bombs)})"
