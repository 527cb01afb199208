"""
Monster entities
Monsters wander the board at random and hurt the player on contact
"""

from arena.grid import MONSTER_WALKABLE
from utils.constants import DIRS


class Monster:
    """
    A wandering monster with a stable id
    """
    def __init__(self, x, y, monster_id):
        self.x = x
        self.y = y
        self.id = monster_id

    def is_at_position(self, x, y):
        """Check if monster is at given position"""
        return self.x == x and self.y == y

    def valid_moves(self, grid):
        """
        Orthogonal steps this monster may take on the given grid

        Returns:
            List of (dx, dy) tuples, in up/down/left/right order
        """
        moves = []
        for dx, dy in DIRS:
            if grid.get(self.x + dx, self.y + dy) in MONSTER_WALKABLE:
                moves.append((dx, dy))
        return moves

    def __repr__(self):
        return f"Monster(id={self.id}, pos=({self.x},{self.y}))"


class MonsterManager:
    """
    Manages all monsters on the board
    """
    def __init__(self, monsters=None):
        self.monsters = list(monsters or [])

    def add_monster(self, x, y):
        """
        Add a monster, ids are handed out in placement order

        Returns:
            Monster object
        """
        monster = Monster(x, y, len(self.monsters))
        self.monsters.append(monster)
        return monster

    def get_monster_at(self, x, y):
        """First monster at position, or None"""
        for monster in self.monsters:
            if monster.is_at_position(x, y):
                return monster
        return None

    def has_monster_at(self, x, y):
        return self.get_monster_at(x, y) is not None

    def step(self, grid, rng):
        """
        Move every monster one random legal step

        All moves are judged against one snapshot of the grid. Two monsters may
        end up sharing a cell; targets are not deduplicated.

        Args:
            grid: Grid to read walkable cells from
            rng: random.Random used to pick among legal moves

        Returns:
            Number of monsters that moved
        """
        snapshot = grid.copy()
        moved = 0
        for monster in self.monsters:
            moves = monster.valid_moves(snapshot)
            if moves:
                dx, dy = rng.choice(moves)
                monster.x += dx
                monster.y += dy
                moved += 1
        return moved

    def remove_in(self, cells):
        """
        Remove every monster standing on one of the given cells

        Args:
            cells: Set of (x, y)

        Returns:
            List of removed monsters
        """
        removed = [m for m in self.monsters if (m.x, m.y) in cells]
        self.monsters = [m for m in self.monsters if (m.x, m.y) not in cells]
        return removed

    def positions(self):
        return [(m.x, m.y) for m in self.monsters]

    def __len__(self):
        return len(self.monsters)

    def __iter__(self):
        return iter(self.monsters)

    def __repr__(self):
        return f"MonsterManager(monsters={len(self.monsters)})"
