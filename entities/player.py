"""
Player entity with health, bomb capacity and blast range
"""

from utils.constants import (
    PLAYER_START_HEALTH, PLAYER_MAX_HEALTH,
    PLAYER_START_BOMBS, PLAYER_START_RANGE
)


class Player:
    """
    Player entity with stats
    """
    def __init__(self, x, y, health=PLAYER_START_HEALTH, bombs=PLAYER_START_BOMBS,
                 blast_range=PLAYER_START_RANGE, max_health=PLAYER_MAX_HEALTH):
        self.x = x
        self.y = y

        # Stats
        self.stats = {
            'health': health,
            'max_health': max_health,
            'bombs': bombs,
            'max_bombs': bombs,
            'range': blast_range,
        }

        # Gameplay tracking
        self.moves = 0

    @property
    def health(self):
        return self.stats['health']

    @property
    def bombs(self):
        return self.stats['bombs']

    @property
    def max_bombs(self):
        return self.stats['max_bombs']

    @property
    def blast_range(self):
        return self.stats['range']

    def move_to(self, x, y):
        """Step onto (x, y); legality is checked by the caller"""
        self.x = x
        self.y = y
        self.moves += 1

    def take_damage(self, amount=1):
        """
        Take damage, health never drops below zero

        Returns:
            True if player died
        """
        self.stats['health'] = max(0, self.stats['health'] - amount)
        return self.stats['health'] <= 0

    def heal(self, amount=1):
        """Heal player up to max health"""
        self.stats['health'] = min(self.stats['health'] + amount, self.stats['max_health'])

    def use_bomb(self):
        """
        Spend one bomb of capacity

        Returns:
            True if a bomb was available
        """
        if self.stats['bombs'] <= 0:
            return False
        self.stats['bombs'] -= 1
        return True

    def refill_bomb(self):
        """Return one bomb of capacity, capped at max_bombs"""
        self.stats['bombs'] = min(self.stats['bombs'] + 1, self.stats['max_bombs'])

    def add_bomb_capacity(self):
        self.stats['max_bombs'] += 1
        self.stats['bombs'] += 1

    def add_range(self):
        self.stats['range'] += 1

    def is_alive(self):
        """Check if player is alive"""
        return self.stats['health'] > 0

    def __repr__(self):
        return (f"Player(pos=({self.x},{self.y}), hp={self.health}, "
                f"bombs={self.bombs}/{self.max_bombs}, range={self.blast_range})")
