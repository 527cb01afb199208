"""
Game session state - the single aggregate every simulation step reads and mutates
"""

from enum import Enum, auto


class GameStatus(Enum):
    """Game status, WON and LOST are terminal until reset"""
    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Rejection(Enum):
    """Why an input was ignored"""
    MOVE_BLOCKED = auto()        # wall, block, bomb or off the board
    INVALID_DIRECTION = auto()   # not a unit orthogonal step
    NO_BOMBS = auto()            # no bomb capacity left
    GAME_OVER = auto()           # status is not PLAYING


class GameSession:
    """
    Everything about one game in progress

    Owned by GameController; resolver functions receive it explicitly.
    """
    def __init__(self, grid, player, monsters, bombs):
        """
        Args:
            grid: Grid
            player: Player
            monsters: MonsterManager
            bombs: BombManager
        """
        self.grid = grid
        self.player = player
        self.monsters = monsters
        self.bombs = bombs
        self.explosions = set()
        self.score = 0
        self.status = GameStatus.PLAYING
        self.now_ms = 0

    def is_playing(self):
        return self.status == GameStatus.PLAYING

    def transition_to(self, new_status):
        """
        Move to a new status; terminal states never change back

        Returns:
            True if the status changed
        """
        if not self.is_playing() or new_status == self.status:
            return False
        self.status = new_status
        return True

    def add_score(self, points):
        if points < 0:
            raise ValueError("score only increases")
        self.score += points

    # ========== RENDER QUERIES ==========

    def cell_at(self, x, y):
        return self.grid.get(x, y)

    def is_player_at(self, x, y):
        return self.player.x == x and self.player.y == y

    def has_monster_at(self, x, y):
        return self.monsters.has_monster_at(x, y)

    def has_bomb_at(self, x, y):
        return self.bombs.has_bomb_at(x, y)

    def is_exploding(self, x, y):
        return (x, y) in self.explosions

    def hud(self):
        """Scalar values for the HUD"""
        return {
            'health': self.player.health,
            'bombs': self.player.bombs,
            'max_bombs': self.player.max_bombs,
            'range': self.player.blast_range,
            'score': self.score,
            'status': self.status,
        }

    def __repr__(self):
        return (f"GameSession(status={self.status.name}, score={self.score}, "
                f"t={self.now_ms}ms, {self.player!r})")
