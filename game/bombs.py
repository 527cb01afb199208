"""
Bomb engine - placement, fuse, blast and cleanup
"""

from arena.grid import CellKind
from game.events import EventKind
from game.game_state import Rejection
from game.collision import apply_damage
from utils.constants import DIRS, SCORE_DESTRUCTIBLE, SCORE_MONSTER


def blast_cells(grid, ox, oy, blast_range):
    """
    Cells reached by a blast from (ox, oy)

    Each arm stops before a wall or the board edge, and stops on (including)
    the first destructible block.

    Args:
        grid: Grid
        ox, oy: Bomb origin
        blast_range: Steps each arm may travel

    Returns:
        List of (x, y), origin first, no duplicates
    """
    cells = [(ox, oy)]
    for dx, dy in DIRS:
        for step in range(1, blast_range + 1):
            x = ox + dx * step
            y = oy + dy * step
            kind = grid.get(x, y)
            if kind is None or kind == CellKind.WALL:
                break
            cells.append((x, y))
            if kind == CellKind.DESTRUCTIBLE:
                break
    return cells


class BombEngine:
    """
    Drives every bomb through fuse -> detonation -> explosion clear
    """
    def __init__(self, events, fuse_ms, explosion_ms, logger=None):
        """
        Args:
            events: EventQueue for fuse and clear events
            fuse_ms: Delay from placement to detonation
            explosion_ms: How long explosion cells stay visible
            logger: Optional GameLogger
        """
        self.events = events
        self.fuse_ms = fuse_ms
        self.explosion_ms = explosion_ms
        self.logger = logger

    def place_bomb(self, session):
        """
        Drop a bomb under the player and light its fuse

        Returns:
            Dictionary: {'placed': bool, 'rejected': Rejection or None, 'bomb': ActiveBomb or None}
        """
        if not session.is_playing():
            return {'placed': False, 'rejected': Rejection.GAME_OVER, 'bomb': None}
        if not session.player.use_bomb():
            if self.logger:
                self.logger.debug("Bomb rejected: no capacity")
            return {'placed': False, 'rejected': Rejection.NO_BOMBS, 'bomb': None}

        player = session.player
        bomb = session.bombs.add_bomb(player.x, player.y, session.now_ms, self.fuse_ms)
        self.events.schedule(bomb.detonates_at, EventKind.BOMB_FUSE, bomb.id)
        if self.logger:
            self.logger.bomb(f"Bomb {bomb.id} placed at ({bomb.x},{bomb.y}), "
                             f"{player.bombs}/{player.max_bombs} left")
        return {'placed': True, 'rejected': None, 'bomb': bomb}

    def compute_detonation(self, session, bomb):
        """
        Work out a detonation without touching the session

        The blast uses the player's range at detonation time.

        Returns:
            Dictionary:
            {
                'cells': list of (x, y),
                'destroyed': list of (x, y) destructible cells,
                'killed': list of Monster,
                'player_hit': bool,
                'score': int
            }
        """
        cells = blast_cells(session.grid, bomb.x, bomb.y, session.player.blast_range)
        cell_set = set(cells)
        destroyed = [c for c in cells if session.grid.get(*c) == CellKind.DESTRUCTIBLE]
        killed = [m for m in session.monsters if (m.x, m.y) in cell_set]
        player_hit = (session.player.x, session.player.y) in cell_set
        score = len(destroyed) * SCORE_DESTRUCTIBLE + len(killed) * SCORE_MONSTER
        return {
            'cells': cells,
            'destroyed': destroyed,
            'killed': killed,
            'player_hit': player_hit,
            'score': score,
        }

    def detonate(self, session, bomb_id):
        """
        Fuse expiry: remove the bomb and, while playing, blow it up

        After the game has ended the bomb is only removed. The explosion
        clear is scheduled either way so the bomb's capacity comes back.

        Returns:
            The detonation dict, or None if nothing exploded
        """
        bomb = session.bombs.remove_bomb(bomb_id)
        if bomb is None:
            return None

        self.events.schedule(session.now_ms + self.explosion_ms, EventKind.EXPLOSION_CLEAR, bomb.id)
        if not session.is_playing():
            return None

        blast = self.compute_detonation(session, bomb)
        cell_set = set(blast['cells'])

        for x, y in blast['destroyed']:
            session.grid.set(x, y, CellKind.EMPTY)
        session.monsters.remove_in(cell_set)
        session.add_score(blast['score'])
        session.explosions = cell_set

        if self.logger:
            self.logger.bomb(f"Bomb {bomb.id} exploded over {len(cell_set)} cells, "
                             f"{len(blast['destroyed'])} blocks destroyed")
            for monster in blast['killed']:
                self.logger.kill(f"Monster {monster.id} destroyed at ({monster.x},{monster.y})")

        if blast['player_hit']:
            apply_damage(session, 1, self.logger, cause="own bomb")

        return blast

    def clear_explosion(self, session):
        """Explosion display is over: clear the cells and give one bomb back"""
        session.explosions = set()
        session.player.refill_bomb()
