"""
Movement - player steps with tile effects, and random monster wandering
"""

from arena.grid import CellKind
from game.game_state import GameStatus, Rejection
from game.collision import apply_damage
from utils.helpers import is_unit_direction
from utils.constants import (
    SCORE_UPGRADE_BOMBS, SCORE_UPGRADE_RANGE, SCORE_UPGRADE_HEALTH
)

# Tile kind -> (player effect, score award); the tile is emptied afterwards
TILE_EFFECTS = {
    CellKind.TRAP: ('damage', 0),
    CellKind.UPGRADE_BOMBS: ('bomb_capacity', SCORE_UPGRADE_BOMBS),
    CellKind.UPGRADE_RANGE: ('range', SCORE_UPGRADE_RANGE),
    CellKind.UPGRADE_HEALTH: ('heal', SCORE_UPGRADE_HEALTH),
}


def _rejected(reason):
    return {
        'moved': False,
        'rejected': reason,
        'target': None,
        'tile': None,
        'effect': None,
        'clear_tile': False,
        'score': 0,
        'status': None,
    }


class MovementResolver:
    """
    Resolves player moves and monster steps against the session
    """
    def __init__(self, collision_handler, logger=None):
        """
        Args:
            collision_handler: CollisionHandler for the after-move hazard check
            logger: Optional GameLogger
        """
        self.collision_handler = collision_handler
        self.logger = logger

    def resolve_player_move(self, session, dx, dy):
        """
        Work out what a step would do, without touching the session

        Returns:
            Dictionary describing the transition:
            {
                'moved': bool,
                'rejected': Rejection or None,
                'target': (x, y) or None,
                'tile': CellKind the player steps onto,
                'effect': 'damage' | 'bomb_capacity' | 'range' | 'heal' | None,
                'clear_tile': bool,
                'score': int,
                'status': GameStatus to enter, or None
            }
        """
        if not session.is_playing():
            return _rejected(Rejection.GAME_OVER)
        if not is_unit_direction(dx, dy):
            return _rejected(Rejection.INVALID_DIRECTION)

        tx = session.player.x + dx
        ty = session.player.y + dy
        tile = session.grid.get(tx, ty)
        if not session.grid.is_walkable(tx, ty) or session.has_bomb_at(tx, ty):
            return _rejected(Rejection.MOVE_BLOCKED)

        outcome = {
            'moved': True,
            'rejected': None,
            'target': (tx, ty),
            'tile': tile,
            'effect': None,
            'clear_tile': False,
            'score': 0,
            'status': None,
        }

        if tile == CellKind.EXIT:
            outcome['status'] = GameStatus.WON
        elif tile in TILE_EFFECTS:
            effect, points = TILE_EFFECTS[tile]
            outcome['effect'] = effect
            outcome['score'] = points
            outcome['clear_tile'] = True

        return outcome

    def apply_move(self, session, outcome):
        """Commit a resolved move to the session"""
        if not outcome['moved']:
            return

        tx, ty = outcome['target']
        player = session.player
        player.move_to(tx, ty)

        if outcome['clear_tile']:
            session.grid.set(tx, ty, CellKind.EMPTY)

        effect = outcome['effect']
        if effect == 'damage':
            apply_damage(session, 1, self.logger, cause="trap")
        elif effect == 'bomb_capacity':
            player.add_bomb_capacity()
        elif effect == 'range':
            player.add_range()
        elif effect == 'heal':
            player.heal(1)

        if outcome['score']:
            session.add_score(outcome['score'])
        if effect and effect != 'damage' and self.logger:
            self.logger.upgrade(f"Picked up {outcome['tile'].name.lower()} at ({tx},{ty})")

        if outcome['status'] == GameStatus.WON and session.transition_to(GameStatus.WON):
            if self.logger:
                self.logger.victory(f"Reached the exit in {player.moves} moves, score {session.score}")

    def attempt_player_move(self, session, dx, dy):
        """
        Resolve, apply, then judge hazards on the new cell

        Returns:
            The move outcome dict with an extra 'collision' entry (None when rejected)
        """
        outcome = self.resolve_player_move(session, dx, dy)
        if not outcome['moved']:
            if self.logger:
                self.logger.debug(f"Move ({dx},{dy}) rejected: {outcome['rejected'].name}")
            outcome['collision'] = None
            return outcome

        self.apply_move(session, outcome)
        tx, ty = outcome['target']
        outcome['collision'] = self.collision_handler.check_hazard(session, tx, ty)
        return outcome

    def step_monsters(self, session, rng):
        """
        Move each monster one random step onto an empty or trap cell

        Returns:
            Number of monsters that moved
        """
        if not session.is_playing():
            return 0
        return session.monsters.step(session.grid, rng)
