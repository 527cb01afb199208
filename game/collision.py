"""
Collision detection and player damage
"""

from game.game_state import GameStatus


def apply_damage(session, amount=1, logger=None, cause=None):
    """
    Hurt the player, one status check per call

    Damage only lands while the game is PLAYING.

    Args:
        session: GameSession
        amount: Health to remove
        logger: Optional GameLogger
        cause: Short description for the log

    Returns:
        True if damage was applied
    """
    if not session.is_playing():
        return False

    died = session.player.take_damage(amount)
    if logger:
        logger.damage(f"Hit by {cause or 'hazard'}, health {session.player.health}")
    if died and session.transition_to(GameStatus.LOST):
        if logger:
            logger.death(f"Player died at ({session.player.x},{session.player.y}), score {session.score}")
    return True


class CollisionHandler:
    """
    Judges hazards at the player's cell
    """
    def __init__(self, logger=None):
        self.logger = logger

    def check_hazard(self, session, x, y):
        """
        Check a cell for monsters and live explosion cells

        A monster and an explosion on the same cell each cost one health.

        Args:
            session: GameSession
            x, y: Cell to judge (normally the player's)

        Returns:
            Dictionary with collision results:
            {
                'monster': bool,
                'explosion': bool,
                'damage': int,
                'player_died': bool
            }
        """
        result = {
            'monster': False,
            'explosion': False,
            'damage': 0,
            'player_died': False
        }

        if session.has_monster_at(x, y):
            result['monster'] = True
            if apply_damage(session, 1, self.logger, cause="monster"):
                result['damage'] += 1

        if session.is_exploding(x, y):
            result['explosion'] = True
            if apply_damage(session, 1, self.logger, cause="explosion"):
                result['damage'] += 1

        result['player_died'] = session.status == GameStatus.LOST
        return result

