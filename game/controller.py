"""
Game controller - owns the session and feeds it input and timer events
"""

import random

from arena.generator import generate
from entities.player import Player
from entities.bomb import BombManager
from game.game_state import GameSession, GameStatus
from game.events import EventQueue, EventKind
from game.collision import CollisionHandler
from game.movement import MovementResolver
from game.bombs import BombEngine
from utils.config import GameConfig
from utils.logger import GameLogger, level_from_name


class GameController:
    """
    High-level game flow

    Input handlers are no-ops unless the status is PLAYING; reset() always works.
    Time only moves through advance(), which applies due events one at a time.
    """
    def __init__(self, config=None, rng=None, logger=None):
        """
        Args:
            config: GameConfig (defaults if None)
            rng: random.Random for generation and monster moves
            logger: GameLogger (created from config.log_level if None)
        """
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.logger = logger or GameLogger(level_from_name(self.config.log_level))

        self.events = EventQueue()
        self.collision_handler = CollisionHandler(self.logger)
        self.movement = MovementResolver(self.collision_handler, self.logger)
        self.bomb_engine = BombEngine(
            self.events, self.config.fuse_ms, self.config.explosion_ms, self.logger
        )

        self.session = None
        self.best_score = 0
        self.games_played = 0
        self.reset()

    @property
    def status(self):
        return self.session.status

    @property
    def score(self):
        return self.session.score

    def reset(self):
        """Start a new game; pending timers from the old game are dropped"""
        if self.session is not None:
            self._record_score()

        cfg = self.config
        grid, monsters = generate(cfg.grid_size, self.rng, cfg.monster_count, self.logger)
        player = Player(
            cfg.spawn[0], cfg.spawn[1],
            health=cfg.start_health, bombs=cfg.start_bombs,
            blast_range=cfg.start_range, max_health=cfg.max_health
        )
        self.session = GameSession(grid, player, monsters, BombManager())

        self.events.clear()
        self.events.schedule(cfg.monster_tick_ms, EventKind.MONSTER_TICK)
        self.games_played += 1
        self.logger.info(f"New game #{self.games_played}: {len(monsters)} monsters")
        return self.session

    def on_direction(self, dx, dy):
        """
        Player input: step in a direction

        Returns:
            Move outcome dict from MovementResolver
        """
        outcome = self.movement.attempt_player_move(self.session, dx, dy)
        self._record_score()
        return outcome

    def on_place_bomb(self):
        """Player input: drop a bomb"""
        return self.bomb_engine.place_bomb(self.session)

    def on_tick(self):
        """
        Monster step

        Returns:
            Number of monsters that moved
        """
        return self.movement.step_monsters(self.session, self.rng)

    def advance(self, dt_ms):
        """
        Move simulated time forward and apply every event that comes due

        Args:
            dt_ms: Milliseconds to advance (negative values are ignored)

        Returns:
            List of ScheduledEvent that fired, in order
        """
        session = self.session
        target = session.now_ms + max(0, dt_ms)
        fired = []

        for event in self.events.pop_due(target):
            session.now_ms = event.due_ms
            self._dispatch(event)
            fired.append(event)

        session.now_ms = target
        self._record_score()
        return fired

    def _dispatch(self, event):
        if event.kind == EventKind.BOMB_FUSE:
            self.bomb_engine.detonate(self.session, event.payload)

        elif event.kind == EventKind.EXPLOSION_CLEAR:
            self.bomb_engine.clear_explosion(self.session)

        elif event.kind == EventKind.MONSTER_TICK:
            if self.session.is_playing():
                self.on_tick()
                self.events.schedule(
                    event.due_ms + self.config.monster_tick_ms, EventKind.MONSTER_TICK
                )

    def _record_score(self):
        self.best_score = max(self.best_score, self.session.score)

    def is_game_over(self):
        return self.session.status != GameStatus.PLAYING

    def __repr__(self):
        return f"GameController(games={self.games_played}, best={self.best_score}, {self.session!r})"
