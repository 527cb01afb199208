"""
Logging for Bomber Escape
"""
import logging
import sys


def _install_handler(logger, tag):
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            f'%(asctime)s [{tag}] %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(handler)


class SystemLogger:
    """System-level logger for technical messages"""

    def __init__(self, level=logging.INFO):
        self.logger = logging.getLogger("bomber.system")
        self.logger.setLevel(level)
        _install_handler(self.logger, "SYSTEM")

    def info(self, message):
        self.logger.info(message)

    def error(self, message):
        self.logger.error(message)


class GameLogger:
    """Gameplay logger with short event markers"""

    def __init__(self, level=logging.INFO):
        self.logger = logging.getLogger("bomber.game")
        self.logger.setLevel(level)
        _install_handler(self.logger, "GAME")

    def info(self, message):
        self.logger.info(message)

    def debug(self, message):
        self.logger.debug(message)

    def bomb(self, message):
        """Log bomb placement and detonation"""
        self.logger.info(f"💣 {message}")

    def upgrade(self, message):
        """Log upgrade pickups"""
        self.logger.info(f"⭐ {message}")

    def damage(self, message):
        """Log player damage"""
        self.logger.info(f"💔 {message}")

    def kill(self, message):
        """Log monster kills"""
        self.logger.info(f"👾 {message}")

    def death(self, message):
        """Log game over"""
        self.logger.info(f"💀 {message}")

    def victory(self, message):
        """Log reaching the exit"""
        self.logger.info(f"🏆 {message}")


def level_from_name(name):
    """
    Resolve a logging level name like 'debug' or 'INFO'

    Raises:
        ValueError: if the name is not a known level
    """
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level
