"""
Game Logger Module for Wordlet

This module provides structured logging for player actions and game events.
Each entry is a JSON document so the log can be parsed after the fact.
"""

import logging
import json
from datetime import datetime
from typing import Any, Dict, Optional
from pathlib import Path

from ..config.app_config import Config

LOGGER_NAME = 'wordlet'


class GameLogger:
    """
    Centralized logging system for the game.

    Features:
    - Player action tracking per game
    - Game event logging (wins, losses)
    - JSON structured logs for easy parsing
    - Optional date-stamped log file; console output for warnings only
    """

    def __init__(self, log_dir: Optional[str] = None, console_level: str = 'WARNING'):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger(LOGGER_NAME)
        self.configure(log_dir, console_level)

    def configure(self, log_dir: Optional[str] = None, console_level: str = 'WARNING') -> None:
        """(Re)attach handlers. A file handler is only added when log_dir is set."""
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self._setup_logger(console_level)

    @property
    def log_file(self) -> Optional[Path]:
        if self.log_dir is None:
            return None
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self, console_level: str) -> logging.Logger:
        logger = self.logger
        logger.setLevel(logging.INFO)
        logger.propagate = False

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.getLevelName(console_level.upper()))
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        if self.log_file is not None:
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log player actions with full context.

        Args:
            action: Type of action (e.g., 'new_game', 'submit_guess', 'quit')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_rejected_guess(self,
                           game_id: str,
                           guess: str,
                           error: Exception):
        """Log a guess the session refused. Rejections are normal play, not errors."""
        details = {
            'game_id': game_id,
            'guess': guess,
            'reason': type(error).__name__,
            'message': getattr(error, 'message', str(error))
        }
        self.logger.info(self._create_log_entry('GUESS_REJECTED', 'submit_guess', details))

    def log_game_event(self,
                       game_id: str,
                       event: str,
                       **kwargs):
        """
        Log game-specific events (wins, losses, etc.).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """
        Log unexpected errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance
game_logger = GameLogger(log_dir=Config.LOG_DIR, console_level=Config.LOG_LEVEL)
