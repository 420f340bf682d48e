"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game rules, constants and the bundled dictionary
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    ALPHABET, ANSWER_WORDS, GUESS_WORDS, KEYBOARD_ROWS, MAX_ROUNDS, WORD_LENGTH,
    validate_word_list_integrity,
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'ALPHABET', 'ANSWER_WORDS', 'GUESS_WORDS', 'KEYBOARD_ROWS', 'MAX_ROUNDS', 'WORD_LENGTH',
    'validate_word_list_integrity',
]
