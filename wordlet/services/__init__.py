"""
Services Package

Contains the game engine: dictionary, evaluation, keyboard tracking,
difficulty rules and the game session.
"""

from .dictionary import Dictionary
from .difficulty import Difficulty, DifficultyPolicy
from .evaluator import build_letter_counts, evaluate_guess
from .game_session import GameSession, new_game
from .keyboard import KeyboardTracker

__all__ = [
    'Dictionary',
    'Difficulty', 'DifficultyPolicy',
    'build_letter_counts', 'evaluate_guess',
    'GameSession', 'new_game',
    'KeyboardTracker',
]
