"""
Wordlet

A terminal word-guessing game: six tries to find a five letter word, with
per-letter feedback after each guess and an optional hard mode.
"""

from .models import GuessResult, LetterStatus, Outcome
from .services import Dictionary, Difficulty, GameSession, evaluate_guess, new_game

__version__ = "0.1.0"

__all__ = [
    'Dictionary', 'Difficulty', 'GameSession', 'GuessResult', 'LetterStatus', 'Outcome',
    'evaluate_guess', 'new_game',
]
