"""
Data Models Package

Contains all data models and errors used throughout the game.
"""

from .errors import (
    ConstraintViolation, DuplicateGuess, IncorrectLength, InvalidWord, SessionOver, WordletError,
)
from .game import GameState, GuessResult, LetterStatus, Outcome, RowState, SubmitOutcome

__all__ = [
    'GameState', 'GuessResult', 'LetterStatus', 'Outcome', 'RowState', 'SubmitOutcome',
    'ConstraintViolation', 'DuplicateGuess', 'IncorrectLength', 'InvalidWord', 'SessionOver', 'WordletError',
]
