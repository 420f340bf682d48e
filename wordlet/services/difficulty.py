"""
Difficulty Policy

Easy mode accepts any valid word. Hard mode requires every guess to reuse the
information already revealed: letters found in place stay in place, and
letters found in the word appear somewhere in the guess.
"""

from enum import Enum
from typing import Dict, List, Sequence

from ..models.errors import ConstraintViolation
from ..models.game import GuessResult, LetterStatus
from .keyboard import KeyboardTracker

_REVEALED = (LetterStatus.CORRECT, LetterStatus.PRESENT)


class Difficulty(Enum):
    EASY = "easy"
    HARD = "hard"

    @classmethod
    def parse(cls, value: str) -> "Difficulty":
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Invalid difficulty '{value}'. Valid values are: {valid}")


def known_positions(history: Sequence[GuessResult]) -> Dict[int, str]:
    """0-based position -> letter for every position scored CORRECT so far."""
    positions: Dict[int, str] = {}
    for result in history:
        for index, (letter, status) in enumerate(result):
            if status is LetterStatus.CORRECT:
                positions[index] = letter
    return positions


def required_letters(secret: str, keyboard: KeyboardTracker) -> List[str]:
    """Letters known to be in the word, in the order they occur in the secret."""
    letters: List[str] = []
    for letter in secret:
        if letter not in letters and keyboard.status(letter) in _REVEALED:
            letters.append(letter)
    return letters


class DifficultyPolicy:
    """Rules a guess must satisfy beyond being a valid word. Fixed per session."""

    def __init__(self, difficulty: Difficulty = Difficulty.EASY):
        self.difficulty = difficulty

    @property
    def is_hard(self) -> bool:
        return self.difficulty is Difficulty.HARD

    def check(self,
              guess: str,
              secret: str,
              history: Sequence[GuessResult],
              keyboard: KeyboardTracker) -> None:
        """
        Raises ConstraintViolation for the first revealed constraint the guess breaks.

        Positions are checked left to right, then required letters in the
        order they occur in the secret.
        """
        if not self.is_hard:
            return

        for index, letter in sorted(known_positions(history).items()):
            if guess[index] != letter:
                raise ConstraintViolation(letter, position=index + 1)

        for letter in required_letters(secret, keyboard):
            if letter not in guess:
                raise ConstraintViolation(letter)
