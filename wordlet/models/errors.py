"""
Game Errors

Rejections raised by a game session. Each carries the message shown to the
player; none of them changes the session.
"""

from typing import Optional


def ordinal(number: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th'."""
    if 10 <= number % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(number % 10, 'th')
    return f"{number}{suffix}"


class WordletError(Exception):
    """Base class for every rejected guess."""
    default_message = "Guess rejected"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class SessionOver(WordletError):
    """A guess was submitted after the game was won or lost."""
    default_message = "The game is already over!"


class InvalidWord(WordletError):
    """The guess is not an accepted word. Does not consume an attempt."""
    default_message = "Not a valid word!"

    def __init__(self, guess: str, message: Optional[str] = None):
        self.guess = guess
        super().__init__(message)


class IncorrectLength(InvalidWord):
    def __init__(self, guess: str, word_length: int):
        self.word_length = word_length
        super().__init__(guess, f"Your guess must be {word_length} characters long!")


class DuplicateGuess(WordletError):
    default_message = "You already guessed that!"

    def __init__(self, guess: str):
        self.guess = guess
        super().__init__()


class ConstraintViolation(WordletError):
    """
    A hard mode guess ignores revealed information.

    `position` is 1-based and set when a letter is known to sit at that
    position; it is None when the letter is only known to be in the word.
    """

    def __init__(self, letter: str, position: Optional[int] = None):
        self.letter = letter
        self.position = position
        if position is None:
            message = f"Does not include the required letter '{letter}'"
        else:
            message = f"The {ordinal(position)} letter must be '{letter}'"
        super().__init__(message)
