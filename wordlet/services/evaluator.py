"""
Guess Evaluator

Scores a guess against the secret word.
"""

from collections import Counter
from typing import List, Optional

from ..models.game import GuessResult, LetterStatus


def build_letter_counts(word: str) -> Counter:
    return Counter(word)


def evaluate_guess(guess: str, secret: str) -> GuessResult:
    """
    Implements the authentic Wordle letter evaluation algorithm.

    Exact position matches are marked first and consume their letter, so a
    letter repeated in the guess is only credited as many times as it occurs
    in the secret. Both words must already be normalized.
    """
    if len(guess) != len(secret):
        raise ValueError(f"Cannot score '{guess}' against a {len(secret)} letter secret")

    available = build_letter_counts(secret)
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, (guessed_letter, secret_letter) in enumerate(zip(guess, secret)):
        if guessed_letter == secret_letter:
            statuses[i] = LetterStatus.CORRECT
            available[guessed_letter] -= 1

    # Second pass: misplaced letters while the secret still has some left
    for i, guessed_letter in enumerate(guess):
        if statuses[i] is not None:
            continue
        if available[guessed_letter] > 0:
            statuses[i] = LetterStatus.PRESENT
            available[guessed_letter] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    return GuessResult(letters=tuple(zip(guess, statuses)))
