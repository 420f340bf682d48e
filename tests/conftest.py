import random

import pytest
from wordlet.models.game import LetterStatus
from wordlet.services.dictionary import Dictionary

ANSWERS = ["crane", "slump", "abbey", "laugh", "ahead", "speed", "alloy", "steep", "level", "scoop", "sleep", "haste"]
GUESSES = [
    "slate", "erase", "llama", "pasta", "admit", "adorn", "adult", "affix", "afire", "after",
    "aging", "agony", "hours", "slept", "grift", "sloop", "larva", "lease", "preen", "raise",
    "sleek", "drool", "belle", "cools", "heart", "spell", "added", "stare", "crass",
]

STATUS_CODES = {
    "C": LetterStatus.CORRECT,
    "P": LetterStatus.PRESENT,
    "A": LetterStatus.ABSENT,
}


def statuses(code: str) -> tuple:
    """'CPA..' shorthand -> tuple of LetterStatus."""
    return tuple(STATUS_CODES[c] for c in code)


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary(answers=ANSWERS, guesses=GUESSES, rng=random.Random(0))


def make_input(lines):
    """input() replacement fed from a list; raises EOFError once exhausted."""
    remaining = iter(lines)

    def read(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return read
