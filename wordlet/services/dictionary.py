"""
Dictionary Service

The answer list the secret is drawn from and the accepted-guess list used to
validate guesses. Accepted guesses always include every answer.
"""

import random
from typing import FrozenSet, Iterable, Optional, Tuple

from ..config.game_settings import ANSWER_WORDS, GUESS_WORDS, WORD_LENGTH, validate_word_list_integrity


def _normalize_words(words: Iterable[str]) -> Tuple[str, ...]:
    # dict.fromkeys drops repeats but keeps the original order
    return tuple(dict.fromkeys(word.strip().upper() for word in words))


class Dictionary:
    """
    Immutable word lists used to pick the secret and validate guesses.

    Args:
        answers: Words that can be picked as the secret
        guesses: Extra words accepted as guesses
        word_length: Length every word must have
        rng: Random source for pick_secret; the process-wide one when omitted
    """

    def __init__(self,
                 answers: Iterable[str],
                 guesses: Iterable[str] = (),
                 word_length: int = WORD_LENGTH,
                 rng: Optional[random.Random] = None):
        self.word_length = word_length
        self._answers = _normalize_words(answers)
        extra_guesses = _normalize_words(guesses)

        validate_word_list_integrity(list(self._answers), word_length)
        if extra_guesses:
            validate_word_list_integrity(list(extra_guesses), word_length)

        self._accepted: FrozenSet[str] = frozenset(self._answers) | frozenset(extra_guesses)
        self._rng = rng if rng is not None else random

    @classmethod
    def from_settings(cls, rng: Optional[random.Random] = None) -> "Dictionary":
        """Dictionary built from the bundled word lists."""
        return cls(ANSWER_WORDS, GUESS_WORDS, WORD_LENGTH, rng=rng)

    @property
    def answers(self) -> Tuple[str, ...]:
        return self._answers

    def pick_secret(self) -> str:
        return self._rng.choice(self._answers)

    def normalize(self, candidate: str) -> str:
        return candidate.strip().upper()

    def is_valid_guess(self, candidate: str) -> bool:
        """True iff the candidate is ASCII and, normalized, an accepted word of the right length."""
        if not isinstance(candidate, str) or not candidate.isascii():
            return False
        normalized = self.normalize(candidate)
        if len(normalized) != self.word_length:
            return False
        return normalized in self._accepted

    def __len__(self) -> int:
        return len(self._accepted)

    def __repr__(self) -> str:
        return f"Dictionary(answers={len(self._answers)}, accepted={len(self._accepted)}, word_length={self.word_length})"
