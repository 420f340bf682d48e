"""
Keyboard Tracker

Best-known status of every letter across all guesses of a session.
"""

from typing import Dict, Optional

from ..config.game_settings import ALPHABET
from ..models.game import GuessResult, LetterStatus


class KeyboardTracker:
    """
    Per-letter status folded from every scored guess.

    A letter only ever moves to a more informative status, so a letter shown
    CORRECT once stays CORRECT even when a later guess scores another copy of
    it ABSENT.
    """

    def __init__(self, letter_status: Optional[Dict[str, LetterStatus]] = None):
        self._letter_status: Dict[str, LetterStatus] = {letter: LetterStatus.UNKNOWN for letter in ALPHABET}
        if letter_status:
            self._letter_status.update(letter_status)

    def status(self, letter: str) -> LetterStatus:
        return self._letter_status[letter.upper()]

    def snapshot(self) -> Dict[str, LetterStatus]:
        return dict(self._letter_status)

    def merge(self, result: GuessResult) -> None:
        """Updates letter status tracking based on guess results."""
        for letter, new_status in result:
            current_status = self._letter_status[letter]
            self._letter_status[letter] = current_status.more_informative(new_status)

    def merged(self, result: GuessResult) -> "KeyboardTracker":
        """Copy of this tracker with the result folded in; self is untouched."""
        tracker = KeyboardTracker(self._letter_status)
        tracker.merge(result)
        return tracker

    def __eq__(self, other):
        if not isinstance(other, KeyboardTracker):
            return NotImplemented
        return self._letter_status == other._letter_status

    def __repr__(self) -> str:
        known = {letter: status.value for letter, status in self._letter_status.items()
                 if status is not LetterStatus.UNKNOWN}
        return f"KeyboardTracker({known})"
