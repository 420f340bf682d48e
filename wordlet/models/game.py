"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status, from most to least informative."""
    CORRECT = "CORRECT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNKNOWN = "UNKNOWN"

    @property
    def rank(self) -> int:
        """Informativeness used when merging statuses for the same letter."""
        return _LETTER_STATUS_RANK[self]

    def more_informative(self, other: "LetterStatus") -> "LetterStatus":
        return self if self.rank >= other.rank else other


_LETTER_STATUS_RANK = {
    LetterStatus.UNKNOWN: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


class Outcome(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_over(self) -> bool:
        return self is not Outcome.IN_PROGRESS


class RowState(Enum):
    """Board row marker for the attempt grid."""
    EMPTY = "EMPTY"
    CURRENT = "CURRENT"
    ALREADY_GUESSED = "ALREADY_GUESSED"


@dataclass(frozen=True)
class GuessResult:
    """Scored guess: one (letter, status) pair per position."""
    letters: Tuple[Tuple[str, LetterStatus], ...]

    @property
    def word(self) -> str:
        return "".join(letter for letter, _ in self.letters)

    @property
    def statuses(self) -> Tuple[LetterStatus, ...]:
        return tuple(status for _, status in self.letters)

    @property
    def is_win(self) -> bool:
        return all(status is LetterStatus.CORRECT for _, status in self.letters)

    def __iter__(self) -> Iterator[Tuple[str, LetterStatus]]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, index: int) -> Tuple[str, LetterStatus]:
        return self.letters[index]


@dataclass(frozen=True)
class SubmitOutcome:
    """What a successful submission reports back to the caller."""
    result: GuessResult
    outcome: Outcome
    remaining_attempts: int
    letter_status: Dict[str, LetterStatus]


@dataclass
class GameState:
    """Read-only snapshot of a game session."""
    game_id: str
    current_round: int
    max_rounds: int
    remaining_attempts: int
    outcome: Outcome
    guesses: Tuple[str, ...]
    guess_results: Tuple[GuessResult, ...]
    letter_status: Dict[str, LetterStatus]
    difficulty: str
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.outcome.is_over

    @property
    def won(self) -> bool:
        return self.outcome is Outcome.WON
