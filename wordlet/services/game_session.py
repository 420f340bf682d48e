"""
Game Session

The state machine for one game: secret word, guess history, remaining
attempts, keyboard state and outcome.
"""

import uuid
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS
from ..models.errors import DuplicateGuess, IncorrectLength, InvalidWord, SessionOver
from ..models.game import GameState, GuessResult, LetterStatus, Outcome, RowState, SubmitOutcome
from .dictionary import Dictionary
from .difficulty import Difficulty, DifficultyPolicy
from .evaluator import evaluate_guess
from .keyboard import KeyboardTracker


class GameSession:
    """
    One game, owned by its caller.

    This class handles:
    - Guess validation against the dictionary and the difficulty policy
    - Guess evaluation and keyboard tracking
    - Win/loss transitions without exposing the answer before the game ends

    A rejected guess raises a WordletError and leaves the session untouched.
    """

    def __init__(self,
                 secret: str,
                 dictionary: Dictionary,
                 max_attempts: int = MAX_ROUNDS,
                 difficulty: Difficulty = Difficulty.EASY,
                 game_id: Optional[str] = None):
        normalized_secret = dictionary.normalize(secret)
        if not dictionary.is_valid_guess(secret):
            raise ValueError(f"Secret word '{normalized_secret}' is not in the dictionary")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.game_id = game_id or str(uuid.uuid4())
        self.max_attempts = max_attempts
        self.difficulty = difficulty
        self._dictionary = dictionary
        self._policy = DifficultyPolicy(difficulty)
        self._secret = normalized_secret
        self._history: List[GuessResult] = []
        self._keyboard = KeyboardTracker()
        self._remaining = max_attempts
        self._outcome = Outcome.IN_PROGRESS

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def remaining_attempts(self) -> int:
        return self._remaining

    @property
    def word_length(self) -> int:
        return self._dictionary.word_length

    @property
    def current_round(self) -> int:
        return len(self._history)

    @property
    def guesses(self) -> Tuple[GuessResult, ...]:
        return tuple(self._history)

    @property
    def keyboard(self) -> Dict[str, LetterStatus]:
        return self._keyboard.snapshot()

    @property
    def answer(self) -> Optional[str]:
        """The secret word, only once the game is over."""
        return self._secret if self._outcome.is_over else None

    def submit_guess(self, raw: str) -> SubmitOutcome:
        """
        Validates, scores and records one guess.

        Raises:
            SessionOver: the game is already won or lost
            InvalidWord: not an accepted word (IncorrectLength for a wrong length)
            DuplicateGuess: the word was already played this game
            ConstraintViolation: hard mode guess ignoring revealed letters
        """
        if self._outcome.is_over:
            raise SessionOver()

        if not isinstance(raw, str):
            raise InvalidWord(repr(raw))

        guess = self._dictionary.normalize(raw)
        if not self._dictionary.is_valid_guess(raw):
            if len(guess) != self._dictionary.word_length:
                raise IncorrectLength(guess, self._dictionary.word_length)
            raise InvalidWord(guess)

        if any(previous.word == guess for previous in self._history):
            raise DuplicateGuess(guess)

        self._policy.check(guess, self._secret, self._history, self._keyboard)

        # Everything below is computed before any state changes
        result = evaluate_guess(guess, self._secret)
        keyboard = self._keyboard.merged(result)

        self._history.append(result)
        self._keyboard = keyboard
        self._remaining -= 1

        if result.is_win:
            self._outcome = Outcome.WON
        elif self._remaining == 0:
            self._outcome = Outcome.LOST

        return SubmitOutcome(
            result=result,
            outcome=self._outcome,
            remaining_attempts=self._remaining,
            letter_status=self._keyboard.snapshot(),
        )

    def row_states(self) -> List[RowState]:
        """One marker per attempt row of the board."""
        guessed = len(self._history)
        rows = []
        for row in range(1, self.max_attempts + 1):
            if row <= guessed:
                rows.append(RowState.ALREADY_GUESSED)
            elif row == guessed + 1 and self._outcome is Outcome.IN_PROGRESS:
                rows.append(RowState.CURRENT)
            else:
                rows.append(RowState.EMPTY)
        return rows

    def get_state(self) -> GameState:
        """
        Returns the current game state (without revealing the answer).

        Returns:
            GameState snapshot; later guesses do not change it
        """
        return GameState(
            game_id=self.game_id,
            current_round=self.current_round,
            max_rounds=self.max_attempts,
            remaining_attempts=self._remaining,
            outcome=self._outcome,
            guesses=tuple(result.word for result in self._history),
            guess_results=tuple(self._history),
            letter_status=self._keyboard.snapshot(),
            difficulty=self.difficulty.value,
            answer=self.answer,
        )


def new_game(dictionary: Dictionary,
             difficulty: Difficulty = Difficulty.EASY,
             max_attempts: int = MAX_ROUNDS,
             answer: Optional[str] = None) -> GameSession:
    """
    Creates a new game session with a randomly selected word.

    Args:
        dictionary: Word lists; its random source picks the secret
        difficulty: Difficulty for the whole game
        max_attempts: Number of guesses allowed
        answer: Fixed secret word instead of a random one
    """
    secret = answer if answer is not None else dictionary.pick_secret()
    return GameSession(secret, dictionary, max_attempts=max_attempts, difficulty=difficulty)
