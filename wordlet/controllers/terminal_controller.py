"""
Terminal Controller

Line-oriented shell around a GameSession: reads one guess per line, prints
the board and keyboard, and reports rejected guesses.
"""

import sys
from typing import Callable, Dict, List, Optional, TextIO

from colorama import Back, Fore, Style

from ..config.game_settings import KEYBOARD_ROWS
from ..models.errors import WordletError
from ..models.game import GuessResult, LetterStatus, Outcome, RowState
from ..services.game_session import GameSession
from ..utils.game_logger import game_logger

WELCOME_MESSAGE = "Welcome to Wordlet. You have {attempts} tries to guess the answer. Good luck!"
WIN_MESSAGE = "Game is over! You win!"
LOSS_MESSAGE = "Game over! The answer was '{answer}'."
PROMPT = "> "
QUIT_COMMANDS = (':q', ':quit')

_TILE_STYLES = {
    LetterStatus.CORRECT: Back.GREEN + Fore.BLACK + Style.BRIGHT,
    LetterStatus.PRESENT: Back.YELLOW + Fore.BLACK + Style.BRIGHT,
    LetterStatus.ABSENT: Fore.LIGHTBLACK_EX + Style.BRIGHT,
    LetterStatus.UNKNOWN: Style.BRIGHT,
}

# Plain markers when color is off
_PLAIN_TILES = {
    LetterStatus.CORRECT: "[{}]",
    LetterStatus.PRESENT: "({})",
    LetterStatus.ABSENT: " {} ",
    LetterStatus.UNKNOWN: " {} ",
}


def render_tile(letter: str, status: LetterStatus, color: bool = True) -> str:
    if color:
        return f"{_TILE_STYLES[status]} {letter} {Style.RESET_ALL}"
    return _PLAIN_TILES[status].format(letter)


def render_result(result: GuessResult, color: bool = True) -> str:
    return " ".join(render_tile(letter, status, color) for letter, status in result)


def render_board(session: GameSession, color: bool = True) -> str:
    """All attempt rows: played guesses, the current row and empty rows."""
    history = session.guesses
    lines: List[str] = []
    for index, row_state in enumerate(session.row_states()):
        if row_state is RowState.ALREADY_GUESSED:
            lines.append(render_result(history[index], color))
            continue
        marker = "_" if row_state is RowState.CURRENT else "."
        lines.append(" ".join(f" {marker} " for _ in range(session.word_length)))
    return "\n".join(lines)


def render_keyboard(letter_status: Dict[str, LetterStatus], color: bool = True) -> str:
    lines = []
    for indent, row in enumerate(KEYBOARD_ROWS):
        keys = []
        for letter in row:
            status = letter_status[letter]
            if not color and status is LetterStatus.ABSENT:
                keys.append(" - ")
            else:
                keys.append(render_tile(letter, status, color))
        lines.append(" " * indent * 2 + "".join(keys))
    return "\n".join(lines)


class TerminalController:
    """
    Drives one game from text lines.

    Args:
        session: The game to play
        input_func: Reads one line, raising EOFError when input ends
        output: Stream the board and messages are written to
        color: Use ANSI colors for tiles and keys
    """

    def __init__(self,
                 session: GameSession,
                 input_func: Callable[[str], str] = input,
                 output: Optional[TextIO] = None,
                 color: bool = True):
        self.session = session
        self.input_func = input_func
        self.output = output or sys.stdout
        self.color = color

    def _print(self, text: str = "") -> None:
        self.output.write(text + "\n")
        self.output.flush()

    def show_board(self) -> None:
        self._print(render_board(self.session, self.color))
        self._print()
        self._print(render_keyboard(self.session.keyboard, self.color))

    def run(self) -> Outcome:
        """Plays until the game ends or input runs out. Returns the final outcome."""
        session = self.session
        game_logger.log_user_action(
            'new_game', session.game_id,
            difficulty=session.difficulty.value, max_attempts=session.max_attempts
        )

        self._print(WELCOME_MESSAGE.format(attempts=session.max_attempts))
        self.show_board()

        while session.outcome is Outcome.IN_PROGRESS:
            try:
                line = self.input_func(PROMPT)
            except EOFError:
                game_logger.log_user_action('quit', session.game_id, reason='end_of_input')
                break

            line = line.strip()
            if line.lower() in QUIT_COMMANDS:
                game_logger.log_user_action('quit', session.game_id, reason='quit_command')
                break
            if not line:
                continue

            self.handle_guess(line)

        return session.outcome

    def handle_guess(self, line: str) -> None:
        session = self.session
        game_logger.log_user_action('submit_guess', session.game_id, guess=line.upper())

        try:
            submitted = session.submit_guess(line)
        except WordletError as error:
            game_logger.log_rejected_guess(session.game_id, line.upper(), error)
            self._print(error.message)
            return

        self.show_board()

        if submitted.outcome is Outcome.WON:
            game_logger.log_game_event(
                session.game_id, 'game_won',
                rounds_used=session.current_round, target_word=session.answer
            )
            self._print(WIN_MESSAGE)
        elif submitted.outcome is Outcome.LOST:
            game_logger.log_game_event(
                session.game_id, 'game_lost',
                rounds_used=session.current_round, target_word=session.answer
            )
            self._print(LOSS_MESSAGE.format(answer=session.answer))
        else:
            self._print(f"{submitted.remaining_attempts} tries left")
