"""
Wordlet - Main Entry Point

Parses the command line, builds the dictionary and the game session, and
hands them to the terminal controller.
"""

import argparse
import random
from typing import List, Optional

import colorama

from . import __version__
from .config import get_config
from .controllers.terminal_controller import TerminalController
from .services.dictionary import Dictionary
from .services.difficulty import Difficulty
from .services.game_session import new_game
from .utils.game_logger import game_logger


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='wordlet',
        description='Wordlet is a command line Wordle clone.'
    )
    parser.add_argument(
        '-d', '--difficulty',
        default=settings.DIFFICULTY,
        help="Change the game's difficulty. Valid values are easy and hard"
    )
    parser.add_argument(
        '-s', '--seed',
        type=int,
        default=settings.SEED,
        help='Seed for picking the secret word, for reproducible games'
    )
    parser.add_argument(
        '-m', '--max-attempts',
        type=int,
        default=settings.MAX_ATTEMPTS,
        help='Number of guesses allowed'
    )
    parser.add_argument(
        '-a', '--answer',
        default=None,
        help='Play against this word instead of a random one'
    )
    parser.add_argument(
        '--no-color',
        dest='color',
        action='store_false',
        default=settings.COLOR,
        help='Print plain text tiles instead of ANSI colors'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_config()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    try:
        difficulty = Difficulty.parse(args.difficulty)
    except ValueError as e:
        parser.error(str(e))

    game_logger.configure(settings.LOG_DIR, settings.LOG_LEVEL)

    rng = random.Random(args.seed) if args.seed is not None else None
    dictionary = Dictionary.from_settings(rng=rng)

    if args.answer is not None and not dictionary.is_valid_guess(args.answer):
        parser.error(f"'{args.answer}' is not a valid word")

    try:
        session = new_game(dictionary, difficulty, args.max_attempts, answer=args.answer)
    except ValueError as e:
        parser.error(str(e))

    if args.color:
        colorama.just_fix_windows_console()

    controller = TerminalController(session, input_func=input, color=args.color)
    try:
        controller.run()
    except KeyboardInterrupt:
        game_logger.log_user_action('quit', session.game_id, reason='interrupted')
        print()
    except Exception as e:
        game_logger.log_error(e, 'run', session.game_id)
        raise

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
