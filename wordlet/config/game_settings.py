"""
Game Configuration Constants Module

Game rules and the bundled dictionary. The answer list holds the words that
can be picked as the secret; the guess list holds the extra words accepted as
guesses. Both are loaded once, uppercased and validated on import.
"""

import json
import os
from typing import List, Final

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every word of a session."""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

KEYBOARD_ROWS: Final[List[str]] = ["QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM"]

ANSWERS_FILE: Final[str] = 'answers.json'
GUESSES_FILE: Final[str] = 'guesses.json'


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly word_length characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent uppercase formatting
    4. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        seen = set()
        duplicates = sorted({word for word in words if word in seen or seen.add(word)})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def _load_word_list(file_name: str) -> List[str]:
    """
    Load a word list from a JSON file bundled next to this module.

    Returns:
        List[str]: List of uppercase words

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError(f"{file_name} must contain an array of words")

    uppercase_words = [word.strip().upper() for word in word_list]
    validate_word_list_integrity(uppercase_words)
    return uppercase_words


# Bundled dictionary loaded from the JSON files
ANSWER_WORDS: Final[List[str]] = _load_word_list(ANSWERS_FILE)
GUESS_WORDS: Final[List[str]] = _load_word_list(GUESSES_FILE)
