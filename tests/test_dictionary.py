import random

import pytest
from conftest import ANSWERS, GUESSES
from wordlet.config.game_settings import ANSWER_WORDS, GUESS_WORDS
from wordlet.services.dictionary import Dictionary


def test_answers_and_guesses_are_accepted(dictionary):
    assert dictionary.is_valid_guess("CRANE")
    assert dictionary.is_valid_guess("SLATE")
    assert len(dictionary) == len(set(ANSWERS) | set(GUESSES))


def test_guess_only_words_are_not_answers(dictionary):
    assert "CRANE" in dictionary.answers
    assert "SLATE" not in dictionary.answers


def test_validation_normalizes_case_and_whitespace(dictionary):
    assert dictionary.is_valid_guess("crane")
    assert dictionary.is_valid_guess("  CrAnE \n")


@pytest.mark.parametrize("candidate", ["", "cran", "cranes", "zzzzz", "cr4ne", None, 12345])
def test_invalid_candidates_return_false(dictionary, candidate):
    assert dictionary.is_valid_guess(candidate) is False


def test_non_ascii_letters_are_rejected_before_upper_casing(dictionary):
    # "ß".upper() is "SS", which would turn CRAß into the accepted CRASS
    assert dictionary.is_valid_guess("crass")
    assert dictionary.is_valid_guess("craß") is False
    assert dictionary.is_valid_guess("CRAẞ") is False


def test_pick_secret_uses_the_injected_random_source():
    words = tuple(word.upper() for word in ANSWERS)
    expected = random.Random(3)
    picked = Dictionary(ANSWERS, GUESSES, rng=random.Random(3))
    for _ in range(20):
        assert picked.pick_secret() == expected.choice(words)


def test_pick_secret_only_picks_answers(dictionary):
    for _ in range(50):
        assert dictionary.pick_secret() in dictionary.answers


def test_pick_secret_without_rng_uses_process_wide_source():
    random.seed(11)
    first = Dictionary(ANSWERS).pick_secret()
    random.seed(11)
    assert Dictionary(ANSWERS).pick_secret() == first


def test_repeated_words_are_dropped():
    dictionary = Dictionary(["crane", "CRANE", "slump"], ["crane", "slate"])
    assert dictionary.answers == ("CRANE", "SLUMP")
    assert len(dictionary) == 3


@pytest.mark.parametrize("answers,guesses", [
    ([], []),
    (["cranes"], []),
    (["crane"], ["slat"]),
    (["cr4ne"], []),
])
def test_invalid_word_lists_raise(answers, guesses):
    with pytest.raises(ValueError):
        Dictionary(answers, guesses)


def test_custom_word_length():
    dictionary = Dictionary(["plant", "crane"], word_length=5)
    assert dictionary.word_length == 5

    short = Dictionary(["cat", "dog"], word_length=3)
    assert short.is_valid_guess("cat")
    assert not short.is_valid_guess("crane")


def test_bundled_dictionary():
    dictionary = Dictionary.from_settings(rng=random.Random(0))

    assert len(dictionary.answers) == len(ANSWER_WORDS)
    assert len(dictionary.answers) > 2000
    assert all(dictionary.is_valid_guess(word) for word in ANSWER_WORDS)
    assert all(dictionary.is_valid_guess(word) for word in GUESS_WORDS)
    assert dictionary.is_valid_guess("crane")
    assert not dictionary.is_valid_guess("xyzzy")
    assert dictionary.pick_secret() in dictionary.answers
