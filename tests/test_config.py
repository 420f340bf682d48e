import pytest
from wordlet.config import (
    ANSWER_WORDS, GUESS_WORDS, MAX_ROUNDS, WORD_LENGTH, DevelopmentConfig, ProductionConfig, TestingConfig,
    get_config, validate_word_list_integrity,
)


def test_game_constants():
    assert WORD_LENGTH == 5
    assert MAX_ROUNDS == 6


def test_bundled_word_lists_pass_validation():
    assert validate_word_list_integrity(ANSWER_WORDS)
    assert validate_word_list_integrity(GUESS_WORDS)
    assert all(word.isupper() for word in ANSWER_WORDS)


@pytest.mark.parametrize("words,error", [
    ([], "cannot be empty"),
    (["CRANES"], "not 5 characters long"),
    (["CR4NE"], "non-alphabetic"),
    (["ÉCLAT"], "non-alphabetic"),
    (["crane"], "uppercase"),
    (["CRANE", "SLATE", "CRANE"], "Duplicate words found in word list: \\['CRANE'\\]"),
])
def test_validate_word_list_integrity_rejects(words, error):
    with pytest.raises(ValueError, match=error):
        validate_word_list_integrity(words)


def test_get_config_by_name():
    assert get_config('testing') is TestingConfig
    assert get_config('development') is DevelopmentConfig
    assert get_config('default') is ProductionConfig


def test_get_config_from_environment(monkeypatch):
    monkeypatch.setenv('WORDLET_ENV', 'development')
    assert get_config() is DevelopmentConfig


def test_get_config_unknown_profile():
    with pytest.raises(ValueError, match="Unknown configuration profile"):
        get_config('staging')


def test_testing_profile_is_deterministic():
    assert TestingConfig.SEED == 0
    assert TestingConfig.COLOR is False
    assert TestingConfig.LOG_DIR is None
