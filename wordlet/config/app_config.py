"""
Configuration Management Module

Centralized configuration for the Wordlet terminal game.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from a .env file in the working directory
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration class with all settings."""

    # Game Settings, as strings; the command line parser converts them
    DIFFICULTY = os.getenv('WORDLET_DIFFICULTY', 'easy')
    MAX_ATTEMPTS = os.getenv('WORDLET_MAX_ATTEMPTS', '6')
    SEED = os.getenv('WORDLET_SEED') or None

    # Terminal Settings
    COLOR = _env_flag('WORDLET_COLOR', 'True')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')
    LOG_DIR = os.getenv('LOG_DIR') or None


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = 'INFO'


class ProductionConfig(Config):
    """Production configuration."""


class TestingConfig(Config):
    """Testing configuration."""
    SEED = 0
    COLOR = False
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """Return the configuration class selected by name or WORDLET_ENV."""
    name = name or os.getenv('WORDLET_ENV', 'default')
    try:
        return config[name]
    except KeyError:
        raise ValueError(f"Unknown configuration profile '{name}'. Valid values are: {', '.join(sorted(config))}")
