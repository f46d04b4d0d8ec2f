"""
Configuration Validation for GM Tweet Poster

This module contains configuration validation logic. It is kept apart from
settings.py so the check can run (and be tested) independently of import time.
"""

from utils.exceptions import ConfigurationError
from utils.logger import get_logger

logger = get_logger(__name__)

REQUIRED_ENV_VARS = [
    "OPENAI_API_KEY",
    "TWITTER_CONSUMER_KEY",
    "TWITTER_CONSUMER_SECRET",
    "TWITTER_ACCESS_TOKEN_KEY",
    "TWITTER_ACCESS_TOKEN_SECRET",
]


def validate_settings():
    """
    Validate that all required settings are properly configured.

    Raises:
        ConfigurationError: If required settings are missing or invalid.
    """
    # Import settings here so tests can patch config.settings
    from config import settings

    errors = []

    # Required environment variables
    for var_name in REQUIRED_ENV_VARS:
        if not getattr(settings, var_name, None):
            errors.append(f"Missing required environment variable: {var_name}")

    # Validate numeric settings are within reasonable bounds
    numeric_validations = [
        ("AI_MAX_TOKENS", settings.AI_MAX_TOKENS, 1, 4096),
        ("TWITTER_CHARACTER_LIMIT", settings.TWITTER_CHARACTER_LIMIT, 1, 25000),
    ]

    for name, value, min_val, max_val in numeric_validations:
        if value < min_val or value > max_val:
            errors.append(f"{name} must be between {min_val} and {max_val}, got {value}")

    if len(settings.TWEET_PREFIX) >= settings.TWITTER_CHARACTER_LIMIT:
        errors.append("TWEET_PREFIX leaves no room for generated text within TWITTER_CHARACTER_LIMIT")

    if settings.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        logger.warning(f"Unknown LOG_LEVEL '{settings.LOG_LEVEL}', falling back to INFO")

    # Raise all errors at once
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)

    return True


def get_config_summary() -> dict:
    """
    Returns a summary of current configuration (without sensitive values).
    Useful for logging startup state.
    """
    from config import settings

    return {
        "credentials": {
            var_name: bool(getattr(settings, var_name, None))
            for var_name in REQUIRED_ENV_VARS
        },
        "ai": {
            "model": settings.AI_MODEL,
            "max_tokens": settings.AI_MAX_TOKENS,
        },
        "tweet": {
            "prefix": settings.TWEET_PREFIX,
            "char_limit": settings.TWITTER_CHARACTER_LIMIT,
        },
    }
