"""
Helper Utility Module

This module provides the text normalization helpers used to turn raw model
output into a tweet.
"""

from typing import Any, Dict, Optional

from config import settings
from services.protocols import DraftPost


def strip_wrapping_quotes(text: str) -> str:
    """
    Remove a single pair of double quotes wrapping the text.

    Only strips when the text both starts and ends with '"'. Nested
    quotes are left alone.

    Args:
        text: The text to clean

    Returns:
        str: Text without its wrapping quotes
    """
    if text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def normalize_tweet(raw_text: str, prefix: Optional[str] = None) -> DraftPost:
    """
    Trim, unquote and prefix raw model output.

    Args:
        raw_text: The text returned by the model
        prefix: Prefix to prepend, defaults to settings.TWEET_PREFIX

    Returns:
        DraftPost: The draft holding both the raw and the normalized text
    """
    if prefix is None:
        prefix = settings.TWEET_PREFIX
    text = strip_wrapping_quotes(raw_text.strip())
    return DraftPost(raw_text=raw_text, text=f"{prefix}{text}")


def tweet_length(text: str) -> int:
    """
    Count the text in UTF-16 code units.

    Characters outside the Basic Multilingual Plane, such as most emoji,
    count as 2.

    Args:
        text: The text to measure

    Returns:
        int: Number of UTF-16 code units
    """
    return len(text.encode("utf-16-le")) // 2


def is_valid_tweet(text: str, limit: Optional[int] = None) -> bool:
    """Check that the tweet text is non-empty and within the character limit in UTF-16 units."""
    if limit is None:
        limit = settings.TWITTER_CHARACTER_LIMIT
    return bool(text) and tweet_length(text) <= limit


def safe_get(data: Dict[str, Any], *keys, default: Any = None) -> Any:
    """
    Safely get a value from a nested dictionary.

    Args:
        data: The dictionary to search
        *keys: The keys to follow
        default: Default value if key doesn't exist

    Returns:
        The value at the specified keys or the default value
    """
    for key in keys:
        try:
            data = data[key]
        except (KeyError, TypeError, IndexError):
            return default
    return data
