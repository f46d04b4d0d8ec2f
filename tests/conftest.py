"""
Shared Test Fixtures for GM Tweet Poster

This module provides common fixtures used across all test modules.
Fixtures include mocks for settings, logging, and fake implementations
of the TextGenerator and Publisher protocols.
"""

import pytest
from unittest.mock import MagicMock, patch
from typing import Optional, List
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def mock_settings():
    """
    Mock the settings module with test configuration values.

    This fixture patches the config.settings module with safe test values,
    preventing tests from accessing real API keys.

    Usage:
        def test_something(mock_settings):
            mock_settings.OPENAI_API_KEY = None
            # ... test code

    Returns:
        MagicMock: A mock settings object with default test values.
    """
    import config.settings  # noqa: F401  (make the submodule patchable)

    with patch('config.settings') as mock_settings_module:
        # API Keys (use obvious test values)
        mock_settings_module.OPENAI_API_KEY = "test-openai-api-key"
        mock_settings_module.TWITTER_CONSUMER_KEY = "test-consumer-key"
        mock_settings_module.TWITTER_CONSUMER_SECRET = "test-consumer-secret"
        mock_settings_module.TWITTER_ACCESS_TOKEN_KEY = "test-access-token"
        mock_settings_module.TWITTER_ACCESS_TOKEN_SECRET = "test-access-secret"

        mock_settings_module.LOG_LEVEL = "INFO"

        # AI Settings
        mock_settings_module.AI_MODEL = "gpt-4"
        mock_settings_module.AI_MAX_TOKENS = 240
        mock_settings_module.SYSTEM_PROMPT = "test system prompt"
        mock_settings_module.USER_PROMPT = "test user prompt"

        # Tweet Settings
        mock_settings_module.TWEET_PREFIX = "GM-GPT-X: "
        mock_settings_module.TWITTER_CHARACTER_LIMIT = 280

        yield mock_settings_module


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def capture_logs():
    """
    Capture log messages for assertion in tests.

    Returns:
        list: A list that will contain captured log records.
    """
    import logging

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

    handler = LogCapture()
    handler.setLevel(logging.DEBUG)

    # The application logger does not propagate once setup_logging has run
    app_logger = logging.getLogger("gm_poster")
    original_app_level = app_logger.level
    app_logger.setLevel(logging.DEBUG)
    app_logger.addHandler(handler)

    yield handler.records

    app_logger.removeHandler(handler)
    app_logger.setLevel(original_app_level)


# =============================================================================
# Dependency Injection Fixtures
# =============================================================================

class FakeTextGenerator:
    """Fake implementation of the TextGenerator protocol for testing.

    Returns a fixed text, or raises the configured error.
    """

    def __init__(self, text: str = "", error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_text(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.text


class FakePublisher:
    """Fake implementation of the Publisher protocol that records published texts."""

    def __init__(self, tweet_id: Optional[str] = "12345", error: Optional[Exception] = None):
        self.tweet_id = tweet_id
        self.error = error
        self.published: List[str] = []

    def publish(self, text: str) -> Optional[str]:
        self.published.append(text)
        if self.error is not None:
            raise self.error
        return self.tweet_id

    @property
    def publish_count(self) -> int:
        return len(self.published)


@pytest.fixture
def fake_publisher():
    """Provide a FakePublisher that returns tweet id '12345'."""
    return FakePublisher()


@pytest.fixture
def make_poster(fake_publisher):
    """
    Factory fixture building a GMPoster around a FakeTextGenerator.

    Usage:
        def test_run(make_poster, fake_publisher):
            poster = make_poster('"Hello"')
            result = poster.run()
            assert fake_publisher.published == ["GM-GPT-X: Hello"]

    Returns:
        callable: Builds a GMPoster from model text, or from an error to raise.
    """
    from main import GMPoster

    def _make(text: str = "", error: Optional[Exception] = None, publisher=None):
        generator = FakeTextGenerator(text=text, error=error)
        publisher = publisher or fake_publisher
        return GMPoster(
            ai_service=generator,
            publisher_factory=lambda: publisher,
            validate=False
        )

    return _make


@pytest.fixture
def mock_openai_client():
    """
    Mock OpenAI client whose chat completion returns a single choice.

    Returns:
        MagicMock: Client with chat.completions.create configured.
    """
    client = MagicMock()
    choice = MagicMock()
    choice.message.content = '"Rise and grind, builders!"'
    client.chat.completions.create.return_value = MagicMock(choices=[choice])
    return client
