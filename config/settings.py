"""
Configuration Settings for GM Tweet Poster

This module centralizes all configuration settings for the GM Tweet Poster,
including environment variables, API keys, and application constants.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Determine the application root directory
APP_ROOT = Path(__file__).resolve().parent.parent

# Load environment variables from .env file (local runs; Lambda uses its own environment)
load_dotenv(dotenv_path=os.path.join(APP_ROOT, '.env'))

# OpenAI Authentication
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")

# Twitter API Authentication (OAuth 1.0a user context)
TWITTER_CONSUMER_KEY = os.getenv("TWITTER_CONSUMER_KEY")
TWITTER_CONSUMER_SECRET = os.getenv("TWITTER_CONSUMER_SECRET")
TWITTER_ACCESS_TOKEN_KEY = os.getenv("TWITTER_ACCESS_TOKEN_KEY")
TWITTER_ACCESS_TOKEN_SECRET = os.getenv("TWITTER_ACCESS_TOKEN_SECRET")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# =============================================================================
# AI Service Settings
# =============================================================================

AI_MODEL = "gpt-4"
AI_MAX_TOKENS = 240                  # Keeps the completion within a single tweet

SYSTEM_PROMPT = (
    "You are a specialized assistant. Generate an inspiring, SEO-optimized, "
    "and witty 'Good Morning' tweet."
)
USER_PROMPT = "Generate a GM tweet inspired in the world of web3 gamedevelopment."

# =============================================================================
# Tweet Settings
# =============================================================================

TWEET_PREFIX = "GM-GPT-X: "
TWITTER_CHARACTER_LIMIT = 280        # Twitter's character limit
