"""
Twitter Service Module

This module handles integration with the Twitter/X API.
It provides functionality for authenticating with Twitter and
posting tweets.
"""

from typing import Optional, Any

import tweepy

from config import settings
from utils.exceptions import AuthenticationError
from utils.helpers import safe_get
from utils.logger import get_logger

logger = get_logger(__name__)


class TwitterService:
    """Service for Twitter/X integration."""

    def __init__(
        self,
        consumer_key: Optional[str] = None,
        consumer_secret: Optional[str] = None,
        access_token: Optional[str] = None,
        access_token_secret: Optional[str] = None,
        client: Optional[Any] = None
    ):
        """
        Initialize the Twitter service with API authentication.

        Args:
            consumer_key: App consumer key, defaults to settings.TWITTER_CONSUMER_KEY
            consumer_secret: App consumer secret, defaults to settings.TWITTER_CONSUMER_SECRET
            access_token: User access token, defaults to settings.TWITTER_ACCESS_TOKEN_KEY
            access_token_secret: User access token secret, defaults to settings.TWITTER_ACCESS_TOKEN_SECRET
            client: Pre-built tweepy.Client (used for testing)
        """
        self.consumer_key = consumer_key or settings.TWITTER_CONSUMER_KEY
        self.consumer_secret = consumer_secret or settings.TWITTER_CONSUMER_SECRET
        self.access_token = access_token or settings.TWITTER_ACCESS_TOKEN_KEY
        self.access_token_secret = access_token_secret or settings.TWITTER_ACCESS_TOKEN_SECRET

        if client is not None:
            self.client = client
        else:
            self.client = self._setup_twitter()

    def _setup_twitter(self) -> tweepy.Client:
        """
        Set up a Twitter API v2 client using OAuth 1.0a user context.

        Returns:
            tweepy.Client: The authenticated client.

        Raises:
            AuthenticationError: If any of the four OAuth 1.0a credentials is missing.
        """
        if not all([self.consumer_key, self.consumer_secret,
                    self.access_token, self.access_token_secret]):
            raise AuthenticationError("OAuth 1.0a credentials are required for posting tweets.")

        # Tweepy signs each request; no network call happens here
        client = tweepy.Client(
            consumer_key=self.consumer_key,
            consumer_secret=self.consumer_secret,
            access_token=self.access_token,
            access_token_secret=self.access_token_secret
        )
        logger.debug("Twitter client created with OAuth 1.0a user context")
        return client

    def publish(self, text: str) -> Optional[str]:
        """
        Post a tweet.

        Args:
            text: The text to tweet

        Returns:
            Optional[str]: The ID of the created tweet, or None if the API
            response did not contain one
        """
        response = self.client.create_tweet(text=text)

        tweet_id = safe_get(getattr(response, "data", None), "id") if response else None
        if tweet_id is None:
            logger.error("Failed to post tweet: No valid response from Twitter API")
            return None

        logger.info(f"Successfully posted tweet {tweet_id}")
        return str(tweet_id)
