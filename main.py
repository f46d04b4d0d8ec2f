"""
GM Tweet Poster Application

This is the main module of the GM Tweet Poster. It generates a
'Good Morning' tweet with OpenAI and posts it to Twitter/X.

The Lambda entry point lives in lambda_function.py; running this module
directly performs a single invocation locally.
"""

import sys
import json
import argparse
import logging
from dataclasses import dataclass, field
from typing import Optional, Callable, Dict, Any

from config import settings
from config.validators import validate_settings, get_config_summary
from utils.logger import get_logger, setup_logging
from utils.exceptions import ConfigurationError
from utils.helpers import normalize_tweet, is_valid_tweet
from services.protocols import TextGenerator, Publisher
from services.ai_service import AIService
from services.twitter_service import TwitterService

# Set up logging
logger = get_logger(__name__)

MSG_POSTED = "Tweet posted successfully!"
MSG_INVALID = "The generated tweet text is invalid."
MSG_POST_FAILED = "Failed to post the tweet."
MSG_ERROR = "An error occurred."
MSG_TEST_MODE = "Tweet generated in test mode."


@dataclass
class PostResult:
    """HTTP-style outcome of a single invocation."""
    status_code: int
    body: Dict[str, Any] = field(default_factory=dict)

    def to_response(self) -> Dict[str, Any]:
        """Render the result in the Lambda proxy response shape."""
        return {
            "statusCode": self.status_code,
            "body": json.dumps(self.body)
        }


class GMPoster:
    """
    Main application class for the GM Tweet Poster.

    This class orchestrates generating, normalizing, validating
    and publishing a single tweet.
    """

    def __init__(
        self,
        ai_service: Optional[TextGenerator] = None,
        publisher_factory: Optional[Callable[[], Publisher]] = None,
        validate: bool = True
    ):
        """
        Initialize the GM Tweet Poster.

        Args:
            ai_service: Text generator, defaults to AIService()
            publisher_factory: Callable building a publisher for each invocation,
                defaults to TwitterService
            validate: Whether to validate settings before building services

        Raises:
            ConfigurationError: If required settings are missing.
        """
        # Fail before any service is built
        if validate:
            validate_settings()

        self.ai_service = ai_service if ai_service is not None else AIService()
        self.publisher_factory = publisher_factory or TwitterService

    def run(self, event: Any = None, test_mode: bool = False) -> PostResult:
        """
        Run one invocation of the posting workflow.

        Args:
            event: The trigger payload. Not read.
            test_mode: If True, generates and validates the tweet without posting it

        Returns:
            PostResult: 200 on success, 400 for invalid text, 500 on failure
        """
        try:
            # 1. Generate raw text
            raw_text = self.ai_service.generate_text(settings.SYSTEM_PROMPT, settings.USER_PROMPT)

            # 2. Normalize
            draft = normalize_tweet(raw_text)
            logger.info(f"Generated tweet ({draft.length} chars): {draft.text}")

            # 3. Validate
            if not is_valid_tweet(draft.text):
                logger.warning(f"Generated tweet text is invalid ({draft.length} chars)")
                return PostResult(400, {"message": MSG_INVALID})

            if test_mode:
                logger.info(f"TEST MODE: Would post tweet: {draft.text}")
                return PostResult(200, {"message": MSG_TEST_MODE, "tweetText": draft.text})

            # 4. Publish with a fresh client
            publisher = self.publisher_factory()
            tweet_id = publisher.publish(draft.text)

            if not tweet_id:
                return PostResult(500, {"message": MSG_POST_FAILED})

            logger.info(f"Tweet posted with id {tweet_id}")
            return PostResult(200, {"message": MSG_POSTED, "tweetId": tweet_id})

        except Exception as e:
            logger.error(f"An error occurred: {e}", exc_info=True)
            return PostResult(500, {"message": MSG_ERROR, "error": str(e)})


def create_gm_poster() -> GMPoster:
    """Build the poster with validated settings and log the configuration summary."""
    poster = GMPoster()
    logger.info(f"Configuration: {get_config_summary()}")
    return poster


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='GM Tweet Poster')
    parser.add_argument('--test', action='store_true', help='Generate the tweet without posting it')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default=None, help='Logging level (defaults to LOG_LEVEL)')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for local runs."""
    args = parse_arguments(argv)

    # Set up logging
    level_name = args.log_level or settings.LOG_LEVEL
    setup_logging(getattr(logging, level_name, logging.INFO))

    logger.info("Starting GM Tweet Poster")

    try:
        poster = create_gm_poster()
        result = poster.run(test_mode=args.test)

        # Report status
        logger.info(f"Result: {result.status_code} {result.body}")
        exit_code = 0 if result.status_code == 200 else 1

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        exit_code = 2
    except Exception as e:
        logger.error(f"Unhandled exception in GM Tweet Poster: {e}", exc_info=True)
        exit_code = 2

    logger.info(f"GM Tweet Poster finished with exit code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
