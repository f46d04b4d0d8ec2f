"""
AWS Lambda entry point for the GM Tweet Poster.

The poster is built at import time, so a function with missing secrets
fails during initialization and never accepts an invocation.
"""

import logging

from config import settings
from utils.logger import setup_logging
from main import create_gm_poster

setup_logging(getattr(logging, settings.LOG_LEVEL, logging.INFO))

poster = create_gm_poster()


def lambda_handler(event, context):
    """Generate and post one GM tweet. The event and context are not read."""
    return poster.run(event).to_response()
