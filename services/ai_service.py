"""
AI Service Module

This module handles text generation using OpenAI's chat completions API.
It sends a system + user prompt pair and returns the raw text of the
first returned choice.
"""

from typing import Optional, Any

from openai import OpenAI

from config import settings
from utils.exceptions import ConfigurationError, TweetGenerationError
from utils.logger import get_logger

logger = get_logger(__name__)


class AIService:
    """Service for AI text generation with OpenAI's chat completions API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[Any] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None
    ):
        """
        Initialize the AI service with the OpenAI API.

        Args:
            api_key: OpenAI API key, defaults to settings.OPENAI_API_KEY
            client: Pre-built OpenAI client (used for testing)
            model: Model identifier, defaults to settings.AI_MODEL
            max_tokens: Completion token cap, defaults to settings.AI_MAX_TOKENS
        """
        self.model = model or settings.AI_MODEL
        self.max_tokens = max_tokens or settings.AI_MAX_TOKENS

        if client is not None:
            self.client = client
        else:
            api_key = api_key or settings.OPENAI_API_KEY
            if not api_key:
                raise ConfigurationError("Missing required OPENAI_API_KEY")
            self.client = OpenAI(api_key=api_key)

        logger.info(f"Selected AI model: {self.model}")

    def generate_text(self, system_prompt: str, user_prompt: str) -> str:
        """
        Generate text for a system + user prompt pair.

        Args:
            system_prompt: Instruction describing the desired tone and style
            user_prompt: Instruction describing the topic

        Returns:
            str: The untrimmed content of the first returned choice

        Raises:
            TweetGenerationError: If the response carries no choices or no content.
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                max_tokens=self.max_tokens
            )
        except Exception as e:
            logger.error(f"Error generating text with {self.model}: {e}")
            raise

        if not response or not getattr(response, "choices", None):
            raise TweetGenerationError("No choices returned by the model")

        content = response.choices[0].message.content
        if content is None:
            raise TweetGenerationError("Model returned an empty message")

        logger.debug(f"Raw model output: {content!r}")
        return content
