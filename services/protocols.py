"""
Service Protocol Definitions

This module defines typing.Protocol interfaces for the two external services used
by the GM Tweet Poster. These protocols keep the posting workflow independent of
the OpenAI and Twitter client libraries, so it can be tested with fakes.

Protocols defined:
- TextGenerator: Interface for model-inference services
- Publisher: Interface for social media publishing services
"""

from typing import Protocol, Optional
from dataclasses import dataclass


@dataclass
class DraftPost:
    """Data class holding the tweet text of a single invocation before it is published."""
    raw_text: str
    text: str

    @property
    def length(self) -> int:
        # UTF-16 code units, so emoji outside the BMP count as 2
        return len(self.text.encode("utf-16-le")) // 2


class TextGenerator(Protocol):
    """Protocol defining the interface for model-inference services."""

    def generate_text(self, system_prompt: str, user_prompt: str) -> str:
        """Request a completion for a system + user prompt pair.

        Args:
            system_prompt: Instruction describing the desired tone and style.
            user_prompt: Instruction describing the topic.

        Returns:
            The raw text of the first returned choice.
        """
        ...


class Publisher(Protocol):
    """Protocol defining the interface for social media publishing services."""

    def publish(self, text: str) -> Optional[str]:
        """Publish a new post.

        Args:
            text: The final post content.

        Returns:
            The identifier of the created post, or None if the platform
            response did not carry one.
        """
        ...
