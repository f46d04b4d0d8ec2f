"""
Custom Exception Classes for GM Tweet Poster

This module defines custom exceptions for better error handling and
categorization of failures across the application.
"""


class GMPosterError(Exception):
    """Base exception for all GM Tweet Poster application errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(GMPosterError):
    """Raised when configuration validation fails or required settings are missing."""
    pass


# =============================================================================
# AI Service Errors
# =============================================================================

class AIServiceError(GMPosterError):
    """Base exception for AI service errors."""
    pass


class TweetGenerationError(AIServiceError):
    """Raised when the model response carries no usable tweet text."""
    pass


# =============================================================================
# Social Media Errors
# =============================================================================

class SocialMediaError(GMPosterError):
    """Base exception for social media platform errors."""
    pass


class AuthenticationError(SocialMediaError):
    """Raised when the publishing client cannot be authenticated."""
    pass
