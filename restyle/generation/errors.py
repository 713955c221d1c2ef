"""
Error taxonomy for generation attempts.

These are raised inside a single attempt and caught by the retry loop in
the client; callers only ever see the ``kind`` and message on a
GenerationResult.
"""

from typing import Optional


class ErrorKind:
    CONFIGURATION = "configuration"
    NETWORK = "network"
    TIMEOUT = "timeout"
    SERVER = "server"
    RESPONSE_SHAPE = "response_shape"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"


class GenerationError(Exception):
    """Base class for a failed generation attempt."""
    kind = ErrorKind.UNKNOWN
    default_message = "Unknown error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(GenerationError):
    kind = ErrorKind.CONFIGURATION
    default_message = (
        "API key not configured. Please set RUNWARE_API_KEY in your environment or .env file"
    )


class NetworkError(GenerationError):
    kind = ErrorKind.NETWORK
    default_message = (
        "Unable to reach the image generation service. "
        "Please check your internet connection and try again."
    )


class GenerationTimeoutError(GenerationError):
    kind = ErrorKind.TIMEOUT
    default_message = (
        "Image generation is taking longer than expected. Please try again in a moment."
    )


class ServerError(GenerationError):
    """Non-2xx response from the API."""
    kind = ErrorKind.SERVER

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        if not message:
            message = f"API error: {status_code}" if status_code else "API error"
        super().__init__(message)


class ResponseShapeError(GenerationError):
    kind = ErrorKind.RESPONSE_SHAPE
    default_message = "No image URL in response. Response format may have changed."


class GenerationCancelledError(GenerationError):
    kind = ErrorKind.CANCELLED
    default_message = "Generation was cancelled."
