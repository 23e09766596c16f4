"""Error types for the AI gateway.

Custom exceptions for generative-AI API interactions.
"""


class GatewayError(Exception):
    """Base exception for AI gateway errors."""

    pass


class GatewayTimeoutError(GatewayError):
    """Raised when an AI request times out."""

    pass


class GatewayAPIError(GatewayError):
    """Raised when the AI API returns an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize API error.

        Args:
            message: Error message.
            status_code: HTTP status code if available.
        """
        super().__init__(message)
        self.status_code = status_code


class GatewayAuthError(GatewayError):
    """Raised when authentication fails or no API key is configured."""

    pass


class GatewayConnectivityError(GatewayError):
    """Raised when the AI API cannot be reached."""

    pass


class GatewayResponseError(GatewayError):
    """Raised when the AI reply cannot be parsed into the expected shape."""

    pass


__all__ = [
    "GatewayAPIError",
    "GatewayAuthError",
    "GatewayConnectivityError",
    "GatewayError",
    "GatewayResponseError",
    "GatewayTimeoutError",
]
