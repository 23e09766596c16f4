"""Anthropic API client for HealthProd.

Thin wrapper over the Anthropic SDK that maps SDK exceptions into the
gateway error hierarchy.
"""

import base64
import logging
import os
import socket
import time
from dataclasses import dataclass
from typing import Any, Protocol

import anthropic

from ..config import AIConfig
from .errors import (
    GatewayAPIError,
    GatewayAuthError,
    GatewayConnectivityError,
    GatewayTimeoutError,
)

logger = logging.getLogger(__name__)

API_HOST = "api.anthropic.com"


@dataclass
class AIClientConfig:
    """Configuration for the AI client."""

    api_key: str
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 1024
    temperature: float = 0.7
    timeout_seconds: float = 30.0

    @classmethod
    def from_env(cls, ai_config: AIConfig | None = None) -> "AIClientConfig":
        """Create config from environment variables and optional AI settings.

        Raises:
            GatewayAuthError: If ANTHROPIC_API_KEY is not set.
        """
        api_key = os.environ.get("ANTHROPIC_API_KEY", "").strip()
        if not api_key:
            raise GatewayAuthError(
                "ANTHROPIC_API_KEY environment variable is not set. "
                "Set it to use AI features."
            )
        if ai_config is None:
            return cls(api_key=api_key)
        return cls(
            api_key=api_key,
            model=ai_config.model,
            max_tokens=ai_config.max_tokens,
            temperature=ai_config.temperature,
            timeout_seconds=ai_config.timeout_seconds,
        )


def text_block(text: str) -> dict[str, Any]:
    """Build a text content block."""
    return {"type": "text", "text": text}


def image_block(data: bytes, media_type: str) -> dict[str, Any]:
    """Build a base64 image content block."""
    return {
        "type": "image",
        "source": {
            "type": "base64",
            "media_type": media_type,
            "data": base64.standard_b64encode(data).decode("ascii"),
        },
    }


class AIBackend(Protocol):
    """Protocol for text completion backends."""

    def complete(
        self,
        messages: list[dict[str, Any]],
        system: str | None = None,
    ) -> str:
        """Send messages and return the reply text.

        Raises:
            GatewayError: On any failure.
        """
        ...


class AIClient:
    """Client for Anthropic Messages API communication."""

    def __init__(self, config: AIClientConfig) -> None:
        """Initialize the client.

        Args:
            config: Configuration for the client.
        """
        self._config = config
        self._client = anthropic.Anthropic(
            api_key=config.api_key,
            timeout=config.timeout_seconds,
        )

    @property
    def model(self) -> str:
        """Model used for requests."""
        return self._config.model

    def check_connectivity(self) -> bool:
        """Check if we can reach the AI API.

        Raises:
            GatewayConnectivityError: If the API host is unreachable.
        """
        try:
            with socket.create_connection((API_HOST, 443), timeout=5):
                return True
        except OSError as e:
            raise GatewayConnectivityError(
                f"Cannot reach AI API: {e}. Please check your internet connection."
            ) from e

    def is_reachable(self) -> bool:
        """Connectivity check for the network monitor; False when unreachable."""
        try:
            return self.check_connectivity()
        except GatewayConnectivityError as e:
            logger.debug(f"AI API unreachable: {e}")
            return False

    def complete(
        self,
        messages: list[dict[str, Any]],
        system: str | None = None,
    ) -> str:
        """Send messages to the API and return the concatenated reply text.

        Raises:
            GatewayTimeoutError: If the request times out.
            GatewayAPIError: If the API returns an error.
            GatewayAuthError: If authentication fails.
            GatewayConnectivityError: If the network is unavailable.
        """
        start_time = time.time()
        kwargs: dict[str, Any] = {
            "model": self._config.model,
            "max_tokens": self._config.max_tokens,
            "temperature": self._config.temperature,
            "messages": messages,
        }
        if system:
            kwargs["system"] = system

        try:
            response = self._client.messages.create(**kwargs)
        except anthropic.AuthenticationError as e:
            raise GatewayAuthError(
                "Invalid API key. Please check your ANTHROPIC_API_KEY."
            ) from e
        except anthropic.APITimeoutError as e:
            # APITimeoutError subclasses APIConnectionError
            raise GatewayTimeoutError(
                f"Request timed out after {self._config.timeout_seconds} seconds."
            ) from e
        except anthropic.APIConnectionError as e:
            raise GatewayConnectivityError(f"Failed to connect to AI API: {e}") from e
        except anthropic.APIStatusError as e:
            raise GatewayAPIError(f"API error: {e.message}", status_code=e.status_code) from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        latency_ms = int((time.time() - start_time) * 1000)
        logger.debug(f"AI reply from {response.model} in {latency_ms}ms")
        return text


__all__ = [
    "AIBackend",
    "AIClient",
    "AIClientConfig",
    "image_block",
    "text_block",
]
