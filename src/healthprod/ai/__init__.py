"""AI gateway module for HealthProd.

Provides the Anthropic-backed gateway for insights, reports, task
prioritization, knowledge cards, meal analysis and chat.
"""

import logging

from ..config import AIConfig
from .client import AIBackend, AIClient, AIClientConfig
from .errors import (
    GatewayAPIError,
    GatewayAuthError,
    GatewayConnectivityError,
    GatewayError,
    GatewayResponseError,
    GatewayTimeoutError,
)
from .gateway import AIGateway, DailyReport
from .mock import MockAIClient
from .session import ChatMessage, ChatSession

logger = logging.getLogger(__name__)


def create_backend(config: AIConfig | None = None, use_mock: bool = False) -> AIBackend | None:
    """Create the completion backend.

    Returns:
        MockAIClient when requested, an AIClient when an API key is set,
        or None when no key is available.
    """
    if use_mock:
        logger.info("AI: Using MockAIClient (requested)")
        return MockAIClient()
    try:
        client_config = AIClientConfig.from_env(config)
    except GatewayAuthError as e:
        logger.warning(f"AI: features disabled: {e}")
        return None
    logger.info(f"AI: Using Anthropic model {client_config.model}")
    return AIClient(client_config)


__all__ = [
    "AIBackend",
    "AIClient",
    "AIClientConfig",
    "AIGateway",
    "ChatMessage",
    "ChatSession",
    "DailyReport",
    "GatewayAPIError",
    "GatewayAuthError",
    "GatewayConnectivityError",
    "GatewayError",
    "GatewayResponseError",
    "GatewayTimeoutError",
    "MockAIClient",
    "create_backend",
]
