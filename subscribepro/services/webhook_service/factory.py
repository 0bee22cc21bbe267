"""
Webhook Service Factory

Factory for creating WebhookService with real dependencies.

Usage:
    from .factory import create_webhook_service
    service = create_webhook_service()
"""
from typing import Optional

from ...core.config import ClientConfig
from ...core.http_client import HttpClient
from ...core.protocols import TransportProtocol
from .event_factory import EventFactory
from .webhook_service import WebhookService


def create_webhook_service(
    config: Optional[ClientConfig] = None,
    http_client: Optional[TransportProtocol] = None,
) -> WebhookService:
    """
    Create WebhookService with real dependencies

    Args:
        config: Client configuration (loaded from environment if not provided)
        http_client: Transport to use instead of a new HttpClient; pass the
            one holding the inbound request when calling read_event()

    Returns:
        Configured WebhookService instance
    """
    if config is None:
        config = ClientConfig.from_env()

    if http_client is None:
        http_client = HttpClient(config)

    return WebhookService(http_client=http_client, data_factory=EventFactory.from_config(config))


__all__ = ["create_webhook_service"]
