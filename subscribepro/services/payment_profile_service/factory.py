"""
Payment Profile Service Factory

Factory for creating PaymentProfileService with real dependencies.
This is the ONLY module that builds the HTTP transport for the service.

Usage:
    from .factory import create_payment_profile_service
    service = create_payment_profile_service()
"""
import logging
from typing import Optional

from ...core.config import ClientConfig
from ...core.http_client import HttpClient
from ...core.protocols import TransportProtocol
from .payment_profile_service import PaymentProfileService
from .profile_factory import PaymentProfileFactory

logger = logging.getLogger(__name__)


def create_payment_profile_service(
    config: Optional[ClientConfig] = None,
    http_client: Optional[TransportProtocol] = None,
) -> PaymentProfileService:
    """
    Create PaymentProfileService with real dependencies

    Args:
        config: Client configuration (loaded from environment if not provided)
        http_client: Transport to use instead of a new HttpClient

    Returns:
        Configured PaymentProfileService instance

    Raises:
        ConfigurationError: If the configured payment profile class is unusable
    """
    if config is None:
        config = ClientConfig.from_env()

    data_factory = PaymentProfileFactory.from_config(config)

    if http_client is None:
        http_client = HttpClient(config)

    logger.info(f"Created PaymentProfileService with entity class {data_factory.instance_class.__name__}")
    return PaymentProfileService(http_client=http_client, data_factory=data_factory)


__all__ = ["create_payment_profile_service"]
