"""
SubscribePro SDK

Async Python client for the SubscribePro payment profile vault and webhook APIs.

Usage:
    from subscribepro import create_payment_profile_service

    service = create_payment_profile_service()
    profile = service.create_credit_card_profile({...})
    await service.save_profile(profile)
"""

from .core import (
    ClientConfig,
    ConfigurationError,
    EntityInvalidDataError,
    HttpError,
    HttpClient,
    InvalidArgumentError,
    LoggingConfig,
    SubscribeProError,
)
from .core.logger import setup_sdk_logger
from .services.payment_profile_service import (
    Address,
    PaymentMethodType,
    PaymentProfile,
    PaymentProfileService,
    ProfileType,
    create_payment_profile_service,
)
from .services.webhook_service import Event, WebhookService, create_webhook_service

__version__ = "1.0.0"

__all__ = [
    "Address",
    "ClientConfig",
    "ConfigurationError",
    "EntityInvalidDataError",
    "Event",
    "HttpClient",
    "HttpError",
    "InvalidArgumentError",
    "LoggingConfig",
    "PaymentMethodType",
    "PaymentProfile",
    "PaymentProfileService",
    "ProfileType",
    "SubscribeProError",
    "WebhookService",
    "create_payment_profile_service",
    "create_webhook_service",
    "setup_sdk_logger",
]
