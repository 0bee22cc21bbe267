"""
Core Module for the SubscribePro SDK

Shared building blocks used by every service package.

COMPONENTS:
    - config/: ClientConfig and LoggingConfig (environment + .env)
    - exceptions.py: SDK error hierarchy
    - data_object.py: base entity with identity and dirty tracking
    - data_factory.py: configured entity class construction
    - base_service.py: response envelope -> entity helpers
    - http_client.py: async httpx transport
    - logger.py: optional console logging setup
"""

from .base_service import BaseService
from .config import ClientConfig, LoggingConfig
from .data_factory import DataFactory
from .data_object import DataObject
from .exceptions import (
    ConfigurationError,
    EntityInvalidDataError,
    HttpError,
    InvalidArgumentError,
    SubscribeProError,
)
from .http_client import HttpClient
from .protocols import DataObjectProtocol, TransportProtocol

__all__ = [
    "BaseService",
    "ClientConfig",
    "LoggingConfig",
    "DataFactory",
    "DataObject",
    "DataObjectProtocol",
    "TransportProtocol",
    "HttpClient",
    "SubscribeProError",
    "EntityInvalidDataError",
    "InvalidArgumentError",
    "ConfigurationError",
    "HttpError",
]
