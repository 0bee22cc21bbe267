"""
SDK Exceptions

Error types raised by the SubscribePro SDK.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Optional


class SubscribeProError(Exception):
    """Base exception for the SubscribePro SDK"""
    pass


class EntityInvalidDataError(SubscribeProError):
    """Raised when an entity can't be turned into a valid API request"""
    pass


class InvalidArgumentError(SubscribeProError, ValueError):
    """Raised when caller input violates a method contract"""
    pass


class ConfigurationError(SubscribeProError):
    """Raised when a configured entity class is unusable"""
    pass


class HttpError(SubscribeProError):
    """Raised by the transport on a non-success HTTP status"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


__all__ = [
    "SubscribeProError",
    "EntityInvalidDataError",
    "InvalidArgumentError",
    "ConfigurationError",
    "HttpError",
]
