"""
Webhook Service - SubscribePro webhook events

Test pings, parsing of inbound webhook requests and event lookup.
"""

from .event_factory import EventFactory
from .factory import create_webhook_service
from .models import Destination, Endpoint, Event
from .protocols import EventProtocol
from .webhook_service import WebhookService

__all__ = [
    "Destination",
    "Endpoint",
    "Event",
    "EventFactory",
    "EventProtocol",
    "WebhookService",
    "create_webhook_service",
]
