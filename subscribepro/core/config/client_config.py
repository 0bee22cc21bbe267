#!/usr/bin/env python3
"""API client configuration

Connection settings for the SubscribePro REST API plus the entity classes
each service builds. Entity classes are given as dotted import paths so they
can be swapped from the environment without code changes.
"""
import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.subscribepro.com"
DEFAULT_PAYMENT_PROFILE_CLASS = "subscribepro.services.payment_profile_service.models.PaymentProfile"
DEFAULT_WEBHOOK_EVENT_CLASS = "subscribepro.services.webhook_service.models.Event"


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class ClientConfig:
    """SubscribePro API client settings"""

    # ===========================================
    # API connection
    # ===========================================
    base_url: str = DEFAULT_BASE_URL
    client_id: str = ""
    client_secret: str = ""
    timeout: float = 30.0

    # ===========================================
    # Entity classes (dotted import paths)
    # ===========================================
    payment_profile_class: str = DEFAULT_PAYMENT_PROFILE_CLASS
    webhook_event_class: str = DEFAULT_WEBHOOK_EVENT_CLASS

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.client_secret)

    @classmethod
    def from_env(cls) -> 'ClientConfig':
        """Load client configuration from environment variables"""
        return cls(
            base_url=os.getenv("SUBSCRIBEPRO_BASE_URL", DEFAULT_BASE_URL).rstrip('/'),
            client_id=os.getenv("SUBSCRIBEPRO_CLIENT_ID", ""),
            client_secret=os.getenv("SUBSCRIBEPRO_CLIENT_SECRET", ""),
            timeout=_float(os.getenv("SUBSCRIBEPRO_TIMEOUT", ""), 30.0),
            payment_profile_class=os.getenv("SUBSCRIBEPRO_PAYMENT_PROFILE_CLASS", DEFAULT_PAYMENT_PROFILE_CLASS),
            webhook_event_class=os.getenv("SUBSCRIBEPRO_WEBHOOK_EVENT_CLASS", DEFAULT_WEBHOOK_EVENT_CLASS),
        )
