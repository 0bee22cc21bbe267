"""
Webhook Event Factory

Builds webhook event entities of the configured class.
"""

from typing import Optional, Union

from ...core.config import ClientConfig
from ...core.data_factory import DataFactory
from .models import Event
from .protocols import EventProtocol


class EventFactory(DataFactory[Event]):
    """DataFactory bound to EventProtocol"""

    def __init__(self, instance_class: Union[str, type, None] = None):
        super().__init__(instance_class or Event, EventProtocol)

    @classmethod
    def from_config(cls, config: Optional[ClientConfig] = None) -> "EventFactory":
        config = config or ClientConfig.from_env()
        return cls(config.webhook_event_class)


__all__ = ["EventFactory"]
