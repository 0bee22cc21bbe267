"""
Base Service

Shared plumbing for the API services: holds the transport and entity factory
and turns decoded response envelopes into entities.
"""

import logging
from typing import Any, Dict, List, Optional

from .data_factory import DataFactory
from .protocols import TransportProtocol

logger = logging.getLogger(__name__)


class BaseService:
    """
    Base class for SubscribePro API services

    Subclasses set NAME and call retrieve_item()/retrieve_items() on the
    decoded responses they get back from the transport.
    """

    NAME: str = None

    def __init__(self, http_client: TransportProtocol, data_factory: DataFactory):
        if not self.NAME:
            raise ValueError(f"{self.__class__.__name__} must define 'NAME'")
        self.http_client = http_client
        self.data_factory = data_factory

    def retrieve_item(
        self,
        response: Optional[Dict[str, Any]],
        entity_name: str,
        item: Any = None,
    ) -> Any:
        """
        Pull a single entity out of a response envelope

        Args:
            response: Decoded response body
            entity_name: Envelope key, e.g. "payment_profile"
            item: Existing entity to hydrate in place; a new one is built if None

        Returns:
            `item` itself when given, otherwise a new entity
        """
        item_data = (response or {}).get(entity_name) or {}
        if item is not None:
            return item.import_data(item_data)
        return self.data_factory.create(item_data)

    def retrieve_items(self, response: Optional[Dict[str, Any]], entities_name: str) -> List[Any]:
        """Build new entities from a list envelope"""
        items_data = (response or {}).get(entities_name) or []
        return [self.data_factory.create(item_data) for item_data in items_data]


__all__ = ["BaseService"]
