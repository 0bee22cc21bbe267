"""
Webhook Service

Webhook test ping, inbound event parsing and event lookup.
"""

import json
import logging
from typing import Any, Optional, Union

from ...core.base_service import BaseService
from ...core.exceptions import HttpError
from ...core.protocols import TransportProtocol
from .event_factory import EventFactory
from .models import Event

logger = logging.getLogger(__name__)


class WebhookService(BaseService):
    """SubscribePro webhook operations"""

    NAME = "webhook"

    API_NAME_WEBHOOK_EVENT = "webhook_event"

    def __init__(
        self,
        http_client: TransportProtocol,
        data_factory: Optional[EventFactory] = None,
    ):
        super().__init__(http_client, data_factory or EventFactory())

    async def ping(self) -> bool:
        """
        Ask SubscribePro to send a test webhook

        Returns:
            True if the API accepted the request, False on an HTTP error
        """
        logger.info("Sending webhook test ping")
        try:
            await self.http_client.post("/services/v2/webhook-test.json")
        except HttpError as e:
            logger.warning(f"Webhook test ping failed: {e}")
            return False
        return True

    def read_event(self) -> Union[Event, bool]:
        """
        Parse the webhook event from the inbound request bound to the transport

        Returns:
            The event, or False when the request carries no usable event
        """
        raw_event = self.http_client.get_raw_request().get(self.API_NAME_WEBHOOK_EVENT)
        if not raw_event:
            return False

        event_data: Any = raw_event
        if isinstance(raw_event, (str, bytes)):
            try:
                event_data = json.loads(raw_event)
            except ValueError as e:
                logger.warning(f"Discarding undecodable webhook event: {e}")
                return False

        if not event_data:
            return False
        if not isinstance(event_data, dict):
            logger.warning(f"Discarding webhook event that is not an object: {type(event_data).__name__}")
            return False
        return self.data_factory.create(event_data)

    async def load_event(self, event_id: Any) -> Event:
        logger.info(f"Loading webhook event {event_id}")
        response = await self.http_client.get(f"/services/v2/webhook-events/{event_id}.json")
        return self.retrieve_item(response, self.API_NAME_WEBHOOK_EVENT)


__all__ = ["WebhookService"]
