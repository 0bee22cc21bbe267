"""
Webhook Data Models

Webhook event entity plus the delivery destination and endpoint records
embedded in it.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ...core.data_object import DataObject


class Endpoint(BaseModel):
    """Receiver URL registered for webhook delivery"""
    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    id: Optional[Union[int, str]] = None
    status: Optional[str] = None
    url: Optional[str] = None
    all_events: Optional[bool] = None
    events: List[str] = Field(default_factory=list)
    created: Optional[str] = None
    updated: Optional[str] = None


class Destination(BaseModel):
    """Delivery attempt state of one event towards one endpoint"""
    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    id: Optional[Union[int, str]] = None
    status: Optional[str] = None
    retry_count: Optional[int] = None
    last_attempt: Optional[str] = None
    last_error_message: Optional[str] = None
    endpoint: Optional[Endpoint] = None


class Event(DataObject):
    """Webhook event sent by SubscribePro"""

    TYPE = "type"
    DATA = "data"
    DESTINATIONS = "destinations"
    CREATED = "created"
    UPDATED = "updated"

    @property
    def type(self) -> Optional[str]:
        return self.get(self.TYPE)

    @property
    def data(self) -> Dict[str, Any]:
        return self.get(self.DATA, {})

    @property
    def destinations(self) -> List[Destination]:
        return self.get(self.DESTINATIONS, [])

    def get_type(self) -> Optional[str]:
        return self.type

    def get_event_data(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Event payload, or one key of it"""
        if key is None:
            return self.data
        return self.data.get(key, default)

    def _normalize(self, key: str, value: Any) -> Any:
        if key == self.DESTINATIONS and isinstance(value, list):
            return [
                Destination.model_validate(item) if isinstance(item, dict) else item
                for item in value
            ]
        return value


__all__ = ["Endpoint", "Destination", "Event"]
