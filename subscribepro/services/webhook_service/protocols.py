"""
Webhook Service Protocols (Interfaces)

Capability a configured webhook event class must provide.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Optional, Protocol, runtime_checkable

from ...core.protocols import DataObjectProtocol


@runtime_checkable
class EventProtocol(DataObjectProtocol, Protocol):
    """Interface for webhook event entities"""

    def get_type(self) -> Optional[str]:
        ...

    def get_event_data(self, key: Optional[str] = None, default: Any = None) -> Any:
        ...


__all__ = ["EventProtocol"]
