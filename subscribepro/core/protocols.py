"""
Core Protocols (Interfaces)

Contracts shared by every service: the transport and the base entity
capability. NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Interface for the HTTP transport.

    Returns decoded response bodies and raises HttpError on a
    non-success status.
    """

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET request"""
        ...

    async def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST request with JSON body"""
        ...

    async def put(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """PUT request with JSON body"""
        ...

    def get_raw_request(self) -> Dict[str, Any]:
        """Body of the inbound request bound to this transport"""
        ...


@runtime_checkable
class DataObjectProtocol(Protocol):
    """
    Capability every entity class must provide.

    Only methods are listed so that the check works with issubclass()
    on a configured class.
    """

    def get_id(self) -> Optional[Any]:
        ...

    def is_new(self) -> bool:
        ...

    def is_dirty(self) -> bool:
        ...

    def get(self, key: str, default: Any = None) -> Any:
        ...

    def set(self, key: str, value: Any) -> Any:
        ...

    def import_data(self, data: Optional[Mapping[str, Any]]) -> Any:
        ...

    def to_dict(self) -> Dict[str, Any]:
        ...


__all__ = ["TransportProtocol", "DataObjectProtocol"]
