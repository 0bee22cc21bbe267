"""
Transport Mock for Component Testing

Stands in for subscribepro.core.http_client.HttpClient. Records every call
and returns canned decoded bodies keyed by method and path.
"""
import fnmatch
from typing import Any, Dict, List, Optional

from subscribepro.core.exceptions import HttpError


class MockTransport:
    """Mock for HttpClient (satisfies TransportProtocol)"""

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self._responses: Dict[str, Any] = {}
        self._default_response: Dict[str, Any] = {}
        self._should_raise: Optional[Exception] = None
        self._raw_request: Dict[str, Any] = {}

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Mock GET request"""
        return self._make_request("GET", path, params=params)

    async def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Mock POST request"""
        return self._make_request("POST", path, data=data)

    async def put(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Mock PUT request"""
        return self._make_request("PUT", path, data=data)

    def get_raw_request(self) -> Dict[str, Any]:
        return dict(self._raw_request)

    def _make_request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        """Internal request handler"""
        self.requests.append({
            "method": method,
            "path": path,
            **kwargs
        })

        if self._should_raise:
            raise self._should_raise

        key = f"{method}:{path}"
        if key in self._responses:
            return self._responses[key]

        for pattern, response in self._responses.items():
            if "*" in pattern:
                method_pattern, path_pattern = pattern.split(":", 1)
                if method_pattern == method and fnmatch.fnmatch(path, path_pattern):
                    return response

        return self._default_response

    # Test helper methods

    def set_response(self, method: str, path: str, json_data: Optional[Dict[str, Any]] = None):
        """Set decoded body for specific method and path (fnmatch patterns allowed)"""
        self._responses[f"{method}:{path}"] = json_data or {}

    def set_default_response(self, json_data: Optional[Dict[str, Any]] = None):
        self._default_response = json_data or {}

    def set_error(self, error: Exception):
        """Raise `error` on every following request"""
        self._should_raise = error

    def set_http_error(self, status_code: int = 500, body: Any = None):
        self.set_error(HttpError(f"HTTP {status_code}", status_code=status_code, body=body))

    def clear_error(self):
        self._should_raise = None

    def set_raw_request(self, body: Optional[Dict[str, Any]]):
        """Bind an inbound webhook request body"""
        self._raw_request = dict(body or {})

    def get_requests(self, method: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get recorded requests, optionally filtered by method"""
        if method:
            return [r for r in self.requests if r["method"] == method]
        return self.requests

    def get_last_request(self) -> Optional[Dict[str, Any]]:
        return self.requests[-1] if self.requests else None

    def clear_requests(self):
        self.requests.clear()

    def assert_request_made(self, method: str, path_pattern: str) -> Dict[str, Any]:
        """Assert that a request was made, returns it"""
        for req in self.requests:
            if req["method"] == method and fnmatch.fnmatch(req["path"], path_pattern):
                return req
        raise AssertionError(
            f"No {method} request matching '{path_pattern}' was made. Requests: {self.requests}"
        )

    def assert_no_requests(self):
        assert not self.requests, f"Expected no requests, got: {self.requests}"
