"""
SubscribePro HTTP Client

Async transport for the SubscribePro REST API.

Handles:
1. Base URL and timeout from ClientConfig
2. HTTP basic auth with the API client id / secret
3. JSON request bodies and decoded JSON responses
4. Mapping non-success statuses to HttpError
5. Holding the inbound webhook request body for WebhookService.read_event()

Usage:
    async with HttpClient(ClientConfig.from_env()) as http_client:
        data = await http_client.get("/services/v2/vault/paymentprofiles/42.json")
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import parse_qsl

import httpx

from .config import ClientConfig
from .exceptions import HttpError

logger = logging.getLogger(__name__)

USER_AGENT = "subscribepro-python-sdk"


class HttpClient:
    """Async HTTP transport for SubscribePro API services"""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize HTTP client

        Args:
            config: Client configuration, loaded from environment if not provided
            client: Pre-built httpx.AsyncClient (e.g. with a MockTransport)
        """
        self.config = config or ClientConfig.from_env()
        self.base_url = self.config.base_url.rstrip('/')

        if client is None:
            auth = None
            if self.config.has_credentials:
                auth = httpx.BasicAuth(self.config.client_id, self.config.client_secret)
            else:
                logger.warning("SubscribePro client credentials are not configured")
            client = httpx.AsyncClient(
                timeout=self.config.timeout,
                headers=self._build_default_headers(),
                auth=auth,
            )

        self.client = client
        self._raw_request: Dict[str, Any] = {}

        logger.debug(f"Initialized SubscribePro HTTP client: {self.base_url}")

    def _build_default_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # ========================================
    # HTTP methods
    # ========================================

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET request, returns the decoded body"""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST request with JSON body, returns the decoded body"""
        return await self._request("POST", path, json_body=data)

    async def put(self, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """PUT request with JSON body, returns the decoded body"""
        return await self._request("PUT", path, json_body=data)

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")
        response = await self.client.request(method, url, params=params or None, json=json_body)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = self._decode_error_body(response)
            logger.error(f"SubscribePro API {method} {path} failed: {response.status_code}")
            raise HttpError(
                f"HTTP {response.status_code} for {method} {path}",
                status_code=response.status_code,
                body=body,
            ) from e

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise HttpError(
                f"Unable to decode response for {method} {path}",
                status_code=response.status_code,
                body=response.text,
            ) from e

    @staticmethod
    def _decode_error_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    # ========================================
    # Inbound request (webhooks)
    # ========================================

    def set_raw_request(self, body: Union[Mapping[str, Any], str, bytes, None]) -> None:
        """
        Bind the body of an inbound request (e.g. a webhook POST)

        Accepts an already parsed mapping, a JSON object string, or
        application/x-www-form-urlencoded data.
        """
        if body is None:
            self._raw_request = {}
            return
        if isinstance(body, Mapping):
            self._raw_request = dict(body)
            return
        if isinstance(body, bytes):
            body = body.decode("utf-8")

        text = body.strip()
        if text.startswith("{"):
            try:
                self._raw_request = json.loads(text)
            except ValueError as e:
                logger.warning(f"Discarding undecodable inbound request body: {e}")
                self._raw_request = {}
        else:
            self._raw_request = dict(parse_qsl(text, keep_blank_values=True))

    def get_raw_request(self) -> Dict[str, Any]:
        """Body of the bound inbound request, empty if nothing is bound"""
        return dict(self._raw_request)


__all__ = ["HttpClient"]
