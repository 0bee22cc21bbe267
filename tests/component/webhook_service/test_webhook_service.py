"""
Webhook Service Component Tests

Tests WebhookService against a mocked transport.
"""
import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from subscribepro.core.exceptions import HttpError
from subscribepro.services.webhook_service import Event, WebhookService

pytestmark = [pytest.mark.component, pytest.mark.asyncio]


def webhook_event_payload(**kwargs):
    payload = {
        "id": 812,
        "type": "customer.updated",
        "data": {"customer": {"id": 5, "email": "jane@example.com"}},
        "created": "2024-05-01T12:00:00+00:00",
    }
    payload.update(kwargs)
    return payload


# =============================================================================
# ping()
# =============================================================================

class TestPing:
    """Webhook test request"""

    async def test_ping_success(self, webhook_service, mock_transport):
        assert await webhook_service.ping() is True
        request = mock_transport.assert_request_made("POST", "/services/v2/webhook-test.json")
        assert request["data"] is None

    async def test_ping_http_error_returns_false(self, webhook_service, mock_transport):
        mock_transport.set_http_error(500)
        assert await webhook_service.ping() is False

    async def test_ping_other_errors_propagate(self, webhook_service, mock_transport):
        mock_transport.set_error(RuntimeError("connection reset"))
        with pytest.raises(RuntimeError):
            await webhook_service.ping()


# =============================================================================
# read_event()
# =============================================================================

class TestReadEvent:
    """Parsing of the inbound request"""

    async def test_reads_json_event(self, webhook_service, mock_transport):
        mock_transport.set_raw_request({"webhook_event": json.dumps(webhook_event_payload())})

        event = webhook_service.read_event()

        assert isinstance(event, Event)
        assert event.get_id() == 812
        assert event.get_type() == "customer.updated"
        assert event.get_event_data("customer")["email"] == "jane@example.com"
        mock_transport.assert_no_requests()

    async def test_event_attributes_equal_decoded_payload(self, webhook_service, mock_transport):
        decoded = webhook_event_payload(destinations=[{
            "id": 2,
            "status": None,
            "last_error_message": None,
            "endpoint": {"id": 3, "url": "https://shop.example.com/hooks"},
        }])
        mock_transport.set_raw_request({"webhook_event": json.dumps(decoded)})

        event = webhook_service.read_event()

        assert event.to_dict() == decoded

    async def test_already_decoded_event(self, webhook_service, mock_transport):
        mock_transport.set_raw_request({"webhook_event": webhook_event_payload(id=9)})
        assert webhook_service.read_event().get_id() == 9

    @pytest.mark.parametrize("raw_request", [
        {},
        {"webhook_event": ""},
        {"webhook_event": "{}"},
        {"webhook_event": "null"},
        {"other": "value"},
    ])
    async def test_no_event_returns_false(self, webhook_service, mock_transport, raw_request):
        mock_transport.set_raw_request(raw_request)
        assert webhook_service.read_event() is False

    async def test_undecodable_event_returns_false_and_warns(self, webhook_service, mock_transport, caplog):
        mock_transport.set_raw_request({"webhook_event": "{not json"})

        with caplog.at_level(logging.WARNING, logger="subscribepro"):
            assert webhook_service.read_event() is False

        assert "undecodable" in caplog.text


# =============================================================================
# load_event()
# =============================================================================

class TestLoadEvent:
    """Event lookup"""

    async def test_load_event(self, webhook_service, mock_transport):
        mock_transport.set_response(
            "GET", "/services/v2/webhook-events/812.json",
            {"webhook_event": webhook_event_payload(destinations=[{"id": 1, "status": "failed"}])},
        )

        event = await webhook_service.load_event(812)

        assert event.get_id() == 812
        assert event.destinations[0].status == "failed"
        assert event.is_dirty() is False

    async def test_load_event_http_error_propagates(self, webhook_service, mock_transport):
        mock_transport.set_http_error(404)
        with pytest.raises(HttpError) as exc_info:
            await webhook_service.load_event(1)
        assert exc_info.value.status_code == 404


class TestCreateWebhookService:
    """create_webhook_service()"""

    async def test_factory_wires_transport(self, mock_transport):
        from subscribepro.core.config import ClientConfig
        from subscribepro.services.webhook_service import create_webhook_service

        service = create_webhook_service(ClientConfig(), http_client=mock_transport)

        assert isinstance(service, WebhookService)
        assert service.http_client is mock_transport


class TestWebhookServiceWithAsyncMock:
    """Transport replaced by AsyncMock: exactly one awaited call per operation"""

    async def test_load_event_awaits_transport_once(self):
        transport = MagicMock()
        transport.get = AsyncMock(return_value={"webhook_event": webhook_event_payload(id=3)})
        service = WebhookService(http_client=transport)

        event = await service.load_event(3)

        assert event.get_id() == 3
        transport.get.assert_awaited_once_with("/services/v2/webhook-events/3.json")

    async def test_ping_awaits_transport_once(self):
        transport = MagicMock()
        transport.post = AsyncMock(side_effect=HttpError("HTTP 503", status_code=503))
        service = WebhookService(http_client=transport)

        assert await service.ping() is False
        transport.post.assert_awaited_once_with("/services/v2/webhook-test.json")
