"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── payment_profile_service/
    ├── webhook_service/
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.mocks import MockTransport
from subscribepro.services.payment_profile_service import PaymentProfileService
from subscribepro.services.webhook_service import WebhookService


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Transport Mock
# =============================================================================

@pytest.fixture
def mock_transport() -> MockTransport:
    """Mock HTTP transport"""
    return MockTransport()


# =============================================================================
# Services
# =============================================================================

@pytest.fixture
def payment_profile_service(mock_transport) -> PaymentProfileService:
    """PaymentProfileService wired to the mock transport"""
    return PaymentProfileService(http_client=mock_transport)


@pytest.fixture
def webhook_service(mock_transport) -> WebhookService:
    """WebhookService wired to the mock transport"""
    return WebhookService(http_client=mock_transport)
