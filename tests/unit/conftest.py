"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    ├── core/                      DataObject, DataFactory, config, HttpClient
    ├── payment_profile_service/   Projections, save strategy resolution
    └── webhook_service/           Event model

Usage:
    pytest tests/unit -v
    pytest tests/unit -m unit -v
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


@pytest.fixture
def address_data():
    """Complete billing address as the API returns it"""
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "street1": "1 Main St",
        "city": "Springfield",
        "region": "IL",
        "postcode": "62701",
        "country": "US",
    }
