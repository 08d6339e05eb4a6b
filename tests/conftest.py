"""
Shared test configuration and fixtures.
"""

from unittest.mock import Mock

import httpx
import pytest

from exchangerates.config.settings import Settings
from exchangerates.infrastructure.providers import ExchangeRatesAPI
from fixtures.api_responses import RATES_RESPONSES

TEST_API_KEY = "test_api_key_12345"
TEST_URL = "https://api.exchangerate.host/latest"


def build_response(json_data=None, status_code=200, content=None, headers=None, url=TEST_URL):
    """Real httpx.Response bound to a request, so raise_for_status() works."""
    request = httpx.Request("GET", url)
    if content is not None:
        return httpx.Response(status_code, content=content, headers=headers, request=request)
    return httpx.Response(status_code, json=json_data, headers=headers, request=request)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def mock_http_client():
    """Mock httpx.Client answering with the single rate payload by default"""
    client = Mock(spec=httpx.Client)
    client.get.return_value = build_response(RATES_RESPONSES["single_rate_success"])
    return client


@pytest.fixture
def api(mock_http_client, settings):
    return ExchangeRatesAPI(access_key=TEST_API_KEY, client=mock_http_client, settings=settings)


@pytest.fixture
def rates_responses():
    return RATES_RESPONSES


def pytest_configure(config):
    """Configure custom pytest markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "network: Tests requiring network access")
