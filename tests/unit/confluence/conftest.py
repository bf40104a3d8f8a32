"""Shared fixtures for Confluence unit tests."""

from collections.abc import Callable
from unittest.mock import patch

import pytest
import requests
from fixtures.http_errors import BASE_URL, make_http_error

from mcp_confluence.confluence import LegacyConfluenceFetcher, V2ConfluenceFetcher
from mcp_confluence.confluence.config import ConfluenceConfig


@pytest.fixture
def http_error() -> Callable[..., requests.HTTPError]:
    """Factory for transport errors carrying a real response."""
    return make_http_error


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        "os.environ",
        {
            "CONFLUENCE_URL": BASE_URL,
            "CONFLUENCE_USERNAME": "test_user",
            "CONFLUENCE_API_TOKEN": "test_token",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def legacy_config():
    """Return a ConfluenceConfig for the legacy API."""
    return ConfluenceConfig(
        url=BASE_URL,
        auth_type="basic",
        username="test_user",
        api_token="test_token",
    )


@pytest.fixture
def v2_config():
    """Return a ConfluenceConfig for the typed v2 API."""
    return ConfluenceConfig(
        url=BASE_URL,
        auth_type="basic",
        username="test_user",
        api_token="test_token",
        api_surface="v2",
    )


@pytest.fixture
def legacy_fetcher(legacy_config):
    """A LegacyConfluenceFetcher whose transport is a mock."""
    with patch("mcp_confluence.confluence.legacy.client.Confluence") as mock_cls:
        mock_cls.return_value.url = BASE_URL
        yield LegacyConfluenceFetcher(legacy_config)


@pytest.fixture
def v2_fetcher(v2_config):
    """A V2ConfluenceFetcher whose transport is a mock."""
    with patch("mcp_confluence.confluence.v2.client.Confluence") as mock_cls:
        mock_cls.return_value.url = BASE_URL
        yield V2ConfluenceFetcher(v2_config)
