"""Fixtures for the FastMCP server tests."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from unittest.mock import MagicMock

import pytest
from fastmcp import FastMCP
from fixtures.confluence_mocks import (
    MOCK_CQL_SEARCH_RESPONSE,
    MOCK_LABELS_RESPONSE,
    MOCK_PAGE_RESPONSE,
    MOCK_SPACES_RESPONSE,
)

from mcp_confluence.confluence import LegacyConfluenceFetcher
from mcp_confluence.confluence.config import ConfluenceConfig
from mcp_confluence.models.confluence import (
    ConfluenceLabel,
    ConfluencePage,
    ConfluencePaginatedResponse,
    ConfluenceSearchResult,
    ConfluenceSpace,
)
from mcp_confluence.servers.confluence import confluence_mcp
from mcp_confluence.servers.context import MainAppContext
from mcp_confluence.servers.main import ConfluenceMCP


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def mock_confluence_fetcher():
    """A fetcher mock answering every operation with real models."""
    fetcher = MagicMock(spec=LegacyConfluenceFetcher)
    page = ConfluencePage.from_api_response(MOCK_PAGE_RESPONSE)

    fetcher.list_spaces.return_value = ConfluencePaginatedResponse[
        ConfluenceSpace
    ].from_api_response(MOCK_SPACES_RESPONSE)
    fetcher.get_space.return_value = ConfluenceSpace.from_api_response(
        MOCK_SPACES_RESPONSE["results"][0]
    )
    fetcher.list_pages.return_value = ConfluencePaginatedResponse[
        ConfluencePage
    ].from_api_response({"results": [MOCK_PAGE_RESPONSE]})
    fetcher.find_page_by_title.return_value = [
        ConfluencePage.from_api_response(MOCK_PAGE_RESPONSE, include_body=False)
    ]
    fetcher.get_page.return_value = page
    fetcher.get_page_content.return_value = page.content
    fetcher.create_page.return_value = page
    fetcher.update_page.return_value = page
    fetcher.search_content.return_value = ConfluenceSearchResult.from_api_response(
        MOCK_CQL_SEARCH_RESPONSE,
        domain="example.atlassian.net",
        api_base="https://example.atlassian.net/wiki/rest/api",
        cql_query='text ~ "budget"',
    )
    fetcher.get_page_labels.return_value = ConfluencePaginatedResponse[
        ConfluenceLabel
    ].from_api_response(MOCK_LABELS_RESPONSE)
    fetcher.add_page_label.return_value = ConfluenceLabel(id="1", name="urgent")
    fetcher.remove_page_label.return_value = None
    return fetcher


@pytest.fixture
def confluence_config():
    return ConfluenceConfig(
        url="https://example.atlassian.net/wiki",
        auth_type="basic",
        username="test_user",
        api_token="test_token",
    )


@pytest.fixture
def make_test_mcp(mock_confluence_fetcher, confluence_config):
    """Factory for a server whose lifespan provides the mocked fetcher."""

    def _make(
        read_only: bool = False,
        enabled_tools: list[str] | None = None,
        with_fetcher: bool = True,
    ) -> ConfluenceMCP:
        @asynccontextmanager
        async def test_lifespan(app: FastMCP) -> AsyncGenerator[dict, None]:
            yield {
                "app_lifespan_context": MainAppContext(
                    confluence_fetcher=mock_confluence_fetcher if with_fetcher else None,
                    confluence_config=confluence_config,
                    read_only=read_only,
                    enabled_tools=enabled_tools,
                )
            }

        test_mcp = ConfluenceMCP("TestConfluence", lifespan=test_lifespan)
        test_mcp.mount("confluence", confluence_mcp)
        return test_mcp

    return _make
