"""Tests for the main MCP server: tool filtering, health check and lifespan."""

import json
from unittest.mock import MagicMock, patch

import pytest
from fastmcp import Client
from fastmcp.client import FastMCPTransport
from starlette.requests import Request

from mcp_confluence.exceptions import ConfluenceConnectionError
from mcp_confluence.servers.context import MainAppContext
from mcp_confluence.servers.main import health_check, main_lifespan, main_mcp

ALL_TOOLS = {
    "confluence_list_spaces",
    "confluence_get_space",
    "confluence_list_pages",
    "confluence_find_page",
    "confluence_get_page",
    "confluence_get_page_content",
    "confluence_create_page",
    "confluence_update_page",
    "confluence_search",
    "confluence_get_labels",
    "confluence_add_label",
    "confluence_remove_label",
}
WRITE_TOOLS = {
    "confluence_create_page",
    "confluence_update_page",
    "confluence_add_label",
    "confluence_remove_label",
}


async def _tool_names(test_mcp) -> set[str]:
    async with Client(transport=FastMCPTransport(test_mcp)) as client:
        return {tool.name for tool in await client.list_tools()}


@pytest.mark.anyio
async def test_all_tools_listed(make_test_mcp):
    assert await _tool_names(make_test_mcp()) == ALL_TOOLS


@pytest.mark.anyio
async def test_read_only_hides_write_tools(make_test_mcp):
    assert await _tool_names(make_test_mcp(read_only=True)) == ALL_TOOLS - WRITE_TOOLS


@pytest.mark.anyio
async def test_enabled_tools_filter(make_test_mcp):
    test_mcp = make_test_mcp(
        enabled_tools=["confluence_search", "confluence_add_label"], read_only=True
    )

    assert await _tool_names(test_mcp) == {"confluence_search"}


@pytest.mark.anyio
async def test_health_check():
    response = await health_check(MagicMock(spec=Request))

    assert response.status_code == 200
    assert json.loads(response.body) == {"status": "ok"}


@pytest.mark.anyio
async def test_lifespan_builds_context(clean_confluence_env, monkeypatch):
    monkeypatch.setenv("CONFLUENCE_URL", "https://example.atlassian.net/wiki")
    monkeypatch.setenv("CONFLUENCE_USERNAME", "test_user")
    monkeypatch.setenv("CONFLUENCE_API_TOKEN", "test_token")
    monkeypatch.setenv("READ_ONLY_MODE", "true")
    monkeypatch.setenv("ENABLED_TOOLS", "confluence_search")
    fetcher = MagicMock()

    with patch(
        "mcp_confluence.servers.main.create_confluence_fetcher", return_value=fetcher
    ):
        async with main_lifespan(main_mcp) as state:
            context = state["app_lifespan_context"]

    assert isinstance(context, MainAppContext)
    assert context.confluence_fetcher is fetcher
    assert context.read_only is True
    assert context.enabled_tools == ["confluence_search"]
    fetcher.verify_connection.assert_called_once_with()


@pytest.mark.anyio
async def test_lifespan_fails_on_bad_connection(clean_confluence_env, monkeypatch):
    monkeypatch.setenv("CONFLUENCE_URL", "https://example.atlassian.net/wiki")
    monkeypatch.setenv("CONFLUENCE_USERNAME", "test_user")
    monkeypatch.setenv("CONFLUENCE_API_TOKEN", "test_token")
    fetcher = MagicMock()
    fetcher.verify_connection.side_effect = ConfluenceConnectionError(
        "Authentication failed: Invalid API token or email", 401
    )

    with patch(
        "mcp_confluence.servers.main.create_confluence_fetcher", return_value=fetcher
    ):
        with pytest.raises(ConfluenceConnectionError):
            async with main_lifespan(main_mcp):
                pass


@pytest.mark.anyio
async def test_lifespan_requires_configuration(clean_confluence_env):
    with pytest.raises(ValueError):
        async with main_lifespan(main_mcp):
            pass
