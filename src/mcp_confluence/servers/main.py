"""Main FastMCP server setup for the Confluence integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from fastmcp.tools import Tool as FastMCPTool
from mcp.types import Tool as MCPTool
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_confluence.confluence import create_confluence_fetcher
from mcp_confluence.confluence.config import ConfluenceConfig
from mcp_confluence.utils.environment import (
    get_enabled_tools,
    is_read_only_mode,
    should_include_tool,
)

from .confluence import confluence_mcp
from .context import MainAppContext

logger = logging.getLogger("mcp-confluence.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    """Build the shared fetcher once and check the connection before serving.

    Raises:
        ValueError: If the Confluence configuration is incomplete
        ConfluenceConnectionError: If the startup connection check fails
    """
    logger.info("Main Confluence MCP server lifespan starting...")
    read_only = is_read_only_mode()
    enabled_tools = get_enabled_tools()

    confluence_config = ConfluenceConfig.from_env()
    confluence_fetcher = create_confluence_fetcher(confluence_config)
    confluence_fetcher.verify_connection()

    app_context = MainAppContext(
        confluence_fetcher=confluence_fetcher,
        confluence_config=confluence_config,
        read_only=read_only,
        enabled_tools=enabled_tools,
    )
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")
    yield {"app_lifespan_context": app_context}
    logger.info("Main Confluence MCP server lifespan shutting down.")


class ConfluenceMCP(FastMCP[MainAppContext]):
    """Custom FastMCP server class for Confluence with tool filtering."""

    async def _mcp_list_tools(self) -> list[MCPTool]:
        # Filter tools based on enabled_tools and read_only mode from the lifespan context.
        req_context = self._mcp_server.request_context
        if req_context is None or req_context.lifespan_context is None:
            logger.warning(
                "Lifespan context not available during _mcp_list_tools call."
            )
            return []

        lifespan_ctx_dict = req_context.lifespan_context
        app_lifespan_state: MainAppContext | None = (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )
        if app_lifespan_state is None:
            logger.warning(
                "Application context unavailable; no Confluence tools are listed."
            )
            return []

        read_only = app_lifespan_state.read_only
        enabled_tools_filter = app_lifespan_state.enabled_tools
        logger.debug(
            f"_mcp_list_tools: read_only={read_only}, enabled_tools_filter={enabled_tools_filter}"
        )

        all_tools: dict[str, FastMCPTool] = await self.get_tools()
        logger.debug(
            f"Aggregated {len(all_tools)} tools before filtering: {list(all_tools.keys())}"
        )

        filtered_tools: list[MCPTool] = []
        for registered_name, tool_obj in all_tools.items():
            if not should_include_tool(registered_name, enabled_tools_filter):
                logger.debug(f"Excluding tool '{registered_name}' (not enabled)")
                continue

            if read_only and "write" in tool_obj.tags:
                logger.debug(
                    f"Excluding tool '{registered_name}' due to read-only mode and 'write' tag"
                )
                continue

            filtered_tools.append(tool_obj.to_mcp_tool(name=registered_name))

        logger.debug(
            f"_mcp_list_tools: Total tools after filtering: {len(filtered_tools)}"
        )
        return filtered_tools


main_mcp = ConfluenceMCP(name="Confluence MCP", lifespan=main_lifespan)
main_mcp.mount("confluence", confluence_mcp)


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)


logger.info("Added /healthz endpoint for health checks")
