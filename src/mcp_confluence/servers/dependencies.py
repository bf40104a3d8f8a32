"""Dependency provider for the ConfluenceFetcher used by tool functions."""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_confluence.confluence import ConfluenceFetcher
from mcp_confluence.servers.context import MainAppContext

logger = logging.getLogger("mcp-confluence.servers.dependencies")


async def get_confluence_fetcher(ctx: Context) -> ConfluenceFetcher:
    """Returns the ConfluenceFetcher built by the server lifespan.

    Args:
        ctx: The FastMCP context.

    Returns:
        The shared ConfluenceFetcher instance.

    Raises:
        ValueError: If the lifespan did not provide a fetcher.
    """
    lifespan_ctx_dict = ctx.request_context.lifespan_context  # type: ignore
    app_lifespan_ctx: MainAppContext | None = (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )
    if app_lifespan_ctx is None or app_lifespan_ctx.confluence_fetcher is None:
        logger.error("Confluence fetcher is not available in the lifespan context.")
        raise ValueError(
            "Confluence client (fetcher) not available. Ensure server is configured correctly."
        )
    return app_lifespan_ctx.confluence_fetcher
