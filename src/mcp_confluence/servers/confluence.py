"""Confluence FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_confluence.confluence.constants import DEFAULT_LIMIT
from mcp_confluence.exceptions import ConfluenceError
from mcp_confluence.servers.dependencies import get_confluence_fetcher
from mcp_confluence.utils.decorators import check_write_access

logger = logging.getLogger("mcp-confluence.servers.confluence")

confluence_mcp = FastMCP(
    name="Confluence MCP Service",
    instructions="Provides tools for reading and editing Atlassian Confluence spaces, pages and labels.",
)

PAGE_ID_DESCRIPTION = (
    "Confluence page ID (numeric ID, can be found in the page URL). "
    "For example, in the URL 'https://example.atlassian.net/wiki/spaces/TEAM/pages/123456789/Page+Title', "
    "the page ID is '123456789'."
)

CURSOR_START_DESCRIPTION = (
    "Starting index for pagination (0-based). Only the legacy API honours it; "
    "the v2 API pages with cursors, so follow the 'next' URL in the "
    "result's links to get further pages"
)


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _error_json(error: ConfluenceError) -> str:
    """Render a classified failure so the caller can branch on its code."""
    logger.info(f"Tool call failed with {error.code.value}: {error.message}")
    return _to_json(
        {
            "error": error.message,
            "code": error.code.value,
            "retryable": error.retryable,
        }
    )


@confluence_mcp.tool(tags={"confluence", "read"})
async def list_spaces(
    ctx: Context,
    limit: Annotated[
        int,
        Field(
            description="Maximum number of spaces to return (1-100)",
            default=DEFAULT_LIMIT,
            ge=1,
            le=100,
        ),
    ] = DEFAULT_LIMIT,
    start: Annotated[
        int,
        Field(description=CURSOR_START_DESCRIPTION, default=0, ge=0),
    ] = 0,
) -> str:
    """List the Confluence spaces visible to the configured user.

    Args:
        ctx: The FastMCP context.
        limit: Maximum number of spaces to return.
        start: Starting index for pagination.

    Returns:
        JSON string with the spaces, pagination links and result size.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        spaces = confluence_fetcher.list_spaces(limit=limit, start=start)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json(spaces.to_simplified_dict())


@confluence_mcp.tool(tags={"confluence", "read"})
async def get_space(
    ctx: Context,
    space_key: Annotated[
        str,
        Field(
            description="The space key (e.g. 'DEV', 'TEAM') or, on the v2 API, the numeric space ID"
        ),
    ],
) -> str:
    """Get details of a single Confluence space.

    Args:
        ctx: The FastMCP context.
        space_key: The space key or numeric ID.

    Returns:
        JSON string representing the space.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        space = confluence_fetcher.get_space(space_key)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json(space.to_simplified_dict())


@confluence_mcp.tool(tags={"confluence", "read"})
async def list_pages(
    ctx: Context,
    space_key: Annotated[
        str, Field(description="The key of the space to list pages from (e.g. 'DEV')")
    ],
    limit: Annotated[
        int,
        Field(
            description="Maximum number of pages to return (1-100)",
            default=DEFAULT_LIMIT,
            ge=1,
            le=100,
        ),
    ] = DEFAULT_LIMIT,
    start: Annotated[
        int,
        Field(description=CURSOR_START_DESCRIPTION, default=0, ge=0),
    ] = 0,
    title: Annotated[
        str,
        Field(description="(Optional) Only return pages whose title matches", default=""),
    ] = "",
) -> str:
    """List the pages of a Confluence space, including their storage content.

    Args:
        ctx: The FastMCP context.
        space_key: The key of the space.
        limit: Maximum number of pages to return.
        start: Starting index for pagination.
        title: Optional title filter.

    Returns:
        JSON string with the pages, pagination links and result size.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        pages = confluence_fetcher.list_pages(
            space_key, limit=limit, start=start, title=title or None
        )
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json(pages.to_simplified_dict())


@confluence_mcp.tool(tags={"confluence", "read"})
async def find_page(
    ctx: Context,
    title: Annotated[str, Field(description="Text contained in the page title")],
    space_key: Annotated[
        str,
        Field(description="(Optional) Restrict the search to this space", default=""),
    ] = "",
) -> str:
    """Find up to 10 Confluence pages by title.

    Args:
        ctx: The FastMCP context.
        title: Title text to match.
        space_key: Optional space key to search in.

    Returns:
        JSON string representing a list of pages (without content).
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        pages = confluence_fetcher.find_page_by_title(title, space_key=space_key or None)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json([page.to_simplified_dict() for page in pages])


@confluence_mcp.tool(tags={"confluence", "read"})
async def get_page(
    ctx: Context,
    page_id: Annotated[str, Field(description=PAGE_ID_DESCRIPTION)],
) -> str:
    """Get a Confluence page with its metadata, version and storage content.

    Args:
        ctx: The FastMCP context.
        page_id: Confluence page ID.

    Returns:
        JSON string representing the page.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        page = confluence_fetcher.get_page(page_id)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json(page.to_simplified_dict())


@confluence_mcp.tool(tags={"confluence", "read"})
async def get_page_content(
    ctx: Context,
    page_id: Annotated[str, Field(description=PAGE_ID_DESCRIPTION)],
) -> str:
    """Get only the raw storage-format content of a Confluence page.

    Args:
        ctx: The FastMCP context.
        page_id: Confluence page ID.

    Returns:
        JSON string with the page ID and its storage markup.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        content = confluence_fetcher.get_page_content(page_id)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json({"id": page_id, "representation": "storage", "content": content})


@confluence_mcp.tool(tags={"confluence", "write"})
@check_write_access
async def create_page(
    ctx: Context,
    space_key: Annotated[
        str,
        Field(
            description="The key of the space to create the page in (usually a short uppercase code like 'DEV', 'TEAM', or 'DOC')"
        ),
    ],
    title: Annotated[str, Field(description="The title of the page")],
    content: Annotated[
        str,
        Field(description="The content of the page in Confluence storage format (XHTML)"),
    ],
    parent_id: Annotated[
        str,
        Field(
            description="(Optional) parent page ID. If provided, this page will be created as a child of the specified page",
            default="",
        ),
    ] = "",
) -> str:
    """Create a new Confluence page.

    Args:
        ctx: The FastMCP context.
        space_key: The key of the space.
        title: The title of the page.
        content: The content in storage format.
        parent_id: Optional parent page ID.

    Returns:
        JSON string representing the created page object.

    Raises:
        ValueError: If in read-only mode or Confluence client is unavailable.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        page = confluence_fetcher.create_page(
            space_key, title, content, parent_id=parent_id or None
        )
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json(page.to_simplified_dict())


@confluence_mcp.tool(tags={"confluence", "write"})
@check_write_access
async def update_page(
    ctx: Context,
    page_id: Annotated[str, Field(description=PAGE_ID_DESCRIPTION)],
    title: Annotated[str, Field(description="The new page title")],
    content: Annotated[
        str,
        Field(description="The new content in Confluence storage format (XHTML)"),
    ],
    version: Annotated[
        int,
        Field(
            description=(
                "The version number you last read (from get_page). The page is saved as "
                "version + 1; if someone else saved in between, a retryable "
                "VERSION_CONFLICT error is returned"
            ),
            ge=1,
        ),
    ],
) -> str:
    """Update an existing Confluence page.

    Args:
        ctx: The FastMCP context.
        page_id: The ID of the page to update.
        title: The new page title.
        content: The new content in storage format.
        version: The current version number of the page.

    Returns:
        JSON string representing the updated page object.

    Raises:
        ValueError: If in read-only mode or Confluence client is unavailable.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        page = confluence_fetcher.update_page(page_id, title, content, version)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json(page.to_simplified_dict())


@confluence_mcp.tool(tags={"confluence", "read"})
async def search(
    ctx: Context,
    query: Annotated[
        str,
        Field(
            description=(
                "Search query - either simple text (e.g. 'project documentation') or a CQL "
                "query string. Queries containing a 'type =' clause are sent as CQL unchanged; "
                "anything else is searched as text ~ \"<query>\". Examples of CQL:\n"
                "- Pages in a space: 'type = page AND space = DEV'\n"
                "- By title: 'type = page AND title ~ \"Meeting Notes\"'\n"
                "- By label: 'type = page AND label = documentation'\n"
                "- Recently modified: 'type = page AND lastModified > startOfMonth(\"-1M\")'"
            )
        ),
    ],
    limit: Annotated[
        int,
        Field(
            description="Maximum number of results (1-50)",
            default=DEFAULT_LIMIT,
            ge=1,
            le=50,
        ),
    ] = DEFAULT_LIMIT,
    start: Annotated[
        int,
        Field(description="Starting index for pagination (0-based)", default=0, ge=0),
    ] = 0,
) -> str:
    """Search Confluence content using simple terms or CQL.

    Args:
        ctx: The FastMCP context.
        query: Search query - can be simple text or a CQL query string.
        limit: Maximum number of results.
        start: Starting index for pagination.

    Returns:
        JSON string with the search hits and forward pagination links.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        result = confluence_fetcher.search_content(query, limit=limit, start=start)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json(result.to_simplified_dict())


@confluence_mcp.tool(tags={"confluence", "read"})
async def get_labels(
    ctx: Context,
    page_id: Annotated[str, Field(description=PAGE_ID_DESCRIPTION)],
) -> str:
    """Get labels for a specific Confluence page.

    Args:
        ctx: The FastMCP context.
        page_id: Confluence page ID.

    Returns:
        JSON string with the page's labels.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        labels = confluence_fetcher.get_page_labels(page_id)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json(labels.to_simplified_dict())


@confluence_mcp.tool(tags={"confluence", "write"})
@check_write_access
async def add_label(
    ctx: Context,
    page_id: Annotated[str, Field(description="The ID of the page to update")],
    name: Annotated[str, Field(description="The name of the label")],
) -> str:
    """Add label to an existing Confluence page.

    Args:
        ctx: The FastMCP context.
        page_id: The ID of the page to update.
        name: The name of the label.

    Returns:
        JSON string representing the added label.

    Raises:
        ValueError: If in read-only mode or Confluence client is unavailable.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        label = confluence_fetcher.add_page_label(page_id, name)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json(label.to_simplified_dict())


@confluence_mcp.tool(tags={"confluence", "write"})
@check_write_access
async def remove_label(
    ctx: Context,
    page_id: Annotated[str, Field(description="The ID of the page to update")],
    name: Annotated[str, Field(description="The name of the label to remove")],
) -> str:
    """Remove a label from a Confluence page.

    Args:
        ctx: The FastMCP context.
        page_id: The ID of the page to update.
        name: The name of the label.

    Returns:
        JSON string confirming the removal.

    Raises:
        ValueError: If in read-only mode or Confluence client is unavailable.
    """
    confluence_fetcher = await get_confluence_fetcher(ctx)
    try:
        confluence_fetcher.remove_page_label(page_id, name)
    except ConfluenceError as e:
        return _error_json(e)
    return _to_json({"success": True, "page_id": page_id, "label": name})
