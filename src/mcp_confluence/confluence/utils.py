"""Utility functions specific to Confluence operations."""

import logging
from typing import Any

from ..models.confluence import ConfluenceLabel
from ..utils.date import utc_now_iso
from .constants import VERSION_MESSAGE_TEMPLATE

logger = logging.getLogger("mcp-confluence.confluence.utils")


def quote_cql_string(value: str) -> str:
    """Wrap a value in double quotes, escaping backslashes then quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_search_cql(query: str) -> str:
    """
    Turn a user query into CQL.

    A query that already carries a ``type =`` clause is trusted as CQL and
    passed through verbatim; anything else becomes a full-text clause.

    Examples:
        'type = "page" AND space = DEV' -> unchanged
        'budget report' -> 'text ~ "budget report"'
    """
    if "type =" in query:
        logger.debug("Query already carries a type clause, passing it through as CQL")
        return query
    return f"text ~ {quote_cql_string(query)}"


def build_page_list_cql(space_key: str, title: str | None = None) -> str:
    """CQL listing the pages of a space, optionally narrowed by title."""
    cql = f'space = {quote_cql_string(space_key)} AND type = "page"'
    if title:
        cql += f" AND title ~ {quote_cql_string(title)}"
    return cql


def build_find_page_cql(title: str, space_key: str | None = None) -> str:
    """CQL finding pages by title, optionally within one space."""
    cql = f'title ~ {quote_cql_string(title)} AND type = "page"'
    if space_key:
        cql += f" AND space = {quote_cql_string(space_key)}"
    return cql


def version_message() -> str:
    """Message recorded on every version written by this server."""
    return VERSION_MESSAGE_TEMPLATE.format(timestamp=utc_now_iso())


def select_added_label(entries: list[dict[str, Any]], name: str) -> ConfluenceLabel:
    """
    Pick the label named ``name`` from a label-add response.

    The server echoes every label on the page, in no guaranteed order.
    """
    for entry in entries:
        if (entry.get("name") or entry.get("label")) == name:
            return ConfluenceLabel.from_api_response(entry)
    logger.debug(f"Label '{name}' missing from the add response, using the name only")
    return ConfluenceLabel(name=name)
