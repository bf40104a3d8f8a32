"""
Confluence search result models.
This module provides Pydantic models for Confluence search (CQL) results.
"""

import logging
from typing import Any

from pydantic import Field

from ...utils.urls import build_web_url
from ..base import ApiModel, TimestampMixin
from ..constants import (
    CONFLUENCE_DEFAULT_ID,
    CONFLUENCE_DEFAULT_STATUS,
    EMPTY_STRING,
)

logger = logging.getLogger(__name__)


class ConfluenceContentSummary(ApiModel):
    """
    Lightweight summary of a piece of content found by a search.
    """

    id: str = CONFLUENCE_DEFAULT_ID
    type: str = "page"
    status: str = CONFLUENCE_DEFAULT_STATUS
    title: str = EMPTY_STRING
    space_id: str | None = None
    links: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceContentSummary":
        if not data:
            return cls()

        space_id = data.get("spaceId") or (data.get("space") or {}).get("id")
        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            type=data.get("type") or "page",
            status=data.get("status") or CONFLUENCE_DEFAULT_STATUS,
            title=data.get("title") or EMPTY_STRING,
            space_id=str(space_id) if space_id is not None else None,
            links=data.get("_links") or {},
        )


class ConfluenceSearchResultItem(ApiModel, TimestampMixin):
    """
    Model representing one entry of a search result.

    ``excerpt`` is always a string, empty when the upstream sends none.
    """

    content: ConfluenceContentSummary = Field(default_factory=ConfluenceContentSummary)
    url: str = EMPTY_STRING
    last_modified: str | None = None
    excerpt: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSearchResultItem":
        """
        Create a search entry from either a content search hit (the content
        object itself) or a generic search hit (content nested under
        ``content`` next to ``excerpt`` and ``lastModified``).

        Args:
            data: The search hit
            **kwargs: Additional keyword arguments
                domain: Site host used to build the browsable URL
        """
        if not data:
            return cls()

        nested = data.get("content")
        content_data = nested if isinstance(nested, dict) else data

        content = ConfluenceContentSummary.from_api_response(content_data)
        webui = (content_data.get("_links") or {}).get("webui") or data.get("url")
        last_modified = (
            data.get("lastModified")
            or (content_data.get("version") or {}).get("when")
            or (content_data.get("version") or {}).get("createdAt")
        )

        return cls(
            content=content,
            url=build_web_url(kwargs.get("domain", EMPTY_STRING), webui),
            last_modified=last_modified,
            excerpt=data.get("excerpt") or EMPTY_STRING,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for tool responses."""
        return {
            "id": self.content.id,
            "type": self.content.type,
            "status": self.content.status,
            "title": self.content.title,
            "space_id": self.content.space_id,
            "url": self.url,
            "last_modified": self.format_timestamp(self.last_modified),
            "excerpt": self.excerpt,
        }


class ConfluenceSearchResult(ApiModel):
    """
    Model representing a Confluence search (CQL) result.

    Pagination is forward-only: the links carry ``next`` (when the upstream
    has more results) and ``base`` (the resolved API base), never ``prev``.
    """

    results: list[ConfluenceSearchResultItem] = Field(default_factory=list)
    links: dict[str, str] = Field(default_factory=dict)
    cql_query: str | None = None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSearchResult":
        """
        Create a ConfluenceSearchResult from a Confluence API response.

        Args:
            data: The search response data
            **kwargs: Additional keyword arguments
                domain: Site host used to build browsable URLs
                api_base: Resolved API base URL reported as ``links.base``
                limit: Upper bound on the number of results kept
                cql_query: The CQL actually sent

        Returns:
            A ConfluenceSearchResult instance
        """
        data = data or {}
        items = data.get("results") or []
        if (limit := kwargs.get("limit")) is not None:
            items = items[: max(limit, 0)]

        domain = kwargs.get("domain", EMPTY_STRING)
        results = [
            ConfluenceSearchResultItem.from_api_response(item, domain=domain)
            for item in items
        ]

        links: dict[str, str] = {}
        if next_link := (data.get("_links") or {}).get("next"):
            links["next"] = next_link
        if api_base := kwargs.get("api_base"):
            links["base"] = api_base

        total_size = data.get("totalSize", 0)
        if total_size and not results:
            logger.warning(
                "Search reported %d matches but returned no content data", total_size
            )

        return cls(results=results, links=links, cql_query=kwargs.get("cql_query"))

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for tool responses."""
        result: dict[str, Any] = {
            "results": [item.to_simplified_dict() for item in self.results],
            "links": self.links,
        }
        if self.cql_query:
            result["cql_query"] = self.cql_query
        return result
