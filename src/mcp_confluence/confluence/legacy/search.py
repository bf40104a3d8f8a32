"""Module for Confluence search operations on the legacy API."""

import logging

from requests.exceptions import RequestException

from ...exceptions import ConfluenceErrorCode
from ...models.confluence import ConfluenceSearchResult
from ..constants import DEFAULT_LIMIT, SEARCH_EXPAND
from ..errors import classify_request_error
from ..utils import build_search_cql
from .client import LegacyConfluenceClient

logger = logging.getLogger("mcp-confluence.confluence.legacy")


class SearchMixin(LegacyConfluenceClient):
    """Mixin for Confluence search operations."""

    def search_content(
        self, query: str, limit: int = DEFAULT_LIMIT, start: int = 0
    ) -> ConfluenceSearchResult:
        """
        Search content using CQL or free text.

        Args:
            query: A CQL query containing a ``type =`` clause, or free text
            limit: Maximum number of results to return
            start: The starting index for pagination

        Returns:
            The search result, with forward-only pagination links

        Raises:
            ConfluenceError: SEARCH_FAILED (or INSUFFICIENT_PERMISSIONS)
        """
        cql = build_search_cql(query)
        logger.info(f"Searching Confluence with CQL: {cql}")
        try:
            response = self.confluence.get(
                self._path("content", "search"),
                params={
                    "cql": cql,
                    "limit": limit,
                    "start": start,
                    "expand": SEARCH_EXPAND,
                },
            )
        except RequestException as e:
            raise classify_request_error(
                e,
                "search content",
                not_found=ConfluenceErrorCode.SEARCH_FAILED,
                not_found_message="Search endpoint not found",
                default=ConfluenceErrorCode.SEARCH_FAILED,
            ) from e

        result = ConfluenceSearchResult.from_api_response(
            response or {},
            domain=self.config.domain,
            api_base=self.api_base,
            limit=limit,
            cql_query=cql,
        )
        logger.debug(f"Found {len(result.results)} results")
        return result
