"""Module for Confluence search operations on the typed API."""

import logging

from requests.exceptions import RequestException

from ...exceptions import ConfluenceErrorCode
from ...models.confluence import ConfluenceSearchResult
from ..constants import DEFAULT_LIMIT
from ..errors import classify_request_error
from ..utils import build_search_cql
from .client import V2ConfluenceClient

logger = logging.getLogger("mcp-confluence.confluence.v2")


class SearchMixin(V2ConfluenceClient):
    """Mixin for Confluence search operations."""

    def search_content(
        self, query: str, limit: int = DEFAULT_LIMIT, start: int = 0
    ) -> ConfluenceSearchResult:
        """
        Search content using CQL or free text.

        Runs against the generic legacy search endpoint, whose hits wrap the
        content under ``content`` next to ``excerpt`` and ``lastModified``.

        Raises:
            ConfluenceError: SEARCH_FAILED (or INSUFFICIENT_PERMISSIONS)
        """
        cql = build_search_cql(query)
        logger.info(f"Searching Confluence with CQL: {cql}")
        try:
            response = self.confluence.get(
                self._legacy_path("search"),
                params={"cql": cql, "limit": limit, "start": start},
            )
        except RequestException as e:
            raise classify_request_error(
                e,
                "search content",
                not_found=ConfluenceErrorCode.SEARCH_FAILED,
                not_found_message="Search endpoint not found",
                default=ConfluenceErrorCode.SEARCH_FAILED,
            ) from e

        return ConfluenceSearchResult.from_api_response(
            response or {},
            domain=self.config.domain,
            api_base=self.api_base,
            limit=limit,
            cql_query=cql,
        )
