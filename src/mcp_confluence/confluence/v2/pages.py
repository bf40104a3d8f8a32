"""Module for Confluence page operations on the typed API."""

import logging
from typing import Any

from requests.exceptions import RequestException

from ...exceptions import ConfluenceError, ConfluenceErrorCode
from ...models.confluence import (
    ConfluenceBody,
    ConfluencePage,
    ConfluencePaginatedResponse,
)
from ...models.constants import CONFLUENCE_DEFAULT_STATUS, STORAGE_REPRESENTATION
from ..constants import DEFAULT_LIMIT, FIND_PAGE_EXPAND, FIND_PAGE_LIMIT
from ..errors import (
    classify_request_error,
    classify_update_error,
    get_error_message,
    get_status_code,
)
from ..utils import build_find_page_cql, version_message
from .client import V2ConfluenceClient

logger = logging.getLogger("mcp-confluence.confluence.v2")


def _storage_body(content: str) -> dict[str, Any]:
    return {"representation": STORAGE_REPRESENTATION, "value": content}


class PagesMixin(V2ConfluenceClient):
    """Mixin for Confluence page operations."""

    def list_pages(
        self,
        space_key: str,
        limit: int = DEFAULT_LIMIT,
        start: int = 0,
        title: str | None = None,
    ) -> ConfluencePaginatedResponse[ConfluencePage]:
        """
        List the current pages of a space.

        Args:
            space_key: The key of the space, resolved to its id first
            limit: Maximum number of pages to return
            start: The starting index, passed through unchanged; the typed
                API pages with cursors, so callers follow ``links.next``
            title: Optional exact title filter

        Raises:
            ConfluenceError: SPACE_NOT_FOUND if the key matches no space
        """
        space_id = self._resolve_space_id(space_key)
        params: dict[str, Any] = {
            "space-id": space_id,
            "status": CONFLUENCE_DEFAULT_STATUS,
            "body-format": STORAGE_REPRESENTATION,
            "limit": limit,
        }
        if start:
            params["start"] = start
        if title:
            params["title"] = title

        try:
            response = self.confluence.get(self._path("pages"), params=params)
        except RequestException as e:
            raise classify_request_error(
                e,
                f"list pages in space {space_key}",
                not_found=ConfluenceErrorCode.SPACE_NOT_FOUND,
                not_found_message=f"Space {space_key} not found",
            ) from e

        return ConfluencePaginatedResponse[ConfluencePage].from_api_response(
            response or {}, limit=limit, space_key=space_key
        )

    def find_page_by_title(
        self, title: str, space_key: str | None = None
    ) -> list[ConfluencePage]:
        """
        Find pages whose title contains the given text.

        The typed API has no fuzzy title match, so this runs the same CQL
        content search as the legacy surface.

        Raises:
            ConfluenceError: UNKNOWN on any transport failure
        """
        cql = build_find_page_cql(title, space_key)
        try:
            response = self.confluence.get(
                self._legacy_path("content", "search"),
                params={
                    "cql": cql,
                    "limit": FIND_PAGE_LIMIT,
                    "expand": FIND_PAGE_EXPAND,
                },
            )
        except RequestException as e:
            detail = get_error_message(e)
            logger.error(f"Error searching for page '{title}': {detail}")
            raise ConfluenceError(
                f"Failed to search for page: {detail}",
                ConfluenceErrorCode.UNKNOWN,
                get_status_code(e),
            ) from e

        results = (response or {}).get("results") or []
        return [
            ConfluencePage.from_api_response(page, include_body=False)
            for page in results[:FIND_PAGE_LIMIT]
        ]

    def get_page(self, page_id: str) -> ConfluencePage:
        """
        Get a page with its storage body.

        Raises:
            ConfluenceError: PAGE_NOT_FOUND or INSUFFICIENT_PERMISSIONS
        """
        try:
            response = self.confluence.get(
                self._path("pages", page_id),
                params={"body-format": STORAGE_REPRESENTATION},
            )
        except RequestException as e:
            raise classify_request_error(
                e, f"get page {page_id}", not_found_message=f"Page {page_id} not found"
            ) from e

        return ConfluencePage.from_api_response(response or {})

    def get_page_content(self, page_id: str) -> str:
        """
        Get a page's raw storage markup from its body resource.

        Raises:
            ConfluenceError: EMPTY_CONTENT if the body is missing or empty,
                PAGE_NOT_FOUND or INSUFFICIENT_PERMISSIONS on failure
        """
        try:
            response = self.confluence.get(
                self._path("pages", page_id, "body"),
                params={"body_format": STORAGE_REPRESENTATION},
            )
        except RequestException as e:
            raise classify_request_error(
                e, "access page content", not_found_message="Page content not found"
            ) from e

        body = ConfluenceBody.from_api_response(response or {})
        if body.is_empty:
            raise ConfluenceError(
                "Page content is empty or not accessible",
                ConfluenceErrorCode.EMPTY_CONTENT,
            )
        return body.value

    def create_page(
        self,
        space_key: str,
        title: str,
        content: str,
        parent_id: str | None = None,
    ) -> ConfluencePage:
        """
        Create a page from storage markup.

        Raises:
            ConfluenceError: SPACE_NOT_FOUND if the key matches no space
        """
        payload: dict[str, Any] = {
            "spaceId": self._resolve_space_id(space_key),
            "status": CONFLUENCE_DEFAULT_STATUS,
            "title": title,
            "body": _storage_body(content),
        }
        if parent_id:
            payload["parentId"] = parent_id

        logger.debug(f"Creating page '{title}' in space {space_key}")
        try:
            response = self.confluence.post(self._path("pages"), data=payload)
        except RequestException as e:
            raise classify_request_error(
                e,
                f"create page '{title}' in space {space_key}",
                not_found=ConfluenceErrorCode.SPACE_NOT_FOUND,
                not_found_message=f"Space {space_key} or parent page not found",
            ) from e

        return ConfluencePage.from_api_response(response or {}, space_key=space_key)

    def update_page(
        self, page_id: str, title: str, content: str, version: int
    ) -> ConfluencePage:
        """
        Replace a page's title and body in a single request.

        Stale versions are detected by the server and reported as
        VERSION_CONFLICT.
        """
        payload = {
            "id": page_id,
            "status": CONFLUENCE_DEFAULT_STATUS,
            "title": title,
            "body": _storage_body(content),
            "version": {"number": version + 1, "message": version_message()},
        }
        try:
            response = self.confluence.put(self._path("pages", page_id), data=payload)
        except RequestException as e:
            raise classify_update_error(e, page_id) from e

        return ConfluencePage.from_api_response(response or {})
