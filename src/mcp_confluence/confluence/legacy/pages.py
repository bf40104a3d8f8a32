"""Module for Confluence page operations on the legacy API."""

import logging
from typing import Any

from requests.exceptions import RequestException

from ...exceptions import ConfluenceError, ConfluenceErrorCode
from ...models.confluence import (
    ConfluenceBody,
    ConfluencePage,
    ConfluencePaginatedResponse,
)
from ...models.constants import STORAGE_REPRESENTATION
from ..constants import (
    DEFAULT_LIMIT,
    FIND_PAGE_EXPAND,
    FIND_PAGE_LIMIT,
    PAGE_EXPAND,
    UPDATE_EXPAND,
)
from ..errors import (
    classify_request_error,
    classify_update_error,
    get_error_message,
    get_status_code,
)
from ..utils import build_find_page_cql, build_page_list_cql, version_message
from .client import LegacyConfluenceClient

logger = logging.getLogger("mcp-confluence.confluence.legacy")


def _storage_body(content: str) -> dict[str, Any]:
    return {"storage": {"value": content, "representation": STORAGE_REPRESENTATION}}


class PagesMixin(LegacyConfluenceClient):
    """Mixin for Confluence page operations."""

    def list_pages(
        self,
        space_key: str,
        limit: int = DEFAULT_LIMIT,
        start: int = 0,
        title: str | None = None,
    ) -> ConfluencePaginatedResponse[ConfluencePage]:
        """
        List the pages of a space through a CQL content search.

        Args:
            space_key: The key of the space
            limit: Maximum number of pages to return
            start: The starting index for pagination
            title: Optional title filter (contains match)

        Returns:
            One page of pages, with bodies

        Raises:
            ConfluenceError: If the request fails
        """
        cql = build_page_list_cql(space_key, title)
        try:
            response = self.confluence.get(
                self._path("content", "search"),
                params={
                    "cql": cql,
                    "limit": limit,
                    "start": start,
                    "expand": PAGE_EXPAND,
                },
            )
        except RequestException as e:
            raise classify_request_error(
                e,
                f"list pages in space {space_key}",
                not_found=ConfluenceErrorCode.SPACE_NOT_FOUND,
                not_found_message=f"Space {space_key} not found",
            ) from e

        return ConfluencePaginatedResponse[ConfluencePage].from_api_response(
            response or {}, limit=limit
        )

    def find_page_by_title(
        self, title: str, space_key: str | None = None
    ) -> list[ConfluencePage]:
        """
        Find pages whose title contains the given text.

        At most ten pages are returned, in the server's order, without bodies.

        Args:
            title: The title text to match
            space_key: Optional space to restrict the search to

        Returns:
            The matching pages, possibly empty

        Raises:
            ConfluenceError: UNKNOWN on any transport failure
        """
        cql = build_find_page_cql(title, space_key)
        try:
            response = self.confluence.get(
                self._path("content", "search"),
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
        Get a page with its space, version and storage body.

        Raises:
            ConfluenceError: PAGE_NOT_FOUND or INSUFFICIENT_PERMISSIONS
        """
        try:
            response = self.confluence.get(
                self._path("content", page_id), params={"expand": PAGE_EXPAND}
            )
        except RequestException as e:
            raise classify_request_error(
                e, f"get page {page_id}", not_found_message=f"Page {page_id} not found"
            ) from e

        return ConfluencePage.from_api_response(response or {})

    def get_page_content(self, page_id: str) -> str:
        """
        Get a page's raw storage markup.

        Args:
            page_id: The ID of the page

        Returns:
            The storage-format body

        Raises:
            ConfluenceError: EMPTY_CONTENT if the body is missing or empty,
                PAGE_NOT_FOUND or INSUFFICIENT_PERMISSIONS on failure
        """
        try:
            response = self.confluence.get(
                self._path("content", page_id), params={"expand": "body.storage"}
            )
        except RequestException as e:
            raise classify_request_error(
                e, "access page content", not_found_message="Page content not found"
            ) from e

        body = ConfluenceBody.from_api_response((response or {}).get("body") or {})
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

        Args:
            space_key: The key of the space to create the page in
            title: The page title
            content: The body in storage format
            parent_id: Optional ID of the parent page

        Returns:
            The created page, at version 1

        Raises:
            ConfluenceError: If the request fails
        """
        payload: dict[str, Any] = {
            "type": "page",
            "title": title,
            "space": {"key": space_key},
            "body": _storage_body(content),
        }
        if parent_id:
            payload["ancestors"] = [{"id": parent_id}]

        logger.debug(f"Creating page '{title}' in space {space_key}")
        try:
            response = self.confluence.post(self._path("content"), data=payload)
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
        Replace a page's title and body.

        The current page is read first; its space and parent are carried
        over, and the update is refused if the page already moved past
        ``version``. The read and the write are not atomic; the server's own
        version check catches updates that land in between.

        Args:
            page_id: The ID of the page
            title: The new title
            content: The new body in storage format
            version: The version number the caller last read

        Returns:
            The updated page, at ``version + 1``

        Raises:
            ConfluenceError: VERSION_CONFLICT, PAGE_NOT_FOUND or
                INSUFFICIENT_PERMISSIONS
        """
        try:
            current = self.confluence.get(
                self._path("content", page_id), params={"expand": UPDATE_EXPAND}
            ) or {}
        except RequestException as e:
            raise classify_request_error(
                e, f"update page {page_id}", not_found_message=f"Page {page_id} not found"
            ) from e

        current_version = (current.get("version") or {}).get("number")
        if current_version is not None and current_version != version:
            logger.warning(
                f"Page {page_id} is at version {current_version}, "
                f"update was based on {version}"
            )
            raise ConfluenceError(
                f"Page {page_id} is at version {current_version}, not {version}; "
                "fetch the current version and retry",
                ConfluenceErrorCode.VERSION_CONFLICT,
            )

        payload: dict[str, Any] = {
            "id": page_id,
            "type": current.get("type") or "page",
            "title": title,
            "body": _storage_body(content),
            "version": {"number": version + 1, "message": version_message()},
        }
        space_key = (current.get("space") or {}).get("key")
        if space_key:
            payload["space"] = {"key": space_key}
        ancestors = current.get("ancestors") or []
        if ancestors and (parent_id := ancestors[-1].get("id")):
            payload["ancestors"] = [{"id": parent_id}]

        try:
            response = self.confluence.put(
                self._path("content", page_id), data=payload
            )
        except RequestException as e:
            raise classify_update_error(e, page_id) from e

        return ConfluencePage.from_api_response(response or {}, space_key=space_key)
