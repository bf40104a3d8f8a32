"""Module for Confluence label operations on the legacy API."""

import logging

from requests.exceptions import RequestException

from ...models.confluence import ConfluenceLabel, ConfluencePaginatedResponse
from ...models.constants import CONFLUENCE_GLOBAL_LABEL_PREFIX
from ..errors import (
    classify_add_label_error,
    classify_remove_label_error,
    classify_request_error,
)
from ..utils import select_added_label
from .client import LegacyConfluenceClient

logger = logging.getLogger("mcp-confluence.confluence.legacy")


class LabelsMixin(LegacyConfluenceClient):
    """Mixin for Confluence label operations."""

    def get_page_labels(
        self, page_id: str
    ) -> ConfluencePaginatedResponse[ConfluenceLabel]:
        """
        Get all labels for a specific page.

        Raises:
            ConfluenceError: PAGE_NOT_FOUND if the page does not exist
        """
        try:
            response = self.confluence.get(self._path("content", page_id, "label"))
        except RequestException as e:
            raise classify_request_error(e, f"get labels of page {page_id}") from e

        return ConfluencePaginatedResponse[ConfluenceLabel].from_api_response(
            response or {}
        )

    def add_page_label(self, page_id: str, name: str) -> ConfluenceLabel:
        """
        Add a global label to a page.

        Args:
            page_id: The ID of the page
            name: The label name

        Returns:
            The label as stored by the server

        Raises:
            ConfluenceError: LABEL_EXISTS if the page already has the label,
                PAGE_NOT_FOUND if the page does not exist
        """
        logger.debug(f"Adding label '{name}' to page {page_id}")
        try:
            response = self.confluence.post(
                self._path("content", page_id, "label"),
                data=[{"prefix": CONFLUENCE_GLOBAL_LABEL_PREFIX, "name": name}],
            )
        except RequestException as e:
            raise classify_add_label_error(e, page_id, name) from e

        return select_added_label((response or {}).get("results") or [], name)

    def remove_page_label(self, page_id: str, name: str) -> None:
        """
        Remove a label from a page.

        Raises:
            ConfluenceError: LABEL_NOT_FOUND if the page does not carry the
                label, PAGE_NOT_FOUND if the page does not exist
        """
        logger.debug(f"Removing label '{name}' from page {page_id}")
        try:
            self.confluence.delete(
                self._path("content", page_id, "label"), params={"name": name}
            )
        except RequestException as e:
            raise classify_remove_label_error(e, page_id, name) from e
