"""Module for Confluence label operations on the typed API."""

import logging
from urllib.parse import quote

from requests.exceptions import RequestException

from ...models.confluence import ConfluenceLabel, ConfluencePaginatedResponse
from ..errors import (
    classify_add_label_error,
    classify_remove_label_error,
    classify_request_error,
)
from ..utils import select_added_label
from .client import V2ConfluenceClient

logger = logging.getLogger("mcp-confluence.confluence.v2")


class LabelsMixin(V2ConfluenceClient):
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
            response = self.confluence.get(self._path("pages", page_id, "labels"))
        except RequestException as e:
            raise classify_request_error(e, f"get labels of page {page_id}") from e

        return ConfluencePaginatedResponse[ConfluenceLabel].from_api_response(
            response or {}
        )

    def add_page_label(self, page_id: str, name: str) -> ConfluenceLabel:
        """
        Add a label to a page.

        Raises:
            ConfluenceError: LABEL_EXISTS if the page already has the label,
                PAGE_NOT_FOUND if the page does not exist
        """
        logger.debug(f"Adding label '{name}' to page {page_id}")
        try:
            response = self.confluence.post(
                self._path("pages", page_id, "labels"), data={"name": name}
            )
        except RequestException as e:
            raise classify_add_label_error(e, page_id, name) from e

        response = response or {}
        entries = response["results"] if "results" in response else [response]
        return select_added_label(entries or [], name)

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
                self._path("pages", page_id, "labels", quote(name, safe=""))
            )
        except RequestException as e:
            raise classify_remove_label_error(e, page_id, name) from e
