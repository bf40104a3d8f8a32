"""Module for Confluence space operations on the typed API."""

import logging

from requests.exceptions import RequestException

from ...exceptions import ConfluenceErrorCode
from ...models.confluence import ConfluencePaginatedResponse, ConfluenceSpace
from ..constants import DEFAULT_LIMIT
from ..errors import classify_request_error
from .client import V2ConfluenceClient

logger = logging.getLogger("mcp-confluence.confluence.v2")


class SpacesMixin(V2ConfluenceClient):
    """Mixin for Confluence space operations."""

    def list_spaces(
        self, limit: int = DEFAULT_LIMIT, start: int = 0
    ) -> ConfluencePaginatedResponse[ConfluenceSpace]:
        """
        List the spaces visible to the configured identity.

        The typed API paginates with cursors found in ``links.next``;
        ``start`` is passed through for servers that still honour it.
        """
        params = {"limit": limit}
        if start:
            params["start"] = start
        try:
            response = self.confluence.get(self._path("spaces"), params=params)
        except RequestException as e:
            raise classify_request_error(
                e,
                "list spaces",
                not_found=ConfluenceErrorCode.UNKNOWN,
                not_found_message="Space listing endpoint not found",
            ) from e

        return ConfluencePaginatedResponse[ConfluenceSpace].from_api_response(
            response or {}, limit=limit
        )

    def get_space(self, space_key_or_id: str) -> ConfluenceSpace:
        """
        Get a space by numeric id or by key.

        Raises:
            ConfluenceError: SPACE_NOT_FOUND if the space does not exist
        """
        if not space_key_or_id.isdigit():
            return ConfluenceSpace.from_api_response(
                self._find_space_by_key(space_key_or_id)
            )

        try:
            response = self.confluence.get(self._path("spaces", space_key_or_id))
        except RequestException as e:
            raise classify_request_error(
                e,
                f"get space {space_key_or_id}",
                not_found=ConfluenceErrorCode.SPACE_NOT_FOUND,
                not_found_message=f"Space {space_key_or_id} not found",
            ) from e

        return ConfluenceSpace.from_api_response(response or {})
