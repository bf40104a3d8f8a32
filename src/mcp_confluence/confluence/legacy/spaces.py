"""Module for Confluence space operations on the legacy API."""

import logging

from requests.exceptions import RequestException

from ...exceptions import ConfluenceErrorCode
from ...models.confluence import ConfluencePaginatedResponse, ConfluenceSpace
from ..constants import DEFAULT_LIMIT
from ..errors import classify_request_error
from .client import LegacyConfluenceClient

logger = logging.getLogger("mcp-confluence.confluence.legacy")


class SpacesMixin(LegacyConfluenceClient):
    """Mixin for Confluence space operations."""

    def list_spaces(
        self, limit: int = DEFAULT_LIMIT, start: int = 0
    ) -> ConfluencePaginatedResponse[ConfluenceSpace]:
        """
        List the spaces visible to the configured identity.

        Args:
            limit: Maximum number of spaces to return
            start: The starting index for pagination

        Returns:
            One page of spaces

        Raises:
            ConfluenceError: If the request fails
        """
        try:
            response = self.confluence.get(
                self._path("space"), params={"limit": limit, "start": start}
            )
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
        Get a space by its key.

        Args:
            space_key_or_id: The space key (the legacy API addresses spaces by key)

        Returns:
            The space

        Raises:
            ConfluenceError: SPACE_NOT_FOUND if the space does not exist
        """
        try:
            response = self.confluence.get(self._path("space", space_key_or_id))
        except RequestException as e:
            raise classify_request_error(
                e,
                f"get space {space_key_or_id}",
                not_found=ConfluenceErrorCode.SPACE_NOT_FOUND,
                not_found_message=f"Space {space_key_or_id} not found",
            ) from e

        return ConfluenceSpace.from_api_response(response or {})
