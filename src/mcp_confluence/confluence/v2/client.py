"""Client for the typed ``/api/v2`` API."""

import logging
from typing import Any

from atlassian import Confluence
from requests.exceptions import RequestException

from ...exceptions import ConfluenceError, ConfluenceErrorCode
from ..client import ConfluenceClient
from ..errors import classify_request_error

logger = logging.getLogger("mcp-confluence.confluence.v2")

# The typed API has no CQL endpoint; searches use the legacy root
LEGACY_API_ROOT = "rest/api"


class V2ConfluenceClient(ConfluenceClient):
    """Confluence client speaking the typed ``/api/v2`` API."""

    api_root = "api/v2"
    spaces_resource = "spaces"

    def _create_transport(self) -> Confluence:
        if self.config.auth_type == "token":
            return Confluence(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )
        return Confluence(
            url=self.config.url,
            username=self.config.username,
            password=self.config.api_token,  # API token is used as password
            cloud=self.config.is_cloud,
            verify_ssl=self.config.ssl_verify,
        )

    def _legacy_path(self, *parts: object) -> str:
        """Join path segments below the legacy API root."""
        return "/".join([LEGACY_API_ROOT, *(str(part) for part in parts)])

    def _find_space_by_key(self, space_key: str) -> dict[str, Any]:
        """
        Look a space up by key; the typed API addresses spaces by id.

        Raises:
            ConfluenceError: SPACE_NOT_FOUND if no space has this key
        """
        try:
            response = self.confluence.get(
                self._path("spaces"), params={"keys": space_key, "limit": 1}
            )
        except RequestException as e:
            raise classify_request_error(
                e,
                f"resolve space {space_key}",
                not_found=ConfluenceErrorCode.SPACE_NOT_FOUND,
                not_found_message=f"Space {space_key} not found",
            ) from e

        results = (response or {}).get("results") or []
        if not results:
            logger.warning(f"No space found with key {space_key}")
            raise ConfluenceError(
                f"Space {space_key} not found", ConfluenceErrorCode.SPACE_NOT_FOUND
            )
        return results[0]

    def _resolve_space_id(self, space_key: str) -> str:
        """Translate a space key into the id the typed API expects."""
        return str(self._find_space_by_key(space_key)["id"])
