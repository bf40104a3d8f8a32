"""
Confluence space models.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import (
    CONFLUENCE_DEFAULT_ID,
    CONFLUENCE_DEFAULT_SPACE_TYPE,
    CONFLUENCE_DEFAULT_STATUS,
    EMPTY_STRING,
    UNKNOWN,
)

logger = logging.getLogger(__name__)


class ConfluenceSpace(ApiModel):
    """
    Model representing a Confluence space.

    Both API generations return the same field names for spaces; the legacy
    API uses numeric ids while the typed API uses strings, so ids are
    normalized to strings.
    """

    id: str = CONFLUENCE_DEFAULT_ID
    key: str = EMPTY_STRING
    name: str = UNKNOWN
    type: str = CONFLUENCE_DEFAULT_SPACE_TYPE  # "global", "personal", etc.
    status: str = CONFLUENCE_DEFAULT_STATUS  # "current", "archived", etc.
    links: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceSpace":
        """
        Create a ConfluenceSpace from a Confluence API response.

        Args:
            data: The space data from either API generation

        Returns:
            A ConfluenceSpace instance
        """
        if not data:
            return cls()

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            key=data.get("key") or EMPTY_STRING,
            name=data.get("name") or UNKNOWN,
            type=data.get("type") or CONFLUENCE_DEFAULT_SPACE_TYPE,
            status=data.get("status") or CONFLUENCE_DEFAULT_STATUS,
            links=data.get("_links") or {},
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for tool responses."""
        return {
            "id": self.id,
            "key": self.key,
            "name": self.name,
            "type": self.type,
            "status": self.status,
            "links": self.links,
        }
