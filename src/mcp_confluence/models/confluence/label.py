"""
Confluence label models.
"""

from typing import Any

from ..base import ApiModel
from ..constants import (
    CONFLUENCE_DEFAULT_ID,
    CONFLUENCE_GLOBAL_LABEL_PREFIX,
    EMPTY_STRING,
)


class ConfluenceLabel(ApiModel):
    """
    Model representing a label attached to a page.
    """

    id: str = CONFLUENCE_DEFAULT_ID
    name: str = EMPTY_STRING
    prefix: str = CONFLUENCE_GLOBAL_LABEL_PREFIX

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceLabel":
        if not data:
            return cls()

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            name=data.get("name") or data.get("label") or EMPTY_STRING,
            prefix=data.get("prefix") or CONFLUENCE_GLOBAL_LABEL_PREFIX,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for tool responses."""
        return {"id": self.id, "name": self.name, "prefix": self.prefix}
