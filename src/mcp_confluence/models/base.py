"""
Base models and utility classes for the MCP Confluence API models.

Every model normalizes the response of either upstream API generation into
one internal shape, so callers never see which generation produced it.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

from ..utils.date import parse_date
from .constants import EMPTY_STRING

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.
    """

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary for tool responses.
        """
        return self.model_dump(exclude_none=True)


class TimestampMixin:
    """
    Mixin for rendering upstream timestamps.
    """

    @staticmethod
    def format_timestamp(timestamp: str | None) -> str:
        """
        Format an ISO 8601 timestamp as ``YYYY-MM-DD HH:MM:SS``.

        Unparseable input is returned unchanged; missing input becomes "".
        """
        if not timestamp:
            return EMPTY_STRING
        try:
            parsed = parse_date(timestamp)
        except (ValueError, OverflowError):
            return timestamp
        return parsed.strftime("%Y-%m-%d %H:%M:%S") if parsed else EMPTY_STRING
