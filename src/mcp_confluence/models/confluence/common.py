"""
Common Confluence response models.
This module provides the generic paginated container shared by list
operations.
"""

from typing import Any, Generic, TypeVar

from pydantic import Field

from ..base import ApiModel

ItemT = TypeVar("ItemT", bound=ApiModel)

# Pagination links kept from upstream responses; "prev" is deliberately absent
PAGINATION_LINK_KEYS = ("self", "next", "base")


def extract_pagination_links(raw_links: dict[str, Any] | None) -> dict[str, str]:
    """Keep only the pagination links present in an upstream ``_links`` object."""
    raw_links = raw_links or {}
    return {key: raw_links[key] for key in PAGINATION_LINK_KEYS if raw_links.get(key)}


class ConfluencePaginatedResponse(ApiModel, Generic[ItemT]):
    """
    Model representing one page of results of a list operation.

    Use a parametrized class, e.g.
    ``ConfluencePaginatedResponse[ConfluenceSpace].from_api_response(data)``;
    the type argument selects the item model.
    """

    results: list[ItemT] = Field(default_factory=list)
    links: dict[str, str] = Field(default_factory=dict)
    size: int = 0

    @property
    def has_more(self) -> bool:
        """Whether the upstream signalled another page of results."""
        return "next" in self.links

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluencePaginatedResponse[ItemT]":
        """
        Create a paginated response from a list endpoint's response.

        Args:
            data: The list response (``results`` plus ``_links``)
            **kwargs: Additional keyword arguments
                limit: Upper bound on the number of results kept
                Anything else is forwarded to the item model.

        Raises:
            TypeError: If called on the unparametrized class
        """
        item_args = cls.__pydantic_generic_metadata__["args"]
        if not item_args:
            raise TypeError(
                "ConfluencePaginatedResponse must be parametrized with an item model"
            )
        item_model = item_args[0]

        if not data:
            return cls()

        limit = kwargs.pop("limit", None)
        items = data.get("results") or []
        if limit is not None:
            items = items[: max(limit, 0)]

        results = [item_model.from_api_response(item, **kwargs) for item in items]
        return cls(
            results=results,
            links=extract_pagination_links(data.get("_links")),
            size=len(results),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for tool responses."""
        return {
            "results": [item.to_simplified_dict() for item in self.results],
            "links": self.links,
            "size": self.size,
        }
