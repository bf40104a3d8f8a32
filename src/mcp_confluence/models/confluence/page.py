"""
Confluence page models.
This module provides Pydantic models for Confluence pages, their bodies and
their versions.
"""

import logging
from typing import Any

from pydantic import Field

from ...utils.date import utc_now_iso
from ..base import ApiModel, TimestampMixin
from ..constants import (
    CONFLUENCE_DEFAULT_ID,
    CONFLUENCE_DEFAULT_STATUS,
    CONFLUENCE_UNKNOWN_AUTHOR,
    EMPTY_STRING,
    STORAGE_REPRESENTATION,
)

logger = logging.getLogger(__name__)


class ConfluenceVersion(ApiModel, TimestampMixin):
    """
    Model representing a Confluence page version.

    ``number`` is the optimistic-concurrency token: an update must submit
    the current number plus one.
    """

    number: int = 0
    message: str | None = None
    when: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceVersion":
        """
        Create a ConfluenceVersion from a Confluence API response.

        The legacy API dates a version with ``when``, the typed API with
        ``createdAt``.
        """
        if not data:
            return cls()

        return cls(
            number=int(data.get("number") or 0),
            message=data.get("message") or None,
            when=data.get("when") or data.get("createdAt") or EMPTY_STRING,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for tool responses."""
        result: dict[str, Any] = {
            "number": self.number,
            "when": self.format_timestamp(self.when),
        }
        if self.message:
            result["message"] = self.message
        return result


class ConfluenceBody(ApiModel):
    """
    Model representing page content in one representation.
    """

    value: str = EMPTY_STRING
    representation: str = STORAGE_REPRESENTATION

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ConfluenceBody":
        """
        Create a ConfluenceBody from a ``body`` object.

        Accepts the nested form ``{"storage": {"value": ...}}`` returned by
        both generations for expanded pages, and the bare form
        ``{"value": ..., "representation": ...}`` returned by the typed
        body endpoint.

        Args:
            data: The body data
            **kwargs: Additional keyword arguments
                representation: Preferred representation (default "storage")
        """
        if not data:
            return cls()

        if "value" in data:
            return cls(
                value=data.get("value") or EMPTY_STRING,
                representation=data.get("representation") or STORAGE_REPRESENTATION,
            )

        preferred = kwargs.get("representation", STORAGE_REPRESENTATION)
        candidates = [preferred] + [key for key in data if key != preferred]
        for representation in candidates:
            nested = data.get(representation)
            if isinstance(nested, dict) and "value" in nested:
                return cls(
                    value=nested.get("value") or EMPTY_STRING,
                    representation=nested.get("representation") or representation,
                )

        return cls(representation=preferred)

    @property
    def is_empty(self) -> bool:
        return not self.value.strip()


class ConfluencePage(ApiModel, TimestampMixin):
    """
    Model representing a Confluence page.

    The same shape is produced for the legacy content API
    (``space.id``, ``history.createdBy``, ``history.createdDate``) and the
    typed pages API (``spaceId``, ``authorId``, ``createdAt``).
    """

    id: str = CONFLUENCE_DEFAULT_ID
    title: str = EMPTY_STRING
    status: str = CONFLUENCE_DEFAULT_STATUS
    space_id: str | None = None
    space_key: str | None = None
    version: ConfluenceVersion | None = None
    body: ConfluenceBody | None = None
    author_id: str = CONFLUENCE_UNKNOWN_AUTHOR
    created_at: str = EMPTY_STRING
    links: dict[str, Any] = Field(default_factory=dict)

    @property
    def content(self) -> str:
        """The raw storage markup, or "" when the body was not fetched."""
        return self.body.value if self.body else EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ConfluencePage":
        """
        Create a ConfluencePage from a Confluence API response.

        Args:
            data: The page data from either API generation
            **kwargs: Additional keyword arguments
                include_body: Whether to keep the body content (default True)

        Returns:
            A ConfluencePage instance
        """
        if not data:
            return cls()

        space_data = data.get("space") or {}
        space_id = data.get("spaceId") or space_data.get("id")

        history = data.get("history") or {}
        created_by = history.get("createdBy") or {}
        author_id = (
            data.get("authorId")
            or data.get("ownerId")
            or created_by.get("accountId")
            or created_by.get("username")
            or CONFLUENCE_UNKNOWN_AUTHOR
        )
        created_at = data.get("createdAt") or history.get("createdDate") or utc_now_iso()

        version = None
        if version_data := data.get("version"):
            version = ConfluenceVersion.from_api_response(version_data)

        body = None
        if kwargs.get("include_body", True) and (body_data := data.get("body")):
            body = ConfluenceBody.from_api_response(body_data)

        return cls(
            id=str(data.get("id", CONFLUENCE_DEFAULT_ID)),
            title=data.get("title") or EMPTY_STRING,
            status=data.get("status") or CONFLUENCE_DEFAULT_STATUS,
            space_id=str(space_id) if space_id is not None else None,
            space_key=space_data.get("key") or kwargs.get("space_key"),
            version=version,
            body=body,
            author_id=str(author_id),
            created_at=created_at,
            links=data.get("_links") or {},
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for tool responses."""
        result: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "status": self.status,
            "space_id": self.space_id,
            "author_id": self.author_id,
            "created": self.format_timestamp(self.created_at),
            "links": self.links,
        }

        if self.space_key:
            result["space_key"] = self.space_key

        if self.version:
            result["version"] = self.version.to_simplified_dict()

        if self.body and not self.body.is_empty:
            result["content"] = {
                "value": self.body.value,
                "representation": self.body.representation,
            }

        return result
