"""
Pydantic models for Confluence API responses.

This package provides type-safe models that normalize both Confluence API
generations into one internal shape, plus simplified dictionaries for tool
responses.
"""

from .base import ApiModel, TimestampMixin
from .confluence import (
    ConfluenceBody,
    ConfluenceContentSummary,
    ConfluenceLabel,
    ConfluencePage,
    ConfluencePaginatedResponse,
    ConfluenceSearchResult,
    ConfluenceSearchResultItem,
    ConfluenceSpace,
    ConfluenceVersion,
)
from .constants import (  # noqa: F401 - Keep constants available
    CONFLUENCE_DEFAULT_ID,
    CONFLUENCE_GLOBAL_LABEL_PREFIX,
    CONFLUENCE_UNKNOWN_AUTHOR,
    EMPTY_STRING,
    STORAGE_REPRESENTATION,
    UNKNOWN,
)

__all__ = [
    # Base models
    "ApiModel",
    "TimestampMixin",
    # Confluence models
    "ConfluenceBody",
    "ConfluenceContentSummary",
    "ConfluenceLabel",
    "ConfluencePage",
    "ConfluencePaginatedResponse",
    "ConfluenceSearchResult",
    "ConfluenceSearchResultItem",
    "ConfluenceSpace",
    "ConfluenceVersion",
]
