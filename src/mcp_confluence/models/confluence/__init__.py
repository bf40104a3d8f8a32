"""
Confluence data models for the MCP Confluence integration.

Key models:
- ConfluencePage: page metadata, version and storage body
- ConfluenceSpace: space information
- ConfluenceLabel: a label attached to a page
- ConfluenceSearchResult: container for CQL search hits
- ConfluencePaginatedResponse: generic page of list results
"""

from .common import ConfluencePaginatedResponse
from .label import ConfluenceLabel
from .page import ConfluenceBody, ConfluencePage, ConfluenceVersion
from .search import (
    ConfluenceContentSummary,
    ConfluenceSearchResult,
    ConfluenceSearchResultItem,
)
from .space import ConfluenceSpace

__all__ = [
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
