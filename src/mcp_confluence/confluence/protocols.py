"""Module for Confluence protocol definitions.

Both API surfaces implement every protocol here, so tool handlers depend on
the capability set rather than on a concrete surface.
"""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from ..models.confluence import (
    ConfluenceLabel,
    ConfluencePage,
    ConfluencePaginatedResponse,
    ConfluenceSearchResult,
    ConfluenceSpace,
)


class SpaceOperationsProto(Protocol):
    """Protocol defining space operations interface."""

    @abstractmethod
    def list_spaces(
        self, limit: int = 25, start: int = 0
    ) -> ConfluencePaginatedResponse[ConfluenceSpace]:
        """List the spaces visible to the configured identity."""

    @abstractmethod
    def get_space(self, space_key_or_id: str) -> ConfluenceSpace:
        """
        Get one space.

        Raises:
            ConfluenceError: SPACE_NOT_FOUND if the space does not exist
        """


class PageOperationsProto(Protocol):
    """Protocol defining page operations interface."""

    @abstractmethod
    def list_pages(
        self,
        space_key: str,
        limit: int = 25,
        start: int = 0,
        title: str | None = None,
    ) -> ConfluencePaginatedResponse[ConfluencePage]:
        """List the pages of a space, optionally filtered by title."""

    @abstractmethod
    def find_page_by_title(
        self, title: str, space_key: str | None = None
    ) -> list[ConfluencePage]:
        """Find up to ten pages whose title matches, without their bodies."""

    @abstractmethod
    def get_page(self, page_id: str) -> ConfluencePage:
        """Get a page with its storage body."""

    @abstractmethod
    def get_page_content(self, page_id: str) -> str:
        """
        Get a page's raw storage markup.

        Raises:
            ConfluenceError: EMPTY_CONTENT if the page has no body
        """

    @abstractmethod
    def create_page(
        self,
        space_key: str,
        title: str,
        content: str,
        parent_id: str | None = None,
    ) -> ConfluencePage:
        """Create a page from storage markup."""

    @abstractmethod
    def update_page(
        self, page_id: str, title: str, content: str, version: int
    ) -> ConfluencePage:
        """
        Replace a page's title and body.

        Args:
            version: The version number the caller last read

        Raises:
            ConfluenceError: VERSION_CONFLICT if the page moved past ``version``
        """


class SearchOperationsProto(Protocol):
    """Protocol defining search operations interface."""

    @abstractmethod
    def search_content(
        self, query: str, limit: int = 25, start: int = 0
    ) -> ConfluenceSearchResult:
        """Search content with CQL or free text."""


class LabelOperationsProto(Protocol):
    """Protocol defining label operations interface."""

    @abstractmethod
    def get_page_labels(
        self, page_id: str
    ) -> ConfluencePaginatedResponse[ConfluenceLabel]:
        """List the labels of a page."""

    @abstractmethod
    def add_page_label(self, page_id: str, name: str) -> ConfluenceLabel:
        """Attach a label to a page."""

    @abstractmethod
    def remove_page_label(self, page_id: str, name: str) -> None:
        """Detach a label from a page."""


@runtime_checkable
class ConfluenceOperationsProto(
    SpaceOperationsProto,
    PageOperationsProto,
    SearchOperationsProto,
    LabelOperationsProto,
    Protocol,
):
    """The full capability set exposed by either API surface."""

    @abstractmethod
    def verify_connection(self) -> None:
        """Check credentials and reachability once at startup."""
