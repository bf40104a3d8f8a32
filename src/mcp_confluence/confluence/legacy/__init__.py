"""Implementation of the Confluence operations on the legacy ``/rest/api`` API."""

from .client import LegacyConfluenceClient
from .labels import LabelsMixin
from .pages import PagesMixin
from .search import SearchMixin
from .spaces import SpacesMixin


class LegacyConfluenceFetcher(SearchMixin, SpacesMixin, PagesMixin, LabelsMixin):
    """Confluence operations backed by the legacy content API."""

    pass


__all__ = ["LegacyConfluenceClient", "LegacyConfluenceFetcher"]
