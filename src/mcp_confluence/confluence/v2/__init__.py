"""Implementation of the Confluence operations on the typed ``/api/v2`` API."""

from .client import V2ConfluenceClient
from .labels import LabelsMixin
from .pages import PagesMixin
from .search import SearchMixin
from .spaces import SpacesMixin


class V2ConfluenceFetcher(SearchMixin, SpacesMixin, PagesMixin, LabelsMixin):
    """Confluence operations backed by the typed v2 API."""

    pass


__all__ = ["V2ConfluenceClient", "V2ConfluenceFetcher"]
