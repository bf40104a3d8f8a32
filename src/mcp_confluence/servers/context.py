from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_confluence.confluence import ConfluenceFetcher
    from mcp_confluence.confluence.config import ConfluenceConfig


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the Confluence configuration and the single fetcher built
    from it at server startup. Shared read-only by every tool invocation.
    """

    confluence_fetcher: ConfluenceFetcher | None = None
    confluence_config: ConfluenceConfig | None = None
    read_only: bool = False
    enabled_tools: list[str] | None = None
