"""Confluence API integration module.

Two interchangeable implementations of the same operations are provided,
one per upstream API generation. ``create_confluence_fetcher`` picks one
from the configuration; callers only see the shared protocol.
"""

import logging

from .client import ConfluenceClient
from .config import ConfluenceConfig
from .legacy import LegacyConfluenceFetcher
from .protocols import ConfluenceOperationsProto
from .v2 import V2ConfluenceFetcher

logger = logging.getLogger("mcp-confluence.confluence")

ConfluenceFetcher = LegacyConfluenceFetcher | V2ConfluenceFetcher


def create_confluence_fetcher(
    config: ConfluenceConfig | None = None,
) -> ConfluenceFetcher:
    """
    Build the fetcher for the configured API surface.

    The surface is chosen once here and never mixed per call. No request is
    sent; call ``verify_connection`` on the result to check the credentials.

    Args:
        config: Connection settings. If None, will load from environment.

    Raises:
        ValueError: If configuration is invalid or environment variables are missing
    """
    config = config or ConfluenceConfig.from_env()
    logger.debug(f"Using the {config.api_surface} Confluence API")
    if config.api_surface == "v2":
        return V2ConfluenceFetcher(config)
    return LegacyConfluenceFetcher(config)


__all__ = [
    "ConfluenceClient",
    "ConfluenceConfig",
    "ConfluenceFetcher",
    "ConfluenceOperationsProto",
    "LegacyConfluenceFetcher",
    "V2ConfluenceFetcher",
    "create_confluence_fetcher",
]
