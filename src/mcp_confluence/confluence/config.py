"""Configuration module for the Confluence client."""

import base64
import logging
import os
from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlparse

from ..utils.urls import is_atlassian_cloud_url

logger = logging.getLogger("mcp-confluence.confluence.config")

API_SURFACES = ("legacy", "v2")


@dataclass(frozen=True)
class ConfluenceConfig:
    """Confluence API configuration.

    Created once at startup and never mutated. Two upstream API generations
    are supported behind the same operations:
    - legacy: the ``/rest/api`` content API (CQL search, ``expand``)
    - v2: the typed ``/api/v2`` pages/spaces API
    """

    url: str  # Base URL for Confluence
    auth_type: Literal["basic", "token"] = "basic"
    username: str | None = None  # Email or username
    api_token: str | None = None  # API token used as password
    personal_token: str | None = None  # Personal access token (Server/DC)
    api_surface: Literal["legacy", "v2"] = "legacy"
    ssl_verify: bool = True

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Confluence URL must not be empty")
        if self.api_surface not in API_SURFACES:
            raise ValueError(
                f"Unsupported API surface '{self.api_surface}'. "
                f"Expected one of: {', '.join(API_SURFACES)}"
            )
        if self.auth_type not in ("basic", "token"):
            raise ValueError(f"Unsupported auth_type '{self.auth_type}'")

    @property
    def domain(self) -> str:
        """Host name of the Confluence site, e.g. ``acme.atlassian.net``."""
        return urlparse(self.url).netloc

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance."""
        return is_atlassian_cloud_url(self.url)

    @property
    def auth_header(self) -> str:
        """Authorization header value derived from the credentials."""
        if self.auth_type == "token":
            return f"Bearer {self.personal_token}"
        credentials = f"{self.username}:{self.api_token}".encode()
        return f"Basic {base64.b64encode(credentials).decode('ascii')}"

    @classmethod
    def from_env(cls) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        Returns:
            ConfluenceConfig with values from environment variables

        Raises:
            ValueError: If the URL or the credentials are missing, or the
                API surface is unknown
        """
        url = os.getenv("CONFLUENCE_URL")
        if not url:
            domain = os.getenv("CONFLUENCE_DOMAIN")
            if not domain:
                error_msg = "Missing required CONFLUENCE_URL (or CONFLUENCE_DOMAIN) environment variable"
                raise ValueError(error_msg)
            url = f"https://{domain.strip('/')}"

        username = os.getenv("CONFLUENCE_USERNAME") or os.getenv("CONFLUENCE_EMAIL")
        api_token = os.getenv("CONFLUENCE_API_TOKEN")
        personal_token = os.getenv("CONFLUENCE_PERSONAL_TOKEN")

        if username and api_token:
            auth_type = "basic"
        elif personal_token and not is_atlassian_cloud_url(url):
            auth_type = "token"
        else:
            error_msg = (
                "Confluence authentication requires CONFLUENCE_USERNAME and "
                "CONFLUENCE_API_TOKEN (or CONFLUENCE_PERSONAL_TOKEN for Server/Data Center)"
            )
            raise ValueError(error_msg)

        api_surface = os.getenv("CONFLUENCE_API_SURFACE", "legacy").strip().lower()

        ssl_verify_env = os.getenv("CONFLUENCE_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            api_surface=api_surface,
            ssl_verify=ssl_verify,
        )

    def is_auth_configured(self) -> bool:
        """Check whether the credentials are complete for making API calls."""
        if self.auth_type == "token":
            return bool(self.personal_token)
        if self.auth_type == "basic":
            return bool(self.username and self.api_token)
        logger.warning(f"Unknown or unsupported auth_type: {self.auth_type}")
        return False
