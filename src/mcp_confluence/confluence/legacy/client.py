"""Client for the legacy ``/rest/api`` content API."""

import logging

from atlassian import Confluence
from requests import Session

from ..client import ConfluenceClient

logger = logging.getLogger("mcp-confluence.confluence.legacy")


class LegacyConfluenceClient(ConfluenceClient):
    """Confluence client speaking the ``/rest/api`` content API."""

    api_root = "rest/api"
    spaces_resource = "space"

    def _create_transport(self) -> Confluence:
        # Auth travels as an explicit header on a pre-built session
        session = Session()
        session.headers.update(
            {
                "Authorization": self.config.auth_header,
                "X-Atlassian-Token": "no-check",
            }
        )
        return Confluence(
            url=self.config.url,
            session=session,
            cloud=self.config.is_cloud,
            verify_ssl=self.config.ssl_verify,
        )
