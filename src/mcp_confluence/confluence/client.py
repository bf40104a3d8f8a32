"""Base client module for Confluence API interactions."""

import logging

from atlassian import Confluence
from requests.exceptions import HTTPError, RequestException

from ..exceptions import ConfluenceConnectionError
from ..utils.logging import log_config_param
from .config import ConfluenceConfig
from .errors import get_error_message, get_status_code

# Configure logging
logger = logging.getLogger("mcp-confluence.confluence.client")

CONNECTION_ERROR_MESSAGES = {
    401: "Authentication failed: Invalid API token or email",
    403: "Authorization failed: Insufficient permissions",
    404: "API endpoint not found: Check Confluence domain",
}
SERVER_ERROR_MESSAGE = "Confluence server error: API may be temporarily unavailable"
GENERIC_CONNECTION_ERROR_MESSAGE = "Failed to connect to Confluence API"


class ConfluenceClient:
    """Base client for Confluence API interactions.

    Subclasses pick an API surface by setting ``api_root`` and
    ``spaces_resource`` and by building the transport handle in
    ``_create_transport``.
    """

    api_root: str = ""
    spaces_resource: str = ""

    def __init__(self, config: ConfluenceConfig | None = None) -> None:
        """Initialize the Confluence client with given or environment config.

        No request is sent; call ``verify_connection`` to check the
        credentials.

        Args:
            config: Configuration for Confluence client. If None, will load from
                environment.

        Raises:
            ValueError: If configuration is invalid or environment variables are missing
        """
        self.config = config or ConfluenceConfig.from_env()

        log_config_param(logger, "URL", self.config.url)
        log_config_param(logger, "API surface", self.config.api_surface)
        log_config_param(logger, "auth type", self.config.auth_type)
        if self.config.auth_type == "token":
            log_config_param(
                logger, "personal token", self.config.personal_token, sensitive=True
            )
        else:
            log_config_param(logger, "username", self.config.username)
            log_config_param(logger, "API token", self.config.api_token, sensitive=True)

        if not self.config.ssl_verify:
            logger.warning(
                f"SSL verification disabled for Confluence ({self.config.url}). "
                "This is insecure and should only be used in testing environments."
            )

        self.confluence = self._create_transport()

    def _create_transport(self) -> Confluence:
        """Build the authenticated ``atlassian.Confluence`` handle."""
        raise NotImplementedError("Subclasses must implement _create_transport")

    def _path(self, *parts: object) -> str:
        """Join path segments below this surface's API root."""
        return "/".join([self.api_root, *(str(part) for part in parts)])

    @property
    def api_base(self) -> str:
        """Absolute base URL of this surface's API, e.g. ``.../wiki/rest/api``."""
        return f"{self.confluence.url.rstrip('/')}/{self.api_root}"

    def verify_connection(self) -> None:
        """
        Check credentials and reachability with one cheap read.

        Lists a single space on this client's own API surface.

        Raises:
            ConfluenceConnectionError: If the request fails for any transport
                reason
        """
        try:
            self.confluence.get(self._path(self.spaces_resource), params={"limit": 1})
        except HTTPError as http_err:
            status_code = get_status_code(http_err)
            if status_code is not None and status_code >= 500:
                message = SERVER_ERROR_MESSAGE
            else:
                message = CONNECTION_ERROR_MESSAGES.get(
                    status_code, GENERIC_CONNECTION_ERROR_MESSAGE
                )
            logger.error(f"{message} ({status_code}): {get_error_message(http_err)}")
            raise ConfluenceConnectionError(message, status_code) from http_err
        except RequestException as e:
            logger.error(f"{GENERIC_CONNECTION_ERROR_MESSAGE}: {e}")
            raise ConfluenceConnectionError(GENERIC_CONNECTION_ERROR_MESSAGE) from e

        logger.info(
            f"Connected to Confluence at {self.config.url} "
            f"({self.config.api_surface} API)"
        )
