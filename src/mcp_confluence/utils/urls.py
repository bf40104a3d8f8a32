"""URL-related utility functions."""

import ipaddress
from urllib.parse import urlparse

CLOUD_HOST_SUFFIXES = (".atlassian.net", ".jira.com", ".jira-dev.com")


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Atlassian Cloud or Server/Data Center.

    Localhost and private-network addresses are always Server/Data Center.

    Args:
        url: The URL to check

    Returns:
        True if the URL is for an Atlassian Cloud instance
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""
    if hostname == "localhost":
        return False
    try:
        if ipaddress.ip_address(hostname).is_private:
            return False
    except ValueError:
        pass

    return hostname.endswith(CLOUD_HOST_SUFFIXES)


def build_web_url(domain: str, webui_path: str | None) -> str:
    """Build a browsable Confluence URL from a ``_links.webui`` path.

    Args:
        domain: Host name of the Confluence site
        webui_path: Relative web UI path as returned by the API

    Returns:
        ``https://{domain}/wiki{webui_path}``
    """
    return f"https://{domain}/wiki{webui_path or ''}"
