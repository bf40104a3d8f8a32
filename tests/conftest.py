"""
Root pytest configuration file for MCP Confluence tests.
"""

import pytest


@pytest.fixture
def clean_confluence_env(monkeypatch):
    """Remove every Confluence-related variable from the environment."""
    for name in (
        "CONFLUENCE_URL",
        "CONFLUENCE_DOMAIN",
        "CONFLUENCE_USERNAME",
        "CONFLUENCE_EMAIL",
        "CONFLUENCE_API_TOKEN",
        "CONFLUENCE_PERSONAL_TOKEN",
        "CONFLUENCE_API_SURFACE",
        "CONFLUENCE_SSL_VERIFY",
        "READ_ONLY_MODE",
        "ENABLED_TOOLS",
    ):
        monkeypatch.delenv(name, raising=False)
