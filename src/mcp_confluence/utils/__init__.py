"""
Utility functions for the MCP Confluence integration.
"""

from .date import parse_date, utc_now_iso
from .environment import get_enabled_tools, is_read_only_mode, should_include_tool
from .logging import mask_sensitive, setup_logging
from .urls import build_web_url, is_atlassian_cloud_url

__all__ = [
    "build_web_url",
    "get_enabled_tools",
    "is_atlassian_cloud_url",
    "is_read_only_mode",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
    "should_include_tool",
    "utc_now_iso",
]
