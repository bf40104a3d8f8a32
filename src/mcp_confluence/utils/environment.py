"""Environment-driven server switches: read-only mode and the tool allow-list."""

import logging
import os

logger = logging.getLogger("mcp-confluence.utils.environment")

TRUTHY_VALUES = ("true", "1", "yes", "y", "on")


def is_read_only_mode() -> bool:
    """Check whether write tools (create, update, label changes) are disabled.

    Controlled by ``READ_ONLY_MODE``.
    """
    return os.getenv("READ_ONLY_MODE", "false").strip().lower() in TRUTHY_VALUES


def get_enabled_tools() -> list[str] | None:
    """Parse ``ENABLED_TOOLS`` into a list of tool names.

    Returns:
        The stripped, non-empty names, or None when the variable is unset or
        holds no names (meaning every tool is enabled).

    Examples:
        ENABLED_TOOLS="confluence_search, confluence_get_page" -> two names
        ENABLED_TOOLS=" , " -> None
    """
    raw_value = os.getenv("ENABLED_TOOLS")
    if not raw_value:
        return None

    tools = [name.strip() for name in raw_value.split(",") if name.strip()]
    logger.debug(f"Enabled tools from environment: {tools}")
    return tools or None


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Check a tool against the allow-list; None allows everything."""
    return enabled_tools is None or tool_name in enabled_tools
