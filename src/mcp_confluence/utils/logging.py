"""Logging utilities for MCP Confluence.

All log output goes to stderr so that the stdio transport's stdout stays
reserved for protocol messages.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"
APP_LOGGER_NAME = "mcp-confluence"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure the root logger and the application loggers.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The application logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace any handlers left over from a previous call
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    for logger_name in (APP_LOGGER_NAME, "mcp.server", "mcp.server.lowlevel.server"):
        logging.getLogger(logger_name).setLevel(level)

    return logging.getLogger(APP_LOGGER_NAME)


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    hidden = "*" * (len(value) - keep_chars * 2)
    return f"{value[:keep_chars]}{hidden}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log a Confluence configuration parameter, masking it if sensitive."""
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"Confluence {param}: {display_value}")
