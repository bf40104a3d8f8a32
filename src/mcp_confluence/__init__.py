import asyncio
import logging
import os
import sys

import click
from dotenv import load_dotenv

from mcp_confluence.exceptions import MCPConfluenceError
from mcp_confluence.utils.logging import setup_logging

__version__ = "0.1.0"

TRUTHY = ("true", "1", "yes")

# Initialize logging with appropriate level
logging_level = logging.WARNING
if os.getenv("MCP_VERBOSE", "").lower() in TRUTHY:
    logging_level = logging.DEBUG

# Set up logging using the utility function
logger = setup_logging(logging_level)


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio, sse, or streamable-http)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE or Streamable HTTP transport",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind to for SSE or Streamable HTTP transport (default: 0.0.0.0)",
)
@click.option(
    "--confluence-url",
    help="Confluence URL (e.g., https://your-domain.atlassian.net/wiki)",
)
@click.option("--confluence-username", help="Confluence username/email")
@click.option("--confluence-token", help="Confluence API token")
@click.option(
    "--confluence-personal-token",
    help="Confluence Personal Access Token (for Confluence Server/Data Center)",
)
@click.option(
    "--api-surface",
    type=click.Choice(["legacy", "v2"]),
    default="legacy",
    help="Confluence API generation to use: legacy /rest/api or typed /api/v2",
)
@click.option(
    "--confluence-ssl-verify/--no-confluence-ssl-verify",
    default=True,
    help="Verify SSL certificates for Confluence Server/Data Center (default: verify)",
)
@click.option(
    "--read-only",
    is_flag=True,
    help="Run in read-only mode (disables all write operations)",
)
@click.option(
    "--enabled-tools",
    help="Comma-separated list of tools to enable (enables all if not specified)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    confluence_url: str | None,
    confluence_username: str | None,
    confluence_token: str | None,
    confluence_personal_token: str | None,
    api_surface: str,
    confluence_ssl_verify: bool,
    read_only: bool,
    enabled_tools: str | None,
) -> None:
    """MCP Confluence Server - Confluence spaces, pages, search and labels for MCP

    Supports both Atlassian Cloud and Confluence Server/Data Center deployments.
    Authentication methods supported:
    - Username and API token (Cloud)
    - Personal Access Token (Server/Data Center)
    """
    # Logging level logic
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        if os.getenv("MCP_VERY_VERBOSE", "false").lower() in TRUTHY:
            current_logging_level = logging.DEBUG
        elif os.getenv("MCP_VERBOSE", "false").lower() in TRUTHY:
            current_logging_level = logging.INFO
        else:
            current_logging_level = logging.WARNING

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    def was_option_provided(ctx: click.Context, param_name: str) -> bool:
        return (
            ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT_MAP
            and ctx.get_parameter_source(param_name)
            != click.core.ParameterSource.DEFAULT
        )

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)

    click_ctx = click.get_current_context(silent=True)

    # Transport precedence
    final_transport = os.getenv("TRANSPORT", "stdio").lower()
    if click_ctx and was_option_provided(click_ctx, "transport"):
        final_transport = transport
    if final_transport not in ["stdio", "sse", "streamable-http"]:
        logger.warning(
            f"Invalid transport '{final_transport}' from env/default, using 'stdio'."
        )
        final_transport = "stdio"
    logger.debug(f"Final transport determined: {final_transport}")

    # Port precedence
    final_port = 8000
    env_port = os.getenv("PORT")
    if env_port and env_port.isdigit():
        final_port = int(env_port)
    if click_ctx and was_option_provided(click_ctx, "port"):
        final_port = port
    logger.debug(f"Final port for HTTP transports: {final_port}")

    # Host precedence
    final_host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    if click_ctx and was_option_provided(click_ctx, "host"):
        final_host = host
    logger.debug(f"Final host for HTTP transports: {final_host}")

    # Set env vars for downstream config
    env_overrides = {
        "enabled_tools": ("ENABLED_TOOLS", enabled_tools),
        "confluence_url": ("CONFLUENCE_URL", confluence_url),
        "confluence_username": ("CONFLUENCE_USERNAME", confluence_username),
        "confluence_token": ("CONFLUENCE_API_TOKEN", confluence_token),
        "confluence_personal_token": (
            "CONFLUENCE_PERSONAL_TOKEN",
            confluence_personal_token,
        ),
        "api_surface": ("CONFLUENCE_API_SURFACE", api_surface),
        "read_only": ("READ_ONLY_MODE", str(read_only).lower()),
        "confluence_ssl_verify": (
            "CONFLUENCE_SSL_VERIFY",
            str(confluence_ssl_verify).lower(),
        ),
    }
    for param_name, (env_name, value) in env_overrides.items():
        if click_ctx and was_option_provided(click_ctx, param_name) and value:
            os.environ[env_name] = value

    from mcp_confluence.servers import main_mcp

    run_kwargs = {
        "transport": final_transport,
    }

    if final_transport == "stdio":
        logger.info("Starting server with STDIO transport.")
    else:
        run_kwargs["host"] = final_host
        run_kwargs["port"] = final_port
        run_kwargs["log_level"] = logging.getLevelName(current_logging_level).lower()

        if final_transport == "sse":
            log_display_path = main_mcp.settings.sse_path or "/sse"
        else:
            log_display_path = main_mcp.settings.streamable_http_path or "/mcp"

        logger.info(
            f"Starting server with {final_transport.upper()} transport on http://{final_host}:{final_port}{log_display_path}"
        )

    try:
        asyncio.run(main_mcp.run_async(**run_kwargs))
    except (MCPConfluenceError, ValueError) as e:
        logger.error(f"Confluence MCP server failed to start: {e}")
        sys.exit(1)


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
