"""FastMCP server initialization for Routinely MCP."""

import logging

from mcp.server.fastmcp import FastMCP

from routinely_mcp.config import get_settings
from routinely_mcp.logging_setup import setup_logging

logger = logging.getLogger(__name__)

# Initialize the MCP server
mcp = FastMCP("routinely_mcp")


def run() -> None:
    """Run the MCP server."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    # Importing the tools registers them with the server
    import routinely_mcp.tools  # noqa: F401

    logger.info("Starting routinely_mcp data_file=%s", settings.data_file)
    mcp.run()


if __name__ == "__main__":
    run()
