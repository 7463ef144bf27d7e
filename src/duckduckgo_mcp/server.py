"""
DuckDuckGo Search MCP Server using FastMCP
Supports all transport methods: stdio, SSE, and streamable-http
"""
import asyncio
import logging
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import SearchServerConfig
from .errors import TransportInitFailure
from .fnc_tools import (
    set_search_adapter,
    handle_list_tools,
    handle_tool_call
)
from .provider import DuckDuckGoProvider
from .rate_limiter import RateLimiter
from .search import SearchAdapter

logger = logging.getLogger(__name__)

SERVER_NAME = "vibebot/duckduckgo-search"
SERVER_VERSION = "0.1.0"


def initialize_search(config: SearchServerConfig, provider: Optional[DuckDuckGoProvider] = None) -> SearchAdapter:
    """Build the rate-limited search adapter and register it with the tool handlers."""
    rate_limiter = RateLimiter(
        per_second_limit=config.per_second_limit,
        per_month_limit=config.per_month_limit,
    )
    adapter = SearchAdapter(provider or DuckDuckGoProvider(), rate_limiter)
    set_search_adapter(adapter)
    logger.info(
        f"Search initialized with limits: {config.per_second_limit}/second, "
        f"{config.per_month_limit}/month"
    )
    return adapter

# Create FastMCP app
app = FastMCP(SERVER_NAME)

# Set up the handlers using the internal MCP server so the tool descriptor is served verbatim
app._mcp_server.version = SERVER_VERSION
app._mcp_server.list_tools()(handle_list_tools)
app._mcp_server.call_tool(validate_input=False)(handle_tool_call)


async def run_transport(config: SearchServerConfig):
    """Run the configured MCP transport until it closes."""
    if config.host:
        app.settings.host = config.host
    if config.port:
        app.settings.port = config.port

    if config.transport == "sse":
        logger.info(f"Starting MCP server on {app.settings.host}:{app.settings.port}")
        await app.run_sse_async()
    elif config.transport == "streamable-http":
        app.settings.streamable_http_path = config.path
        logger.info(f"Starting MCP server on {app.settings.host}:{app.settings.port} with path {app.settings.streamable_http_path}")
        await app.run_streamable_http_async()
    else:
        logger.info("DuckDuckGo Search MCP Server running on stdio")
        await app.run_stdio_async()


async def main():
    """Main entry point for the server."""
    # Configure logging; stdout is reserved for the stdio transport
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    config = SearchServerConfig.from_environment()
    logging.getLogger().setLevel(config.log_level)
    logger.info(f"MCP_TRANSPORT: {config.transport}")

    initialize_search(config)

    try:
        await run_transport(config)
    except Exception as e:
        logger.error(f"Fatal error running server: {e}")
        raise TransportInitFailure(str(e)) from e

if __name__ == "__main__":
    asyncio.run(main())
