"""
MCP Tool Handlers for DuckDuckGo Web Search

This module holds the list_tools and call_tool handlers registered with the MCP server.
The call_tool handler is the error boundary: every failure below it comes back to the
client as an error-flagged text payload instead of an exception.
"""

import logging
from typing import Any, Dict, Optional

import mcp.types as types

from .errors import InvalidArgument, UnknownCapability
from .search import SearchAdapter
from .tools import ToolBase, WebSearchTool

logger = logging.getLogger(__name__)

# Registered tools, keyed by name
_tools: Dict[str, ToolBase] = {}


def set_search_adapter(adapter: SearchAdapter):
    """Register the web search tool backed by the given adapter."""
    global _tools
    tool = WebSearchTool(adapter)
    _tools = {tool.METADATA.name: tool}


def format_text_response(text: Any, is_error: bool = False) -> types.CallToolResult:
    """Format a text response."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=str(text))],
        isError=is_error,
    )


def format_error_response(error: str) -> types.CallToolResult:
    """Format an error response."""
    return format_text_response(f"Error: {error}", is_error=True)


# --- MCP Handler Functions ---

async def handle_list_tools() -> list[types.Tool]:
    """
    List available tools.
    The web search tool is always advertised, even before an adapter is registered.
    """
    logger.debug("Listing tools")
    return [WebSearchTool.to_mcp_tool()]


async def execute_tool(name: str, arguments: Optional[Dict[str, Any]]) -> str:
    """Validate the call and run the named tool."""
    if arguments is None:
        raise InvalidArgument("No arguments provided")

    if name != WebSearchTool.METADATA.name:
        raise UnknownCapability(f"Unknown tool: {name}")

    tool = _tools.get(name)
    if tool is None:
        raise RuntimeError(f"Tool {name} is not initialized")

    input_data = tool.validate_input(arguments)
    return await tool.execute(input_data)


async def handle_tool_call(name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
    """
    Handle tool execution requests.
    Never raises: failures are returned as error-flagged results.
    """
    logger.info(f"Calling tool: {name}::{arguments}")

    try:
        result = await execute_tool(name, arguments)
        return format_text_response(result)
    except UnknownCapability as e:
        logger.warning(str(e))
        return format_text_response(str(e), is_error=True)
    except Exception as e:
        logger.error(f"Error executing tool {name}: {e}")
        return format_error_response(str(e))
