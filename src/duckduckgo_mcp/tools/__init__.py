"""
MCP tool definitions.

Each tool has a typed input model (pydantic) and publishes its MCP descriptor
through ToolBase.to_mcp_tool().
"""

from .base import ToolBase, ToolMetadata, ToolInput
from .web_search import TOOL_NAME, WebSearchInput, WebSearchTool

__all__ = [
    "ToolBase",
    "ToolMetadata",
    "ToolInput",
    "TOOL_NAME",
    "WebSearchInput",
    "WebSearchTool",
]
