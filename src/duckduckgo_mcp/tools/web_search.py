"""
DuckDuckGo Web Search Tool - the single tool this server exposes.
"""

import logging
from typing import Optional, Union

from pydantic import Field, StrictFloat, StrictInt, StrictStr

from .base import ToolBase, ToolInput, ToolMetadata
from ..search import DEFAULT_COUNT, SearchAdapter

logger = logging.getLogger(__name__)

TOOL_NAME = "duckduckgo_web_search"


class WebSearchInput(ToolInput):
    """Input schema for the web search tool."""
    query: StrictStr = Field(
        ...,
        description="Search query (max 400 chars)"
    )
    count: Optional[Union[StrictInt, StrictFloat]] = Field(
        default=DEFAULT_COUNT,
        description="Number of results (1-20, default 10)"
    )


class WebSearchTool(ToolBase):
    """
    Performs a web search using DuckDuckGo.

    The 400-character query limit and the 1-20 count range are advertised to
    the agent but not enforced here; counts above 20 are capped and fractional
    counts truncated when results are formatted.

    Examples:
    - {"query": "python asyncio tutorial"}
    - {"query": "mcp protocol", "count": 5}
    """

    METADATA = ToolMetadata(
        name=TOOL_NAME,
        description=(
            "Performs a web search using DuckDuckGo, ideal for general queries, news, articles, and online content. "
            "Use this for broad information gathering, recent events, or when you need diverse web sources. "
            "Supports content filtering and region-specific searches. "
            "Maximum 20 results per request."
        ),
    )

    InputSchema = WebSearchInput

    INPUT_SCHEMA = {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query (max 400 chars)",
            },
            "count": {
                "type": "number",
                "description": "Number of results (1-20, default 10)",
                "default": DEFAULT_COUNT,
            },
        },
        "required": ["query"],
    }

    def __init__(self, adapter: SearchAdapter):
        self.adapter = adapter

    async def execute(self, input_data: WebSearchInput) -> str:
        """
        Run the search.

        Args:
            input_data: Validated search parameters

        Returns:
            Markdown-formatted results
        """
        logger.debug(f"Executing web search: {input_data.query} (count={input_data.count})")
        return await self.adapter.search(input_data.query, input_data.count)
