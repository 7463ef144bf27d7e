"""
DuckDuckGo search provider.
Wraps the ddgs scraping client and returns typed result items.
"""

import asyncio
import logging
from typing import List, Optional

from ddgs import DDGS
from ddgs.exceptions import DDGSException
from pydantic import BaseModel, Field

from .errors import ProviderError

logger = logging.getLogger(__name__)

# Upper bound on results fetched per query; callers slice further
MAX_RESULTS = 20


class SearchResultItem(BaseModel):
    """One web search hit."""
    title: str = Field(..., description="Page title")
    description: Optional[str] = Field(default=None, description="Result snippet")
    url: str = Field(..., description="Page URL")


class DuckDuckGoProvider:
    """Runs DuckDuckGo text searches through ddgs."""

    def __init__(self, max_results: int = MAX_RESULTS, timeout: int = 10):
        self.max_results = max_results
        self.timeout = timeout

    def _search_sync(self, query: str, safesearch: str) -> List[dict]:
        with DDGS(timeout=self.timeout) as ddgs:
            return ddgs.text(query, safesearch=safesearch, max_results=self.max_results) or []

    async def search(self, query: str, safesearch: str = "off") -> List[SearchResultItem]:
        """
        Search DuckDuckGo.

        Args:
            query: Search query
            safesearch: Content filtering mode ('on', 'moderate', 'off')

        Returns:
            Result items in the order DuckDuckGo ranked them

        Raises:
            ProviderError: If the search request or result parsing fails
        """
        logger.debug(f"Searching DuckDuckGo for: {query}")
        try:
            # ddgs is blocking, keep it off the event loop
            raw_results = await asyncio.to_thread(self._search_sync, query, safesearch)
        except DDGSException as e:
            # ddgs reports an empty result page as an exception
            if str(e).lower().startswith("no results"):
                return []
            raise ProviderError(f"DuckDuckGo search failed: {e}") from e

        return [
            SearchResultItem(
                title=r.get("title", ""),
                description=r.get("body") or None,
                url=r.get("href", ""),
            )
            for r in raw_results
        ]
