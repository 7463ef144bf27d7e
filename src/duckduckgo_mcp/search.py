"""
Rate-limited web search with markdown formatting.
"""

import logging
from typing import List, Optional, Protocol

from .provider import SearchResultItem
from .rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 10
MAX_COUNT = 20

RESULTS_HEADING = "# DuckDuckGo Search Results"


class SearchProvider(Protocol):
    async def search(self, query: str, safesearch: str = "off") -> Optional[List[SearchResultItem]]:
        ...


def format_no_results(query: str) -> str:
    return f'{RESULTS_HEADING}\nNo results found for "{query}".'


def format_result(item: SearchResultItem) -> str:
    """Render one result as a markdown block."""
    return f"""### {item.title}
{item.description or ''}

🔗 [Read more]({item.url})
"""


def format_results(query: str, items: List[SearchResultItem]) -> str:
    """Render the result page: heading, summary line, separator, result blocks."""
    formatted = "\n\n".join(format_result(item) for item in items)
    return f"""{RESULTS_HEADING}
{query} search results ({len(items)} found)

---

{formatted}
"""


def result_limit(count: Optional[float]) -> int:
    """
    Number of results to keep for a requested count.

    Fractional counts truncate toward zero and a null count keeps nothing;
    the result is never more than 20 and never negative.
    """
    if count is None:
        return 0
    return max(0, int(min(count, MAX_COUNT)))


class SearchAdapter:
    """Checks quota, calls the provider and formats what comes back."""

    def __init__(self, provider: SearchProvider, rate_limiter: RateLimiter):
        self.provider = provider
        self.rate_limiter = rate_limiter

    async def search(self, query: str, count: Optional[float] = DEFAULT_COUNT) -> str:
        """
        Run a web search and return markdown-formatted results.

        Raises:
            RateLimitExceeded: Quota reached; the provider is not called
            ProviderError: Propagated unchanged from the provider
        """
        self.rate_limiter.admit()

        try:
            results = await self.provider.search(query, safesearch="off")
        except Exception as e:
            logger.error(f"Error performing web search: {e}")
            raise

        if not results:
            return format_no_results(query)

        limited = results[:result_limit(count)]
        logger.info(f"Search for '{query}' returned {len(results)} results, keeping {len(limited)}")
        return format_results(query, limited)
