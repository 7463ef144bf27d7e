#!/usr/bin/env python3
"""
Test the search tool flow end to end with a fake provider.

This script verifies that:
1. handle_list_tools() advertises only duckduckgo_web_search
2. A search call returns markdown results
3. A second call within the same second is rate limited
4. Bad calls come back as error payloads

Usage:
    python scripts/test-search-tool-flow.py
"""

import sys
import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from duckduckgo_mcp.fnc_tools import (
    set_search_adapter,
    handle_list_tools,
    handle_tool_call
)
from duckduckgo_mcp.provider import SearchResultItem
from duckduckgo_mcp.rate_limiter import RateLimiter
from duckduckgo_mcp.search import SearchAdapter


def create_mock_provider():
    """Create a provider returning three canned results."""
    provider = MagicMock()
    provider.search = AsyncMock(return_value=[
        SearchResultItem(title=f"Result {i}", description=f"Snippet {i}", url=f"https://example.com/{i}")
        for i in range(3)
    ])
    return provider


async def test_list_tools():
    """Test 1: exactly one tool is advertised."""
    print("\n=== Test 1: Tool Listing ===")

    tools = await handle_list_tools()
    print(f"✓ Tools registered: {[tool.name for tool in tools]}")

    assert len(tools) == 1, f"Expected 1 tool, got {len(tools)}"
    assert tools[0].name == "duckduckgo_web_search"
    assert tools[0].inputSchema["required"] == ["query"]


async def test_search_and_rate_limit():
    """Test 2 and 3: search succeeds, immediate repeat is throttled."""
    print("\n=== Test 2: Search and Rate Limit ===")

    set_search_adapter(SearchAdapter(create_mock_provider(), RateLimiter()))

    result = await handle_tool_call("duckduckgo_web_search", {"query": "python", "count": 2})
    text = result.content[0].text
    print(f"  Result preview: {text[:120]}...")
    assert not result.isError, "Search should succeed"
    assert "(2 found)" in text, "Expected 2 results"

    result = await handle_tool_call("duckduckgo_web_search", {"query": "python"})
    print(f"  Second call: {result.content[0].text}")
    assert result.isError, "Second call in the same second should be rate limited"

    await asyncio.sleep(1.1)
    result = await handle_tool_call("duckduckgo_web_search", {"query": "python"})
    assert not result.isError, "Call in a new window should succeed"
    print("✓ Rate limit window rolls over")


async def test_error_payloads():
    """Test 4: invalid calls are error payloads."""
    print("\n=== Test 3: Error Payloads ===")

    result = await handle_tool_call("duckduckgo_web_search", {"count": 3})
    assert result.isError and "Invalid arguments" in result.content[0].text

    result = await handle_tool_call("bing_search", {"query": "python"})
    assert result.isError and "Unknown tool" in result.content[0].text

    print("✓ Invalid arguments and unknown tools reported as errors")


async def main():
    """Run all tests."""
    print("=" * 70)
    print("Search Tool Flow Test")
    print("=" * 70)

    try:
        await test_list_tools()
        await test_search_and_rate_limit()
        await test_error_payloads()

        print("\n" + "=" * 70)
        print("✅ ALL TESTS PASSED")
        print("=" * 70)
        return 0

    except Exception as e:
        print("\n" + "=" * 70)
        print(f"❌ TEST FAILED: {e}")
        print("=" * 70)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
