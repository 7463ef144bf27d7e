import asyncio
import sys

def main():
    """Main entry point for the package."""
    # Lazy import to avoid loading the MCP SDK at package import time
    from . import server
    from .errors import TransportInitFailure
    try:
        asyncio.run(server.main())
    except TransportInitFailure:
        sys.exit(1)

__all__ = [
    "main",
]
