"""
Error types raised by the search server.

Everything below the MCP boundary raises one of these; the tool-call handler
turns them into error-flagged text payloads. Only TransportInitFailure is fatal.
"""


class SearchServerError(Exception):
    """Base class for all search server errors."""


class InvalidArgument(SearchServerError):
    """Missing or malformed tool arguments."""


class UnknownCapability(SearchServerError):
    """Tool call names a tool that is not registered."""


class RateLimitExceeded(SearchServerError):
    """A per-second or per-month quota ceiling was reached."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message)


class ProviderError(SearchServerError):
    """The external search provider failed."""


class TransportInitFailure(SearchServerError):
    """The MCP transport could not be started."""
