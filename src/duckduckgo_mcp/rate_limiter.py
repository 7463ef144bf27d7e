"""
Request quota tracking for the search tool.
Rejects calls once the per-second or per-month ceiling is reached.
"""

import logging
import time
from typing import Callable

from .config import DEFAULT_PER_MONTH_LIMIT, DEFAULT_PER_SECOND_LIMIT
from .errors import RateLimitExceeded

logger = logging.getLogger(__name__)

WINDOW_SECONDS = 1.0


class RateLimiter:
    """In-memory quota guard with a rolling one-second window and a monthly ceiling."""

    def __init__(self, per_second_limit: int = DEFAULT_PER_SECOND_LIMIT,
                 per_month_limit: int = DEFAULT_PER_MONTH_LIMIT,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize the rate limiter.

        Args:
            per_second_limit: Maximum accepted calls within one window
            per_month_limit: Maximum accepted calls for the lifetime of this limiter
            clock: Returns the current time in seconds
        """
        self.per_second_limit = per_second_limit
        self.per_month_limit = per_month_limit
        self._clock = clock

        self._second_count = 0
        # Never rolled over; only a new limiter (process restart) clears it
        self._month_count = 0
        self._window_start = clock()

    def admit(self) -> None:
        """
        Account for one request.

        Raises:
            RateLimitExceeded: If either ceiling has been reached. Counters are left untouched.
        """
        now = self._clock()
        if now - self._window_start > WINDOW_SECONDS:
            self._second_count = 0
            self._window_start = now

        if (self._second_count >= self.per_second_limit or
                self._month_count >= self.per_month_limit):
            usage = self.usage()
            logger.warning(
                f"Rate limit exceeded ({usage['second']}/{usage['per_second_limit']} per second, "
                f"{usage['month']}/{usage['per_month_limit']} per month)"
            )
            raise RateLimitExceeded()

        self._second_count += 1
        self._month_count += 1

    def usage(self) -> dict:
        """
        Get the current counter state.

        Returns:
            Dictionary with counters and ceilings
        """
        return {
            "second": self._second_count,
            "month": self._month_count,
            "per_second_limit": self.per_second_limit,
            "per_month_limit": self.per_month_limit,
            "window_start": self._window_start,
        }
