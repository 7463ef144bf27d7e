import unittest

from duckduckgo_mcp.errors import RateLimitExceeded
from duckduckgo_mcp.rate_limiter import RateLimiter


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestRateLimiter(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()

    def test_first_call_admitted(self) -> None:
        limiter = RateLimiter(clock=self.clock)
        limiter.admit()
        self.assertEqual(limiter.usage()["second"], 1)
        self.assertEqual(limiter.usage()["month"], 1)

    def test_second_call_in_same_window_rejected(self) -> None:
        limiter = RateLimiter(clock=self.clock)
        limiter.admit()
        self.clock.advance(0.5)
        with self.assertRaises(RateLimitExceeded) as ctx:
            limiter.admit()
        self.assertEqual(str(ctx.exception), "Rate limit exceeded")

    def test_rejection_does_not_mutate_counters(self) -> None:
        limiter = RateLimiter(clock=self.clock)
        limiter.admit()
        before = limiter.usage()
        with self.assertRaises(RateLimitExceeded):
            limiter.admit()
        self.assertEqual(limiter.usage(), before)

    def test_window_resets_after_more_than_one_second(self) -> None:
        limiter = RateLimiter(clock=self.clock)
        limiter.admit()
        self.clock.advance(1.001)
        limiter.admit()
        self.assertEqual(limiter.usage()["second"], 1)
        self.assertEqual(limiter.usage()["month"], 2)

    def test_exactly_one_second_is_same_window(self) -> None:
        limiter = RateLimiter(clock=self.clock)
        limiter.admit()
        self.clock.advance(1.0)
        with self.assertRaises(RateLimitExceeded):
            limiter.admit()

    def test_per_second_limit_is_configurable(self) -> None:
        limiter = RateLimiter(per_second_limit=3, clock=self.clock)
        for _ in range(3):
            limiter.admit()
        with self.assertRaises(RateLimitExceeded):
            limiter.admit()

    def test_monthly_ceiling_rejects_regardless_of_time(self) -> None:
        limiter = RateLimiter(clock=self.clock)
        for _ in range(15000):
            limiter.admit()
            self.clock.advance(1.5)
        self.assertEqual(limiter.usage()["month"], 15000)

        self.clock.advance(3600)
        with self.assertRaises(RateLimitExceeded):
            limiter.admit()

    def test_monthly_counter_never_rolls_over(self) -> None:
        limiter = RateLimiter(per_second_limit=10, per_month_limit=2, clock=self.clock)
        limiter.admit()
        limiter.admit()
        # 40 days later, still rejected within the same limiter lifetime
        self.clock.advance(40 * 24 * 3600)
        with self.assertRaises(RateLimitExceeded):
            limiter.admit()

    def test_rejection_logs_usage(self) -> None:
        limiter = RateLimiter(per_second_limit=1, per_month_limit=50, clock=self.clock)
        limiter.admit()
        with self.assertLogs("duckduckgo_mcp.rate_limiter", level="WARNING") as logs:
            with self.assertRaises(RateLimitExceeded):
                limiter.admit()
        self.assertIn("Rate limit exceeded (1/1 per second, 1/50 per month)", logs.output[0])

    def test_usage_reports_limits(self) -> None:
        limiter = RateLimiter(per_second_limit=2, per_month_limit=50, clock=self.clock)
        usage = limiter.usage()
        self.assertEqual(usage["per_second_limit"], 2)
        self.assertEqual(usage["per_month_limit"], 50)
        self.assertEqual(usage["window_start"], 1000.0)


if __name__ == "__main__":
    unittest.main()
