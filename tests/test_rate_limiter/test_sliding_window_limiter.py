""" Unittest TestSuite -> Sliding Window Rate Limiter """
import unittest
import logging
from movie_chatbot_system.rate_limiter.sliding_window_limiter import SlidingWindowRateLimiter, RateLimitExceeded
# set up logging for this test file
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
# logger- rate limiter
logger = logging.getLogger("TestSlidingWindowRateLimiter")


# controllable clock in milliseconds
class FakeClock:
    def __init__(self, now: float = 0):
        self.now = now

    def __call__(self):
        return self.now


# TestSuite - Sliding Window Rate Limiter
class TestSlidingWindowRateLimiter(unittest.TestCase):
    """Test suite for admission, wait time and remaining quota."""

    def setUp(self):
        # define fake clock and a small limiter
        self.clock = FakeClock(0)
        self.limiter = SlidingWindowRateLimiter(max_requests=3, time_window_ms=10000, clock=self.clock)

    # test - admits up to the cap
    def test_admit_until_cap(self):
        """Test that the first max_requests attempts are admitted."""
        logger.info(f"Running test_admit_until_cap")
        for now in (0, 1000, 2000):
            self.clock.now = now
            self.assertTrue(self.limiter.admit())
        self.assertEqual(self.limiter.remaining(), 0)

    # test - the cap + 1 attempt fails with the wait time
    def test_admit_over_cap_raises_with_wait_time(self):
        """Test wait = window - (now - oldest retained), rounded up to seconds."""
        logger.info(f"Running test_admit_over_cap_raises_with_wait_time")
        for now in (0, 1000, 2000):
            self.clock.now = now
            self.limiter.admit()
        # 10000 - (2500 - 0) = 7500ms -> 8 seconds
        self.clock.now = 2500
        with self.assertRaises(RateLimitExceeded) as ctx:
            self.limiter.admit()
        self.assertEqual(ctx.exception.retry_after_seconds, 8)
        self.assertEqual(str(ctx.exception), "Rate limit exceeded. Please wait 8 seconds.")

    # test - failed attempt is not recorded
    def test_rejected_attempt_does_not_consume_quota(self):
        """Test a rejected attempt leaves the window unchanged."""
        logger.info(f"Running test_rejected_attempt_does_not_consume_quota")
        for now in (0, 1000, 2000):
            self.clock.now = now
            self.limiter.admit()
        self.clock.now = 3000
        with self.assertRaises(RateLimitExceeded):
            self.limiter.admit()
        # oldest expires at 10000, one slot frees up
        self.clock.now = 10000
        self.assertEqual(self.limiter.remaining(), 1)
        self.assertTrue(self.limiter.admit())

    # test - old timestamps are pruned
    def test_window_slides(self):
        """Test that entries leave the window exactly after time_window_ms."""
        logger.info(f"Running test_window_slides")
        self.clock.now = 0
        self.limiter.admit()
        self.clock.now = 9999
        self.assertEqual(self.limiter.remaining(), 2)
        self.clock.now = 10000
        self.assertEqual(self.limiter.remaining(), 3)

    # test - remaining is read only
    def test_remaining_does_not_consume(self):
        """Test remaining() can be called repeatedly without changing the quota."""
        logger.info(f"Running test_remaining_does_not_consume")
        self.limiter.admit()
        for _ in range(10):
            self.assertEqual(self.limiter.remaining(), 2)
        self.limiter.admit()
        self.limiter.admit()
        self.assertEqual(self.limiter.remaining(), 0)

    # test - rolling window never exceeds the cap
    def test_rolling_window_never_exceeds_cap(self):
        """Test at most max_requests admissions in any trailing window."""
        logger.info(f"Running test_rolling_window_never_exceeds_cap")
        limiter = SlidingWindowRateLimiter(max_requests=5, time_window_ms=1000, clock=self.clock)
        admitted = []
        # one attempt every 70ms for 10 seconds
        for now in range(0, 10000, 70):
            self.clock.now = now
            try:
                limiter.admit()
                admitted.append(now)
            except RateLimitExceeded:
                pass
        self.assertTrue(admitted)
        for admitted_at in admitted:
            in_window = [t for t in admitted if admitted_at - 1000 < t <= admitted_at]
            self.assertLessEqual(len(in_window), 5)

    # test - invalid configuration
    def test_invalid_configuration(self):
        """Test constructor guards."""
        logger.info(f"Running test_invalid_configuration")
        with self.assertRaises(ValueError):
            SlidingWindowRateLimiter(max_requests=0)
        with self.assertRaises(ValueError):
            SlidingWindowRateLimiter(time_window_ms=0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
