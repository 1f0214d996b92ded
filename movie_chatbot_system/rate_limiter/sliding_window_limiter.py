""" Sliding window rate limiter for outbound movie API calls.

Keeps an ordered list of admission timestamps (ms) and prunes it lazily on
every admission attempt. Only cache misses go through here.
"""
import math
import time
import logging
import threading
from typing import Callable, List, Optional
# basic log info
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# logger for the limiter
logger = logging.getLogger("Sliding_Window_Rate_Limiter")


# current time in milliseconds
def system_clock_ms():
    """Function to return the wall clock as milliseconds since epoch."""
    return time.time() * 1000


# raised when the quota for the window is used up
class RateLimitExceeded(Exception):
    """Exception carrying the whole seconds to wait before retrying."""

    def __init__(self, retry_after_seconds: int):
        self.retry_after_seconds = retry_after_seconds
        super().__init__(f"Rate limit exceeded. Please wait {retry_after_seconds} seconds.")


# sliding window limiter class
class SlidingWindowRateLimiter:
    """Class to admit at most `max_requests` calls in any trailing `time_window_ms`."""

    def __init__(
            self,
            max_requests: int = 30,
            time_window_ms: int = 10000,
            clock: Optional[Callable[[], float]] = None):
        """Initialise the quota, the window and the clock.

        Args:
            max_requests (int): Cap of admissions inside the window.
            time_window_ms (int): Window length in milliseconds.
            clock (callable): Returns "now" in milliseconds, defaults to wall clock.
        """
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1.")
        if time_window_ms <= 0:
            raise ValueError("time_window_ms must be positive.")
        self.max_requests = max_requests
        self.time_window_ms = time_window_ms
        self.clock = clock or system_clock_ms
        self._request_timestamps: List[float] = []
        self._lock = threading.Lock()

    # keep only timestamps inside the window
    def _active_timestamps(self, now: float):
        return [
            timestamp for timestamp in self._request_timestamps
            if now - timestamp < self.time_window_ms]

    # 1. admit one request or raise
    def admit(self):
        """Function to record one request, raising RateLimitExceeded when the window is full."""
        with self._lock:
            now = self.clock()
            # drop everything older than the window
            self._request_timestamps = self._active_timestamps(now)

            if len(self._request_timestamps) >= self.max_requests:
                # oldest retained request decides when a slot frees up
                oldest_request = self._request_timestamps[0]
                time_to_wait_ms = self.time_window_ms - (now - oldest_request)
                retry_after_seconds = math.ceil(time_to_wait_ms / 1000)
                logger.warning(f"Rate limit hit, retry after {retry_after_seconds}s")
                raise RateLimitExceeded(retry_after_seconds)

            self._request_timestamps.append(now)
            return True

    # 2. remaining quota, read only
    def remaining(self):
        """Function to count the admissions still available in the current window."""
        with self._lock:
            active_count = len(self._active_timestamps(self.clock()))
        return self.max_requests - active_count
