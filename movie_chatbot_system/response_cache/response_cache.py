""" Time-bounded response cache in front of the movie API clients.

Entries are keyed by the request shape (endpoint + params). A live entry is
served without touching the rate limiter; a miss is admitted by the limiter
before the network call. Stale entries are overwritten on the next miss and
never swept, so memory grows with the number of distinct requests.
"""
import logging
import threading
from typing import Any, Callable, Dict, Literal, Optional, Tuple
from movie_chatbot_system.utilities import query_preprocessing
from movie_chatbot_system.rate_limiter.sliding_window_limiter import SlidingWindowRateLimiter, system_clock_ms
# basic log info
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
# logger for the cache
logger = logging.getLogger("Movie_Response_Cache")

# which api a request goes to
ApiSelector = Literal["catalog", "ratings"]


# response cache class
class MovieResponseCache:
    """Class to memoise API payloads for `ttl_ms` milliseconds."""

    def __init__(
            self,
            api_clients: Dict[str, Any],
            rate_limiter: SlidingWindowRateLimiter,
            ttl_ms: int = 5 * 60 * 1000,
            clock: Optional[Callable[[], float]] = None):
        """Initialise the clients, the limiter, the ttl and the clock.

        Args:
            api_clients (dict): Objects with a `get(endpoint, params)` method keyed by api selector.
            rate_limiter (SlidingWindowRateLimiter): Consulted on every cache miss.
            ttl_ms (int): Time-to-live of an entry in milliseconds.
            clock (callable): Returns "now" in milliseconds.
        """
        self.api_clients = api_clients
        self.rate_limiter = rate_limiter
        self.ttl_ms = ttl_ms
        self.clock = clock or system_clock_ms
        # key -> (payload, insertion timestamp)
        self._entries: Dict[str, Tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._entries)

    # read a live entry
    def _lookup(self, cache_key: str, now: float):
        with self._lock:
            cached = self._entries.get(cache_key)
        if cached is None:
            return None
        if now - cached[1] < self.ttl_ms:
            return cached
        return None

    # main cache read-through
    def get(
            self,
            endpoint: str,
            params: Optional[Dict[str, Any]] = None,
            api_selector: ApiSelector = "catalog"):
        """Function to return the payload for (endpoint, params), from cache or network.

        Args:
            endpoint (str): API path like '/movie/popular'.
            params (dict): Query params of the call.
            api_selector (str): 'catalog' or 'ratings'.

        Returns:
            The decoded payload.

        Raises:
            RateLimitExceeded: on a miss when the limiter is full, nothing is cached.
            KeyError: unknown api selector.
        """
        params = params or {}
        cache_key = query_preprocessing.build_cache_key(endpoint, params)
        now = self.clock()

        cached = self._lookup(cache_key, now)
        if cached is not None:
            logger.info(f"Cache hit for {endpoint}")
            return cached[0]

        api_client = self.api_clients[api_selector]
        # miss -> consume quota first, failures propagate untouched
        self.rate_limiter.admit()
        logger.info(f"Cache miss for {endpoint}, calling {api_selector} API")
        payload = api_client.get(endpoint, params)

        with self._lock:
            self._entries[cache_key] = (payload, now)
        return payload

    def clear(self):
        """Function to drop all entries."""
        with self._lock:
            self._entries.clear()
