import asyncio
import time
import logging
from typing import Awaitable, Callable, Dict

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]
ClockFunc = Callable[[], float]


class PacingPolicy:
    """Decides how long the crawler waits between extraction calls

    ``mark_request`` runs as each request goes out. ``wait`` runs after a
    page has been processed and its links queued.
    ``backoff`` runs before a retry.
    """

    def __init__(self, sleep: SleepFunc = asyncio.sleep, clock: ClockFunc = time.monotonic):
        self._sleep = sleep
        self._clock = clock
        self.total_wait = 0.0

    def mark_request(self) -> None:
        """Called right before every extraction request"""
        pass

    async def wait(self) -> None:
        pass

    async def backoff(self, seconds: float) -> None:
        """Sleep a fixed amount before retrying a failed page"""
        if seconds > 0:
            logger.debug(f"Backing off for {seconds:.1f}s")
            await self._pause(seconds)

    async def _pause(self, seconds: float):
        self.total_wait += seconds
        await self._sleep(seconds)

    def get_stats(self) -> Dict:
        return {
            'policy': type(self).__name__,
            'total_wait_seconds': round(self.total_wait, 3)
        }


class NoPacing(PacingPolicy):
    """Never sleeps, for tests and dry runs"""

    async def backoff(self, seconds: float) -> None:
        pass


class FixedDelayPacing(PacingPolicy):
    """Sleep the same delay after every page"""

    def __init__(self, delay: float = 3.0, **kwargs):
        super().__init__(**kwargs)
        self.delay = delay

    async def wait(self):
        if self.delay > 0:
            logger.debug(f"Pacing: waiting {self.delay:.1f}s")
            await self._pause(self.delay)


class MinIntervalPacing(PacingPolicy):
    """Keep at least ``interval`` seconds between the starts of two requests

    Time already spent on extraction counts towards the interval. The
    interval is measured from construction until the first request is marked.
    """

    def __init__(self, interval: float = 3.0, **kwargs):
        super().__init__(**kwargs)
        self.interval = interval
        self.last_request = self._clock()

    def mark_request(self):
        self.last_request = self._clock()

    async def wait(self):
        time_since_last = self._clock() - self.last_request
        if time_since_last < self.interval:
            wait_time = self.interval - time_since_last
            logger.debug(f"Pacing: waiting {wait_time:.1f}s")
            await self._pause(wait_time)
        self.last_request = self._clock()


class TokenBucketPacing(PacingPolicy):
    """Allow short bursts of up to ``capacity`` pages, refilled at ``rate`` per second"""

    def __init__(self, rate: float = 0.5, capacity: int = 3, **kwargs):
        super().__init__(**kwargs)
        if rate <= 0:
            raise ValueError("rate must be positive")
        self.rate = rate
        self.capacity = capacity
        self.tokens = float(capacity)
        self.last_refill = self._clock()

    def _refill(self):
        now = self._clock()
        self.tokens = min(self.capacity, self.tokens + (now - self.last_refill) * self.rate)
        self.last_refill = now

    async def wait(self):
        self._refill()
        if self.tokens < 1:
            wait_time = (1 - self.tokens) / self.rate
            logger.debug(f"Pacing: bucket empty, waiting {wait_time:.1f}s")
            await self._pause(wait_time)
            self._refill()
        self.tokens = max(0.0, self.tokens - 1)


def create_pacing(name: str, delay: float = 3.0) -> PacingPolicy:
    """Build a pacing policy from its CLI name"""
    policies = {
        "fixed": lambda: FixedDelayPacing(delay=delay),
        "min_interval": lambda: MinIntervalPacing(interval=delay),
        "token_bucket": lambda: TokenBucketPacing(rate=1.0 / delay if delay > 0 else 1.0),
        "none": NoPacing
    }
    if name not in policies:
        raise ValueError(f"Unknown pacing policy: {name}")
    return policies[name]()
