"""Fixed-window rate limiter for outbound Freelo API requests."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

logger = logging.getLogger("freelo_mcp")

# Freelo allows 25 requests per minute per account.
DEFAULT_MAX_CALLS = 25
DEFAULT_PERIOD = 60.0


class RateLimiter:
    """Fixed-window rate limiter.

    At most ``max_calls`` acquisitions are granted per window of ``period``
    seconds. An acquisition beyond the quota waits for the rest of the
    window instead of failing, then opens a fresh window.
    """

    def __init__(
        self,
        max_calls: int = DEFAULT_MAX_CALLS,
        period: float = DEFAULT_PERIOD,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.max_calls = max_calls
        self.period = period
        self._clock = clock
        self._sleep = sleep
        self._window_start: float | None = None
        self._count = 0
        self._lock = asyncio.Lock()

    @property
    def count(self) -> int:
        return self._count

    @property
    def window_start(self) -> float | None:
        return self._window_start

    async def acquire(self) -> None:
        async with self._lock:
            now = self._clock()
            if self._window_start is None or now - self._window_start >= self.period:
                self._count = 0
                self._window_start = now

            if self._count >= self.max_calls:
                wait = self.period - (now - self._window_start)
                if wait > 0:
                    logger.info(
                        "Rate limit of %d calls per %ss reached, waiting %.2fs",
                        self.max_calls,
                        self.period,
                        wait,
                    )
                    await self._sleep(wait)
                self._count = 0
                self._window_start = self._clock()

            self._count += 1
