"""
Simulated network latency.

The data layer stands in for a REST API, so every call waits a random
bounded delay before answering. This exercises loading states in callers
and keeps the contract asynchronous. Disable with SIMULATE_LATENCY=false.
"""

import asyncio
import logging
import random
from typing import Optional

from acservice.config import settings

logger = logging.getLogger(__name__)


class LatencySimulator:
    """Sleeps for a uniformly random number of milliseconds per call."""

    def __init__(
        self,
        enabled: Optional[bool] = None,
        scale: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.enabled = settings.latency.enabled if enabled is None else enabled
        self.scale = settings.latency.scale if scale is None else scale
        if self.scale < 0:
            raise ValueError(f"Latency scale must be >= 0, got {self.scale}")
        self._rng = rng or random.Random()

    def draw(self, min_ms: int, max_ms: int) -> float:
        """Pick a delay in seconds without sleeping."""
        if min_ms > max_ms:
            raise ValueError(f"min_ms ({min_ms}) must not exceed max_ms ({max_ms})")
        return self._rng.randint(min_ms, max_ms) * self.scale / 1000

    async def wait(self, min_ms: int = 300, max_ms: int = 1500) -> float:
        """Await the simulated round trip. Returns the delay actually slept."""
        if not self.enabled:
            return 0.0
        delay = self.draw(min_ms, max_ms)
        await asyncio.sleep(delay)
        return delay


def disabled() -> LatencySimulator:
    """A simulator that never sleeps, for tests and scripted demos."""
    return LatencySimulator(enabled=False)
