"""Bounded-concurrency gate for in-flight probes."""

import asyncio


class ConcurrencyGate:
    """Counting semaphore that caps simultaneous probes.

    This limits how many probes run at once, not how many start per second.
    ``peak_in_flight`` records the highest concurrency observed.
    """

    def __init__(self, limit: int):
        if limit < 1:
            raise ValueError(f"Gate limit must be at least 1, got {limit}")
        self.limit = limit
        self.in_flight = 0
        self.peak_in_flight = 0
        self._semaphore = asyncio.Semaphore(limit)

    async def __aenter__(self):
        await self._semaphore.acquire()
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.in_flight -= 1
        self._semaphore.release()
