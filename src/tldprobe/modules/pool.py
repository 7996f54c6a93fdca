"""Fixed-size worker pool that drains candidates through the prober."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable

from .gate import ConcurrencyGate
from .probe import ProbeResult

logger = logging.getLogger(__name__)

ProbeFn = Callable[[str], Awaitable[ProbeResult]]
ResultCallback = Callable[[ProbeResult], None]


async def run_probe_pool(
    candidates: Iterable[str],
    probe: ProbeFn,
    gate: ConcurrencyGate,
    workers: int,
    on_result: ResultCallback | None = None,
) -> list[ProbeResult]:
    """Probe every candidate exactly once using *workers* concurrent workers.

    Workers pull from a shared queue and hold a *gate* slot for the whole
    probe. ``on_result`` runs after the slot is released. Results are
    returned in completion order.
    """
    if workers < 1:
        raise ValueError(f"Worker count must be at least 1, got {workers}")

    queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=workers)
    results: list[ProbeResult] = []

    async def produce() -> None:
        for domain in candidates:
            await queue.put(domain)
        # One stop marker per worker closes the queue.
        for _ in range(workers):
            await queue.put(None)

    async def work() -> None:
        while True:
            domain = await queue.get()
            try:
                if domain is None:
                    return
                async with gate:
                    result = await _probe_one(probe, domain)
                results.append(result)
                if on_result is not None:
                    on_result(result)
            finally:
                queue.task_done()

    tasks = [asyncio.create_task(produce())]
    tasks.extend(asyncio.create_task(work()) for _ in range(workers))
    try:
        await asyncio.gather(*tasks)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()

    return results


async def _probe_one(probe: ProbeFn, domain: str) -> ProbeResult:
    try:
        return await probe(domain)
    except Exception as exc:
        logger.exception("Unexpected error while probing %s", domain)
        return ProbeResult(domain=domain, error=str(exc) or type(exc).__name__)
