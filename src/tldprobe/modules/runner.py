"""Wires generator, gate, prober and pool into one probing run."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .candidates import generate_candidates
from .gate import ConcurrencyGate
from .pool import ResultCallback, run_probe_pool
from .probe import DomainProber, ProbeConfig, ProbeResult

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Results of a finished run."""

    results: list[ProbeResult] = field(default_factory=list)
    peak_in_flight: int = 0

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def active(self) -> int:
        return sum(1 for result in self.results if result.active)


async def probe_domains(
    config: ProbeConfig,
    tlds: Sequence[str],
    on_result: ResultCallback | None = None,
    prober: DomainProber | None = None,
) -> RunSummary:
    """Probe ``config.domain`` combined with every TLD in *tlds*."""
    prober = prober or DomainProber(config)
    gate = ConcurrencyGate(config.rate_limit)
    logger.debug(
        "Probing %d candidates with %d workers, at most %d in flight",
        len(tlds),
        config.threads,
        config.rate_limit,
    )

    results = await run_probe_pool(
        generate_candidates(config.domain, tlds),
        prober.probe,
        gate,
        workers=config.threads,
        on_result=on_result,
    )
    return RunSummary(results=results, peak_in_flight=gate.peak_in_flight)
