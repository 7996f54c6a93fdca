"""Liveness probe for a single candidate domain."""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from tldprobe.tools.http import HTTPClient

from .enrichment import fetch_favicon_hash, fetch_title, resolve_ip
from .models import ACTIVE_STATUSES, ProbeConfig, ProbeResult

logger = logging.getLogger(__name__)


class DomainProber:
    """Runs the HTTP liveness check and enrichment steps for one domain at a time.

    Each :meth:`probe` call opens its own client, so a prober can be shared by
    any number of concurrent workers.
    """

    def __init__(
        self,
        config: ProbeConfig,
        client_factory: Callable[[], HTTPClient] | None = None,
        resolver: Callable | None = None,
    ):
        self.config = config
        self.policy = config.redirect_policy()
        self._client_factory = client_factory or (lambda: HTTPClient(timeout=config.timeout))
        self._resolve = resolver or resolve_ip

    async def probe(self, domain: str) -> ProbeResult:
        """Probe ``http://<domain>`` and collect the enabled fields."""
        display = self.config.display

        async with self._client_factory() as client:
            try:
                fetched = await client.fetch(f"http://{domain}", self.policy)
            except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
                logger.debug("Probe failed for %s: %s", domain, exc)
                return ProbeResult(domain=domain, error=str(exc) or type(exc).__name__)

            response = fetched.response
            result = ProbeResult(
                domain=domain,
                active=response.status_code in ACTIVE_STATUSES,
                status_code=response.status_code,
                redirect_outcome=fetched.outcome,
                redirects=fetched.redirects,
            )
            if not result.active:
                return result

            if self.config.resolve_ip:
                result.ip = await self._resolve(domain)
            if display.title:
                result.title = await fetch_title(client, domain)
            if display.location:
                result.location = response.location
            if display.favicon:
                result.favicon_hash = await fetch_favicon_hash(
                    client, domain, self.config.favicon_mode
                )

        return result
