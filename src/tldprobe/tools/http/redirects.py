"""Redirect-following policy for probe requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urljoin, urlsplit


class RedirectOutcome(str, Enum):
    """Why a redirect chain ended."""

    TERMINAL_RESPONSE = "terminal"
    FOLLOWED = "followed"
    STOPPED_AT_HOST_BOUNDARY = "host-boundary"
    STOPPED_AT_MAX_DEPTH = "max-depth"


@dataclass(frozen=True)
class RedirectPolicy:
    """Decides whether the next hop of a redirect chain is followed.

    ``same_host_only`` compares the raw URL authority of the hop target with
    every URL already visited. The comparison is plain string equality, so
    ``Example.com`` and ``example.com`` count as different hosts.
    """

    follow: bool = False
    max_redirects: int = 10
    same_host_only: bool = True

    def next_hop(self, trace: list[str], location: str) -> tuple[str | None, RedirectOutcome]:
        """Return the URL to visit next, or ``None`` with the reason to stop.

        ``trace`` holds the URLs visited so far, oldest first; its last entry
        is the URL that produced the redirect response.
        """
        if not self.follow:
            return None, RedirectOutcome.TERMINAL_RESPONSE

        hops = len(trace) - 1
        if hops >= self.max_redirects:
            return None, RedirectOutcome.STOPPED_AT_MAX_DEPTH

        try:
            target = urljoin(trace[-1], location)
            target_host = authority(target)
        except ValueError:
            # An unparseable Location ends the chain like a missing one.
            return None, RedirectOutcome.TERMINAL_RESPONSE

        if self.same_host_only and any(authority(url) != target_host for url in trace):
            return None, RedirectOutcome.STOPPED_AT_HOST_BOUNDARY

        return target, RedirectOutcome.FOLLOWED


def authority(url: str) -> str:
    """Return host and port of *url* exactly as written, without any userinfo."""
    return urlsplit(url).netloc.rpartition("@")[2]
