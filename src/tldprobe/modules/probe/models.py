"""Data models for domain probing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tldprobe.tools.http import RedirectOutcome, RedirectPolicy

ACTIVE_STATUSES = frozenset({200, 301, 302})

DEFAULT_THREADS = 50
DEFAULT_RATE_LIMIT = 150
DEFAULT_MAX_REDIRECTS = 10
DEFAULT_TIMEOUT = 5.0

NOT_AVAILABLE = "N/A"


class FaviconHashMode(str, Enum):
    """What the favicon hash is computed over."""

    PATH = "path"
    CONTENT = "content"


@dataclass(frozen=True)
class DisplayOptions:
    """Which optional fields are collected and shown."""

    ip: bool = False
    status_code: bool = False
    title: bool = False
    location: bool = False
    favicon: bool = False


@dataclass(frozen=True)
class ProbeConfig:
    """Settings for one probing run, built once at startup."""

    domain: str
    tld_file: str
    output_file: str | None = None
    ip_output_file: str | None = None
    threads: int = DEFAULT_THREADS
    rate_limit: int = DEFAULT_RATE_LIMIT
    follow_redirects: bool = False
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    follow_host_redirects: bool = False
    timeout: float = DEFAULT_TIMEOUT
    verbose: bool = False
    favicon_mode: FaviconHashMode = FaviconHashMode.PATH
    display: DisplayOptions = field(default_factory=DisplayOptions)

    @property
    def resolve_ip(self) -> bool:
        """IP lookup is needed for the console column or the IP file."""
        return self.display.ip or bool(self.ip_output_file)

    def redirect_policy(self) -> RedirectPolicy:
        return RedirectPolicy(
            follow=self.follow_redirects,
            max_redirects=self.max_redirects,
            same_host_only=not self.follow_host_redirects,
        )


@dataclass
class ProbeResult:
    """Outcome of probing one candidate domain."""

    domain: str
    active: bool = False
    ip: str | None = None
    status_code: int | None = None
    title: str | None = None
    location: str | None = None
    favicon_hash: str | None = None
    redirect_outcome: RedirectOutcome | None = None
    redirects: int = 0
    error: str | None = None

    @property
    def responded(self) -> bool:
        return self.status_code is not None
