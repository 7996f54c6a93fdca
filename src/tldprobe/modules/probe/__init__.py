"""Domain probing: liveness check, redirect policy and enrichment."""

from .enrichment import extract_title, favicon_hash, fnv1a_64, resolve_ip
from .models import (
    ACTIVE_STATUSES,
    DisplayOptions,
    FaviconHashMode,
    ProbeConfig,
    ProbeResult,
)
from .prober import DomainProber

__all__ = [
    "ACTIVE_STATUSES",
    "DisplayOptions",
    "DomainProber",
    "FaviconHashMode",
    "ProbeConfig",
    "ProbeResult",
    "extract_title",
    "favicon_hash",
    "fnv1a_64",
    "resolve_ip",
]
