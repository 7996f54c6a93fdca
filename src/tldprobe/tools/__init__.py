"""Tools package for tldprobe."""

from tldprobe.tools.http import HTTPClient, RedirectOutcome, RedirectPolicy

__all__ = [
    "HTTPClient",
    "RedirectOutcome",
    "RedirectPolicy",
]
