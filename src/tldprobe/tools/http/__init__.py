"""HTTP helpers for tldprobe."""

from .client import FetchResult, HTTPClient, HTTPResponse
from .redirects import RedirectOutcome, RedirectPolicy

__all__ = [
    "FetchResult",
    "HTTPClient",
    "HTTPResponse",
    "RedirectOutcome",
    "RedirectPolicy",
]
