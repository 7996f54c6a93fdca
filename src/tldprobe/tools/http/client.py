"""HTTP client implementation for domain probing."""

import time
from dataclasses import dataclass, field

import httpx

from .redirects import RedirectOutcome, RedirectPolicy

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


@dataclass
class HTTPResponse:
    """Represents an HTTP response."""

    url: str
    status_code: int
    headers: dict[str, str]
    body: str
    content: bytes
    response_time: float
    content_type: str = ""
    server: str = ""

    @property
    def location(self) -> str:
        """Raw ``Location`` header value, empty when absent."""
        return self.headers.get("location", "")

    @property
    def is_redirect(self) -> bool:
        return self.status_code in REDIRECT_STATUSES and bool(self.location)


@dataclass
class FetchResult:
    """Terminal response of a policy-driven fetch and how the chain ended."""

    response: HTTPResponse
    outcome: RedirectOutcome
    trace: list[str] = field(default_factory=list)

    @property
    def redirects(self) -> int:
        return len(self.trace) - 1


class HTTPClient:
    """Async HTTP client used by the prober.

    The underlying ``httpx.AsyncClient`` never follows redirects on its own;
    :meth:`fetch` walks the chain under a :class:`RedirectPolicy` and
    :meth:`get` can opt in per request.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        verify_ssl: bool = False,
    ):
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=False,
            verify=self.verify_ssl,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        follow_redirects: bool = False,
    ) -> HTTPResponse:
        """Make an HTTP request."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        start = time.time()

        response = await self.client.request(
            method=method,
            url=url,
            headers=headers,
            follow_redirects=follow_redirects,
        )

        elapsed = time.time() - start

        return HTTPResponse(
            url=str(response.url),
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
            content=response.content,
            response_time=elapsed,
            content_type=response.headers.get("content-type", ""),
            server=response.headers.get("server", ""),
        )

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        follow_redirects: bool = False,
    ) -> HTTPResponse:
        """Make a GET request."""
        return await self.request("GET", url, headers=headers, follow_redirects=follow_redirects)

    async def fetch(self, url: str, policy: RedirectPolicy) -> FetchResult:
        """GET *url* and follow redirects as far as *policy* allows.

        Transport errors propagate as ``httpx.HTTPError``. A redirect the
        policy refuses, or whose target httpx cannot request, is returned as
        the terminal response.
        """
        trace = [url]
        response = await self.get(url)
        outcome = RedirectOutcome.TERMINAL_RESPONSE

        while response.is_redirect:
            next_url, stop_reason = policy.next_hop(trace, response.location)
            if next_url is None:
                outcome = stop_reason
                break
            try:
                next_response = await self.get(next_url)
            except httpx.InvalidURL:
                outcome = RedirectOutcome.TERMINAL_RESPONSE
                break
            trace.append(next_url)
            response = next_response
            outcome = RedirectOutcome.FOLLOWED

        return FetchResult(response=response, outcome=outcome, trace=trace)
