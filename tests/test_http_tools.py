"""Tests for HTTP tools module."""

import httpx
import pytest
import respx
from httpx import Response

from tldprobe.tools.http import HTTPClient, RedirectOutcome, RedirectPolicy


class TestHTTPClient:
    """Test HTTPClient functionality."""

    @respx.mock
    async def test_get_request(self):
        """Test basic GET request."""
        respx.get("http://example.com").mock(return_value=Response(200, text="Hello World"))

        async with HTTPClient() as client:
            response = await client.get("http://example.com")

        assert response.status_code == 200
        assert response.body == "Hello World"
        assert response.content == b"Hello World"

    @respx.mock
    async def test_get_does_not_follow_by_default(self):
        """A redirect is returned as-is unless the caller opts in."""
        respx.get("http://example.com").mock(
            return_value=Response(301, headers={"Location": "http://example.com/home"})
        )

        async with HTTPClient() as client:
            response = await client.get("http://example.com")

        assert response.status_code == 301
        assert response.location == "http://example.com/home"
        assert response.is_redirect

    @respx.mock
    async def test_get_can_follow_redirects(self):
        """follow_redirects=True lets httpx walk the chain."""
        respx.get("http://example.com").mock(
            return_value=Response(302, headers={"Location": "/home"})
        )
        respx.get("http://example.com/home").mock(return_value=Response(200, text="home"))

        async with HTTPClient() as client:
            response = await client.get("http://example.com", follow_redirects=True)

        assert response.status_code == 200
        assert response.body == "home"

    async def test_request_requires_context_manager(self):
        """Using the client outside ``async with`` is an error."""
        client = HTTPClient()
        with pytest.raises(RuntimeError):
            await client.get("http://example.com")

    @respx.mock
    async def test_redirect_without_location_is_not_redirect(self):
        respx.get("http://example.com").mock(return_value=Response(302))

        async with HTTPClient() as client:
            response = await client.get("http://example.com")

        assert response.location == ""
        assert not response.is_redirect


class TestFetchWithPolicy:
    """Test redirect handling driven by RedirectPolicy."""

    @respx.mock
    async def test_follow_disabled_returns_first_redirect(self):
        """With following off a 3xx is terminal and its Location is kept verbatim."""
        route = respx.get("http://example.com").mock(
            return_value=Response(302, headers={"Location": "/login?next=%2F"})
        )

        async with HTTPClient() as client:
            fetched = await client.fetch("http://example.com", RedirectPolicy(follow=False))

        assert route.call_count == 1
        assert fetched.response.status_code == 302
        assert fetched.response.location == "/login?next=%2F"
        assert fetched.outcome is RedirectOutcome.TERMINAL_RESPONSE
        assert fetched.redirects == 0

    @respx.mock
    async def test_plain_response_is_terminal(self):
        respx.get("http://example.com").mock(return_value=Response(200))

        async with HTTPClient() as client:
            fetched = await client.fetch("http://example.com", RedirectPolicy(follow=True))

        assert fetched.outcome is RedirectOutcome.TERMINAL_RESPONSE
        assert fetched.trace == ["http://example.com"]

    @respx.mock
    async def test_same_host_chain_is_followed(self):
        respx.get("http://example.com").mock(
            return_value=Response(301, headers={"Location": "/a"})
        )
        respx.get("http://example.com/a").mock(
            return_value=Response(302, headers={"Location": "http://example.com/b"})
        )
        respx.get("http://example.com/b").mock(return_value=Response(200, text="done"))

        async with HTTPClient() as client:
            fetched = await client.fetch(
                "http://example.com", RedirectPolicy(follow=True, same_host_only=True)
            )

        assert fetched.response.status_code == 200
        assert fetched.outcome is RedirectOutcome.FOLLOWED
        assert fetched.trace == [
            "http://example.com",
            "http://example.com/a",
            "http://example.com/b",
        ]

    @respx.mock
    async def test_same_host_only_stops_at_host_boundary(self):
        """The response pointing off-host is returned, and the other host is never hit."""
        respx.get("http://example.com").mock(
            return_value=Response(301, headers={"Location": "http://www.example.com/"})
        )
        other = respx.get("http://www.example.com/").mock(return_value=Response(200))

        async with HTTPClient() as client:
            fetched = await client.fetch(
                "http://example.com", RedirectPolicy(follow=True, same_host_only=True)
            )

        assert not other.called
        assert fetched.response.status_code == 301
        assert fetched.response.location == "http://www.example.com/"
        assert fetched.outcome is RedirectOutcome.STOPPED_AT_HOST_BOUNDARY

    @respx.mock
    async def test_cross_host_allowed(self):
        respx.get("http://example.com").mock(
            return_value=Response(301, headers={"Location": "http://www.example.com/"})
        )
        respx.get("http://www.example.com/").mock(return_value=Response(404))

        async with HTTPClient() as client:
            fetched = await client.fetch(
                "http://example.com", RedirectPolicy(follow=True, same_host_only=False)
            )

        assert fetched.response.status_code == 404
        assert fetched.outcome is RedirectOutcome.FOLLOWED
        assert fetched.redirects == 1

    @respx.mock
    async def test_max_redirects_caps_hops(self):
        """A redirect loop stops after max_redirects hops with the last 3xx."""
        route = respx.get("http://example.com").mock(
            return_value=Response(302, headers={"Location": "http://example.com"})
        )

        async with HTTPClient() as client:
            fetched = await client.fetch(
                "http://example.com", RedirectPolicy(follow=True, max_redirects=3)
            )

        assert route.call_count == 4
        assert fetched.redirects == 3
        assert fetched.response.status_code == 302
        assert fetched.outcome is RedirectOutcome.STOPPED_AT_MAX_DEPTH

    @respx.mock
    async def test_transport_error_propagates(self):
        respx.get("http://example.com").mock(side_effect=httpx.ConnectError)

        async with HTTPClient() as client:
            with pytest.raises(httpx.ConnectError):
                await client.fetch("http://example.com", RedirectPolicy())

    @respx.mock
    async def test_unparseable_location_ends_chain(self):
        """A Location that cannot be parsed leaves the redirect as the terminal response."""
        route = respx.get("http://example.com").mock(
            return_value=Response(302, headers={"Location": "http://[bad/"})
        )

        async with HTTPClient() as client:
            fetched = await client.fetch("http://example.com", RedirectPolicy(follow=True))

        assert route.call_count == 1
        assert fetched.response.status_code == 302
        assert fetched.outcome is RedirectOutcome.TERMINAL_RESPONSE
        assert fetched.trace == ["http://example.com"]
