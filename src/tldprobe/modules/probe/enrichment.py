"""Optional per-domain enrichment: IP, page title and favicon hash."""

from __future__ import annotations

import asyncio
import logging
import socket

import httpx
import mmh3
from bs4 import BeautifulSoup, ParserRejectedMarkup

from tldprobe.tools.http import HTTPClient

from .models import NOT_AVAILABLE, FaviconHashMode

logger = logging.getLogger(__name__)

FAVICON_PATH = "/favicon.ico"

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


async def resolve_ip(domain: str) -> str:
    """Resolve *domain* with the platform resolver and return the first address."""
    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(domain, None, type=socket.SOCK_STREAM)
    except (OSError, UnicodeError) as exc:
        logger.debug("IP lookup failed for %s: %s", domain, exc)
        return NOT_AVAILABLE
    if not infos:
        return NOT_AVAILABLE
    return infos[0][4][0]


def extract_title(html: str) -> str:
    """Return the stripped text of the first ``<title>`` element, or ``""``."""
    try:
        soup = BeautifulSoup(html, "html.parser")
    except (ParserRejectedMarkup, AssertionError) as exc:
        logger.debug("Unparseable page markup: %s", exc)
        return ""
    tag = soup.find("title")
    if tag is None:
        return ""
    return tag.get_text().strip()


async def fetch_title(client: HTTPClient, domain: str) -> str:
    """Fetch the landing page again and pull its title."""
    try:
        response = await client.get(f"http://{domain}", follow_redirects=True)
        return extract_title(response.body)
    except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
        logger.debug("Title fetch failed for %s: %s", domain, exc)
        return ""


def fnv1a_64(data: bytes) -> int:
    """64-bit FNV-1a hash."""
    value = _FNV64_OFFSET
    for byte in data:
        value ^= byte
        value = (value * _FNV64_PRIME) & _MASK64
    return value


def favicon_hash(content: bytes, mode: FaviconHashMode) -> str:
    """Hash a favicon as lowercase hex.

    ``PATH`` hashes the request path instead of *content*, so every domain
    that serves any response for it gets the same value.
    """
    if mode is FaviconHashMode.PATH:
        return format(fnv1a_64(FAVICON_PATH.encode()), "x")
    value = mmh3.hash64(content)[0]
    return format(value & _MASK64, "x")


async def fetch_favicon_hash(client: HTTPClient, domain: str, mode: FaviconHashMode) -> str:
    """Fetch ``/favicon.ico`` and hash it according to *mode*."""
    try:
        response = await client.get(f"http://{domain}{FAVICON_PATH}")
    except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
        logger.debug("Favicon fetch failed for %s: %s", domain, exc)
        return NOT_AVAILABLE

    if mode is FaviconHashMode.CONTENT and (response.status_code != 200 or not response.content):
        return NOT_AVAILABLE
    return favicon_hash(response.content, mode)
