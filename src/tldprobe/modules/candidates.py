"""Candidate hostname generation from a base name and a TLD list."""

from collections.abc import Iterable, Iterator
from pathlib import Path


class TLDFileError(RuntimeError):
    """The TLD list could not be read."""


def read_tld_file(path: str | Path) -> list[str]:
    """Read one TLD per line, trimming whitespace and skipping blank lines.

    Order and duplicates are preserved. Raises :class:`TLDFileError` when the
    file cannot be opened or decoded.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return [line.strip() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as exc:
        raise TLDFileError(f"Error reading TLD file {path}: {exc}") from exc


def generate_candidates(base_domain: str, tlds: Iterable[str]) -> Iterator[str]:
    """Yield ``base_domain + "." + tld`` for each TLD, in order."""
    for tld in tlds:
        yield f"{base_domain}.{tld}"
