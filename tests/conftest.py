"""Test configuration and fixtures for tldprobe."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from tldprobe.modules.probe import DisplayOptions, ProbeConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Keep the user's real ~/.tldprobe and TLDPROBE_* variables out of tests."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    for key in ("THREADS", "RATE_LIMIT", "MAX_REDIRECTS", "TIMEOUT", "VERBOSE"):
        monkeypatch.delenv(f"TLDPROBE_{key}", raising=False)
    return home


@pytest.fixture
def tld_file(temp_dir: Path) -> Path:
    """Write a small TLD list."""
    path = temp_dir / "tlds.txt"
    path.write_text("com\nnet\norg\n")
    return path


@pytest.fixture
def make_config(tld_file: Path):
    """Return a factory for probe configurations with sensible test defaults."""

    def _make(**overrides) -> ProbeConfig:
        display = overrides.pop("display", DisplayOptions())
        values = {
            "domain": "example",
            "tld_file": str(tld_file),
            "threads": 4,
            "rate_limit": 4,
            "timeout": 1.0,
            "display": display,
        }
        values.update(overrides)
        return ProbeConfig(**values)

    return _make


@pytest.fixture
def all_display() -> DisplayOptions:
    """Every optional column enabled."""
    return DisplayOptions(ip=True, status_code=True, title=True, location=True, favicon=True)
