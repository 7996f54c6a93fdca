"""Helpers for turning CLI options into a probe configuration."""

from tldprobe.config import get_flag, get_nonnegative_int, get_positive_float, get_positive_int
from tldprobe.modules.probe import DisplayOptions, FaviconHashMode, ProbeConfig
from tldprobe.modules.probe.models import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_RATE_LIMIT,
    DEFAULT_THREADS,
    DEFAULT_TIMEOUT,
)


def normalize_verbose(verbose: bool) -> bool:
    """Resolve effective verbose flag from CLI arg and env var."""
    effective = verbose if isinstance(verbose, bool) else False
    if effective:
        return True
    return get_flag("verbose")


def coerce_positive_int(value: int | None, key: str, default: int) -> int:
    """Use an explicit positive CLI value, else the configured one."""
    if isinstance(value, int) and value > 0:
        return value
    return get_positive_int(key, default)


def coerce_nonnegative_int(value: int | None, key: str, default: int) -> int:
    """Use an explicit non-negative CLI value, else the configured one."""
    if isinstance(value, int) and value >= 0:
        return value
    return get_nonnegative_int(key, default)


def coerce_positive_float(value: float | None, key: str, default: float) -> float:
    """Use an explicit positive CLI value, else the configured one."""
    if isinstance(value, (int, float)) and value > 0:
        return float(value)
    return get_positive_float(key, default)


def normalize_favicon_mode(mode: str | None) -> FaviconHashMode:
    """Validate the ``--favicon-mode`` value."""
    name = mode.strip().lower() if isinstance(mode, str) else FaviconHashMode.PATH.value
    try:
        return FaviconHashMode(name)
    except ValueError:
        supported = ", ".join(m.value for m in FaviconHashMode)
        raise ValueError(f"Unknown favicon mode: {mode}. Supported values: {supported}.") from None


def build_probe_config(
    *,
    domain: str,
    tld_file: str,
    output: str | None = None,
    ip_output: str | None = None,
    show_ip: bool = False,
    verbose: bool = False,
    status_code: bool = False,
    title: bool = False,
    threads: int | None = None,
    rate_limit: int | None = None,
    follow_redirects: bool = False,
    max_redirects: int | None = None,
    follow_host_redirects: bool = False,
    location: bool = False,
    favicon: bool = False,
    favicon_mode: str | None = None,
    timeout: float | None = None,
) -> ProbeConfig:
    """Build the immutable run configuration from CLI values and configured defaults."""
    return ProbeConfig(
        domain=domain.strip(),
        tld_file=tld_file,
        output_file=output or None,
        ip_output_file=ip_output or None,
        threads=coerce_positive_int(threads, "threads", DEFAULT_THREADS),
        rate_limit=coerce_positive_int(rate_limit, "rate_limit", DEFAULT_RATE_LIMIT),
        follow_redirects=follow_redirects,
        max_redirects=coerce_nonnegative_int(
            max_redirects, "max_redirects", DEFAULT_MAX_REDIRECTS
        ),
        follow_host_redirects=follow_host_redirects,
        timeout=coerce_positive_float(timeout, "timeout", DEFAULT_TIMEOUT),
        verbose=normalize_verbose(verbose),
        favicon_mode=normalize_favicon_mode(favicon_mode),
        display=DisplayOptions(
            ip=show_ip,
            status_code=status_code,
            title=title,
            location=location,
            favicon=favicon,
        ),
    )
