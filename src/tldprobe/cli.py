"""tldprobe CLI - probe a base domain across many TLDs."""

from tldprobe.cli_commands.shared import app, console
from tldprobe.config import (
    get_flag,
    get_nonnegative_int,
    get_positive_float,
    get_positive_int,
    global_config_path,
    load_global_config,
)
from tldprobe.modules.candidates import read_tld_file
from tldprobe.modules.runner import probe_domains
from tldprobe.utils.async_utils import safe_async_run

# Command modules register themselves on ``app`` at import time.
from tldprobe.cli_commands import config_command as _config_command  # noqa: F401
from tldprobe.cli_commands import probe_command as _probe_command  # noqa: F401

__all__ = [
    "app",
    "console",
    "get_flag",
    "get_nonnegative_int",
    "get_positive_float",
    "get_positive_int",
    "global_config_path",
    "load_global_config",
    "main",
    "probe_domains",
    "read_tld_file",
    "safe_async_run",
    "version",
]


@app.command()
def version() -> None:
    """Show the installed tldprobe version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("tldprobe")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"tldprobe {current_version}")


def main():
    """Entry point for the CLI."""
    app()
