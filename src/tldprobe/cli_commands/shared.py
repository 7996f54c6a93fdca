"""Shared CLI app objects and logging setup."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="tldprobe",
    help="Probe a base domain across a list of TLDs",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def configure_logging(debug: bool = False) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
