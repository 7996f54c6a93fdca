"""Configuration CLI command."""

import typer
import yaml

from tldprobe.modules.probe.models import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_RATE_LIMIT,
    DEFAULT_THREADS,
    DEFAULT_TIMEOUT,
)

from .deps import cli_module
from .shared import app, console


@app.command()
def config(
    global_config: bool = typer.Option(
        False,
        "--global",
        help="Show the raw global config file instead of effective settings",
    ),
) -> None:
    """Show effective probe defaults and where they come from."""
    cli = cli_module()
    config_path = cli.global_config_path()

    if global_config:
        config_data = cli.load_global_config()
        console.print(f"[bold]Global Configuration ({config_path}):[/bold]")
        if not config_data:
            console.print("[dim]No global config found.[/dim]")
            return
        console.print(yaml.dump(config_data, default_flow_style=False))
        return

    settings = {
        "threads": cli.get_positive_int("threads", DEFAULT_THREADS),
        "rate_limit": cli.get_positive_int("rate_limit", DEFAULT_RATE_LIMIT),
        "max_redirects": cli.get_nonnegative_int("max_redirects", DEFAULT_MAX_REDIRECTS),
        "timeout": cli.get_positive_float("timeout", DEFAULT_TIMEOUT),
        "verbose": cli.get_flag("verbose"),
    }
    console.print(
        "[bold]Effective defaults[/bold] [dim](env TLDPROBE_* > config file > built-in)[/dim]"
    )
    for key, value in settings.items():
        console.print(f"  {key}: [cyan]{value}[/cyan]")
    console.print(f"[dim]Config file: {config_path}[/dim]")
