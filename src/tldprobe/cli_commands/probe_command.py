"""Probe CLI command."""

from contextlib import ExitStack
from typing import Optional

import typer

from tldprobe.modules.candidates import TLDFileError
from tldprobe.modules.report import ResultReporter

from .deps import cli_module
from .helpers import build_probe_config
from .shared import app, configure_logging, console


@app.command()
def probe(
    ctx: typer.Context,
    domain: Optional[str] = typer.Option(None, "--domain", "-d", help="Base domain name"),
    tld_file: Optional[str] = typer.Option(
        None, "--tld-file", "-F", help="File containing TLDs, one per line"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output file to store domain status"
    ),
    ip_output: Optional[str] = typer.Option(
        None, "--ip-output", "--ipo", help="Output file to save IP addresses"
    ),
    show_ip: bool = typer.Option(False, "--ip", help="Display IP address of active domains"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Verbose mode to display all domains"
    ),
    status_code: bool = typer.Option(
        False, "--status-code", "--sc", help="Display status code of domains"
    ),
    title: bool = typer.Option(False, "--title", "--tl", help="Display title of webpages"),
    threads: Optional[int] = typer.Option(
        None, "--threads", "-t", help="Number of worker tasks (default 50)"
    ),
    rate_limit: Optional[int] = typer.Option(
        None,
        "--rate-limit",
        "--rl",
        help="Maximum number of probes in flight at once (default 150)",
    ),
    follow_redirects: bool = typer.Option(
        False, "--follow-redirects", "--fr", help="Follow HTTP redirects"
    ),
    max_redirects: Optional[int] = typer.Option(
        None,
        "--max-redirects",
        "--maxr",
        help="Maximum number of redirects to follow per host (default 10)",
    ),
    follow_host_redirects: bool = typer.Option(
        False,
        "--follow-host-redirects",
        "--fhr",
        help="Also follow redirects to other hosts (same host only without this flag)",
    ),
    location: bool = typer.Option(
        False, "--location", help="Display response redirect location"
    ),
    favicon: bool = typer.Option(
        False, "--favicon", help="Display hash for the '/favicon.ico' file"
    ),
    favicon_mode: str = typer.Option(
        "path",
        "--favicon-mode",
        help="Favicon hash input: path (compatible, same for every host) or content",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout", help="Per-request timeout in seconds (default 5)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Probe a base domain combined with every TLD in a file."""
    cli = cli_module()
    configure_logging(debug)

    if not domain or not tld_file:
        typer.echo(ctx.get_help())
        return

    try:
        config = build_probe_config(
            domain=domain,
            tld_file=tld_file,
            output=output,
            ip_output=ip_output,
            show_ip=show_ip,
            verbose=verbose,
            status_code=status_code,
            title=title,
            threads=threads,
            rate_limit=rate_limit,
            follow_redirects=follow_redirects,
            max_redirects=max_redirects,
            follow_host_redirects=follow_host_redirects,
            location=location,
            favicon=favicon,
            favicon_mode=favicon_mode,
            timeout=timeout,
        )
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    try:
        tlds = cli.read_tld_file(config.tld_file)
    except TLDFileError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    with ExitStack() as stack:
        try:
            output_sink = (
                stack.enter_context(open(config.output_file, "w", encoding="utf-8"))
                if config.output_file
                else None
            )
            ip_sink = (
                stack.enter_context(open(config.ip_output_file, "w", encoding="utf-8"))
                if config.ip_output_file
                else None
            )
        except OSError as exc:
            console.print(f"[red]Error creating output file: {exc}[/red]")
            raise typer.Exit(1) from exc

        reporter = ResultReporter(
            console,
            config.display,
            verbose=config.verbose,
            output=output_sink,
            ip_output=ip_sink,
        )
        summary = cli.safe_async_run(cli.probe_domains(config, tlds, on_result=reporter.report))

    if config.output_file:
        console.print(f"Domains status written to {config.output_file}")
    if config.ip_output_file:
        console.print(f"IP addresses saved to {config.ip_output_file}")
    console.print(f"[dim]{summary.total} domains probed, {summary.active} active[/dim]")
