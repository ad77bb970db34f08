"""CLI interface for wifi-stats."""

import asyncio
import sys
from typing import Optional

import typer
from rich.console import Console

from . import __version__
from .collector import CollectionOptions, collect_report
from .config import get_settings
from .exceptions import UsageError
from .logging_config import create_event_sink, get_logger, setup_logging
from .render import render_json, render_pretty

logger = get_logger("wifi_stats.cli")

# Exit statuses
EXIT_OK = 0
EXIT_HAD_ERROR = 1
EXIT_USAGE = 2

app = typer.Typer(
    name="wifi-stats",
    help="Wi-Fi, gateway, DNS and throughput diagnostics.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command()
def run(
    json_output: bool = typer.Option(False, "--json", help="Output JSON only"),
    pretty: bool = typer.Option(False, "--pretty", help="Force pretty output"),
    samples: Optional[int] = typer.Option(
        None, "--samples", help="Ping samples (default: 12)"
    ),
    internet_host: Optional[str] = typer.Option(
        None, "--internet-host", help="Internet ping target (default: 1.1.1.1)"
    ),
    router_host: Optional[str] = typer.Option(
        None, "--router-host", help="Router ping target (default: system gateway)"
    ),
    dns_host: Optional[str] = typer.Option(
        None, "--dns-host", help="DNS lookup hostname (default: cloudflare.com)"
    ),
    dns_server: Optional[str] = typer.Option(
        None, "--dns-server", help="DNS server to query (default: system resolver)"
    ),
    speedtest: bool = typer.Option(False, "--speedtest", help="Run networkQuality speed test"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI color"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version",
    ),
):
    """Collect a one-shot network health report."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_to_file, settings.log_dir)
    sink = create_event_sink(settings.event_sink)

    try:
        options = CollectionOptions.from_settings(
            settings,
            samples=samples,
            internet_host=internet_host,
            router_host=router_host,
            dns_host=dns_host,
            dns_server=dns_server,
            speedtest=speedtest,
        )
        report, had_error = asyncio.run(collect_report(options, sink=sink, settings=settings))
    except UsageError as e:
        typer.echo(str(e), err=True)
        typer.echo("Run --help for usage.", err=True)
        raise typer.Exit(EXIT_USAGE)
    except Exception as e:
        logger.exception("Collection crashed")
        sink.emit("error", "wifi-stats.crash", {"error": str(e)})
        typer.echo(str(e), err=True)
        raise typer.Exit(EXIT_HAD_ERROR)

    if json_output or (not sys.stdout.isatty() and not pretty):
        typer.echo(render_json(report))
    else:
        render_pretty(report, Console(no_color=no_color, highlight=False))

    raise typer.Exit(EXIT_HAD_ERROR if had_error else EXIT_OK)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
