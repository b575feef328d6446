"""
BrightCloud CLI - Command Line Interface

Entry point for looking up URLs, checking the web service heartbeat,
and listing BrightCloud categories.
"""

import asyncio
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from brightcloud import __version__
from brightcloud.core.constants import ReputationTier
from brightcloud.core.exceptions import BrightCloudError
from brightcloud.core.models import UrlLookupResult
from brightcloud.service import BrightCloudService

# Create CLI app
app = typer.Typer(
    name="brightcloud",
    help="BrightCloud - URL categorization and reputation lookups",
    add_completion=False,
    no_args_is_help=True,
)

# Rich console for output
console = Console()

TIER_COLORS = {
    ReputationTier.TRUSTWORTHY: "green",
    ReputationTier.LOW_RISK: "cyan",
    ReputationTier.MODERATE_RISK: "yellow",
    ReputationTier.SUSPICIOUS: "magenta",
    ReputationTier.HIGH_RISK: "red",
}

ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="Client configuration file",
    exists=True,
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose output")
JsonOption = typer.Option(False, "--json", help="Print raw JSON instead of tables")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _run(config: Optional[Path], operation):
    async def runner():
        async with BrightCloudService.from_config(config) as service:
            return await operation(service)

    return asyncio.run(runner())


def _print_json(data) -> None:
    console.print_json(json.dumps(data))


def _print_lookup(result: UrlLookupResult) -> None:
    tier = result.reputation_tier
    tier_text = "unknown"
    if tier is not None:
        color = TIER_COLORS[tier]
        tier_text = f"[{color}]{tier.value.replace('_', ' ')}[/{color}]"

    console.print(Panel.fit(
        f"URI: [yellow]{result.uri}[/yellow]\n"
        f"Status: {result.status} {result.status_message}\n"
        f"Reputation: [bold]{result.reputation_index}[/bold] ({tier_text})\n"
        f"All subdomains same category: {'yes' if result.all_same_category else 'no'}",
        title="URL Lookup",
    ))

    if not result.categories:
        console.print("[yellow]No categories returned.[/yellow]")
        return

    table = Table(title="Categories")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Group", style="blue")
    table.add_column("Confidence", style="green")
    for category in result.categories:
        table.add_row(
            str(category.id),
            category.name or "-",
            category.group or "-",
            str(category.confidence),
        )
    console.print(table)


# ============================================================================
# Commands
# ============================================================================

@app.command()
def lookup(
    url: str = typer.Argument(..., help="URL or domain to look up (e.g., example.com)"),
    names: bool = typer.Option(
        False,
        "--names",
        "-n",
        help="Resolve category names and groups (extra request)",
    ),
    as_json: bool = JsonOption,
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """
    Look up the categories and reputation of a URL.
    """
    _setup_logging(verbose)
    try:
        if names:
            result = _run(config, lambda service: service.lookup_url_with_names(url))
        else:
            result = _run(config, lambda service: service.lookup_url(url))
    except BrightCloudError as e:
        console.print(f"[red]Error looking up URL:[/red] {e}")
        raise typer.Exit(code=1)

    if as_json:
        data = asdict(result)
        tier = result.reputation_tier
        data["reputation_tier"] = tier.value if tier else None
        _print_json(data)
    else:
        _print_lookup(result)


@app.command()
def heartbeat(
    as_json: bool = JsonOption,
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """
    Check web service status and CDN update flags.
    """
    _setup_logging(verbose)
    try:
        result = _run(config, lambda service: service.heartbeat())
    except BrightCloudError as e:
        console.print(f"[red]Error checking heartbeat:[/red] {e}")
        raise typer.Exit(code=1)

    if as_json:
        _print_json(asdict(result))
        return

    console.print(Panel.fit(
        f"Status: {result.status} {result.status_message}\n"
        f"Update CDN: {'[green]yes[/green]' if result.update_cdn else 'no'}\n"
        f"Update RTU: {'[green]yes[/green]' if result.update_rtu else 'no'}\n"
        f"Update time: {result.update_time or '-'}",
        title="Heartbeat",
    ))
    if result.cdn_uris:
        console.print("\n[bold]CDN URIs:[/bold]")
        for uri in result.cdn_uris:
            console.print(f"  - {uri}")


@app.command()
def categories(
    as_json: bool = JsonOption,
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """
    List all BrightCloud categories.
    """
    _setup_logging(verbose)
    try:
        result = _run(config, lambda service: service.list_categories())
    except BrightCloudError as e:
        console.print(f"[red]Error listing categories:[/red] {e}")
        raise typer.Exit(code=1)

    if as_json:
        _print_json([asdict(category) for category in result])
        return

    table = Table(title=f"BrightCloud Categories ({len(result)})")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Group", style="blue")
    for category in result:
        table.add_row(str(category.id), category.name, category.group)
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold cyan]BrightCloud client[/bold cyan] version [yellow]{__version__}[/yellow]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
